"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      - committed static defaults
  2. ``config/local.toml``        - optional local overrides (gitignored)
  3. ``.env``                     - local env overrides (gitignored)
  4. Environment variables        - ``LAYOFF_RISK_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``
"""

from __future__ import annotations

import os
import random
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Scoring stage settings.

    ``seed`` fixes the perturbation sequence of a process; ``None`` means
    a fresh, unseeded generator.
    """

    model_config = ConfigDict(frozen=True)

    seed: Optional[int] = None


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


def make_rng(config: ScoringConfig) -> random.Random:
    """Return the randomness source described by ``config``."""
    return random.Random(config.seed)


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Optional[Path]:
    """Return the source checkout root, or ``None`` for an installed package.

    Only the directory directly above the package counts, and only when it
    holds both ``pyproject.toml`` and ``config/default.toml``.
    """
    if (_PROJECT_ROOT / "pyproject.toml").exists() and (
        _PROJECT_ROOT / "config" / "default.toml"
    ).exists():
        return _PROJECT_ROOT
    return None


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.  Outside a source
            checkout (e.g. a wheel install) there is no default file and
            no ``.env`` lookup; built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    if root is not None:
        load_dotenv(dotenv_path=root / ".env", override=False)

    raw: dict[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_path is None:
        if root is not None:
            config_dir = root / "config"
            raw = _read_toml(config_dir / "default.toml")
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        raw = _read_toml(config_path)
        config_dir = config_path.parent

    if config_dir is not None:
        local_config_path = config_dir / "local.toml"
        if local_config_path.exists():
            raw = _deep_merge(raw, _read_toml(local_config_path))

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply LAYOFF_RISK_* env vars to the raw config dict.

    Supported overrides:
      LAYOFF_RISK_LOG_LEVEL  → raw["logging"]["level"]
      LAYOFF_RISK_SEED       → raw["scoring"]["seed"]
      LAYOFF_RISK_DEBUG      → raw["debug"]
    """
    if log_level := os.environ.get("LAYOFF_RISK_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if seed := os.environ.get("LAYOFF_RISK_SEED"):
        raw.setdefault("scoring", {})["seed"] = seed

    if debug := os.environ.get("LAYOFF_RISK_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
