"""
Layoff Risk: CLI entry point.

Commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute.
  5. Report result to stdout.

Install and run::

    pip install -e .
    layoff-risk --help
    layoff-risk validate-config
    layoff-risk assess --age 30 --department engineering --job-role "Developer" \\
        --salary 80000 --overtime often --performance-rating 5 --years-at-company 2
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="layoff-risk",
    help="Employee layoff risk assessment with remediation recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from layoff_risk.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from layoff_risk.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("assess")
def assess(
    age: str = typer.Option(..., "--age", help="Age in years (18-70)."),
    department: str = typer.Option(
        ..., "--department", help="engineering, sales, marketing, hr, finance, operations or support.",
    ),
    job_role: str = typer.Option(..., "--job-role", help="Job title (not scored)."),
    salary: str = typer.Option(..., "--salary", help="Annual salary."),
    overtime: str = typer.Option(
        ..., "--overtime", help="never, rarely, sometimes, often or always.",
    ),
    performance_rating: str = typer.Option(
        ..., "--performance-rating", help="Latest rating, 1-5.",
    ),
    years_at_company: str = typer.Option(
        ..., "--years-at-company", help="Tenure in years (e.g. 3.5).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for the score perturbation (overrides config).",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the assessment as JSON instead of a report.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Assess one employee's layoff risk and print recommendations.

    Values are validated before scoring; a malformed value exits with code 1
    and names the offending field.
    """
    import random

    from pydantic import ValidationError

    from layoff_risk.assessment import assess_employee
    from layoff_risk.config import make_rng
    from layoff_risk.models.profile import EmployeeProfile
    from layoff_risk.reporting.formatters import format_assessment

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        profile = EmployeeProfile.from_form(
            {
                "age": age,
                "department": department,
                "jobRole": job_role,
                "salary": salary,
                "overtime": overtime,
                "performanceRating": performance_rating,
                "yearsAtCompany": years_at_company,
            }
        )
    except ValidationError as exc:
        typer.echo(f"[ERROR] {exc.error_count()} invalid field(s):", err=True)
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"])
            typer.echo(f"  {field}: {err['msg']}", err=True)
        raise typer.Exit(code=1)

    rng = random.Random(seed) if seed is not None else make_rng(config.scoring)
    assessment = assess_employee(profile, rng=rng)

    if as_json:
        typer.echo(json.dumps(assessment.to_dict(), indent=2))
    else:
        typer.echo(format_assessment(assessment))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    seed = config.scoring.seed if config.scoring.seed is not None else "(unseeded)"
    typer.echo(f"  Scoring seed:     {seed}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Log file:         {config.logging.log_file or '(none)'}")
    typer.echo(f"  JSON logs:        {config.logging.json_format}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
