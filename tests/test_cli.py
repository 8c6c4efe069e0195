"""Tests for the layoff-risk CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from layoff_risk.cli import app

runner = CliRunner()

_HIGH_RISK_ARGS = [
    "assess",
    "--age", "60",
    "--department", "support",
    "--job-role", "Support Agent",
    "--salary", "200000",
    "--overtime", "always",
    "--performance-rating", "1",
    "--years-at-company", "0.5",
]


@pytest.fixture
def quiet_config(tmp_path: Path, clean_env) -> str:
    path = tmp_path / "quiet.toml"
    path.write_text('[logging]\nlevel = "WARNING"\n', encoding="utf-8")
    return str(path)


def test_assess_json(quiet_config):
    result = runner.invoke(app, [*_HIGH_RISK_ARGS, "--seed", "3", "--json", "--config", quiet_config])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["confidence"] == 100
    assert payload["riskLevel"] == "High"
    assert payload["willBeLayedOff"] is True
    assert len(payload["factors"]) == 6
    assert payload["recommendations"][-1]["priority"] == "Critical"


def test_assess_text_report(quiet_config):
    result = runner.invoke(app, [*_HIGH_RISK_ARGS, "--config", quiet_config])
    assert result.exit_code == 0, result.output
    assert "At Risk" in result.output
    assert "Immediate Intervention Required" in result.output


def test_assess_rejects_malformed_number(quiet_config):
    args = list(_HIGH_RISK_ARGS)
    args[args.index("--salary") + 1] = "lots"
    result = runner.invoke(app, [*args, "--config", quiet_config])
    assert result.exit_code == 1
    assert "annual_salary" in result.output


def test_assess_missing_config_file(tmp_path):
    result = runner.invoke(app, [*_HIGH_RISK_ARGS, "--config", str(tmp_path / "x.toml")])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_validate_config(quiet_config):
    result = runner.invoke(app, ["validate-config", "--config", quiet_config, "--full"])
    assert result.exit_code == 0, result.output
    assert "Log level:        WARNING" in result.output
    assert "(unseeded)" in result.output
    assert "[OK] Config valid." in result.output
