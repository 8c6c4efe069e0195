"""
Shared pytest fixtures for the Layoff Risk test suite.

Provides:
  - ``no_noise``: a ``FixedRandom(0.5)`` source (zero perturbation).
  - Sample ``EmployeeProfile`` factories covering each risk band.
  - ``clean_env``: removes ``LAYOFF_RISK_*`` variables for config tests.
"""

from __future__ import annotations

import pytest

from layoff_risk.models.profile import EmployeeProfile
from layoff_risk.scoring.scorer import FixedRandom


@pytest.fixture
def no_noise() -> FixedRandom:
    """Randomness source yielding a zero perturbation."""
    return FixedRandom(0.5)


@pytest.fixture
def low_risk_profile() -> EmployeeProfile:
    """Impacts [-5, -2, -8, -20, -5, -8]; raw sum -48."""
    return EmployeeProfile(
        age=30,
        department="engineering",
        job_role="Senior Developer",
        annual_salary=80_000,
        overtime_frequency="often",
        performance_rating=5,
        years_at_company=2,
    )


@pytest.fixture
def medium_risk_profile() -> EmployeeProfile:
    """Impacts [-5, +10, +2, +5, -10, -3]; raw sum -1."""
    return EmployeeProfile(
        age=30,
        department="sales",
        job_role="Account Executive",
        annual_salary=50_000,
        overtime_frequency="sometimes",
        performance_rating=3,
        years_at_company=5,
    )


@pytest.fixture
def high_risk_profile() -> EmployeeProfile:
    """Impacts [+15, +15, +12, +25, +18, +10]; raw sum +95."""
    return EmployeeProfile(
        age=60,
        department="support",
        job_role="Support Agent",
        annual_salary=200_000,
        overtime_frequency="always",
        performance_rating=1,
        years_at_company=0.5,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also undoes values loaded from a .env file
    for name in ("LAYOFF_RISK_LOG_LEVEL", "LAYOFF_RISK_SEED", "LAYOFF_RISK_DEBUG"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
