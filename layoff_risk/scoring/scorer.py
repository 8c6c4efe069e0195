"""
Risk scoring: sums six per-attribute impacts, adds a small random
perturbation, and normalises the result into a confidence value.

Score formula
-------------
    raw        = age + department + salary + performance + tenure + overtime
                 + perturbation
    confidence = round_half_up(clamp(raw + 50, 0, 100))

Per-attribute impacts (percentage points)
-----------------------------------------
age:
    > 55 -> +15,  < 25 -> +8,  otherwise -5.
department:
    ``DEPARTMENT_RISK`` lookup; unrecognised values -> +5.
annual_salary:
    > 150k -> +12,  < 40k -> +8,  60k–100k inclusive -> -8,  otherwise +2.
performance_rating:
    >= 4 -> -20,  == 3 -> +5,  <= 2 -> +25.
years_at_company:
    < 1 -> +18,  1–3 inclusive -> -5,  > 10 -> +8,  otherwise -10.
overtime_frequency:
    ``OVERTIME_RISK`` lookup; unrecognised values -> 0.

Perturbation
------------
Exactly one ``rng.random()`` draw ``u`` per call, mapped to ``(u - 0.5) * 10``
so the perturbation lies in [-5, +5).  Pass ``FixedRandom(0.5)`` for a zero
perturbation, or a seeded ``random.Random`` for reproducible noise.

Classification
--------------
Both ``risk_level`` and ``will_be_layed_off`` are derived from the ROUNDED
confidence, so boundary behaviour is exactly what the caller sees.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, Optional, Protocol

from layoff_risk.models.prediction import (
    LAYOFF_THRESHOLD,
    Factor,
    PredictionResult,
    classify_risk,
)
from layoff_risk.models.profile import EmployeeProfile
from layoff_risk.taxonomy.employee_taxonomy import (
    Department,
    FactorName,
    OvertimeFrequency,
)

logger = logging.getLogger(__name__)

DEPARTMENT_RISK: dict[str, int] = {
    Department.SALES:       10,
    Department.MARKETING:   12,
    Department.SUPPORT:     15,
    Department.OPERATIONS:   8,
    Department.HR:           6,
    Department.FINANCE:      4,
    Department.ENGINEERING: -2,
}
DEFAULT_DEPARTMENT_IMPACT = 5

OVERTIME_RISK: dict[str, int] = {
    OvertimeFrequency.NEVER:      5,
    OvertimeFrequency.RARELY:     2,
    OvertimeFrequency.SOMETIMES: -3,
    OvertimeFrequency.OFTEN:     -8,
    OvertimeFrequency.ALWAYS:    10,
}
DEFAULT_OVERTIME_IMPACT = 0

CONFIDENCE_OFFSET = 50.0
PERTURBATION_SPAN = 10.0

_default_rng = random.Random()


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in [0, 1)."""

    def random(self) -> float: ...


class FixedRandom:
    """Randomness source that always returns the same value.

    ``FixedRandom(0.5)`` makes scoring fully deterministic (zero perturbation).
    """

    def __init__(self, value: float = 0.5) -> None:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"value must be in [0.0, 1.0), got {value}.")
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


# ── Per-attribute factors ─────────────────────────────────────────────────────

def age_factor(age: int) -> Factor:
    if age > 55:
        impact = 15
    elif age < 25:
        impact = 8
    else:
        impact = -5
    return Factor.of(FactorName.AGE, impact)


def department_factor(department: str) -> Factor:
    impact = DEPARTMENT_RISK.get(department)
    if impact is None:
        logger.debug(
            "Unrecognised department %r, using default impact %+d",
            department, DEFAULT_DEPARTMENT_IMPACT,
        )
        impact = DEFAULT_DEPARTMENT_IMPACT
    return Factor.of(FactorName.DEPARTMENT, impact)


def salary_factor(annual_salary: float) -> Factor:
    # Order matters: the protective band is only checked after both extremes.
    if annual_salary > 150_000:
        impact = 12
    elif annual_salary < 40_000:
        impact = 8
    elif 60_000 <= annual_salary <= 100_000:
        impact = -8
    else:
        impact = 2
    return Factor.of(FactorName.SALARY, impact)


def performance_factor(performance_rating: int) -> Factor:
    if performance_rating >= 4:
        impact = -20
    elif performance_rating == 3:
        impact = 5
    else:
        impact = 25
    return Factor.of(FactorName.PERFORMANCE, impact)


def tenure_factor(years_at_company: float) -> Factor:
    if years_at_company < 1:
        impact = 18
    elif years_at_company <= 3:
        impact = -5
    elif years_at_company > 10:
        impact = 8
    else:
        impact = -10
    return Factor.of(FactorName.TENURE, impact)


def overtime_factor(overtime_frequency: str) -> Factor:
    impact = OVERTIME_RISK.get(overtime_frequency)
    if impact is None:
        logger.debug(
            "Unrecognised overtime frequency %r, using default impact %+d",
            overtime_frequency, DEFAULT_OVERTIME_IMPACT,
        )
        impact = DEFAULT_OVERTIME_IMPACT
    return Factor.of(FactorName.OVERTIME, impact)


def compute_factors(profile: EmployeeProfile) -> list[Factor]:
    """Return the six factors for ``profile`` in creation order."""
    return [
        age_factor(profile.age),
        department_factor(profile.department),
        salary_factor(profile.annual_salary),
        performance_factor(profile.performance_rating),
        tenure_factor(profile.years_at_company),
        overtime_factor(profile.overtime_frequency),
    ]


# ── Normalisation ─────────────────────────────────────────────────────────────

def perturbation(u: float) -> float:
    """Map a uniform draw in [0, 1) to a perturbation in [-5, +5)."""
    return (u - 0.5) * PERTURBATION_SPAN


def normalize_confidence(raw_score: float) -> int:
    """Shift, clamp to [0, 100] and round half up."""
    clamped = _clamp(raw_score + CONFIDENCE_OFFSET, 0.0, 100.0)
    return int(math.floor(clamped + 0.5))


def rank_factors(factors: Iterable[Factor]) -> tuple[Factor, ...]:
    """Sort by descending absolute impact; ties keep their input order."""
    return tuple(sorted(factors, key=lambda f: -abs(f.impact)))


# ── Entry point ───────────────────────────────────────────────────────────────

def score(
    profile: EmployeeProfile,
    rng:     Optional[RandomSource] = None,
) -> PredictionResult:
    """Score one employee profile.

    Args:
        profile: Validated employee profile.
        rng:     Randomness source; ``random()`` is called exactly once.
                 Defaults to a module-level ``random.Random``.

    Returns:
        ``PredictionResult`` with six factors ranked by absolute impact.
    """
    factors = compute_factors(profile)
    base_score = sum(f.impact for f in factors)

    if rng is None:
        rng = _default_rng
    noise = perturbation(rng.random())
    raw_score = base_score + noise

    confidence = normalize_confidence(raw_score)
    risk_level = classify_risk(confidence)

    logger.debug(
        "Scored profile: base=%+d noise=%+.2f confidence=%d risk=%s",
        base_score, noise, confidence, risk_level.value,
    )

    return PredictionResult(
        will_be_layed_off=confidence > LAYOFF_THRESHOLD,
        confidence=confidence,
        risk_level=risk_level,
        factors=rank_factors(factors),
    )


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
