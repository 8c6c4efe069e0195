"""
ASCII terminal formatters for assessment results.

All formatters accept model objects and return plain strings suitable for
``typer.echo()``.

Factor sign convention
----------------------
Factor lines show the *effect on job security*, not the raw impact sign:
a risk-reducing factor (``impact < 0``) is printed as ``+8%`` and a
risk-increasing one as ``-8%``::

    Performance Rating     -25%  #########################
    Salary Range            +8%  ########
"""

from __future__ import annotations

from layoff_risk.models.prediction import (
    LOW_RISK_MAX,
    MEDIUM_RISK_MAX,
    Factor,
    PredictionResult,
    Recommendation,
    RiskAssessment,
)
from layoff_risk.taxonomy.employee_taxonomy import RiskLevel

RISK_BANDS: dict[RiskLevel, tuple[int, int]] = {
    RiskLevel.LOW:    (0, LOW_RISK_MAX),
    RiskLevel.MEDIUM: (LOW_RISK_MAX + 1, MEDIUM_RISK_MAX),
    RiskLevel.HIGH:   (MEDIUM_RISK_MAX + 1, 100),
}

_RISK_SUMMARIES: dict[RiskLevel, str] = {
    RiskLevel.LOW:    "Employee shows strong job security indicators.",
    RiskLevel.MEDIUM: "Employee may need attention to improve job security.",
    RiskLevel.HIGH:   "Employee requires immediate attention and support.",
}

_NAME_WIDTH = 20


def outcome_label(result: PredictionResult) -> str:
    """Headline verdict: ``"At Risk"`` or ``"Safe"``."""
    return "At Risk" if result.will_be_layed_off else "Safe"


def risk_summary(risk_level: RiskLevel) -> str:
    """One-sentence reading of a risk level."""
    return _RISK_SUMMARIES[risk_level]


def format_risk_bands(current: RiskLevel) -> str:
    """Three-band legend with the current band marked."""
    cells = []
    for level, (lo, hi) in RISK_BANDS.items():
        marker = "*" if level == current else " "
        cells.append(f"[{marker}] {level.value} {lo}-{hi}%")
    return "  " + "   ".join(cells)


def format_factor_line(factor: Factor) -> str:
    magnitude = abs(factor.impact)
    signed = f"{'+' if factor.is_positive else '-'}{magnitude}%"
    return f"    {factor.name.value:<{_NAME_WIDTH}}  {signed:>5}  {'#' * magnitude}"


def format_recommendation(index: int, rec: Recommendation) -> str:
    return (
        f"    {index}. [{rec.priority.value}] {rec.title}\n"
        f"       {rec.description}"
    )


def format_assessment(assessment: RiskAssessment) -> str:
    """Render a full assessment report.

    Args:
        assessment: Output of ``assess_employee()``.

    Returns:
        Multi-line string.
    """
    result = assessment.result
    profile = assessment.profile

    lines: list[str] = []
    lines.append("")
    lines.append("=== Layoff Risk Assessment ===")
    lines.append(f"  Role:          {profile.job_role} ({profile.department})")
    lines.append(f"  Assessed at:   {assessment.assessed_at.isoformat(timespec='seconds')}")
    lines.append("")
    lines.append(f"  Outcome:       {outcome_label(result)}")
    lines.append(f"  Layoff risk:   {result.confidence}%")
    lines.append(f"  Job security:  {result.job_security}%")
    lines.append(f"  Risk level:    {result.risk_level.value}")
    lines.append(format_risk_bands(result.risk_level))
    lines.append(f"  {risk_summary(result.risk_level)}")

    lines.append("")
    lines.append("  Contributing factors (+ reduces risk, - increases risk):")
    for factor in result.factors:
        lines.append(format_factor_line(factor))

    lines.append("")
    lines.append("  Recommendations:")
    if not assessment.recommendations:
        lines.append("    (no recommendations)")
    for i, rec in enumerate(assessment.recommendations, start=1):
        lines.append(format_recommendation(i, rec))

    return "\n".join(lines)
