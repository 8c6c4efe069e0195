"""
Assessment output models.

``Factor``           - one signed contribution to the raw risk score.
``PredictionResult`` - outcome, confidence, risk level and ranked factors.
``Recommendation``   - a remediation suggestion derived from a result.
``RiskAssessment``   - profile + result + recommendations, as returned to callers.

All models are frozen.  ``PredictionResult`` validates that ``risk_level`` and
``will_be_layed_off`` are the deterministic functions of ``confidence``
defined by ``classify_risk()`` and ``LAYOFF_THRESHOLD``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from layoff_risk.models.profile import EmployeeProfile
from layoff_risk.taxonomy.employee_taxonomy import (
    FactorName,
    RecommendationPriority,
    RiskLevel,
)

LOW_RISK_MAX = 33       # confidence <= 33 -> Low
MEDIUM_RISK_MAX = 66    # confidence <= 66 -> Medium, else High
LAYOFF_THRESHOLD = 60   # confidence > 60 -> predicted layoff

FACTOR_COUNT = len(FactorName)


def classify_risk(confidence: int) -> RiskLevel:
    """Map a 0–100 confidence value to its risk bucket."""
    if confidence <= LOW_RISK_MAX:
        return RiskLevel.LOW
    if confidence <= MEDIUM_RISK_MAX:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class Factor(BaseModel):
    """A named, signed contribution to the raw risk score.

    Attributes:
        name: One of the six ``FactorName`` labels.
        impact: Percentage points added to (positive) or removed from
            (negative) the raw score.
        is_positive: ``True`` iff the factor reduces risk (``impact < 0``).
    """

    model_config = ConfigDict(frozen=True)

    name: FactorName
    impact: int
    is_positive: bool

    @model_validator(mode="after")
    def validate_sign(self) -> "Factor":
        if self.is_positive != (self.impact < 0):
            raise ValueError(
                f"is_positive must equal impact < 0 "
                f"(impact={self.impact}, is_positive={self.is_positive})."
            )
        return self

    @classmethod
    def of(cls, name: FactorName, impact: int) -> "Factor":
        """Build a factor, deriving ``is_positive`` from the impact sign."""
        return cls(name=name, impact=impact, is_positive=impact < 0)


class PredictionResult(BaseModel):
    """Outcome of the scoring stage.

    Attributes:
        will_be_layed_off: ``True`` iff ``confidence > LAYOFF_THRESHOLD``.
        confidence: Layoff likelihood, integer 0–100.
        risk_level: Bucket of ``confidence`` (see ``classify_risk``).
        factors: Exactly six factors, one per name, sorted by descending
            absolute impact.
    """

    model_config = ConfigDict(frozen=True)

    will_be_layed_off: bool
    confidence: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    factors: tuple[Factor, ...]

    @field_validator("factors")
    @classmethod
    def validate_factor_set(cls, v: tuple[Factor, ...]) -> tuple[Factor, ...]:
        names = {f.name for f in v}
        if len(v) != FACTOR_COUNT or len(names) != FACTOR_COUNT:
            raise ValueError(
                f"factors must hold exactly one factor per name "
                f"({FACTOR_COUNT}), got {[f.name.value for f in v]}."
            )
        return v

    @model_validator(mode="after")
    def validate_classification(self) -> "PredictionResult":
        expected_level = classify_risk(self.confidence)
        if self.risk_level != expected_level:
            raise ValueError(
                f"risk_level {self.risk_level.value!r} inconsistent with "
                f"confidence {self.confidence} (expected {expected_level.value!r})."
            )
        if self.will_be_layed_off != (self.confidence > LAYOFF_THRESHOLD):
            raise ValueError(
                f"will_be_layed_off must equal confidence > {LAYOFF_THRESHOLD}."
            )
        return self

    @property
    def job_security(self) -> int:
        """Complement of ``confidence``."""
        return 100 - self.confidence

    def factor(self, name: FactorName) -> Optional[Factor]:
        """Return the factor called ``name``, or ``None`` if absent."""
        for f in self.factors:
            if f.name == name:
                return f
        return None


class Recommendation(BaseModel):
    """A remediation suggestion.

    Attributes:
        title: Short action label, e.g. ``"Compensation Review"``.
        description: One-sentence explanation of the action.
        priority: Urgency; never lower than ``Medium``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    priority: RecommendationPriority

    @field_validator("title", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty.")
        return v.strip()


class RiskAssessment(BaseModel):
    """Everything produced for one employee in one request."""

    model_config = ConfigDict(frozen=True)

    profile: EmployeeProfile
    result: PredictionResult
    recommendations: tuple[Recommendation, ...] = ()
    assessed_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc)
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase shape consumed by the results view."""
        return {
            "willBeLayedOff": self.result.will_be_layed_off,
            "confidence": self.result.confidence,
            "riskLevel": self.result.risk_level.value,
            "factors": [
                {
                    "name": f.name.value,
                    "impact": f.impact,
                    "isPositive": f.is_positive,
                }
                for f in self.result.factors
            ],
            "recommendations": [
                {
                    "title": r.title,
                    "description": r.description,
                    "priority": r.priority.value,
                }
                for r in self.recommendations
            ],
            "assessedAt": self.assessed_at.isoformat(),
        }
