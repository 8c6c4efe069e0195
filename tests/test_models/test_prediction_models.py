"""Tests for Factor, PredictionResult, Recommendation and RiskAssessment."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from layoff_risk.models.prediction import (
    Factor,
    PredictionResult,
    Recommendation,
    RiskAssessment,
    classify_risk,
)
from layoff_risk.taxonomy.employee_taxonomy import (
    FactorName,
    RecommendationPriority,
    RiskLevel,
)


def _factors(impact: int = -1) -> tuple[Factor, ...]:
    return tuple(Factor.of(name, impact) for name in FactorName)


class TestClassifyRisk:
    @pytest.mark.parametrize(
        "confidence, level",
        [
            (0, RiskLevel.LOW), (33, RiskLevel.LOW), (34, RiskLevel.MEDIUM),
            (66, RiskLevel.MEDIUM), (67, RiskLevel.HIGH), (100, RiskLevel.HIGH),
        ],
    )
    def test_thresholds(self, confidence, level):
        assert classify_risk(confidence) == level


class TestFactor:
    def test_of_derives_is_positive(self):
        assert Factor.of(FactorName.AGE, -5).is_positive is True
        assert Factor.of(FactorName.AGE, 0).is_positive is False
        assert Factor.of(FactorName.AGE, 15).is_positive is False

    def test_inconsistent_sign_raises(self):
        with pytest.raises(ValidationError, match="is_positive"):
            Factor(name=FactorName.AGE, impact=8, is_positive=True)

    def test_unknown_name_raises(self):
        with pytest.raises(ValidationError):
            Factor(name="Shoe Size", impact=1, is_positive=False)


class TestPredictionResult:
    def test_valid_construction(self):
        r = PredictionResult(
            will_be_layed_off=True,
            confidence=61,
            risk_level=RiskLevel.MEDIUM,
            factors=_factors(),
        )
        assert r.job_security == 39
        assert r.factor(FactorName.SALARY).impact == -1

    def test_wrong_risk_level_raises(self):
        with pytest.raises(ValidationError, match="risk_level"):
            PredictionResult(
                will_be_layed_off=False,
                confidence=20,
                risk_level=RiskLevel.HIGH,
                factors=_factors(),
            )

    def test_wrong_outcome_raises(self):
        with pytest.raises(ValidationError, match="will_be_layed_off"):
            PredictionResult(
                will_be_layed_off=False,
                confidence=61,
                risk_level=RiskLevel.MEDIUM,
                factors=_factors(),
            )

    def test_confidence_out_of_range_raises(self):
        with pytest.raises(ValidationError):
            PredictionResult(
                will_be_layed_off=True,
                confidence=101,
                risk_level=RiskLevel.HIGH,
                factors=_factors(),
            )

    def test_five_factors_raises(self):
        with pytest.raises(ValidationError, match="exactly one factor per name"):
            PredictionResult(
                will_be_layed_off=False,
                confidence=10,
                risk_level=RiskLevel.LOW,
                factors=_factors()[:5],
            )

    def test_duplicate_factor_names_raise(self):
        dupes = _factors()[:5] + (Factor.of(FactorName.AGE, 3),)
        with pytest.raises(ValidationError):
            PredictionResult(
                will_be_layed_off=False,
                confidence=10,
                risk_level=RiskLevel.LOW,
                factors=dupes,
            )


class TestRecommendation:
    def test_strips_text(self):
        r = Recommendation(
            title="  Compensation Review ",
            description="Benchmark pay.",
            priority=RecommendationPriority.MEDIUM,
        )
        assert r.title == "Compensation Review"

    def test_empty_description_raises(self):
        with pytest.raises(ValidationError):
            Recommendation(title="X", description="  ", priority="High")

    def test_low_priority_rejected(self):
        with pytest.raises(ValidationError):
            Recommendation(title="X", description="Y", priority="Low")


class TestRiskAssessment:
    def test_to_dict_uses_camel_case(self, low_risk_profile):
        result = PredictionResult(
            will_be_layed_off=False,
            confidence=2,
            risk_level=RiskLevel.LOW,
            factors=_factors(),
        )
        rec = Recommendation(title="T", description="D", priority="Medium")
        d = RiskAssessment(
            profile=low_risk_profile, result=result, recommendations=(rec,)
        ).to_dict()
        assert d["willBeLayedOff"] is False
        assert d["confidence"] == 2
        assert d["riskLevel"] == "Low"
        assert d["factors"][0] == {"name": "Age Factor", "impact": -1, "isPositive": True}
        assert d["recommendations"] == [
            {"title": "T", "description": "D", "priority": "Medium"}
        ]
        assert "assessedAt" in d
