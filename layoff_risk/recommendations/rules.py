"""
Recommendation rules: turn risk-increasing factors and the overall risk
level into an ordered list of ``Recommendation`` records.

Rules (evaluated in this order; every matching rule contributes)
----------------------------------------------------------------
    1. Performance Rating increases risk  -> Performance Improvement Plan (High)
    2. Department Risk increases risk     -> Cross-Department Training (Medium)
    3. Company Tenure increases risk:
         impact > 15                      -> Onboarding & Mentorship (High)
         otherwise                        -> Career Development Path (Medium)
    4. Salary Range increases risk        -> Compensation Review (Medium)
    5. Risk level High                    -> Immediate Intervention Required (Critical)
       Risk level Medium                  -> Proactive Engagement (Medium)

"Increases risk" means ``is_positive`` is False, so a zero impact counts.
Output keeps rule order; it is not re-sorted by priority.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from layoff_risk.models.prediction import Factor, PredictionResult, Recommendation
from layoff_risk.taxonomy.employee_taxonomy import (
    FactorName,
    RecommendationPriority,
    RiskLevel,
)

logger = logging.getLogger(__name__)

ONBOARDING_IMPACT_THRESHOLD = 15

PERFORMANCE_IMPROVEMENT_PLAN = Recommendation(
    title="Performance Improvement Plan",
    description=(
        "Set measurable goals with regular check-ins and targeted coaching "
        "to raise the performance rating."
    ),
    priority=RecommendationPriority.HIGH,
)
CROSS_DEPARTMENT_TRAINING = Recommendation(
    title="Cross-Department Training",
    description=(
        "Build skills that transfer to more stable departments to widen "
        "internal mobility options."
    ),
    priority=RecommendationPriority.MEDIUM,
)
ONBOARDING_AND_MENTORSHIP = Recommendation(
    title="Onboarding & Mentorship",
    description=(
        "Pair the employee with a senior mentor and complete a structured "
        "onboarding plan to accelerate integration."
    ),
    priority=RecommendationPriority.HIGH,
)
CAREER_DEVELOPMENT_PATH = Recommendation(
    title="Career Development Path",
    description=(
        "Agree a documented growth plan with clear milestones to demonstrate "
        "long-term value."
    ),
    priority=RecommendationPriority.MEDIUM,
)
COMPENSATION_REVIEW = Recommendation(
    title="Compensation Review",
    description=(
        "Benchmark compensation against the market and align it with role "
        "scope and contribution."
    ),
    priority=RecommendationPriority.MEDIUM,
)
IMMEDIATE_INTERVENTION = Recommendation(
    title="Immediate Intervention Required",
    description=(
        "Schedule a manager and HR review this week to address the "
        "highest-impact risk factors."
    ),
    priority=RecommendationPriority.CRITICAL,
)
PROACTIVE_ENGAGEMENT = Recommendation(
    title="Proactive Engagement",
    description=(
        "Hold regular one-to-ones and recognise contributions to keep "
        "engagement and visibility high."
    ),
    priority=RecommendationPriority.MEDIUM,
)


@dataclass(frozen=True)
class FactorRule:
    """Fires when the named factor increases risk.

    Attributes:
        factor_name: Factor inspected by this rule.
        choose:      Picks the recommendation from the (risk-increasing) factor.
    """

    factor_name: FactorName
    choose:      Callable[[Factor], Recommendation]

    def apply(self, result: PredictionResult) -> Recommendation | None:
        factor = result.factor(self.factor_name)
        if factor is None:
            logger.debug("No %r factor in result, rule skipped", self.factor_name.value)
            return None
        if factor.is_positive:
            return None
        return self.choose(factor)


def _tenure_recommendation(factor: Factor) -> Recommendation:
    if abs(factor.impact) > ONBOARDING_IMPACT_THRESHOLD:
        return ONBOARDING_AND_MENTORSHIP
    return CAREER_DEVELOPMENT_PATH


FACTOR_RULES: tuple[FactorRule, ...] = (
    FactorRule(FactorName.PERFORMANCE, lambda _: PERFORMANCE_IMPROVEMENT_PLAN),
    FactorRule(FactorName.DEPARTMENT,  lambda _: CROSS_DEPARTMENT_TRAINING),
    FactorRule(FactorName.TENURE,      _tenure_recommendation),
    FactorRule(FactorName.SALARY,      lambda _: COMPENSATION_REVIEW),
)

RISK_LEVEL_RECOMMENDATIONS: dict[RiskLevel, Recommendation] = {
    RiskLevel.HIGH:   IMMEDIATE_INTERVENTION,
    RiskLevel.MEDIUM: PROACTIVE_ENGAGEMENT,
}


def recommend(result: PredictionResult) -> list[Recommendation]:
    """Derive recommendations for a scored result.

    Args:
        result: Output of ``layoff_risk.scoring.scorer.score()``.

    Returns:
        Recommendations in rule order; empty when nothing needs attention.
    """
    recommendations: list[Recommendation] = []

    for rule in FACTOR_RULES:
        rec = rule.apply(result)
        if rec is not None:
            recommendations.append(rec)

    level_rec = RISK_LEVEL_RECOMMENDATIONS.get(result.risk_level)
    if level_rec is not None:
        recommendations.append(level_rec)

    return recommendations
