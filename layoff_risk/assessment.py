"""
One-call risk assessment: score a profile, then derive recommendations.

This is the function views and the CLI call.  It adds no business logic of
its own beyond wiring the two stages together and logging the outcome.
"""

from __future__ import annotations

import logging
from typing import Optional

from layoff_risk.models.prediction import RiskAssessment
from layoff_risk.models.profile import EmployeeProfile
from layoff_risk.recommendations.rules import recommend
from layoff_risk.scoring.scorer import RandomSource, score

logger = logging.getLogger(__name__)


def assess_employee(
    profile: EmployeeProfile,
    rng:     Optional[RandomSource] = None,
) -> RiskAssessment:
    """Run the scoring and recommendation stages for one profile.

    Args:
        profile: Validated employee profile.
        rng:     Optional randomness source forwarded to ``score()``.

    Returns:
        ``RiskAssessment`` bundling the profile, result and recommendations.
    """
    result = score(profile, rng=rng)
    recommendations = recommend(result)

    logger.info(
        "Assessment complete: risk=%s confidence=%d%% recommendations=%d",
        result.risk_level.value,
        result.confidence,
        len(recommendations),
    )

    return RiskAssessment(
        profile=profile,
        result=result,
        recommendations=tuple(recommendations),
    )
