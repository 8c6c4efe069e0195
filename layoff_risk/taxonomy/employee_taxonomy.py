"""
Employee attribute and assessment taxonomy.

Attribute vocabularies (what the upstream form offers):
  - ``Department``        - organisational unit of the employee.
  - ``OvertimeFrequency`` - how often the employee works overtime.

Assessment vocabularies (what the engine produces):
  - ``FactorName``             - the six fixed contributing-factor labels.
  - ``RiskLevel``              - three-tier risk bucket.
  - ``RecommendationPriority`` - urgency of a remediation suggestion.

Values of ``Department`` and ``OvertimeFrequency`` match the form values
exactly.  Profiles are NOT restricted to these values: anything else is
scored with a documented default impact.

This module has NO imports from any other ``layoff_risk`` package.
"""

from enum import StrEnum


class Department(StrEnum):
    """Department offered by the assessment form."""

    ENGINEERING = "engineering"
    SALES = "sales"
    MARKETING = "marketing"
    HR = "hr"
    FINANCE = "finance"
    OPERATIONS = "operations"
    SUPPORT = "support"


class OvertimeFrequency(StrEnum):
    """Self-reported overtime frequency."""

    NEVER = "never"
    RARELY = "rarely"
    SOMETIMES = "sometimes"
    OFTEN = "often"
    ALWAYS = "always"


class FactorName(StrEnum):
    """Label of a contributing factor; exactly one factor per attribute."""

    AGE = "Age Factor"
    DEPARTMENT = "Department Risk"
    SALARY = "Salary Range"
    PERFORMANCE = "Performance Rating"
    TENURE = "Company Tenure"
    OVERTIME = "Overtime Frequency"


class RiskLevel(StrEnum):
    """Risk bucket derived from the confidence value."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RecommendationPriority(StrEnum):
    """Urgency of a recommendation.  There is no "Low" priority."""

    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"
