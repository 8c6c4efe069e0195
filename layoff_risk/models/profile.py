"""
Employee profile: the single input of a risk assessment.

``EmployeeProfile`` is frozen: a profile is built once per request (usually
from form input via ``EmployeeProfile.from_form``) and never mutated.

Numeric fields accept typed values or numeric strings.  Anything that cannot
be read as a finite number raises ``pydantic.ValidationError`` naming the
field, so malformed input never reaches the scorer as NaN or 0.

``department`` and ``overtime_frequency`` are free strings on purpose: values
outside ``Department`` / ``OvertimeFrequency`` are valid input and are scored
with a default impact.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

# Upstream form keys -> model field names.
FORM_FIELD_MAP: dict[str, str] = {
    "age": "age",
    "department": "department",
    "jobRole": "job_role",
    "salary": "annual_salary",
    "overtime": "overtime_frequency",
    "performanceRating": "performance_rating",
    "yearsAtCompany": "years_at_company",
}

MIN_AGE = 18
MAX_AGE = 70


class EmployeeProfile(BaseModel):
    """Attributes of one employee, as collected by the assessment form.

    Attributes:
        age: Age in whole years, 18–70 inclusive.
        department: Department value, normally a ``Department`` member.
        job_role: Free-text job title.  Informational only, not scored.
        annual_salary: Gross annual salary, non-negative.
        overtime_frequency: Overtime value, normally an ``OvertimeFrequency`` member.
        performance_rating: Latest rating, 1 (needs improvement) to 5 (excellent).
        years_at_company: Tenure in years, fractional allowed.
    """

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        str_strip_whitespace=True,
    )

    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    department: str = Field(min_length=1)
    job_role: str = Field(min_length=1)
    annual_salary: float = Field(ge=0)
    overtime_frequency: str = Field(min_length=1)
    performance_rating: int = Field(ge=1, le=5)
    years_at_company: float = Field(ge=0)

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "EmployeeProfile":
        """Build a profile from form input.

        Accepts the form's camelCase keys (``jobRole``, ``salary``,
        ``overtime``, ...) and the model's own snake_case field names.
        Unknown keys are ignored.

        Raises:
            ValueError: If a form key and its field name are both present
                (e.g. ``salary`` and ``annual_salary``).
            pydantic.ValidationError: If a field is missing or malformed.
        """
        fields: dict[str, Any] = {}
        sources: dict[str, str] = {}
        for key, value in data.items():
            name = FORM_FIELD_MAP.get(key, key)
            if name not in cls.model_fields:
                continue
            if name in sources:
                raise ValueError(
                    f"Conflicting keys {sources[name]!r} and {key!r} both set {name!r}."
                )
            sources[name] = key
            fields[name] = value
        return cls(**fields)
