"""
Layoff Risk: rule-based employee layoff risk scoring with remediation
recommendations.

Typical use::

    from layoff_risk.assessment import assess_employee
    from layoff_risk.models.profile import EmployeeProfile

    profile = EmployeeProfile.from_form(form_data)
    assessment = assess_employee(profile)
"""

__version__ = "0.1.0"
