"""
Calculation Engine

Stateless calculators behind the FreeTools endpoints.
Every calculator validates its input eagerly, computes at full precision
and rounds only the values it returns.
"""

from freetools.calculations import (
    annuity,
    budget,
    deposit,
    eligibility,
    emi,
    engagement,
    gpa,
    interest,
    retirement,
    sip,
    tax,
)

__all__ = [
    "annuity",
    "budget",
    "deposit",
    "eligibility",
    "emi",
    "engagement",
    "gpa",
    "interest",
    "retirement",
    "sip",
    "tax",
]
