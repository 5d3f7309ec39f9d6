"""
Fixed Deposit Calculations

Maturity value with quarterly compounding, A = P * (1 + r/n)^(n*t).
"""

import logging
from typing import Dict, Optional

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import ensure_finite, require_min, require_range

logger = logging.getLogger(__name__)

COMPOUNDING_FREQUENCY = 4  # Quarterly


def calculate_maturity_amount(
    principal: float,
    annual_rate: float,
    tenure_years: float,
    compounding_freq: int = COMPOUNDING_FREQUENCY,
) -> float:
    """
    Calculate maturity amount under periodic compounding.

    Args:
        principal: Deposit amount
        annual_rate: Annual interest rate as a percentage
        tenure_years: Deposit tenure in years
        compounding_freq: Compounding periods per year

    Returns:
        Maturity amount
    """
    rate = annual_rate / 100
    return principal * (1 + rate / compounding_freq) ** (compounding_freq * tenure_years)


def calculate_effective_rate(
    annual_rate: float, compounding_freq: int = COMPOUNDING_FREQUENCY
) -> float:
    """Calculate the effective annual rate (EAR) as a percentage."""
    rate = annual_rate / 100
    return ((1 + rate / compounding_freq) ** compounding_freq - 1) * 100


def calculate_fd(
    principal: Optional[float],
    interest_rate: Optional[float],
    tenure: Optional[float],
) -> Dict:
    """
    Calculate FD maturity amount, interest earned and effective rate.

    Args:
        principal: Deposit amount (>= 1,000)
        interest_rate: Annual interest rate percentage (1-15)
        tenure: Tenure in years (0-10, exclusive of 0)

    Returns:
        FD result rounded to 2 decimals
    """
    principal = require_min(
        principal, "principal", "Principal amount", 1000,
        "Principal amount must be at least ₹1,000",
    )
    interest_rate = require_range(
        interest_rate, "interestRate", "Interest rate", 1, 15,
        "Interest rate must be between 1% and 15%",
    )
    tenure = require_range(
        tenure, "tenure", "Tenure", 0, 10,
        "Tenure must be between 1 and 10 years",
        min_inclusive=False,
    )

    maturity_amount = ensure_finite(
        calculate_maturity_amount(principal, interest_rate, tenure), "Maturity amount"
    )
    total_interest_earned = maturity_amount - principal
    effective_rate = calculate_effective_rate(interest_rate)

    logger.debug(f"FD of {principal} at {interest_rate}% for {tenure} years: {maturity_amount}")

    return {
        "principal": principal,
        "interest_rate": interest_rate,
        "tenure": tenure,
        "compounding_frequency": COMPOUNDING_FREQUENCY,
        "maturity_amount": round_money(maturity_amount),
        "total_interest_earned": round_money(total_interest_earned),
        "effective_rate": round_money(effective_rate),
    }
