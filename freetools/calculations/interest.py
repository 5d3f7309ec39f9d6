"""
Simple and Compound Interest Calculations

Compound interest is annual with a fractional-year exponent for non-integer
periods, not truncated periodic compounding.
"""

import logging
import math
from typing import List, Dict, Optional

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    ensure_finite,
    require_choice,
    require_positive,
    require_range,
)

logger = logging.getLogger(__name__)

INTEREST_TYPES = ("simple", "compound")


def calculate_simple_interest(principal: float, rate: float, time: float) -> Dict:
    """Simple interest: I = P * R * T / 100."""
    interest = principal * rate * time / 100
    return {"interest": interest, "total_amount": principal + interest}


def calculate_compound_interest(principal: float, rate: float, time: float) -> Dict:
    """Annually compounded interest: A = P * (1 + R/100)^T."""
    amount = principal * (1 + rate / 100) ** time
    return {"interest": amount - principal, "total_amount": amount}


def generate_year_wise_breakdown(
    principal: float, rate: float, time: float, interest_type: str
) -> List[Dict]:
    """
    Generate the year-by-year growth of the principal.

    Years run from 1 to ceil(time). When time is not a whole number the last
    entry covers only the fractional remainder: simple interest prorates the
    flat yearly interest, compound interest raises the running balance to the
    fractional exponent.

    Args:
        principal: Principal amount
        rate: Annual interest rate as a percentage
        time: Time period in years
        interest_type: 'simple' or 'compound'

    Returns:
        Unrounded breakdown rows
    """
    breakdown = []
    whole_years = math.floor(time)
    yearly_simple_interest = principal * rate / 100
    balance = principal

    for year in range(1, math.ceil(time) + 1):
        span = time - whole_years if year > time else 1

        if interest_type == "simple":
            interest_for_year = yearly_simple_interest * span
        else:
            interest_for_year = balance * ((1 + rate / 100) ** span - 1)

        breakdown.append(
            {
                "year": year,
                "years_elapsed": min(year, time),
                "principal_at_start": balance,
                "interest_for_year": interest_for_year,
                "total_at_end": balance + interest_for_year,
            }
        )
        balance += interest_for_year

    return breakdown


def validate_interest_inputs(
    principal: Optional[float],
    interest_rate: Optional[float],
    time_period: Optional[float],
    interest_type: Optional[str],
) -> tuple:
    """Validate interest inputs and return them normalized."""
    principal = require_positive(
        principal, "principal", "Principal amount",
        "Principal amount must be greater than 0",
    )
    interest_rate = require_range(
        interest_rate, "interestRate", "Interest rate", 0, 100,
        "Interest rate must be between 0 and 100",
    )
    time_period = require_range(
        time_period, "timePeriod", "Time period", 0, 100,
        "Time period must be between 0.1 and 100 years",
        min_inclusive=False,
    )
    interest_type = require_choice(
        interest_type, "interestType", "Interest type", INTEREST_TYPES,
        'Interest type must be "simple" or "compound"',
    )
    return principal, interest_rate, time_period, interest_type


def calculate_interest(
    principal: Optional[float],
    interest_rate: Optional[float],
    time_period: Optional[float],
    interest_type: Optional[str],
) -> Dict:
    """
    Calculate simple or compound interest with a year-wise breakdown.

    Args:
        principal: Principal amount (> 0)
        interest_rate: Annual interest rate percentage (0-100)
        time_period: Time period in years (0-100, exclusive of 0)
        interest_type: 'simple' or 'compound'

    Returns:
        Interest result rounded to 2 decimals
    """
    principal, interest_rate, time_period, interest_type = validate_interest_inputs(
        principal, interest_rate, time_period, interest_type
    )

    if interest_type == "simple":
        result = calculate_simple_interest(principal, interest_rate, time_period)
    else:
        result = calculate_compound_interest(principal, interest_rate, time_period)

    interest_amount = ensure_finite(result["interest"], "Interest amount")
    total_amount = result["total_amount"]
    growth_rate = interest_amount / principal * 100

    logger.debug(
        f"{interest_type} interest on {principal} at {interest_rate}% for {time_period} years: {interest_amount}"
    )

    breakdown = generate_year_wise_breakdown(
        principal, interest_rate, time_period, interest_type
    )

    return {
        "principal": principal,
        "interest_rate": interest_rate,
        "time_period": time_period,
        "interest_type": interest_type,
        "interest_amount": round_money(interest_amount),
        "total_amount": round_money(total_amount),
        "growth_rate": round_money(growth_rate),
        "year_wise_breakdown": [
            {
                "year": row["year"],
                "years_elapsed": row["years_elapsed"],
                "principal_at_start": round_money(row["principal_at_start"]),
                "interest_for_year": round_money(row["interest_for_year"]),
                "total_at_end": round_money(row["total_at_end"]),
            }
            for row in breakdown
        ],
    }
