"""
Retirement Corpus Calculations

Monthly savings until retirement, accumulated as an ordinary annuity.
"""

import logging
from typing import Dict, Optional

from freetools.calculations.annuity import future_value_ordinary, year_wise_growth
from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    OutOfRangeError,
    ensure_finite,
    require_positive,
    require_range,
)
from freetools.config import get_settings

logger = logging.getLogger(__name__)


def validate_retirement_inputs(
    current_age: Optional[float],
    retirement_age: Optional[float],
    monthly_savings: Optional[float],
    expected_roi: Optional[float],
) -> tuple:
    """Validate retirement inputs and return them as floats."""
    current_age = require_range(
        current_age,
        "currentAge",
        "Current age",
        18,
        100,
        "Current age must be between 18 and 100",
    )
    retirement_age = require_range(
        retirement_age,
        "retirementAge",
        "Retirement age",
        40,
        100,
        "Retirement age must be between 40 and 100",
    )
    if retirement_age <= current_age:
        raise OutOfRangeError(
            "retirementAge", "Retirement age must be greater than current age"
        )
    monthly_savings = require_positive(
        monthly_savings,
        "monthlySavings",
        "Monthly savings",
        "Monthly savings must be greater than 0",
    )
    expected_roi = require_range(
        expected_roi,
        "expectedROI",
        "Expected ROI",
        1,
        20,
        "Expected ROI must be between 1% and 20%",
    )
    return current_age, retirement_age, monthly_savings, expected_roi


def calculate_retirement_corpus(
    current_age: Optional[float],
    retirement_age: Optional[float],
    monthly_savings: Optional[float],
    expected_roi: Optional[float],
    retirement_years: Optional[int] = None,
) -> Dict:
    """
    Calculate the corpus accumulated by retirement age.

    Args:
        current_age: Current age in years (18-100)
        retirement_age: Planned retirement age (40-100, above current age)
        monthly_savings: Amount saved every month (> 0)
        expected_roi: Expected annual return percentage (1-20)
        retirement_years: Years the corpus is spread over for the pension
            estimate; defaults to the configured retirement_years

    Returns:
        Corpus, totals, monthly pension estimate and year-wise growth
    """
    current_age, retirement_age, monthly_savings, expected_roi = (
        validate_retirement_inputs(
            current_age, retirement_age, monthly_savings, expected_roi
        )
    )

    if retirement_years is None:
        retirement_years = get_settings().retirement_years

    years_until_retirement = retirement_age - current_age
    months = years_until_retirement * 12

    corpus = ensure_finite(
        future_value_ordinary(monthly_savings, expected_roi, months), "Retirement corpus"
    )
    total_savings_invested = monthly_savings * months
    total_returns_earned = corpus - total_savings_invested
    monthly_pension_estimate = corpus / (retirement_years * 12)

    logger.debug(f"Retirement corpus after {years_until_retirement} years: {corpus}")

    growth = [
        {
            "year": row["year"],
            "age": current_age + row["year"],
            "total_invested": round_money(row["invested"]),
            "corpus": round_money(row["value"]),
        }
        for row in year_wise_growth(
            monthly_savings, expected_roi, years_until_retirement
        )
    ]

    return {
        "current_age": current_age,
        "retirement_age": retirement_age,
        "years_until_retirement": years_until_retirement,
        "monthly_savings": monthly_savings,
        "expected_roi": expected_roi,
        "retirement_corpus": round_money(corpus),
        "total_savings_invested": round_money(total_savings_invested),
        "total_returns_earned": round_money(total_returns_earned),
        "monthly_pension_estimate": round_money(monthly_pension_estimate),
        "year_wise_growth": growth,
    }
