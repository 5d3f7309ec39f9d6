"""
SIP (Systematic Investment Plan) Calculations

Monthly investments deposited at the start of each month, so the value
follows the annuity-due formula.
"""

import logging
from typing import Dict, Optional

from freetools.calculations.annuity import future_value_due, year_wise_growth
from freetools.calculations.rounding import round_money
from freetools.calculations.validation import ensure_finite, require_min, require_range

logger = logging.getLogger(__name__)


def validate_sip_inputs(
    monthly_investment: Optional[float],
    investment_period: Optional[float],
    expected_roi: Optional[float],
) -> tuple:
    """Validate SIP inputs and return them as floats."""
    monthly_investment = require_min(
        monthly_investment,
        "monthlyInvestment",
        "Monthly investment",
        500,
        "Monthly investment must be at least ₹500",
    )
    investment_period = require_range(
        investment_period,
        "investmentPeriod",
        "Investment period",
        1,
        50,
        "Investment period must be between 1 and 50 years",
    )
    expected_roi = require_range(
        expected_roi,
        "expectedROI",
        "Expected ROI",
        1,
        20,
        "Expected ROI must be between 1% and 20%",
    )
    return monthly_investment, investment_period, expected_roi


def calculate_sip(
    monthly_investment: Optional[float],
    investment_period: Optional[float],
    expected_roi: Optional[float],
) -> Dict:
    """
    Calculate SIP maturity value and year-wise growth.

    Args:
        monthly_investment: Amount invested every month (>= 500)
        investment_period: Investment period in years (1-50)
        expected_roi: Expected annual return percentage (1-20)

    Returns:
        SIP result with totals and year-wise growth
    """
    monthly_investment, investment_period, expected_roi = validate_sip_inputs(
        monthly_investment, investment_period, expected_roi
    )

    months = investment_period * 12
    total_investment = monthly_investment * months
    total_value = ensure_finite(
        future_value_due(monthly_investment, expected_roi, months), "Total value"
    )
    estimated_returns = total_value - total_investment
    returns_percentage = estimated_returns / total_investment * 100

    logger.debug(f"SIP of {monthly_investment}/month for {months} months: {total_value}")

    growth = [
        {
            "year": row["year"],
            "total_investment": round_money(row["invested"]),
            "estimated_returns": round_money(row["value"] - row["invested"]),
            "total_value": round_money(row["value"]),
        }
        for row in year_wise_growth(
            monthly_investment, expected_roi, investment_period, due=True
        )
    ]

    return {
        "monthly_investment": monthly_investment,
        "investment_period": investment_period,
        "expected_roi": expected_roi,
        "total_investment": round_money(total_investment),
        "estimated_returns": round_money(estimated_returns),
        "total_value": round_money(total_value),
        "returns_percentage": round_money(returns_percentage),
        "year_wise_growth": growth,
    }
