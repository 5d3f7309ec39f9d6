"""
Loan Eligibility Calculations

Largest loan a borrower's monthly EMI capacity can repay, found by
inverting the EMI formula.
"""

import logging
from typing import Dict, Optional

from freetools.calculations.annuity import loan_amount_from_emi
from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    OutOfRangeError,
    ensure_finite,
    require_min,
    require_range,
)

logger = logging.getLogger(__name__)

# Debt-to-income cap on the EMI a borrower may commit to
MAX_EMI_TO_INCOME = 0.8


def validate_eligibility_inputs(
    monthly_income: Optional[float],
    emi_capacity: Optional[float],
    interest_rate: Optional[float],
    loan_tenure: Optional[float],
) -> tuple:
    """Validate eligibility inputs, including the debt-to-income policy."""
    monthly_income = require_min(
        monthly_income,
        "monthlyIncome",
        "Monthly income",
        10000,
        "Monthly income must be at least ₹10,000",
    )
    emi_capacity = require_min(
        emi_capacity,
        "emiCapacity",
        "EMI capacity",
        1000,
        "EMI capacity must be at least ₹1,000",
    )
    if emi_capacity >= monthly_income:
        raise OutOfRangeError(
            "emiCapacity", "EMI capacity must be less than monthly income"
        )
    if emi_capacity > monthly_income * MAX_EMI_TO_INCOME:
        raise OutOfRangeError(
            "emiCapacity", "EMI capacity should not exceed 80% of monthly income"
        )
    interest_rate = require_range(
        interest_rate,
        "interestRate",
        "Interest rate",
        1,
        30,
        "Interest rate must be between 1% and 30%",
    )
    loan_tenure = require_range(
        loan_tenure,
        "loanTenure",
        "Loan tenure",
        1,
        30,
        "Loan tenure must be between 1 and 30 years",
    )
    return monthly_income, emi_capacity, interest_rate, loan_tenure


def calculate_loan_eligibility(
    monthly_income: Optional[float],
    emi_capacity: Optional[float],
    interest_rate: Optional[float],
    loan_tenure: Optional[float],
) -> Dict:
    """
    Calculate the eligible loan amount for a given EMI capacity.

    Args:
        monthly_income: Monthly income (>= 10,000)
        emi_capacity: Maximum EMI the borrower can pay (>= 1,000, <= 80% of income)
        interest_rate: Annual interest rate percentage (1-30)
        loan_tenure: Loan tenure in years (1-30)

    Returns:
        Eligible loan amount with repayment totals and ratios
    """
    monthly_income, emi_capacity, interest_rate, loan_tenure = (
        validate_eligibility_inputs(
            monthly_income, emi_capacity, interest_rate, loan_tenure
        )
    )

    months = loan_tenure * 12
    eligible_loan_amount = ensure_finite(
        loan_amount_from_emi(emi_capacity, interest_rate, months), "Eligible loan amount"
    )
    total_amount_payable = emi_capacity * months
    total_interest_payable = total_amount_payable - eligible_loan_amount
    emi_capacity_percentage = emi_capacity / monthly_income * 100

    logger.debug(
        f"Eligible loan for EMI {emi_capacity} over {months} months: {eligible_loan_amount}"
    )

    return {
        "monthly_income": monthly_income,
        "emi_capacity": emi_capacity,
        "emi_capacity_percentage": round_money(emi_capacity_percentage),
        "interest_rate": interest_rate,
        "loan_tenure": loan_tenure,
        "eligible_loan_amount": round_money(eligible_loan_amount),
        "maximum_emi": emi_capacity,
        "total_interest_payable": round_money(total_interest_payable),
        "total_amount_payable": round_money(total_amount_payable),
        "eligibility_details": {
            "income_multiplier": round_money(eligible_loan_amount / monthly_income),
            "debt_to_income_ratio": round_money(emi_capacity_percentage),
        },
    }
