"""
EMI Calculations

Equated monthly installment for an amortizing loan and its month-by-month
amortization schedule. Rates are annual percentages (e.g. 8.5 for 8.5%).
"""

import logging
from typing import List, Dict, Optional
from datetime import date
from dateutil.relativedelta import relativedelta

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    ensure_finite,
    require_positive,
    require_positive_integer,
    require_range,
)

logger = logging.getLogger(__name__)


def validate_emi_inputs(
    loan_amount: Optional[float],
    interest_rate: Optional[float],
    tenure_months: Optional[float],
) -> tuple:
    """Validate EMI inputs and return them normalized."""
    loan_amount = require_positive(
        loan_amount, "loanAmount", "Loan amount", "Loan amount must be greater than 0"
    )
    interest_rate = require_range(
        interest_rate,
        "interestRate",
        "Interest rate",
        0,
        100,
        "Interest rate must be between 0 and 100",
    )
    tenure_months = require_positive_integer(
        tenure_months,
        "tenureMonths",
        "Loan tenure",
        "Loan tenure must be a positive integer (in months)",
    )
    return loan_amount, interest_rate, tenure_months


def calculate_payment(principal: float, annual_rate: float, months: int) -> float:
    """
    Calculate the unrounded monthly installment.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as a percentage
        months: Number of monthly installments

    Returns:
        Monthly installment amount
    """
    monthly_rate = annual_rate / 1200

    if monthly_rate == 0:
        return principal / months

    factor = (1 + monthly_rate) ** months
    return principal * monthly_rate * factor / (factor - 1)


def generate_amortization_schedule(
    loan_amount: float,
    interest_rate: float,
    tenure_months: int,
    monthly_emi: Optional[float] = None,
    start_date: Optional[date] = None,
) -> List[Dict]:
    """
    Generate a month-by-month amortization schedule.

    Args:
        loan_amount: Loan principal amount
        interest_rate: Annual interest rate as a percentage
        tenure_months: Loan tenure in months
        monthly_emi: Installment to apply; computed when omitted
        start_date: Date of the first installment; rows carry no date if None

    Returns:
        List of schedule rows
    """
    if monthly_emi is None:
        monthly_emi = calculate_payment(loan_amount, interest_rate, tenure_months)

    schedule = []
    balance = loan_amount
    monthly_rate = interest_rate / 1200

    for month in range(1, tenure_months + 1):
        opening_balance = balance
        interest = balance * monthly_rate
        principal_pmt = monthly_emi - interest

        # Floating-point drift can push the last balance slightly negative
        balance = max(0.0, balance - principal_pmt)

        period_date = None
        if start_date is not None:
            period_date = (start_date + relativedelta(months=month - 1)).isoformat()

        schedule.append(
            {
                "month": month,
                "date": period_date,
                "opening_balance": round_money(opening_balance),
                "payment": round_money(monthly_emi),
                "principal": round_money(principal_pmt),
                "interest": round_money(interest),
                "balance": round_money(balance),
            }
        )

    return schedule


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over the schedule."""
    return sum(row["interest"] for row in schedule)


def calculate_emi(
    loan_amount: Optional[float],
    interest_rate: Optional[float],
    tenure_months: Optional[float],
    include_schedule: bool = False,
    start_date: Optional[date] = None,
) -> Dict:
    """
    Calculate EMI, total interest and total payable for a loan.

    Args:
        loan_amount: Principal loan amount (> 0)
        interest_rate: Annual interest rate percentage (0-100)
        tenure_months: Loan tenure in months (positive integer)
        include_schedule: Attach the amortization schedule
        start_date: First installment date for the schedule

    Returns:
        EMI result with all monetary values rounded to 2 decimals

    Raises:
        CalculationValidationError: If any input is missing or out of range
    """
    loan_amount, interest_rate, tenure_months = validate_emi_inputs(
        loan_amount, interest_rate, tenure_months
    )

    monthly_emi = ensure_finite(
        calculate_payment(loan_amount, interest_rate, tenure_months), "Monthly EMI"
    )
    total_payable = monthly_emi * tenure_months
    total_interest = total_payable - loan_amount

    logger.debug(
        f"EMI for {loan_amount} at {interest_rate}% over {tenure_months} months: {monthly_emi}"
    )

    result = {
        "loan_amount": loan_amount,
        "interest_rate": interest_rate,
        "tenure_months": tenure_months,
        "monthly_emi": round_money(monthly_emi),
        "total_interest": round_money(total_interest),
        "total_payable": round_money(total_payable),
        "amortization_schedule": None,
    }

    if include_schedule:
        result["amortization_schedule"] = generate_amortization_schedule(
            loan_amount, interest_rate, tenure_months, monthly_emi, start_date
        )

    return result
