"""
Annuity Calculations

Future value of a series of equal monthly payments and the reverse EMI
formula. Shared by the SIP, retirement corpus and loan eligibility
calculators. Rates are annual percentages; at a zero rate every formula
degenerates to payment x months.
"""

from typing import List, Dict


def monthly_rate(annual_rate: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate / 12 / 100


def future_value_ordinary(payment: float, annual_rate: float, months: float) -> float:
    """
    Future value of an ordinary annuity (payments at period end).

    FV = M * ((1 + r)^N - 1) / r
    """
    rate = monthly_rate(annual_rate)

    if rate == 0:
        return payment * months

    factor = (1 + rate) ** months
    return payment * ((factor - 1) / rate)


def future_value_due(payment: float, annual_rate: float, months: float) -> float:
    """
    Future value of an annuity-due (payments at period start).

    FV = M * ((1 + r)^N - 1) / r * (1 + r)
    """
    rate = monthly_rate(annual_rate)

    if rate == 0:
        return payment * months

    return future_value_ordinary(payment, annual_rate, months) * (1 + rate)


def loan_amount_from_emi(emi: float, annual_rate: float, months: float) -> float:
    """
    Principal that a fixed EMI fully amortizes (inverse of the EMI formula).

    P = M * ((1 + r)^N - 1) / (r * (1 + r)^N)
    """
    rate = monthly_rate(annual_rate)

    if rate == 0:
        return emi * months

    factor = (1 + rate) ** months
    return emi * ((factor - 1) / (rate * factor))


def year_wise_growth(
    payment: float, annual_rate: float, years: float, due: bool = False
) -> List[Dict]:
    """
    Project invested amount and accumulated value at the end of each year.

    Args:
        payment: Monthly payment amount
        annual_rate: Annual rate as a percentage
        years: Projection length; partial trailing years are not reported
        due: Use annuity-due instead of ordinary annuity

    Returns:
        Unrounded rows of year, invested and value
    """
    future_value = future_value_due if due else future_value_ordinary
    rows = []

    for year in range(1, int(years) + 1):
        months = year * 12
        rows.append(
            {
                "year": year,
                "invested": payment * months,
                "value": future_value(payment, annual_rate, months),
            }
        )

    return rows
