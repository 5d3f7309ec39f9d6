"""
Income Tax Calculations

Slab-based income tax with age-dependent exemption limits, capped
deductions and a flat health and education cess.
"""

import logging
import math
from typing import List, Dict, Optional

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    OutOfRangeError,
    require,
    require_choice,
    require_min,
)

logger = logging.getLogger(__name__)

CESS_RATE = 4  # Percent of income tax

AGE_CATEGORIES = ("below-60", "60-80", "above-80")

# (lower bound, upper bound, rate percent)
TAX_SLABS = {
    "below-60": (
        (0, 250000, 0),
        (250000, 500000, 5),
        (500000, 1000000, 20),
        (1000000, math.inf, 30),
    ),
    "60-80": (
        (0, 300000, 0),
        (300000, 500000, 5),
        (500000, 1000000, 20),
        (1000000, math.inf, 30),
    ),
    "above-80": (
        (0, 500000, 0),
        (500000, 1000000, 20),
        (1000000, math.inf, 30),
    ),
}

DEDUCTION_KEYS = ("section80C", "section80D", "hra", "section80G", "other")
DEDUCTION_LIMITS = {"section80C": 150000, "section80D": 100000}


def format_inr(amount: float) -> str:
    """Format a whole amount with Indian digit grouping (e.g. 10,00,000)."""
    digits = str(int(amount))
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def get_tax_slabs(age: str) -> tuple:
    """Return the slab table for an age category."""
    return TAX_SLABS[age]


def calculate_tax_by_slabs(taxable_income: float, slabs: tuple) -> Dict:
    """
    Apply marginal slab rates to taxable income.

    Args:
        taxable_income: Income after deductions
        slabs: Slab table of (lower, upper, rate)

    Returns:
        Total tax and per-slab breakdown
    """
    total_tax = 0.0
    breakdown = []

    for lower, upper, rate in slabs:
        if taxable_income <= lower:
            break

        slab_income = min(taxable_income - lower, upper - lower)
        slab_tax = slab_income * rate / 100
        total_tax += slab_tax

        upper_label = "Above" if math.isinf(upper) else f"₹{format_inr(upper)}"
        breakdown.append(
            {
                "slab": f"₹{format_inr(lower)} - {upper_label}",
                "income": slab_income,
                "rate": rate,
                "tax": slab_tax,
            }
        )

    return {"total_tax": total_tax, "tax_breakdown": breakdown}


def validate_deductions(deductions: Optional[Dict]) -> Dict:
    """Check deductions are finite and non-negative, and fill missing keys with 0."""
    deductions = require(deductions, "deductions", "Deductions")
    if not isinstance(deductions, dict):
        raise OutOfRangeError("deductions", "Deductions must be an object")

    cleaned = {}
    for key in DEDUCTION_KEYS:
        value = deductions.get(key) or 0
        if not math.isfinite(value):
            raise OutOfRangeError(key, f"Deduction {key} must be a finite number")
        if value < 0:
            raise OutOfRangeError(key, f"Deduction {key} cannot be negative")
        cleaned[key] = float(value)
    return cleaned


def calculate_deductions(deductions: Dict) -> float:
    """Total deductions after statutory caps."""
    return sum(
        min(deductions.get(key, 0), DEDUCTION_LIMITS.get(key, math.inf))
        for key in DEDUCTION_KEYS
    )


def calculate_tax(
    annual_income: Optional[float],
    age: Optional[str],
    deductions: Optional[Dict] = None,
) -> Dict:
    """
    Calculate income tax payable.

    Args:
        annual_income: Gross annual income (>= 0)
        age: Age category ('below-60', '60-80' or 'above-80')
        deductions: Claimed deductions keyed by section

    Returns:
        Tax result with slab breakdown, cess and effective rate
    """
    annual_income = require_min(
        annual_income, "annualIncome", "Annual income", 0,
        "Annual income must be greater than or equal to 0",
    )
    age = require_choice(age, "age", "Age category", AGE_CATEGORIES, "Invalid age category")
    deductions = validate_deductions({} if deductions is None else deductions)

    total_deductions = calculate_deductions(deductions)
    taxable_income = max(0.0, annual_income - total_deductions)

    slab_result = calculate_tax_by_slabs(taxable_income, get_tax_slabs(age))
    income_tax = slab_result["total_tax"]
    cess = income_tax * CESS_RATE / 100
    total_tax_payable = income_tax + cess
    effective_tax_rate = (
        total_tax_payable / annual_income * 100 if annual_income > 0 else 0.0
    )

    logger.debug(f"Tax on {taxable_income} ({age}): {total_tax_payable}")

    return {
        "annual_income": annual_income,
        "age": age,
        "deductions": deductions,
        "total_deductions": round_money(total_deductions),
        "taxable_income": round_money(taxable_income),
        "tax_slabs": [
            {
                "slab": row["slab"],
                "income": round_money(row["income"]),
                "rate": row["rate"],
                "tax": round_money(row["tax"]),
            }
            for row in slab_result["tax_breakdown"]
        ],
        "income_tax": round_money(income_tax),
        "cess": round_money(cess),
        "total_tax_payable": round_money(total_tax_payable),
        "effective_tax_rate": round_money(effective_tax_rate),
        "after_tax_income": round_money(annual_income - total_tax_payable),
    }
