"""Monthly budget summary: savings and per-category spending shares."""

import logging
import math
from typing import List, Dict, Optional

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    MissingFieldError,
    OutOfRangeError,
    require,
    require_positive,
)

logger = logging.getLogger(__name__)


def validate_budget_inputs(income: Optional[float], expenses: Optional[List[Dict]]):
    """Check income is positive and every expense has a category and a usable amount."""
    income = require_positive(income, "income", "Income", "Income must be greater than 0")
    expenses = require(expenses, "expenses", "Expenses")
    if not isinstance(expenses, list):
        raise OutOfRangeError("expenses", "Expenses must be an array")

    for index, expense in enumerate(expenses):
        category = expense.get("category")
        if not category or not isinstance(category, str):
            raise MissingFieldError(
                "expenses", f"Expense at index {index} must have a valid category"
            )
        amount = expense.get("amount") or 0
        if not math.isfinite(amount):
            raise OutOfRangeError(
                "expenses", f"Expense amount at index {index} must be a finite number"
            )
        if amount < 0:
            raise OutOfRangeError(
                "expenses", f"Expense amount at index {index} cannot be negative"
            )

    return income, expenses


def calculate_savings(income: float, total_expenses: float) -> Dict:
    """Savings (negative for a deficit) and their share of income."""
    savings = income - total_expenses
    return {
        "savings": round_money(savings),
        "savings_percentage": round_money(savings / income * 100),
        "is_deficit": savings < 0,
    }


def calculate_percentages(expenses: List[Dict], total_expenses: float) -> List[Dict]:
    """Non-zero expenses, largest first, with their share of total spending."""
    rows = sorted(
        (e for e in expenses if (e.get("amount") or 0) > 0),
        key=lambda e: e["amount"],
        reverse=True,
    )
    return [
        {
            "category": e["category"],
            "amount": round_money(e["amount"]),
            "percentage": round_money(e["amount"] / total_expenses * 100),
        }
        for e in rows
    ]


def calculate_budget(income: Optional[float], expenses: Optional[List[Dict]]) -> Dict:
    """
    Summarize a monthly budget.

    Args:
        income: Monthly income (> 0)
        expenses: List of {"category": str, "amount": float >= 0}

    Returns:
        Totals, savings and category breakdown
    """
    income, expenses = validate_budget_inputs(income, expenses)

    total_expenses = sum(e.get("amount") or 0 for e in expenses)
    by_category = calculate_percentages(expenses, total_expenses)
    logger.debug(f"Budget for income {income}: expenses total {total_expenses}")

    return {
        "income": income,
        "expenses": by_category,
        "total_expenses": round_money(total_expenses),
        **calculate_savings(income, total_expenses),
        "breakdown": {
            "by_category": by_category,
            "chart_data": [
                {
                    "category": row["category"],
                    "value": row["amount"],
                    "percentage": row["percentage"],
                }
                for row in by_category
            ],
        },
    }
