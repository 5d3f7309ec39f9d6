"""
Finance tool API endpoints.

Each endpoint hands the request fields to its calculator; validation
failures surface as 400 responses through the app's exception handlers.
"""

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter
from pydantic import Field

from freetools.api.schemas import CamelModel, ToolResponse
from freetools.calculations import (
    budget,
    deposit,
    eligibility,
    emi,
    interest,
    retirement,
    sip,
    tax,
)

router = APIRouter()


# ---------- EMI ----------
class EMIInput(CamelModel):
    """Input for EMI calculation."""

    loan_amount: Optional[float] = None
    interest_rate: Optional[float] = None
    tenure_months: Optional[float] = None
    include_schedule: bool = False
    start_date: Optional[date] = None


class AmortizationRow(CamelModel):
    month: int
    date: Optional[str] = None
    opening_balance: float
    payment: float
    principal: float
    interest: float
    balance: float


class EMIResult(CamelModel):
    """Calculated EMI and totals."""

    loan_amount: float
    interest_rate: float
    tenure_months: int
    monthly_emi: float = Field(alias="monthlyEMI")
    total_interest: float
    total_payable: float
    amortization_schedule: Optional[List[AmortizationRow]] = None


@router.post("/emi-calculator/calculate", response_model=ToolResponse[EMIResult])
async def calculate_emi(inputs: EMIInput):
    """Calculate EMI and, on request, the amortization schedule."""
    result = emi.calculate_emi(
        inputs.loan_amount,
        inputs.interest_rate,
        inputs.tenure_months,
        include_schedule=inputs.include_schedule,
        start_date=inputs.start_date,
    )
    return {"success": True, "data": result}


# ---------- Simple / compound interest ----------
class InterestInput(CamelModel):
    """Input for interest calculation."""

    principal: Optional[float] = None
    interest_rate: Optional[float] = None
    time_period: Optional[float] = None
    interest_type: Optional[str] = None


class YearEntry(CamelModel):
    year: int
    years_elapsed: float
    principal_at_start: float
    interest_for_year: float
    total_at_end: float


class InterestResult(CamelModel):
    principal: float
    interest_rate: float
    time_period: float
    interest_type: str
    interest_amount: float
    total_amount: float
    growth_rate: float
    year_wise_breakdown: List[YearEntry]


@router.post(
    "/interest-calculator/calculate", response_model=ToolResponse[InterestResult]
)
async def calculate_interest(inputs: InterestInput):
    """Calculate simple or compound interest with a year-wise breakdown."""
    result = interest.calculate_interest(
        inputs.principal,
        inputs.interest_rate,
        inputs.time_period,
        inputs.interest_type,
    )
    return {"success": True, "data": result}


# ---------- SIP ----------
class SIPInput(CamelModel):
    monthly_investment: Optional[float] = None
    investment_period: Optional[float] = None
    expected_roi: Optional[float] = Field(None, alias="expectedROI")


class SIPGrowthRow(CamelModel):
    year: int
    total_investment: float
    estimated_returns: float
    total_value: float


class SIPResult(CamelModel):
    monthly_investment: float
    investment_period: float
    expected_roi: float = Field(alias="expectedROI")
    total_investment: float
    estimated_returns: float
    total_value: float
    returns_percentage: float
    year_wise_growth: List[SIPGrowthRow]


@router.post("/sip-calculator/calculate", response_model=ToolResponse[SIPResult])
async def calculate_sip(inputs: SIPInput):
    """Calculate SIP maturity value."""
    result = sip.calculate_sip(
        inputs.monthly_investment, inputs.investment_period, inputs.expected_roi
    )
    return {"success": True, "data": result}


# ---------- Fixed deposit ----------
class FDInput(CamelModel):
    principal: Optional[float] = None
    interest_rate: Optional[float] = None
    tenure: Optional[float] = None


class FDResult(CamelModel):
    principal: float
    interest_rate: float
    tenure: float
    compounding_frequency: int
    maturity_amount: float
    total_interest_earned: float
    effective_rate: float


@router.post("/fd-calculator/calculate", response_model=ToolResponse[FDResult])
async def calculate_fd(inputs: FDInput):
    """Calculate fixed deposit maturity with quarterly compounding."""
    result = deposit.calculate_fd(inputs.principal, inputs.interest_rate, inputs.tenure)
    return {"success": True, "data": result}


# ---------- Retirement corpus ----------
class RetirementInput(CamelModel):
    current_age: Optional[float] = None
    retirement_age: Optional[float] = None
    monthly_savings: Optional[float] = None
    expected_roi: Optional[float] = Field(None, alias="expectedROI")


class RetirementGrowthRow(CamelModel):
    year: int
    age: float
    total_invested: float
    corpus: float


class RetirementResult(CamelModel):
    current_age: float
    retirement_age: float
    years_until_retirement: float
    monthly_savings: float
    expected_roi: float = Field(alias="expectedROI")
    retirement_corpus: float
    total_savings_invested: float
    total_returns_earned: float
    monthly_pension_estimate: float
    year_wise_growth: List[RetirementGrowthRow]


@router.post(
    "/retirement-corpus-calculator/calculate",
    response_model=ToolResponse[RetirementResult],
)
async def calculate_retirement_corpus(inputs: RetirementInput):
    """Calculate the corpus accumulated by retirement."""
    result = retirement.calculate_retirement_corpus(
        inputs.current_age,
        inputs.retirement_age,
        inputs.monthly_savings,
        inputs.expected_roi,
    )
    return {"success": True, "data": result}


# ---------- Loan eligibility ----------
class EligibilityInput(CamelModel):
    monthly_income: Optional[float] = None
    emi_capacity: Optional[float] = None
    interest_rate: Optional[float] = None
    loan_tenure: Optional[float] = None


class EligibilityDetails(CamelModel):
    income_multiplier: float
    debt_to_income_ratio: float


class EligibilityResult(CamelModel):
    monthly_income: float
    emi_capacity: float
    emi_capacity_percentage: float
    interest_rate: float
    loan_tenure: float
    eligible_loan_amount: float
    maximum_emi: float = Field(alias="maximumEMI")
    total_interest_payable: float
    total_amount_payable: float
    eligibility_details: EligibilityDetails


@router.post(
    "/loan-eligibility-calculator/calculate",
    response_model=ToolResponse[EligibilityResult],
)
async def calculate_loan_eligibility(inputs: EligibilityInput):
    """Calculate the largest loan an EMI capacity supports."""
    result = eligibility.calculate_loan_eligibility(
        inputs.monthly_income,
        inputs.emi_capacity,
        inputs.interest_rate,
        inputs.loan_tenure,
    )
    return {"success": True, "data": result}


# ---------- Income tax ----------
class DeductionsInput(CamelModel):
    section_80c: Optional[float] = Field(None, alias="section80C")
    section_80d: Optional[float] = Field(None, alias="section80D")
    hra: Optional[float] = None
    section_80g: Optional[float] = Field(None, alias="section80G")
    other: Optional[float] = None


class IncomeTaxInput(CamelModel):
    annual_income: Optional[float] = None
    age: Optional[str] = None
    deductions: Optional[DeductionsInput] = None


class TaxSlabRow(CamelModel):
    slab: str
    income: float
    rate: float
    tax: float


class IncomeTaxResult(CamelModel):
    annual_income: float
    age: str
    deductions: Dict[str, float]
    total_deductions: float
    taxable_income: float
    tax_slabs: List[TaxSlabRow]
    income_tax: float
    cess: float
    total_tax_payable: float
    effective_tax_rate: float
    after_tax_income: float


@router.post(
    "/income-tax-calculator/calculate", response_model=ToolResponse[IncomeTaxResult]
)
async def calculate_income_tax(inputs: IncomeTaxInput):
    """Calculate income tax by slabs for an age category."""
    deductions = (
        inputs.deductions.model_dump(by_alias=True) if inputs.deductions else None
    )
    result = tax.calculate_tax(inputs.annual_income, inputs.age, deductions)
    return {"success": True, "data": result}


# ---------- Budget planner ----------
class ExpenseInput(CamelModel):
    category: Optional[str] = None
    amount: Optional[float] = None


class BudgetInput(CamelModel):
    income: Optional[float] = None
    expenses: Optional[List[ExpenseInput]] = None


class ExpenseShare(CamelModel):
    category: str
    amount: float
    percentage: float


class ChartPoint(CamelModel):
    category: str
    value: float
    percentage: float


class BudgetBreakdown(CamelModel):
    by_category: List[ExpenseShare]
    chart_data: List[ChartPoint]


class BudgetResult(CamelModel):
    income: float
    expenses: List[ExpenseShare]
    total_expenses: float
    savings: float
    savings_percentage: float
    is_deficit: bool
    breakdown: BudgetBreakdown


@router.post("/budget-planner/calculate", response_model=ToolResponse[BudgetResult])
async def calculate_budget(inputs: BudgetInput):
    """Summarize income, expenses and savings."""
    expenses = None
    if inputs.expenses is not None:
        expenses = [expense.model_dump() for expense in inputs.expenses]
    result = budget.calculate_budget(inputs.income, expenses)
    return {"success": True, "data": result}
