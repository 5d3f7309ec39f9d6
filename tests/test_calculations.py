"""
Tests for the financial calculation engine.
"""

import math
import pytest
from datetime import date

from freetools.calculations.annuity import (
    future_value_due,
    future_value_ordinary,
    loan_amount_from_emi,
    year_wise_growth,
)
from freetools.calculations.deposit import calculate_effective_rate, calculate_fd
from freetools.calculations.eligibility import calculate_loan_eligibility
from freetools.calculations.emi import (
    calculate_emi,
    calculate_payment,
    calculate_total_interest,
    generate_amortization_schedule,
)
from freetools.calculations.interest import (
    calculate_interest,
    generate_year_wise_breakdown,
)
from freetools.calculations.retirement import calculate_retirement_corpus
from freetools.calculations.sip import calculate_sip


class TestEMI:
    """Test EMI calculation."""

    def test_reference_loan(self):
        """Test 1 lakh at 10% over 12 months."""
        result = calculate_emi(100000, 10, 12)
        assert result["monthly_emi"] == 8791.59
        # Totals are rounded from the unrounded EMI, so allow a few cents
        assert result["total_payable"] == pytest.approx(105499.08, abs=0.05)
        assert result["total_interest"] == pytest.approx(5499.08, abs=0.05)
        assert result["amortization_schedule"] is None

    def test_totals_consistent(self):
        """Test total interest equals total payable minus principal."""
        result = calculate_emi(250000, 8.5, 36)
        assert result["total_interest"] == pytest.approx(
            result["total_payable"] - 250000, abs=0.02
        )

    def test_zero_rate_is_straight_line(self):
        """Test zero interest divides principal evenly."""
        result = calculate_emi(120000, 0, 12)
        assert result["monthly_emi"] == 10000.0
        assert result["total_interest"] == 0.0
        assert result["total_payable"] == 120000.0

    def test_payment_limit_as_rate_approaches_zero(self):
        """Test the annuity formula converges to the straight-line payment."""
        assert calculate_payment(120000, 1e-6, 12) == pytest.approx(10000, rel=1e-6)

    def test_integral_float_tenure_accepted(self):
        """Test a whole-number float tenure is treated as an integer."""
        result = calculate_emi(100000, 10, 12.0)
        assert result["tenure_months"] == 12
        assert isinstance(result["tenure_months"], int)

    def test_very_large_loan_amount(self):
        """Test amounts beyond 28 significant digits still round."""
        result = calculate_emi(1e30, 10, 12)
        assert result["monthly_emi"] == pytest.approx(
            calculate_payment(1e30, 10, 12), rel=1e-12
        )
        assert result["total_payable"] == pytest.approx(
            result["monthly_emi"] * 12, rel=1e-12
        )


class TestAmortizationSchedule:
    """Test the amortization schedule."""

    def test_schedule_length(self):
        """Test one row per month."""
        schedule = generate_amortization_schedule(100000, 10, 12)
        assert len(schedule) == 12
        assert [row["month"] for row in schedule] == list(range(1, 13))

    def test_final_balance_is_zero(self):
        """Test the loan is fully repaid."""
        schedule = generate_amortization_schedule(500000, 9.5, 240)
        assert schedule[-1]["balance"] == 0

    def test_principal_conservation(self):
        """Test principal components add back up to the loan amount."""
        months = 60
        schedule = generate_amortization_schedule(300000, 7.25, months)
        total_principal = sum(row["principal"] for row in schedule)
        assert abs(total_principal - 300000) <= months * 0.01

    def test_payments_match_total_payable(self):
        """Test principal plus interest across the schedule equals total payable."""
        result = calculate_emi(100000, 10, 12, include_schedule=True)
        schedule = result["amortization_schedule"]
        paid = sum(row["principal"] + row["interest"] for row in schedule)
        assert abs(paid - result["total_payable"]) <= 12 * 0.02

    def test_total_interest_from_schedule(self):
        """Test schedule interest agrees with the EMI summary."""
        result = calculate_emi(100000, 10, 12, include_schedule=True)
        total = calculate_total_interest(result["amortization_schedule"])
        assert total == pytest.approx(result["total_interest"], abs=0.12)

    def test_balance_never_negative(self):
        """Test balances stay at or above zero."""
        schedule = generate_amortization_schedule(1000, 99, 7)
        assert all(row["balance"] >= 0 for row in schedule)

    def test_opening_balance_follows_previous_balance(self):
        """Test each month opens where the previous one closed."""
        schedule = generate_amortization_schedule(100000, 10, 12)
        for previous, current in zip(schedule, schedule[1:]):
            assert current["opening_balance"] == pytest.approx(
                previous["balance"], abs=0.02
            )

    def test_dates_without_start(self):
        """Test rows carry no date when no start date is given."""
        schedule = generate_amortization_schedule(100000, 10, 3)
        assert all(row["date"] is None for row in schedule)

    def test_dates_advance_by_calendar_month(self):
        """Test payment dates are ISO strings clamped to month end."""
        schedule = generate_amortization_schedule(
            100000, 10, 3, start_date=date(2025, 1, 31)
        )
        assert [row["date"] for row in schedule] == [
            "2025-01-31",
            "2025-02-28",
            "2025-03-31",
        ]


class TestAnnuity:
    """Test shared annuity formulas."""

    @pytest.mark.parametrize(
        "formula", [future_value_ordinary, future_value_due, loan_amount_from_emi]
    )
    def test_zero_rate_degeneracy(self, formula):
        """Test every formula reduces to payment x months at zero rate."""
        assert formula(5000, 0, 120) == 600000

    @pytest.mark.parametrize(
        "formula", [future_value_ordinary, future_value_due, loan_amount_from_emi]
    )
    def test_limit_matches_zero_rate(self, formula):
        """Test a vanishing rate approaches the zero-rate value."""
        assert formula(5000, 1e-6, 120) == pytest.approx(600000, rel=1e-6)

    def test_annuity_due_exceeds_ordinary(self):
        """Test start-of-period payments earn one extra month of interest."""
        ordinary = future_value_ordinary(1000, 12, 12)
        due = future_value_due(1000, 12, 12)
        assert due == pytest.approx(ordinary * 1.01)

    def test_reverse_emi_round_trip(self):
        """Test the EMI of a known principal maps back to that principal."""
        for principal, rate, months in [(100000, 10, 12), (2500000, 8.4, 240)]:
            payment = calculate_payment(principal, rate, months)
            assert loan_amount_from_emi(payment, rate, months) == pytest.approx(
                principal, rel=1e-9
            )

    def test_year_wise_growth_monotonic(self):
        """Test invested and value never decrease year over year."""
        rows = year_wise_growth(2000, 10, 15, due=True)
        assert len(rows) == 15
        for previous, current in zip(rows, rows[1:]):
            assert current["invested"] >= previous["invested"]
            assert current["value"] >= previous["value"]

    def test_year_wise_growth_skips_partial_year(self):
        """Test only completed years are reported."""
        assert len(year_wise_growth(2000, 10, 2.5)) == 2


class TestSIP:
    """Test SIP calculation."""

    def test_reference_sip(self):
        """Test 5,000 a month for 10 years at 12%."""
        result = calculate_sip(5000, 10, 12)
        expected_value = 5000 * ((1.01 ** 120 - 1) / 0.01) * 1.01

        assert result["total_investment"] == 600000.00
        assert result["total_value"] == pytest.approx(expected_value, abs=0.02)
        assert result["estimated_returns"] == pytest.approx(
            result["total_value"] - result["total_investment"], abs=0.02
        )
        assert result["returns_percentage"] == pytest.approx(
            result["estimated_returns"] / result["total_investment"] * 100, abs=0.02
        )

    def test_final_growth_row_matches_total(self):
        """Test the last year of growth equals the overall result."""
        result = calculate_sip(5000, 10, 12)
        last = result["year_wise_growth"][-1]
        assert last["year"] == 10
        assert last["total_value"] == result["total_value"]
        assert last["total_investment"] == result["total_investment"]


class TestRetirementCorpus:
    """Test retirement corpus calculation."""

    def test_corpus(self):
        """Test ordinary-annuity corpus and pension estimate."""
        result = calculate_retirement_corpus(30, 60, 10000, 10)
        months = 360
        rate = 10 / 1200
        expected = 10000 * ((1 + rate) ** months - 1) / rate

        assert result["years_until_retirement"] == 30
        assert result["retirement_corpus"] == pytest.approx(expected, abs=0.02)
        assert result["total_savings_invested"] == 3600000.00
        assert result["monthly_pension_estimate"] == pytest.approx(expected / 240, abs=0.02)

    def test_growth_tracks_age(self):
        """Test growth rows carry the saver's age."""
        result = calculate_retirement_corpus(55, 60, 10000, 10)
        assert [row["age"] for row in result["year_wise_growth"]] == [56, 57, 58, 59, 60]
        assert result["year_wise_growth"][-1]["corpus"] == result["retirement_corpus"]

    def test_custom_retirement_years(self):
        """Test the pension estimate horizon is configurable."""
        result = calculate_retirement_corpus(30, 60, 10000, 10, retirement_years=25)
        assert result["monthly_pension_estimate"] == pytest.approx(
            result["retirement_corpus"] / 300, abs=0.02
        )


class TestLoanEligibility:
    """Test loan eligibility calculation."""

    def test_eligible_amount(self):
        """Test eligible loan inverts the EMI formula."""
        result = calculate_loan_eligibility(50000, 20000, 10, 20)
        expected = loan_amount_from_emi(20000, 10, 240)

        assert result["eligible_loan_amount"] == pytest.approx(expected, abs=0.02)
        assert result["total_amount_payable"] == 4800000.00
        assert result["total_interest_payable"] == pytest.approx(
            4800000 - expected, abs=0.02
        )
        assert result["emi_capacity_percentage"] == 40.0
        assert result["eligibility_details"]["debt_to_income_ratio"] == 40.0
        assert result["maximum_emi"] == 20000

    def test_eligible_amount_repaid_by_capacity(self):
        """Test the EMI on the eligible amount equals the stated capacity."""
        result = calculate_loan_eligibility(80000, 30000, 9, 15)
        payment = calculate_payment(result["eligible_loan_amount"], 9, 180)
        assert payment == pytest.approx(30000, abs=0.02)


class TestFixedDeposit:
    """Test FD calculation."""

    def test_quarterly_maturity(self):
        """Test 10,000 at 6% for one year compounded quarterly."""
        result = calculate_fd(10000, 6, 1)
        assert result["maturity_amount"] == 10613.64
        assert result["total_interest_earned"] == 613.64
        assert result["compounding_frequency"] == 4
        assert result["effective_rate"] == 6.14

    @pytest.mark.parametrize("rate", [1, 4.5, 7.25, 15])
    def test_effective_rate_exceeds_nominal(self, rate):
        """Test EAR is at least the nominal rate."""
        assert calculate_effective_rate(rate) >= rate

    def test_fractional_tenure(self):
        """Test a half-year deposit compounds two quarters."""
        result = calculate_fd(10000, 8, 0.5)
        assert result["maturity_amount"] == pytest.approx(10000 * 1.02 ** 2, abs=0.02)


class TestInterest:
    """Test simple and compound interest."""

    def test_simple_interest(self):
        """Test flat interest over two years."""
        result = calculate_interest(10000, 5, 2, "simple")
        assert result["interest_amount"] == 1000.00
        assert result["total_amount"] == 11000.00
        assert result["growth_rate"] == 10.0

    def test_compound_interest(self):
        """Test annual compounding over two years."""
        result = calculate_interest(10000, 5, 2, "compound")
        assert result["total_amount"] == 11025.00
        assert result["interest_amount"] == 1025.00

    def test_compound_fractional_exponent(self):
        """Test non-integer periods use a fractional exponent."""
        result = calculate_interest(10000, 5, 2.5, "compound")
        assert result["total_amount"] == pytest.approx(10000 * 1.05 ** 2.5, abs=0.02)

    def test_zero_rate(self):
        """Test zero interest leaves the principal unchanged."""
        result = calculate_interest(5000, 0, 3, "compound")
        assert result["interest_amount"] == 0
        assert result["total_amount"] == 5000


class TestYearWiseBreakdown:
    """Test interest year-wise breakdown."""

    def test_whole_years(self):
        """Test one entry per year for integer periods."""
        rows = generate_year_wise_breakdown(10000, 5, 3, "compound")
        assert [row["year"] for row in rows] == [1, 2, 3]
        assert rows[-1]["total_at_end"] == pytest.approx(10000 * 1.05 ** 3)

    def test_fractional_simple_year_is_prorated(self):
        """Test the trailing partial year earns a prorated share."""
        rows = generate_year_wise_breakdown(10000, 5, 2.5, "simple")
        assert [row["year"] for row in rows] == [1, 2, 3]
        assert rows[-1]["years_elapsed"] == 2.5
        assert rows[-1]["interest_for_year"] == pytest.approx(250)
        assert rows[-1]["total_at_end"] == pytest.approx(11250)

    def test_fractional_compound_year_uses_fractional_exponent(self):
        """Test the partial year compounds on the running balance."""
        rows = generate_year_wise_breakdown(10000, 5, 2.5, "compound")
        running = 10000 * 1.05 ** 2
        assert rows[-1]["principal_at_start"] == pytest.approx(running)
        assert rows[-1]["interest_for_year"] == pytest.approx(running * (1.05 ** 0.5 - 1))

    def test_less_than_one_year(self):
        """Test a sub-year period yields a single partial entry."""
        rows = generate_year_wise_breakdown(10000, 12, 0.5, "simple")
        assert len(rows) == 1
        assert rows[0]["year"] == 1
        assert rows[0]["interest_for_year"] == pytest.approx(600)

    @pytest.mark.parametrize("interest_type", ["simple", "compound"])
    @pytest.mark.parametrize("time", [1, 4, 0.75, 3.4, 10.5])
    def test_breakdown_invariants(self, interest_type, time):
        """Test years are contiguous, balances chain and the end matches the total."""
        result = calculate_interest(25000, 7.5, time, interest_type)
        rows = result["year_wise_breakdown"]

        assert [row["year"] for row in rows] == list(range(1, math.ceil(time) + 1))
        for previous, current in zip(rows, rows[1:]):
            assert current["principal_at_start"] == previous["total_at_end"]
        assert rows[-1]["total_at_end"] == pytest.approx(result["total_amount"], abs=0.02)
