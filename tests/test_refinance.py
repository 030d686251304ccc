"""Tests for the refinance calculator."""
from datetime import date
from decimal import Decimal

import pytest

from mortgage_calculators.errors import PercentageOutOfRangeError
from mortgage_calculators.finance.money import to_dollar
from mortgage_calculators.finance.primitives import payment
from mortgage_calculators.models.refinance import CurrentLoan, RefinanceLoan, RefinanceRequest, TaxRates
from mortgage_calculators.services.refinance_service import calculate_refinance

START = date(2025, 1, 1)


def _make_request(current=None, refinance=None, tax_rates=None, **overrides) -> RefinanceRequest:
    current_loan = dict(
        original_loan_amount=Decimal(320_000),
        interest_rate=Decimal(7),
        term=30,
        pmi=Decimal("0.5"),
        months_paid=24,
    )
    current_loan.update(current or {})
    refinance_loan = dict(
        interest_rate=Decimal("5.75"),
        term=15,
        points=Decimal(1),
        origination_fees=Decimal(0),
        closing_costs=Decimal(1200),
        years_before_sale=5,
    )
    refinance_loan.update(refinance or {})
    taxes = dict(federal_tax_rate=Decimal(2), state_tax_rate=Decimal(5))
    taxes.update(tax_rates or {})
    defaults = dict(
        home_value=Decimal(400_000),
        current_loan=CurrentLoan(**current_loan),
        refinance_loan=RefinanceLoan(**refinance_loan),
        tax_rates=TaxRates(**taxes),
        start_date=START,
    )
    defaults.update(overrides)
    return RefinanceRequest(**defaults)


# --- Current loan leg ---


def test_current_loan_started_months_paid_ago():
    result = calculate_refinance(_make_request())
    am = result.current_loan.amortization
    assert am.start_date == date(2023, 1, 1)
    assert am.periods == 360
    assert result.current_loan.loan_amount == Decimal("320000.00")


def test_remaining_balance_read_at_months_paid():
    result = calculate_refinance(_make_request())
    schedule = result.current_loan.amortization.schedule
    assert result.current_loan.remaining_balance == schedule[23].balance
    assert result.current_loan.remaining_balance < Decimal(320_000)


def test_current_window_figures():
    result = calculate_refinance(_make_request())
    schedule = result.current_loan.amortization.schedule
    window = schedule[24:84]
    assert result.current_loan.interest_paid == sum(p.interest for p in window)
    assert result.current_loan.balance_at_sale == schedule[83].balance
    assert result.current_loan.tax_savings == to_dollar(result.current_loan.interest_paid * 7 / 100)
    current_payment = payment(Decimal(320_000), Decimal(7), 30)
    assert result.current_loan.monthly_payment == to_dollar(current_payment)
    assert result.current_loan.total_monthly_payments == to_dollar(current_payment * 60)


# --- Refinance leg ---


def test_refinance_principal_is_remaining_balance():
    result = calculate_refinance(_make_request())
    refi = result.refinance_loan
    assert refi.loan_amount == result.current_loan.remaining_balance
    assert refi.amortization.balance == refi.loan_amount
    assert refi.amortization.periods == 180
    assert refi.amortization.start_date == START


def test_refinance_window_figures():
    result = calculate_refinance(_make_request())
    schedule = result.refinance_loan.amortization.schedule
    assert result.refinance_loan.interest_paid == sum(p.interest for p in schedule[:60])
    assert result.refinance_loan.balance_at_sale == schedule[59].balance


def test_points_priced_on_remaining_balance():
    result = calculate_refinance(_make_request(refinance={"origination_fees": Decimal(1)}))
    remaining = result.current_loan.remaining_balance
    assert result.refinance_loan.points == to_dollar(remaining / 100)
    assert result.refinance_loan.origination_fees == to_dollar(remaining / 100)
    assert result.total_closing_costs == to_dollar(2 * remaining / 100 + 1200)


# --- Net figures ---


def test_net_figures_are_consistent():
    result = calculate_refinance(_make_request())
    tolerance = Decimal("0.03")
    assert abs(
        result.monthly_payment_savings
        - (result.current_loan.total_monthly_payments - result.refinance_loan.total_monthly_payments)
    ) <= tolerance
    assert abs(
        result.balance_losses
        - (result.refinance_loan.balance_at_sale - result.current_loan.balance_at_sale)
    ) <= tolerance
    assert abs(result.total_losses - (result.balance_losses + result.tax_savings_losses)) <= tolerance
    assert abs(
        result.total_benefit
        - (result.monthly_payment_savings - result.total_losses - result.total_closing_costs)
    ) <= tolerance


def test_shorter_refinance_term_costs_more_monthly_but_pays_down_faster():
    result = calculate_refinance(_make_request())
    assert result.monthly_payment_savings < 0
    assert result.balance_losses < 0


# --- Edge cases ---


def test_zero_years_before_sale_collapses_window():
    result = calculate_refinance(_make_request(
        refinance={"years_before_sale": 0}, tax_rates={"federal_tax_rate": Decimal(36)},
    ))
    assert result.refinance_loan.loan_amount > 0
    assert result.monthly_payment_savings == 0
    assert result.current_loan.interest_paid == 0
    assert result.refinance_loan.interest_paid == 0
    assert result.tax_savings_losses == 0
    assert result.current_loan.balance_at_sale == result.current_loan.remaining_balance
    assert result.refinance_loan.balance_at_sale == result.refinance_loan.loan_amount
    assert result.balance_losses == 0
    assert result.total_benefit == -result.total_closing_costs


def test_zero_months_paid_uses_original_amount():
    result = calculate_refinance(_make_request(
        current={"months_paid": 0}, refinance={"years_before_sale": 0},
    ))
    assert result.current_loan.remaining_balance == Decimal("320000.00")
    assert result.refinance_loan.loan_amount == Decimal("320000.00")
    assert result.current_loan.amortization.start_date == START


def test_holding_window_past_end_of_current_loan():
    result = calculate_refinance(_make_request(
        current={"months_paid": 348}, refinance={"years_before_sale": 30},
    ))
    assert result.current_loan.balance_at_sale == 0
    assert result.current_loan.interest_paid == sum(
        p.interest for p in result.current_loan.amortization.schedule[348:]
    )


def _under_water_request() -> RefinanceRequest:
    return _make_request(
        current={
            "original_loan_amount": Decimal(420_000),
            "interest_rate": Decimal("6.25"),
            "months_paid": 4,
            "pmi": Decimal(4),
        },
        refinance={
            "closing_costs": Decimal(500),
            "interest_rate": Decimal("5.25"),
            "pmi": Decimal(4),
            "points": Decimal("1.5"),
            "term": 30,
            "years_before_sale": 0,
        },
        tax_rates={"federal_tax_rate": Decimal("5.25"), "state_tax_rate": Decimal("5.3")},
    )


def test_ltv_over_100_computes_by_default():
    result = calculate_refinance(_under_water_request())
    assert result.refinance_loan.loan_amount > 0
    assert result.refinance_loan.loan_amount < Decimal(420_000)
    assert result.current_loan.amortization.months_with_pmi > 0
    assert result.refinance_loan.amortization.months_with_pmi > 0


def test_ltv_over_100_rejected_in_strict_mode(strict_ltv):
    with pytest.raises(PercentageOutOfRangeError):
        calculate_refinance(_under_water_request())
