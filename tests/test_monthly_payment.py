"""Tests for the monthly payment calculator."""
from datetime import date
from decimal import Decimal

from mortgage_calculators.finance.amortization import build_amortization
from mortgage_calculators.finance.primitives import has_pmi, loan_to_value
from mortgage_calculators.models.monthly_payment import MonthlyPaymentRequest
from mortgage_calculators.services.monthly_payment_service import (
    _mark_pmi_periods,
    calculate_monthly_payment,
)

START = date(2025, 1, 1)


def _make_request(**overrides) -> MonthlyPaymentRequest:
    defaults = dict(
        loan_amount=Decimal(280_000),
        home_value=Decimal(350_000),
        interest_rate=Decimal("6.5"),
        term=30,
        annual_taxes=Decimal(3000),
        annual_insurance=Decimal(1500),
        pmi=Decimal("1.0"),
        start_date=START,
    )
    defaults.update(overrides)
    return MonthlyPaymentRequest(**defaults)


def test_no_pmi_at_80_percent_ltv():
    result = calculate_monthly_payment(_make_request())
    assert abs(result.monthly_payment - Decimal("2144.79")) <= Decimal("0.01")
    assert result.monthly_pmi == 0
    assert result.amortization.months_with_pmi == 0
    assert result.loan_to_value == Decimal("80.00")


def test_with_pmi_above_80_percent_ltv():
    result = calculate_monthly_payment(_make_request(loan_amount=Decimal(300_000)))
    assert abs(result.monthly_payment - Decimal("2521.20")) <= Decimal("0.01")
    assert result.monthly_pmi == Decimal("250.00")
    assert result.amortization.months_with_pmi == 62
    assert result.loan_to_value > 80


def test_breakdown_components_sum_to_total():
    result = calculate_monthly_payment(_make_request(loan_amount=Decimal(300_000)))
    assert result.monthly_principal_and_interest == Decimal("1896.20")
    assert result.monthly_taxes == Decimal("250.00")
    assert result.monthly_insurance == Decimal("125.00")
    parts = (
        result.monthly_principal_and_interest + result.monthly_taxes
        + result.monthly_insurance + result.monthly_pmi
    )
    assert abs(parts - result.monthly_payment) <= Decimal("0.02")


def test_pmi_mask_follows_period_balance():
    result = calculate_monthly_payment(_make_request(loan_amount=Decimal(300_000)))
    for period in result.amortization.schedule:
        ltv = period.balance / Decimal(350_000) * 100
        if ltv >= 80:
            assert period.pmi == Decimal("250.00")
        else:
            assert period.pmi == 0


def test_mask_charges_pmi_at_exactly_80_percent_ltv():
    # the engine charges PMI only above 80; the payment calculator also at exactly 80
    am = build_amortization(300_000, "6.5", 360, START, 350_000, "1.0")
    boundary = am.schedule[0].model_copy(update={"balance": Decimal("280000.00")})
    below = am.schedule[1].model_copy(update={"balance": Decimal("279999.99")})
    am = am.model_copy(update={"schedule": [boundary, below]})

    assert loan_to_value(boundary.balance, Decimal(350_000)) == 80
    assert has_pmi(80, "1.0") is False

    marked = _mark_pmi_periods(am, Decimal(350_000), Decimal("250.00"))
    assert marked.schedule[0].pmi == Decimal("250.00")
    assert marked.schedule[1].pmi == 0
    assert marked.months_with_pmi == 1


def test_zero_pmi_rate_has_no_pmi_months():
    result = calculate_monthly_payment(_make_request(loan_amount=Decimal(300_000), pmi=Decimal(0)))
    assert result.monthly_pmi == 0
    assert result.amortization.months_with_pmi == 0
    assert abs(result.monthly_payment - Decimal("2271.20")) <= Decimal("0.01")


def test_schedule_spans_term():
    result = calculate_monthly_payment(_make_request(term=15))
    assert len(result.amortization.schedule) == 180
    assert result.amortization.end_date == date(2039, 12, 1)
