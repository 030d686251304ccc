"""Affordability calculator.

Derives the largest loan and home value a borrower can carry from their
income, debts and the lender's front/back ratio limits.
"""
from __future__ import annotations

import logging
from datetime import date

from mortgage_calculators.finance.amortization import build_amortization
from mortgage_calculators.finance.money import ZERO, to_dollar
from mortgage_calculators.finance.primitives import (
    has_pmi,
    principal_from_payment,
    round_down_to_hundred,
)
from mortgage_calculators.models.affordability import AffordabilityRequest, AffordabilityResponse

logger = logging.getLogger(__name__)


def _loan_and_home_value(max_pi, request: AffordabilityRequest):
    loan_amount = principal_from_payment(max_pi, request.interest_rate, request.term)
    home_value = loan_amount / (1 - request.down_payment / 100)
    return loan_amount, home_value


def calculate_affordability(request: AffordabilityRequest) -> AffordabilityResponse:
    """Estimate the maximum affordable home.

    PMI is handled with a single refinement pass: if the first-pass loan
    carries PMI, that PMI (priced on the first-pass loan amount) comes out of
    the P&I budget and the loan is re-derived once.
    """
    start_date = request.start_date or date.today()
    income = request.total_monthly_income
    expenses = request.total_monthly_expenses

    monthly_taxes = request.annual_taxes / 12
    monthly_insurance = request.annual_insurance / 12

    max_front = request.front_ratio * income / 100
    max_back = request.back_ratio * income / 100 - expenses
    max_monthly_payment = min(max_front, max_back)

    max_pi = max_monthly_payment - monthly_taxes - monthly_insurance
    loan_amount, home_value = _loan_and_home_value(max_pi, request)

    # loan / home value is exactly 1 - down payment; taking it from the
    # percentage keeps 20% down from landing a hair above the PMI threshold
    first_pass_ltv = 100 - request.down_payment
    monthly_pmi = ZERO
    if has_pmi(first_pass_ltv, request.pmi):
        monthly_pmi = loan_amount * request.pmi / 100 / 12
        max_pi -= monthly_pmi
        loan_amount, home_value = _loan_and_home_value(max_pi, request)

    down_payment = home_value - loan_amount
    loan_amount = round_down_to_hundred(loan_amount)
    down_payment = round_down_to_hundred(down_payment)
    home_value = loan_amount + down_payment

    amortization = build_amortization(
        loan_amount, request.interest_rate, request.term * 12, start_date, home_value, request.pmi,
    )

    monthly_total = max_pi + monthly_taxes + monthly_insurance + monthly_pmi
    logger.info(
        "Affordability: max payment=%s, loan=%s, home value=%s, pmi=%s",
        to_dollar(max_monthly_payment), loan_amount, home_value, to_dollar(monthly_pmi),
    )

    return AffordabilityResponse(
        monthly_principal_and_interest=to_dollar(max_pi),
        monthly_taxes=to_dollar(monthly_taxes),
        monthly_insurance=to_dollar(monthly_insurance),
        monthly_pmi=to_dollar(monthly_pmi),
        monthly_total=to_dollar(monthly_total),
        monthly_income=to_dollar(income),
        monthly_expenses=to_dollar(expenses),
        actual_front_ratio=to_dollar(100 * monthly_total / income),
        actual_back_ratio=to_dollar(100 * (monthly_total + expenses) / income),
        loan_amount=to_dollar(loan_amount),
        down_payment=to_dollar(down_payment),
        home_value=to_dollar(home_value),
        amortization=amortization,
    )
