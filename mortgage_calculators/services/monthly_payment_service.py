"""Monthly payment calculator — P&I, taxes, insurance and PMI for one loan."""
from __future__ import annotations

import logging
from datetime import date

from mortgage_calculators.finance.amortization import build_amortization
from mortgage_calculators.finance.money import ZERO, to_dollar
from mortgage_calculators.finance.primitives import (
    PMI_LTV_THRESHOLD,
    has_pmi,
    loan_to_value,
    payment,
    pmi_annual_amount,
)
from mortgage_calculators.models.amortization import Amortization
from mortgage_calculators.models.monthly_payment import MonthlyPaymentRequest, MonthlyPaymentResponse

logger = logging.getLogger(__name__)


def _mark_pmi_periods(amortization: Amortization, home_value, monthly_pmi) -> Amortization:
    """Re-tag each period's PMI from its balance against the purchase value.

    Uses LTV >= 80, unlike the engine's own > 80 test, so a period landing
    exactly on 80% still carries PMI here.
    """
    schedule = [
        period.model_copy(update={
            "pmi": monthly_pmi if loan_to_value(period.balance, home_value) >= PMI_LTV_THRESHOLD else ZERO,
        })
        for period in amortization.schedule
    ]
    return amortization.model_copy(update={"schedule": schedule})


def calculate_monthly_payment(request: MonthlyPaymentRequest) -> MonthlyPaymentResponse:
    start_date = request.start_date or date.today()

    ltv = loan_to_value(request.loan_amount, request.home_value)
    annual_pmi = pmi_annual_amount(request.loan_amount, request.pmi) if has_pmi(ltv, request.pmi) else ZERO
    monthly_pmi = annual_pmi / 12
    monthly_taxes = request.annual_taxes / 12
    monthly_insurance = request.annual_insurance / 12
    monthly_pi = payment(request.loan_amount, request.interest_rate, request.term)
    monthly_payment = monthly_pi + monthly_taxes + monthly_insurance + monthly_pmi

    amortization = build_amortization(
        request.loan_amount, request.interest_rate, request.term * 12,
        start_date, request.home_value, request.pmi,
    )
    amortization = _mark_pmi_periods(amortization, request.home_value, to_dollar(monthly_pmi))

    logger.info(
        "Monthly payment: total=%s, P&I=%s, pmi=%s for %d months, LTV=%.2f",
        to_dollar(monthly_payment), to_dollar(monthly_pi), to_dollar(monthly_pmi),
        amortization.months_with_pmi, ltv,
    )

    return MonthlyPaymentResponse(
        monthly_payment=to_dollar(monthly_payment),
        monthly_principal_and_interest=to_dollar(monthly_pi),
        monthly_taxes=to_dollar(monthly_taxes),
        monthly_insurance=to_dollar(monthly_insurance),
        monthly_pmi=to_dollar(monthly_pmi),
        loan_to_value=to_dollar(ltv),
        amortization=amortization,
    )
