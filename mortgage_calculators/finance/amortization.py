"""Amortization engine — builds the period-by-period schedule for one loan.

The schedule is produced in a single pass. Totals accumulate on the unrounded
running balance; only the per-period output fields are rounded to cents. PMI
is a fixed monthly amount set from the opening principal and applied while
the post-payment LTV stays above the PMI threshold.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from mortgage_calculators.errors import InvalidArgumentError
from mortgage_calculators.finance.money import ZERO, add_months, as_decimal, to_dollar
from mortgage_calculators.finance.primitives import (
    has_pmi,
    level_payment,
    loan_to_value,
    periodic_rate,
    pmi_annual_amount,
)
from mortgage_calculators.models.amortization import Amortization, AmortizationPeriod

logger = logging.getLogger(__name__)

_MONTHS_PER_YEAR = 12


def build_amortization(
    principal,
    annual_rate,
    periods: int,
    start_date: date,
    home_value,
    annual_pmi=0,
) -> Amortization:
    """Build the monthly amortization schedule for a fixed-rate loan.

    Args:
        principal: Opening loan balance.
        annual_rate: Nominal annual rate as a percentage.
        periods: Number of monthly payments.
        start_date: Date of the first payment.
        home_value: Collateral value used for LTV / PMI decisions.
        annual_pmi: Annual PMI rate as a percentage; 0 disables PMI.

    Returns:
        Amortization with rounded summary fields and a schedule of
        ``periods`` entries.
    """
    if periods <= 0:
        raise InvalidArgumentError(f"periods must be positive, got {periods}")

    principal = as_decimal(principal)
    home_value = as_decimal(home_value)
    annual_pmi = as_decimal(annual_pmi)

    periodic_interest = as_decimal(annual_rate) / 100 / _MONTHS_PER_YEAR
    periodic_payment = level_payment(principal, periodic_rate(annual_rate), periods)

    opening_ltv = loan_to_value(principal, home_value)
    if opening_ltv > 100:
        logger.warning("Opening LTV %.2f%% exceeds 100%%", opening_ltv)
    monthly_pmi = ZERO
    if has_pmi(opening_ltv, annual_pmi):
        monthly_pmi = to_dollar(pmi_annual_amount(principal, annual_pmi) / _MONTHS_PER_YEAR)

    balance = principal
    total_interest = ZERO
    total_payment = ZERO
    schedule: list[AmortizationPeriod] = []

    for i in range(periods):
        interest = balance * periodic_interest
        principal_paid = periodic_payment - interest
        balance = balance + interest - periodic_payment

        total_interest += interest
        total_payment += periodic_payment

        # PMI drops off for good once the balance brings LTV to 80% or below
        period_pmi = ZERO
        if monthly_pmi > 0 and balance > 0 and has_pmi(loan_to_value(balance, home_value), annual_pmi):
            period_pmi = monthly_pmi

        schedule.append(AmortizationPeriod(
            index=i + 1,
            date=add_months(start_date, i),
            interest=to_dollar(interest),
            principal=to_dollar(principal_paid),
            balance=to_dollar(balance),
            pmi=period_pmi,
        ))

    logger.debug(
        "Amortized %s over %d periods at %s%%: payment=%s, pmi=%s",
        principal, periods, annual_rate, to_dollar(periodic_payment), monthly_pmi,
    )

    return Amortization(
        balance=to_dollar(principal),
        periodic_interest=periodic_interest,
        periods=periods,
        periodic_payment=to_dollar(periodic_payment),
        total_interest=to_dollar(total_interest),
        total_payment=to_dollar(total_payment),
        start_date=start_date,
        end_date=schedule[-1].date,
        schedule=schedule,
    )


def balance_after(amortization: Amortization, months: int, opening=None) -> Decimal:
    """Scheduled balance after ``months`` payments.

    ``months == 0`` returns ``opening`` (the amortization's own opening balance
    when not given); past the end of the schedule the loan is paid off.
    """
    if months <= 0:
        return as_decimal(opening) if opening is not None else amortization.balance
    if months > len(amortization.schedule):
        return ZERO
    return amortization.schedule[months - 1].balance


def interest_between(amortization: Amortization, after_month: int, through_month: int) -> Decimal:
    """Scheduled interest paid in months ``after_month + 1`` .. ``through_month``."""
    return sum(
        (p.interest for p in amortization.schedule if after_month < p.index <= through_month),
        ZERO,
    )
