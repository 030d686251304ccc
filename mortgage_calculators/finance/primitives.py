"""Loan math primitives shared by every calculator.

All rates are percentages (``6.5`` means 6.5%). Functions accept anything
``as_decimal`` understands and return Decimal; nothing here rounds, rounding
is left to the response boundary.
"""
from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal

from mortgage_calculators.config import settings
from mortgage_calculators.errors import InvalidArgumentError, PercentageOutOfRangeError
from mortgage_calculators.finance.money import ZERO, as_decimal

logger = logging.getLogger(__name__)

PMI_LTV_THRESHOLD = Decimal(80)
_HUNDRED = Decimal(100)


def periodic_rate(annual_rate, payments_per_year: int = 12, compounds_per_year: int = 12) -> Decimal:
    """Effective rate per payment period for a nominal annual rate.

    (1 + annual/100/compounds) ** (compounds/payments) - 1
    """
    per_compound = as_decimal(annual_rate) / _HUNDRED / compounds_per_year
    exponent = Decimal(compounds_per_year) / Decimal(payments_per_year)
    return (1 + per_compound) ** exponent - 1


def _check_frequencies(term_years, payments_per_year: int, compounds_per_year: int) -> None:
    if as_decimal(term_years) <= 0 or payments_per_year <= 0 or compounds_per_year <= 0:
        raise InvalidArgumentError(
            "Term, payment frequency, and compounding frequency must be positive values."
        )


def level_payment(principal, rate_per_period: Decimal, periods) -> Decimal:
    """Constant payment that retires ``principal`` over ``periods`` payments.

    PMT = P * r / (1 - (1+r)^-n)
    """
    principal = as_decimal(principal)
    n = as_decimal(periods)
    if rate_per_period == 0:
        return principal / n
    return principal * rate_per_period / (1 - (1 + rate_per_period) ** -n)


def payment(
    principal,
    annual_rate,
    term_years,
    payments_per_year: int = 12,
    compounds_per_year: int = 12,
) -> Decimal:
    """Principal-and-interest payment per period for a fully amortizing loan."""
    _check_frequencies(term_years, payments_per_year, compounds_per_year)
    rate = periodic_rate(annual_rate, payments_per_year, compounds_per_year)
    return level_payment(principal, rate, payments_per_year * as_decimal(term_years))


def principal_from_payment(
    period_payment,
    annual_rate,
    term_years,
    payments_per_year: int = 12,
    compounds_per_year: int = 12,
) -> Decimal:
    """Reverse of ``payment``: the loan amount a periodic payment can carry.

    P = PMT * ((1+r)^n - 1) / (r * (1+r)^n)
    """
    _check_frequencies(term_years, payments_per_year, compounds_per_year)
    period_payment = as_decimal(period_payment)
    n = payments_per_year * as_decimal(term_years)
    rate = periodic_rate(annual_rate, payments_per_year, compounds_per_year)
    if rate == 0:
        return period_payment * n
    growth = (1 + rate) ** n
    return period_payment * (growth - 1) / (rate * growth)


def loan_to_value(balance, home_value) -> Decimal:
    """LTV as a percentage. A zero home value is the caller's problem."""
    return as_decimal(balance) / as_decimal(home_value) * _HUNDRED


def pmi_annual_amount(balance, annual_pmi) -> Decimal:
    annual_pmi = as_decimal(annual_pmi)
    if annual_pmi > 0:
        return as_decimal(balance) * annual_pmi / _HUNDRED
    return ZERO


def has_pmi(loan_to_value_pct, annual_pmi) -> bool:
    """True while LTV is above 80% and a PMI rate is set.

    Negative LTVs are always rejected. LTVs above 100 are rejected only when
    ``settings.STRICT_LTV_RANGE`` is on.
    """
    ltv = as_decimal(loan_to_value_pct)
    if ltv < 0 or (settings.STRICT_LTV_RANGE and ltv > _HUNDRED):
        raise PercentageOutOfRangeError("loan_to_value", ltv)
    return ltv > PMI_LTV_THRESHOLD and as_decimal(annual_pmi) > 0


def round_down_to_hundred(amount) -> Decimal:
    return (as_decimal(amount) / _HUNDRED).to_integral_value(rounding=ROUND_FLOOR) * _HUNDRED


def validate_percentage(name: str, value) -> Decimal:
    value = as_decimal(value)
    if not ZERO <= value <= _HUNDRED:
        raise PercentageOutOfRangeError(name, value)
    return value


def points(principal, points_pct) -> Decimal:
    """Dollar cost of discount points."""
    return as_decimal(principal) * validate_percentage("points", points_pct) / _HUNDRED


def origination_fees(principal, fee_pct) -> Decimal:
    """Dollar cost of an origination fee quoted as a percentage."""
    return as_decimal(principal) * validate_percentage("origination_fees", fee_pct) / _HUNDRED
