"""Loan math — primitives, money helpers, and the amortization engine."""
from mortgage_calculators.finance.money import add_months, as_decimal, to_dollar
from mortgage_calculators.finance.primitives import (
    has_pmi,
    loan_to_value,
    origination_fees,
    payment,
    periodic_rate,
    pmi_annual_amount,
    points,
    principal_from_payment,
    round_down_to_hundred,
)
from mortgage_calculators.finance.amortization import build_amortization
from mortgage_calculators.finance.frames import amortization_frame, yearly_summary

__all__ = [
    "add_months",
    "as_decimal",
    "to_dollar",
    "has_pmi",
    "loan_to_value",
    "origination_fees",
    "payment",
    "periodic_rate",
    "pmi_annual_amount",
    "points",
    "principal_from_payment",
    "round_down_to_hundred",
    "build_amortization",
    "amortization_frame",
    "yearly_summary",
]
