"""Request validators, one per calculator.

Each re-validates the request against its twin in ``schemas`` and returns
the full list of failures (empty when the request is valid).
"""
from __future__ import annotations

from pydantic import BaseModel, ValidationError

from mortgage_calculators.models.affordability import AffordabilityRequest
from mortgage_calculators.models.loan_comparison import LoanComparisonRequest, LoanOffer
from mortgage_calculators.models.monthly_payment import MonthlyPaymentRequest
from mortgage_calculators.models.refinance import (
    CurrentLoan,
    RefinanceLoan,
    RefinanceRequest,
    TaxRates,
)
from mortgage_calculators.validation import messages
from mortgage_calculators.validation.schemas import (
    AffordabilityRules,
    CurrentLoanRules,
    LoanComparisonRules,
    LoanOfferRules,
    MonthlyPaymentRules,
    RefinanceLoanRules,
    RefinanceRules,
    TaxRatesRules,
    ValidationFailure,
)

_BOUND_MESSAGES = {
    "greater_than_equal": messages.AT_LEAST,
    "less_than_equal": messages.AT_MOST,
}


def _field_path(loc: tuple, field: str | None = None) -> str:
    """("loans", 1, "points") -> "loans[1].points"."""
    path = ""
    for part in loc + ((field,) if field else ()):
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else part
    return path


def _message(error) -> str:
    template = _BOUND_MESSAGES.get(error["type"])
    if template is not None:
        return template.format(**error["ctx"])
    return error["msg"]


def _check(rules: type[BaseModel], request: BaseModel) -> list[ValidationFailure]:
    try:
        rules.model_validate(request.model_dump())
    except ValidationError as exc:
        return [
            ValidationFailure(
                field=_field_path(error["loc"], error.get("ctx", {}).get("field")),
                message=_message(error),
            )
            for error in exc.errors()
        ]
    return []


def validate_affordability(request: AffordabilityRequest) -> list[ValidationFailure]:
    return _check(AffordabilityRules, request)


def validate_monthly_payment(request: MonthlyPaymentRequest) -> list[ValidationFailure]:
    return _check(MonthlyPaymentRules, request)


def validate_loan_offer(offer: LoanOffer) -> list[ValidationFailure]:
    """Bounds of a single offer; home value against the loan amount is checked by the comparison."""
    return _check(LoanOfferRules, offer)


def validate_loan_comparison(request: LoanComparisonRequest) -> list[ValidationFailure]:
    return _check(LoanComparisonRules, request)


def validate_current_loan(loan: CurrentLoan) -> list[ValidationFailure]:
    return _check(CurrentLoanRules, loan)


def validate_refinance_loan(loan: RefinanceLoan) -> list[ValidationFailure]:
    return _check(RefinanceLoanRules, loan)


def validate_tax_rates(tax_rates: TaxRates) -> list[ValidationFailure]:
    return _check(TaxRatesRules, tax_rates)


def validate_refinance(request: RefinanceRequest) -> list[ValidationFailure]:
    return _check(RefinanceRules, request)
