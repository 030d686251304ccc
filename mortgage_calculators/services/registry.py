"""Calculator registry — named calculators with their request/response types.

Built once at import. ``run_calculation`` is the validated entry point: it
rejects invalid requests with the full failure list before any math runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from mortgage_calculators.errors import InvalidArgumentError, RequestValidationError
from mortgage_calculators.models.affordability import AffordabilityRequest, AffordabilityResponse
from mortgage_calculators.models.loan_comparison import LoanComparisonRequest, LoanComparisonResponse
from mortgage_calculators.models.monthly_payment import MonthlyPaymentRequest, MonthlyPaymentResponse
from mortgage_calculators.models.refinance import RefinanceRequest, RefinanceResponse
from mortgage_calculators.services.affordability_service import calculate_affordability
from mortgage_calculators.services.loan_comparison_service import calculate_loan_comparison
from mortgage_calculators.services.monthly_payment_service import calculate_monthly_payment
from mortgage_calculators.services.refinance_service import calculate_refinance
from mortgage_calculators.validation import (
    ValidationFailure,
    validate_affordability,
    validate_loan_comparison,
    validate_monthly_payment,
    validate_refinance,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculator:
    """A calculator handler paired with its request validator."""
    name: str
    request_type: type[BaseModel]
    response_type: type[BaseModel]
    handler: Callable[[Any], BaseModel]
    validator: Callable[[Any], list[ValidationFailure]]


_CALCULATORS: dict[str, Calculator] = {
    "affordability": Calculator(
        name="affordability",
        request_type=AffordabilityRequest,
        response_type=AffordabilityResponse,
        handler=calculate_affordability,
        validator=validate_affordability,
    ),
    "monthly_payment": Calculator(
        name="monthly_payment",
        request_type=MonthlyPaymentRequest,
        response_type=MonthlyPaymentResponse,
        handler=calculate_monthly_payment,
        validator=validate_monthly_payment,
    ),
    "loan_comparison": Calculator(
        name="loan_comparison",
        request_type=LoanComparisonRequest,
        response_type=LoanComparisonResponse,
        handler=calculate_loan_comparison,
        validator=validate_loan_comparison,
    ),
    "refinance": Calculator(
        name="refinance",
        request_type=RefinanceRequest,
        response_type=RefinanceResponse,
        handler=calculate_refinance,
        validator=validate_refinance,
    ),
}


def get_calculator(name: str) -> Calculator:
    """Return a calculator by name. Raises InvalidArgumentError if unknown."""
    try:
        return _CALCULATORS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown calculator {name!r}; expected one of {list_calculator_names()}"
        ) from None


def list_calculator_names() -> list[str]:
    """Return all registered calculator names."""
    return list(_CALCULATORS.keys())


def calculator_for(request: BaseModel) -> Calculator:
    """Find the calculator whose request type matches ``request``."""
    for calculator in _CALCULATORS.values():
        if isinstance(request, calculator.request_type):
            return calculator
    raise InvalidArgumentError(f"No calculator accepts {type(request).__name__}")


def validate_request(calculator: Calculator, request: BaseModel) -> None:
    """Raise RequestValidationError if the request breaks any rule."""
    failures = calculator.validator(request)
    if failures:
        logger.warning(
            "Rejected %s request with %d validation failure(s)", calculator.name, len(failures),
        )
        raise RequestValidationError(calculator.name, failures)


def run_calculation(name_or_request: str | BaseModel, request: BaseModel | dict | None = None) -> BaseModel:
    """Validate and run a calculation.

    Either ``run_calculation(request)`` (dispatch on the request type) or
    ``run_calculation("refinance", request)``, where a plain dict is parsed
    into the calculator's request model first.
    """
    if isinstance(name_or_request, str):
        calculator = get_calculator(name_or_request)
        if request is None:
            raise InvalidArgumentError(f"No request given for {name_or_request!r}")
        if isinstance(request, dict):
            request = calculator.request_type.model_validate(request)
        elif not isinstance(request, calculator.request_type):
            raise InvalidArgumentError(
                f"{calculator.name} expects {calculator.request_type.__name__}, "
                f"got {type(request).__name__}"
            )
    else:
        request = name_or_request
        calculator = calculator_for(request)

    validate_request(calculator, request)
    return calculator.handler(request)
