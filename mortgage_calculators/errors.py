"""Exceptions raised by the calculators and their math primitives."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mortgage_calculators.validation.schemas import ValidationFailure


class MortgageCalculatorError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(MortgageCalculatorError, ValueError):
    """A primitive was called with a term, frequency or period count it cannot use."""


class PercentageOutOfRangeError(InvalidArgumentError):
    """A percentage guard (LTV, points, origination fee) was violated."""

    def __init__(self, name: str, value, low=0, high=100):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be between {low} and {high}, got {value}")


class RequestValidationError(MortgageCalculatorError, ValueError):
    """A request failed validation before any calculation ran."""

    def __init__(self, calculator: str, failures: list[ValidationFailure]):
        self.calculator = calculator
        self.failures = failures
        details = "; ".join(f"{f.field}: {f.message}" for f in failures)
        super().__init__(f"Invalid {calculator} request: {details}")
