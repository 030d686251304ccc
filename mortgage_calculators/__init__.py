"""Mortgage calculators — affordability, monthly payment, loan comparison, refinance."""
from mortgage_calculators.errors import (
    InvalidArgumentError,
    MortgageCalculatorError,
    PercentageOutOfRangeError,
    RequestValidationError,
)
from mortgage_calculators.services.affordability_service import calculate_affordability
from mortgage_calculators.services.loan_comparison_service import calculate_loan_comparison
from mortgage_calculators.services.monthly_payment_service import calculate_monthly_payment
from mortgage_calculators.services.refinance_service import calculate_refinance
from mortgage_calculators.services.registry import (
    get_calculator,
    list_calculator_names,
    run_calculation,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "MortgageCalculatorError",
    "PercentageOutOfRangeError",
    "RequestValidationError",
    "calculate_affordability",
    "calculate_loan_comparison",
    "calculate_monthly_payment",
    "calculate_refinance",
    "get_calculator",
    "list_calculator_names",
    "run_calculation",
]
