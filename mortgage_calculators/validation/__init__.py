"""Request validation — range and cross-field checks run before a calculation."""
from mortgage_calculators.validation.schemas import ValidationFailure
from mortgage_calculators.validation.validators import (
    validate_affordability,
    validate_current_loan,
    validate_loan_comparison,
    validate_loan_offer,
    validate_monthly_payment,
    validate_refinance,
    validate_refinance_loan,
    validate_tax_rates,
)

__all__ = [
    "ValidationFailure",
    "validate_affordability",
    "validate_current_loan",
    "validate_loan_comparison",
    "validate_loan_offer",
    "validate_monthly_payment",
    "validate_refinance",
    "validate_refinance_loan",
    "validate_tax_rates",
]
