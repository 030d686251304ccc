"""Validated twins of the request models.

Each twin narrows its request's fields to the bounded types in
``constraints`` and adds the cross-field rules as ``model_validator`` hooks.
The request models themselves stay unconstrained so the calculators can be
called directly.

Cross-field failures are raised as ``PydanticCustomError`` with the field
path in ``ctx["field"]``, since a model-level error carries no ``loc`` of
its own.
"""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError

from mortgage_calculators.config import settings
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
from mortgage_calculators.validation.constraints import (
    AnnualInsurance,
    AnnualTaxes,
    BackRatio,
    ClosingCosts,
    DownPayment,
    FederalTaxRate,
    FrontRatio,
    HomeValue,
    InterestRate,
    LoanAmount,
    LoanTerm,
    MonthlyExpenses,
    MonthlyIncome,
    MonthsPaid,
    OriginationFees,
    PmiRate,
    Points,
    StateTaxRate,
    YearsBeforeSale,
)


class ValidationFailure(BaseModel):
    """One broken rule: dotted field path plus a user-facing message."""
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


def _cross_field_error(field: str, message: str, **ctx) -> PydanticCustomError:
    return PydanticCustomError("cross_field", message, {"field": field, **ctx})


class AffordabilityRules(AffordabilityRequest):
    total_monthly_income: MonthlyIncome
    total_monthly_expenses: MonthlyExpenses
    down_payment: DownPayment
    interest_rate: InterestRate
    term: LoanTerm
    pmi: PmiRate = Decimal(0)
    front_ratio: FrontRatio = Decimal(28)
    back_ratio: BackRatio = Decimal(36)
    annual_taxes: AnnualTaxes = Decimal(0)
    annual_insurance: AnnualInsurance = Decimal(0)

    @model_validator(mode="after")
    def check_budget_covers_expenses_and_escrow(self) -> "AffordabilityRules":
        income = self.total_monthly_income
        expenses = self.total_monthly_expenses
        if not income > expenses:
            raise _cross_field_error(
                "total_monthly_income", messages.GREATER_THAN, other="total_monthly_expenses",
            )
        budget = min(self.front_ratio * income / 100, self.back_ratio * income / 100 - expenses)
        escrow = (self.annual_taxes + self.annual_insurance) / 12
        if not budget > escrow:
            raise _cross_field_error("total_monthly_income", messages.ESCROW_BUDGET)
        return self


class MonthlyPaymentRules(MonthlyPaymentRequest):
    loan_amount: LoanAmount
    home_value: HomeValue
    interest_rate: InterestRate
    term: LoanTerm
    annual_taxes: AnnualTaxes = Decimal(0)
    annual_insurance: AnnualInsurance = Decimal(0)
    pmi: PmiRate = Decimal(0)

    @model_validator(mode="after")
    def check_amounts_fit_loan(self) -> "MonthlyPaymentRules":
        if not self.home_value > self.loan_amount:
            raise _cross_field_error("home_value", messages.GREATER_THAN, other="loan_amount")
        if not self.annual_taxes < self.loan_amount:
            raise _cross_field_error("annual_taxes", messages.LESS_THAN, other="loan_amount")
        if not self.annual_insurance < self.loan_amount:
            raise _cross_field_error("annual_insurance", messages.LESS_THAN, other="loan_amount")
        return self


class LoanOfferRules(LoanOffer):
    interest_rate: InterestRate
    term: LoanTerm
    points: Points = Decimal(0)
    origination_fees: OriginationFees = Decimal(0)
    closing_costs: ClosingCosts = Decimal(0)
    home_value: HomeValue
    pmi: PmiRate = Decimal(0)


class LoanComparisonRules(LoanComparisonRequest):
    loan_amount: LoanAmount
    loans: list[LoanOfferRules] = []

    @model_validator(mode="after")
    def check_offers_match_loan(self) -> "LoanComparisonRules":
        required = settings.COMPARISON_LOAN_COUNT
        if len(self.loans) != required:
            raise _cross_field_error("loans", messages.LOAN_COUNT, count=required)
        for i, offer in enumerate(self.loans):
            if not offer.home_value > self.loan_amount:
                raise _cross_field_error(
                    f"loans[{i}].home_value", messages.GREATER_THAN, other="loan_amount",
                )
        return self


class CurrentLoanRules(CurrentLoan):
    interest_rate: InterestRate
    term: LoanTerm
    pmi: PmiRate = Decimal(0)
    original_loan_amount: LoanAmount
    months_paid: MonthsPaid = 0

    @model_validator(mode="after")
    def check_not_paid_off(self) -> "CurrentLoanRules":
        if not self.months_paid < self.term * 12:
            raise _cross_field_error("months_paid", messages.LESS_THAN, other="term in months")
        return self


class RefinanceLoanRules(RefinanceLoan):
    interest_rate: InterestRate
    term: LoanTerm
    pmi: PmiRate = Decimal(0)
    points: Points = Decimal(0)
    origination_fees: OriginationFees = Decimal(0)
    closing_costs: ClosingCosts = Decimal(0)
    years_before_sale: YearsBeforeSale = 0


class TaxRatesRules(TaxRates):
    state_tax_rate: StateTaxRate = Decimal(0)
    federal_tax_rate: FederalTaxRate = Decimal(0)


class RefinanceRules(RefinanceRequest):
    home_value: HomeValue
    current_loan: CurrentLoanRules
    refinance_loan: RefinanceLoanRules
    tax_rates: TaxRatesRules = TaxRatesRules()
