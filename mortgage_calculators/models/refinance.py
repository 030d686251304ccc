from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from mortgage_calculators.models.amortization import Amortization


class LoanDetails(BaseModel):
    """Fields shared by the current and the proposed loan."""
    interest_rate: Decimal
    term: int                      # years
    pmi: Decimal = Decimal(0)


class CurrentLoan(LoanDetails):
    original_loan_amount: Decimal
    months_paid: int = 0


class RefinanceLoan(LoanDetails):
    points: Decimal = Decimal(0)            # percent of remaining balance
    origination_fees: Decimal = Decimal(0)  # percent of remaining balance
    closing_costs: Decimal = Decimal(0)     # flat dollars
    years_before_sale: int = 0


class TaxRates(BaseModel):
    state_tax_rate: Decimal = Decimal(0)
    federal_tax_rate: Decimal = Decimal(0)


class RefinanceRequest(BaseModel):
    home_value: Decimal
    current_loan: CurrentLoan
    refinance_loan: RefinanceLoan
    tax_rates: TaxRates = TaxRates()
    start_date: Optional[date] = None


class RefinanceLoanResult(BaseModel):
    """One leg of the refinance comparison over the holding window."""
    loan_amount: Decimal
    monthly_payment: Decimal
    total_monthly_payments: Decimal
    balance_at_sale: Decimal
    interest_paid: Decimal
    tax_savings: Decimal
    points: Decimal = Decimal(0)
    origination_fees: Decimal = Decimal(0)
    amortization: Amortization


class CurrentLoanResult(RefinanceLoanResult):
    remaining_balance: Decimal


class RefinanceResponse(BaseModel):
    current_loan: CurrentLoanResult
    refinance_loan: RefinanceLoanResult
    monthly_payment_savings: Decimal
    tax_savings_losses: Decimal
    balance_losses: Decimal
    total_losses: Decimal
    total_closing_costs: Decimal
    total_benefit: Decimal
