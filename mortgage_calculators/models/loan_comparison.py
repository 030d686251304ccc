from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from mortgage_calculators.models.amortization import Amortization


class LoanOffer(BaseModel):
    """One lender quote being compared."""
    interest_rate: Decimal
    term: int                          # years
    points: Decimal = Decimal(0)       # percent of loan amount
    origination_fees: Decimal = Decimal(0)  # percent of loan amount
    closing_costs: Decimal = Decimal(0)     # flat dollars
    home_value: Decimal
    pmi: Decimal = Decimal(0)


class LoanComparisonRequest(BaseModel):
    loan_amount: Decimal
    loans: list[LoanOffer] = []
    start_date: Optional[date] = None


class LoanComparisonResult(BaseModel):
    """Costs and schedule for a single offer."""
    points: Decimal
    origination_fees: Decimal
    closing_costs: Decimal
    total_closing_costs: Decimal
    monthly_principal_and_interest: Decimal
    rank: int                          # 1 = lowest total payment
    amortization: Amortization


class LoanComparisonResponse(BaseModel):
    loan_amount: Decimal
    loans: list[LoanComparisonResult]
    total_savings: Decimal
