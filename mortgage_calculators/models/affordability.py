from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from mortgage_calculators.models.amortization import Amortization


class AffordabilityRequest(BaseModel):
    """Borrower income and housing assumptions for an affordability estimate."""
    total_monthly_income: Decimal
    total_monthly_expenses: Decimal
    down_payment: Decimal          # percent of home value
    interest_rate: Decimal
    term: int                      # years
    pmi: Decimal = Decimal(0)      # annual PMI percent
    front_ratio: Decimal = Decimal(28)
    back_ratio: Decimal = Decimal(36)
    annual_taxes: Decimal = Decimal(0)
    annual_insurance: Decimal = Decimal(0)
    start_date: Optional[date] = None


class AffordabilityResponse(BaseModel):
    monthly_principal_and_interest: Decimal
    monthly_taxes: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    monthly_total: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    actual_front_ratio: Decimal
    actual_back_ratio: Decimal
    loan_amount: Decimal
    down_payment: Decimal
    home_value: Decimal
    amortization: Amortization
