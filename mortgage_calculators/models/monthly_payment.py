from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from mortgage_calculators.models.amortization import Amortization


class MonthlyPaymentRequest(BaseModel):
    loan_amount: Decimal
    home_value: Decimal
    interest_rate: Decimal
    term: int                      # years
    annual_taxes: Decimal = Decimal(0)
    annual_insurance: Decimal = Decimal(0)
    pmi: Decimal = Decimal(0)      # annual PMI percent
    start_date: Optional[date] = None


class MonthlyPaymentResponse(BaseModel):
    """Full monthly payment breakdown (PITI plus PMI)."""
    monthly_payment: Decimal
    monthly_principal_and_interest: Decimal
    monthly_taxes: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    loan_to_value: Decimal
    amortization: Amortization
