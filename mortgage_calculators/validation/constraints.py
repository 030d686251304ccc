"""Bounded field types for request validation.

Where a field has both a generic and a domain-specific bound, the narrower
domain-specific one is used.
"""
from decimal import Decimal
from typing import Annotated

from pydantic import Field

InterestRate = Annotated[Decimal, Field(ge=1, le=25)]
LoanTerm = Annotated[int, Field(ge=1, le=40)]            # years
PmiRate = Annotated[Decimal, Field(ge=0, le=10)]
LoanAmount = Annotated[Decimal, Field(ge=30_000)]
HomeValue = Annotated[Decimal, Field(ge=25_000, le=10_000_000)]
Points = Annotated[Decimal, Field(ge=0, le=3)]
OriginationFees = Annotated[Decimal, Field(ge=0, le=5)]
ClosingCosts = Annotated[Decimal, Field(ge=500, le=100_000)]
AnnualTaxes = Annotated[Decimal, Field(ge=0, le=200_000)]
AnnualInsurance = Annotated[Decimal, Field(ge=200, le=50_000)]
MonthlyIncome = Annotated[Decimal, Field(ge=0, le=200_000)]
MonthlyExpenses = Annotated[Decimal, Field(ge=0)]
DownPayment = Annotated[Decimal, Field(ge=0, le=95)]
FrontRatio = Annotated[Decimal, Field(ge=5, le=60)]
BackRatio = Annotated[Decimal, Field(ge=5, le=80)]
MonthsPaid = Annotated[int, Field(ge=0, le=480)]         # 40 years
YearsBeforeSale = Annotated[int, Field(ge=0, le=30)]
StateTaxRate = Annotated[Decimal, Field(ge=0, le=15)]
FederalTaxRate = Annotated[Decimal, Field(ge=0, le=50)]
