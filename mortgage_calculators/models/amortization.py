from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, computed_field


class YearsMonths(BaseModel):
    """A duration split into whole years and the remaining months."""
    years: int
    months: int

    @classmethod
    def from_months(cls, total_months: int) -> "YearsMonths":
        years, months = divmod(total_months, 12)
        return cls(years=years, months=months)


class AmortizationPeriod(BaseModel):
    """One payment period. Money fields are rounded to cents."""
    index: int
    date: date
    interest: Decimal
    principal: Decimal
    balance: Decimal
    pmi: Decimal = Decimal(0)


class Amortization(BaseModel):
    """Loan amortization summary plus its period-by-period schedule."""
    balance: Decimal             # opening principal
    periodic_interest: Decimal   # monthly rate as a fraction, e.g. 0.005
    periods: int
    periodic_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    start_date: date
    end_date: Optional[date] = None
    schedule: list[AmortizationPeriod] = []

    @computed_field
    @property
    def months_with_pmi(self) -> int:
        return sum(1 for period in self.schedule if period.pmi > 0)

    @computed_field
    @property
    def pmi_duration(self) -> YearsMonths:
        return YearsMonths.from_months(self.months_with_pmi)
