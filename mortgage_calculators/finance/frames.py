"""pandas views of an amortization schedule for reporting and export."""
from __future__ import annotations

import pandas as pd

from mortgage_calculators.models.amortization import Amortization

_COLUMNS = ["period", "date", "interest", "principal", "pmi", "balance"]


def amortization_frame(amortization: Amortization) -> pd.DataFrame:
    """One row per period; money columns as floats."""
    if not amortization.schedule:
        return pd.DataFrame(columns=_COLUMNS)
    rows = [
        {
            "period": p.index,
            "date": pd.Timestamp(p.date),
            "interest": float(p.interest),
            "principal": float(p.principal),
            "pmi": float(p.pmi),
            "balance": float(p.balance),
        }
        for p in amortization.schedule
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def yearly_summary(amortization: Amortization) -> pd.DataFrame:
    """Aggregate the schedule by loan year (periods 1-12 are year 1).

    Interest, principal and PMI are summed; balance is the closing balance of
    the year's last period.
    """
    df = amortization_frame(amortization)
    if df.empty:
        return pd.DataFrame(columns=["year", "interest", "principal", "pmi", "balance"])
    df["year"] = (df["period"] - 1) // 12 + 1
    agg = df.groupby("year").agg(
        interest=("interest", "sum"),
        principal=("principal", "sum"),
        pmi=("pmi", "sum"),
        balance=("balance", "last"),
    ).reset_index()
    return agg.round({"interest": 2, "principal": 2, "pmi": 2, "balance": 2})
