"""Loan comparison calculator — prices N offers and measures the spread."""
from __future__ import annotations

import logging
from datetime import date

from mortgage_calculators.finance.amortization import build_amortization
from mortgage_calculators.finance.money import ZERO, to_dollar
from mortgage_calculators.finance.primitives import origination_fees, payment, points
from mortgage_calculators.models.loan_comparison import (
    LoanComparisonRequest,
    LoanComparisonResponse,
    LoanComparisonResult,
    LoanOffer,
)

logger = logging.getLogger(__name__)


def _price_offer(loan_amount, offer: LoanOffer, start_date: date) -> dict:
    points_cost = points(loan_amount, offer.points)
    origination_cost = origination_fees(loan_amount, offer.origination_fees)
    return dict(
        points=to_dollar(points_cost),
        origination_fees=to_dollar(origination_cost),
        closing_costs=to_dollar(offer.closing_costs),
        total_closing_costs=to_dollar(offer.closing_costs + points_cost + origination_cost),
        monthly_principal_and_interest=to_dollar(payment(loan_amount, offer.interest_rate, offer.term)),
        amortization=build_amortization(
            loan_amount, offer.interest_rate, offer.term * 12, start_date, offer.home_value, offer.pmi,
        ),
    )


def calculate_loan_comparison(request: LoanComparisonRequest) -> LoanComparisonResponse:
    """Price every offer and report the total-payment spread between them.

    ``total_savings`` is the full-schedule total payment of the most expensive
    offer minus that of the cheapest; closing costs are not included.
    """
    start_date = request.start_date or date.today()
    priced = [_price_offer(request.loan_amount, offer, start_date) for offer in request.loans]

    totals = [p["amortization"].total_payment for p in priced]
    order = sorted(range(len(priced)), key=lambda i: totals[i])
    ranks = {loan_index: position + 1 for position, loan_index in enumerate(order)}

    loans = [LoanComparisonResult(rank=ranks[i], **p) for i, p in enumerate(priced)]
    total_savings = max(totals) - min(totals) if totals else ZERO

    logger.info(
        "Loan comparison: %d offers on %s, total savings=%s",
        len(loans), to_dollar(request.loan_amount), to_dollar(total_savings),
    )

    return LoanComparisonResponse(
        loan_amount=to_dollar(request.loan_amount),
        loans=loans,
        total_savings=to_dollar(total_savings),
    )
