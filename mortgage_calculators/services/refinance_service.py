"""Refinance calculator.

Compares keeping the current loan against refinancing its remaining balance,
over the window between today and the planned sale of the home. Both legs
are amortized in full; the window figures (interest, tax savings, balance at
sale) are read off the schedules.
"""
from __future__ import annotations

import logging
from datetime import date

from mortgage_calculators.finance.amortization import (
    balance_after,
    build_amortization,
    interest_between,
)
from mortgage_calculators.finance.money import add_months, to_dollar
from mortgage_calculators.finance.primitives import origination_fees, payment, points
from mortgage_calculators.models.refinance import (
    CurrentLoanResult,
    RefinanceLoanResult,
    RefinanceRequest,
    RefinanceResponse,
)

logger = logging.getLogger(__name__)


def calculate_refinance(request: RefinanceRequest) -> RefinanceResponse:
    """Net benefit of refinancing, after losses and closing costs.

    benefit = payment savings - (balance losses + tax savings losses) - closing costs

    Payment totals over the holding window use the constant periodic payment
    times the number of months, not the schedule sum.
    """
    today = request.start_date or date.today()
    current = request.current_loan
    refi = request.refinance_loan
    total_tax_rate = request.tax_rates.state_tax_rate + request.tax_rates.federal_tax_rate
    holding_months = refi.years_before_sale * 12

    # --- Current loan: started months_paid months ago ---
    current_start = add_months(today, -current.months_paid)
    current_payment = payment(current.original_loan_amount, current.interest_rate, current.term)
    current_total_payments = current_payment * holding_months
    current_amortization = build_amortization(
        current.original_loan_amount, current.interest_rate, current.term * 12,
        current_start, request.home_value, current.pmi,
    )
    sale_month = current.months_paid + holding_months
    remaining_balance = balance_after(
        current_amortization, current.months_paid, opening=current.original_loan_amount,
    )
    current_interest = interest_between(current_amortization, current.months_paid, sale_month)
    current_balance_at_sale = balance_after(
        current_amortization, sale_month, opening=current.original_loan_amount,
    )
    current_tax_savings = current_interest * total_tax_rate / 100

    # --- Refinance loan: remaining balance, starting today ---
    points_cost = points(remaining_balance, refi.points)
    origination_cost = origination_fees(remaining_balance, refi.origination_fees)
    refi_payment = payment(remaining_balance, refi.interest_rate, refi.term)
    refi_total_payments = refi_payment * holding_months
    refi_amortization = build_amortization(
        remaining_balance, refi.interest_rate, refi.term * 12,
        today, request.home_value, refi.pmi,
    )
    refi_interest = interest_between(refi_amortization, 0, holding_months)
    refi_balance_at_sale = balance_after(refi_amortization, holding_months, opening=remaining_balance)
    refi_tax_savings = refi_interest * total_tax_rate / 100

    monthly_payment_savings = current_total_payments - refi_total_payments
    tax_savings_losses = current_tax_savings - refi_tax_savings
    balance_losses = refi_balance_at_sale - current_balance_at_sale
    total_losses = balance_losses + tax_savings_losses
    total_closing_costs = points_cost + origination_cost + refi.closing_costs
    total_benefit = monthly_payment_savings - total_losses - total_closing_costs

    logger.info(
        "Refinance: remaining balance=%s, payment %s -> %s, benefit over %d months=%s",
        to_dollar(remaining_balance), to_dollar(current_payment), to_dollar(refi_payment),
        holding_months, to_dollar(total_benefit),
    )

    return RefinanceResponse(
        current_loan=CurrentLoanResult(
            loan_amount=to_dollar(current.original_loan_amount),
            monthly_payment=to_dollar(current_payment),
            total_monthly_payments=to_dollar(current_total_payments),
            remaining_balance=to_dollar(remaining_balance),
            interest_paid=to_dollar(current_interest),
            tax_savings=to_dollar(current_tax_savings),
            balance_at_sale=to_dollar(current_balance_at_sale),
            amortization=current_amortization,
        ),
        refinance_loan=RefinanceLoanResult(
            loan_amount=to_dollar(remaining_balance),
            monthly_payment=to_dollar(refi_payment),
            total_monthly_payments=to_dollar(refi_total_payments),
            interest_paid=to_dollar(refi_interest),
            tax_savings=to_dollar(refi_tax_savings),
            points=to_dollar(points_cost),
            origination_fees=to_dollar(origination_cost),
            balance_at_sale=to_dollar(refi_balance_at_sale),
            amortization=refi_amortization,
        ),
        monthly_payment_savings=to_dollar(monthly_payment_savings),
        tax_savings_losses=to_dollar(tax_savings_losses),
        balance_losses=to_dollar(balance_losses),
        total_losses=to_dollar(total_losses),
        total_closing_costs=to_dollar(total_closing_costs),
        total_benefit=to_dollar(total_benefit),
    )
