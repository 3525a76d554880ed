"""Level-payment construction loan on a costed scenario.

The monthly payment is the standard annuity
``P * r * (1 + r)**n / ((1 + r)**n - 1)`` with ``r`` the monthly rate; a 0%
loan repays ``P / n`` each month. The schedule splits each payment into
interest on the opening balance and principal.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from maliyet.models.financing import LoanPayment, LoanSchedule, LoanTerms

if TYPE_CHECKING:
    from maliyet.models.estimate import ProjectScenario

logger = logging.getLogger(__name__)

# Share of the scenario total financed when no principal is given
DEFAULT_LOAN_TO_COST = 0.70


def calculate_loan(
    scenario: ProjectScenario,
    terms: LoanTerms | None = None,
) -> LoanSchedule:
    """Amortize a loan against the scenario's total cost."""
    t = terms or LoanTerms()
    principal = (
        scenario.costs.total * DEFAULT_LOAN_TO_COST if t.principal is None else t.principal
    )
    schedule = amortize(principal, t.interest_rate, t.term_months)
    logger.debug(
        "Loan for scenario %s: %.0f over %d months at %.2f%% -> %.2f/month",
        scenario.id,
        principal,
        t.term_months,
        t.interest_rate,
        schedule.monthly_payment,
    )
    return schedule


def amortize(principal: float, annual_rate: float, term_months: int) -> LoanSchedule:
    """Build the payment schedule for a level-payment loan.

    ``annual_rate`` is a percentage. The balance after the last payment is
    exactly zero.
    """
    monthly_rate = annual_rate / 100 / 12

    if monthly_rate == 0:
        monthly_payment = principal / term_months
    else:
        growth = (1 + monthly_rate) ** term_months
        monthly_payment = principal * monthly_rate * growth / (growth - 1)

    payments: list[LoanPayment] = []
    balance = principal
    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        principal_part = monthly_payment - interest
        balance -= principal_part
        if month == term_months:
            # Float residue of the annuity formula
            balance = 0.0
        payments.append(
            LoanPayment(
                month=month,
                payment=monthly_payment,
                principal=principal_part,
                interest=interest,
                balance=max(0.0, balance),
            )
        )

    total_payment = monthly_payment * term_months
    return LoanSchedule(
        principal=principal,
        interest_rate=annual_rate,
        term_months=term_months,
        monthly_payment=monthly_payment,
        total_payment=total_payment,
        total_interest=total_payment - principal,
        payments=payments,
    )
