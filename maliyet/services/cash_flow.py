"""Construction-period cash flow for a costed scenario.

The build runs ``ceil(area * 0.8 / 30)`` months. Equity (30%) and the loan
(70%) of the scenario total arrive in the first period and sales of 120% of
the total land in each of the last two. Outflows spread the total evenly
over the periods as materials 55%, labor 30% and equipment 15%, with design
and consulting fees spread the same way and permits paid up front.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import TYPE_CHECKING

from maliyet.exceptions import InvalidInputError
from maliyet.models.enums import CashFlowPeriodicity
from maliyet.models.financing import (
    CashFlowPeriod,
    CashFlowProjection,
    CashInflows,
    CashOutflows,
)
from maliyet.services.trend_projector import shift_month

if TYPE_CHECKING:
    from maliyet.models.estimate import ProjectScenario

logger = logging.getLogger(__name__)

BUILD_DAYS_PER_M2 = 0.8
DAYS_PER_MONTH = 30

EQUITY_SHARE = 0.30
LOAN_SHARE = 0.70
SALES_MULTIPLE = 1.2
SALES_PERIODS = 2

MATERIALS_SHARE = 0.55
LABOR_SHARE = 0.30
EQUIPMENT_SHARE = 0.15

_MONTHS_PER_PERIOD = {
    CashFlowPeriodicity.MONTHLY: 1,
    CashFlowPeriodicity.QUARTERLY: 3,
}


def construction_months(area: float) -> int:
    """Length of the build in 30-day months."""
    if not area > 0:
        msg = f"area must be positive, got {area}"
        raise InvalidInputError(msg)
    return math.ceil(round(area * BUILD_DAYS_PER_M2 / DAYS_PER_MONTH, 9))


def project_cash_flow(
    scenario: ProjectScenario,
    periodicity: CashFlowPeriodicity | str = CashFlowPeriodicity.MONTHLY,
    *,
    start: date | None = None,
) -> CashFlowProjection:
    """Project inflows, outflows and the running balance period by period.

    Args:
        scenario: The costed scenario.
        periodicity: ``monthly`` or ``quarterly`` rows. Totals are the same
            either way.
        start: First period's month. Defaults to the project start date,
            then today.

    Raises:
        InvalidInputError: If the periodicity is unknown or the period
            dates fall outside the calendar.
    """
    try:
        granularity = CashFlowPeriodicity(periodicity)
    except ValueError:
        msg = f"Invalid periodicity '{periodicity}'; expected monthly or quarterly"
        raise InvalidInputError(msg) from None

    costs = scenario.costs
    total = costs.total
    months = construction_months(scenario.basics.area)
    step = _MONTHS_PER_PERIOD[granularity]
    count = math.ceil(months / step)
    first_month = start or scenario.basics.start_date or date.today()

    other_fees = costs.soft_costs.design + costs.soft_costs.consulting

    periods: list[CashFlowPeriod] = []
    cumulative = 0.0
    for index in range(count):
        month = shift_month(first_month, index * step)
        inflows = CashInflows(
            equity=total * EQUITY_SHARE if index == 0 else 0.0,
            loan=total * LOAN_SHARE if index == 0 else 0.0,
            sales=total * SALES_MULTIPLE if index >= count - SALES_PERIODS else 0.0,
        )
        outflows = CashOutflows(
            materials=total * MATERIALS_SHARE / count,
            labor=total * LABOR_SHARE / count,
            equipment=total * EQUIPMENT_SHARE / count,
            permits=costs.soft_costs.permits if index == 0 else 0.0,
            other=other_fees / count,
        )
        net = inflows.total - outflows.total
        cumulative += net
        periods.append(
            CashFlowPeriod(
                index=index + 1,
                period=month.strftime("%b %Y"),
                starts_on=month,
                inflows=inflows,
                outflows=outflows,
                net_cash_flow=net,
                cumulative_cash_flow=cumulative,
                minimum_balance=max(0.0, -cumulative),
            )
        )

    logger.debug(
        "Cash flow for scenario %s: %d %s periods", scenario.id, count, granularity
    )

    return CashFlowProjection(
        periodicity=granularity,
        duration_months=months,
        periods=periods,
        total_inflows=sum(p.inflows.total for p in periods),
        total_outflows=sum(p.outflows.total for p in periods),
        peak_funding=max((p.minimum_balance for p in periods), default=0.0),
        final_balance=periods[-1].cumulative_cash_flow if periods else 0.0,
    )
