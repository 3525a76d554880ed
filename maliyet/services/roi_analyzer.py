"""Investment return analysis for a costed scenario.

Combines the scenario's total cost with rental and sale assumptions over a
holding period. The IRR reported here is the geometric-mean growth of
money over the holding period, ``(revenue / investment) ** (1 / years) - 1``,
not the root of the cash-flow NPV equation. It is kept that way on purpose
so results stay comparable with previously reported figures.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from maliyet.exceptions import InvalidInputError
from maliyet.models.analysis import RevenueAssumptions, RoiAnalysis

if TYPE_CHECKING:
    from maliyet.models.estimate import ProjectScenario

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def compute_roi(
    scenario: ProjectScenario,
    assumptions: RevenueAssumptions | None = None,
) -> RoiAnalysis:
    """Compute ROI, payback, NPV and approximate IRR for a scenario.

    Args:
        scenario: The costed scenario; its ``costs.total`` is the build cost.
        assumptions: Revenue, holding period and discounting inputs. Defaults
            to ``RevenueAssumptions()`` (no revenue, 10 years, 5% growth,
            8% discount rate).

    Returns:
        The ROI analysis. ``payback_period`` is ``None`` when annual rent
        does not exceed annual operating costs.

    Raises:
        InvalidInputError: If the total investment is not positive.
    """
    a = assumptions or RevenueAssumptions()

    total_investment = scenario.costs.total + a.financing_costs
    if not total_investment > 0:
        msg = f"total investment must be positive, got {total_investment}"
        raise InvalidInputError(msg)

    years = a.rental_years
    annual_rental = a.rental_income * MONTHS_PER_YEAR
    total_rental_income = annual_rental * years
    future_value = a.sale_price * (1 + a.appreciation_rate / 100) ** years
    total_operating_costs = a.operating_costs * years

    expected_revenue = total_rental_income + future_value
    net_profit = expected_revenue - total_investment - total_operating_costs
    roi_percentage = net_profit / total_investment * 100

    annual_net_cash_flow = annual_rental - a.operating_costs
    payback_period = payback_years(total_investment, annual_net_cash_flow)

    npv = net_present_value(
        initial_investment=total_investment,
        annual_cash_flow=annual_net_cash_flow,
        years=years,
        terminal_value=future_value,
        discount_rate=a.discount_rate,
    )

    irr = ((expected_revenue / total_investment) ** (1 / years) - 1) * 100

    logger.debug(
        "ROI for scenario %s: %.2f%% (npv=%.0f, payback=%s)",
        scenario.id,
        roi_percentage,
        npv,
        payback_period,
    )

    return RoiAnalysis(
        total_investment=total_investment,
        expected_revenue=expected_revenue,
        net_profit=net_profit,
        roi_percentage=roi_percentage,
        payback_period=payback_period,
        irr=irr,
        npv=npv,
    )


def payback_years(investment: float, annual_net_cash_flow: float) -> float | None:
    """Simple payback period; ``None`` when the cash flow never pays it back."""
    if annual_net_cash_flow <= 0:
        return None
    return investment / annual_net_cash_flow


def net_present_value(
    initial_investment: float,
    annual_cash_flow: float,
    years: int,
    terminal_value: float,
    discount_rate: float,
) -> float:
    """NPV of a level annual cash flow plus a terminal value in the final year.

    ``discount_rate`` is a percentage.
    """
    factor = 1 + discount_rate / 100
    npv = -initial_investment
    for year in range(1, years + 1):
        npv += annual_cash_flow / factor**year
    npv += terminal_value / factor**years
    return npv
