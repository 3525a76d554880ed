"""Cost trend projection anchored to a scenario's current costs.

Produces a monthly series of 12 trailing months and 6 forecast months:

* **History**: each month draws independent noise for materials (±5%) and
  labor (±4%) around today's costs. The noise comes from an injectable
  ``random.Random`` so a seed reproduces the same series.
* **Forecast**: a fixed linear drift of +2% per month for materials and
  +1.5% per month for labor.

Total cost in each month scales with the average of the two factors, and
that same average (minus one) is reported as the month's inflation rate.
"""

from __future__ import annotations

import random
from datetime import MAXYEAR, MINYEAR, date
from typing import TYPE_CHECKING

from maliyet.exceptions import InvalidInputError
from maliyet.models.analysis import TrendPoint, TrendSummary
from maliyet.models.enums import TrendDirection

if TYPE_CHECKING:
    from maliyet.models.estimate import ProjectScenario

HISTORY_MONTHS = 12
FORECAST_MONTHS = 6

MATERIAL_NOISE = 0.05
LABOR_NOISE = 0.04
MATERIAL_MONTHLY_DRIFT = 0.02
LABOR_MONTHLY_DRIFT = 0.015

# Percent change beyond which a move counts as increasing/decreasing
DIRECTION_THRESHOLD_PCT = 1.0


def shift_month(d: date, offset: int) -> date:
    """First day of the month ``offset`` months away from ``d``.

    Raises:
        InvalidInputError: If the result falls outside years 1-9999.
    """
    index = d.year * 12 + (d.month - 1) + offset
    year = index // 12
    if not MINYEAR <= year <= MAXYEAR:
        msg = f"{d.isoformat()} shifted by {offset} months is outside the calendar"
        raise InvalidInputError(msg)
    return date(year, index % 12 + 1, 1)


def trend_direction(previous: float, current: float) -> TrendDirection:
    """Classify the move from ``previous`` to ``current``."""
    if previous == 0:
        return TrendDirection.STABLE
    change = (current - previous) / previous * 100
    if change > DIRECTION_THRESHOLD_PCT:
        return TrendDirection.INCREASING
    if change < -DIRECTION_THRESHOLD_PCT:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


class TrendProjector:
    """Generates the monthly cost trend series for a scenario.

    Args:
        rng: Source of the historical noise. Pass a seeded
            ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def project(
        self,
        scenario: ProjectScenario,
        as_of: date | None = None,
    ) -> list[TrendPoint]:
        """Return 18 points: 12 historical (last one is ``as_of``) + 6 forecast.

        Raises:
            InvalidInputError: If ``as_of`` is too close to the ends of the
                calendar for the whole series to fit.
        """
        today = as_of or date.today()
        points: list[TrendPoint] = []

        for months_back in range(HISTORY_MONTHS - 1, -1, -1):
            material_factor = 1 + (self._rng.random() * 2 * MATERIAL_NOISE - MATERIAL_NOISE)
            labor_factor = 1 + (self._rng.random() * 2 * LABOR_NOISE - LABOR_NOISE)
            points.append(
                self._point(
                    scenario,
                    shift_month(today, -months_back),
                    material_factor,
                    labor_factor,
                    is_forecast=False,
                    is_current=months_back == 0,
                )
            )

        for months_ahead in range(1, FORECAST_MONTHS + 1):
            points.append(
                self._point(
                    scenario,
                    shift_month(today, months_ahead),
                    1 + MATERIAL_MONTHLY_DRIFT * months_ahead,
                    1 + LABOR_MONTHLY_DRIFT * months_ahead,
                    is_forecast=True,
                    is_current=False,
                )
            )

        return points

    @staticmethod
    def _point(
        scenario: ProjectScenario,
        month: date,
        material_factor: float,
        labor_factor: float,
        *,
        is_forecast: bool,
        is_current: bool,
    ) -> TrendPoint:
        costs = scenario.costs
        overall_factor = (material_factor + labor_factor) / 2
        return TrendPoint(
            period=month.strftime("%b %Y"),
            month=month,
            material_costs=costs.construction.materials * material_factor,
            labor_costs=costs.construction.labor * labor_factor,
            total_costs=costs.total * overall_factor,
            inflation_rate=(overall_factor - 1) * 100,
            is_forecast=is_forecast,
            is_current=is_current,
        )


def project_trends(
    scenario: ProjectScenario,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    as_of: date | None = None,
) -> list[TrendPoint]:
    """Project the trend series; ``rng`` wins over ``seed`` when both are given."""
    source = rng if rng is not None else random.Random(seed)
    return TrendProjector(source).project(scenario, as_of=as_of)


def summarize_trends(points: list[TrendPoint]) -> TrendSummary:
    """Directions from the current month to the next, plus per-point moves.

    Raises:
        InvalidInputError: If the series has no current month or nothing
            after it.
    """
    current_index = next((i for i, p in enumerate(points) if p.is_current), None)
    if current_index is None or current_index + 1 >= len(points):
        msg = "trend series needs a current month followed by at least one month"
        raise InvalidInputError(msg)

    current = points[current_index]
    following = points[current_index + 1]

    point_directions: list[TrendDirection | None] = [None]
    for previous, point in zip(points, points[1:], strict=False):
        point_directions.append(trend_direction(previous.total_costs, point.total_costs))

    return TrendSummary(
        material=trend_direction(current.material_costs, following.material_costs),
        labor=trend_direction(current.labor_costs, following.labor_costs),
        total=trend_direction(current.total_costs, following.total_costs),
        point_directions=point_directions,
    )
