"""Scenario creation, duplication and side-by-side comparison."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from maliyet.exceptions import ScenarioError
from maliyet.models.analysis import ComparisonRow, ScenarioComparison
from maliyet.models.estimate import new_scenario_id

if TYPE_CHECKING:
    from maliyet.engine import CostEngine
    from maliyet.models.estimate import ProjectScenario
    from maliyet.models.project import ProjectBasics, TechnicalSpecs

logger = logging.getLogger(__name__)


def create_scenario(
    engine: CostEngine,
    basics: ProjectBasics,
    specs: TechnicalSpecs,
    name: str,
) -> ProjectScenario:
    """Cost a fresh scenario from form inputs."""
    return engine.estimate(basics, specs, name)


def duplicate_scenario(
    scenario: ProjectScenario, name: str | None = None
) -> ProjectScenario:
    """Deep-copy a scenario under a new id, name and creation time."""
    return scenario.model_copy(
        update={
            "id": new_scenario_id(),
            "name": name or f"{scenario.name} - Copy",
            "created_at": datetime.now(),
        },
        deep=True,
    )


class ScenarioSet:
    """An ordered working set of scenarios with a selection for comparison.

    The set always keeps at least one scenario. New and duplicated scenarios
    are appended unselected; the initial scenario starts selected.
    """

    def __init__(self, initial: ProjectScenario) -> None:
        self._scenarios: list[ProjectScenario] = [initial]
        self._selected: list[str] = [initial.id]

    def __len__(self) -> int:
        return len(self._scenarios)

    @property
    def scenarios(self) -> list[ProjectScenario]:
        return list(self._scenarios)

    @property
    def selected(self) -> list[ProjectScenario]:
        return [s for s in self._scenarios if s.id in self._selected]

    def get(self, scenario_id: str) -> ProjectScenario:
        for scenario in self._scenarios:
            if scenario.id == scenario_id:
                return scenario
        msg = f"Unknown scenario '{scenario_id}'"
        raise ScenarioError(msg)

    def add(self, scenario: ProjectScenario) -> ProjectScenario:
        if any(s.id == scenario.id for s in self._scenarios):
            msg = f"Scenario '{scenario.id}' is already in the set"
            raise ScenarioError(msg)
        self._scenarios.append(scenario)
        return scenario

    def add_copy_of_first(self) -> ProjectScenario:
        """Append a copy of the first scenario named 'Scenario <n>'."""
        copy = duplicate_scenario(
            self._scenarios[0], name=f"Scenario {len(self._scenarios) + 1}"
        )
        return self.add(copy)

    def duplicate(self, scenario_id: str) -> ProjectScenario:
        return self.add(duplicate_scenario(self.get(scenario_id)))

    def remove(self, scenario_id: str) -> None:
        """Remove a scenario; the last remaining one cannot be removed."""
        scenario = self.get(scenario_id)
        if len(self._scenarios) == 1:
            msg = "Cannot remove the only scenario in the set"
            raise ScenarioError(msg)
        self._scenarios.remove(scenario)
        if scenario_id in self._selected:
            self._selected.remove(scenario_id)
        logger.debug("Removed scenario %s", scenario_id)

    def toggle(self, scenario_id: str) -> bool:
        """Flip selection of a scenario and return whether it is now selected."""
        self.get(scenario_id)
        if scenario_id in self._selected:
            self._selected.remove(scenario_id)
            return False
        self._selected.append(scenario_id)
        return True

    def compare_selected(self) -> ScenarioComparison:
        return compare_scenarios(self.selected)


def compare_scenarios(scenarios: list[ProjectScenario]) -> ScenarioComparison:
    """Compare scenarios against the cheapest one.

    Raises:
        ScenarioError: If no scenarios are given.
    """
    if not scenarios:
        msg = "At least one scenario is required for comparison"
        raise ScenarioError(msg)

    totals = [s.costs.total for s in scenarios]
    min_total = min(totals)
    max_total = max(totals)

    rows: list[ComparisonRow] = []
    for scenario in scenarios:
        total = scenario.costs.total
        difference = total - min_total
        percent = difference / min_total * 100 if min_total > 0 else 0.0
        rows.append(
            ComparisonRow(
                scenario_id=scenario.id,
                name=scenario.name,
                total=total,
                cost_per_m2=scenario.cost_per_m2,
                materials=scenario.costs.construction.materials,
                labor=scenario.costs.construction.labor,
                equipment=scenario.costs.construction.equipment,
                difference=difference,
                percent_difference=percent,
                is_cheapest=total == min_total,
                is_most_expensive=total == max_total and min_total != max_total,
            )
        )

    return ScenarioComparison(rows=rows, min_total=min_total, max_total=max_total)
