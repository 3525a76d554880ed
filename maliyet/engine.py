"""Core cost calculation engine for the Maliyet cost estimation library.

The CostEngine implements a unit-area-rate estimation methodology:

1. **Base rate lookup**: Find the TL/m2 for the building type and quality
   level from the pricing repository.
2. **Structural adjustment**: Multiply by the structural system factor
   (concrete 1.00, steel 1.12, mixed 1.08).
3. **Height adjustment**: Above 5 floors, add 3% per extra floor.
4. **Regional adjustment**: Multiply by the city multiplier; cities not in
   the table use 1.00 and the fallback is recorded as an assumption.
5. **Construction split**: materials 55%, labor 30%, equipment takes the
   remainder so the three always add up to the construction total.
6. **Soft, site and contingency**: permits 2.5%, design 8%, consulting
   3.5% and site-specific 12% of the construction total, then a 15%
   contingency on the resulting subtotal.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from maliyet.data.base_costs import (
    CONSULTING_RATE,
    DESIGN_RATE,
    HEIGHT_PENALTY_PER_FLOOR,
    HEIGHT_PENALTY_THRESHOLD_FLOORS,
    LABOR_SHARE,
    MATERIALS_SHARE,
    PERMITS_RATE,
    SITE_SPECIFIC_RATE,
)
from maliyet.data.regional_factors import DEFAULT_REGIONAL_FACTOR
from maliyet.exceptions import InvalidInputError
from maliyet.models.enums import Confidence
from maliyet.models.estimate import (
    CONTINGENCY_RATE,
    Assumption,
    ConstructionCosts,
    CostBreakdown,
    EstimateMetadata,
    ProjectScenario,
    RateDerivation,
    SoftCosts,
)

if TYPE_CHECKING:
    from maliyet.data.repository import PricingRepository
    from maliyet.models.enums import BuildingType, QualityLevel, StructuralSystem
    from maliyet.models.project import ProjectBasics, TechnicalSpecs

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"
COST_DATA_VERSION = "2025.1"

# Digits kept before rounding a day count up, so 900.0000000001 stays 900
_DURATION_PRECISION = 9


class CostEngine:
    """Core estimation engine that turns project parameters into costs.

    Args:
        repository: The pricing repository providing base rates, structural
            factors, regional multipliers and scheduling rates.

    Example::

        from maliyet.data.repository import PricingRepository
        from maliyet.data.seed import SEED_BASE_COSTS

        engine = CostEngine(PricingRepository(SEED_BASE_COSTS))
        costs = engine.calculate_detailed_costs(basics, specs)
    """

    def __init__(self, repository: PricingRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> PricingRepository:
        return self._repository

    def calculate_base_rate(
        self,
        building_type: BuildingType | str,
        quality_level: QualityLevel | str,
        structural_system: StructuralSystem | str,
        floors: int,
    ) -> float:
        """Return the TL/m2 rate before regional adjustment.

        Raises:
            InvalidInputError: If an enumerated value is unknown or floors < 1.
        """
        entry = self._repository.get_base_cost(building_type, quality_level)
        structural_factor = self._repository.get_structural_factor(structural_system)
        return entry.cost_per_m2 * structural_factor * _height_factor(floors)

    def calculate_detailed_costs(
        self,
        basics: ProjectBasics,
        specs: TechnicalSpecs,
    ) -> CostBreakdown:
        """Compute the full cost breakdown for a project.

        Deterministic and side-effect free: the same inputs always give the
        same breakdown.

        Raises:
            InvalidInputError: If building type, quality level or structural
                system is outside its enumeration, area is not positive, or
                floors is below 1.
        """
        derivation, _ = self._derive_rate(basics, specs)
        return self._breakdown(derivation.adjusted_rate * basics.area)

    def estimate(
        self,
        basics: ProjectBasics,
        specs: TechnicalSpecs,
        name: str,
    ) -> ProjectScenario:
        """Produce a complete scenario: costs, rate derivation and duration."""
        derivation, assumptions = self._derive_rate(basics, specs)
        costs = self._breakdown(derivation.adjusted_rate * basics.area)
        duration = self.calculate_project_duration(basics.area, basics.building_type)

        return ProjectScenario(
            name=name,
            basics=basics,
            specs=specs,
            costs=costs,
            derivation=derivation,
            assumptions=assumptions,
            duration_days=duration,
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                cost_data_version=COST_DATA_VERSION,
            ),
        )

    def calculate_project_duration(
        self, area: float, building_type: BuildingType | str
    ) -> int:
        """Estimate the project duration in calendar days.

        Raises:
            InvalidInputError: If area is not positive or the building type
                is unknown.
        """
        if not area > 0:
            msg = f"area must be positive, got {area}"
            raise InvalidInputError(msg)
        days_per_m2 = self._repository.get_days_per_m2(building_type)
        return math.ceil(round(area * days_per_m2, _DURATION_PRECISION))

    def _derive_rate(
        self,
        basics: ProjectBasics,
        specs: TechnicalSpecs,
    ) -> tuple[RateDerivation, list[Assumption]]:
        if not basics.area > 0:
            msg = f"area must be positive, got {basics.area}"
            raise InvalidInputError(msg)

        assumptions: list[Assumption] = []

        entry = self._repository.get_base_cost(basics.building_type, basics.quality_level)
        structural_factor = self._repository.get_structural_factor(specs.structural_system)
        height_factor = _height_factor(specs.floors)

        city = basics.location.city
        regional_factor = self._repository.get_regional_factor(city)
        if regional_factor is None:
            regional_factor = DEFAULT_REGIONAL_FACTOR
            logger.debug(
                "City %r not in regional table; using %.2f", city, regional_factor
            )
            assumptions.append(
                Assumption(
                    parameter="regional_factor",
                    assumed_value=f"{regional_factor:.2f}",
                    reasoning=(
                        f"City '{city}' has no regional multiplier; "
                        f"national average used"
                    ),
                    confidence=Confidence.MEDIUM,
                )
            )

        adjusted_rate = entry.cost_per_m2 * structural_factor
        adjusted_rate *= height_factor
        adjusted_rate *= regional_factor

        derivation = RateDerivation(
            base_rate=entry.cost_per_m2,
            structural_factor=structural_factor,
            height_factor=height_factor,
            regional_factor=regional_factor,
            adjusted_rate=adjusted_rate,
        )
        return derivation, assumptions

    @staticmethod
    def _breakdown(construction_total: float) -> CostBreakdown:
        """Split a construction total into the full cost breakdown."""
        materials = construction_total * MATERIALS_SHARE
        labor = construction_total * LABOR_SHARE
        equipment = construction_total - materials - labor

        permits = construction_total * PERMITS_RATE
        design = construction_total * DESIGN_RATE
        consulting = construction_total * CONSULTING_RATE

        site_specific = construction_total * SITE_SPECIFIC_RATE

        subtotal = construction_total + permits + design + consulting + site_specific
        contingency = subtotal * CONTINGENCY_RATE
        total = subtotal + contingency

        return CostBreakdown(
            construction=ConstructionCosts(
                materials=materials,
                labor=labor,
                equipment=equipment,
            ),
            soft_costs=SoftCosts(
                permits=permits,
                design=design,
                consulting=consulting,
            ),
            site_specific=site_specific,
            contingency=contingency,
            total=total,
        )


def _height_factor(floors: int) -> float:
    """Linear per-floor premium above the threshold, uncapped."""
    if floors < 1:
        msg = f"floors must be at least 1, got {floors}"
        raise InvalidInputError(msg)
    if floors > HEIGHT_PENALTY_THRESHOLD_FLOORS:
        return 1 + (floors - HEIGHT_PENALTY_THRESHOLD_FLOORS) * HEIGHT_PENALTY_PER_FLOOR
    return 1.0


def calculate_detailed_costs(
    basics: ProjectBasics, specs: TechnicalSpecs
) -> CostBreakdown:
    """Compute a cost breakdown with the default seed pricing data."""
    from maliyet.factory import create_default_engine

    return create_default_engine().calculate_detailed_costs(basics, specs)


def calculate_project_duration(area: float, building_type: BuildingType | str) -> int:
    """Estimate duration in days with the default scheduling rates."""
    from maliyet.factory import create_default_engine

    return create_default_engine().calculate_project_duration(area, building_type)
