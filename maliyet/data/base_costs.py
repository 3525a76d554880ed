"""Schema and factor tables for unit-area construction costs.

Rates are TL per m2 of gross floor area. The adjustment factors below are
applied multiplicatively on top of the base rate by the cost engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from maliyet.models.enums import BuildingType, QualityLevel, StructuralSystem


class BaseCostEntry(BaseModel):
    """A single base unit cost for a building type and quality level."""

    model_config = ConfigDict(frozen=True)

    building_type: BuildingType
    quality_level: QualityLevel
    cost_per_m2: float = Field(gt=0)
    year: int
    notes: str


STRUCTURAL_FACTORS: dict[StructuralSystem, float] = {
    StructuralSystem.CONCRETE: 1.00,
    StructuralSystem.STEEL: 1.12,
    StructuralSystem.MIXED: 1.08,
}

# Buildings taller than this pay a linear per-floor premium, uncapped.
HEIGHT_PENALTY_THRESHOLD_FLOORS = 5
HEIGHT_PENALTY_PER_FLOOR = 0.03

# Share of the construction total
MATERIALS_SHARE = 0.55
LABOR_SHARE = 0.30

# Soft and site costs, as fractions of the construction total
PERMITS_RATE = 0.025
DESIGN_RATE = 0.08
CONSULTING_RATE = 0.035
SITE_SPECIFIC_RATE = 0.12

# Calendar days of work per m2 of gross area
DAYS_PER_M2: dict[BuildingType, float] = {
    BuildingType.RESIDENTIAL: 0.8,
    BuildingType.COMMERCIAL: 0.9,
    BuildingType.INDUSTRIAL: 0.7,
}
