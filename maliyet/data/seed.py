"""Seed unit cost data for the Maliyet cost estimation engine.

Base rates are 2025 Turkish market averages in TL/m2, before structural,
height and regional adjustment.
"""

from maliyet.data.base_costs import BaseCostEntry
from maliyet.models.enums import BuildingType, QualityLevel

SEED_BASE_COSTS: list[BaseCostEntry] = [
    # --- Residential ---
    BaseCostEntry(
        building_type=BuildingType.RESIDENTIAL,
        quality_level=QualityLevel.ECONOMIC,
        cost_per_m2=3200.0,
        year=2025,
        notes="Residential, economic finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.RESIDENTIAL,
        quality_level=QualityLevel.STANDARD,
        cost_per_m2=4500.0,
        year=2025,
        notes="Residential, standard finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.RESIDENTIAL,
        quality_level=QualityLevel.LUXURY,
        cost_per_m2=7200.0,
        year=2025,
        notes="Residential, luxury finishes",
    ),
    # --- Commercial ---
    BaseCostEntry(
        building_type=BuildingType.COMMERCIAL,
        quality_level=QualityLevel.ECONOMIC,
        cost_per_m2=3800.0,
        year=2025,
        notes="Commercial, economic finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.COMMERCIAL,
        quality_level=QualityLevel.STANDARD,
        cost_per_m2=5200.0,
        year=2025,
        notes="Commercial, standard finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.COMMERCIAL,
        quality_level=QualityLevel.LUXURY,
        cost_per_m2=8500.0,
        year=2025,
        notes="Commercial, luxury finishes",
    ),
    # --- Industrial ---
    BaseCostEntry(
        building_type=BuildingType.INDUSTRIAL,
        quality_level=QualityLevel.ECONOMIC,
        cost_per_m2=2800.0,
        year=2025,
        notes="Industrial, economic finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.INDUSTRIAL,
        quality_level=QualityLevel.STANDARD,
        cost_per_m2=3900.0,
        year=2025,
        notes="Industrial, standard finishes",
    ),
    BaseCostEntry(
        building_type=BuildingType.INDUSTRIAL,
        quality_level=QualityLevel.LUXURY,
        cost_per_m2=6200.0,
        year=2025,
        notes="Industrial, luxury finishes",
    ),
]
