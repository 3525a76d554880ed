"""Pricing repository for looking up reference cost data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from maliyet.data.base_costs import DAYS_PER_M2, STRUCTURAL_FACTORS
from maliyet.data.materials import LABOR_RATES, MATERIAL_PRICES
from maliyet.data.regional_factors import REGIONAL_FACTORS
from maliyet.exceptions import InvalidInputError
from maliyet.models.enums import BuildingType, QualityLevel, StructuralSystem

if TYPE_CHECKING:
    from maliyet.data.base_costs import BaseCostEntry
    from maliyet.data.materials import MaterialPrice


def _coerce(enum_cls: type[Any], value: object, field_name: str) -> Any:
    """Convert a raw value to ``enum_cls`` or raise InvalidInputError."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        msg = f"Invalid {field_name} '{value}'; expected one of: {allowed}"
        raise InvalidInputError(msg) from None


class PricingRepository:
    """Repository for looking up pricing reference data.

    Wraps the in-memory base cost table and the static factor tables.
    Lookups keyed by an enumeration reject values outside it with
    InvalidInputError; the city lookup is permissive and returns None for
    cities it does not list.
    """

    def __init__(self, entries: list[BaseCostEntry]) -> None:
        self._entries = {
            (entry.building_type, entry.quality_level): entry for entry in entries
        }

    def get_base_cost(
        self,
        building_type: BuildingType | str,
        quality_level: QualityLevel | str,
    ) -> BaseCostEntry:
        """Look up the base cost entry for a building type and quality level.

        Raises InvalidInputError for values outside the enumerations, or if
        the table has no row for a valid combination.
        """
        bt: BuildingType = _coerce(BuildingType, building_type, "building type")
        ql: QualityLevel = _coerce(QualityLevel, quality_level, "quality level")

        entry = self._entries.get((bt, ql))
        if entry is None:
            msg = f"No base cost for building type '{bt}' at quality level '{ql}'"
            raise InvalidInputError(msg)
        return entry

    def get_structural_factor(self, structural_system: StructuralSystem | str) -> float:
        """Get the rate multiplier for a structural system."""
        system: StructuralSystem = _coerce(
            StructuralSystem, structural_system, "structural system"
        )
        return STRUCTURAL_FACTORS[system]

    def get_regional_factor(self, city: str) -> float | None:
        """Get the regional multiplier for a city, or None if not listed.

        Cities match by exact name; the caller applies the national
        average for a miss.
        """
        return REGIONAL_FACTORS.get(city)

    def get_days_per_m2(self, building_type: BuildingType | str) -> float:
        """Get the scheduling rate (days per m2) for a building type."""
        bt: BuildingType = _coerce(BuildingType, building_type, "building type")
        return DAYS_PER_M2[bt]

    def known_cities(self) -> list[str]:
        return sorted(REGIONAL_FACTORS)

    def get_material_prices(self) -> dict[str, MaterialPrice]:
        return dict(MATERIAL_PRICES)

    def get_labor_rates(self) -> dict[str, float]:
        return dict(LABOR_RATES)
