"""Cost breakdown and scenario output models for the Maliyet engine."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from maliyet.models.enums import Confidence
from maliyet.models.project import ProjectBasics, TechnicalSpecs  # noqa: TCH001 (pydantic resolves at runtime)

CONTINGENCY_RATE = 0.15


def new_scenario_id() -> str:
    return f"scenario-{uuid4().hex[:12]}"


class ConstructionCosts(BaseModel):
    """Direct construction cost split."""

    model_config = ConfigDict(frozen=True)

    materials: float = Field(ge=0)
    labor: float = Field(ge=0)
    equipment: float = Field(ge=0)

    @property
    def total(self) -> float:
        return self.materials + self.labor + self.equipment


class SoftCosts(BaseModel):
    """Non-construction project costs."""

    model_config = ConfigDict(frozen=True)

    permits: float = Field(ge=0)
    design: float = Field(ge=0)
    consulting: float = Field(ge=0)

    @property
    def total(self) -> float:
        return self.permits + self.design + self.consulting


class CostBreakdown(BaseModel):
    """Full cost breakdown for one (basics, specs) submission.

    ``total`` is always ``subtotal + contingency`` and ``contingency`` is
    always 15% of the subtotal; both are checked on construction so a
    breakdown received over the API cannot carry inconsistent figures.
    """

    model_config = ConfigDict(frozen=True)

    construction: ConstructionCosts
    soft_costs: SoftCosts
    site_specific: float = Field(ge=0)
    contingency: float = Field(ge=0)
    total: float = Field(ge=0)

    @property
    def construction_total(self) -> float:
        return self.construction.total

    @property
    def soft_costs_total(self) -> float:
        return self.soft_costs.total

    @property
    def subtotal(self) -> float:
        return self.construction_total + self.soft_costs_total + self.site_specific

    @model_validator(mode="after")
    def totals_are_consistent(self) -> CostBreakdown:
        subtotal = self.subtotal
        if not math.isclose(
            self.contingency, subtotal * CONTINGENCY_RATE, rel_tol=1e-9, abs_tol=1e-6
        ):
            msg = (
                f"contingency must be {CONTINGENCY_RATE:.0%} of subtotal, "
                f"got {self.contingency} for subtotal {subtotal}"
            )
            raise ValueError(msg)
        if not math.isclose(
            self.total, subtotal + self.contingency, rel_tol=1e-9, abs_tol=1e-6
        ):
            msg = (
                f"total must equal subtotal + contingency, "
                f"got {self.total} != {subtotal} + {self.contingency}"
            )
            raise ValueError(msg)
        return self


class RateDerivation(BaseModel):
    """How the adjusted per-m2 rate was built (transparency layer)."""

    model_config = ConfigDict(frozen=True)

    base_rate: float
    structural_factor: float
    height_factor: float
    regional_factor: float
    adjusted_rate: float


class Assumption(BaseModel):
    """A documented assumption made during estimation."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    cost_data_version: str
    estimation_method: str = "unit_area_rate"
    cost_data_source: str = "Static unit cost table (TL/m2)"


class ProjectScenario(BaseModel):
    """One fully computed (basics, specs, costs) tuple.

    Scenarios are frozen: a change to the inputs produces a new scenario
    through the engine, and copies for comparison are deep copies.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_scenario_id)
    name: str
    basics: ProjectBasics
    specs: TechnicalSpecs
    costs: CostBreakdown
    derivation: RateDerivation | None = None
    assumptions: list[Assumption] = Field(default_factory=list)
    duration_days: int | None = None
    metadata: EstimateMetadata | None = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def cost_per_m2(self) -> float:
        return self.costs.total / self.basics.area

    def to_summary_dict(self, currency: str = "TL") -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from maliyet.formatting import format_area, format_currency

        return {
            "id": self.id,
            "name": self.name,
            "building_type": self.basics.building_type.value,
            "quality_level": self.basics.quality_level.value,
            "structural_system": self.specs.structural_system.value,
            "floors": self.specs.floors,
            "location": _location_label(self),
            "area_formatted": format_area(self.basics.area),
            "total_cost_formatted": format_currency(self.costs.total, currency),
            "cost_per_m2_formatted": format_currency(self.cost_per_m2, currency),
            "construction_total_formatted": format_currency(
                self.costs.construction_total, currency
            ),
            "soft_costs_formatted": format_currency(self.costs.soft_costs_total, currency),
            "site_specific_formatted": format_currency(self.costs.site_specific, currency),
            "contingency_formatted": format_currency(self.costs.contingency, currency),
            "regional_factor": (
                self.derivation.regional_factor if self.derivation else None
            ),
            "duration_days": self.duration_days,
            "num_assumptions": len(self.assumptions),
            "created_at_formatted": self.created_at.strftime("%Y-%m-%d %H:%M"),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict for spreadsheet/PDF export."""
        return {
            "id": self.id,
            "name": self.name,
            "basics": self.basics.model_dump(mode="json"),
            "specs": self.specs.model_dump(mode="json"),
            "costs": {
                **self.costs.model_dump(),
                "construction_total": self.costs.construction_total,
                "soft_costs_total": self.costs.soft_costs_total,
                "subtotal": self.costs.subtotal,
            },
            "cost_per_m2": self.cost_per_m2,
            "derivation": self.derivation.model_dump() if self.derivation else None,
            "assumptions": [
                {
                    "parameter": a.parameter,
                    "assumed_value": a.assumed_value,
                    "reasoning": a.reasoning,
                    "confidence": a.confidence.value,
                }
                for a in self.assumptions
            ],
            "duration_days": self.duration_days,
            "created_at": self.created_at.isoformat(),
            "metadata": self.metadata.model_dump() if self.metadata else None,
        }


def _location_label(scenario: ProjectScenario) -> str:
    loc = scenario.basics.location
    if loc.district:
        return f"{loc.district}, {loc.city}"
    return loc.city
