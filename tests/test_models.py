"""Tests for the pydantic input and output models."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from maliyet.models.analysis import RevenueAssumptions, RiskFactor, RoiAnalysis
from maliyet.models.enums import (
    BuildingType,
    FacadeType,
    FoundationType,
    HvacSystem,
    QualityLevel,
    RiskCategory,
    RiskLevel,
    RoiRating,
    StructuralSystem,
)
from maliyet.models.estimate import (
    ConstructionCosts,
    CostBreakdown,
    ProjectScenario,
    SoftCosts,
)
from maliyet.models.project import Location, ProjectBasics, TechnicalSpecs

# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _basics(**overrides: object) -> ProjectBasics:
    data: dict[str, object] = {
        "location": {"city": "Ankara", "district": "Çankaya"},
        "area": 500.0,
        "building_type": "commercial",
        "quality_level": "standard",
    }
    data.update(overrides)
    return ProjectBasics.model_validate(data)


def _breakdown(construction_total: float = 1000.0) -> CostBreakdown:
    soft = construction_total * 0.14
    site = construction_total * 0.12
    subtotal = construction_total + soft + site
    return CostBreakdown(
        construction=ConstructionCosts(
            materials=construction_total * 0.55,
            labor=construction_total * 0.30,
            equipment=construction_total * 0.15,
        ),
        soft_costs=SoftCosts(
            permits=construction_total * 0.025,
            design=construction_total * 0.08,
            consulting=construction_total * 0.035,
        ),
        site_specific=site,
        contingency=subtotal * 0.15,
        total=subtotal * 1.15,
    )


# ---------------------------------------------------------------------------
# ProjectBasics
# ---------------------------------------------------------------------------


class TestProjectBasics:
    def test_parses_enum_values(self) -> None:
        basics = _basics()
        assert basics.building_type == BuildingType.COMMERCIAL
        assert basics.quality_level == QualityLevel.STANDARD
        assert basics.location.district == "Çankaya"

    @pytest.mark.parametrize("area", [0.0, -10.0])
    def test_area_must_be_positive(self, area: float) -> None:
        with pytest.raises(ValidationError):
            _basics(area=area)

    def test_unknown_building_type(self) -> None:
        with pytest.raises(ValidationError):
            _basics(building_type="villa")

    def test_unknown_quality_level(self) -> None:
        with pytest.raises(ValidationError):
            _basics(quality_level="premium")

    def test_dates_optional(self) -> None:
        basics = _basics()
        assert basics.start_date is None
        assert basics.completion_date is None

    def test_completion_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError, match="before start_date"):
            _basics(start_date=date(2025, 6, 1), completion_date=date(2025, 1, 1))

    def test_same_day_start_and_completion_allowed(self) -> None:
        basics = _basics(start_date=date(2025, 6, 1), completion_date=date(2025, 6, 1))
        assert basics.completion_date == date(2025, 6, 1)

    def test_frozen(self) -> None:
        basics = _basics()
        with pytest.raises(ValidationError):
            basics.area = 10.0  # type: ignore[misc]

    def test_location_district_defaults_empty(self) -> None:
        assert Location(city="Konya").district == ""


# ---------------------------------------------------------------------------
# TechnicalSpecs
# ---------------------------------------------------------------------------


class TestTechnicalSpecs:
    def test_defaults(self) -> None:
        specs = TechnicalSpecs(floors=3, structural_system=StructuralSystem.CONCRETE)
        assert specs.foundation_type == FoundationType.SHALLOW
        assert specs.facade_type == FacadeType.BRICK
        assert specs.hvac_system == HvacSystem.CENTRAL
        assert specs.special_installations == []

    def test_curtain_wall_value(self) -> None:
        specs = TechnicalSpecs(
            floors=3, structural_system="steel", facade_type="curtain-wall"
        )
        assert specs.facade_type == FacadeType.CURTAIN_WALL

    @pytest.mark.parametrize("floors", [1, 50])
    def test_floor_bounds_accepted(self, floors: int) -> None:
        specs = TechnicalSpecs(floors=floors, structural_system="mixed")
        assert specs.floors == floors

    @pytest.mark.parametrize("floors", [0, 51, -3])
    def test_floor_bounds_rejected(self, floors: int) -> None:
        with pytest.raises(ValidationError):
            TechnicalSpecs(floors=floors, structural_system="concrete")

    def test_unknown_structural_system(self) -> None:
        with pytest.raises(ValidationError):
            TechnicalSpecs(floors=3, structural_system="timber")


# ---------------------------------------------------------------------------
# CostBreakdown
# ---------------------------------------------------------------------------


class TestCostBreakdown:
    def test_derived_totals(self) -> None:
        costs = _breakdown(1000.0)
        assert costs.construction_total == pytest.approx(1000.0)
        assert costs.soft_costs_total == pytest.approx(140.0)
        assert costs.subtotal == pytest.approx(1260.0)
        assert costs.total == pytest.approx(1449.0)

    def test_inconsistent_contingency_rejected(self) -> None:
        good = _breakdown()
        with pytest.raises(ValidationError, match="contingency"):
            CostBreakdown(
                construction=good.construction,
                soft_costs=good.soft_costs,
                site_specific=good.site_specific,
                contingency=good.contingency + 1.0,
                total=good.total + 1.0,
            )

    def test_inconsistent_total_rejected(self) -> None:
        good = _breakdown()
        with pytest.raises(ValidationError, match="total must equal"):
            CostBreakdown(
                construction=good.construction,
                soft_costs=good.soft_costs,
                site_specific=good.site_specific,
                contingency=good.contingency,
                total=good.total * 2,
            )

    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConstructionCosts(materials=-1.0, labor=0.0, equipment=0.0)

    def test_json_round_trip_validates(self) -> None:
        costs = _breakdown(2500.0)
        assert CostBreakdown.model_validate_json(costs.model_dump_json()) == costs


# ---------------------------------------------------------------------------
# ProjectScenario
# ---------------------------------------------------------------------------


class TestProjectScenario:
    def _scenario(self, **overrides: object) -> ProjectScenario:
        data: dict[str, object] = {
            "name": "Ofis",
            "basics": _basics(),
            "specs": TechnicalSpecs(floors=4, structural_system="concrete"),
            "costs": _breakdown(500_000.0),
            "created_at": datetime(2025, 3, 14, 9, 30),
        }
        data.update(overrides)
        return ProjectScenario(**data)  # type: ignore[arg-type]

    def test_generated_id(self) -> None:
        first = self._scenario()
        second = self._scenario()
        assert first.id.startswith("scenario-")
        assert first.id != second.id

    def test_cost_per_m2(self) -> None:
        scenario = self._scenario()
        assert scenario.cost_per_m2 == pytest.approx(500_000.0 * 1.449 / 500.0)

    def test_frozen(self) -> None:
        scenario = self._scenario()
        with pytest.raises(ValidationError):
            scenario.name = "Changed"  # type: ignore[misc]

    def test_summary_dict(self) -> None:
        summary = self._scenario().to_summary_dict()
        assert summary["name"] == "Ofis"
        assert summary["building_type"] == "commercial"
        assert summary["location"] == "Çankaya, Ankara"
        assert summary["area_formatted"] == "500 m²"
        assert summary["total_cost_formatted"] == "724.500 TL"
        assert summary["construction_total_formatted"] == "500.000 TL"
        assert summary["regional_factor"] is None
        assert summary["num_assumptions"] == 0
        assert summary["created_at_formatted"] == "2025-03-14 09:30"

    def test_summary_dict_currency(self) -> None:
        summary = self._scenario().to_summary_dict("USD")
        assert summary["total_cost_formatted"].endswith(" USD")

    def test_location_without_district(self) -> None:
        scenario = self._scenario(basics=_basics(location={"city": "Konya"}))
        assert scenario.to_summary_dict()["location"] == "Konya"

    def test_export_dict(self) -> None:
        export = self._scenario().to_export_dict()
        assert export["basics"]["building_type"] == "commercial"
        assert export["specs"]["floors"] == 4
        assert export["costs"]["subtotal"] == pytest.approx(630_000.0)
        assert export["costs"]["construction"]["materials"] == pytest.approx(275_000.0)
        assert export["derivation"] is None
        assert export["assumptions"] == []
        assert export["created_at"] == "2025-03-14T09:30:00"


# ---------------------------------------------------------------------------
# Analysis models
# ---------------------------------------------------------------------------


class TestAnalysisModels:
    def test_revenue_defaults(self) -> None:
        assumptions = RevenueAssumptions()
        assert assumptions.rental_years == 10
        assert assumptions.appreciation_rate == 5.0
        assert assumptions.discount_rate == 8.0

    def test_revenue_rejects_zero_years(self) -> None:
        with pytest.raises(ValidationError):
            RevenueAssumptions(rental_years=0)

    def test_revenue_years_upper_bound(self) -> None:
        assert RevenueAssumptions(rental_years=50).rental_years == 50
        with pytest.raises(ValidationError):
            RevenueAssumptions(rental_years=51)

    @pytest.mark.parametrize("field", ["appreciation_rate", "discount_rate"])
    def test_revenue_rates_capped(self, field: str) -> None:
        assert getattr(RevenueAssumptions.model_validate({field: 100.0}), field) == 100.0
        with pytest.raises(ValidationError):
            RevenueAssumptions.model_validate({field: 100.5})

    def test_revenue_rejects_negative_rent(self) -> None:
        with pytest.raises(ValidationError):
            RevenueAssumptions(rental_income=-100.0)

    def test_risk_factor_score(self) -> None:
        factor = RiskFactor(
            id="risk-0",
            category=RiskCategory.TECHNICAL,
            description="Test",
            probability=RiskLevel.MEDIUM,
            impact=RiskLevel.HIGH,
            mitigation="None",
        )
        assert factor.risk_score == 6
        assert factor.model_dump()["risk_score"] == 6

    def test_roi_analysis_computed_fields(self) -> None:
        analysis = RoiAnalysis(
            total_investment=100.0,
            expected_revenue=150.0,
            net_profit=15.0,
            roi_percentage=15.0,
            payback_period=None,
            irr=4.0,
            npv=-5.0,
        )
        assert analysis.rating == RoiRating.GOOD
        assert analysis.is_recoverable is False
        dumped = analysis.model_dump(mode="json")
        assert dumped["rating"] == "good"
        assert dumped["is_recoverable"] is False
