"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from maliyet.config import configure_logging, load_settings
from maliyet.exceptions import InvalidInputError, ScenarioError
from maliyet.formatting import format_currency, format_payback, format_percent
from maliyet.models.analysis import RevenueAssumptions
from maliyet.models.enums import CashFlowPeriodicity
from maliyet.models.estimate import ProjectScenario  # noqa: TCH001 (FastAPI resolves at runtime)
from maliyet.models.financing import LoanTerms, TaxInputs
from maliyet.models.project import ProjectBasics, TechnicalSpecs  # noqa: TCH001
from maliyet.services.cash_flow import project_cash_flow
from maliyet.services.loan_calculator import calculate_loan
from maliyet.services.risk_scorer import assess_risks, risk_level
from maliyet.services.roi_analyzer import compute_roi
from maliyet.services.scenarios import compare_scenarios
from maliyet.services.tax_calculator import calculate_taxes
from maliyet.services.trend_projector import project_trends, summarize_trends

if TYPE_CHECKING:
    from maliyet.config import Settings
    from maliyet.engine import CostEngine

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


class EstimateRequest(BaseModel):
    basics: ProjectBasics
    specs: TechnicalSpecs
    name: str = "Current Project"


class RoiRequest(BaseModel):
    scenario: ProjectScenario
    assumptions: RevenueAssumptions = Field(default_factory=RevenueAssumptions)


class RiskRequest(BaseModel):
    scenario: ProjectScenario | None = None


class TrendRequest(BaseModel):
    scenario: ProjectScenario
    seed: int | None = None
    as_of: date | None = None


class CompareRequest(BaseModel):
    scenarios: list[ProjectScenario]


class LoanRequest(BaseModel):
    scenario: ProjectScenario
    terms: LoanTerms = Field(default_factory=LoanTerms)


class CashFlowRequest(BaseModel):
    scenario: ProjectScenario
    periodicity: CashFlowPeriodicity = CashFlowPeriodicity.MONTHLY
    start: date | None = None


class TaxRequest(BaseModel):
    scenario: ProjectScenario
    inputs: TaxInputs = Field(default_factory=TaxInputs)


def create_app(
    *,
    cost_engine: CostEngine | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine. If not provided, one is created via
        create_default_engine on first request.
    settings
        Optional settings for dependency injection (e.g. tests). If not
        provided, they are loaded from the environment.
    """
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(title="Maliyet", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.cost_engine = cost_engine
    app.state.settings = settings

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from maliyet.factory import create_default_engine

        eng = create_default_engine()
        app.state.cost_engine = eng
        return eng

    def _scenario_payload(scenario: ProjectScenario) -> dict[str, Any]:
        return {
            "scenario": scenario.model_dump(mode="json"),
            "summary_dict": scenario.to_summary_dict(settings.currency),
            "export_dict": scenario.to_export_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        engine = _get_cost_engine()
        try:
            scenario = engine.estimate(request.basics, request.specs, request.name)
        except InvalidInputError as exc:
            logger.warning("Rejected estimate request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _scenario_payload(scenario)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        from maliyet.models.enums import BuildingType, QualityLevel, StructuralSystem
        from maliyet.models.project import Location

        basics = ProjectBasics(
            location=Location(city="İstanbul", district="Kadıköy"),
            area=1000.0,
            building_type=BuildingType.RESIDENTIAL,
            quality_level=QualityLevel.STANDARD,
        )
        specs = TechnicalSpecs(floors=3, structural_system=StructuralSystem.CONCRETE)
        scenario = _get_cost_engine().estimate(basics, specs, "Kadıköy Residence")
        return _scenario_payload(scenario)

    # ------------------------------------------------------------------
    # POST /api/roi
    # ------------------------------------------------------------------

    @app.post("/api/roi")
    def roi(request: RoiRequest) -> dict[str, Any]:
        try:
            analysis = compute_roi(request.scenario, request.assumptions)
        except InvalidInputError as exc:
            logger.warning("Rejected ROI request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {
            "analysis": analysis.model_dump(mode="json"),
            "formatted": {
                "total_investment": format_currency(
                    analysis.total_investment, settings.currency
                ),
                "expected_revenue": format_currency(
                    analysis.expected_revenue, settings.currency
                ),
                "net_profit": format_currency(analysis.net_profit, settings.currency),
                "npv": format_currency(analysis.npv, settings.currency),
                "roi_percentage": format_percent(analysis.roi_percentage),
                "irr": format_percent(analysis.irr),
                "payback_period": format_payback(analysis.payback_period),
            },
        }

    # ------------------------------------------------------------------
    # POST /api/risks
    # ------------------------------------------------------------------

    @app.post("/api/risks")
    def risks(request: RiskRequest | None = None) -> dict[str, Any]:
        assessment = assess_risks(request.scenario if request else None)
        return {
            "assessment": assessment.model_dump(mode="json"),
            "factor_levels": {
                f.id: risk_level(f.risk_score).value for f in assessment.factors
            },
        }

    # ------------------------------------------------------------------
    # POST /api/trends
    # ------------------------------------------------------------------

    @app.post("/api/trends")
    def trends(request: TrendRequest) -> dict[str, Any]:
        try:
            points = project_trends(
                request.scenario, seed=request.seed, as_of=request.as_of
            )
        except InvalidInputError as exc:
            logger.warning("Rejected trend request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        summary = summarize_trends(points)
        return {
            "points": [p.model_dump(mode="json") for p in points],
            "summary": summary.model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # POST /api/scenarios/compare
    # ------------------------------------------------------------------

    @app.post("/api/scenarios/compare")
    def compare(request: CompareRequest) -> dict[str, Any]:
        try:
            comparison = compare_scenarios(request.scenarios)
        except ScenarioError as exc:
            logger.warning("Rejected comparison request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return comparison.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/loan
    # ------------------------------------------------------------------

    @app.post("/api/loan")
    def loan(request: LoanRequest) -> dict[str, Any]:
        schedule = calculate_loan(request.scenario, request.terms)
        return {
            "loan": schedule.model_dump(mode="json"),
            "formatted": {
                "principal": format_currency(schedule.principal, settings.currency),
                "monthly_payment": format_currency(
                    schedule.monthly_payment, settings.currency
                ),
                "total_payment": format_currency(schedule.total_payment, settings.currency),
                "total_interest": format_currency(
                    schedule.total_interest, settings.currency
                ),
            },
        }

    # ------------------------------------------------------------------
    # POST /api/cash-flow
    # ------------------------------------------------------------------

    @app.post("/api/cash-flow")
    def cash_flow(request: CashFlowRequest) -> dict[str, Any]:
        try:
            projection = project_cash_flow(
                request.scenario, request.periodicity, start=request.start
            )
        except InvalidInputError as exc:
            logger.warning("Rejected cash flow request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return projection.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/tax
    # ------------------------------------------------------------------

    @app.post("/api/tax")
    def tax(request: TaxRequest) -> dict[str, Any]:
        calculation = calculate_taxes(request.scenario, request.inputs)
        return {
            "taxes": calculation.model_dump(mode="json"),
            "formatted": {
                "total_taxes": format_currency(calculation.total_taxes, settings.currency),
                "net_profit": format_currency(calculation.net_profit, settings.currency),
                "effective_rate": format_percent(calculation.effective_rate),
            },
        }

    # ------------------------------------------------------------------
    # GET /api/reference/materials
    # ------------------------------------------------------------------

    @app.get("/api/reference/materials")
    def materials() -> dict[str, Any]:
        repository = _get_cost_engine().repository
        return {
            "materials": {
                key: price.model_dump(mode="json")
                for key, price in repository.get_material_prices().items()
            },
            "labor_rates": repository.get_labor_rates(),
            "cities": repository.known_cities(),
        }

    return app
