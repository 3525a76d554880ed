"""Maliyet construction cost estimation engine.

Usage::

    from maliyet import create_default_engine, ProjectBasics, TechnicalSpecs

    engine = create_default_engine()
    scenario = engine.estimate(basics, specs, "My Project")
    roi = compute_roi(scenario, RevenueAssumptions(rental_income=40_000))
"""

from maliyet.engine import CostEngine, calculate_detailed_costs, calculate_project_duration
from maliyet.exceptions import InvalidInputError, MaliyetError, ScenarioError
from maliyet.factory import create_default_engine
from maliyet.models.analysis import (
    RevenueAssumptions,
    RiskAssessment,
    RiskFactor,
    RoiAnalysis,
    ScenarioComparison,
    TrendPoint,
    TrendSummary,
)
from maliyet.models.enums import (
    BuildingType,
    CashFlowPeriodicity,
    FacadeType,
    FoundationType,
    HvacSystem,
    QualityLevel,
    RiskCategory,
    RiskLevel,
    RoiRating,
    StructuralSystem,
    TrendDirection,
)
from maliyet.models.estimate import (
    Assumption,
    CostBreakdown,
    ProjectScenario,
    RateDerivation,
)
from maliyet.models.financing import (
    CashFlowProjection,
    LoanSchedule,
    LoanTerms,
    TaxCalculation,
    TaxInputs,
)
from maliyet.models.project import Location, ProjectBasics, TechnicalSpecs
from maliyet.services import (
    ScenarioSet,
    assess_risks,
    calculate_loan,
    calculate_taxes,
    compare_scenarios,
    compute_roi,
    duplicate_scenario,
    project_cash_flow,
    project_trends,
    summarize_trends,
)

__all__ = [
    "Assumption",
    "BuildingType",
    "CashFlowPeriodicity",
    "CashFlowProjection",
    "CostBreakdown",
    "CostEngine",
    "FacadeType",
    "FoundationType",
    "HvacSystem",
    "InvalidInputError",
    "LoanSchedule",
    "LoanTerms",
    "Location",
    "MaliyetError",
    "ProjectBasics",
    "ProjectScenario",
    "QualityLevel",
    "RateDerivation",
    "RevenueAssumptions",
    "RiskAssessment",
    "RiskCategory",
    "RiskFactor",
    "RiskLevel",
    "RoiAnalysis",
    "RoiRating",
    "ScenarioComparison",
    "ScenarioError",
    "ScenarioSet",
    "StructuralSystem",
    "TaxCalculation",
    "TaxInputs",
    "TechnicalSpecs",
    "TrendDirection",
    "TrendPoint",
    "TrendSummary",
    "assess_risks",
    "calculate_loan",
    "calculate_detailed_costs",
    "calculate_project_duration",
    "calculate_taxes",
    "compare_scenarios",
    "compute_roi",
    "create_default_engine",
    "duplicate_scenario",
    "project_cash_flow",
    "project_trends",
    "summarize_trends",
]
