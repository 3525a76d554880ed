"""Domain models for the Maliyet cost estimation engine."""

from maliyet.models.analysis import (
    ComparisonRow,
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
    Confidence,
    FacadeType,
    FoundationType,
    HvacSystem,
    QualityLevel,
    RiskCategory,
    RiskLevel,
    RoiRating,
    StructuralSystem,
    TaxEfficiency,
    TrendDirection,
)
from maliyet.models.estimate import (
    Assumption,
    ConstructionCosts,
    CostBreakdown,
    EstimateMetadata,
    ProjectScenario,
    RateDerivation,
    SoftCosts,
)
from maliyet.models.financing import (
    CashFlowPeriod,
    CashFlowProjection,
    CashInflows,
    CashOutflows,
    LoanPayment,
    LoanSchedule,
    LoanTerms,
    TaxCalculation,
    TaxInputs,
)
from maliyet.models.project import Location, ProjectBasics, TechnicalSpecs

__all__ = [
    "Assumption",
    "BuildingType",
    "CashFlowPeriod",
    "CashFlowPeriodicity",
    "CashFlowProjection",
    "CashInflows",
    "CashOutflows",
    "ComparisonRow",
    "Confidence",
    "ConstructionCosts",
    "CostBreakdown",
    "EstimateMetadata",
    "FacadeType",
    "FoundationType",
    "HvacSystem",
    "LoanPayment",
    "LoanSchedule",
    "LoanTerms",
    "Location",
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
    "SoftCosts",
    "StructuralSystem",
    "TaxCalculation",
    "TaxEfficiency",
    "TaxInputs",
    "TechnicalSpecs",
    "TrendDirection",
    "TrendPoint",
    "TrendSummary",
]
