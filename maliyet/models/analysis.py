"""Output models of the analyzers that consume a cost breakdown."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)

from pydantic import BaseModel, ConfigDict, Field, computed_field

from maliyet.models.enums import (
    RiskCategory,
    RiskLevel,
    RoiRating,
    TrendDirection,
)

# Probability / impact level -> numeric score
LEVEL_SCORES: dict[RiskLevel, int] = {
    RiskLevel.LOW: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.HIGH: 3,
}


class RevenueAssumptions(BaseModel):
    """User-supplied revenue and financing assumptions for ROI analysis."""

    sale_price: float = Field(default=0.0, ge=0)
    rental_income: float = Field(default=0.0, ge=0, description="Monthly rent")
    rental_years: int = Field(default=10, ge=1, le=50)
    appreciation_rate: float = Field(default=5.0, gt=-100, le=100, description="Annual %")
    operating_costs: float = Field(default=0.0, ge=0, description="Annual")
    financing_costs: float = Field(default=0.0, ge=0)
    discount_rate: float = Field(default=8.0, gt=-100, le=100, description="Annual %")


class RoiAnalysis(BaseModel):
    """Investment return metrics for one scenario.

    ``payback_period`` is ``None`` when annual rent does not exceed annual
    operating costs: the investment is never recovered from rental cash
    flow. ``irr`` is a geometric-mean approximation, not a cash-flow root.
    """

    model_config = ConfigDict(frozen=True)

    total_investment: float
    expected_revenue: float
    net_profit: float
    roi_percentage: float
    payback_period: float | None
    irr: float
    npv: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_recoverable(self) -> bool:
        return self.payback_period is not None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rating(self) -> RoiRating:
        return rate_roi(self.roi_percentage)


def rate_roi(roi_percentage: float) -> RoiRating:
    """Band an ROI percentage: >=20 excellent, >=15 good, >=10 average."""
    if roi_percentage >= 20:
        return RoiRating.EXCELLENT
    if roi_percentage >= 15:
        return RoiRating.GOOD
    if roi_percentage >= 10:
        return RoiRating.AVERAGE
    return RoiRating.POOR


class RiskFactor(BaseModel):
    """A qualitative risk scored as probability x impact (1-9)."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: RiskCategory
    description: str
    probability: RiskLevel
    impact: RiskLevel
    mitigation: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def risk_score(self) -> int:
        return LEVEL_SCORES[self.probability] * LEVEL_SCORES[self.impact]


class RiskAssessment(BaseModel):
    """Aggregate view over the risk catalog."""

    model_config = ConfigDict(frozen=True)

    factors: list[RiskFactor]
    overall_score: float
    overall_level: RiskLevel
    high_risk_items: list[RiskFactor]


class TrendPoint(BaseModel):
    """One month of the cost trend series."""

    model_config = ConfigDict(frozen=True)

    period: str
    month: date
    material_costs: float
    labor_costs: float
    total_costs: float
    inflation_rate: float
    is_forecast: bool = False
    is_current: bool = False


class TrendSummary(BaseModel):
    """Direction of each cost stream from the current month to the next."""

    model_config = ConfigDict(frozen=True)

    material: TrendDirection
    labor: TrendDirection
    total: TrendDirection
    point_directions: list[TrendDirection | None]


class ComparisonRow(BaseModel):
    """One scenario's line in a side-by-side comparison."""

    model_config = ConfigDict(frozen=True)

    scenario_id: str
    name: str
    total: float
    cost_per_m2: float
    materials: float
    labor: float
    equipment: float
    difference: float
    percent_difference: float
    is_cheapest: bool
    is_most_expensive: bool


class ScenarioComparison(BaseModel):
    """Side-by-side comparison of several scenarios."""

    model_config = ConfigDict(frozen=True)

    rows: list[ComparisonRow]
    min_total: float
    max_total: float
