"""Analyzers that consume a costed scenario."""

from maliyet.services.cash_flow import construction_months, project_cash_flow
from maliyet.services.loan_calculator import amortize, calculate_loan
from maliyet.services.risk_scorer import RiskScorer, assess_risks, risk_level
from maliyet.services.roi_analyzer import compute_roi
from maliyet.services.scenarios import (
    ScenarioSet,
    compare_scenarios,
    create_scenario,
    duplicate_scenario,
)
from maliyet.services.tax_calculator import calculate_taxes, income_tax_rate
from maliyet.services.trend_projector import (
    TrendProjector,
    project_trends,
    summarize_trends,
    trend_direction,
)

__all__ = [
    "RiskScorer",
    "ScenarioSet",
    "TrendProjector",
    "amortize",
    "assess_risks",
    "calculate_loan",
    "calculate_taxes",
    "compare_scenarios",
    "compute_roi",
    "construction_months",
    "create_scenario",
    "duplicate_scenario",
    "income_tax_rate",
    "project_cash_flow",
    "project_trends",
    "risk_level",
    "summarize_trends",
    "trend_direction",
]
