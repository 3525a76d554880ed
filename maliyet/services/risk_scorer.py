"""Risk scoring over the static project risk catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from maliyet.data.risk_catalog import RISK_CATALOG
from maliyet.models.analysis import RiskAssessment, RiskFactor
from maliyet.models.enums import RiskLevel

if TYPE_CHECKING:
    from maliyet.data.risk_catalog import RiskTemplate
    from maliyet.models.estimate import ProjectScenario

# Scores at or above this are flagged for immediate attention
HIGH_RISK_THRESHOLD = 6


def risk_level(score: float) -> RiskLevel:
    """Band a risk score: <=2 low, <=4 medium, otherwise high."""
    if score <= 2:
        return RiskLevel.LOW
    if score <= 4:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class RiskScorer:
    """Turns catalog risks into scored factors and an overall rating.

    Args:
        catalog: Risk templates to score. Defaults to the built-in catalog.
    """

    def __init__(self, catalog: list[RiskTemplate] | None = None) -> None:
        self._catalog = list(RISK_CATALOG if catalog is None else catalog)

    def generate_factors(self) -> list[RiskFactor]:
        return [
            RiskFactor(
                id=f"risk-{index}",
                category=template.category,
                description=template.description,
                probability=template.probability,
                impact=template.impact,
                mitigation=template.mitigation,
            )
            for index, template in enumerate(self._catalog)
        ]

    def assess(self, scenario: ProjectScenario | None = None) -> RiskAssessment:
        """Score the catalog and aggregate it.

        The scenario is accepted for interface symmetry with the other
        analyzers; the catalog does not depend on it.
        """
        del scenario
        factors = self.generate_factors()
        if factors:
            overall = sum(f.risk_score for f in factors) / len(factors)
        else:
            overall = 0.0

        return RiskAssessment(
            factors=factors,
            overall_score=overall,
            overall_level=risk_level(overall),
            high_risk_items=[f for f in factors if f.risk_score >= HIGH_RISK_THRESHOLD],
        )


def assess_risks(scenario: ProjectScenario | None = None) -> RiskAssessment:
    """Assess the built-in risk catalog."""
    return RiskScorer().assess(scenario)
