"""Static catalog of construction project risks.

The catalog is the same for every project; probability and impact are not
derived from the scenario.
"""

from __future__ import annotations

from dataclasses import dataclass

from maliyet.models.enums import RiskCategory, RiskLevel


@dataclass(frozen=True)
class RiskTemplate:
    """A catalog risk before it is numbered and scored."""

    category: RiskCategory
    description: str
    probability: RiskLevel
    impact: RiskLevel
    mitigation: str


RISK_CATALOG: list[RiskTemplate] = [
    RiskTemplate(
        category=RiskCategory.FINANCIAL,
        description="Inflation and currency fluctuations",
        probability=RiskLevel.HIGH,
        impact=RiskLevel.HIGH,
        mitigation="Fixed price contracts, currency hedging",
    ),
    RiskTemplate(
        category=RiskCategory.TECHNICAL,
        description="Soil conditions and geotechnical risks",
        probability=RiskLevel.MEDIUM,
        impact=RiskLevel.HIGH,
        mitigation="Detailed soil survey, additional foundation work",
    ),
    RiskTemplate(
        category=RiskCategory.REGULATORY,
        description="Zoning changes and permit delays",
        probability=RiskLevel.MEDIUM,
        impact=RiskLevel.MEDIUM,
        mitigation="Early permit applications, legal consultation",
    ),
    RiskTemplate(
        category=RiskCategory.ENVIRONMENTAL,
        description="Weather conditions and seasonal effects",
        probability=RiskLevel.HIGH,
        impact=RiskLevel.LOW,
        mitigation="Seasonal planning, weather insurance",
    ),
    RiskTemplate(
        category=RiskCategory.FINANCIAL,
        description="Material price increases",
        probability=RiskLevel.HIGH,
        impact=RiskLevel.MEDIUM,
        mitigation="Early material procurement, price-guaranteed contracts",
    ),
    RiskTemplate(
        category=RiskCategory.TECHNICAL,
        description="Difficulty finding skilled workers",
        probability=RiskLevel.MEDIUM,
        impact=RiskLevel.MEDIUM,
        mitigation="Early worker reservation, training programs",
    ),
]
