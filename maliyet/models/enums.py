"""Enums for the Maliyet domain models.

These enums mirror the choices offered by the project input form and the
categorical outputs of the analyzers.
"""

from enum import StrEnum


class BuildingType(StrEnum):
    """Building use classes with their own base cost rows."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class QualityLevel(StrEnum):
    """Finish quality level, selecting the base cost column."""

    ECONOMIC = "economic"
    STANDARD = "standard"
    LUXURY = "luxury"


class StructuralSystem(StrEnum):
    """Primary structural system classifications."""

    CONCRETE = "concrete"
    STEEL = "steel"
    MIXED = "mixed"


class FoundationType(StrEnum):
    """Foundation types (descriptive only)."""

    SHALLOW = "shallow"
    DEEP = "deep"
    PILE = "pile"


class FacadeType(StrEnum):
    """Facade / cladding types (descriptive only)."""

    BRICK = "brick"
    CURTAIN_WALL = "curtain-wall"
    COMPOSITE = "composite"


class HvacSystem(StrEnum):
    """HVAC system classifications (descriptive only)."""

    CENTRAL = "central"
    SPLIT = "split"
    VRF = "vrf"


class RiskCategory(StrEnum):
    """Risk factor categories."""

    FINANCIAL = "financial"
    TECHNICAL = "technical"
    ENVIRONMENTAL = "environmental"
    REGULATORY = "regulatory"


class RiskLevel(StrEnum):
    """Three-step scale used for probability, impact and risk bands."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RoiRating(StrEnum):
    """Qualitative band for an ROI percentage."""

    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


class TrendDirection(StrEnum):
    """Month-over-month cost movement."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Confidence(StrEnum):
    """Confidence level for assumed values."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CashFlowPeriodicity(StrEnum):
    """Granularity of the construction cash-flow table."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class TaxEfficiency(StrEnum):
    """Qualitative band for the effective tax rate on a sale."""

    VERY_GOOD = "very_good"
    GOOD = "good"
    AVERAGE = "average"
    HIGH = "high"
