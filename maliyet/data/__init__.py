"""Pricing reference data for the Maliyet cost estimation engine."""

from maliyet.data.base_costs import BaseCostEntry
from maliyet.data.materials import MaterialPrice
from maliyet.data.repository import PricingRepository
from maliyet.data.risk_catalog import RiskTemplate

__all__ = [
    "BaseCostEntry",
    "MaterialPrice",
    "PricingRepository",
    "RiskTemplate",
]
