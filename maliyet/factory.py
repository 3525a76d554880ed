"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from maliyet.data.repository import PricingRepository
from maliyet.data.seed import SEED_BASE_COSTS
from maliyet.engine import CostEngine


def create_default_engine() -> CostEngine:
    """Build a CostEngine over the bundled 2025 unit cost table.

    Callers that only want estimates should start here instead of wiring
    a PricingRepository by hand.

    Example::

        from maliyet import create_default_engine

        engine = create_default_engine()
        scenario = engine.estimate(basics, specs, "My Project")
    """
    return CostEngine(PricingRepository(SEED_BASE_COSTS))
