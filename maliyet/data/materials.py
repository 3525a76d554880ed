"""Reference material prices and labor day rates.

Display data only: the cost engine does not price individual materials.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MaterialPrice(BaseModel):
    """Market price of a common construction material."""

    model_config = ConfigDict(frozen=True)

    category: str
    price: float = Field(gt=0)
    unit: str
    suppliers: list[str]
    delivery_time: str
    last_updated: str


MATERIAL_PRICES: dict[str, MaterialPrice] = {
    "concrete": MaterialPrice(
        category="Concrete C25/30",
        price=850.0,
        unit="m³",
        suppliers=["Akçansa", "Nuh Çimento", "Bursa Çimento"],
        delivery_time="2-3 days",
        last_updated="2025-01-15",
    ),
    "steel": MaterialPrice(
        category="Reinforcing steel S420",
        price=28500.0,
        unit="ton",
        suppliers=["Ereğli Demir Çelik", "Çemtaş", "İskenderun Demir Çelik"],
        delivery_time="5-7 days",
        last_updated="2025-01-15",
    ),
    "brick": MaterialPrice(
        category="Brick 19cm",
        price=2.8,
        unit="piece",
        suppliers=["Ankara Tuğla", "Wienerberger", "Kale Tuğla"],
        delivery_time="3-5 days",
        last_updated="2025-01-15",
    ),
    "ceramic": MaterialPrice(
        category="Ceramic tile, 1st grade",
        price=85.0,
        unit="m²",
        suppliers=["VitrA", "Kale Seramik"],
        delivery_time="1-2 days",
        last_updated="2025-01-15",
    ),
    "insulation": MaterialPrice(
        category="XPS external insulation system",
        price=120.0,
        unit="m²",
        suppliers=["Dow", "BASF", "Ravago"],
        delivery_time="2-4 days",
        last_updated="2025-01-15",
    ),
    "windows": MaterialPrice(
        category="PVC window, double glazed",
        price=750.0,
        unit="m²",
        suppliers=["Rehau", "Deceuninck", "Veka"],
        delivery_time="10-15 days",
        last_updated="2025-01-15",
    ),
}

# TL per worker-day
LABOR_RATES: dict[str, float] = {
    "skilled": 450.0,
    "semiskilled": 350.0,
    "unskilled": 280.0,
    "specialist": 650.0,
}
