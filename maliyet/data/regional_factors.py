"""Regional cost multipliers for location-based adjustment.

Multipliers are relative to the national average (1.00) and reflect local
labor and material market conditions.
"""

from __future__ import annotations

# Maps city name (as entered on the form) -> multiplier.
REGIONAL_FACTORS: dict[str, float] = {
    "İstanbul": 1.15,
    "Ankara": 1.10,
    "İzmir": 1.08,
    "Bursa": 1.05,
    "Antalya": 1.12,
    "Adana": 0.95,
    "Gaziantep": 0.92,
    "Konya": 0.90,
    "Kayseri": 0.93,
    "Trabzon": 0.88,
}

# Used for any city not listed above
DEFAULT_REGIONAL_FACTOR: float = 1.00
