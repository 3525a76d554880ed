"""Turkish taxes on building and selling a property.

* VAT (KDV) 18% on the construction value; land is exempt, and so is a
  residential first home.
* Title deed and registry fees (harç) of 4% of the total value.
* Annual property tax (emlak vergisi): 0.2% commercial, 0.1% otherwise.
* Gains on a commercial sale pay 25% corporate tax. Residential gains pay
  income tax of 20%, or 15% after two years, and nothing after five.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maliyet.models.enums import BuildingType
from maliyet.models.financing import TaxCalculation, TaxInputs

if TYPE_CHECKING:
    from maliyet.models.estimate import ProjectScenario

VAT_RATE = 0.18
FEES_RATE = 0.04
PROPERTY_TAX_RATE_COMMERCIAL = 0.002
PROPERTY_TAX_RATE_RESIDENTIAL = 0.001
CORPORATE_TAX_RATE = 0.25

DEFAULT_LAND_SHARE = 0.30
DEFAULT_CONSTRUCTION_SHARE = 0.70
DEFAULT_SALE_MARKUP = 1.40

# (minimum holding years, rate), checked top down
INCOME_TAX_BANDS: list[tuple[int, float]] = [
    (5, 0.0),
    (2, 0.15),
    (0, 0.20),
]


def income_tax_rate(holding_period_years: int) -> float:
    """Capital gains rate for a residential sale after the given holding period."""
    for minimum_years, rate in INCOME_TAX_BANDS:
        if holding_period_years >= minimum_years:
            return rate
    return INCOME_TAX_BANDS[-1][1]


def calculate_taxes(
    scenario: ProjectScenario,
    inputs: TaxInputs | None = None,
) -> TaxCalculation:
    """Compute the taxes on selling the scenario's building."""
    i = inputs or TaxInputs()
    total_cost = scenario.costs.total

    land_value = total_cost * DEFAULT_LAND_SHARE if i.land_value is None else i.land_value
    construction_value = (
        total_cost * DEFAULT_CONSTRUCTION_SHARE
        if i.construction_value is None
        else i.construction_value
    )
    sale_price = total_cost * DEFAULT_SALE_MARKUP if i.sale_price is None else i.sale_price
    is_commercial = (
        scenario.basics.building_type == BuildingType.COMMERCIAL
        if i.is_commercial is None
        else i.is_commercial
    )

    total_value = land_value + construction_value

    vat = 0.0 if i.is_first_home and not is_commercial else construction_value * VAT_RATE
    fees = total_value * FEES_RATE
    property_tax = total_value * (
        PROPERTY_TAX_RATE_COMMERCIAL if is_commercial else PROPERTY_TAX_RATE_RESIDENTIAL
    )

    capital_gain = sale_price - total_value
    income_tax = 0.0
    corporate_tax = 0.0
    if capital_gain > 0:
        if is_commercial:
            corporate_tax = capital_gain * CORPORATE_TAX_RATE
        else:
            income_tax = capital_gain * income_tax_rate(i.holding_period_years)

    total_taxes = vat + fees + property_tax + income_tax + corporate_tax

    return TaxCalculation(
        land_value=land_value,
        construction_value=construction_value,
        total_value=total_value,
        vat=vat,
        fees=fees,
        property_tax=property_tax,
        income_tax=income_tax,
        corporate_tax=corporate_tax,
        total_taxes=total_taxes,
        net_profit=sale_price - total_value - total_taxes,
    )
