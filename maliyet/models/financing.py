"""Financing, cash-flow and tax models derived from a costed scenario."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)

from pydantic import BaseModel, ConfigDict, Field, computed_field

from maliyet.models.enums import CashFlowPeriodicity, TaxEfficiency

# ---------------------------------------------------------------------------
# Loan
# ---------------------------------------------------------------------------


class LoanTerms(BaseModel):
    """Loan inputs; ``principal=None`` finances 70% of the scenario total."""

    principal: float | None = Field(default=None, ge=0)
    interest_rate: float = Field(default=2.89, ge=0, le=50, description="Annual %")
    term_months: int = Field(default=120, ge=1, le=360)


class LoanPayment(BaseModel):
    """One month of an amortization schedule."""

    model_config = ConfigDict(frozen=True)

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


class LoanSchedule(BaseModel):
    """Level-payment loan with its month-by-month schedule."""

    model_config = ConfigDict(frozen=True)

    principal: float
    interest_rate: float
    term_months: int
    monthly_payment: float
    total_payment: float
    total_interest: float
    payments: list[LoanPayment]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def interest_share(self) -> float:
        """Interest as a percentage of everything paid."""
        if self.total_payment <= 0:
            return 0.0
        return self.total_interest / self.total_payment * 100


# ---------------------------------------------------------------------------
# Cash flow
# ---------------------------------------------------------------------------


class CashInflows(BaseModel):
    model_config = ConfigDict(frozen=True)

    equity: float
    loan: float
    sales: float
    other: float = 0.0

    @property
    def total(self) -> float:
        return self.equity + self.loan + self.sales + self.other


class CashOutflows(BaseModel):
    model_config = ConfigDict(frozen=True)

    materials: float
    labor: float
    equipment: float
    permits: float
    other: float

    @property
    def total(self) -> float:
        return self.materials + self.labor + self.equipment + self.permits + self.other


class CashFlowPeriod(BaseModel):
    """One month or quarter of the construction cash flow."""

    model_config = ConfigDict(frozen=True)

    index: int
    period: str
    starts_on: date
    inflows: CashInflows
    outflows: CashOutflows
    net_cash_flow: float
    cumulative_cash_flow: float
    minimum_balance: float


class CashFlowProjection(BaseModel):
    """Period-by-period cash flow with the headline figures."""

    model_config = ConfigDict(frozen=True)

    periodicity: CashFlowPeriodicity
    duration_months: int
    periods: list[CashFlowPeriod]
    total_inflows: float
    total_outflows: float
    peak_funding: float
    final_balance: float


# ---------------------------------------------------------------------------
# Tax
# ---------------------------------------------------------------------------


class TaxInputs(BaseModel):
    """Tax inputs; ``None`` values are derived from the scenario.

    Defaults: land 30% and construction 70% of the scenario total, a sale
    at 140% of it, and commercial treatment for commercial buildings.
    """

    land_value: float | None = Field(default=None, ge=0)
    construction_value: float | None = Field(default=None, ge=0)
    sale_price: float | None = Field(default=None, ge=0)
    is_first_home: bool = False
    is_commercial: bool | None = None
    holding_period_years: int = Field(default=2, ge=0, le=20)


class TaxCalculation(BaseModel):
    """Turkish transaction and gains taxes on one property sale."""

    model_config = ConfigDict(frozen=True)

    land_value: float
    construction_value: float
    total_value: float
    vat: float
    fees: float
    property_tax: float
    income_tax: float
    corporate_tax: float
    total_taxes: float
    net_profit: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_rate(self) -> float:
        if self.total_value <= 0:
            return 0.0
        return self.total_taxes / self.total_value * 100

    @computed_field  # type: ignore[prop-decorator]
    @property
    def efficiency(self) -> TaxEfficiency:
        return rate_tax_efficiency(self.effective_rate)


def rate_tax_efficiency(effective_rate: float) -> TaxEfficiency:
    """Band a tax burden: <10 very good, <20 good, <30 average, else high."""
    if effective_rate < 10:
        return TaxEfficiency.VERY_GOOD
    if effective_rate < 20:
        return TaxEfficiency.GOOD
    if effective_rate < 30:
        return TaxEfficiency.AVERAGE
    return TaxEfficiency.HIGH
