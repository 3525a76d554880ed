"""Tests for the FastAPI endpoints (engine is real, settings are injected)."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from maliyet.api.app import create_app
from maliyet.config import Settings
from maliyet.engine import CostEngine
from maliyet.exceptions import InvalidInputError
from maliyet.factory import create_default_engine


@pytest.fixture()
def client() -> TestClient:
    app = create_app(cost_engine=create_default_engine(), settings=Settings())
    return TestClient(app)


def _estimate_body(**basics_overrides: Any) -> dict[str, Any]:
    basics: dict[str, Any] = {
        "location": {"city": "İstanbul", "district": "Kadıköy"},
        "area": 1000,
        "building_type": "residential",
        "quality_level": "standard",
    }
    basics.update(basics_overrides)
    return {
        "basics": basics,
        "specs": {"floors": 3, "structural_system": "concrete"},
        "name": "Kadıköy Residence",
    }


def _scenario(client: TestClient) -> dict[str, Any]:
    response = client.post("/api/estimate", json=_estimate_body())
    assert response.status_code == 200
    return response.json()["scenario"]


# ---------------------------------------------------------------------------
# GET /api/health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}


# ---------------------------------------------------------------------------
# POST /api/estimate
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_valid_request(self, client: TestClient) -> None:
        response = client.post("/api/estimate", json=_estimate_body())
        assert response.status_code == 200
        data = response.json()
        assert data["scenario"]["costs"]["total"] == pytest.approx(7_498_575.0)
        assert data["scenario"]["duration_days"] == 800
        assert data["summary_dict"]["total_cost_formatted"] == "7.498.575 TL"
        assert data["summary_dict"]["location"] == "Kadıköy, İstanbul"
        assert data["export_dict"]["costs"]["subtotal"] == pytest.approx(6_520_500.0)

    def test_unknown_city_reports_assumption(self, client: TestClient) -> None:
        body = _estimate_body(location={"city": "Eskişehir"})
        data = client.post("/api/estimate", json=body).json()
        assert data["summary_dict"]["num_assumptions"] == 1
        assert data["scenario"]["assumptions"][0]["parameter"] == "regional_factor"

    def test_unknown_building_type_rejected(self, client: TestClient) -> None:
        response = client.post("/api/estimate", json=_estimate_body(building_type="villa"))
        assert response.status_code == 422

    def test_zero_area_rejected(self, client: TestClient) -> None:
        response = client.post("/api/estimate", json=_estimate_body(area=0))
        assert response.status_code == 422

    def test_too_many_floors_rejected(self, client: TestClient) -> None:
        body = _estimate_body()
        body["specs"]["floors"] = 51
        assert client.post("/api/estimate", json=body).status_code == 422

    def test_engine_error_becomes_422(self) -> None:
        engine = MagicMock(spec=CostEngine)
        engine.estimate.side_effect = InvalidInputError("No base cost for this row")
        client = TestClient(create_app(cost_engine=engine, settings=Settings()))

        response = client.post("/api/estimate", json=_estimate_body())
        assert response.status_code == 422
        assert "No base cost" in response.json()["detail"]

    def test_currency_setting(self) -> None:
        app = create_app(
            cost_engine=create_default_engine(), settings=Settings(currency="₺")
        )
        data = TestClient(app).post("/api/estimate", json=_estimate_body()).json()
        assert data["summary_dict"]["total_cost_formatted"] == "7.498.575 ₺"


class TestSampleEstimate:
    def test_sample(self, client: TestClient) -> None:
        response = client.get("/api/sample-estimate")
        assert response.status_code == 200
        scenario = response.json()["scenario"]
        assert scenario["name"] == "Kadıköy Residence"
        assert scenario["costs"]["total"] == pytest.approx(7_498_575.0)


# ---------------------------------------------------------------------------
# Analyzers
# ---------------------------------------------------------------------------


class TestRoi:
    def test_roi(self, client: TestClient) -> None:
        body = {
            "scenario": _scenario(client),
            "assumptions": {"rental_income": 60_000, "operating_costs": 50_000},
        }
        response = client.post("/api/roi", json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["total_investment"] == pytest.approx(7_498_575.0)
        assert data["analysis"]["payback_period"] == pytest.approx(7_498_575.0 / 670_000)
        assert data["formatted"]["total_investment"] == "7.498.575 TL"
        assert data["formatted"]["payback_period"].endswith(" years")

    def test_roi_defaults_not_recoverable(self, client: TestClient) -> None:
        response = client.post("/api/roi", json={"scenario": _scenario(client)})
        data = response.json()
        assert data["analysis"]["payback_period"] is None
        assert data["analysis"]["rating"] == "poor"
        assert data["formatted"]["payback_period"] == "Not recoverable"
        assert data["formatted"]["roi_percentage"] == "-100.0%"

    def test_inconsistent_costs_rejected(self, client: TestClient) -> None:
        scenario = _scenario(client)
        scenario["costs"]["total"] = 1.0
        response = client.post("/api/roi", json={"scenario": scenario})
        assert response.status_code == 422

    def test_excessive_rental_years_rejected(self, client: TestClient) -> None:
        body = {
            "scenario": _scenario(client),
            "assumptions": {"sale_price": 1_000_000, "rental_years": 20_000},
        }
        response = client.post("/api/roi", json=body)
        assert response.status_code == 422

    def test_excessive_appreciation_rejected(self, client: TestClient) -> None:
        body = {
            "scenario": _scenario(client),
            "assumptions": {"sale_price": 1_000_000, "appreciation_rate": 1e9},
        }
        response = client.post("/api/roi", json=body)
        assert response.status_code == 422


class TestRisks:
    def test_without_body(self, client: TestClient) -> None:
        response = client.post("/api/risks")
        assert response.status_code == 200
        data = response.json()
        assert len(data["assessment"]["factors"]) == 6
        assert data["assessment"]["overall_level"] == "high"
        assert data["factor_levels"]["risk-0"] == "high"
        assert data["factor_levels"]["risk-3"] == "medium"

    def test_with_scenario(self, client: TestClient) -> None:
        response = client.post("/api/risks", json={"scenario": _scenario(client)})
        assert response.status_code == 200
        assert response.json()["assessment"]["overall_score"] == pytest.approx(32 / 6)


class TestTrends:
    def test_seeded(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "seed": 11, "as_of": "2025-03-15"}
        first = client.post("/api/trends", json=body).json()
        second = client.post("/api/trends", json=body).json()
        assert first["points"] == second["points"]
        assert len(first["points"]) == 18
        assert first["points"][11]["month"] == "2025-03-01"
        assert first["points"][11]["is_current"] is True
        assert first["summary"]["point_directions"][0] is None

    def test_as_of_at_calendar_end_rejected(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "seed": 11, "as_of": "9999-12-01"}
        response = client.post("/api/trends", json=body)
        assert response.status_code == 422
        assert "outside the calendar" in response.json()["detail"]


class TestCompare:
    def test_compare(self, client: TestClient) -> None:
        concrete = _scenario(client)
        body = _estimate_body()
        body["specs"]["structural_system"] = "mixed"
        mixed = client.post("/api/estimate", json=body).json()["scenario"]

        response = client.post(
            "/api/scenarios/compare", json={"scenarios": [concrete, mixed]}
        )
        assert response.status_code == 200
        rows = response.json()["rows"]
        assert rows[0]["is_cheapest"] is True
        assert rows[1]["is_most_expensive"] is True
        assert rows[1]["percent_difference"] == pytest.approx(8.0)

    def test_empty_rejected(self, client: TestClient) -> None:
        response = client.post("/api/scenarios/compare", json={"scenarios": []})
        assert response.status_code == 422


class TestLoan:
    def test_default_terms(self, client: TestClient) -> None:
        response = client.post("/api/loan", json={"scenario": _scenario(client)})
        assert response.status_code == 200
        data = response.json()
        assert data["loan"]["principal"] == pytest.approx(7_498_575.0 * 0.7)
        assert len(data["loan"]["payments"]) == 120
        assert data["loan"]["payments"][-1]["balance"] == 0.0
        assert data["loan"]["interest_share"] > 0
        assert data["formatted"]["monthly_payment"].endswith(" TL")

    def test_zero_rate(self, client: TestClient) -> None:
        body = {
            "scenario": _scenario(client),
            "terms": {"principal": 1_200_000, "interest_rate": 0, "term_months": 12},
        }
        data = client.post("/api/loan", json=body).json()
        assert data["loan"]["monthly_payment"] == pytest.approx(100_000.0)
        assert data["loan"]["total_interest"] == pytest.approx(0.0)
        assert data["formatted"]["total_interest"] == "0 TL"

    def test_term_out_of_range(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "terms": {"term_months": 0}}
        assert client.post("/api/loan", json=body).status_code == 422


class TestCashFlow:
    def test_monthly(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "start": "2025-01-01"}
        response = client.post("/api/cash-flow", json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["periodicity"] == "monthly"
        assert len(data["periods"]) == 27
        assert data["periods"][0]["starts_on"] == "2025-01-01"
        assert data["peak_funding"] == pytest.approx(124_966.6667, abs=1e-3)

    def test_quarterly(self, client: TestClient) -> None:
        body = {
            "scenario": _scenario(client),
            "periodicity": "quarterly",
            "start": "2025-01-01",
        }
        data = client.post("/api/cash-flow", json=body).json()
        assert len(data["periods"]) == 9

    def test_unknown_periodicity_rejected(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "periodicity": "weekly"}
        assert client.post("/api/cash-flow", json=body).status_code == 422

    def test_start_at_calendar_end_rejected(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "start": "9999-06-01"}
        response = client.post("/api/cash-flow", json=body)
        assert response.status_code == 422
        assert "outside the calendar" in response.json()["detail"]


class TestTax:
    def test_defaults(self, client: TestClient) -> None:
        response = client.post("/api/tax", json={"scenario": _scenario(client)})
        assert response.status_code == 200
        data = response.json()
        assert data["taxes"]["total_taxes"] == pytest.approx(7_498_575.0 * 0.227)
        assert data["taxes"]["efficiency"] == "average"
        assert data["formatted"]["effective_rate"] == "+22.7%"

    def test_first_home(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "inputs": {"is_first_home": True}}
        data = client.post("/api/tax", json=body).json()
        assert data["taxes"]["vat"] == 0.0

    def test_holding_period_out_of_range(self, client: TestClient) -> None:
        body = {"scenario": _scenario(client), "inputs": {"holding_period_years": 99}}
        assert client.post("/api/tax", json=body).status_code == 422


class TestReference:
    def test_materials(self, client: TestClient) -> None:
        response = client.get("/api/reference/materials")
        assert response.status_code == 200
        data = response.json()
        assert data["materials"]["concrete"]["price"] == 850.0
        assert data["labor_rates"]["specialist"] == 650.0
        assert "İstanbul" in data["cities"]
