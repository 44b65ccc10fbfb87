"""Tests for GET /api/financial."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from backend.controllers.financial_controller import get_financial_service
from backend.main import app
from backend.services.financial_service import FinancialService
from backend.services.provider import YahooFinanceProvider


@pytest.fixture
def provider(provider_quote, provider_summary):
    p = Mock(spec=YahooFinanceProvider)
    p.get_quote.return_value = provider_quote
    p.get_summary.return_value = provider_summary()
    return p


@pytest.fixture
def client(provider):
    app.dependency_overrides[get_financial_service] = lambda: FinancialService(provider=provider)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.parametrize("query", ["", "?symbol=", "?symbol=%20%20"])
def test_missing_symbol(client, provider, query):
    res = client.get(f"/api/financial{query}")

    assert res.status_code == 400
    assert res.json() == {"error": "Stock symbol is required"}
    provider.get_quote.assert_not_called()
    provider.get_summary.assert_not_called()


def test_success(client, provider):
    res = client.get("/api/financial?symbol=aapl")

    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"quote", "fundamentals", "financials"}
    assert body["quote"]["price"] == 150.25
    assert body["fundamentals"]["profitMargin"] == 0.2531 * 100
    statements = body["financials"]["financial_statements"]
    assert set(statements["quarterly"]["income_statement"]) == {"2023-03-31", "2023-06-30"}
    assert set(statements["annual"]["income_statement"]) == {"2022-09-30"}
    provider.get_quote.assert_called_once_with("AAPL")


def test_nulls_are_serialised(client, provider):
    provider.get_quote.return_value = {"regularMarketPrice": 150.25}
    provider.get_summary.return_value = {}

    body = client.get("/api/financial?symbol=aapl").json()

    assert "volume" in body["quote"] and body["quote"]["volume"] is None
    assert "sector" in body["fundamentals"] and body["fundamentals"]["sector"] is None


def test_no_quarterly_statements(client, provider, provider_summary):
    provider.get_summary.return_value = provider_summary(price={}, incomeStatementHistoryQuarterly=[])

    body = client.get("/api/financial?symbol=aapl").json()

    assert body["fundamentals"]["companyName"] == "AAPL"
    assert body["fundamentals"]["marketCap"] == 2_500_000_000_000
    assert body["financials"]["financial_statements"]["quarterly"]["income_statement"] == {}


def test_summary_failure_returns_500(client, provider, caplog):
    provider.get_summary.side_effect = RuntimeError("quoteSummary timed out")

    res = client.get("/api/financial?symbol=aapl")

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to fetch stock data", "details": "quoteSummary timed out"}
    assert "quoteSummary timed out" in caplog.text


def test_malformed_provider_data_returns_500(client, provider):
    provider.get_quote.return_value = "garbage"

    res = client.get("/api/financial?symbol=aapl")

    assert res.status_code == 500
    assert res.json()["error"] == "Failed to fetch stock data"
    assert "AAPL" in res.json()["details"]


def test_health(client):
    assert client.get("/api/health").json() == {"status": "healthy"}
