"""Shared fixtures for the test suite."""

import pytest


@pytest.fixture
def provider_quote():
    """Provider quote payload for AAPL, Yahoo field names."""
    return {
        "regularMarketPrice": 150.25,
        "regularMarketChangePercent": 1.52,
        "regularMarketVolume": 51_000_000,
        "regularMarketPreviousClose": 148.0,
        "regularMarketDayHigh": 151.0,
        "regularMarketDayLow": 147.5,
        "averageVolume": 60_000_000,
        "marketCap": 2_500_000_000_000,
    }


@pytest.fixture
def statement_record():
    """Factory for one provider income-statement record (yfinance row labels)."""
    def _make(end_date, **overrides):
        record = {
            "endDate": end_date,
            "Total Revenue": 94_836_000_000.0,
            "Gross Profit": 43_718_000_000.0,
            "Operating Income": 28_202_000_000.0,
            "EBITDA": 31_000_000_000.0,
            "Research And Development": 7_903_000_000.0,
            "Selling General And Administration": 6_239_000_000.0,
            "Total Expenses": 66_634_000_000.0,
            "Net Income": 23_636_000_000.0,
        }
        record.update(overrides)
        return record
    return _make


@pytest.fixture
def provider_summary(statement_record):
    """Factory for a provider quote-summary bundle; pass module=value to override."""
    def _make(**overrides):
        summary = {
            "price": {"longName": "Apple Inc.", "shortName": "Apple"},
            "summaryDetail": {
                "trailingPE": 28.5,
                "fiftyTwoWeekLow": 124.17,
                "fiftyTwoWeekHigh": 198.23,
                "beta": 1.29,
                "dividendYield": 0.0055,
                "marketCap": 2_400_000_000_000,
            },
            "financialData": {"profitMargins": 0.2531, "totalRevenue": 383_285_000_000},
            "defaultKeyStatistics": {"trailingEps": 6.13, "priceToBook": 45.1},
            "assetProfile": {"sector": "Technology", "industry": "Consumer Electronics"},
            "incomeStatementHistoryQuarterly": [
                statement_record("2023-03-31"),
                statement_record("2023-06-30"),
            ],
            "incomeStatementHistory": [statement_record("2022-09-30")],
        }
        summary.update(overrides)
        return summary
    return _make


@pytest.fixture
def response_payload():
    """Backend JSON body the frontend receives, one quarterly period."""
    return {
        "quote": {
            "price": 150.25, "changePercent": 1.52, "volume": 51_000_000, "previousClose": 148.0,
            "dayHigh": 151.0, "dayLow": 147.5, "averageVolume": 60_000_000,
        },
        "fundamentals": {
            "companyName": "Apple Inc.", "marketCap": 2_500_000_000_000, "peRatio": 28.5, "eps": 6.13,
            "profitMargin": 25.31, "revenue": 383_285_000_000, "fiftyTwoWeekLow": 124.17,
            "fiftyTwoWeekHigh": 198.23, "sector": "Technology", "industry": "Consumer Electronics",
            "beta": 1.29, "dividendYield": 0.55, "priceToBook": 45.1,
        },
        "financials": {
            "financial_statements": {
                "quarterly": {"income_statement": {
                    "2023-06-30": {"totalRevenue": 81_797_000_000, "netIncome": 19_881_000_000},
                }},
                "annual": {"income_statement": {}},
            }
        },
    }


@pytest.fixture
def null_payload():
    """Backend JSON body with every field null and no statements."""
    return {
        "quote": {k: None for k in ("price", "changePercent", "volume", "previousClose", "dayHigh", "dayLow", "averageVolume")},
        "fundamentals": {k: None for k in (
            "companyName", "marketCap", "peRatio", "eps", "profitMargin", "revenue", "fiftyTwoWeekLow",
            "fiftyTwoWeekHigh", "sector", "industry", "beta", "dividendYield", "priceToBook",
        )},
        "financials": {"financial_statements": {
            "quarterly": {"income_statement": {}},
            "annual": {"income_statement": {}},
        }},
    }
