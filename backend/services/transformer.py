"""
Provider payload -> stable response contract.

Everything here is pure: the quote and summary dicts produced by the
provider go in, a FinancialResponse comes out. Every declared key is always
present; anything the provider did not supply (or supplied as NaN/inf) is
None.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from backend.models.financial_model import (
    FinancialResponse,
    Financials,
    FinancialStatements,
    Fundamentals,
    IncomeStatementEntry,
    Quote,
    StatementSeries,
)

SUMMARY_MODULES = (
    "price",
    "summaryDetail",
    "financialData",
    "defaultKeyStatistics",
    "assetProfile",
    "incomeStatementHistoryQuarterly",
    "incomeStatementHistory",
)

QUOTE_FIELDS = {
    "price": "regularMarketPrice",
    "changePercent": "regularMarketChangePercent",
    "volume": "regularMarketVolume",
    "previousClose": "regularMarketPreviousClose",
    "dayHigh": "regularMarketDayHigh",
    "dayLow": "regularMarketDayLow",
    "averageVolume": "averageVolume",
}

# output key -> (summary module, provider key, scale)
FUNDAMENTAL_FIELDS = {
    "peRatio": ("summaryDetail", "trailingPE", 1),
    "eps": ("defaultKeyStatistics", "trailingEps", 1),
    "profitMargin": ("financialData", "profitMargins", 100),
    "revenue": ("financialData", "totalRevenue", 1),
    "fiftyTwoWeekLow": ("summaryDetail", "fiftyTwoWeekLow", 1),
    "fiftyTwoWeekHigh": ("summaryDetail", "fiftyTwoWeekHigh", 1),
    "beta": ("summaryDetail", "beta", 1),
    "dividendYield": ("summaryDetail", "dividendYield", 100),
    "priceToBook": ("defaultKeyStatistics", "priceToBook", 1),
}

# output metric -> provider statement row
INCOME_STATEMENT_FIELDS = {
    "totalRevenue": "Total Revenue",
    "grossProfit": "Gross Profit",
    "operatingIncome": "Operating Income",
    "ebitda": "EBITDA",
    "researchDevelopment": "Research And Development",
    "sellingGeneralAdministrative": "Selling General And Administration",
    "totalOperatingExpenses": "Total Expenses",
    "netIncome": "Net Income",
}


class ProviderResponseError(ValueError):
    """Provider data did not have the expected shape."""


def normalize_symbol(symbol: Optional[str]) -> str:
    return (symbol or "").strip().upper()


def to_number(value: Any) -> Optional[float]:
    """Finite float or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if np.isfinite(number) else None


def to_text(value: Any) -> Optional[str]:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    text = str(value).strip()
    return text or None


def to_period_key(end_date: Any) -> str:
    """
    Calendar date of a period-end timestamp as YYYY-MM-DD.
    The date is taken in the timestamp's own offset, never shifted to UTC.
    Bare numbers are epoch seconds.
    """
    try:
        if isinstance(end_date, (int, float)) and not isinstance(end_date, bool):
            ts = pd.Timestamp(end_date, unit="s", tz="UTC")
        else:
            ts = pd.Timestamp(end_date)
    except (TypeError, ValueError) as e:
        raise ProviderResponseError(f"Invalid statement end date: {end_date!r}") from e
    if pd.isna(ts):
        raise ProviderResponseError("Statement record without end date")
    return ts.date().isoformat()


def _module(summary: Mapping, name: str) -> Mapping:
    module = summary.get(name)
    if module is None:
        return {}
    if not isinstance(module, Mapping):
        raise ProviderResponseError(f"Unexpected shape for summary module '{name}'")
    return module


def transform_quote(quote: Mapping) -> Quote:
    return Quote(**{field: to_number(quote.get(key)) for field, key in QUOTE_FIELDS.items()})


def transform_fundamentals(symbol: str, quote: Mapping, summary: Mapping) -> Fundamentals:
    price = _module(summary, "price")
    profile = _module(summary, "assetProfile")

    values: Dict[str, Any] = {}
    for field, (module, key, scale) in FUNDAMENTAL_FIELDS.items():
        number = to_number(_module(summary, module).get(key))
        values[field] = None if number is None else number * scale

    market_cap = to_number(quote.get("marketCap"))
    if market_cap is None:
        market_cap = to_number(_module(summary, "summaryDetail").get("marketCap"))

    return Fundamentals(
        companyName=to_text(price.get("longName")) or to_text(price.get("shortName")) or symbol,
        marketCap=market_cap,
        sector=to_text(profile.get("sector")),
        industry=to_text(profile.get("industry")),
        **values,
    )


def transform_statements(records: Any) -> Dict[str, IncomeStatementEntry]:
    """Provider statement records -> {date: entry}. Missing series -> {}."""
    if records is None:
        return {}
    if not isinstance(records, (list, tuple)):
        raise ProviderResponseError("Income statement history is not a list of records")

    statements = {}
    for record in records:
        if not isinstance(record, Mapping):
            raise ProviderResponseError("Income statement record is not a mapping")
        statements[to_period_key(record.get("endDate"))] = IncomeStatementEntry(
            **{field: to_number(record.get(row)) for field, row in INCOME_STATEMENT_FIELDS.items()}
        )
    return statements


def build_response(symbol: str, quote: Any, summary: Any) -> FinancialResponse:
    """Assemble the full response from the two provider payloads."""
    if not isinstance(quote, Mapping):
        raise ProviderResponseError(f"Unexpected quote response for {symbol}")
    if not isinstance(summary, Mapping):
        raise ProviderResponseError(f"Unexpected summary response for {symbol}")

    statements = FinancialStatements(
        quarterly=StatementSeries(income_statement=transform_statements(summary.get("incomeStatementHistoryQuarterly"))),
        annual=StatementSeries(income_statement=transform_statements(summary.get("incomeStatementHistory"))),
    )
    return FinancialResponse(
        quote=transform_quote(quote),
        fundamentals=transform_fundamentals(symbol, quote, summary),
        financials=Financials(financial_statements=statements),
    )
