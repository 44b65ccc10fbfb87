import logging
from typing import Any, Callable, Dict, Iterable, List

import pandas as pd
import yfinance as yf

logger = logging.getLogger(__name__)

# Yahoo quote field -> yfinance fast_info attribute
QUOTE_ATTRIBUTES = {
    "regularMarketPrice": "last_price",
    "regularMarketPreviousClose": "previous_close",
    "regularMarketDayHigh": "day_high",
    "regularMarketDayLow": "day_low",
    "regularMarketVolume": "last_volume",
    "averageVolume": "three_month_average_volume",
    "marketCap": "market_cap",
}

# quote-summary module -> keys sliced out of Ticker.info
INFO_MODULES = {
    "price": ("longName", "shortName", "currency", "exchange", "quoteType"),
    "summaryDetail": ("trailingPE", "fiftyTwoWeekLow", "fiftyTwoWeekHigh", "beta", "dividendYield", "marketCap"),
    "financialData": ("profitMargins", "totalRevenue"),
    "defaultKeyStatistics": ("trailingEps", "priceToBook"),
    "assetProfile": ("sector", "industry"),
}

# quote-summary module -> Ticker attribute holding the statement frame
STATEMENT_MODULES = {
    "incomeStatementHistoryQuarterly": "quarterly_income_stmt",
    "incomeStatementHistory": "income_stmt",
}


class ProviderError(RuntimeError):
    """The provider answered, but with nothing usable for the symbol."""


class YahooFinanceProvider:
    """
    Thin capability wrapper around yfinance.

    Exposes the two provider operations the endpoint needs, shaped like the
    Yahoo quote / quote-summary payloads so the response mapping never has to
    know about yfinance objects.
    """
    def __init__(self, ticker_factory: Callable[[str], Any] = yf.Ticker):
        self.ticker_factory = ticker_factory

    def get_quote(self, symbol: str) -> Dict[str, Any]:
        """Current price and trading statistics for one symbol."""
        fast_info = self.ticker_factory(symbol).fast_info
        quote = {field: getattr(fast_info, attr, None) for field, attr in QUOTE_ATTRIBUTES.items()}

        price = quote["regularMarketPrice"]
        previous_close = quote["regularMarketPreviousClose"]
        if price is None or pd.isna(price):
            raise ProviderError(f"No quote data found for {symbol}")

        # fast_info has no change percent, derive it like Yahoo does
        if previous_close is None or pd.isna(previous_close) or previous_close == 0:
            quote["regularMarketChangePercent"] = None
        else:
            quote["regularMarketChangePercent"] = (price - previous_close) / previous_close * 100
        return quote

    def get_summary(self, symbol: str, modules: Iterable[str]) -> Dict[str, Any]:
        """
        Fundamentals, statistics and historical statements for one symbol.
        modules: quote-summary module names, e.g. ("price", "incomeStatementHistory")
        """
        modules = list(modules)
        unknown = [m for m in modules if m not in INFO_MODULES and m not in STATEMENT_MODULES]
        if unknown:
            raise ValueError(f"Unsupported summary modules: {', '.join(unknown)}")

        ticker = self.ticker_factory(symbol)
        bundle: Dict[str, Any] = {}

        info_modules = [m for m in modules if m in INFO_MODULES]
        if info_modules:
            info = ticker.info or {}
            for module in info_modules:
                bundle[module] = {key: info.get(key) for key in INFO_MODULES[module]}
            if "summaryDetail" in bundle:
                bundle["summaryDetail"]["dividendYield"] = self._dividend_yield(info)

        for module in modules:
            if module in STATEMENT_MODULES:
                frame = getattr(ticker, STATEMENT_MODULES[module])
                bundle[module] = self._statement_records(frame)
                logger.debug("%s: %d %s records", symbol, len(bundle[module]), module)

        return bundle

    @staticmethod
    def _dividend_yield(info: Dict[str, Any]) -> Any:
        """
        Dividend yield as a fraction.
        info["dividendYield"] comes from the v7 quote and is already a percent (0.44 == 0.44%).
        """
        trailing = info.get("trailingAnnualDividendYield")
        if trailing is not None and not pd.isna(trailing):
            return trailing
        percent = info.get("dividendYield")
        if percent is None or pd.isna(percent):
            return None
        return percent / 100

    @staticmethod
    def _statement_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
        """One record per period column: {"endDate": <timestamp>, "<row label>": value, ...}"""
        if frame is None or frame.empty:
            return []
        records = []
        for end_date in frame.columns:
            record = {"endDate": end_date}
            record.update(frame[end_date].to_dict())
            records.append(record)
        return records
