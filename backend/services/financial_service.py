import asyncio
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from backend.models.financial_model import FinancialResponse
from backend.services.provider import YahooFinanceProvider
from backend.services.transformer import SUMMARY_MODULES, build_response, normalize_symbol

logger = logging.getLogger(__name__)


class FinancialService:
    """
    Financial data service (service layer).
    Fans out the quote and summary provider calls, joins them and reshapes
    the result into the response contract.
    """
    def __init__(self, provider: Optional[YahooFinanceProvider] = None):
        self.provider = provider or YahooFinanceProvider()

    async def get_financial_data(self, symbol: str) -> FinancialResponse:
        symbol = normalize_symbol(symbol)
        if not symbol:
            raise ValueError("Stock symbol is required")

        # --- Step A: both provider calls in flight together, all or nothing ---
        quote, summary = await asyncio.gather(
            run_in_threadpool(self.provider.get_quote, symbol),
            run_in_threadpool(self.provider.get_summary, symbol, SUMMARY_MODULES),
        )

        # --- Step B: provider shape -> stable contract ---
        response = build_response(symbol, quote, summary)
        statements = response.financials.financial_statements
        logger.info(
            "Served %s (%d quarterly, %d annual statements)",
            symbol,
            len(statements.quarterly.income_statement),
            len(statements.annual.income_statement),
        )
        return response
