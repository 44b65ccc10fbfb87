import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from backend.models.financial_model import ErrorResponse, FinancialResponse
from backend.services.financial_service import FinancialService

SYMBOL_REQUIRED = "Stock symbol is required"
FETCH_FAILED = "Failed to fetch stock data"

router = APIRouter()

financial_service = FinancialService()


def get_financial_service() -> FinancialService:
    return financial_service


@router.get(
    "/financial",
    response_model=FinancialResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Quote, fundamentals and income statements for one ticker",
)
async def get_financial_data(
    symbol: Optional[str] = Query(None, description="Ticker symbol, case-insensitive (e.g. AAPL)"),
    service: FinancialService = Depends(get_financial_service),
):
    """
    Financial data controller:
    1. Validate the ticker sent by the frontend
    2. Let FinancialService fetch and reshape the provider data
    3. Map failures to the {error, details} body
    """
    if not symbol or not symbol.strip():
        return JSONResponse(status_code=400, content={"error": SYMBOL_REQUIRED})

    try:
        return await service.get_financial_data(symbol)
    except Exception as e:
        logging.error(f"Stock API Error ({symbol}): {str(e)}")
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED, "details": str(e)})


@router.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}
