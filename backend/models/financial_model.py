from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: Optional[float] = None
    changePercent: Optional[float] = None
    volume: Optional[float] = None
    previousClose: Optional[float] = None
    dayHigh: Optional[float] = None
    dayLow: Optional[float] = None
    averageVolume: Optional[float] = None


class Fundamentals(BaseModel):
    model_config = ConfigDict(frozen=True)

    companyName: Optional[str] = None
    marketCap: Optional[float] = None
    peRatio: Optional[float] = None
    eps: Optional[float] = None
    profitMargin: Optional[float] = None  # percent
    revenue: Optional[float] = None
    fiftyTwoWeekLow: Optional[float] = None
    fiftyTwoWeekHigh: Optional[float] = None
    sector: Optional[str] = None
    industry: Optional[str] = None
    beta: Optional[float] = None
    dividendYield: Optional[float] = None  # percent
    priceToBook: Optional[float] = None


class IncomeStatementEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalRevenue: Optional[float] = None
    grossProfit: Optional[float] = None
    operatingIncome: Optional[float] = None
    ebitda: Optional[float] = None
    researchDevelopment: Optional[float] = None
    sellingGeneralAdministrative: Optional[float] = None
    totalOperatingExpenses: Optional[float] = None
    netIncome: Optional[float] = None


class StatementSeries(BaseModel):
    """Income statements of one periodicity, keyed by period-end date (YYYY-MM-DD)."""
    model_config = ConfigDict(frozen=True)

    income_statement: Dict[str, IncomeStatementEntry] = Field(default_factory=dict)


class FinancialStatements(BaseModel):
    model_config = ConfigDict(frozen=True)

    quarterly: StatementSeries = Field(default_factory=StatementSeries)
    annual: StatementSeries = Field(default_factory=StatementSeries)


class Financials(BaseModel):
    model_config = ConfigDict(frozen=True)

    financial_statements: FinancialStatements = Field(default_factory=FinancialStatements)


class FinancialResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    quote: Quote
    fundamentals: Fundamentals
    financials: Financials


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
