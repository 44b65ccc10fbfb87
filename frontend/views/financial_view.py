# frontend/views/financial_view.py
import html
import streamlit as st
import plotly.graph_objects as go
import pandas as pd
from typing import Any, Dict, List, Optional, Tuple

from frontend.views.formatters import (
    PLACEHOLDER,
    change_class,
    format_change,
    format_currency,
    format_date,
    format_percent,
    format_range,
    format_ratio,
    format_volume,
)

# internal metric key -> row label, in display order
METRIC_LABELS = {
    "totalRevenue": "Total Revenue",
    "grossProfit": "Gross Profit",
    "operatingIncome": "Operating Income",
    "ebitda": "EBITDA",
    "researchDevelopment": "R&D Expenses",
    "sellingGeneralAdministrative": "SG&A Expenses",
    "totalOperatingExpenses": "Total Operating Expenses",
    "netIncome": "Net Income",
}

PERIODICITIES = (("quarterly", "Recent Quarterly Results"), ("annual", "Annual Results"))

Row = Tuple[str, str, str]  # (label, formatted value, css class)


def income_statement(data: Optional[Dict[str, Any]], periodicity: str) -> Dict[str, Any]:
    """financials.financial_statements.<periodicity>.income_statement, {} when any level is missing."""
    statements = ((data or {}).get("financials") or {}).get("financial_statements") or {}
    return (statements.get(periodicity) or {}).get("income_statement") or {}


class FinancialView:
    @staticmethod
    def inject_css():
        """Custom CSS for the metric grid and statistic rows."""
        st.markdown("""
        <style>
            .yahoo-row { display: flex; justify-content: space-between; padding: 8px 0; border-bottom: 1px solid rgba(128,128,128,0.2); font-size: 15px; }
            .label { font-weight: 500; opacity: 0.8; }
            .val { font-weight: 700; text-align: right; }
            .red { color: #d93025 !important; }
            .green { color: #008d41 !important; }
            .company-name { font-size: 28px; font-weight: 800; line-height: 1.2; margin-bottom: 12px; }
            .perf-box { background: rgba(255,255,255,0.05); border: 1px solid rgba(128,128,128,0.2); border-radius: 8px; padding: 10px; margin-bottom: 8px; }
            .perf-label { font-size: 11px; color: #888; text-transform: uppercase; margin-bottom: 2px;}
            .perf-value { font-size: 18px; font-weight: 700; }
            .perf-delta { font-size: 13px; font-weight: 600; }
        </style>
        """, unsafe_allow_html=True)

    @staticmethod
    def build_metric_cards(data: Dict[str, Any]) -> List[Row]:
        """Headline metrics grid. The price card carries the change indicator separately."""
        quote = data.get("quote") or {}
        fundamentals = data.get("fundamentals") or {}
        return [
            ("Price", format_currency(quote.get("price")), ""),
            ("Market Cap", format_currency(fundamentals.get("marketCap")), ""),
            ("P/E Ratio", format_ratio(fundamentals.get("peRatio")), ""),
            ("EPS", format_ratio(fundamentals.get("eps")), ""),
            ("Revenue", format_currency(fundamentals.get("revenue")), ""),
            ("Profit Margin", format_percent(fundamentals.get("profitMargin")), ""),
            ("52 Week Range", format_range(fundamentals.get("fiftyTwoWeekLow"), fundamentals.get("fiftyTwoWeekHigh")), ""),
            ("Volume", format_volume(quote.get("volume")), ""),
        ]

    @staticmethod
    def build_key_statistics(data: Dict[str, Any]) -> List[Row]:
        quote = data.get("quote") or {}
        fundamentals = data.get("fundamentals") or {}
        return [
            ("Previous Close", format_currency(quote.get("previousClose")), ""),
            ("Day Range", format_range(quote.get("dayLow"), quote.get("dayHigh")), ""),
            ("Avg. Volume", format_volume(quote.get("averageVolume")), ""),
            ("Beta", format_ratio(fundamentals.get("beta")), ""),
            ("Dividend Yield", format_percent(fundamentals.get("dividendYield")), ""),
            ("Price/Book", format_ratio(fundamentals.get("priceToBook")), ""),
            ("Sector", fundamentals.get("sector") or PLACEHOLDER, ""),
            ("Industry", fundamentals.get("industry") or PLACEHOLDER, ""),
        ]

    @staticmethod
    def build_statement_table(statement: Optional[Dict[str, Any]]) -> Optional[pd.DataFrame]:
        """
        Pivot {date: {metric: value}} into a metric x period table.
        Columns are the period-end dates, most recent first. None when there is nothing to show.
        """
        if not statement:
            return None
        dates = sorted(statement, reverse=True)
        table = pd.DataFrame(
            {format_date(d): [format_currency((statement[d] or {}).get(key)) for key in METRIC_LABELS] for d in dates},
            index=list(METRIC_LABELS.values()),
        )
        table.index.name = "Metric"
        return table

    @staticmethod
    def build_trend_figure(statement: Dict[str, Any]) -> go.Figure:
        """Revenue and net income per period, oldest to newest."""
        dates = sorted(statement)
        labels = [format_date(d) for d in dates]
        fig = go.Figure()
        for key, color in (("totalRevenue", "#007AFF"), ("netIncome", "#34C759")):
            values = [(statement[d] or {}).get(key) for d in dates]
            fig.add_trace(go.Bar(
                x=labels, y=values, name=METRIC_LABELS[key], marker_color=color,
                text=[format_currency(v) for v in values], textposition="outside",
                hovertemplate="%{x}<br>%{text}<extra></extra>",
            ))
        fig.update_layout(
            barmode="group", height=320, template="plotly_white",
            margin=dict(l=10, r=10, t=10, b=10), legend=dict(orientation="h", y=1.1),
        )
        return fig

    @staticmethod
    def render_header(data: Dict[str, Any], symbol: str):
        """Company name, metrics grid and the key statistic rows."""
        fundamentals = data.get("fundamentals") or {}
        change = (data.get("quote") or {}).get("changePercent")
        name = html.escape(fundamentals.get("companyName") or symbol)

        st.markdown(f'<div class="company-name">{name}</div>', unsafe_allow_html=True)

        cols = st.columns(4)
        for i, (label, val, c) in enumerate(FinancialView.build_metric_cards(data)):
            delta = ""
            if label == "Price":
                delta = f'<div class="perf-delta {change_class(change)}">{format_change(change)}</div>'
            cols[i % 4].markdown(
                f'<div class="perf-box"><div class="perf-label">{label}</div>'
                f'<div class="perf-value {c}">{val}</div>{delta}</div>',
                unsafe_allow_html=True,
            )

        s1, s2 = st.columns(2)
        for i, (label, val, c) in enumerate(FinancialView.build_key_statistics(data)):
            (s1 if i % 2 == 0 else s2).markdown(f'<div class="yahoo-row"><span class="label">{label}</span><span class="val {c}">{html.escape(val)}</span></div>', unsafe_allow_html=True)

    @staticmethod
    def render_statement_section(title: str, periodicity: str, statement: Dict[str, Any]):
        st.subheader(title)
        table = FinancialView.build_statement_table(statement)
        if table is None:
            st.info(f"No {periodicity} data available.")
            return
        st.dataframe(table, use_container_width=True)
        st.plotly_chart(FinancialView.build_trend_figure(statement), use_container_width=True, config={'displayModeBar': False})

    @staticmethod
    def render(data: Dict[str, Any], symbol: str):
        FinancialView.render_header(data, symbol)
        for periodicity, title in PERIODICITIES:
            FinancialView.render_statement_section(title, periodicity, income_statement(data, periodicity))
