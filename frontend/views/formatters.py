"""Display formatting for the financial panel. Missing values always become PLACEHOLDER."""
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

PLACEHOLDER = "N/A"

_COMPACT_UNITS = ((Decimal(1), ""), (Decimal("1e3"), "K"), (Decimal("1e6"), "M"), (Decimal("1e9"), "B"), (Decimal("1e12"), "T"))
_ONE_DECIMAL = Decimal("0.1")


def _round_one(value: Decimal) -> Decimal:
    return value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def format_currency(value: Optional[float]) -> str:
    """Compact USD notation, at most one fractional digit: 1234567 -> "$1.2M"."""
    if value is None:
        return PLACEHOLDER
    number = Decimal(str(value))
    sign = "-" if number < 0 else ""
    number = abs(number)

    index = 0
    for i, (unit, _) in enumerate(_COMPACT_UNITS):
        if number >= unit:
            index = i
    scaled = _round_one(number / _COMPACT_UNITS[index][0])
    # 999,960 -> "$1M", not "$1000K"
    if scaled >= 1000 and index + 1 < len(_COMPACT_UNITS):
        index += 1
        scaled = _round_one(number / _COMPACT_UNITS[index][0])

    text = f"{scaled:f}"
    if text.endswith(".0"):
        text = text[:-2]
    if text == "0":
        sign = ""
    return f"{sign}${text}{_COMPACT_UNITS[index][1]}"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:.2f}%"


def format_ratio(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:.2f}"


def format_volume(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:,.0f}"


def format_change(value: Optional[float]) -> str:
    """Percent change with direction arrow: "▲ 1.25%" / "▼ 0.40%"."""
    if value is None:
        return PLACEHOLDER
    arrow = "▲" if value >= 0 else "▼"
    return f"{arrow} {abs(value):.2f}%"


def change_class(value: Optional[float]) -> str:
    if value is None:
        return ""
    return "green" if value >= 0 else "red"


def format_range(low: Optional[float], high: Optional[float]) -> str:
    if low is None and high is None:
        return PLACEHOLDER
    return f"{format_currency(low)} - {format_currency(high)}"


def format_date(iso_date: str) -> str:
    """"2023-06-30" -> "June 30, 2023". Unparseable keys are shown as-is."""
    try:
        d = date.fromisoformat(iso_date)
    except (TypeError, ValueError):
        return str(iso_date)
    return f"{d:%B} {d.day}, {d.year}"
