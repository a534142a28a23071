# automation_value_engine/value_engine/utils/formatting.py
"""
Display formatting for dollar figures, counts, rates and multiples.

All rounding here is half-up (0.5 -> 1), matching what finance readers expect;
engine values themselves are never rounded.
"""
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext


def _to_decimal(value: float, places: int) -> Decimal:
    if value is None or not math.isfinite(value):
        value = 0.0
    quant = Decimal(1).scaleb(-places)
    dec = Decimal(str(value))
    # quantize needs every integer digit plus the kept places in the context
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, dec.adjusted() + places + 2)
        dec = dec.quantize(quant, rounding=ROUND_HALF_UP)
    if dec == 0:
        dec = abs(dec)  # avoid "-0"
    return dec


def _grouped(value: float, places: int, trim: bool) -> str:
    """Comma-grouped decimal string; trim drops trailing fractional zeros."""
    text = format(_to_decimal(value, places), f",.{places}f")
    if trim and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_currency(value: float) -> str:
    """Whole-dollar currency, e.g. 1234567.4 -> "$1,234,567", -50 -> "-$50"."""
    text = _grouped(value, 0, trim=False)
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def format_currency_compact(value: float) -> str:
    """Short currency, e.g. "$1.2M", "$500K"; under $1,000 falls back to format_currency."""
    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    if magnitude >= 1_000_000:
        return f"{sign}${_grouped(magnitude / 1_000_000, 1, trim=False)}M"
    if magnitude >= 1_000:
        return f"{sign}${_grouped(magnitude / 1_000, 0, trim=False)}K"
    return format_currency(value)


def format_number(value: float) -> str:
    """Comma-grouped number with at most three decimals, e.g. 1234.5 -> "1,234.5"."""
    return _grouped(value, 3, trim=True)


def format_percent(value: float, precise: bool = False) -> str:
    """Fraction as percentage: 0.15 -> "15%"; precise keeps one decimal (0.155 -> "15.5%")."""
    places = 1 if precise else 0
    return f"{_grouped(value * 100, places, trim=False)}%"


def format_multiple(value: float) -> str:
    """ROI multiple, e.g. 20.24 -> "20.2x"."""
    return f"{_grouped(value, 1, trim=False)}x"


def format_hours(value: float) -> str:
    return f"{_grouped(value, 0, trim=False)} hrs"


def format_input_currency(value: float) -> str:
    """Currency literal for formula traces: "$50", "$12.50"."""
    dec = _to_decimal(value, 2)
    places = 0 if dec == dec.to_integral_value() else 2
    text = _grouped(value, places, trim=False)
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def format_input_percent(value: float) -> str:
    """Rate literal for formula traces: 0.1 -> "10%", 0.025 -> "2.5%"."""
    return f"{_grouped(value * 100, 2, trim=True)}%"


def obfuscate_value(value: float) -> float:
    """Round a dollar amount to a magnitude-dependent step so shared figures stay approximate.

    < 1K -> nearest 100; < 10K -> 1K; < 100K -> 5K; < 1M -> 25K; otherwise 100K.
    """
    magnitude = abs(value)
    if magnitude < 1_000:
        step = 100
    elif magnitude < 10_000:
        step = 1_000
    elif magnitude < 100_000:
        step = 5_000
    elif magnitude < 1_000_000:
        step = 25_000
    else:
        step = 100_000
    rounded = float(_to_decimal(magnitude / step, 0)) * step
    return -rounded if value < 0 else rounded


__all__ = [
    "format_currency",
    "format_currency_compact",
    "format_number",
    "format_percent",
    "format_multiple",
    "format_hours",
    "format_input_currency",
    "format_input_percent",
    "obfuscate_value",
]
