from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

import pandas as pd


def round_half_up(value: object, ndigits: int = 0) -> Optional[float]:
    """Round halves away from zero at ``ndigits`` places.

    Rounds the shortest decimal repr of ``value``, so ``1.005`` goes to
    ``1.01``. Rounding the binary float would give ``1.00`` there. Display
    values in this dashboard never sit on such a midpoint.
    """
    if value is None or pd.isna(value):
        return None
    q = Decimal(10) ** -ndigits
    # + 0.0 folds -0.0 into 0.0
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP)) + 0.0


def format_currency(value: object) -> str:
    """Compact dollars: $2.9M, $678K, $450."""
    if value is None or pd.isna(value):
        return "N/A"
    n = float(value)
    if abs(n) >= 1_000_000:
        return f"${round_half_up(n / 1_000_000, 1):.1f}M"
    if abs(n) >= 1_000:
        return f"${round_half_up(n / 1_000):.0f}K"
    return f"${round_half_up(n):.0f}"


def format_variance(value: int) -> str:
    return f"+{value}" if value > 0 else f"{value}"


def format_number(value: object) -> str:
    if value is None or pd.isna(value):
        return "N/A"
    return f"{value:,}"


def format_ratio(value: float) -> str:
    return f"{value:.1f}:1"


def format_pct(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f}%"


def format_currency_columns(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    formatted = df.copy()
    for c in cols:
        if c in formatted.columns:
            formatted[c] = formatted[c].apply(lambda v: format_currency(v) if pd.notna(v) else "")
    return formatted


def format_variance_columns(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    formatted = df.copy()
    for c in cols:
        if c in formatted.columns:
            formatted[c] = formatted[c].apply(lambda v: format_variance(int(v)) if pd.notna(v) else "")
    return formatted
