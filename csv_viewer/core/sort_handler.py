"""
Column sorting for the CSV Viewer application.

Values are compared numerically when both sides parse as numbers, otherwise
as strings. The comparison is decided per pair, so a column mixing numbers
and text never raises.
"""
from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from .models import SortDirection, SortState


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a cell value as a number.

    Surrounding whitespace is ignored. Empty strings and NaN are not numbers;
    anything else float() accepts is (scientific notation, inf).

    Returns:
        The parsed float, or None if the value is not numeric
    """
    if value is None:
        return None

    text = str(value).strip()
    if not text:
        return None

    try:
        number = float(text)
    except ValueError:
        return None

    if math.isnan(number):
        return None
    return number


def is_numeric(value: Any) -> bool:
    """Check if a cell value parses as a number."""
    return parse_number(value) is not None


def numeric_values(values: Sequence[Any]) -> np.ndarray:
    """Parse a sequence of cell values; non-numeric entries become NaN."""
    parsed = [parse_number(v) for v in values]
    return np.array([np.nan if p is None else p for p in parsed], dtype=float)


def _string_key(value: str) -> tuple[str, str]:
    # Case-folded first so "apple" < "Banana"; raw value breaks ties
    return (value.casefold(), value)


def compare_values(
    a: str,
    b: str,
    a_num: Optional[float] = None,
    b_num: Optional[float] = None
) -> int:
    """
    Compare two cell values.

    Args:
        a: First value
        b: Second value
        a_num: Pre-parsed numeric value of a (NaN or None if not numeric)
        b_num: Pre-parsed numeric value of b

    Returns:
        Negative, zero or positive like a classic cmp()
    """
    if a_num is None:
        a_num = parse_number(a)
    if b_num is None:
        b_num = parse_number(b)

    a_is_num = a_num is not None and not np.isnan(a_num)
    b_is_num = b_num is not None and not np.isnan(b_num)

    if a_is_num and b_is_num:
        return (a_num > b_num) - (a_num < b_num)

    key_a = _string_key(str(a))
    key_b = _string_key(str(b))
    return (key_a > key_b) - (key_a < key_b)


def sort_dataframe(df: pd.DataFrame, sort_state: SortState) -> pd.DataFrame:
    """
    Sort a dataframe by the active sort column.

    The sort is stable: rows comparing equal keep their input order in both
    directions. Inactive sort states and unknown columns return the input.

    Args:
        df: Rows to sort
        sort_state: Active column and direction

    Returns:
        Reordered dataframe with the same rows
    """
    column = sort_state.column
    if not sort_state.is_active or column not in df.columns or len(df) < 2:
        return df

    values = df[column].fillna("").astype(str).tolist()
    numbers = numeric_values(values)
    sign = -1 if sort_state.direction == SortDirection.DESCENDING else 1

    def compare(i: int, j: int) -> int:
        return sign * compare_values(values[i], values[j], numbers[i], numbers[j])

    order = sorted(range(len(values)), key=cmp_to_key(compare))
    return df.iloc[order]
