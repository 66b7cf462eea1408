"""
Pagination for the CSV Viewer application.
"""
from __future__ import annotations

import math
from typing import Iterator

import pandas as pd


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def total_pages(row_count: int, page_size: int) -> int:
    """Get the number of pages; an empty result still has one page."""
    _check_page_size(page_size)
    return max(1, math.ceil(row_count / page_size))


def repair_page(page: int, page_count: int) -> int:
    """Reset a page number that fell outside [1, page_count] back to 1."""
    if page < 1 or page > page_count:
        return 1
    return page


def page_slice(df: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """
    Get the rows of one page.

    Args:
        df: Sorted rows
        page: 1-based page number
        page_size: Rows per page

    Returns:
        Rows [(page - 1) * page_size, page * page_size), clamped to the frame
    """
    _check_page_size(page_size)
    start = max(0, (page - 1) * page_size)
    return df.iloc[start:start + page_size]


def iter_pages(df: pd.DataFrame, page_size: int) -> Iterator[pd.DataFrame]:
    """Yield every page of a dataframe in order."""
    for page in range(1, total_pages(len(df), page_size) + 1):
        yield page_slice(df, page, page_size)
