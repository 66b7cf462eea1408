"""
Column filtering for the CSV Viewer application.
"""
from __future__ import annotations

from typing import Mapping

import pandas as pd


class ColumnFilterHelper:
    """Helper class for per-column substring filtering."""

    @staticmethod
    def get_filter_mask(df: pd.DataFrame, column: str, needle: str) -> pd.Series:
        """
        Get a boolean mask for a case-insensitive substring filter.

        Columns missing from the dataframe or empty needles match every row.
        """
        if not needle or column not in df.columns:
            return pd.Series(True, index=df.index)

        values = df[column].fillna("").astype(str)
        return values.str.lower().str.contains(needle.lower(), regex=False)

    @staticmethod
    def matching_mask(df: pd.DataFrame, filters: Mapping[str, str]) -> pd.Series:
        """Get the combined (AND) mask for all column filters."""
        mask = pd.Series(True, index=df.index)

        for column, needle in filters.items():
            if needle:
                mask &= ColumnFilterHelper.get_filter_mask(df, column, needle)

        return mask


def apply_column_filters(df: pd.DataFrame, filters: Mapping[str, str]) -> pd.DataFrame:
    """
    Apply per-column substring filters to a dataframe.

    Args:
        df: Rows to filter
        filters: Column name -> needle; empty needles impose no constraint

    Returns:
        The rows passing every filter, in their original order
    """
    active = {col: text for col, text in filters.items() if text}
    if not active or df.empty:
        return df

    return df[ColumnFilterHelper.matching_mask(df, active)]
