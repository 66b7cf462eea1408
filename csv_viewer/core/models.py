"""
Core data models for the CSV Viewer application.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

import pandas as pd


class SortDirection(Enum):
    """Sort directions for the active sort column."""
    NONE = auto()
    ASCENDING = auto()
    DESCENDING = auto()


@dataclass(frozen=True)
class SortState:
    """The single active sort column and its direction."""
    column: Optional[str] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        """Check if a sort column is set."""
        return self.column is not None and self.direction != SortDirection.NONE

    def toggled(self, column: str) -> SortState:
        """
        Get the state after clicking a column header.

        Same column cycles ascending -> descending -> none. A different column
        always starts at ascending and drops the previous column.
        """
        if self.column != column:
            return SortState(column, SortDirection.ASCENDING)
        if self.direction == SortDirection.ASCENDING:
            return SortState(column, SortDirection.DESCENDING)
        return SortState()

    def indicator(self, column: str) -> str:
        """Get the header arrow for a column."""
        if not self.is_active or self.column != column:
            return ""
        return " ▲" if self.direction == SortDirection.ASCENDING else " ▼"


@dataclass
class FilterState:
    """Per-column substring filters for a dataset."""
    column_filters: dict[str, str] = field(default_factory=dict)

    def set_filter(self, column: str, text: str) -> None:
        """Set the filter text for one column."""
        self.column_filters[column] = text

    def get_filter(self, column: str) -> str:
        """Get the filter text for a column (empty if none)."""
        return self.column_filters.get(column, "")

    def active_filters(self) -> dict[str, str]:
        """Get only the filters that constrain rows."""
        return {col: text for col, text in self.column_filters.items() if text}

    @property
    def is_active(self) -> bool:
        """Check if any filter constrains rows."""
        return bool(self.active_filters())

    def clear(self) -> None:
        """Remove all filters."""
        self.column_filters.clear()


@dataclass
class Dataset:
    """A parsed dataset: ordered headers plus string-valued rows."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    headers: list[str] = field(default_factory=list)
    dataframe: pd.DataFrame = field(default_factory=pd.DataFrame)
    filename: str = ""
    delimiter: str = ","
    encoding: str = "utf-8"

    @property
    def row_count(self) -> int:
        """Number of loaded records."""
        return len(self.dataframe)

    def records(self) -> list[dict[str, str]]:
        """Get all records as dicts in header order."""
        return frame_to_records(self.dataframe, self.headers)

    @classmethod
    def from_records(
        cls,
        records: list[dict[str, Any]],
        headers: Optional[list[str]] = None,
        filename: str = ""
    ) -> Dataset:
        """
        Build a dataset from a list of record dicts.

        Args:
            records: Rows keyed by column name; missing keys become ""
            headers: Column order (default: order of first appearance)
            filename: Optional source name

        Returns:
            Dataset with all values as strings
        """
        if headers is None:
            headers = []
            for record in records:
                for key in record:
                    if key not in headers:
                        headers.append(key)

        rows = [[str(record.get(h, "")) for h in headers] for record in records]
        df = pd.DataFrame(rows, columns=headers, dtype=object)
        return cls(headers=list(headers), dataframe=df, filename=filename)


@dataclass
class TableView:
    """Derived view handed to the presentation layer after each change."""
    headers: list[str]
    visible_rows: pd.DataFrame
    total_filtered: int
    total_loaded: int
    page: int
    total_pages: int
    sort_state: SortState = field(default_factory=SortState)
    filters: dict[str, str] = field(default_factory=dict)

    @property
    def has_previous(self) -> bool:
        """Check if a previous page exists."""
        return self.page > 1

    @property
    def has_next(self) -> bool:
        """Check if a next page exists."""
        return self.page < self.total_pages

    @property
    def is_empty(self) -> bool:
        """Check if no rows are visible."""
        return len(self.visible_rows) == 0

    def rows(self) -> list[dict[str, str]]:
        """Get the visible rows as dicts in header order."""
        return frame_to_records(self.visible_rows, self.headers)

    def summary(self) -> str:
        """Get the human-readable row count summary."""
        return (
            f"Showing {len(self.visible_rows)} of {self.total_filtered} filtered rows "
            f"(Total loaded: {self.total_loaded})"
        )


def frame_to_records(df: pd.DataFrame, headers: list[str]) -> list[dict[str, str]]:
    """Convert a frame to record dicts, absent columns as empty strings."""
    columns = [h for h in headers if h in df.columns]
    records = df[columns].to_dict(orient="records")
    return [{h: record.get(h, "") for h in headers} for record in records]


def display_header(header: str) -> str:
    """Get the display label for a column header."""
    return header.replace("_", " ").upper()
