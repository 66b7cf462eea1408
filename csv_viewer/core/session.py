"""
Viewer session: owns the loaded dataset and the filter, sort and page state.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import pandas as pd
from PySide6.QtCore import QObject, Signal

from ..config import ViewerConfig
from .exporter import DataExporter
from .filter_manager import apply_column_filters
from .io_handler import DatasetParseError, FileReader
from .models import Dataset, FilterState, SortState, TableView
from .paginator import page_slice, repair_page, total_pages
from .sort_handler import sort_dataframe

logger = logging.getLogger(__name__)


class ViewerSession(QObject):
    """
    Single owner of the viewer state.

    Every action recomputes the derived view from the dataset, filters,
    sort state and page, then notifies subscribers.
    """

    # Emitted after any state change
    view_changed = Signal()

    # Emitted after a successful load, with the loaded row count
    dataset_loaded = Signal(int)

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        page_size: Optional[int] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.config = config or ViewerConfig()
        self.page_size = self.config.rows_per_page if page_size is None else page_size
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

        self.file_reader = FileReader(self.config)
        self.exporter = DataExporter(self.file_reader, self.config)

        self.dataset: Optional[Dataset] = None
        self.filter_state = FilterState()
        self.sort_state = SortState()
        self.page = 1

        self._listeners: list[Callable[[TableView], None]] = []
        self._cache_key: Optional[tuple] = None
        self._cache_frame: Optional[pd.DataFrame] = None

    @property
    def headers(self) -> list[str]:
        """Column names of the loaded dataset."""
        return list(self.dataset.headers) if self.dataset else []

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def on_load(self, raw: bytes, filename: str = "") -> bool:
        """
        Load a dataset from raw file content.

        A failed parse leaves every piece of state untouched.

        Returns:
            True if a new dataset replaced the old one
        """
        if not raw:
            logger.warning("No file content to load")
            return False

        try:
            dataset = self.file_reader.parse_bytes(raw, filename=filename)
        except DatasetParseError as e:
            logger.warning("Failed to load %s: %s", filename or "input", e)
            return False

        self.set_dataset(dataset)
        return True

    def on_load_file(self, filepath: Path | str) -> bool:
        """Load a dataset from a file on disk."""
        try:
            dataset = self.file_reader.read_file(filepath)
        except (OSError, DatasetParseError) as e:
            logger.warning("Failed to load %s: %s", filepath, e)
            return False

        self.set_dataset(dataset)
        return True

    def set_dataset(self, dataset: Dataset) -> None:
        """Replace the dataset and reset filters, sort and page."""
        self.dataset = dataset
        self.filter_state = FilterState()
        self.sort_state = SortState()
        self.page = 1
        self._invalidate()

        logger.info("CSV loaded: %d rows", dataset.row_count)
        self.dataset_loaded.emit(dataset.row_count)
        self._emit_change()

    def on_filter_change(self, column: str, text: str) -> None:
        """Set one column's filter text and go back to the first page."""
        self.filter_state.set_filter(column, text)
        self.page = 1
        self._emit_change()

    def clear_filters(self) -> None:
        """Clear all column filters."""
        self.filter_state = FilterState()
        self.page = 1
        self._emit_change()

    def on_sort_toggle(self, column: str) -> None:
        """Advance the sort state for a clicked column header."""
        self.sort_state = self.sort_state.toggled(column)
        self._emit_change()

    def on_page_change(self, delta: int) -> bool:
        """
        Move by delta pages.

        Moves that would leave [1, total pages] are ignored.

        Returns:
            True if the page changed
        """
        pages = total_pages(len(self.processed_frame()), self.page_size)
        target = self.page + delta
        if delta == 0 or target < 1 or target > pages:
            return False

        self.page = target
        self._emit_change()
        return True

    def export_bytes(self) -> Optional[bytes]:
        """Serialize all filtered and sorted rows, or None if there are none."""
        if self.dataset is None:
            return None
        return self.exporter.export_bytes(self.processed_frame(), self.dataset.headers)

    def on_export(self, destination: Optional[Path | str] = None) -> Optional[Path]:
        """
        Export all filtered and sorted rows to a file.

        Returns:
            Path written, or None if there was nothing to export
        """
        if self.dataset is None:
            return None
        return self.exporter.export_to_file(
            self.processed_frame(), self.dataset.headers, destination
        )

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    def processed_frame(self) -> pd.DataFrame:
        """Get the filtered and sorted rows (all pages)."""
        if self.dataset is None:
            return pd.DataFrame()

        active = self.filter_state.active_filters()
        key = (self.dataset.id, tuple(sorted(active.items())), self.sort_state)
        if key != self._cache_key or self._cache_frame is None:
            filtered = apply_column_filters(self.dataset.dataframe, active)
            self._cache_frame = sort_dataframe(filtered, self.sort_state)
            self._cache_key = key

        return self._cache_frame

    def current_view(self) -> TableView:
        """
        Compute the view for the current state.

        A page number beyond the recomputed page count is reset to 1.
        """
        df = self.processed_frame()
        pages = total_pages(len(df), self.page_size)
        self.page = repair_page(self.page, pages)

        return TableView(
            headers=self.headers,
            visible_rows=page_slice(df, self.page, self.page_size),
            total_filtered=len(df),
            total_loaded=self.dataset.row_count if self.dataset else 0,
            page=self.page,
            total_pages=pages,
            sort_state=self.sort_state,
            filters=dict(self.filter_state.column_filters)
        )

    @property
    def view(self) -> TableView:
        """The current derived view."""
        return self.current_view()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, callback: Callable[[TableView], None]) -> None:
        """Add a listener called with the new view after each change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[TableView], None]) -> None:
        """Remove a listener callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _invalidate(self) -> None:
        self._cache_key = None
        self._cache_frame = None

    def _emit_change(self) -> None:
        """Recompute the view and notify subscribers."""
        view = self.current_view()
        self.view_changed.emit()

        for listener in self._listeners:
            listener(view)
