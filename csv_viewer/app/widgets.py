"""
Widget components for the CSV Viewer application.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QWidget,
)

from ..core import TableView, display_header


class ColumnFilterBar(QWidget):
    """Row of filter boxes, one per dataset column."""

    filter_changed = Signal(str, str)  # column, text

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._edits: dict[str, QLineEdit] = {}

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(2)

    @property
    def columns(self) -> list[str]:
        return list(self._edits)

    def set_columns(self, columns: list[str]) -> None:
        """Rebuild the filter boxes for a new set of columns."""
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._edits.clear()

        for column in columns:
            edit = QLineEdit()
            edit.setPlaceholderText("Filter...")
            edit.setToolTip(f"Filter {column}")
            edit.textChanged.connect(
                lambda text, col=column: self.filter_changed.emit(col, text)
            )
            self._layout.addWidget(edit)
            self._edits[column] = edit

    def set_values(self, filters: dict[str, str]) -> None:
        """Show the given filter texts without re-emitting them."""
        for column, edit in self._edits.items():
            text = filters.get(column, "")
            if edit.text() != text:
                edit.blockSignals(True)
                edit.setText(text)
                edit.blockSignals(False)


class PagerWidget(QWidget):
    """Prev / page label / Next controls."""

    page_requested = Signal(int)  # delta

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 5, 0, 5)
        layout.addStretch()

        self.prev_btn = QPushButton("Prev")
        self.prev_btn.clicked.connect(lambda: self.page_requested.emit(-1))
        layout.addWidget(self.prev_btn)

        self.page_label = QLabel("Page 1 / 1")
        layout.addWidget(self.page_label)

        self.next_btn = QPushButton("Next")
        self.next_btn.clicked.connect(lambda: self.page_requested.emit(1))
        layout.addWidget(self.next_btn)

        layout.addStretch()

    def update_view(self, view: TableView) -> None:
        """Sync buttons and label with the view."""
        self.page_label.setText(f"Page <b>{view.page}</b> / <b>{view.total_pages}</b>")
        self.prev_btn.setEnabled(view.has_previous)
        self.next_btn.setEnabled(view.has_next)


class DataTableWidget(QTableWidget):
    """Read-only table showing one page of rows."""

    sort_requested = Signal(str)  # column

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._headers: list[str] = []

        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setAlternatingRowColors(True)
        self.setSortingEnabled(False)  # sorting is owned by the session
        self.horizontalHeader().setSectionsClickable(True)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        self.horizontalHeader().sectionClicked.connect(self._on_header_clicked)

    def update_view(self, view: TableView) -> None:
        """Render the visible rows of a view."""
        self._headers = list(view.headers)
        self.clearSpans()
        self.setColumnCount(len(self._headers))
        self.setHorizontalHeaderLabels([
            display_header(h) + view.sort_state.indicator(h) for h in self._headers
        ])

        if view.is_empty:
            self._show_no_results()
            return

        rows = view.rows()
        self.setRowCount(len(rows))
        for r, record in enumerate(rows):
            for c, header in enumerate(self._headers):
                self.setItem(r, c, QTableWidgetItem(record[header]))

    def _show_no_results(self) -> None:
        if not self._headers:
            self.setRowCount(0)
            return

        self.setRowCount(1)
        item = QTableWidgetItem("No results.")
        item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setItem(0, 0, item)
        if len(self._headers) > 1:
            self.setSpan(0, 0, 1, len(self._headers))

    @Slot(int)
    def _on_header_clicked(self, index: int):
        if 0 <= index < len(self._headers):
            self.sort_requested.emit(self._headers[index])
