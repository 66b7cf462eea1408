"""
Main Window for the CSV Viewer application.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from ..config import ViewerConfig
from ..core import ViewerSession
from .widgets import (
    ColumnFilterBar,
    DataTableWidget,
    PagerWidget,
)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config: Optional[ViewerConfig] = None):
        super().__init__()

        self.setWindowTitle("CSV Viewer")
        self.setMinimumSize(900, 600)
        self.resize(1200, 800)

        # Core state
        self.config = config or ViewerConfig()
        self.session = ViewerSession(self.config, parent=self)

        # UI components (will be set up in _setup_ui)
        self.summary_label: Optional[QLabel] = None
        self.filter_bar: Optional[ColumnFilterBar] = None
        self.table: Optional[DataTableWidget] = None
        self.pager: Optional[PagerWidget] = None

        self._setup_ui()
        self._setup_menus()
        self._setup_toolbar()
        self._setup_connections()

        self.refresh()
        self.statusBar().showMessage("Ready")

    def _setup_ui(self):
        """Set up the main UI layout."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)

        self.summary_label = QLabel()
        layout.addWidget(self.summary_label)

        self.filter_bar = ColumnFilterBar()
        layout.addWidget(self.filter_bar)

        self.table = DataTableWidget()
        layout.addWidget(self.table, 1)

        self.pager = PagerWidget()
        layout.addWidget(self.pager)

    def _setup_menus(self):
        """Set up the menu bar."""
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("Upload CSV...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self.on_upload)
        file_menu.addAction(open_action)

        export_action = QAction("Export Filtered CSV...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self.on_export)
        file_menu.addAction(export_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        edit_menu = self.menuBar().addMenu("&Edit")

        clear_filters_action = QAction("Clear All Filters", self)
        clear_filters_action.triggered.connect(self.session.clear_filters)
        edit_menu.addAction(clear_filters_action)

    def _setup_toolbar(self):
        """Set up the toolbar."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction("Upload CSV", self.on_upload)
        toolbar.addAction("Export Filtered CSV", self.on_export)

    def _setup_connections(self):
        """Set up signal/slot connections."""
        self.session.view_changed.connect(self.refresh)
        self.session.dataset_loaded.connect(self.on_dataset_loaded)

        self.filter_bar.filter_changed.connect(self.session.on_filter_change)
        self.table.sort_requested.connect(self.session.on_sort_toggle)
        self.pager.page_requested.connect(self.session.on_page_change)

    @Slot()
    def refresh(self):
        """Redraw every widget from the session's current view."""
        view = self.session.current_view()

        if self.filter_bar.columns != view.headers:
            self.filter_bar.set_columns(view.headers)
        self.filter_bar.set_values(view.filters)

        self.summary_label.setText(view.summary())
        self.table.update_view(view)
        self.pager.update_view(view)

    @Slot()
    def on_upload(self):
        """Pick a CSV file and load it."""
        filepath, _ = QFileDialog.getOpenFileName(
            self,
            "Upload CSV",
            "",
            "CSV Files (*.csv);;All Files (*)"
        )

        if not filepath:
            return

        if not self.session.on_load_file(filepath):
            QMessageBox.warning(
                self,
                "Import Error",
                f"Failed to load {filepath}."
            )

    @Slot()
    def on_export(self):
        """Export the filtered and sorted rows."""
        if self.session.current_view().total_filtered == 0:
            return

        filepath, _ = QFileDialog.getSaveFileName(
            self,
            "Export Filtered CSV",
            self.config.export_filename,
            "CSV Files (*.csv)"
        )

        if not filepath:
            return

        try:
            path = self.session.on_export(filepath)
        except OSError as e:
            QMessageBox.warning(
                self,
                "Export Error",
                f"Failed to export:\n{str(e)}"
            )
            return

        if path is not None:
            self.statusBar().showMessage(f"Exported to {path}")

    @Slot(int)
    def on_dataset_loaded(self, row_count: int):
        """Report a finished load in the status bar."""
        name = self.session.dataset.filename if self.session.dataset else ""
        self.statusBar().showMessage(f"Loaded {row_count} rows from {name}")
