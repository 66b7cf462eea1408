"""
App module for CSV Viewer application.
Contains Qt UI components and main window.
"""

from .main_window import MainWindow
from .widgets import (
    ColumnFilterBar,
    DataTableWidget,
    PagerWidget,
)

__all__ = [
    "MainWindow",
    "ColumnFilterBar",
    "DataTableWidget",
    "PagerWidget",
]
