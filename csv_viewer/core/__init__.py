"""
Core module for CSV Viewer application.
Contains data models, IO handling, the filter/sort/page/export pipeline
and the session that owns viewer state.
"""

from .models import (
    Dataset,
    FilterState,
    SortDirection,
    SortState,
    TableView,
    display_header,
)
from .io_handler import (
    DatasetParseError,
    FileReader,
)
from .filter_manager import (
    ColumnFilterHelper,
    apply_column_filters,
)
from .sort_handler import (
    compare_values,
    is_numeric,
    parse_number,
    sort_dataframe,
)
from .paginator import (
    iter_pages,
    page_slice,
    repair_page,
    total_pages,
)
from .exporter import DataExporter
from .session import ViewerSession

__all__ = [
    # Models
    "Dataset",
    "FilterState",
    "SortDirection",
    "SortState",
    "TableView",
    "display_header",
    # IO
    "DatasetParseError",
    "FileReader",
    # Filter
    "ColumnFilterHelper",
    "apply_column_filters",
    # Sort
    "compare_values",
    "is_numeric",
    "parse_number",
    "sort_dataframe",
    # Pagination
    "iter_pages",
    "page_slice",
    "repair_page",
    "total_pages",
    # Export
    "DataExporter",
    # Session
    "ViewerSession",
]
