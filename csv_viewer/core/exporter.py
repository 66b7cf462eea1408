"""
Export of filtered data for the CSV Viewer application.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config import ViewerConfig
from .io_handler import FileReader

logger = logging.getLogger(__name__)


class DataExporter:
    """Serializes the full filtered and sorted rows to a delimited file."""

    def __init__(
        self,
        file_reader: Optional[FileReader] = None,
        config: Optional[ViewerConfig] = None
    ):
        self.config = config or (file_reader.config if file_reader else ViewerConfig())
        self.file_reader = file_reader or FileReader(self.config)

    def export_bytes(self, df: pd.DataFrame, headers: list[str]) -> Optional[bytes]:
        """
        Serialize rows with a header row in dataset column order.

        Returns:
            Encoded content, or None when there are no rows to export
        """
        if df.empty:
            logger.debug("Nothing to export")
            return None

        return self.file_reader.serialize(df, headers)

    def export_to_file(
        self,
        df: pd.DataFrame,
        headers: list[str],
        destination: Optional[Path | str] = None
    ) -> Optional[Path]:
        """
        Write rows to a delimited file.

        Args:
            df: Filtered and sorted rows (all of them, not one page)
            headers: Column order
            destination: Output path (default: configured export filename)

        Returns:
            Path written, or None when there was nothing to export
        """
        content = self.export_bytes(df, headers)
        if content is None:
            return None

        path = Path(destination) if destination else Path(self.config.export_filename)
        path.write_bytes(content)

        logger.info("Exported %d rows to %s", len(df), path)
        return path
