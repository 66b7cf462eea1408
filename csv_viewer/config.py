"""
Configuration for the CSV Viewer application.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_ROWS_PER_PAGE = 100
DEFAULT_EXPORT_FILENAME = "export.csv"


@dataclass
class ViewerConfig:
    """Tunable settings for parsing, paging and export."""
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE
    export_filename: str = DEFAULT_EXPORT_FILENAME
    export_encoding: str = "utf-8"

    # Parser detection candidates, tried in order
    delimiters: list[str] = field(default_factory=lambda: [",", "\t", ";", "|"])
    encodings: list[str] = field(default_factory=lambda: ["utf-8-sig", "cp1252", "latin-1"])
    sniff_lines: int = 10

    def __post_init__(self):
        if self.rows_per_page < 1:
            raise ValueError(f"rows_per_page must be >= 1, got {self.rows_per_page}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "rows_per_page": self.rows_per_page,
            "export_filename": self.export_filename,
            "export_encoding": self.export_encoding,
            "delimiters": self.delimiters,
            "encodings": self.encodings,
            "sniff_lines": self.sniff_lines
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ViewerConfig:
        """Deserialize from dictionary."""
        defaults = cls()
        return cls(
            rows_per_page=data.get("rows_per_page", defaults.rows_per_page),
            export_filename=data.get("export_filename", defaults.export_filename),
            export_encoding=data.get("export_encoding", defaults.export_encoding),
            delimiters=data.get("delimiters", defaults.delimiters),
            encodings=data.get("encodings", defaults.encodings),
            sniff_lines=data.get("sniff_lines", defaults.sniff_lines)
        )


def load_config(path: Optional[Path | str] = None) -> ViewerConfig:
    """
    Load configuration from a JSON file.

    Missing keys fall back to defaults. With no path, or a path that does not
    exist, the default configuration is returned.
    """
    if path is None:
        return ViewerConfig()

    path = Path(path)
    if not path.exists():
        logger.debug("Config file %s not found, using defaults", path)
        return ViewerConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return ViewerConfig.from_dict(data)
