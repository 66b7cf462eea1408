"""
File IO for the CSV Viewer application: parsing and serializing datasets.
"""
from __future__ import annotations

import csv
import io
import logging
from itertools import islice
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config import ViewerConfig
from .models import Dataset

logger = logging.getLogger(__name__)

UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")


class DatasetParseError(ValueError):
    """Raised when raw input cannot be turned into a dataset."""


def dedupe_headers(names: list[str]) -> list[str]:
    """
    Make header names unique.

    Repeated names get a numeric suffix: ["a", "a", "b"] -> ["a", "a.1", "b"].
    """
    seen: dict[str, int] = {}
    result = []

    for name in names:
        name = str(name)
        if name not in seen:
            seen[name] = 1
            result.append(name)
            continue

        count = seen[name]
        candidate = f"{name}.{count}"
        while candidate in seen:
            count += 1
            candidate = f"{name}.{count}"

        seen[name] = count + 1
        seen[candidate] = 1
        result.append(candidate)

    return result


class FileReader:
    """Parses delimited text into datasets and serializes them back."""

    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or ViewerConfig()

    def detect_encoding(self, raw: bytes) -> str:
        """Detect the text encoding of raw bytes."""
        if raw.startswith(UTF16_BOMS):
            return "utf-16"

        for enc in self.config.encodings:
            try:
                raw.decode(enc)
                return enc
            except (UnicodeDecodeError, UnicodeError):
                continue

        raise DatasetParseError("Could not decode input with any known encoding")

    def detect_delimiter(self, text: str) -> str:
        """
        Detect the delimiter of delimited text.

        Each candidate splits the first rows with quoting honoured. The winner
        is the candidate whose header has more than one field and whose rows
        most often match the header width; ties go to the earlier candidate.
        """
        best = ","  # Default to comma
        best_score = (0.0, 0)

        for delim in self.config.delimiters:
            widths = self._sample_widths(text, delim)
            if not widths or widths[0] < 2:
                continue

            matching = sum(1 for w in widths if w == widths[0])
            score = (matching / len(widths), widths[0])
            if score > best_score:
                best, best_score = delim, score

        return best

    def _sample_widths(self, text: str, delimiter: str) -> list[int]:
        """Field counts of the first non-empty rows split by a delimiter."""
        reader = csv.reader(io.StringIO(text), delimiter=delimiter)
        rows = (row for row in reader if row)
        try:
            return [len(row) for row in islice(rows, self.config.sniff_lines)]
        except csv.Error:
            return []

    def parse_bytes(self, raw: bytes, filename: str = "") -> Dataset:
        """
        Parse raw file content into a dataset.

        The first row is the header. Every value is kept as a string, blank
        lines are dropped and rows with too many fields are skipped.

        Args:
            raw: File content
            filename: Optional source name recorded on the dataset

        Returns:
            Parsed Dataset

        Raises:
            DatasetParseError: If the input is empty or cannot be parsed
        """
        if not raw:
            raise DatasetParseError("Input is empty")

        encoding = self.detect_encoding(raw)
        text = raw.decode(encoding)
        if not text.strip():
            raise DatasetParseError("Input contains no data")

        delimiter = self.detect_delimiter(text)
        logger.debug("Parsing %s as %s with delimiter %r", filename or "input", encoding, delimiter)

        try:
            # Header read as a plain row: its width sets the expected field count
            raw_df = pd.read_csv(
                io.StringIO(text),
                sep=delimiter,
                header=None,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=True,
                on_bad_lines="skip",
                engine="python"
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, csv.Error) as e:
            raise DatasetParseError(f"Failed to parse {filename or 'input'}: {e}") from e

        if raw_df.empty:
            raise DatasetParseError("Input contains no header row")

        # Short rows are padded with NaN even with na_filter off
        raw_df = raw_df.fillna("")

        headers = dedupe_headers(raw_df.iloc[0].tolist())
        df = raw_df.iloc[1:].reset_index(drop=True)
        df.columns = headers

        return Dataset(
            headers=headers,
            dataframe=df,
            filename=filename,
            delimiter=delimiter,
            encoding=encoding
        )

    def read_file(self, filepath: Path | str) -> Dataset:
        """Read a data file from disk and parse it."""
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        return self.parse_bytes(filepath.read_bytes(), filename=filepath.name)

    def serialize(
        self,
        df: pd.DataFrame,
        headers: list[str],
        delimiter: str = ","
    ) -> bytes:
        """
        Serialize rows to delimited text.

        Args:
            df: Rows to write, in order
            headers: Column order; written verbatim as the header row
            delimiter: Field separator

        Returns:
            Encoded file content
        """
        out = df.reindex(columns=headers, fill_value="")
        text = out.to_csv(index=False, sep=delimiter, lineterminator="\n")
        return text.encode(self.config.export_encoding)
