"""Loader for the MTA weekly turnstile export."""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .config import MIN_FIELDS
from .errors import RecordShapeError

logger = logging.getLogger(__name__)

Row = Tuple[str, ...]


class TurnstileLoader:
    """Reads turnstile CSV rows into memory, failing on the first malformed row."""

    def __init__(self, min_fields: int = MIN_FIELDS):
        """
        Initialize the loader.

        Args:
            min_fields: Number of fields every data row must carry.
        """
        self.min_fields = min_fields

    def load_from_file(self, path: Union[str, Path]) -> List[Row]:
        """
        Load every row of a turnstile file, header included.

        Args:
            path: Path to the local turnstile_YYMMDD.txt file.

        Returns:
            Rows as tuples of strings, in file order.

        Raises:
            RecordShapeError: If the file cannot be read or a row is too short.
        """
        logger.info(f"Loading turnstile data from {path}")
        try:
            with open(path, "r", newline="", encoding="utf-8") as f:
                rows = self._read_rows(f, str(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise RecordShapeError(f"Could not read {path}: {e}") from e
        logger.info(f"Loaded {len(rows)} rows from {path}")
        return rows

    def load_from_text(self, csv_content: str, source: str = "<text>") -> List[Row]:
        """Parse turnstile rows from CSV content already in memory."""
        return self._read_rows(io.StringIO(csv_content), source)

    def _read_rows(self, lines: Iterable[str], source: str) -> List[Row]:
        reader = csv.reader(lines)
        rows: List[Row] = []
        try:
            for record in reader:
                if not record:
                    continue
                # The header is only read positionally, never validated
                if rows and len(record) < self.min_fields:
                    raise RecordShapeError(
                        f"{source}, line {reader.line_num}: expected at least "
                        f"{self.min_fields} fields, got {len(record)}"
                    )
                rows.append(tuple(record))
        except csv.Error as e:
            raise RecordShapeError(f"{source}, line {reader.line_num}: {e}") from e
        return rows
