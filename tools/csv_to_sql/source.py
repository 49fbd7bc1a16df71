"""CSV record source."""

import csv
from pathlib import Path
from typing import Iterator, List, Optional

from shared.logger import get_logger

from .config import Delimiter
from .errors import InvalidDataError, SourceNotFoundError

logger = get_logger(__name__)

# Largest limit accepted on every platform (C long)
FIELD_SIZE_LIMIT = 2**31 - 1


class CSVRecordSource:
    """
    Stream records from a CSV file, one at a time.

    Used as a context manager; the header (if any) is read on entry.

    Attributes:
        header: Header record, or None when the file has no headers
    """

    def __init__(
        self,
        path: Path,
        delimiter: Delimiter = Delimiter.COMMA,
        has_headers: bool = True,
    ):
        """
        Initialize record source.

        Args:
            path: CSV file to read
            delimiter: Field delimiter
            has_headers: Whether the first record is a header
        """
        self.path = Path(path)
        self.delimiter = Delimiter(delimiter)
        self.has_headers = has_headers
        self.header: Optional[List[str]] = None
        self._file = None
        self._reader = None
        self._width: Optional[int] = None

    def __enter__(self) -> "CSVRecordSource":
        if not self.path.is_file():
            raise SourceNotFoundError(f"CSV file not found: {self.path}")

        try:
            self._file = open(self.path, "r", encoding="utf-8-sig", newline="")
        except OSError as e:
            raise InvalidDataError(f"Cannot open CSV file {self.path}: {e}")
        csv.field_size_limit(FIELD_SIZE_LIMIT)
        self._reader = csv.reader(self._file, delimiter=self.delimiter.char, strict=True)

        if self.has_headers:
            try:
                self.header = next(self._records(), [])
            except InvalidDataError:
                self.close()
                raise
            logger.debug(f"Read header with {len(self.header)} field(s)")

        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[List[str]]:
        if self._reader is None:
            raise RuntimeError("CSVRecordSource must be opened before iterating")
        return self._records()

    def _records(self) -> Iterator[List[str]]:
        while True:
            try:
                record = next(self._reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise InvalidDataError(f"Malformed CSV at line {self._reader.line_num}: {e}")

            if not record:
                continue

            if self._width is None:
                self._width = len(record)
            elif len(record) != self._width:
                raise InvalidDataError(
                    f"Malformed CSV at line {self._reader.line_num}: "
                    f"found {len(record)} field(s), expected {self._width}"
                )

            yield record
