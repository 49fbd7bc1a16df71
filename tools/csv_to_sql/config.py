"""Conversion settings."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .errors import ConfigurationError


class Delimiter(str, Enum):
    """Supported CSV value delimiters."""

    COMMA = "comma"
    SEMICOLON = "semicolon"
    TAB = "tab"

    @property
    def char(self) -> str:
        """Character used to split fields."""
        return {
            Delimiter.COMMA: ",",
            Delimiter.SEMICOLON: ";",
            Delimiter.TAB: "\t",
        }[self]


@dataclass(frozen=True)
class ConversionConfig:
    """
    Settings for a single CSV to SQL run.

    Attributes:
        source: CSV file to read
        target: SQL file to write
        table: Target table name
        delimiter: Field delimiter of the CSV file
        has_headers: Whether the first record names the columns
        columns: Explicit column names, used instead of the header when set
        chunk: INSERT statements per transaction block (0 disables)
        chunk_insert: Rows per INSERT statement (0 means one row each)
        prefix: Template written before the statements
        suffix: Template written after the statements
        with_transaction: Wrap the statements in begin transaction/commit
        typed: Detect numbers, booleans and NULLs instead of quoting everything
    """

    source: Path
    target: Path
    table: str
    delimiter: Delimiter = Delimiter.COMMA
    has_headers: bool = True
    columns: Tuple[str, ...] = ()
    chunk: int = 0
    chunk_insert: int = 0
    prefix: Optional[Path] = None
    suffix: Optional[Path] = None
    with_transaction: bool = False
    typed: bool = False

    @classmethod
    def create(
        cls,
        source: Path,
        target: Optional[Path] = None,
        table: Optional[str] = None,
        delimiter: Delimiter = Delimiter.COMMA,
        has_headers: bool = True,
        columns: Sequence[str] = (),
        chunk: int = 0,
        chunk_insert: int = 0,
        prefix: Optional[Path] = None,
        suffix: Optional[Path] = None,
        with_transaction: bool = False,
        typed: bool = False,
    ) -> "ConversionConfig":
        """
        Build a validated configuration.

        The table name defaults to the CSV file name without extension and
        the target defaults to the CSV path with a .sql extension.

        Raises:
            ConfigurationError: If the settings cannot describe a valid run
        """
        source = Path(source)

        if table is None:
            table = source.stem
        if not table:
            raise ConfigurationError("Table name cannot be empty")

        if chunk < 0 or chunk_insert < 0:
            raise ConfigurationError("Chunk sizes must be zero or positive")

        columns = tuple(columns)
        if not has_headers and not columns:
            raise ConfigurationError("Columns must be given when the CSV file has no headers")

        return cls(
            source=source,
            target=Path(target) if target is not None else source.with_suffix(".sql"),
            table=table,
            delimiter=Delimiter(delimiter),
            has_headers=has_headers,
            columns=columns,
            chunk=chunk,
            chunk_insert=chunk_insert,
            prefix=Path(prefix) if prefix is not None else None,
            suffix=Path(suffix) if suffix is not None else None,
            with_transaction=with_transaction,
            typed=typed,
        )
