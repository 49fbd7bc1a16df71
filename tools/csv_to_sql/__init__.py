"""CSV to SQL Converter - Generate INSERT scripts from CSV files."""

from .config import ConversionConfig, Delimiter
from .converter import CSVToSQL
from .emitter import ConversionStats
from .errors import (
    ConfigurationError,
    ConversionError,
    InvalidDataError,
    OutputError,
    SourceNotFoundError,
)

__all__ = [
    "CSVToSQL",
    "ConversionConfig",
    "ConversionStats",
    "Delimiter",
    "ConversionError",
    "ConfigurationError",
    "InvalidDataError",
    "OutputError",
    "SourceNotFoundError",
]
