"""Errors raised while converting CSV files to SQL."""


class ConversionError(Exception):
    """Base class for every conversion failure."""


class SourceNotFoundError(ConversionError):
    """The CSV source file does not exist."""


class InvalidDataError(ConversionError):
    """A record could not be read from the CSV source."""


class ConfigurationError(ConversionError):
    """The conversion settings or a framing template are invalid."""


class OutputError(ConversionError):
    """The SQL target could not be written."""
