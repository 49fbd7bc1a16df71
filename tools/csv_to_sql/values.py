"""Column list resolution and SQL literal formatting."""

from typing import List, Optional, Sequence

from .errors import ConfigurationError

BOOLEAN_LITERALS = ("true", "false")


def resolve_fields(
    columns: Sequence[str],
    has_headers: bool,
    header: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Resolve the column names used in the INSERT clause.

    Explicit columns win over the header record.

    Args:
        columns: Explicit column names
        has_headers: Whether the CSV file has a header record
        header: Header record values

    Returns:
        Ordered list of column names

    Raises:
        ConfigurationError: If neither columns nor headers are available
    """
    if columns:
        return list(columns)

    if has_headers:
        return list(header or [])

    raise ConfigurationError("Undefined column set: no columns given and the CSV file has no headers")


def format_fields(fields: Sequence[str]) -> str:
    """Render column names as `(a, b, c)`."""
    return f"({', '.join(fields)})"


def quote(raw: str) -> str:
    """Quote a string literal, doubling embedded single quotes."""
    escaped = raw.replace("'", "''")
    return f"'{escaped}'"


def is_number(raw: str) -> bool:
    """Check if value parses as a 64-bit float."""
    # float() also tolerates padding, digit separators and non-ASCII digits
    if not raw or not raw.isascii() or raw != raw.strip() or "_" in raw:
        return False
    try:
        float(raw)
        return True
    except ValueError:
        return False


def is_boolean(raw: str) -> bool:
    """Check if value is true or false, ignoring case."""
    return raw.lower() in BOOLEAN_LITERALS


def format_value(raw: str, typed: bool = False) -> str:
    """
    Format a raw CSV field as a SQL literal.

    Untyped values are always quoted, so an empty field becomes ''.
    Typed values are emitted unquoted when numeric or boolean, as NULL when
    empty, and quoted otherwise.

    Args:
        raw: Field value as read from the CSV file
        typed: Whether to detect the literal type

    Returns:
        SQL literal
    """
    if not typed:
        return quote(raw)

    if is_number(raw) or is_boolean(raw):
        return raw
    if raw == "":
        return "NULL"
    return quote(raw)


def format_values(record: Sequence[str], typed: bool = False) -> str:
    """Render a record as a `(v1, v2, ...)` value tuple."""
    return f"({', '.join(format_value(value, typed) for value in record)})"
