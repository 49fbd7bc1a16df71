"""CLI interface for CSV to SQL Converter."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from shared.cli import create_table, error, handle_errors, info, print_table, success, warning
from shared.logger import setup_logger

from .config import ConversionConfig, Delimiter
from .converter import CSVToSQL
from .emitter import ConversionStats
from .errors import ConversionError


def display_stats(stats: ConversionStats) -> None:
    """Display run counters as a table."""
    table = create_table("Conversion Summary", "Metric", "Value")
    table.add_row("Rows", f"{stats.rows:,}")
    table.add_row("INSERT statements", f"{stats.statements:,}")
    table.add_row("Transaction blocks", f"{stats.transactions:,}")
    table.add_row("Prefix", "yes" if stats.prefix_written else "no")
    table.add_row("Suffix", "yes" if stats.suffix_written else "no")
    print_table(table)


@click.command()
@click.argument("csv_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--sql",
    "-q",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output SQL file (defaults to the CSV path with a .sql extension)",
)
@click.option(
    "--delimiter",
    "-d",
    type=click.Choice([d.value for d in Delimiter], case_sensitive=False),
    default=Delimiter.COMMA.value,
    show_default=True,
    help="CSV value delimiter",
)
@click.option("--table", "-t", help="Table name (defaults to the CSV file name)")
@click.option(
    "--headers/--no-headers",
    default=True,
    show_default=True,
    help="Treat the first line as column names",
)
@click.option(
    "--column",
    "-c",
    "columns",
    multiple=True,
    help="Column name, repeat for each column (overrides headers)",
)
@click.option(
    "--chunk",
    "-k",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="INSERT statements per transaction block (0 disables)",
)
@click.option(
    "--chunk-insert",
    "-i",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="CSV rows per INSERT statement (0 means one row each)",
)
@click.option(
    "--prefix",
    "-p",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template put at the beginning of the SQL file, e.g. CREATE TABLE",
)
@click.option(
    "--suffix",
    "-s",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template put at the end of the SQL file, e.g. CREATE INDEX",
)
@click.option(
    "--with-transaction",
    "-w",
    is_flag=True,
    help="Wrap statements in a transaction block",
)
@click.option(
    "--typed",
    "-y",
    is_flag=True,
    help="Detect numbers, booleans and NULLs instead of quoting every value",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    csv_file: Path,
    sql: Optional[Path],
    delimiter: str,
    table: Optional[str],
    headers: bool,
    columns: Tuple[str, ...],
    chunk: int,
    chunk_insert: int,
    prefix: Optional[Path],
    suffix: Optional[Path],
    with_transaction: bool,
    typed: bool,
    verbose: bool,
):
    """
    CSV to SQL Converter - Generate INSERT statements from CSV files.

    Prefix and suffix files may reference the table name as {table}.

    Examples:

        \b
        # Generate users.sql from users.csv
        csv2sql users.csv

        \b
        # Custom table and output file
        csv2sql data.csv --table products --sql products.sql

        \b
        # No header line, explicit columns
        csv2sql data.csv --no-headers -c id -c name -c email

        \b
        # 500 rows per INSERT, 10 INSERTs per transaction
        csv2sql large.csv --chunk-insert 500 --chunk 10 --with-transaction

        \b
        # Typed values with a CREATE TABLE prefix
        csv2sql data.csv --typed --prefix create_table.sql
    """
    if not headers and not columns:
        raise click.UsageError("--column is required when --no-headers is used")

    # Setup logging
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    try:
        config = ConversionConfig.create(
            source=csv_file,
            target=sql,
            table=table,
            delimiter=Delimiter(delimiter.lower()),
            has_headers=headers,
            columns=columns,
            chunk=chunk,
            chunk_insert=chunk_insert,
            prefix=prefix,
            suffix=suffix,
            with_transaction=with_transaction,
            typed=typed,
        )

        info(f"Converting {config.source} into table {config.table}")
        stats = CSVToSQL(config).convert()

        if prefix and not stats.prefix_written:
            warning(f"Prefix file not found, skipped: {prefix}")
        if suffix and not stats.suffix_written:
            warning(f"Suffix file not found, skipped: {suffix}")

        success("CSV file processed successfully!")
        info(f"SQL written to: {config.target}")

        if verbose:
            display_stats(stats)

        sys.exit(0)

    except ConversionError as e:
        error(f"Error: {e}.")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()
