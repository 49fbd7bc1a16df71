"""INSERT statement batching and transaction blocks."""

from dataclasses import dataclass, field
from typing import Iterable, Sequence, TextIO

from shared.logger import get_logger

from .errors import OutputError
from .values import format_fields, format_values

logger = get_logger(__name__)

BEGIN_TRANSACTION = "begin transaction"
STATEMENT_END = ";\n\n"
ROW_CONTINUATION = ","
CHUNK_BOUNDARY = f"{STATEMENT_END}commit;{STATEMENT_END}{BEGIN_TRANSACTION}"


@dataclass
class ConversionStats:
    """Counters collected during a conversion run."""

    rows: int = 0
    statements: int = 0
    transactions: int = 0
    prefix_written: bool = False
    suffix_written: bool = False


@dataclass
class EmitterContext:
    """
    State of one conversion run.

    Attributes:
        writer: Output sink
        chunk_count: Statements written in the current transaction block
        chunk_insert_count: Rows written in the current INSERT statement
        separator: Text written before the next statement or row
        stats: Run counters
    """

    writer: TextIO
    chunk_count: int = 0
    chunk_insert_count: int = 0
    separator: str = ""
    stats: ConversionStats = field(default_factory=ConversionStats)

    def write(self, text: str) -> None:
        """Write text to the sink."""
        try:
            self.writer.write(text)
        except OSError as e:
            raise OutputError(f"Failed to write SQL: {e}")


class SQLEmitter:
    """
    Write records as batched INSERT statements.

    Rows are grouped chunk_insert at a time into multi-row statements, and
    statements are grouped chunk at a time between commit/begin transaction
    markers.
    """

    def __init__(
        self,
        table: str,
        fields: Sequence[str],
        chunk: int = 0,
        chunk_insert: int = 0,
        with_transaction: bool = False,
        typed: bool = False,
    ):
        """
        Initialize emitter.

        Args:
            table: Target table name
            fields: Resolved column names
            chunk: Statements per transaction block (0 disables)
            chunk_insert: Rows per statement (0 means one row each)
            with_transaction: Wrap the output in begin transaction/commit
            typed: Detect literal types
        """
        self.table = table
        self.fields = list(fields)
        self.chunk = chunk
        self.chunk_insert = chunk_insert
        self.with_transaction = with_transaction
        self.typed = typed
        self.insert_clause = f"insert into {table} {format_fields(self.fields)} values"

    def emit(self, records: Iterable[Sequence[str]], context: EmitterContext) -> ConversionStats:
        """
        Write all records to the context's sink.

        Args:
            records: Records in output order
            context: Run state, fresh for each run

        Returns:
            Run counters
        """
        self.begin(context)
        for record in records:
            self.write_record(record, context)
        self.finish(context)

        logger.info(
            f"Wrote {context.stats.rows} row(s) in {context.stats.statements} INSERT statement(s)"
        )
        return context.stats

    def begin(self, context: EmitterContext) -> None:
        """Write the opening transaction marker."""
        if self.with_transaction:
            context.write(BEGIN_TRANSACTION)
            context.stats.transactions += 1
            context.separator = STATEMENT_END
        else:
            context.separator = ""

    def write_record(self, record: Sequence[str], context: EmitterContext) -> None:
        """Write one record, opening a new statement or block when due."""
        if context.chunk_insert_count == 0:
            # Written even without transactions, leaving a stray commit
            if self.chunk > 0 and context.chunk_count == self.chunk:
                context.write(CHUNK_BOUNDARY)
                context.stats.transactions += 1
                context.chunk_count = 0

            context.write(f"{context.separator}{self.insert_clause}")
            context.separator = ""
            context.chunk_count += 1
            context.stats.statements += 1

        context.write(f"{context.separator}\n{format_values(record, self.typed)}")
        context.stats.rows += 1

        if self.chunk_insert > 0:
            context.chunk_insert_count += 1
            context.separator = ROW_CONTINUATION
            if context.chunk_insert_count == self.chunk_insert:
                context.chunk_insert_count = 0
                context.separator = STATEMENT_END
        else:
            context.separator = STATEMENT_END

    def finish(self, context: EmitterContext) -> None:
        """Terminate the last statement and close the transaction."""
        if self.with_transaction:
            context.write(f"{STATEMENT_END}commit;")
        else:
            context.write(";")
