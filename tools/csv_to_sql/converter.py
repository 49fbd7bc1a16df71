"""Core CSV to SQL conversion logic."""

from typing import Iterable, Optional, Sequence, TextIO

from shared.logger import get_logger

from .config import ConversionConfig
from .emitter import ConversionStats, EmitterContext, SQLEmitter
from .errors import OutputError
from .framing import TemplateContext, render_framing
from .source import CSVRecordSource
from .values import resolve_fields

logger = get_logger(__name__)


class CSVToSQL:
    """
    Convert CSV files to SQL INSERT scripts.

    Each call to convert() or generate() runs with its own state, so one
    converter can serve several independent runs.
    """

    def __init__(self, config: ConversionConfig):
        """
        Initialize CSV to SQL converter.

        Args:
            config: Conversion settings
        """
        self.config = config
        logger.debug(f"Initialized CSVToSQL for table: {config.table}")

    def convert(self) -> ConversionStats:
        """
        Convert the configured CSV file into the SQL target file.

        The CSV file is checked before the target is created, and the target
        is closed on every exit path.

        Returns:
            Run counters

        Raises:
            SourceNotFoundError: If the CSV file does not exist
            InvalidDataError: If a record is malformed
            ConfigurationError: If the columns or a framing template are invalid
            OutputError: If the SQL file cannot be written
        """
        config = self.config
        logger.info(f"Converting {config.source} into {config.target}")

        with CSVRecordSource(config.source, config.delimiter, config.has_headers) as source:
            try:
                sink = open(config.target, "w", encoding="utf-8")
            except OSError as e:
                raise OutputError(f"Cannot create SQL file {config.target}: {e}")

            try:
                with sink:
                    stats = self.generate(source, source.header, sink)
            except OSError as e:
                raise OutputError(f"Failed to write SQL file {config.target}: {e}")

        logger.info(f"Wrote SQL to {config.target}")
        return stats

    def generate(
        self,
        records: Iterable[Sequence[str]],
        header: Optional[Sequence[str]],
        writer: TextIO,
    ) -> ConversionStats:
        """
        Write the SQL script for a stream of records.

        Args:
            records: Data records, header excluded
            header: Header record, if the source has one
            writer: Text sink

        Returns:
            Run counters
        """
        config = self.config

        fields = resolve_fields(config.columns, config.has_headers, header)
        logger.debug(f"Using fields: {', '.join(fields)}")

        context = EmitterContext(writer=writer)
        template_context = TemplateContext(table=config.table)

        prefix = render_framing(config.prefix, template_context)
        if prefix:
            context.write(prefix)
            context.stats.prefix_written = True

        emitter = SQLEmitter(
            table=config.table,
            fields=fields,
            chunk=config.chunk,
            chunk_insert=config.chunk_insert,
            with_transaction=config.with_transaction,
            typed=config.typed,
        )
        emitter.emit(records, context)

        suffix = render_framing(config.suffix, template_context)
        if suffix:
            context.write(suffix)
            context.stats.suffix_written = True

        return context.stats
