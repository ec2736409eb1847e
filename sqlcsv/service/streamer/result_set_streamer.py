"""
Result-set streaming.

Writes the header record and then each row as soon as the driver delivers
it, so memory stays bounded by the column count and a reader of the output
sees rows before the query completes. Rows already written are never
retracted when a later row fails.
"""
from typing import Any, Iterable, List, Sequence

from sqlcsv.errors import MalformedIdentifier, QueryRowError
from sqlcsv.models.column_descriptor import ColumnDescriptor
from sqlcsv.service.formatter.header_renderer import render_header
from sqlcsv.service.formatter.value_formatter import DEFAULT_NULL_LITERAL, format_value
from sqlcsv.service.sink.csv_sink import CsvRecordSink
from sqlcsv.util.log_config import setup_logger

logger = setup_logger(__name__)


def stream_result_set(
    columns: Sequence[ColumnDescriptor],
    rows: Iterable[Sequence[Any]],
    sink: CsvRecordSink,
    null_literal: str = DEFAULT_NULL_LITERAL,
) -> int:
    """
    Write one result set to the sink and return the number of data rows.

    Args:
        columns: Column metadata, fixed for the whole result set.
        rows: Lazy, single-pass row sequence. Errors raised while fetching
              propagate unchanged.
        sink: Destination for CSV records.
        null_literal: Text written for SQL NULL.

    Raises:
        QueryRowError: a cell could not be decoded or formatted; carries the
                       1-based index of the failing row.
        SinkWriteError: the output stream failed.
    """
    sink.write_record(render_header(columns))

    formatted: List[str] = [""] * len(columns)
    row_count = 0
    for row in rows:
        row_index = row_count + 1
        if len(row) != len(columns):
            raise QueryRowError(
                row_index, f"scanning: expected {len(columns)} values, got {len(row)}")

        for i, column in enumerate(columns):
            try:
                formatted[i] = format_value(column, row[i], null_literal)
            except MalformedIdentifier as e:
                raise QueryRowError(row_index, str(e)) from e
            except ValueError as e:
                raise QueryRowError(row_index, f"formatting column [{column.name}]: {e}") from e

        sink.write_record(formatted, row_index=row_index)
        row_count = row_index

    logger.debug(f"Streamed {row_count} row(s) across {len(columns)} column(s)")
    return row_count
