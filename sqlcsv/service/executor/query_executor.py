import threading
from typing import Any, Iterator, Optional, Sequence

from sqlcsv.errors import ExecutionError, QueryRowError, QueryTimeout
from sqlcsv.models.batch_result import BatchResult
from sqlcsv.service.driver.driver import Driver
from sqlcsv.service.formatter.value_formatter import DEFAULT_NULL_LITERAL
from sqlcsv.service.sink.csv_sink import CsvRecordSink
from sqlcsv.service.streamer.result_set_streamer import stream_result_set
from sqlcsv.util.deadline import Deadline
from sqlcsv.util.log_config import setup_logger

DEFAULT_QUERY_TIMEOUT = 60  # seconds

logger = setup_logger(__name__)


class QueryExecutor:
    """
    Run one batch and write every result set it produces to the sink.

    Each result set is preceded by one empty separator record, including
    result sets without columns (row counts from UPDATE, DDL, ...), which
    produce nothing else. The whole batch shares a single deadline; when it
    elapses the in-flight statement is cancelled and QueryTimeout is raised.
    """

    def __init__(
        self,
        driver: Driver,
        connection: Any,
        sink: CsvRecordSink,
        null_literal: str = DEFAULT_NULL_LITERAL,
        query_timeout: Optional[float] = DEFAULT_QUERY_TIMEOUT,
    ):
        self.driver = driver
        self.connection = connection
        self.sink = sink
        self.null_literal = null_literal
        self.query_timeout = query_timeout

    def execute(self, text: str) -> BatchResult:
        result = BatchResult()
        deadline = Deadline(self.query_timeout)

        if text == "":
            # Nothing to send; the output is that of a response without columns.
            self.sink.write_separator()
            result.result_sets = 1
            return result

        cursor = self.driver.open_cursor(self.connection, self.query_timeout)
        watchdog = self._start_watchdog(cursor, deadline) if self.query_timeout else None
        closed = False
        try:
            self._call(cursor.execute, deadline, "error executing query", text)

            while True:
                # separate result sets from each other (and from the query) with empty lines
                self.sink.write_separator()
                result.result_sets += 1

                columns = self.driver.describe_columns(cursor.description)
                if columns:
                    row_count = stream_result_set(
                        columns,
                        self._fetch_rows(cursor, deadline),
                        self.sink,
                        self.null_literal,
                    )
                    result.row_counts.append(row_count)

                if not self._call(cursor.nextset, deadline, "error advancing to next result set"):
                    break

            closed = True
            self._call(cursor.close, deadline, "error closing result set")
        finally:
            if watchdog is not None:
                watchdog.cancel()
            if not closed:
                self._close_quietly(cursor)

        result.execution_time = deadline.elapsed()
        return result

    def _start_watchdog(self, cursor: Any, deadline: Deadline) -> threading.Timer:
        watchdog = threading.Timer(deadline.remaining(), self._on_deadline, args=(cursor,))
        watchdog.daemon = True
        watchdog.start()
        return watchdog

    def _on_deadline(self, cursor: Any) -> None:
        logger.debug(f"Query deadline of {self.query_timeout}s elapsed; cancelling")
        self.driver.cancel(cursor)

    def _fetch_rows(self, cursor: Any, deadline: Deadline) -> Iterator[Sequence[Any]]:
        row_index = 0
        while True:
            if deadline.expired():
                raise QueryTimeout(f"query timed out after {self.query_timeout}s while reading rows")
            row_index += 1
            try:
                row = self._call(cursor.fetchone, deadline, "error reading row")
            except QueryTimeout:
                raise
            except ExecutionError as e:
                # pyodbc decodes cell values inside fetchone()
                raise QueryRowError(row_index, f"scanning: {e.__cause__}", detail=e.detail) from e.__cause__
            if row is None:
                return
            yield row

    def _call(self, fn, deadline: Deadline, context: str, *args):
        """Invoke a cursor method, translating driver errors into ExecutionError."""
        try:
            return fn(*args)
        except Exception as e:
            if not self.driver.is_driver_error(e):
                raise
            if deadline.expired() or self.driver.is_timeout(e):
                raise QueryTimeout(f"query timed out after {self.query_timeout}s: {context}: {e}") from e
            raise ExecutionError(f"{context}: {e}", detail=self.driver.server_error_detail(e)) from e

    def _close_quietly(self, cursor: Any) -> None:
        try:
            cursor.close()
        except Exception as e:
            if not self.driver.is_driver_error(e):
                raise
            logger.debug(f"Ignoring error while closing abandoned cursor: {e}")
