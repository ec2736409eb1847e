#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
sqlcsv: run SQL Server batches read from stdin and write the results as CSV.

Input is split into batches on lines reading ``GO``. Each batch is sent as
one unit; every result set it produces becomes a CSV block (a header of
``[name] TYPE(size) NULL`` labels, then the rows) preceded by a blank line.

Usage:
  sqlcsv -cs "SERVER=localhost;UID=sa;PWD=..." < queries.sql
  sqlcsv -csenv SQLCONN -null "" -t 300 < queries.sql

Configuration, connection and input failures exit with status 1. A failing
batch is reported on stderr and the next batch still runs.
"""
import logging
import sys
from typing import Iterable, Optional, TextIO

from sqlcsv.cli.cli import parse_args
from sqlcsv.config.config_loader import ConfigLoader
from sqlcsv.config.tool_config import ToolConfig
from sqlcsv.errors import ConfigError, ConnectivityError, ExecutionError, InputReadError, SinkWriteError
from sqlcsv.service.connection.connection_manager import ConnectionManager
from sqlcsv.service.driver.driver import Driver
from sqlcsv.service.driver.mssql_driver import MssqlDriver
from sqlcsv.service.executor.query_executor import QueryExecutor
from sqlcsv.service.reader.batch_reader import read_batches
from sqlcsv.service.sink.csv_sink import CsvRecordSink
from sqlcsv.util.log_config import configure_logging, setup_logger

logger = setup_logger(__name__)


def report_batch_error(batch_number: int, error: Exception) -> None:
    detail = getattr(error, "detail", None)
    if detail is not None:
        # SQL server error
        logger.error(f"batch {batch_number}: {detail!r}")
    else:
        logger.error(f"batch {batch_number}: {error}")


def run_batches(batches: Iterable[str], executor: QueryExecutor, sink: CsvRecordSink) -> int:
    """
    Execute each batch in turn, flushing output after every batch.

    Returns:
        int: number of batches that failed
    """
    failures = 0
    for batch_number, text in enumerate(batches, start=1):
        try:
            result = executor.execute(text)
            logger.debug(f"batch {batch_number}: {result.to_summary_dict()}")
        except (ExecutionError, SinkWriteError) as e:
            failures += 1
            report_batch_error(batch_number, e)
        finally:
            # make sure CSV reaches stdout even when the batch failed
            try:
                sink.flush()
            except SinkWriteError as e:
                logger.error(f"batch {batch_number}: {e}")
    return failures


def main(argv=None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         driver: Optional[Driver] = None, environ=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config: ToolConfig = ConfigLoader(args.config, args.env, environ).load(args)
    except ConfigError as e:
        logger.error(str(e))
        return 1
    logger.debug(str(config))

    if stdin is None:
        sys.stdin.reconfigure(encoding="utf-8")
        stdin = sys.stdin
    if stdout is None:
        sys.stdout.reconfigure(encoding="utf-8")
        stdout = sys.stdout
    driver = MssqlDriver(odbc_driver=config.odbc_driver) if driver is None else driver

    sink = CsvRecordSink(stdout)
    try:
        with ConnectionManager(driver, config.connection_string, config.ping_timeout_seconds) as connection:
            executor = QueryExecutor(
                driver,
                connection,
                sink,
                null_literal=config.null_literal,
                query_timeout=config.query_timeout_seconds,
            )
            failures = run_batches(read_batches(stdin), executor, sink)
    except (ConnectivityError, InputReadError) as e:
        logger.error(str(e))
        return 1

    if failures:
        logger.debug(f"{failures} batch(es) failed")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
