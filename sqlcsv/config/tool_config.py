from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sqlcsv.service.connection.connection_manager import DEFAULT_PING_TIMEOUT
from sqlcsv.service.driver.mssql_driver import DEFAULT_ODBC_DRIVER
from sqlcsv.service.executor.query_executor import DEFAULT_QUERY_TIMEOUT
from sqlcsv.service.formatter.value_formatter import DEFAULT_NULL_LITERAL


@dataclass
class ToolConfig:
    connection_string: str
    null_literal: str = DEFAULT_NULL_LITERAL
    query_timeout_seconds: int = DEFAULT_QUERY_TIMEOUT
    ping_timeout_seconds: int = DEFAULT_PING_TIMEOUT
    odbc_driver: str = DEFAULT_ODBC_DRIVER
    log_file: Optional[Path] = None
    verbose: bool = False

    def __str__(self):
        # The connection string usually holds a password; never print it.
        return (f"ToolConfig(\n"
                f"  connection_string=<{len(self.connection_string)} chars>,\n"
                f"  null_literal={self.null_literal!r},\n"
                f"  query_timeout_seconds={self.query_timeout_seconds},\n"
                f"  ping_timeout_seconds={self.ping_timeout_seconds},\n"
                f"  odbc_driver={self.odbc_driver},\n"
                f"  log_file={self.log_file},\n"
                f"  verbose={self.verbose}\n"
                f")")
