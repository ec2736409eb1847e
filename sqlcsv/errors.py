"""
Error kinds raised by sqlcsv.

Anything raised while reading configuration or establishing the connection
is fatal to the process; everything raised while executing a batch is
reported and the batch loop moves on to the next batch.
"""
from typing import Optional

from sqlcsv.models.server_error_detail import ServerErrorDetail


class SqlCsvError(Exception):
    """Base class for all sqlcsv errors."""


class ConfigError(SqlCsvError):
    """Missing or invalid configuration (fatal, raised before execution)."""


class ConnectivityError(SqlCsvError):
    """Opening or pinging the database failed (fatal, raised before execution)."""


class InputReadError(SqlCsvError):
    """Standard input could not be read (fatal)."""


class ExecutionError(SqlCsvError):
    """A batch failed while being submitted or while its results were read."""

    def __init__(self, message: str, detail: Optional[ServerErrorDetail] = None):
        super().__init__(message)
        self.detail = detail


class QueryTimeout(ExecutionError):
    """The per-batch deadline elapsed."""


class QueryRowError(ExecutionError):
    """A specific row could not be decoded or formatted."""

    def __init__(self, row_index: int, message: str, detail: Optional[ServerErrorDetail] = None):
        super().__init__(f"error in row {row_index} {message}", detail=detail)
        self.row_index = row_index


class MalformedIdentifier(SqlCsvError):
    """A UNIQUEIDENTIFIER value is not a valid 16-byte GUID."""


class SinkWriteError(SqlCsvError):
    """The output stream rejected a record.

    row_index is the 1-based data row being written, or 0 for a header or
    separator record.
    """

    def __init__(self, message: str, row_index: int = 0):
        super().__init__(message)
        self.row_index = row_index
