"""Models for query metadata and batch outcomes."""

from .batch_result import BatchResult
from .column_descriptor import ColumnDescriptor
from .server_error_detail import ServerErrorDetail

__all__ = ["BatchResult", "ColumnDescriptor", "ServerErrorDetail"]
