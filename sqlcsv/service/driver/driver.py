from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from sqlcsv.models.column_descriptor import ColumnDescriptor
from sqlcsv.models.server_error_detail import ServerErrorDetail
from sqlcsv.util.log_config import setup_logger

logger = setup_logger(__name__)


class Driver(ABC):
    """Abstract base Driver over a DB-API 2.0 module.

    Subclasses load the module and translate its column metadata and errors.
    Pass ``module`` explicitly to use an already-imported (or substitute)
    DB-API module instead of the one _load_module() returns.
    """

    def __init__(self, module: Any = None) -> None:
        self._module = module

    @property
    def module(self) -> Any:
        if self._module is None:
            self._module = self._load_module()
        return self._module

    @abstractmethod
    def _load_module(self) -> Any:
        """Import and return the DB-API module."""
        pass

    @abstractmethod
    def open(self, connection_string: str, timeout: Optional[float]) -> Any:
        """Open a connection, waiting at most ``timeout`` seconds to log in."""
        pass

    @abstractmethod
    def describe_columns(self, description: Optional[Sequence[Sequence[Any]]]) -> List[ColumnDescriptor]:
        """Turn a cursor.description into column descriptors (empty when None)."""
        pass

    @abstractmethod
    def open_cursor(self, connection: Any, timeout: Optional[float]) -> Any:
        """Create a cursor whose statements time out after ``timeout`` seconds."""
        pass

    def ping(self, connection: Any, timeout: Optional[float]) -> None:
        cursor = self.open_cursor(connection, timeout)
        try:
            cursor.execute("SELECT 1")
            cursor.fetchall()
        finally:
            cursor.close()

    def cancel(self, cursor: Any) -> None:
        """Ask the server to abandon the statement running on ``cursor``.

        Called from the timeout watchdog thread.
        """
        try:
            cursor.cancel()
        except self.module.Error as e:
            logger.debug(f"Cancel request failed: {e}")

    def is_driver_error(self, exc: BaseException) -> bool:
        return isinstance(exc, self.module.Error)

    def server_error_detail(self, exc: BaseException) -> Optional[ServerErrorDetail]:
        """Structured detail for a server-reported error, None for anything else."""
        return None

    def is_timeout(self, exc: BaseException) -> bool:
        return False
