from typing import Any, Optional

from sqlcsv.errors import ConnectivityError
from sqlcsv.service.driver.driver import Driver
from sqlcsv.util.log_config import setup_logger

DEFAULT_PING_TIMEOUT = 10  # seconds

logger = setup_logger(__name__)


class ConnectionManager:
    """
    Own the process's single database connection.

    Used as a context manager: entering opens the connection and checks it
    with a ping, leaving closes it on every exit path.
    """

    def __init__(self, driver: Driver, connection_string: str, ping_timeout: Optional[float] = DEFAULT_PING_TIMEOUT):
        self.driver = driver
        self.connection_string = connection_string
        self.ping_timeout = ping_timeout
        self.connection: Optional[Any] = None

    def open(self) -> Any:
        try:
            self.driver.module
        except ImportError as e:
            raise ConnectivityError(f"database driver unavailable: {e}") from e

        try:
            self.connection = self.driver.open(self.connection_string, self.ping_timeout)
        except Exception as e:
            if not self.driver.is_driver_error(e):
                raise
            raise ConnectivityError(f"error opening connection: {e}") from e

        try:
            # test database connectivity with a quick ping
            self.driver.ping(self.connection, self.ping_timeout)
        except Exception as e:
            self.close()
            if not self.driver.is_driver_error(e):
                raise
            raise ConnectivityError(f"error checking connectivity: {e}") from e

        logger.debug("Connected and ping succeeded")
        return self.connection

    def close(self) -> None:
        if self.connection is None:
            return
        connection, self.connection = self.connection, None
        try:
            connection.close()
        except Exception as e:
            if not self.driver.is_driver_error(e):
                raise
            logger.warning(f"Error closing connection: {e}")

    def __enter__(self) -> Any:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
