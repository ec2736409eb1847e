from .driver import Driver
from .mssql_driver import MssqlDriver

__all__ = ["Driver", "MssqlDriver"]
