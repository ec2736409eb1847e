from enum import Enum


class DatabaseType(Enum):
    UNIQUEIDENTIFIER = "UNIQUEIDENTIFIER"
    DECIMAL = "DECIMAL"
    MONEY = "MONEY"
    BIT = "BIT"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INT = "INT"
    BIGINT = "BIGINT"
    REAL = "REAL"
    FLOAT = "FLOAT"
    VARCHAR = "VARCHAR"
    VARBINARY = "VARBINARY"
    DATETIME2 = "DATETIME2"
    DATE = "DATE"
    TIME = "TIME"


# Driver-reported lengths meaning "(max)": varchar(max)/varbinary(max) and nvarchar(max).
MAX_LENGTH_SENTINELS = frozenset({2147483645, 1073741822})
VARCHAR_MAX_LENGTH = 2147483645
