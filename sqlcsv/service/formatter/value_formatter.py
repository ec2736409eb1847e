"""
Render one decoded cell value as a CSV field.

Dispatch is on the column's database type tag first and on the Python type
of the value second:

- None                  -> the configured null literal, verbatim
- UNIQUEIDENTIFIER      -> canonical lowercase GUID text
- DECIMAL / MONEY       -> the driver's digits as text, scale preserved
- BIT                   -> "1" / "0"
- bytes-like            -> "0x" + lowercase hex
- bool (non-BIT column) -> "true" / "false"
- anything else         -> str(value)
"""
import decimal
import uuid
from typing import Any

from sqlcsv.consts.DatabaseType import DatabaseType
from sqlcsv.errors import MalformedIdentifier
from sqlcsv.models.column_descriptor import ColumnDescriptor

DEFAULT_NULL_LITERAL = "NULL"

_BYTES_TYPES = (bytes, bytearray, memoryview)


def format_value(column: ColumnDescriptor, value: Any, null_literal: str = DEFAULT_NULL_LITERAL) -> str:
    """
    Format a raw cell value for the given column.

    Raises:
        MalformedIdentifier: if a UNIQUEIDENTIFIER value cannot be decoded.
    """
    if value is None:
        return null_literal

    type_name = column.database_type_name

    if type_name == DatabaseType.UNIQUEIDENTIFIER.value:
        return _format_guid(value)

    # DECIMAL shares the MONEY branch: both arrive as pre-rendered digits.
    if type_name in (DatabaseType.DECIMAL.value, DatabaseType.MONEY.value):
        if isinstance(value, _BYTES_TYPES):
            return bytes(value).decode("ascii")
        if isinstance(value, decimal.Decimal):
            # Fixed-point keeps the driver's scale ("12.3400") and never uses exponents.
            return format(value, "f")
        return str(value)

    if type_name == DatabaseType.BIT.value:
        return "1" if value else "0"

    if isinstance(value, _BYTES_TYPES):
        return "0x" + bytes(value).hex()

    if isinstance(value, bool):
        return "true" if value else "false"

    return str(value)


def _format_guid(value: Any) -> str:
    if isinstance(value, uuid.UUID):
        return str(value)
    try:
        if isinstance(value, _BYTES_TYPES):
            # SQL Server sends the first three groups little-endian.
            return str(uuid.UUID(bytes_le=bytes(value)))
        return str(uuid.UUID(str(value)))
    except ValueError as e:
        raise MalformedIdentifier(f"constructing uuid from {value!r}: {e}") from e
