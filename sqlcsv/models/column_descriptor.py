from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Metadata for one column of a result set, as reported by the driver.

    Optional fields are None when the driver does not know them or they do
    not apply to the column's type.
    """
    name: str
    database_type_name: str
    nullable: Optional[bool] = None
    length: Optional[int] = None
    decimal_precision: Optional[int] = None
    decimal_scale: Optional[int] = None

    @property
    def has_decimal_size(self) -> bool:
        return self.decimal_precision is not None and self.decimal_scale is not None
