from typing import List, Sequence

from sqlcsv.consts.DatabaseType import MAX_LENGTH_SENTINELS
from sqlcsv.models.column_descriptor import ColumnDescriptor


def render_label(column: ColumnDescriptor) -> str:
    """
    Build the header label for one column, e.g. ``[name] VARCHAR(50) NULL``.

    The name is bracket-quoted with ``]`` doubled. A length takes precedence
    over a decimal precision/scale pair; nullability is only appended when
    the driver reported it.
    """
    parts = ["[", column.name.replace("]", "]]"), "] ", column.database_type_name]

    if column.length is not None:
        if column.length in MAX_LENGTH_SENTINELS:
            parts.append("(max)")
        else:
            parts.append(f"({column.length})")
    elif column.has_decimal_size:
        parts.append(f"({column.decimal_precision},{column.decimal_scale})")

    if column.nullable is not None:
        parts.append(" NULL" if column.nullable else " NOT NULL")

    return "".join(parts)


def render_header(columns: Sequence[ColumnDescriptor]) -> List[str]:
    return [render_label(column) for column in columns]
