"""Map SQL Server data type names to C# primitive types.

Lookup is case-insensitive: the type name is lowercased before it hits the
table. A type with no entry raises UnmappedTypeError rather than falling back
to a default, so a single unknown column aborts generation for the table.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Callable, Mapping

from .exceptions import UnmappedTypeError


class PrimitiveType(enum.Enum):
    """C# primitive a column is represented as: (spelling, is_value_type)."""

    INT = ("int", True)
    LONG = ("long", True)
    SHORT = ("short", True)
    BYTE = ("byte", True)
    DECIMAL = ("decimal", True)
    DOUBLE = ("double", True)
    SINGLE = ("float", True)
    BOOL = ("bool", True)
    DATETIME = ("DateTime", True)
    DATETIMEOFFSET = ("DateTimeOffset", True)
    TIMESPAN = ("TimeSpan", True)
    GUID = ("Guid", True)
    STRING = ("string", False)
    BYTE_ARRAY = ("byte[]", False)

    def __init__(self, csharp_name: str, is_value_type: bool) -> None:
        self.csharp_name = csharp_name
        self.is_value_type = is_value_type


TYPE_MAPPINGS: Mapping[str, PrimitiveType] = MappingProxyType({
    "int": PrimitiveType.INT,
    "bigint": PrimitiveType.LONG,
    "smallint": PrimitiveType.SHORT,
    "tinyint": PrimitiveType.BYTE,
    "decimal": PrimitiveType.DECIMAL,
    "numeric": PrimitiveType.DECIMAL,
    "money": PrimitiveType.DECIMAL,
    "smallmoney": PrimitiveType.DECIMAL,
    "float": PrimitiveType.DOUBLE,
    "real": PrimitiveType.SINGLE,
    "char": PrimitiveType.STRING,
    "nchar": PrimitiveType.STRING,
    "varchar": PrimitiveType.STRING,
    "nvarchar": PrimitiveType.STRING,
    "text": PrimitiveType.STRING,
    "ntext": PrimitiveType.STRING,
    "bit": PrimitiveType.BOOL,
    "date": PrimitiveType.DATETIME,
    "datetime": PrimitiveType.DATETIME,
    "datetime2": PrimitiveType.DATETIME,
    "smalldatetime": PrimitiveType.DATETIME,
    "datetimeoffset": PrimitiveType.DATETIMEOFFSET,
    "time": PrimitiveType.TIMESPAN,
    "uniqueidentifier": PrimitiveType.GUID,
    "binary": PrimitiveType.BYTE_ARRAY,
    "varbinary": PrimitiveType.BYTE_ARRAY,
    "image": PrimitiveType.BYTE_ARRAY,
})


def build_type_mapper(
    mappings: Mapping[str, PrimitiveType] = TYPE_MAPPINGS,
) -> Callable[[str], PrimitiveType]:
    """Bind a mapping table and return a case-insensitive lookup function."""

    def map_type(sql_type_name: str) -> PrimitiveType:
        try:
            return mappings[sql_type_name.lower()]
        except KeyError:
            raise UnmappedTypeError(sql_type_name) from None

    return map_type


map_type = build_type_mapper()


def csharp_type_name(primitive: PrimitiveType, nullable: bool) -> str:
    """Return the C# type spelling, with '?' for nullable value types."""
    if nullable and primitive.is_value_type:
        return f"{primitive.csharp_name}?"
    return primitive.csharp_name
