"""Build Jinja2 template context from a table's columns.

Resolves the class name, per-column annotations, property names and C# type
spellings for poco.cs.j2. Every column's type is mapped here, before any text
is rendered, so an unmapped type aborts the whole class.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .exceptions import TableNotFoundError
from .schema_reader import ColumnDescriptor
from .type_mapping import PrimitiveType, csharp_type_name


def build_property(
    column: ColumnDescriptor,
    type_mapper: Callable[[str], PrimitiveType],
    name_converter: Callable[[str], str],
) -> dict[str, Any]:
    """Build the template context for a single column."""
    primitive = type_mapper(column.sql_data_type)
    property_name = name_converter(column.name)

    return {
        "name": property_name,
        "type": csharp_type_name(primitive, column.is_nullable),
        "is_key": column.is_primary_key,
        # Raw name is kept when the property would no longer match the column
        "column_annotation": column.name if property_name != column.name else None,
    }


def build_context(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    type_mapper: Callable[[str], PrimitiveType],
    name_converter: Callable[[str], str],
    class_name: str | None = None,
) -> dict[str, Any]:
    """Build the full template context for one table."""
    if not columns:
        raise TableNotFoundError(table_name)

    if class_name is None:
        class_name = name_converter(table_name)
    properties = [
        build_property(column, type_mapper, name_converter) for column in columns
    ]

    return {
        "class_name": class_name,
        "table_annotation": table_name if class_name != table_name else None,
        "properties": properties,
        "property_count": len(properties),
    }
