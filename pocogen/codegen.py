"""Render the POCO class source from a template context.

Takes the context from context_builder and produces the C# class text.
Nothing is written here; the caller decides where the text goes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Sequence

import jinja2

from .context_builder import build_context
from .schema_reader import ColumnDescriptor
from .type_mapping import PrimitiveType

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "poco.cs.j2"


def cs_string(value: str) -> str:
    """Escape a value for use inside a C# string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["cs_string"] = cs_string
    return env


def render_class(context: dict[str, Any]) -> str:
    """Render poco.cs.j2 with a context from build_context."""
    template = _environment().get_template(TEMPLATE_NAME)
    output = template.render(**context)
    logger.debug(
        "Rendered class %s (%d properties)",
        context["class_name"], context["property_count"],
    )
    return output


def emit(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    type_mapper: Callable[[str], PrimitiveType],
    name_converter: Callable[[str], str],
    class_name: str | None = None,
) -> str:
    """Generate the class source for a table."""
    context = build_context(table_name, columns, type_mapper, name_converter, class_name)
    return render_class(context)
