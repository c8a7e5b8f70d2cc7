"""Entry point: python -m pocogen TABLE -c CONNSTR

Reads the table's columns from SQL Server, prints the C# class to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .codegen import emit
from .exceptions import MissingRequiredOption, PocoGeneratorError
from .naming import build_name_converter
from .schema_reader import read_table
from .type_mapping import build_type_mapper

logger = logging.getLogger("pocogen")

CONNSTR_ENV = "POCOGEN_CONNSTR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocogen",
        description="Generate a C# POCO class from a SQL Server table.",
    )
    parser.add_argument("table", nargs="?", help="Table Name")
    parser.add_argument(
        "-c", "--connstr",
        default=os.environ.get(CONNSTR_ENV),
        help=f"Connection string. Required (falls back to ${CONNSTR_ENV}).",
    )
    parser.add_argument(
        "-_", dest="retain_underscore", action="store_true",
        help="Retain underscores",
    )
    parser.add_argument("--class-name", help="Override the class name")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """Read the table and return the generated class source."""
    if not args.connstr:
        raise MissingRequiredOption("-c|--connstr")
    if not args.table:
        raise MissingRequiredOption("table")

    columns = read_table(args.connstr, args.table)
    type_mapper = build_type_mapper()
    name_converter = build_name_converter(args.retain_underscore)

    return emit(args.table, columns, type_mapper, name_converter, args.class_name)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = run(args)
    except MissingRequiredOption as exc:
        logger.error("%s", exc)
        return 2
    except PocoGeneratorError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
