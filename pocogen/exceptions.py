"""
Exception classes raised while generating a class from a table schema.
"""


class PocoGeneratorError(Exception):
    """Base class for all pocogen errors"""


class MissingRequiredOption(PocoGeneratorError):
    """A required command line option was not supplied"""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"{option} is a required argument")


class UnmappedTypeError(PocoGeneratorError):
    """No primitive type is mapped for a SQL data type"""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"No type mapping exists for sql data type '{type_name}'")


class DatabaseConnectionError(PocoGeneratorError):
    """Error connecting to the database or running the schema query"""


class TableNotFoundError(PocoGeneratorError):
    """The schema query returned no columns for the table"""

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        super().__init__(f"No columns found for table '{table_name}'")
