"""Convert raw database identifiers to C# class and property names.

Pattern: split on anything that is not a word character, uppercase the first
character of every token, join with no separator.
  - word characters: A-Z a-z 0-9
  - with retain_underscore: A-Z a-z 0-9 _

Examples:
  users           -> Users
  user_name       -> UserName       (retain_underscore: User_name)
  order details   -> OrderDetails
  customerID      -> CustomerID
  123abc          -> 123abc
  ---             -> ""
"""

from __future__ import annotations

import re
from typing import Callable

_WORD_CHARS = "A-Za-z0-9"


def _token_pattern(retain_underscore: bool) -> re.Pattern[str]:
    """Return the regex matching one token of an identifier."""
    chars = _WORD_CHARS + ("_" if retain_underscore else "")
    return re.compile(f"[{chars}]+")


def _capitalize_first(token: str) -> str:
    """Uppercase the first character only; the rest is left as-is."""
    return token[:1].upper() + token[1:]


def build_name_converter(retain_underscore: bool = False) -> Callable[[str], str]:
    """Build a name converter with the underscore policy fixed.

    Returns a function mapping a raw identifier like 'user_name' to 'UserName'.
    """
    pattern = _token_pattern(retain_underscore)

    def convert(raw: str) -> str:
        return "".join(_capitalize_first(token) for token in pattern.findall(raw))

    return convert


def convert_name(raw: str, retain_underscore: bool = False) -> str:
    """Convert a single identifier."""
    return build_name_converter(retain_underscore)(raw)
