"""
Naming utilities for code generation.

Case conversions used by every emitter plus the naive English
pluralization rules that map model names to table names and back.
All conversions are deterministic and idempotent.
"""

import re
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def normalize_name(name: str) -> str:
    """Trim a user-given name and collapse inner whitespace."""
    return " ".join(name.split())


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Split acronyms first so HTTPServer becomes http_server
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)

    # Spaces, hyphens, dots and friends all become underscores
    name = _SEPARATORS.sub("_", name)
    return name.lower().strip("_")


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = [part for part in to_snake_case(name).split("_") if part]

    if not parts:
        return ""

    return parts[0] + "".join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(part.capitalize() for part in to_snake_case(name).split("_") if part)


def to_kebab_case(name: str) -> str:
    """Convert to kebab-case."""
    return to_snake_case(name).replace("_", "-")


def to_screaming_snake_case(name: str) -> str:
    """Convert to SCREAMING_SNAKE_CASE."""
    return to_snake_case(name).upper()


_CONVERTERS = {
    NamingCase.SNAKE_CASE: to_snake_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.KEBAB_CASE: to_kebab_case,
    NamingCase.SCREAMING_SNAKE: to_screaming_snake_case,
}


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    return _CONVERTERS[target_case](name)


def to_table_name(name_snake: str) -> str:
    """
    Pluralize a snake_case model name into a table name.

    This is a best-effort heuristic, not a linguistic pluralizer:
    ``s`` is appended unless the name already ends with one.
    """
    if name_snake.endswith("s"):
        return name_snake
    return f"{name_snake}s"


def singularize_table_name(table_name: str) -> str:
    """
    Turn a plural table name back into a model name.

    ``categories`` -> ``category``, ``accounts`` -> ``account``.
    """
    if table_name.endswith("ies"):
        return table_name[:-3] + "y"
    if table_name.endswith("s"):
        return table_name[:-1]
    return table_name
