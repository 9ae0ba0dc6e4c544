"""
Model extraction from SQL ``CREATE TABLE`` statements.

This is a lossy, line-oriented pattern matcher for a constrained subset
of DDL, not a SQL parser. Columns whose type is outside the known
keyword set, constraints, indexes and blank lines are skipped.
"""

import re
from typing import List, Tuple

from ...logging_config import get_logger
from .generator import GeneratorError
from .naming import singularize_table_name
from .spec import ModelSpec, build_model_spec

logger = get_logger(__name__)


class NoTableNameFound(GeneratorError):
    """Raised when the DDL text contains no ``CREATE TABLE`` statement."""

    pass


# Longer keywords come first so INTEGER is not consumed as INT.
SQL_TYPE_KEYWORDS = (
    "BIGSERIAL",
    "BIGINT",
    "INTEGER",
    "INT8",
    "INT4",
    "INT2",
    "INT",
    "DECIMAL",
    "SMALLINT",
    "SERIAL",
    "VARCHAR",
    "TEXT",
    "FLOAT8",
    "FLOAT4",
    "FLOAT",
    "DOUBLE",
    "BOOLEAN",
    "TIMESTAMPTZ",
    "TIMESTAMP",
)

TABLE_NAME_PATTERN = re.compile(
    r'CREATE TABLE (?:IF NOT EXISTS )?(?:"?\w+"?\.)?"?(\w+)"?\s*\('
)
COLUMN_PATTERN = re.compile(
    r'^"?(\w+)"?\s+(' + "|".join(SQL_TYPE_KEYWORDS) + r")\b(\[\])?"
)

_INTEGER_TYPES = {
    "bigserial",
    "bigint",
    "int",
    "int2",
    "int4",
    "int8",
    "integer",
    "smallint",
    "serial",
}
_DECIMAL_TYPES = {"decimal", "float", "float4", "float8", "double"}
_TIMESTAMP_TYPES = {"timestamp", "timestamptz"}
_TEXT_TYPES = {"varchar", "text"}


def column_type_code(column: str, sql_type: str, is_array: bool = False) -> str:
    """
    Map a SQL column type to a field-spec type code.

    Args:
        column: Column name, used to detect id columns
        sql_type: Keyword from ``SQL_TYPE_KEYWORDS`` (any case)
        is_array: Whether the column carried a ``[]`` marker

    Returns:
        Type code such as ``i``, ``id`` or ``z[]``
    """
    sql_type = sql_type.lower()

    if sql_type in _INTEGER_TYPES:
        if is_array:
            return "i[]"
        if column == "id" or column.endswith("_id"):
            return "id"
        return "i"
    if sql_type in _DECIMAL_TYPES:
        # d[] has no tag of its own; the parser degrades it to TEXT
        return "d[]" if is_array else "d"
    if sql_type in _TEXT_TYPES:
        return "z[]" if is_array else "z"
    if sql_type == "boolean":
        return "b[]" if is_array else "b"
    if sql_type in _TIMESTAMP_TYPES:
        return "dt"

    raise ValueError(f"Unsupported SQL type: {sql_type}")


def extract_field_entries(ddl_text: str) -> Tuple[str, List[str]]:
    """
    Pull the model name and field-spec entries out of DDL text.

    Only the first ``CREATE TABLE`` is used; collection stops at the next one.

    Returns:
        Tuple of (singular model name, list of ``name:code`` entries)

    Raises:
        NoTableNameFound: If no table definition is present
    """
    name = ""
    entries: List[str] = []

    for line in ddl_text.splitlines():
        stripped = line.strip()

        table_match = TABLE_NAME_PATTERN.search(stripped)
        if table_match:
            if name:
                logger.info("Ignoring additional table definition: %s", stripped)
                break
            name = singularize_table_name(table_match.group(1))
            logger.debug("Found table %s -> model %s", table_match.group(1), name)
            continue

        if not name:
            continue

        column_match = COLUMN_PATTERN.match(stripped)
        if column_match is None:
            if stripped:
                logger.debug("Skipping DDL line: %s", stripped)
            continue

        column, sql_type, array_marker = column_match.groups()
        entries.append(
            f"{column}:{column_type_code(column, sql_type, bool(array_marker))}"
        )

    if not name:
        raise NoTableNameFound("Cannot get model name: no CREATE TABLE statement found")

    return name, entries


def extract_model_spec(ddl_text: str) -> ModelSpec:
    """Build a ``ModelSpec`` from a ``CREATE TABLE`` statement."""
    name, entries = extract_field_entries(ddl_text)
    return build_model_spec(name, entries)
