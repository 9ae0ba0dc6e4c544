import pytest

from modelgen.codegen.core.ddl import (
    NoTableNameFound,
    column_type_code,
    extract_field_entries,
    extract_model_spec,
)
from modelgen.codegen.core.types import TypeTag

ACCOUNTS_DDL = """CREATE TABLE accounts (
  id BIGSERIAL,
  email VARCHAR,
  active BOOLEAN
);"""

CATEGORIES_DDL = """
-- categories and their posts
CREATE TABLE IF NOT EXISTS public."categories" (
    id SERIAL PRIMARY KEY,
    parent_id INTEGER REFERENCES categories (id),
    title VARCHAR(255) NOT NULL,
    position INT NOT NULL DEFAULT 0,
    weight DOUBLE PRECISION,
    labels TEXT[],
    created_at TIMESTAMP NOT NULL,
    geometry POLYGON,
    CONSTRAINT unique_title UNIQUE (title)
);

CREATE TABLE posts (
    id BIGSERIAL PRIMARY KEY,
    body TEXT
);
"""


def test_extracts_accounts_table():
    spec = extract_model_spec(ACCOUNTS_DDL)

    assert spec.name == "account"
    assert [(d.raw_name, d.type_code) for d in spec.fields] == [
        ("id", "id"),
        ("email", "z"),
        ("active", "b"),
    ]


def test_missing_create_table_raises():
    with pytest.raises(NoTableNameFound):
        extract_model_spec("SELECT * FROM accounts;\n")


def test_only_first_table_is_used_and_unknown_lines_are_skipped():
    name, entries = extract_field_entries(CATEGORIES_DDL)

    assert name == "category"
    assert entries == [
        "id:id",
        "parent_id:id",
        "title:z",
        "position:i",
        "weight:d",
        "labels:z[]",
        "created_at:dt",
    ]


def test_integer_is_not_read_as_int():
    name, entries = extract_field_entries("CREATE TABLE items (\n  count INTEGER NOT NULL\n);")

    assert name == "item"
    assert entries == ["count:i"]


def test_postgres_type_aliases():
    name, entries = extract_field_entries(
        "CREATE TABLE events (\n  id INT8,\n  seen_at TIMESTAMPTZ,\n  score FLOAT8,\n  n INT4\n);"
    )

    assert name == "event"
    assert entries == ["id:id", "seen_at:dt", "score:d", "n:i"]


def test_decimal_array_degrades_to_text():
    spec = extract_model_spec("CREATE TABLE prices (\n  amounts DECIMAL[]\n);")

    assert spec.fields[0].type_tag is TypeTag.TEXT
    assert spec.unrecognized_fields() == [spec.fields[0]]


@pytest.mark.parametrize(
    "column, sql_type, is_array, expected",
    [
        ("id", "BIGINT", False, "id"),
        ("owner_id", "integer", False, "id"),
        ("ids", "INTEGER", True, "i[]"),
        ("age", "SMALLINT", False, "i"),
        ("flags", "BOOLEAN", True, "b[]"),
        ("price", "FLOAT", False, "d"),
        ("seen_at", "TIMESTAMP", False, "dt"),
        ("n", "INT4", False, "i"),
        ("ref_id", "int8", False, "id"),
        ("score", "FLOAT8", False, "d"),
        ("seen_at", "TIMESTAMPTZ", False, "dt"),
    ],
)
def test_column_type_code(column, sql_type, is_array, expected):
    assert column_type_code(column, sql_type, is_array) == expected
