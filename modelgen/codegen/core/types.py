"""
Type system shared by every emitter.

``TypeTag`` is the abstract field type produced by the parser; each
``Dialect`` owns exactly one table mapping every tag to a concrete type
name. Emitters must go through ``target_type`` so that a given field is
typed identically wherever it appears.
"""

from enum import Enum
from typing import Dict


class TypeTag(Enum):
    """Abstract field types understood by the field-spec language."""

    ID = "id"
    TEXT = "z"
    BOOL = "b"
    DATETIME = "dt"
    INT32 = "i32"
    INT64 = "i64"
    FLOAT = "d"
    TEXT_ARRAY = "z[]"
    INT32_ARRAY = "i32[]"
    INT64_ARRAY = "i64[]"
    BOOL_ARRAY = "b[]"

    @property
    def is_collection(self) -> bool:
        """True for every ``*_ARRAY`` variant."""
        return self.name.endswith("_ARRAY")


class Dialect(Enum):
    """Target type vocabularies."""

    DART = "dart"
    RUST = "rust"
    RUST_DAO = "rust_dao"  # insertable records borrow strings


# Short codes accepted in a field spec. Aliases resolve to the same tag.
TYPE_CODES: Dict[str, TypeTag] = {
    "id": TypeTag.ID,
    "z": TypeTag.TEXT,
    "b": TypeTag.BOOL,
    "dt": TypeTag.DATETIME,
    "i": TypeTag.INT32,
    "i32": TypeTag.INT32,
    "i64": TypeTag.INT64,
    "d": TypeTag.FLOAT,
    "z[]": TypeTag.TEXT_ARRAY,
    "i[]": TypeTag.INT32_ARRAY,
    "i32[]": TypeTag.INT32_ARRAY,
    "i64[]": TypeTag.INT64_ARRAY,
    "b[]": TypeTag.BOOL_ARRAY,
}

DEFAULT_TYPE_CODE = "z"


TYPE_TABLES: Dict[Dialect, Dict[TypeTag, str]] = {
    Dialect.DART: {
        TypeTag.ID: "int",
        TypeTag.TEXT: "String",
        TypeTag.BOOL: "bool",
        TypeTag.DATETIME: "String",
        TypeTag.INT32: "int",
        TypeTag.INT64: "int",
        TypeTag.FLOAT: "double",
        TypeTag.TEXT_ARRAY: "List<String>",
        TypeTag.INT32_ARRAY: "List<int>",
        TypeTag.INT64_ARRAY: "List<int>",
        TypeTag.BOOL_ARRAY: "List<bool>",
    },
    Dialect.RUST: {
        TypeTag.ID: "ID",
        TypeTag.TEXT: "String",
        TypeTag.BOOL: "bool",
        TypeTag.DATETIME: "NaiveDateTime",
        TypeTag.INT32: "i32",
        TypeTag.INT64: "i64",
        TypeTag.FLOAT: "f64",
        TypeTag.TEXT_ARRAY: "Vec<String>",
        TypeTag.INT32_ARRAY: "Vec<i32>",
        TypeTag.INT64_ARRAY: "Vec<i64>",
        TypeTag.BOOL_ARRAY: "Vec<bool>",
    },
    Dialect.RUST_DAO: {
        TypeTag.ID: "ID",
        TypeTag.TEXT: "&'a str",
        TypeTag.BOOL: "bool",
        TypeTag.DATETIME: "NaiveDateTime",
        TypeTag.INT32: "i32",
        TypeTag.INT64: "i64",
        TypeTag.FLOAT: "f64",
        TypeTag.TEXT_ARRAY: "&'a Vec<String>",
        TypeTag.INT32_ARRAY: "Vec<i32>",
        TypeTag.INT64_ARRAY: "Vec<i64>",
        TypeTag.BOOL_ARRAY: "Vec<bool>",
    },
}


class TypeMappingError(LookupError):
    """Raised when a dialect table has no entry for a tag."""

    pass


def target_type(tag: TypeTag, dialect: Dialect) -> str:
    """
    Look up the concrete type name for a tag in a dialect.

    Args:
        tag: Abstract field type
        dialect: Target vocabulary

    Returns:
        Concrete type name, e.g. ``Vec<i64>``

    Raises:
        TypeMappingError: If the dialect table lacks the tag
    """
    try:
        return TYPE_TABLES[dialect][tag]
    except KeyError:
        raise TypeMappingError(f"No {dialect.value} type registered for {tag.name}")


def borrows(type_name: str) -> bool:
    """Check whether a concrete Rust type carries the ``'a`` lifetime."""
    return "'a" in type_name
