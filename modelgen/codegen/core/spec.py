"""
Field-spec parsing and the intermediate representation.

Turns ``name:z,age:i,active:b,tags:z[]`` into an ordered sequence of
``FieldDescriptor`` objects wrapped in a ``ModelSpec`` that every
generator consumes.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from ...logging_config import get_logger
from .types import DEFAULT_TYPE_CODE, TYPE_CODES, TypeTag

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """A single parsed field entry."""

    raw_name: str  # As typed by the user or extracted from SQL
    type_tag: TypeTag
    type_code: str = DEFAULT_TYPE_CODE  # Original token, kept for diagnostics

    @property
    def is_collection(self) -> bool:
        """Whether the field holds an ordered sequence."""
        return self.type_tag.is_collection

    @property
    def recognized(self) -> bool:
        """False when the type code fell back to TEXT."""
        return self.type_code in TYPE_CODES


@dataclass(frozen=True)
class ModelSpec:
    """A named, ordered collection of fields."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.fields)

    def field_names(self) -> List[str]:
        """Raw field names in declaration order."""
        return [f.raw_name for f in self.fields]

    def unrecognized_fields(self) -> List[FieldDescriptor]:
        """Fields whose type code was silently downgraded to TEXT."""
        return [f for f in self.fields if not f.recognized]

    def duplicate_names(self) -> List[str]:
        """Field names declared more than once, in first-seen order."""
        seen = set()
        duplicates = []
        for name in self.field_names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates


def parse_type_code(code: str) -> TypeTag:
    """
    Resolve a short type code to a ``TypeTag``.

    Unknown codes resolve to ``TypeTag.TEXT`` instead of failing.
    """
    tag = TYPE_CODES.get(code.strip())
    if tag is None:
        logger.debug("Unknown type code %r, falling back to TEXT", code)
        return TypeTag.TEXT
    return tag


def parse_field(entry: str) -> FieldDescriptor:
    """Parse one ``name[:code]`` entry."""
    name, sep, code = entry.strip().partition(":")
    code = code.strip() if sep else DEFAULT_TYPE_CODE

    return FieldDescriptor(
        raw_name=name.strip(), type_tag=parse_type_code(code), type_code=code
    )


def parse_fields(spec: Union[str, Iterable[str]]) -> List[FieldDescriptor]:
    """
    Parse a comma-separated field spec.

    Args:
        spec: Raw spec string, or an already split sequence of entries

    Returns:
        Descriptors in input order. Duplicates are kept; blank entries are
        skipped, so an empty spec yields an empty list.
    """
    entries = spec.split(",") if isinstance(spec, str) else list(spec)

    descriptors = []
    for entry in entries:
        if not entry.strip():
            continue
        descriptors.append(parse_field(entry))

    logger.debug("Parsed %d field(s)", len(descriptors))
    return descriptors


def build_model_spec(name: str, spec: Union[str, Iterable[str]]) -> ModelSpec:
    """Parse a field spec into a ``ModelSpec`` named ``name``."""
    return ModelSpec(name=name, fields=tuple(parse_fields(spec)))
