"""
Model-to-API-type converter generator.

Reads a selected ``pub struct`` definition and emits a ``ToApiType``
implementation copying every field from the database model into the
API type of the same name.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import load_config
from ...core.generator import GenerationResult, GeneratorError, generate_code
from ...core.naming import to_pascal_case
from ...core.spec import ModelSpec
from .generator import RustGenerator

logger = get_logger(__name__)

STRUCT_NAME_PATTERN = re.compile(r"pub struct (\w+)(?:<[^>]*>)?\s*\{")
STRUCT_FIELD_PATTERN = re.compile(r"pub (\w+):\s*([^,/]+?)\s*(?:,|//|$)")


class MultipleStructDefinitions(GeneratorError):
    """Raised when the selection holds more than one struct."""

    pass


class NoStructDefinitionFound(GeneratorError):
    """Raised when the selection holds no struct at all."""

    pass


@dataclass
class StructField:
    """A ``pub name: Type`` line of a Rust struct."""

    name: str
    rust_type: str

    @property
    def copy_expression(self) -> str:
        """Expression copying this field out of ``self``."""
        if self.rust_type == "String":
            return f"self.{self.name}.to_owned()"
        if self.rust_type.startswith("Vec"):
            return f"self.{self.name}.clone()"
        return f"self.{self.name}"


@dataclass
class StructDefinition:
    """A named Rust struct with its public fields."""

    name: str
    fields: List[StructField] = field(default_factory=list)


def extract_struct_definition(source: str) -> StructDefinition:
    """
    Pattern-extract a single struct definition from source text.

    Raises:
        MultipleStructDefinitions: If a second ``pub struct`` is found
        NoStructDefinitionFound: If there is no ``pub struct`` at all
    """
    struct: Optional[StructDefinition] = None

    for line in source.splitlines():
        name_match = STRUCT_NAME_PATTERN.search(line)
        if name_match:
            if struct is not None:
                raise MultipleStructDefinitions(
                    f"Name already defined: {struct.name}"
                )
            struct = StructDefinition(name=name_match.group(1))
            continue

        if struct is None:
            continue

        field_match = STRUCT_FIELD_PATTERN.search(line)
        if field_match:
            struct.fields.append(
                StructField(field_match.group(1), field_match.group(2).strip())
            )

    if struct is None:
        raise NoStructDefinitionFound("No pub struct definition found in selection")

    return struct


class ApiConverterGenerator(RustGenerator):
    """Code generator for ``ToApiType`` implementations."""

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "api-converter"

    def generate(self, spec: ModelSpec) -> str:
        """Generate a converter for a model typed through the Rust dialect."""
        struct = StructDefinition(
            name=to_pascal_case(spec.name),
            fields=[StructField(f["name"], f["type"]) for f in self.build_fields(spec)],
        )
        return self.generate_from_struct(struct)

    def generate_from_struct(self, struct: StructDefinition) -> str:
        """Render the converter for an extracted struct."""
        context = {
            "class_name": struct.name,
            "connection_type": self.connection_type,
            "fields": [
                {"name": f.name, "expr": f.copy_expression} for f in struct.fields
            ],
        }
        return self.render_template("converter.rs.j2", context)

    def generate_from_source(self, source: str) -> GenerationResult:
        """
        Generate a converter from selected struct source text.

        Failures come back as an unsuccessful result with empty code and
        the reason in ``warnings``.
        """
        try:
            struct = extract_struct_definition(source)
        except GeneratorError as e:
            logger.warning("%s", e)
            return GenerationResult.error(str(e), exception=e)

        code = self.format_code(self.generate_from_struct(struct))
        metadata = {
            "target": self.target_name,
            "file_extension": self.file_extension,
            "syntax": self.syntax_name,
            "model": struct.name,
            "field_count": len(struct.fields),
        }
        return GenerationResult(code, metadata=metadata)


def create_converter_generator(
    config: Optional[Dict[str, Any]] = None
) -> ApiConverterGenerator:
    """Create a converter generator, merging ``config`` over the defaults."""
    return ApiConverterGenerator(load_config("api-converter", custom_config=config))


def convert_struct_source(source: str) -> GenerationResult:
    """Shortcut: converter for ``source`` with default configuration."""
    return create_converter_generator().generate_from_source(source)


def convert_model(spec: ModelSpec) -> GenerationResult:
    """Shortcut: converter for a ``ModelSpec`` with default configuration."""
    return generate_code(create_converter_generator(), spec)
