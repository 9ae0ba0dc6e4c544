"""
Dart model generator implementation.

Generates immutable Equatable value classes with map serialization
and a copy method from a parsed field spec.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import to_camel_case, to_pascal_case, to_snake_case
from ...core.spec import ModelSpec
from ...core.types import Dialect, TypeTag, target_type

IMPLICIT_ID_NAME = "id"


class DartModelGenerator(CodeGenerator):
    """Code generator for immutable Dart model classes."""

    template_indent = 2

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Dart generator with configuration."""
        super().__init__(config)
        self.null_safety = bool(self.config.custom.get("null_safety", True))

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "dart"

    @property
    def file_extension(self) -> str:
        """Return Dart file extension."""
        return ".dart"

    def get_template_directory(self) -> Path:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, spec: ModelSpec) -> str:
        """Generate a complete Dart model file."""
        fields = self.build_fields(spec)
        names = [f["name"] for f in fields]

        context = {
            "class_name": to_pascal_case(spec.name),
            "fields": fields,
            "null_safety": self.null_safety,
            "constructor_params": ", ".join(f"this.{name}" for name in names),
            "props": ", ".join(names),
            "copy_params": "{" + ", ".join(f["copy_param"] for f in fields) + "}",
            "copy_args": ", ".join(f["copy_arg"] for f in fields),
        }

        return self.render_template("model.dart.j2", context)

    def build_fields(self, spec: ModelSpec) -> List[Dict[str, Any]]:
        """
        Build template rows for every declared field.

        The implicit ``id`` always comes first, followed by the model's
        fields in order. A spec that declares its own ``id`` gets two.
        """
        rows = [self._field_data(IMPLICIT_ID_NAME, TypeTag.ID)]
        for descriptor in spec.fields:
            rows.append(self._field_data(descriptor.raw_name, descriptor.type_tag))
        return rows

    def _field_data(self, raw_name: str, tag: TypeTag) -> Dict[str, Any]:
        dart_type = target_type(tag, Dialect.DART)
        name = to_camel_case(raw_name)
        key = to_snake_case(raw_name)

        if tag.is_collection:
            from_map = f"{dart_type}.from(data['{key}'])"
        else:
            from_map = f"data['{key}'] as {dart_type}"

        copy_type = f"{dart_type}?" if self.null_safety else dart_type

        return {
            "name": name,
            "key": key,
            "type": dart_type,
            "from_map": from_map,
            "copy_param": f"{copy_type} {name}",
            "copy_arg": f"{name} ?? this.{name}",
        }


def create_dart_generator(config: Optional[Dict[str, Any]] = None) -> DartModelGenerator:
    """Create a Dart generator, merging ``config`` over the dart defaults."""
    return DartModelGenerator(load_config("dart", custom_config=config))
