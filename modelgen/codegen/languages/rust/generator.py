"""
Rust code generator implementation.

Generates Diesel ``Queryable`` model structs from field specs. Also hosts
the base class shared by the other Rust emitters.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import normalize_name, to_pascal_case, to_snake_case
from ...core.spec import ModelSpec
from ...core.types import Dialect, target_type

DEFAULT_CONNECTION_TYPE = "PgConnection"
DEFAULT_MODEL_DERIVES = ("Queryable", "Serialize")


class RustGenerator(CodeGenerator):
    """Base class for generators emitting Rust sources."""

    dialect = Dialect.RUST

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Rust generator with configuration."""
        super().__init__(config)
        self.connection_type = self.config.custom.get(
            "connection_type", DEFAULT_CONNECTION_TYPE
        )

    @property
    def file_extension(self) -> str:
        """Return Rust file extension."""
        return ".rs"

    @property
    def syntax_name(self) -> str:
        return "rust"

    def get_template_directory(self) -> Path:
        """Return the Rust templates directory."""
        return Path(__file__).parent / "templates"

    def build_fields(self, spec: ModelSpec) -> List[Dict[str, Any]]:
        """Template rows for the model's fields, typed in this generator's dialect."""
        return [
            {
                "name": to_snake_case(descriptor.raw_name),
                "type": target_type(descriptor.type_tag, self.dialect),
            }
            for descriptor in spec.fields
        ]

    def base_context(self, spec: ModelSpec) -> Dict[str, Any]:
        """Context entries every Rust template understands."""
        display_name = normalize_name(spec.name)
        return {
            "display_name": display_name,
            "class_name": to_pascal_case(display_name),
            "connection_type": self.connection_type,
            "add_comments": self.config.add_comments,
        }


class RustModelGenerator(RustGenerator):
    """Code generator for Rust database model structs."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.derives = list(
            self.config.custom.get("model_derives", DEFAULT_MODEL_DERIVES)
        )

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "rust"

    def generate(self, spec: ModelSpec) -> str:
        """Generate a model struct."""
        context = self.base_context(spec)
        context["fields"] = self.build_fields(spec)
        context["derives"] = self.derives
        return self.render_template("model.rs.j2", context)


def create_rust_generator(config: Optional[Dict[str, Any]] = None) -> RustModelGenerator:
    """Create a Rust model generator, merging ``config`` over the defaults."""
    return RustModelGenerator(load_config("rust", custom_config=config))
