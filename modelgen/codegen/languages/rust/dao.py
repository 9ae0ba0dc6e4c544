"""
Rust DAO generator.

Emits a Diesel insertable record, a DAO struct wrapping a connection and
a ``create`` operation. Inline mode returns a fragment for splicing into
an existing file; new-file mode adds the module header and imports.
"""

from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.naming import to_pascal_case, to_snake_case, to_table_name
from ...core.spec import ModelSpec
from ...core.types import Dialect, borrows
from .generator import RustGenerator


class RustDaoGenerator(RustGenerator):
    """Code generator for Diesel data access objects."""

    dialect = Dialect.RUST_DAO

    def __init__(self, config: Optional[GeneratorConfig] = None, new_file: bool = False):
        """
        Initialize DAO generator.

        Args:
            config: Generator configuration
            new_file: Emit a complete module instead of an inline fragment
        """
        super().__init__(config)
        self.new_file = new_file or bool(self.config.custom.get("new_file", False))

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "rust-dao"

    def default_file_name(self, spec: ModelSpec) -> str:
        return f"{to_snake_case(spec.name)}_dao{self.file_extension}"

    def generate(self, spec: ModelSpec) -> str:
        """Generate the DAO code for a model."""
        fields = self.build_fields(spec)
        context = self.base_context(spec)

        context.update(
            {
                "fields": fields,
                "new_file": self.new_file,
                "table_name": to_table_name(to_snake_case(spec.name)),
                # The insertable record only needs a lifetime when it borrows
                "lifetime": "<'a>" if any(borrows(f["type"]) for f in fields) else "",
            }
        )

        return self.render_template("dao.rs.j2", context)


def module_declaration(name: str) -> str:
    """``lib.rs`` line registering the DAO module of ``name``."""
    return f"pub mod {to_snake_case(name)}_dao;"


def reexport_declaration(name: str) -> str:
    """``dao.rs`` line re-exporting the DAO struct of ``name``."""
    return f"pub use crate::{to_snake_case(name)}_dao::{to_pascal_case(name)}Dao;"


def create_dao_generator(
    config: Optional[Dict[str, Any]] = None, new_file: bool = False
) -> RustDaoGenerator:
    """Create a DAO generator, merging ``config`` over the defaults."""
    return RustDaoGenerator(load_config("rust-dao", custom_config=config), new_file)
