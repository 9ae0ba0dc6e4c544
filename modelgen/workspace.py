"""Project workspace: the only place generated code touches the disk.

Generators are pure; this module decides destination paths, refuses to
clobber existing models, writes files and applies the idempotent
registry-file edits that wire a new DAO module into the crate.

Registry edits are not transactional with the DAO file write: if an edit
fails after the DAO file was written, the file stays on disk and the
error is raised to the caller.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .codegen.core.config import GeneratorConfig, load_config
from .codegen.core.ddl import extract_model_spec
from .codegen.core.generator import (
    EmptyInputError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .codegen.core.naming import to_pascal_case, to_snake_case
from .codegen.core.source_edit import upsert_line_after_anchor
from .codegen.core.spec import ModelSpec, build_model_spec
from .codegen.registry import get_generator
from .codegen.languages.rust.dao import (
    RustDaoGenerator,
    module_declaration,
    reexport_declaration,
)
from .logging_config import get_logger

logger = get_logger(__name__)

PROJECT_MARKERS = {"dart": "pubspec.yaml", "rust": "Cargo.toml"}
MODULE_ANCHOR = "pub mod"
REEXPORT_ANCHOR = "pub use"

# Serializes read-modify-write cycles on registry files
_registry_lock = threading.Lock()


class WorkspaceError(GeneratorError):
    """Base exception for workspace operations."""

    pass


class DestinationExists(WorkspaceError):
    """Raised when the target model file already exists."""

    pass


class RegistryEditError(WorkspaceError):
    """Raised when a registry file cannot be read or written."""

    pass


@dataclass
class WriteResult:
    """Outcome of a workspace write."""

    path: Path
    code: str
    warnings: list[str] = field(default_factory=list)
    updated_registries: list[Path] = field(default_factory=list)


def find_project_root(start: str | Path | None = None, kind: str = "rust") -> Path:
    """Walk up from ``start`` to the directory holding the project marker.

    Args:
        start: Directory to start from (defaults to the current directory).
        kind: Project kind, a key of ``PROJECT_MARKERS``.

    Returns:
        The first ancestor containing the marker file, or ``start`` itself.
    """
    start_path = Path(start or Path.cwd()).resolve()
    marker = PROJECT_MARKERS[kind]

    for candidate in (start_path, *start_path.parents):
        if (candidate / marker).is_file():
            logger.debug("Found %s in %s", marker, candidate)
            return candidate

    logger.info("No %s above %s, using it as project root", marker, start_path)
    return start_path


def require_model_spec(name: str, fields: str | list[str]) -> ModelSpec:
    """Build a ``ModelSpec`` for a generation request.

    Raises:
        EmptyInputError: If the field spec is empty or the name has no
            letters or digits to build an identifier from.
    """
    if not name or not to_pascal_case(name):
        raise EmptyInputError("No name")

    spec = build_model_spec(name.strip(), fields)
    if not spec.fields:
        raise EmptyInputError("No fields")
    return spec


def _unwrap(result: GenerationResult) -> GenerationResult:
    if not result.success:
        if isinstance(result.exception, GeneratorError):
            raise result.exception
        raise GeneratorError(result.error_message)
    return result


class Workspace:
    """File-system front end for a project rooted at ``root``."""

    def __init__(
        self,
        root: str | Path,
        config_file: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> None:
        self.root = Path(root)
        self.config_file = config_file
        self.overrides = overrides or {}
        logger.debug("Workspace initialized at %s", self.root)

    def config_for(self, target: str) -> GeneratorConfig:
        """Merged configuration for ``target``."""
        return load_config(target, self.overrides, self.config_file)

    # Paths

    def model_path(self, name: str) -> Path:
        config = self.config_for("dart")
        return self.root / config.models_dir / f"{to_snake_case(name)}.dart"

    def dao_path(self, name: str) -> Path:
        config = self.config_for("rust-dao")
        return self.root / config.dao_dir / f"{to_snake_case(name)}_dao.rs"

    def models_file(self) -> Path:
        return self.root / self.config_for("rust").models_file

    # Operations

    def write_dart_model(self, name: str, fields: str | list[str]) -> WriteResult:
        """Generate a Dart model and write it under the models directory.

        Raises:
            EmptyInputError: If the name or field spec is empty.
            DestinationExists: If the model file already exists.
        """
        spec = require_model_spec(name, fields)
        path = self.model_path(spec.name)

        if path.exists():
            raise DestinationExists(f"File already exists: {path}")

        result = _unwrap(generate_code(get_generator("dart", self.config_for("dart")), spec))

        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(result.code + "\n")
        except FileExistsError as e:
            raise DestinationExists(f"File already exists: {path}") from e
        logger.info("Wrote %s", path)

        return WriteResult(path=path, code=result.code, warnings=result.warnings)

    def write_dao(self, name: str, fields: str | list[str]) -> WriteResult:
        """Generate a DAO module, write it and register it in the crate.

        Raises:
            EmptyInputError: If the name or field spec is empty.
            RegistryEditError: If a registry file cannot be updated. The DAO
                file has already been written at that point and is kept.
        """
        spec = require_model_spec(name, fields)
        path = self.dao_path(spec.name)

        generator = RustDaoGenerator(self.config_for("rust-dao"), new_file=True)
        result = _unwrap(generate_code(generator, spec))

        if path.exists():
            logger.warning("Overwriting existing DAO file %s", path)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.code + "\n", encoding="utf-8")
        logger.info("Wrote %s", path)

        updated = self.register_dao(spec.name)
        return WriteResult(
            path=path,
            code=result.code,
            warnings=result.warnings,
            updated_registries=updated,
        )

    def register_dao(self, name: str) -> list[Path]:
        """Insert the module declaration and re-export lines for ``name``.

        Safe to call repeatedly; lines already present are left alone.

        Returns:
            Registry files whose contents changed.
        """
        config = self.config_for("rust-dao")
        edits = [
            (self.root / config.lib_registry, MODULE_ANCHOR, module_declaration(name)),
            (self.root / config.dao_registry, REEXPORT_ANCHOR, reexport_declaration(name)),
        ]

        updated = []
        for path, anchor, line in edits:
            if self.upsert_registry_line(path, anchor, line):
                updated.append(path)
        return updated

    def upsert_registry_line(self, path: Path, anchor: str, line: str) -> bool:
        """Apply ``upsert_line_after_anchor`` to a file on disk.

        Returns:
            True if the file changed.

        Raises:
            RegistryEditError: If the file cannot be read or written.
        """
        with _registry_lock:
            try:
                with path.open("r", encoding="utf-8", newline="") as f:
                    contents = f.read()
                new_contents = upsert_line_after_anchor(contents, anchor, line)
                if new_contents == contents:
                    return False
                with path.open("w", encoding="utf-8", newline="") as f:
                    f.write(new_contents)
            except OSError as e:
                raise RegistryEditError(f"Cannot update {path}: {e}") from e

        logger.info("Registered '%s' in %s", line, path)
        return True

    def append_sql_model(self, ddl_text: str) -> WriteResult:
        """Generate a Rust model from DDL and append it to the models file.

        Raises:
            NoTableNameFound: If the DDL has no ``CREATE TABLE``.
        """
        spec = extract_model_spec(ddl_text)
        result = _unwrap(generate_code(get_generator("rust", self.config_for("rust")), spec))

        path = self.models_file()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(result.code + "\n")
        logger.info("Appended model %s to %s", spec.name, path)

        return WriteResult(path=path, code=result.code, warnings=result.warnings)
