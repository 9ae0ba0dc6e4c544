"""modelgen: field-spec compiler for Dart and Rust model code."""

from .codegen import (
    GenerationResult,
    GeneratorError,
    ModelSpec,
    build_model_spec,
    convert_struct_source,
    generate_from_sql,
    generate_model,
)
from .utils import TextLoaderError, load_text
from .workspace import (
    DestinationExists,
    RegistryEditError,
    Workspace,
    find_project_root,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorError",
    "ModelSpec",
    "build_model_spec",
    "convert_struct_source",
    "generate_from_sql",
    "generate_model",
    "TextLoaderError",
    "load_text",
    "DestinationExists",
    "RegistryEditError",
    "Workspace",
    "find_project_root",
]
