"""
Code generation from field specs.

Parses terse field specs (or SQL DDL) into a ``ModelSpec`` and renders
it with one of the registered target generators.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    get_target_info,
    is_target_supported,
    list_all_target_info,
    list_supported_targets,
)
from .core.generator import (
    CodeGenerator,
    EmptyInputError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.naming import to_pascal_case
from .core.spec import FieldDescriptor, ModelSpec, build_model_spec, parse_fields
from .core.types import Dialect, TypeTag, target_type
from .core.ddl import NoTableNameFound, extract_model_spec
from .core.config import (
    GeneratorConfig,
    ConfigManager,
    ConfigError,
    get_config_manager,
    load_config,
)
from .languages.rust.converter import (
    MultipleStructDefinitions,
    NoStructDefinitionFound,
    convert_struct_source,
)


def generate_model(name, fields, target="dart", config=None):
    """
    Generate code for a named model from a field spec.

    Args:
        name: Model name, e.g. "Todo"
        fields: Comma-separated field spec or list of entries
        target: Target name or alias
        config: Generator configuration dict, GeneratorConfig or path

    Returns:
        GenerationResult with generated code
    """
    if not name or not to_pascal_case(name):
        return GenerationResult.error("No name", exception=EmptyInputError("No name"))

    spec = build_model_spec(name, fields)
    if not spec.fields:
        return GenerationResult.error(
            "No fields", exception=EmptyInputError("No fields")
        )

    generator = get_generator(target, config)
    return generate_code(generator, spec)


def generate_from_sql(ddl_text, target="rust", config=None):
    """
    Generate code for the first table of a ``CREATE TABLE`` statement.

    Returns:
        GenerationResult; unsuccessful when no table name is found
    """
    try:
        spec = extract_model_spec(ddl_text)
    except NoTableNameFound as e:
        return GenerationResult.error(str(e), exception=e)

    generator = get_generator(target, config)
    return generate_code(generator, spec)


# Version info
__version__ = "0.1.0"

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "EmptyInputError",
    "NoTableNameFound",
    "MultipleStructDefinitions",
    "NoStructDefinitionFound",
    "FieldDescriptor",
    "ModelSpec",
    "Dialect",
    "TypeTag",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "build_model_spec",
    "parse_fields",
    "target_type",
    "extract_model_spec",
    "convert_struct_source",
    "generate_code",
    "generate_model",
    "generate_from_sql",
    "get_generator",
    "get_registry",
    "get_target_info",
    "is_target_supported",
    "list_all_target_info",
    "list_supported_targets",
    "get_config_manager",
    "load_config",
]
