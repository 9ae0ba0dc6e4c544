"""
Core code generation components.

Provides the field-spec parser, type tables, naming helpers and the base
classes used by all target emitters.
"""

from .generator import (
    CodeGenerator,
    EmptyInputError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .spec import (
    FieldDescriptor,
    ModelSpec,
    build_model_spec,
    parse_field,
    parse_fields,
    parse_type_code,
)
from .types import Dialect, TypeMappingError, TypeTag, target_type
from .naming import (
    NamingCase,
    convert_case,
    normalize_name,
    singularize_table_name,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    to_table_name,
)
from .ddl import NoTableNameFound, extract_field_entries, extract_model_spec
from .source_edit import upsert_line_after_anchor
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "EmptyInputError",
    "GenerationResult",
    "generate_code",
    # Intermediate representation
    "FieldDescriptor",
    "ModelSpec",
    "build_model_spec",
    "parse_field",
    "parse_fields",
    "parse_type_code",
    # Type tables
    "Dialect",
    "TypeTag",
    "TypeMappingError",
    "target_type",
    # Naming utilities
    "NamingCase",
    "convert_case",
    "normalize_name",
    "singularize_table_name",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_table_name",
    # SQL extraction
    "NoTableNameFound",
    "extract_field_entries",
    "extract_model_spec",
    # Registry-file edits
    "upsert_line_after_anchor",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
