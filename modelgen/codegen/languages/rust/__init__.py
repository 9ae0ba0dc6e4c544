"""
Rust code generator module.

Generates Diesel model structs, DAOs and model-to-API converters.
"""

from .generator import RustGenerator, RustModelGenerator, create_rust_generator
from .dao import (
    RustDaoGenerator,
    create_dao_generator,
    module_declaration,
    reexport_declaration,
)
from .converter import (
    ApiConverterGenerator,
    MultipleStructDefinitions,
    NoStructDefinitionFound,
    StructDefinition,
    StructField,
    convert_model,
    convert_struct_source,
    create_converter_generator,
    extract_struct_definition,
)

__all__ = [
    "RustGenerator",
    "RustModelGenerator",
    "RustDaoGenerator",
    "ApiConverterGenerator",
    "MultipleStructDefinitions",
    "NoStructDefinitionFound",
    "StructDefinition",
    "StructField",
    "extract_struct_definition",
    "module_declaration",
    "reexport_declaration",
    # Factory functions
    "create_rust_generator",
    "create_dao_generator",
    "create_converter_generator",
    "convert_model",
    "convert_struct_source",
]
