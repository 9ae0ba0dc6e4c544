"""
Target-specific code generators.

This module contains generators for the supported target languages.
"""

from .dart import DartModelGenerator, create_dart_generator
from .rust import (
    ApiConverterGenerator,
    RustDaoGenerator,
    RustModelGenerator,
    create_converter_generator,
    create_dao_generator,
    create_rust_generator,
)

__all__ = [
    "DartModelGenerator",
    "RustModelGenerator",
    "RustDaoGenerator",
    "ApiConverterGenerator",
    "create_dart_generator",
    "create_rust_generator",
    "create_dao_generator",
    "create_converter_generator",
]
