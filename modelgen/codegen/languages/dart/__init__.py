"""
Dart code generator module.

Generates immutable Flutter model classes from field specs.
"""

from .generator import DartModelGenerator, create_dart_generator

__all__ = ["DartModelGenerator", "create_dart_generator"]
