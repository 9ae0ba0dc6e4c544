"""
Generator registry system for managing available code generators.

Provides registration and instantiation of target generators.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator, GeneratorError

logger = get_logger(__name__)


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a target.

        Args:
            target: Primary target name (e.g., 'dart', 'rust-dao')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this target
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        target_key = target.lower()

        if target_key in self._generators and not replace:
            logger.debug("Target %s already registered, skipping", target_key)
            return

        self._generators[target_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == target_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary target"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = target_key

    def unregister(self, target: str):
        """Unregister a generator and its aliases."""
        target_key = target.lower()
        self._generators.pop(target_key, None)

        for alias in [a for a, t in self._aliases.items() if t == target_key]:
            del self._aliases[alias]

    def resolve(self, target: str) -> str:
        """
        Resolve a target name or alias to its primary key.

        Raises:
            RegistryError: If the target is unknown
        """
        target_key = target.lower()

        if target_key in self._generators:
            return target_key

        if target_key in self._aliases:
            return self._aliases[target_key]

        raise RegistryError(
            f"No generator registered for target: {target}. "
            f"Available: {', '.join(self.list_targets())}"
        )

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        """Get generator class for a target name or alias."""
        return self._generators[self.resolve(target)]

    def create_generator(
        self,
        target: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for a target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, dict, or JSON file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the target is unknown or the config is invalid
        """
        target_key = self.resolve(target)
        generator_class = self._generators[target_key]

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(target_key, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(target_key, custom_config=config)
        elif config is None:
            final_config = load_config(target_key)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators.keys())

    def get_aliases_for_target(self, target: str) -> List[str]:
        """Get all aliases for a specific target."""
        target_key = target.lower()
        return sorted(a for a, t in self._aliases.items() if t == target_key)

    def is_supported(self, target: str) -> bool:
        """Check if a target name or alias is registered."""
        target_key = target.lower()
        return target_key in self._generators or target_key in self._aliases

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        target_key = self.resolve(target)
        generator = self.create_generator(target_key)

        return {
            "name": generator.target_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_target(target_key),
            "module": type(generator).__module__,
            "description": (type(generator).__doc__ or "").strip(),
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.dart import DartModelGenerator
    from .languages.rust import (
        ApiConverterGenerator,
        RustDaoGenerator,
        RustModelGenerator,
    )

    registry.register("dart", DartModelGenerator, aliases=["flutter"])
    registry.register("rust", RustModelGenerator, aliases=["rs", "server"])
    registry.register("rust-dao", RustDaoGenerator, aliases=["dao"])
    registry.register("api-converter", ApiConverterGenerator, aliases=["to-api"])


# Public API functions using the global registry


def get_generator(
    target: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    """List all supported targets from global registry."""
    return get_registry().list_targets()


def is_target_supported(target: str) -> bool:
    """Check if target is supported by global registry."""
    return get_registry().is_supported(target)


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)


def list_all_target_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported targets."""
    return {target: get_target_info(target) for target in list_supported_targets()}
