"""
Base generator interface for all code generation targets.

Defines the contract that all emitters must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .naming import to_pascal_case, to_snake_case
from .spec import ModelSpec
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class EmptyInputError(GeneratorError):
    """Raised when the model name or field spec is empty."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Indent unit the templates are written in
    template_indent = 4

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Return the registry key of this target (e.g., 'dart', 'rust-dao')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.dart')."""
        pass

    @property
    def syntax_name(self) -> str:
        """Lexer name used when the CLI highlights generated code."""
        return self.file_extension.lstrip(".")

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine over this generator's template directory, built on first use."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_template_directory())
        return self._template_engine

    @abstractmethod
    def generate(self, spec: ModelSpec) -> str:
        """
        Generate code for a model.

        Args:
            spec: Parsed model

        Returns:
            Generated code as a string
        """
        pass

    def validate(self, spec: ModelSpec) -> List[str]:
        """
        Check a model for issues worth reporting.

        Args:
            spec: Model to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for descriptor in spec.unrecognized_fields():
            warnings.append(
                f"Unknown type code '{descriptor.type_code}' for "
                f"{spec.name}.{descriptor.raw_name}, using text"
            )

        for descriptor in spec.fields:
            if not descriptor.raw_name:
                warnings.append(f"Field with empty name in {spec.name}")

        for name in spec.duplicate_names():
            warnings.append(f"Field '{name}' is declared more than once")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Re-indents from the template unit to ``config.indent_size``, strips
        trailing whitespace, collapses runs of blank lines and trims
        leading/trailing blank lines.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = self._reindent(line.rstrip())
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n")

    def _reindent(self, line: str) -> str:
        indent_size = self.config.indent_size
        # Invalid sizes are reported by validate_config and leave lines as rendered
        if not isinstance(indent_size, int) or indent_size < 1:
            return line
        if indent_size == self.template_indent:
            return line

        body = line.lstrip(" ")
        leading = len(line) - len(body)
        levels, remainder = divmod(leading, self.template_indent)
        return " " * (levels * indent_size + remainder) + body

    def default_file_name(self, spec: ModelSpec) -> str:
        """File name a workspace would write this model to."""
        return f"{to_snake_case(spec.name)}{self.file_extension}"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="", warnings=[message])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, spec: ModelSpec) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        spec: Model to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        if not to_pascal_case(spec.name):
            raise EmptyInputError("No name given")

        warnings = generator.validate(spec)
        code = generator.format_code(generator.generate(spec))

        metadata = {
            "target": generator.target_name,
            "file_extension": generator.file_extension,
            "syntax": generator.syntax_name,
            "model": spec.name,
            "field_count": len(spec),
            "unrecognized_types": len(spec.unrecognized_fields()),
        }

        for warning in warnings:
            logger.info("%s", warning)

        return GenerationResult(code, warnings, metadata)

    except GeneratorError as e:
        logger.warning("%s", e)
        return GenerationResult.error(str(e), exception=e)
    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
