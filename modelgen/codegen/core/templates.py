"""
Jinja2 environment shared by the emitters.

Templates live next to each language package; generated sources are not
markup, so nothing is ever escaped and undefined variables fail loudly.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import jinja2
from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def comment_lines(value: str, marker: str = "//") -> str:
    """Prefix every line of ``value`` with a comment marker."""
    return "\n".join(f"{marker} {line}".rstrip() for line in str(value).split("\n"))


class TemplateEngine:
    """Loads and renders the templates of one emitter."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing ``*.j2`` files; without one
                the engine starts empty
        """
        self.template_dir = template_dir

        if template_dir and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._env.filters["comment"] = comment_lines

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template is missing, malformed or refers
                to a variable the context lacks
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            logger.error("Rendering %s failed: %s", template_name, e)
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        """Check whether the loader can find a template."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
