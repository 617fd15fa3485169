"""
Jinja2 rendering of the per-language source skeletons.

Each language ships its templates in a directory; the engine renders
them with the naming and doc-comment filters generated code needs.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .naming import upper_first


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Renders templates from one directory with code generation filters."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        search_path = [str(template_dir)] if template_dir else []

        # Generated source is not markup; escaping would mangle generics.
        self._env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self._env.filters["upper_first"] = upper_first
        self._env.filters["doc_comment"] = doc_comment

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template is missing or uses an undefined name
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


def doc_comment(value: Optional[str]) -> str:
    """Render a doc comment; single-line docs stay on one line."""
    if not value:
        return ""
    lines = str(value).split("\n")
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    return f"/**\n{body}\n */"


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine reading from ``template_dir``."""
    return TemplateEngine(template_dir)
