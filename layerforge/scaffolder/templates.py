"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``layerforge/scaffolder/templates/`` directory and renders them with a context
built from derived names.  Rendering is pure: it never touches the file system
beyond loading templates, and the same template and context always produce the
same text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from .errors import TemplateError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined placeholders are errors rather than empty
    strings, so a template that asks for something the context does not supply
    fails loudly instead of emitting broken Go code.

    Placeholders available to layer templates are ``Name`` (capitalized form),
    ``LowerName`` (lowercase form) and, for module artifacts, ``ImportPath``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"layers/handler.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            TemplateError: ``phase="parse"`` if the template is missing or not
                valid Jinja2, ``phase="execute"`` if rendering fails.
        """
        try:
            template = self.env.get_template(template_path)
        except (TemplateNotFound, TemplateSyntaxError) as exc:
            raise TemplateError(TemplateError.PARSE, template_path, exc) from exc
        return _execute(template, template_path, context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Useful for rendering small template fragments that are not stored as
        files.
        """
        try:
            template = self.env.from_string(template_string)
        except TemplateSyntaxError as exc:
            raise TemplateError(TemplateError.PARSE, "<string>", exc) from exc
        return _execute(template, "<string>", context)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _execute(template: Any, name: str, context: dict[str, Any]) -> str:
    try:
        return template.render(**context)
    except (TemplateNotFound, TemplateSyntaxError) as exc:
        # Raised lazily for imported macro files.
        raise TemplateError(TemplateError.PARSE, name, exc) from exc
    except Exception as exc:
        raise TemplateError(TemplateError.EXECUTE, name, exc) from exc
