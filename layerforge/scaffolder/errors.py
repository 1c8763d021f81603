"""Exceptions raised by the scaffolding engine.

Every failure the engine can produce derives from :class:`ScaffoldError` so the
CLI can report it with a single ``except`` clause.  The concrete classes map to
the three failure categories of a generation run: bad input, template problems,
and file-system problems.  :class:`GenerationError` adds the stage (which file or
which artifact) a lower-level error happened in.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised while generating a scaffold."""


class InvalidInputError(ScaffoldError):
    """Raised when a name, component kind, or request is not acceptable."""


class TemplateError(ScaffoldError):
    """Raised when a template fails to parse or fails to render.

    Attributes:
        phase: ``"parse"`` when the template body (or file) could not be
            compiled, ``"execute"`` when rendering against the context failed.
        template: Template path or ``"<string>"`` for inline templates.
        cause: The underlying Jinja2 exception.
    """

    PARSE = "parse"
    EXECUTE = "execute"

    def __init__(self, phase: str, template: str, cause: Exception) -> None:
        self.phase = phase
        self.template = template
        self.cause = cause
        super().__init__(f"template {template} failed to {phase}: {cause}")


class MaterializeError(ScaffoldError):
    """Raised when a directory or file cannot be created or written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {path}: {cause}")


class GenerationError(ScaffoldError):
    """Wraps a failure with the generation stage it happened in."""

    def __init__(self, stage: str, cause: Exception) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"failed to generate {stage}: {cause}")
