"""Identifier forms derived from user-supplied names.

Every generator derives the names it substitutes into templates from the same
:func:`derive_name` call, so a model, its handler, its repository and its
use-case always agree on the Go type name and the route prefix.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .errors import InvalidInputError


class NameForm(BaseModel):
    """The canonical forms of a raw name.

    ``capitalized`` is used for Go type identifiers (``Order``), ``lower`` for
    file names, route prefixes and parameter names (``order``).
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    capitalized: str
    lower: str

    @property
    def route_prefix(self) -> str:
        """REST collection path for the entity, e.g. ``/orders``."""
        return f"/{self.lower}s"

    def as_context(self) -> dict[str, str]:
        """Placeholders every layer template expects."""
        return {"Name": self.capitalized, "LowerName": self.lower}


def capitalize_first(value: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    ``"defaultModule"`` -> ``"DefaultModule"``; unlike :meth:`str.capitalize`
    the remaining characters keep their case.
    """
    return value[:1].upper() + value[1:]


def derive_name(raw: str) -> NameForm:
    """Derive a :class:`NameForm` from *raw*.

    Pure and total: any string, including one that is not a valid Go
    identifier, yields a result.
    """
    return NameForm(raw=raw, capitalized=capitalize_first(raw), lower=raw.lower())


def require_name(raw: str, what: str = "name") -> NameForm:
    """Like :func:`derive_name` but reject empty or blank names."""
    if not raw or not raw.strip():
        raise InvalidInputError(f"{what} must not be empty")
    return derive_name(raw)
