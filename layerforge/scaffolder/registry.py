"""Table-driven registry of the layer templates.

Both :class:`~layerforge.scaffolder.component.ComponentGenerator` and
:class:`~layerforge.scaffolder.module.ModuleGenerator` look templates up here,
so a stub controller and a full module handler come from the same template
file and cannot drift apart.  The capability interfaces that each layer
declares for its collaborator are built from a :class:`NameForm` instead of
being written out by hand in every template.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .errors import InvalidInputError
from .naming import NameForm


class ArtifactKind(str, Enum):
    """The four layers a module slice is made of."""

    MODEL = "model"
    CONTROLLER = "controller"
    REPOSITORY = "repository"
    USECASE = "usecase"


class ComponentKind(str, Enum):
    """Kinds accepted by ``layerforge generate``."""

    CONTROLLER = "controller"
    REPOSITORY = "repository"
    USECASE = "usecase"

    @classmethod
    def parse(cls, value: str) -> "ComponentKind":
        """Case-insensitive lookup; unknown kinds raise :class:`InvalidInputError`."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(k.value for k in cls)
            raise InvalidInputError(
                f"unknown component kind: {value!r} (expected one of: {allowed})"
            ) from None

    @property
    def artifact(self) -> ArtifactKind:
        return ArtifactKind(self.value)


class ArtifactTemplate(BaseModel):
    """Where a layer's template lives and where its output goes."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    template: str
    directory: str
    module_suffix: str | None

    def file_name(self, name: NameForm, suffix: str | None, extension: str) -> str:
        """``<lower>_<suffix><ext>``, or ``<lower><ext>`` when *suffix* is empty."""
        if suffix:
            return f"{name.lower}_{suffix}{extension}"
        return f"{name.lower}{extension}"


TEMPLATE_REGISTRY: dict[ArtifactKind, ArtifactTemplate] = {
    ArtifactKind.MODEL: ArtifactTemplate(
        kind=ArtifactKind.MODEL,
        template="layers/model.go.j2",
        directory="internal/entity",
        module_suffix=None,
    ),
    ArtifactKind.CONTROLLER: ArtifactTemplate(
        kind=ArtifactKind.CONTROLLER,
        template="layers/handler.go.j2",
        directory="internal/delivery/http",
        module_suffix="handler",
    ),
    ArtifactKind.REPOSITORY: ArtifactTemplate(
        kind=ArtifactKind.REPOSITORY,
        template="layers/repository.go.j2",
        directory="internal/repository",
        module_suffix="repository",
    ),
    ArtifactKind.USECASE: ArtifactTemplate(
        kind=ArtifactKind.USECASE,
        template="layers/usecase.go.j2",
        directory="internal/usecase",
        module_suffix="usecase",
    ),
}

# Write order for a module slice.
MODULE_ORDER: tuple[ArtifactKind, ...] = (
    ArtifactKind.MODEL,
    ArtifactKind.CONTROLLER,
    ArtifactKind.REPOSITORY,
    ArtifactKind.USECASE,
)


def lookup(kind: ArtifactKind) -> ArtifactTemplate:
    return TEMPLATE_REGISTRY[kind]


# ---------------------------------------------------------------------------
# Capability interfaces
# ---------------------------------------------------------------------------


class Capability(BaseModel):
    """One method of a generated Go interface."""

    model_config = ConfigDict(frozen=True)

    name: str
    params: str = ""
    returns: str = "error"

    @property
    def signature(self) -> str:
        return f"{self.name}({self.params}) {self.returns}"


def crud_capabilities(name: NameForm) -> list[Capability]:
    """The five CRUD operations every layer of a module exposes.

    The handler's use-case interface, the use-case's repository interface and
    the concrete method sets all follow this list.
    """
    entity = f"entity.{name.capitalized}"
    record = f"{name.lower} *{entity}"
    return [
        Capability(name="GetAll", returns=f"([]{entity}, error)"),
        Capability(name="GetByID", params="id uint", returns=f"(*{entity}, error)"),
        Capability(name="Create", params=record),
        Capability(name="Update", params=record),
        Capability(name="Delete", params="id uint"),
    ]


def layer_context(name: NameForm, *, crud: bool, import_path: str | None = None) -> dict:
    """Build the rendering context shared by every layer template.

    With ``crud=False`` the templates emit stubs whose capability interfaces
    are empty and marked for manual completion.
    """
    context: dict = {
        **name.as_context(),
        "crud": crud,
        "capabilities": crud_capabilities(name) if crud else [],
    }
    if import_path is not None:
        context["ImportPath"] = import_path
    return context
