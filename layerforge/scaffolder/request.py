"""Generation requests and their dispatch to the generators."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from layerforge.config import GeneratorConfig

from .component import ComponentGenerator
from .errors import InvalidInputError
from .models import ScaffoldResult
from .module import ModuleGenerator
from .project import ProjectGenerator


class RequestKind(str, Enum):
    PROJECT = "project"
    MODULE = "module"
    COMPONENT = "component"


class GenerationRequest(BaseModel):
    """Everything one generation run needs.

    ``target_path`` is the directory the command runs in: the parent of the
    new project for ``PROJECT`` requests, the project root otherwise.
    """

    model_config = ConfigDict(frozen=True)

    kind: RequestKind
    name: str
    target_path: Path = Field(default_factory=Path.cwd)
    component_kind: str | None = None
    database_kind: str | None = None
    import_path: str | None = None

    @model_validator(mode="after")
    def _check_required(self) -> "GenerationRequest":
        if self.kind is RequestKind.COMPONENT and not self.component_kind:
            raise ValueError("component requests need a component_kind")
        if self.kind is RequestKind.PROJECT and not self.database_kind:
            raise ValueError("project requests need a database_kind")
        return self

    @property
    def resolved_import_path(self) -> str:
        """Import path for module code: explicit, or the target directory's name."""
        return self.import_path or self.target_path.resolve().name

    @property
    def output_root(self) -> Path:
        if self.kind is RequestKind.PROJECT:
            return self.target_path / self.name
        return self.target_path


async def execute(
    request: GenerationRequest, config: GeneratorConfig | None = None
) -> ScaffoldResult:
    """Run the generator that matches ``request.kind``."""
    config = config or GeneratorConfig()
    if request.kind is RequestKind.PROJECT:
        return await ProjectGenerator(config).generate(
            request.name, request.database_kind or "", request.output_root
        )
    if request.kind is RequestKind.MODULE:
        return await ModuleGenerator(config).generate(
            request.name, request.resolved_import_path, request.output_root
        )
    if request.kind is RequestKind.COMPONENT:
        return await ComponentGenerator(config).generate(
            request.component_kind or "", request.name, request.output_root
        )
    raise InvalidInputError(f"unsupported request kind: {request.kind}")
