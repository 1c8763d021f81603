"""Vertical-slice generation (``layerforge module <name>``).

A module is one entity carried through all four layers: the model in
``internal/entity``, its HTTP handler, its gorm repository and its use-case.
All four are rendered from the same :class:`NameForm`, so the handler's
``/<name>s`` routes, the use-case's repository interface and the repository's
methods all refer to the same ``entity.<Name>`` type.

Every artifact is rendered before the first byte is written.  A template error
therefore leaves the project untouched; an I/O error part-way through the
write phase leaves the files written before it in place.
"""

from __future__ import annotations

from pathlib import Path

from layerforge.config import GeneratorConfig

from .errors import GenerationError, InvalidInputError, TemplateError
from .materializer import FileMaterializer
from .models import FileArtifact, ScaffoldResult
from .naming import require_name
from .registry import MODULE_ORDER, layer_context, lookup
from .templates import TemplateRenderer


class ModuleGenerator:
    """Generates model, handler, repository and use-case for one entity."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
        materializer: FileMaterializer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.materializer = materializer or FileMaterializer(
            self.config.dir_mode, self.config.file_mode
        )

    def plan(self, name: str, import_path: str) -> list[FileArtifact]:
        """Render the four artifacts in write order without writing them.

        Raises:
            InvalidInputError: If *name* or *import_path* is empty.
            GenerationError: If a template fails; ``stage`` names the layer.
        """
        form = require_name(name, "module name")
        if not import_path or not import_path.strip():
            raise InvalidInputError("import path must not be empty")

        context = layer_context(form, crud=True, import_path=import_path)
        artifacts: list[FileArtifact] = []
        for kind in MODULE_ORDER:
            entry = lookup(kind)
            try:
                content = self.renderer.render(entry.template, context)
            except TemplateError as exc:
                raise GenerationError(kind.value, exc) from exc
            artifacts.append(
                FileArtifact(
                    relative_dir=entry.directory,
                    file_name=entry.file_name(
                        form, entry.module_suffix, self.config.file_extension
                    ),
                    content=content,
                )
            )
        return artifacts

    async def generate(
        self, name: str, import_path: str, root: str | Path
    ) -> ScaffoldResult:
        """Render and write the module slice below *root*."""
        artifacts = self.plan(name, import_path)
        files = await self.materializer.write_all(root, artifacts)
        return ScaffoldResult(root=Path(root), files=files)
