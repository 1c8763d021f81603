"""Single-component generation (``layerforge generate <kind> <name>``).

Writes one stub file for a controller, repository or use-case into an existing
project.  The stubs declare the capability interface their layer expects from
its collaborator, left empty for the developer to fill in.
"""

from __future__ import annotations

from pathlib import Path

from layerforge.config import GeneratorConfig

from .materializer import FileMaterializer
from .models import FileArtifact, ScaffoldResult
from .naming import require_name
from .registry import ComponentKind, layer_context, lookup
from .templates import TemplateRenderer


class ComponentGenerator:
    """Generates one delivery, repository or use-case stub."""

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

    def build(self, kind: str | ComponentKind, name: str) -> FileArtifact:
        """Render the component without writing it.

        Raises:
            InvalidInputError: For an unknown *kind* or an empty *name*.
            TemplateError: If the template cannot be rendered.
        """
        component = kind if isinstance(kind, ComponentKind) else ComponentKind.parse(kind)
        form = require_name(name, "component name")
        entry = lookup(component.artifact)
        content = self.renderer.render(entry.template, layer_context(form, crud=False))
        return FileArtifact(
            relative_dir=entry.directory,
            file_name=entry.file_name(form, component.value, self.config.file_extension),
            content=content,
        )

    async def generate(
        self, kind: str | ComponentKind, name: str, root: str | Path
    ) -> ScaffoldResult:
        """Render and write the component below *root*.

        The file lands at ``<layer dir>/<lower(name)>_<kind>.go``; an existing
        file at that path is replaced.
        """
        artifact = self.build(kind, name)
        path = await self.materializer.write_artifact(root, artifact)
        return ScaffoldResult(root=Path(root), files=[path])
