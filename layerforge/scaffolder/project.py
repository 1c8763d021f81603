"""Main scaffolding orchestrator (``layerforge new <name> <database>``).

Takes a project name and a database kind and generates a complete Go project
directory with Clean Architecture layers, gorm persistence, gorilla/mux
routing, environment templates, a Makefile, a Dockerfile, and a default
module slice so the project builds and serves requests out of the box.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from layerforge.config import GeneratorConfig

from .errors import GenerationError, MaterializeError, TemplateError
from .materializer import FileMaterializer
from .models import FileArtifact, ScaffoldResult
from .module import ModuleGenerator
from .naming import derive_name, require_name
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Database profiles
# ---------------------------------------------------------------------------


class DatabaseKind(str, Enum):
    """Persistence technologies the generated ``db.go`` can target."""

    POSTGRES = "postgres"
    MYSQL = "mysql"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value.strip().lower() in _DATABASE_ALIASES

    @classmethod
    def resolve(cls, value: str) -> "DatabaseKind":
        """Map user input to a kind; anything unrecognised means Postgres."""
        return _DATABASE_ALIASES.get(value.strip().lower(), cls.POSTGRES)


_DATABASE_ALIASES: dict[str, DatabaseKind] = {
    "postgres": DatabaseKind.POSTGRES,
    "postgresql": DatabaseKind.POSTGRES,
    "pg": DatabaseKind.POSTGRES,
    "mysql": DatabaseKind.MYSQL,
}


class DatabaseProfile(BaseModel):
    """Driver details substituted into go.mod, db.go and the env files."""

    model_config = ConfigDict(frozen=True)

    kind: str
    label: str
    driver: str
    driver_module: str
    driver_version: str
    default_port: int
    default_user: str


DATABASE_PROFILES: dict[DatabaseKind, DatabaseProfile] = {
    DatabaseKind.POSTGRES: DatabaseProfile(
        kind="postgres",
        label="PostgreSQL",
        driver="postgres",
        driver_module="gorm.io/driver/postgres",
        driver_version="v1.5.6",
        default_port=5432,
        default_user="postgres",
    ),
    DatabaseKind.MYSQL: DatabaseProfile(
        kind="mysql",
        label="MySQL",
        driver="mysql",
        driver_module="gorm.io/driver/mysql",
        driver_version="v1.5.4",
        default_port=3306,
        default_user="root",
    ),
}


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "cmd",
    "internal/delivery/http",
    "internal/repository",
    "internal/usecase",
    "internal/entity",
    "pkg/database",
    "pkg/middleware",
)

# (template, output directory, output file), in write order
PROJECT_FILES: tuple[tuple[str, str, str], ...] = (
    ("project/go.mod.j2", "", "go.mod"),
    ("project/main.go.j2", "cmd", "main.go"),
    ("project/database/db.go.j2", "pkg/database", "db.go"),
    ("project/env.j2", "", ".env"),
    ("project/env.j2", "", ".env.example"),
    ("project/Makefile.j2", "", "Makefile"),
    ("project/gitignore.j2", "", ".gitignore"),
    ("project/README.md.j2", "", "README.md"),
    ("project/Dockerfile.j2", "", "Dockerfile"),
)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a project name and database kind, generates a directory tree
    containing:
    - ``cmd/main.go`` wiring the router, database and default module
    - ``pkg/database/db.go`` for the chosen driver
    - ``go.mod``, ``.env``/``.env.example``, Makefile, .gitignore, README, Dockerfile
    - a model/handler/repository/use-case slice for the default module
    """

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
        self.module_gen = ModuleGenerator(self.config, self.renderer, self.materializer)

    # -- Public API --------------------------------------------------------

    async def generate(
        self, name: str, database_kind: str, root: str | Path
    ) -> ScaffoldResult:
        """Generate the complete project structure.

        Args:
            name: Project name; also used as the Go module path.
            database_kind: ``"mysql"`` or ``"postgres"``; other values fall
                back to Postgres.
            root: The project directory to create.

        Returns:
            The project root and every written file, in write order.
        """
        project_files = self.plan(name, database_kind)
        module_files = self.module_gen.plan(self.config.default_module, name)

        project_root = Path(root)

        # 1. Create the skeleton directory structure
        await self._create_directory_structure(project_root)

        # 2. Write build, config and auxiliary files
        written = await self.materializer.write_all(project_root, project_files)

        # 3. Seed the default module
        written.extend(await self.materializer.write_all(project_root, module_files))

        return ScaffoldResult(root=project_root, files=written)

    def plan(self, name: str, database_kind: str) -> list[FileArtifact]:
        """Render every project-level file without writing anything."""
        context = self._build_context(name, database_kind)
        artifacts: list[FileArtifact] = []
        for template_name, directory, file_name in PROJECT_FILES:
            try:
                content = self.renderer.render(template_name, context)
            except TemplateError as exc:
                stage = f"{directory}/{file_name}" if directory else file_name
                raise GenerationError(stage, exc) from exc
            artifacts.append(
                FileArtifact(relative_dir=directory, file_name=file_name, content=content)
            )
        return artifacts

    # -- Context building --------------------------------------------------

    def _build_context(self, name: str, database_kind: str) -> dict[str, Any]:
        """Build the Jinja2 template context for the project-level files."""
        project = require_name(name, "project name")
        database = DATABASE_PROFILES[DatabaseKind.resolve(database_kind)]
        return {
            **project.as_context(),
            "ProjectName": project.raw,
            "ImportPath": project.raw,
            "GoVersion": self.config.go_version,
            "AppPort": self.config.app_port,
            "Database": database,
            "MaxIdleConns": self.config.database.max_idle_conns,
            "MaxOpenConns": self.config.database.max_open_conns,
            "Module": derive_name(self.config.default_module),
        }

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the mandatory project directory tree."""
        for directory in ("", *PROJECT_DIRECTORIES):
            try:
                await self.materializer.ensure_dir(root, directory)
            except MaterializeError as exc:
                raise GenerationError(f"directory {directory or root}", exc) from exc
