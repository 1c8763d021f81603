"""layerforge configuration.

Centralised, typed configuration for the generators.  All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Connection pool defaults written into the generated ``db.go``."""

    max_idle_conns: int = Field(default=10, ge=1)
    max_open_conns: int = Field(default=100, ge=1)


class GeneratorConfig(BaseModel):
    """Global layerforge configuration.

    Instances are typically created once by the CLI entry point and then
    passed to every generator.  A default-constructed config reproduces the
    stock scaffold.
    """

    default_module: str = Field(
        default="defaultModule",
        min_length=1,
        description="Module generated into every new project",
    )
    file_extension: str = Field(default=".go")
    go_version: str = Field(default="1.21")
    app_port: int = Field(default=8080, ge=1, le=65535)
    dir_mode: int = Field(default=0o755, description="Mode for created directories")
    file_mode: int = Field(default=0o644, description="Mode for written files")
    template_dir: Path | None = Field(
        default=None,
        description="Alternative template tree; defaults to the bundled templates",
    )
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            LAYERFORGE_DEFAULT_MODULE, LAYERFORGE_GO_VERSION,
            LAYERFORGE_APP_PORT, LAYERFORGE_TEMPLATE_DIR,
            LAYERFORGE_DB_MAX_IDLE_CONNS, LAYERFORGE_DB_MAX_OPEN_CONNS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LAYERFORGE_DEFAULT_MODULE"):
            kwargs["default_module"] = os.environ["LAYERFORGE_DEFAULT_MODULE"]
        if os.environ.get("LAYERFORGE_GO_VERSION"):
            kwargs["go_version"] = os.environ["LAYERFORGE_GO_VERSION"]
        if os.environ.get("LAYERFORGE_APP_PORT"):
            kwargs["app_port"] = int(os.environ["LAYERFORGE_APP_PORT"])
        if os.environ.get("LAYERFORGE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["LAYERFORGE_TEMPLATE_DIR"])

        db_kwargs: dict[str, Any] = {}
        if os.environ.get("LAYERFORGE_DB_MAX_IDLE_CONNS"):
            db_kwargs["max_idle_conns"] = int(os.environ["LAYERFORGE_DB_MAX_IDLE_CONNS"])
        if os.environ.get("LAYERFORGE_DB_MAX_OPEN_CONNS"):
            db_kwargs["max_open_conns"] = int(os.environ["LAYERFORGE_DB_MAX_OPEN_CONNS"])

        return cls(database=DatabaseConfig(**db_kwargs), **kwargs)
