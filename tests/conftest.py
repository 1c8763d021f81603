"""Shared pytest fixtures for the layerforge test suite.

Provides reusable fixtures for:
- Temporary project directories
- Generator configuration
- Renderer and generator instances wired to the bundled templates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from layerforge.config import GeneratorConfig
from layerforge.scaffolder import (
    ComponentGenerator,
    ModuleGenerator,
    ProjectGenerator,
    TemplateRenderer,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory standing in for an existing project (auto-cleanup)."""
    project_dir = tmp_path / "shop"
    project_dir.mkdir()
    yield project_dir


def _list_files(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@pytest.fixture
def list_files():
    """Every file below a root, as sorted POSIX paths relative to it."""
    return _list_files


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def component_gen(config: GeneratorConfig) -> ComponentGenerator:
    return ComponentGenerator(config)


@pytest.fixture
def module_gen(config: GeneratorConfig) -> ModuleGenerator:
    return ModuleGenerator(config)


@pytest.fixture
def project_gen(config: GeneratorConfig) -> ProjectGenerator:
    return ProjectGenerator(config)
