"""Tests for writing artifacts to disk (layerforge.scaffolder.materializer).

Covers:
- Directory creation (recursive, mode)
- Writing and silently overwriting files
- Failed writes leave no partial or temporary files
- Ordered multi-artifact writes
"""

from __future__ import annotations

import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from layerforge.scaffolder.errors import GenerationError, MaterializeError
from layerforge.scaffolder.materializer import FileMaterializer
from layerforge.scaffolder.models import FileArtifact


pytestmark = pytest.mark.unit


@pytest.fixture
def materializer() -> FileMaterializer:
    return FileMaterializer()


class TestEnsureDir:
    async def test_creates_nested(self, materializer, tmp_path: Path):
        path = await materializer.ensure_dir(tmp_path, "internal/delivery/http")
        assert path == tmp_path / "internal" / "delivery" / "http"
        assert path.is_dir()

    async def test_existing_is_fine(self, materializer, tmp_path: Path):
        await materializer.ensure_dir(tmp_path, "cmd")
        await materializer.ensure_dir(tmp_path, "cmd")
        assert (tmp_path / "cmd").is_dir()

    async def test_owner_can_traverse(self, materializer, tmp_path: Path):
        path = await materializer.ensure_dir(tmp_path, "pkg")
        mode = path.stat().st_mode
        assert mode & stat.S_IRWXU == stat.S_IRWXU

    async def test_file_in_the_way(self, materializer, tmp_path: Path):
        (tmp_path / "cmd").write_text("not a directory", encoding="utf-8")
        with pytest.raises(MaterializeError) as excinfo:
            await materializer.ensure_dir(tmp_path, "cmd/sub")
        assert excinfo.value.path == tmp_path / "cmd" / "sub"


class TestWrite:
    async def test_writes_content(self, materializer, tmp_path: Path):
        path = await materializer.write(tmp_path, "internal/entity", "order.go", "package entity\n")
        assert path == tmp_path / "internal" / "entity" / "order.go"
        assert path.read_text(encoding="utf-8") == "package entity\n"

    async def test_root_level_file(self, materializer, tmp_path: Path):
        path = await materializer.write(tmp_path, "", "go.mod", "module shop\n")
        assert path == tmp_path / "go.mod"

    async def test_overwrites_silently(self, materializer, tmp_path: Path):
        await materializer.write(tmp_path, "cmd", "main.go", "first")
        await materializer.write(tmp_path, "cmd", "main.go", "second")
        assert (tmp_path / "cmd" / "main.go").read_text(encoding="utf-8") == "second"
        assert sorted(p.name for p in (tmp_path / "cmd").iterdir()) == ["main.go"]

    async def test_file_mode(self, tmp_path: Path):
        path = await FileMaterializer(file_mode=0o640).write(tmp_path, "", "x.go", "x")
        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    async def test_directory_at_target(self, materializer, tmp_path: Path):
        (tmp_path / "cmd" / "main.go").mkdir(parents=True)
        with pytest.raises(MaterializeError):
            await materializer.write(tmp_path, "cmd", "main.go", "package main\n")
        assert [p.name for p in (tmp_path / "cmd").iterdir()] == ["main.go"]

    async def test_failed_write_keeps_previous_content(self, materializer, tmp_path: Path):
        await materializer.write(tmp_path, "cmd", "main.go", "original")
        with patch("layerforge.scaffolder.materializer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(MaterializeError, match="disk full"):
                await materializer.write(tmp_path, "cmd", "main.go", "replacement")
        assert (tmp_path / "cmd" / "main.go").read_text(encoding="utf-8") == "original"
        assert [p.name for p in (tmp_path / "cmd").iterdir()] == ["main.go"]


class TestWriteAll:
    async def test_writes_in_order(self, materializer, tmp_path: Path):
        artifacts = [
            FileArtifact(relative_dir="internal/entity", file_name="order.go", content="a"),
            FileArtifact(relative_dir="internal/usecase", file_name="order_usecase.go", content="b"),
        ]
        written = await materializer.write_all(tmp_path, artifacts)
        assert written == [
            tmp_path / "internal" / "entity" / "order.go",
            tmp_path / "internal" / "usecase" / "order_usecase.go",
        ]

    async def test_relative_path(self):
        assert FileArtifact(relative_dir="cmd", file_name="main.go", content="").relative_path == "cmd/main.go"
        assert FileArtifact(relative_dir="", file_name="go.mod", content="").relative_path == "go.mod"

    async def test_failure_names_artifact(self, materializer, tmp_path: Path):
        (tmp_path / "internal" / "usecase" / "order_usecase.go").mkdir(parents=True)
        artifacts = [
            FileArtifact(relative_dir="internal/entity", file_name="order.go", content="a"),
            FileArtifact(relative_dir="internal/usecase", file_name="order_usecase.go", content="b"),
            FileArtifact(relative_dir="cmd", file_name="main.go", content="c"),
        ]
        with pytest.raises(GenerationError) as excinfo:
            await materializer.write_all(tmp_path, artifacts)

        assert excinfo.value.stage == "internal/usecase/order_usecase.go"
        assert isinstance(excinfo.value.cause, MaterializeError)
        assert excinfo.value.__cause__ is excinfo.value.cause
        assert (tmp_path / "internal" / "entity" / "order.go").read_text(encoding="utf-8") == "a"
        assert not (tmp_path / "cmd").exists()
