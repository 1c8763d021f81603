"""Writing rendered artifacts to disk.

Directories are created before anything is written into them, and every file
is written to a temporary sibling first and then moved over the target with
:func:`os.replace`.  A failed write therefore never leaves a truncated file
behind; the previous content (or no file at all) stays in place.

Existing files are overwritten silently.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .errors import GenerationError, MaterializeError
from .models import FileArtifact


class FileMaterializer:
    """Creates directories and writes files below a project root."""

    def __init__(self, dir_mode: int = 0o755, file_mode: int = 0o644) -> None:
        self.dir_mode = dir_mode
        self.file_mode = file_mode

    async def ensure_dir(self, root: str | Path, relative_dir: str = "") -> Path:
        """Create ``root/relative_dir`` and any missing parents."""
        target = Path(root) / relative_dir if relative_dir else Path(root)
        try:
            await asyncio.to_thread(_make_dirs, target, self.dir_mode)
        except OSError as exc:
            raise MaterializeError(target, exc) from exc
        return target

    async def write(
        self,
        root: str | Path,
        relative_dir: str,
        file_name: str,
        content: str,
    ) -> Path:
        """Write *content* to ``root/relative_dir/file_name``.

        Returns:
            The path of the written file.

        Raises:
            MaterializeError: If the directory or the file cannot be written.
        """
        directory = await self.ensure_dir(root, relative_dir)
        target = directory / file_name
        try:
            await asyncio.to_thread(_write_file, target, content, self.file_mode)
        except OSError as exc:
            raise MaterializeError(target, exc) from exc
        return target

    async def write_artifact(self, root: str | Path, artifact: FileArtifact) -> Path:
        return await self.write(
            root, artifact.relative_dir, artifact.file_name, artifact.content
        )

    async def write_all(
        self, root: str | Path, artifacts: Iterable[FileArtifact]
    ) -> list[Path]:
        """Write *artifacts* one after another, in the given order.

        Stops at the first failure; files written before it stay on disk.

        Raises:
            GenerationError: Wrapping the :class:`MaterializeError`, with the
                failing artifact's relative path as ``stage``.
        """
        written: list[Path] = []
        for artifact in artifacts:
            try:
                written.append(await self.write_artifact(root, artifact))
            except MaterializeError as exc:
                raise GenerationError(artifact.relative_path, exc) from exc
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dirs(path: Path, mode: int) -> None:
    path.mkdir(mode=mode, parents=True, exist_ok=True)


def _write_file(path: Path, content: str, mode: int) -> None:
    """Synchronous helper: write via a temporary file, then replace."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
