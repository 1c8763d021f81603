"""Value objects passed between the renderers and the materializer."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileArtifact(BaseModel):
    """A rendered file waiting to be written below a project root."""

    model_config = ConfigDict(frozen=True)

    relative_dir: str = Field(..., description="Directory relative to the project root")
    file_name: str
    content: str

    @property
    def relative_path(self) -> str:
        if not self.relative_dir:
            return self.file_name
        return f"{self.relative_dir}/{self.file_name}"


class ScaffoldResult(BaseModel):
    """What a generator wrote, in write order."""

    root: Path
    files: list[Path] = Field(default_factory=list)

    def relative_files(self) -> list[str]:
        """Written files relative to :attr:`root`, as POSIX strings."""
        return [path.relative_to(self.root).as_posix() for path in self.files]
