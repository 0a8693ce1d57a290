"""Models for compiled artifacts."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class ArtifactRef:
    """A compiled artifact in the output directory."""

    path: Path

    @property
    def module(self) -> str:
        """Logical module name: the file's base name without extension."""
        return self.path.stem
