"""Discovery of source files and compiled artifacts."""

import re
from collections.abc import Sequence
from pathlib import Path

from unit_cover.models.artifact import ArtifactRef


def find_files(directory: Path, pattern: str) -> Sequence[Path]:
    """Recursively find files whose base name matches a regular expression.

    A missing directory yields no files.
    """
    if not directory.is_dir():
        return []

    regex = re.compile(pattern)
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file() and regex.search(path.name)
    )


def scan_artifacts(output_dir: Path, suffix: str) -> Sequence[ArtifactRef]:
    """List the compiled artifacts directly inside the output directory."""
    return [
        ArtifactRef(path=path)
        for path in sorted(output_dir.glob(f"*{suffix}"))
        if path.is_file()
    ]


def suite_artifact(output_dir: Path, suite: str, suffix: str) -> ArtifactRef:
    """Return the artifact a suite name refers to."""
    return ArtifactRef(path=output_dir / f"{suite}{suffix}")


def unique(paths: Sequence[Path]) -> list[Path]:
    """Drop repeated paths, keeping first occurrences in order."""
    seen: set[Path] = set()
    result: list[Path] = []
    for path in paths:
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            result.append(path)
    return result
