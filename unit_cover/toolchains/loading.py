"""Discovery of toolchain plugins registered as entry points."""

from importlib.metadata import entry_points
from typing import Any

from unit_cover.toolchains.manifest import ToolchainManifest

ENTRY_POINT_GROUP = "unit_cover.toolchains"


class ToolchainNotFoundError(Exception):
    """Raised when no toolchain is registered under a key."""


class InvalidToolchainError(Exception):
    """Raised when an entry point does not resolve to a ToolchainManifest."""


def available_toolchains() -> list[str]:
    """List the registered toolchain keys."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_toolchain_manifest(key: str) -> ToolchainManifest[Any]:
    """Resolve the manifest registered under a toolchain key.

    Args:
        key: The toolchain key as registered in pyproject.toml (e.g., "python")

    Raises:
        ToolchainNotFoundError: If no toolchain with the given key is found
        InvalidToolchainError: If the entry point loads something else

    """
    matches = list(entry_points(group=ENTRY_POINT_GROUP, name=key))
    if not matches:
        raise ToolchainNotFoundError(
            f"Toolchain '{key}' not found. "
            f"Available toolchains: {available_toolchains()}"
        )

    entry = matches[0]
    manifest = entry.load()
    if not isinstance(manifest, ToolchainManifest):
        raise InvalidToolchainError(
            f"Entry point {entry.value} for toolchain '{key}' "
            "is not a ToolchainManifest"
        )
    return manifest
