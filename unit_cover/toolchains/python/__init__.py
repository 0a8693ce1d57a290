"""Python toolchain module."""

from unit_cover.toolchains.python.config import PythonToolchainConfig
from unit_cover.toolchains.python.manifest import python_manifest
from unit_cover.toolchains.python.toolchain import python_toolchain

__all__ = ["PythonToolchainConfig", "python_manifest", "python_toolchain"]
