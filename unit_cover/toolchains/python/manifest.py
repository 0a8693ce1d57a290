"""Python toolchain manifest."""

from unit_cover.toolchains.manifest import ToolchainManifest
from unit_cover.toolchains.python.config import PythonToolchainConfig
from unit_cover.toolchains.python.toolchain import python_toolchain

python_manifest = ToolchainManifest(
    config_cls=PythonToolchainConfig,
    toolchain_factory=python_toolchain,
)
