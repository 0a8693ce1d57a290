"""Python toolchain factory."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from unit_cover.toolchains.base import Toolchain
from unit_cover.toolchains.python.compiler import PythonCompiler
from unit_cover.toolchains.python.config import PythonToolchainConfig
from unit_cover.toolchains.python.coverage_engine import PythonCoverageEngine
from unit_cover.toolchains.python.runner import PythonTestRunner

log = logging.getLogger(__name__)


@contextmanager
def python_toolchain(config: PythonToolchainConfig) -> Iterator[Toolchain]:
    """Create the Python toolchain, stopping coverage measurement on exit."""
    engine = PythonCoverageEngine(branch=config.branch)
    try:
        yield Toolchain(
            compiler=PythonCompiler(),
            runner=PythonTestRunner(stream=config.stream),
            coverage=engine,
        )
    finally:
        engine.stop()
        log.debug("Python toolchain closed")
