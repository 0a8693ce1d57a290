"""Scoped mutation of the import search path and working directory."""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

log = logging.getLogger(__name__)


@contextmanager
def environment_guard(directory: Path) -> Iterator[None]:
    """Put directory first on sys.path and make it the working directory.

    Both are restored on exit, including when the body raises.
    """
    saved_path = list(sys.path)
    saved_cwd = Path.cwd()

    sys.path.insert(0, str(directory.resolve()))
    try:
        os.chdir(directory)
        log.debug("Entered %s", directory)
        yield
    finally:
        os.chdir(saved_cwd)
        sys.path[:] = saved_path
        log.debug("Restored working directory %s", saved_cwd)
