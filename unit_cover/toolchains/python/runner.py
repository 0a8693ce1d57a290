"""In-process unittest runner."""

import importlib.util
import logging
import sys
import unittest
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from unit_cover.models.config import Option
from unit_cover.options import has_flag
from unit_cover.toolchains.base import TestRunner

log = logging.getLogger(__name__)

SUITE_TESTS_SUFFIX = "_tests"


@dataclass(frozen=True, kw_only=True)
class PythonTestRunner(TestRunner):
    """Loads test modules by name and runs them with unittest."""

    stream: Literal["stdout", "stderr"] = "stderr"

    def run(self, target: Sequence[str] | str, options: Sequence[Option]) -> bool:
        """Run the tests of a module list, or of a suite and its _tests module."""
        # Drop modules left over from a previous build so the fresh artifacts load
        for name in self.candidate_names(target):
            sys.modules.pop(name, None)

        names = self.resolve_names(target)
        log.debug("Loading tests from %s", ", ".join(names) or "no modules")

        suite = unittest.defaultTestLoader.loadTestsFromNames(names)
        runner = unittest.TextTestRunner(
            stream=getattr(sys, self.stream),
            verbosity=2 if has_flag(options, "verbose") else 1,
            failfast=has_flag(options, "failfast"),
            buffer=has_flag(options, "buffer"),
        )
        result = runner.run(suite)
        return result.wasSuccessful()

    @staticmethod
    def candidate_names(target: Sequence[str] | str) -> list[str]:
        if isinstance(target, str):
            return [target, f"{target}{SUITE_TESTS_SUFFIX}"]
        return list(target)

    @staticmethod
    def resolve_names(target: Sequence[str] | str) -> list[str]:
        """Expand a suite name to the suite plus its ``_tests`` companion."""
        if not isinstance(target, str):
            return list(target)

        companion = f"{target}{SUITE_TESTS_SUFFIX}"
        if (
            target.endswith(SUITE_TESTS_SUFFIX)
            or importlib.util.find_spec(companion) is None
        ):
            return [target]
        return [target, companion]
