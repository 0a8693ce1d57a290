"""Abstract interfaces for the compiler, test runner and coverage engine."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from unit_cover.models.config import Option
from unit_cover.models.result import RunResult

log = logging.getLogger(__name__)


class CompileError(Exception):
    """Raised when sources fail to compile."""


class CoverageError(Exception):
    """Raised when the coverage engine cannot instrument or analyze a module."""


class Compiler(ABC):
    """Compiles source files into artifacts in an output directory."""

    #: Regular expression matched against source file base names.
    source_pattern: ClassVar[str]
    #: Suffix of the artifacts written to the output directory.
    artifact_suffix: ClassVar[str]

    @abstractmethod
    def compile(
        self,
        sources: Sequence[Path],
        output_dir: Path,
        options: Sequence[Option],
    ) -> Sequence[Path]:
        """Compile sources into output_dir.

        Returns:
            Paths of the artifacts written

        Raises:
            CompileError: If any source fails to compile

        """


class TestRunner(ABC):
    """Runs unit tests for a module list or a single named suite."""

    __test__ = False

    @abstractmethod
    def run(self, target: Sequence[str] | str, options: Sequence[Option]) -> bool:
        """Run tests and return whether they all passed.

        May raise if the test framework itself breaks.
        """

    def execute(
        self, target: Sequence[str] | str, options: Sequence[Option]
    ) -> RunResult:
        """Run tests, converting framework exceptions into an error result."""
        try:
            passed = self.run(target, options)
        except Exception as e:
            log.error("Test runner raised: %s", e, exc_info=e)
            return RunResult(status="error", message=str(e))

        if passed:
            return RunResult(status="success")
        return RunResult(status="failure")


class CoverageEngine(ABC):
    """Line-coverage measurement for compiled artifacts."""

    @abstractmethod
    def reset(self) -> None:
        """Discard any previously collected coverage data."""

    @abstractmethod
    def instrument(self, artifact: Path) -> str:
        """Prepare an artifact for measurement and return its module name.

        Raises:
            CoverageError: If the artifact cannot be instrumented

        """

    @abstractmethod
    def analyze(self, module: str) -> tuple[int, int]:
        """Return ``(covered, uncovered)`` line counts for a module.

        Raises:
            CoverageError: If the module cannot be analyzed

        """

    @abstractmethod
    def render_detail(self, module: str, path: Path) -> Path:
        """Write a per-module annotated source report to path."""


@dataclass(frozen=True, kw_only=True)
class Toolchain:
    """The external collaborators used for one build."""

    compiler: Compiler
    runner: TestRunner
    coverage: CoverageEngine
