"""Test orchestrator sequencing compilation, test execution and coverage."""

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from unit_cover.artifacts import find_files, scan_artifacts, suite_artifact, unique
from unit_cover.coverage_controller import CoverageController
from unit_cover.environment import environment_guard
from unit_cover.models.artifact import ArtifactRef
from unit_cover.models.config import BuildContext, Option, ProjectConfig
from unit_cover.models.result import RunResult
from unit_cover.options import (
    append_values,
    build_effective_options,
    build_runner_options,
)
from unit_cover.toolchains.base import Toolchain

log = logging.getLogger(__name__)

EUNIT_DIR = ".eunit"
SOURCE_DIR = "src"
TEST_DIR = "test"


def clean_output(output_dir: Path) -> None:
    """Remove a build output directory if it exists."""
    if output_dir.exists():
        log.info("Removing %s", output_dir)
        shutil.rmtree(output_dir)


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Builds a project for testing, runs its tests and reports coverage."""

    __test__ = False

    toolchain: Toolchain
    context: BuildContext

    @property
    def output_dir(self) -> Path:
        return self.context.output_dir

    @property
    def coverage(self) -> CoverageController:
        return CoverageController(
            engine=self.toolchain.coverage, output_dir=self.output_dir
        )

    def run_tests(self, config: ProjectConfig) -> RunResult:
        """Compile, test and optionally measure coverage for the project.

        Compile errors and a coverage setup that instruments nothing abort
        the run. Failures after the tests ran are logged and never change
        the returned result.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        compiler = self.toolchain.compiler
        test_sources = find_files(
            self.context.base_dir / TEST_DIR, compiler.source_pattern
        )
        options = build_effective_options(
            config, property_testing=self.context.property_testing
        )
        sources = unique([*self._project_sources(options), *test_sources])
        log.info(
            "Compiling %d source(s) (%d test) into %s",
            len(sources),
            len(test_sources),
            self.output_dir,
        )
        compiler.compile(sources, self.output_dir, options)

        artifacts = scan_artifacts(self.output_dir, compiler.artifact_suffix)
        modules = [artifact.module for artifact in artifacts]

        if config.cover_enabled:
            self.coverage.init(artifacts)

        runner_options = build_runner_options(
            config, verbose=self.context.options.verbose
        )
        result = self._perform_tests(modules, runner_options)
        log.info("Test run finished: status=%s", result.status)

        if config.cover_enabled:
            self._perform_cover(artifacts)

        return result

    def clean(self) -> None:
        """Remove the output directory and everything in it."""
        clean_output(self.output_dir)

    def _project_sources(self, options: Sequence[Option]) -> Sequence[Path]:
        """Find project sources in src/ and any extra src_dirs."""
        source_dirs = [SOURCE_DIR, *append_values(options, "src_dirs")]
        sources: list[Path] = []
        for source_dir in source_dirs:
            sources.extend(
                find_files(
                    self.context.base_dir / source_dir,
                    self.toolchain.compiler.source_pattern,
                )
            )
        return sources

    def _perform_tests(
        self, modules: Sequence[str], runner_options: Sequence[Option]
    ) -> RunResult:
        """Run the suite, or every module, with the output dir on the path."""
        suite = self.context.options.suite
        target: Sequence[str] | str = suite if suite is not None else modules

        with environment_guard(self.output_dir):
            return self.toolchain.runner.execute(target, runner_options)

    def _perform_cover(self, artifacts: Sequence[ArtifactRef]) -> None:
        suite = self.context.options.suite
        if suite is not None:
            artifacts = [
                suite_artifact(
                    self.output_dir, suite, self.toolchain.compiler.artifact_suffix
                )
            ]

        try:
            self.coverage.perform(artifacts)
        except Exception as e:
            log.exception("Cover analysis failed: %s", e)
