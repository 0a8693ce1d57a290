"""Coverage instrumentation, analysis and reporting for a test build."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from unit_cover.models.artifact import ArtifactRef
from unit_cover.models.coverage import CoverageStat
from unit_cover.report import detail_file, write_index
from unit_cover.toolchains.base import CoverageEngine, CoverageError

log = logging.getLogger(__name__)


class CoverageInitError(Exception):
    """Raised when no artifact could be instrumented."""


@dataclass(frozen=True, kw_only=True)
class CoverageController:
    """Drives a coverage engine over the artifacts of one build."""

    engine: CoverageEngine
    output_dir: Path

    def init(self, artifacts: Sequence[ArtifactRef]) -> Sequence[str]:
        """Reset the engine and instrument every artifact.

        Partial failure is tolerated with a warning per artifact.

        Returns:
            Names of the modules instrumented successfully

        Raises:
            CoverageInitError: If no artifact could be instrumented

        """
        self.engine.reset()
        log.info("Cover compiling %s", self.output_dir.resolve())

        instrumented: list[str] = []
        failures: list[tuple[ArtifactRef, CoverageError]] = []
        for artifact in artifacts:
            try:
                instrumented.append(self.engine.instrument(artifact.path))
            except CoverageError as e:
                failures.append((artifact, e))

        if not instrumented:
            raise CoverageInitError(
                "Cover failed to compile any modules; aborting."
            )

        for artifact, error in failures:
            log.warning("Cover compilation warning for %s: %s", artifact.path, error)

        return instrumented

    def analyze(self, modules: Sequence[str]) -> Sequence[CoverageStat]:
        """Collect line counts per module, substituting zeros on failure."""
        stats: list[CoverageStat] = []
        for module in modules:
            try:
                covered, uncovered = self.engine.analyze(module)
            except CoverageError as e:
                log.error("Cover analyze failed for %s: %s", module, e)
                stats.append(CoverageStat(module=module, covered=0, uncovered=0))
                continue
            stats.append(
                CoverageStat(module=module, covered=covered, uncovered=uncovered)
            )
        return stats

    def write_report(self, stats: Sequence[CoverageStat]) -> Path:
        """Write the summary index and a detail page for every module."""
        ordered = sorted(stats, key=lambda stat: stat.module)
        index = write_index(self.output_dir, ordered)

        for stat in ordered:
            try:
                self.engine.render_detail(
                    stat.module, detail_file(self.output_dir, stat.module)
                )
            except CoverageError as e:
                log.warning("No coverage detail for %s: %s", stat.module, e)

        return index

    def perform(self, artifacts: Sequence[ArtifactRef]) -> Path | None:
        """Analyze the given artifacts and write the coverage report."""
        if not artifacts:
            return None

        stats = self.analyze([artifact.module for artifact in artifacts])
        index = self.write_report(stats)
        log.info("Cover analysis: %s", index.resolve())
        return index
