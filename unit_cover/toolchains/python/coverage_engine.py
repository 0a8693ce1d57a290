"""Line coverage for compiled artifacts using coverage.py."""

import importlib.util
import logging
import marshal
from dataclasses import dataclass, field
from html import escape
from pathlib import Path

import coverage
from coverage.exceptions import CoverageException

from unit_cover.toolchains.base import CoverageEngine, CoverageError

log = logging.getLogger(__name__)

PYC_HEADER_SIZE = 16

DETAIL_HEADER = """<html><head><title>{module} coverage</title>
<style>
.hit {{ background: #dfd; }}
.miss {{ background: #fdd; }}
td.line {{ text-align: right; color: #888; padding-right: 1em; }}
pre {{ margin: 0; }}
</style></head>
<body><h1>{module}</h1>
<h3>{source}</h3>
<p>Covered: {covered} &nbsp; Not covered: {uncovered}</p>
<table>
"""

DETAIL_FOOTER = "</table></body></html>"


def source_of(artifact: Path) -> Path:
    """Recover the source file recorded in a compiled artifact."""
    try:
        data = artifact.read_bytes()
    except OSError as e:
        raise CoverageError(f"Cannot read {artifact}: {e}") from e

    if data[:4] != importlib.util.MAGIC_NUMBER:
        raise CoverageError(f"{artifact} was not compiled by this interpreter")

    try:
        code = marshal.loads(data[PYC_HEADER_SIZE:])
    except (ValueError, EOFError, TypeError) as e:
        raise CoverageError(f"Corrupt artifact {artifact}: {e}") from e

    source = Path(code.co_filename)
    if not source.is_file():
        raise CoverageError(f"Source {source} of {artifact} not found")
    return source


@dataclass(kw_only=True)
class PythonCoverageEngine(CoverageEngine):
    """Measures executed lines of instrumented modules.

    Measurement starts with the first successful instrumentation and stops
    at the first analysis.
    """

    branch: bool = False
    _coverage: coverage.Coverage | None = field(default=None, init=False, repr=False)
    _sources: dict[str, Path] = field(default_factory=dict, init=False, repr=False)
    _measuring: bool = field(default=False, init=False, repr=False)

    def reset(self) -> None:
        self.stop()
        self._coverage = coverage.Coverage(
            data_file=None, branch=self.branch, config_file=False
        )
        self._sources = {}

    def instrument(self, artifact: Path) -> str:
        if self._coverage is None:
            raise CoverageError("Coverage engine used before reset")

        source = source_of(artifact)
        module = artifact.stem
        self._sources[module] = source

        if not self._measuring:
            self._coverage.start()
            self._measuring = True
        return module

    def analyze(self, module: str) -> tuple[int, int]:
        statements, missing = self._analysis(module)
        return len(statements) - len(missing), len(missing)

    def render_detail(self, module: str, path: Path) -> Path:
        statements, missing = self._analysis(module)
        source = self._sources[module]

        rows: list[str] = []
        for number, text in enumerate(
            source.read_text(encoding="utf-8").splitlines(), start=1
        ):
            if number in missing:
                css = "miss"
            elif number in statements:
                css = "hit"
            else:
                css = "none"
            rows.append(
                f"<tr class='{css}'><td class='line'>{number}</td>"
                f"<td><pre>{escape(text)}</pre></td></tr>\n"
            )

        header = DETAIL_HEADER.format(
            module=escape(module),
            source=escape(str(source)),
            covered=len(statements) - len(missing),
            uncovered=len(missing),
        )
        path.write_text(header + "".join(rows) + DETAIL_FOOTER, encoding="utf-8")
        return path

    def stop(self) -> None:
        """Stop measuring, keeping the data collected so far."""
        if self._measuring and self._coverage is not None:
            self._coverage.stop()
        self._measuring = False

    def _analysis(self, module: str) -> tuple[set[int], set[int]]:
        """Return the executable and the missing line numbers of a module."""
        self.stop()
        if self._coverage is None or module not in self._sources:
            raise CoverageError(f"Module {module} is not instrumented")

        try:
            _, statements, _, missing, _ = self._coverage.analysis2(
                str(self._sources[module])
            )
        except (CoverageException, OSError) as e:
            raise CoverageError(str(e)) from e
        return set(statements), set(missing)
