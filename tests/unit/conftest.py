"""Fixtures for unit tests."""

from collections.abc import Sequence
from pathlib import Path
from unittest.mock import Mock

import pytest

from unit_cover.models.config import BuildContext, GlobalOptions, Option
from unit_cover.models.result import RunResult
from unit_cover.toolchains.base import Compiler, CoverageEngine, TestRunner, Toolchain


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project with two source modules and one test module."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "alpha.py").write_text("A = 1\n")
    (tmp_path / "src" / "beta.py").write_text("B = 2\n")
    (tmp_path / "test").mkdir()
    (tmp_path / "test" / "alpha_tests.py").write_text("import alpha\n")
    return tmp_path


@pytest.fixture
def compiler_mock() -> Mock:
    """Create mock compiler that writes an empty artifact per source."""
    compiler = Mock(spec=Compiler)
    compiler.source_pattern = r"^.+\.py$"
    compiler.artifact_suffix = ".pyc"

    def _compile(
        sources: Sequence[Path], output_dir: Path, options: Sequence[Option]
    ) -> Sequence[Path]:
        artifacts = [output_dir / f"{source.stem}.pyc" for source in sources]
        for artifact in artifacts:
            artifact.write_bytes(b"")
        return artifacts

    compiler.compile.side_effect = _compile
    return compiler


@pytest.fixture
def runner_mock() -> Mock:
    """Create mock test runner reporting success."""
    runner = Mock(spec=TestRunner)
    runner.execute.return_value = RunResult(status="success")
    return runner


@pytest.fixture
def engine_mock() -> Mock:
    """Create mock coverage engine."""
    engine = Mock(spec=CoverageEngine)
    engine.instrument.side_effect = lambda artifact: artifact.stem
    engine.analyze.return_value = (3, 1)
    engine.render_detail.side_effect = lambda module, path: path
    return engine


@pytest.fixture
def toolchain(compiler_mock: Mock, runner_mock: Mock, engine_mock: Mock) -> Toolchain:
    """Bundle the mock collaborators."""
    return Toolchain(compiler=compiler_mock, runner=runner_mock, coverage=engine_mock)


@pytest.fixture
def context(project: Path) -> BuildContext:
    """Create a build context for the sample project."""
    return BuildContext(
        base_dir=project,
        output_dir=project / ".eunit",
        options=GlobalOptions(),
    )
