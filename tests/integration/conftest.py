"""Fixtures for integration tests."""

import sys
from pathlib import Path
from typing import Protocol

import pytest

CALC_SOURCE = """\
def add(a, b):
    return a + b


def sub(a, b):
    return a - b
"""

CALC_TESTS_SOURCE = """\
import unittest

import calc


class CalcTest(unittest.TestCase):
    def test_add(self):
        self.assertEqual(calc.add(2, 3), 5)
"""

FAILING_TESTS_SOURCE = """\
import unittest


class BrokenTest(unittest.TestCase):
    def test_fails(self):
        self.assertEqual(1, 2)
"""


class WriteProjectFn(Protocol):
    """Protocol for project creation function."""

    def __call__(self, *, failing: bool = False, config: str | None = None) -> Path:
        """Create a sample project and return its root."""


def tracer_active() -> bool:
    """Whether another coverage tool is already measuring this process."""
    if sys.gettrace() is not None:
        return True
    monitoring = getattr(sys, "monitoring", None)
    if monitoring is None:
        return False
    return monitoring.get_tool(monitoring.COVERAGE_ID) is not None


@pytest.fixture
def free_tracer() -> None:
    """Skip when another coverage tool is already measuring this process."""
    if tracer_active():
        pytest.skip("coverage measurement already active in this process")


@pytest.fixture
def write_project(tmp_path: Path) -> WriteProjectFn:
    """Return a function that writes a calc project into tmp_path."""

    def _write(*, failing: bool = False, config: str | None = None) -> Path:
        (tmp_path / "src").mkdir(exist_ok=True)
        (tmp_path / "src" / "calc.py").write_text(CALC_SOURCE)
        (tmp_path / "test").mkdir(exist_ok=True)
        (tmp_path / "test" / "calc_tests.py").write_text(CALC_TESTS_SOURCE)
        if failing:
            (tmp_path / "test" / "broken_tests.py").write_text(FAILING_TESTS_SOURCE)
        if config is not None:
            (tmp_path / "unit_cover.yaml").write_text(config)
        return tmp_path

    return _write
