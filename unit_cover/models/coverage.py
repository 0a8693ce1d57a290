"""Models for per-module coverage statistics."""

from dataclasses import dataclass


def percentage(covered: int, uncovered: int) -> int:
    """Return the truncated coverage percentage, or 0 when nothing is measured."""
    total = covered + uncovered
    if total == 0:
        return 0
    return covered * 100 // total


@dataclass(frozen=True, kw_only=True)
class CoverageStat:
    """Covered and uncovered line counts for one module."""

    module: str
    covered: int
    uncovered: int

    def __post_init__(self) -> None:
        if self.covered < 0 or self.uncovered < 0:
            raise ValueError(
                f"Line counts must be non-negative for {self.module}: "
                f"covered={self.covered}, uncovered={self.uncovered}"
            )

    @property
    def percentage(self) -> int:
        return percentage(self.covered, self.uncovered)
