"""Models for test run outcomes."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class RunResult:
    """Outcome of a single test run.

    ``error`` means the test framework itself raised, as opposed to tests
    failing normally.
    """

    status: Literal["success", "failure", "error"]
    message: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the run counts as a success."""
        return self.status == "success"
