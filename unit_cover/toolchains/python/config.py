"""Configuration for the Python toolchain."""

from typing import Literal

from pydantic import BaseModel


class PythonToolchainConfig(BaseModel):
    """Configuration for the Python toolchain."""

    # Where the unittest runner writes its progress and failure output
    stream: Literal["stdout", "stderr"] = "stderr"
    branch: bool = False
