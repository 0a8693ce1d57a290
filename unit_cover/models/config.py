"""Models for project configuration and global build options."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

type Option = str | tuple[str, Any]


class Model(BaseModel):
    """Base model for immutable configuration."""

    model_config = ConfigDict(frozen=True)


class ProjectConfig(Model):
    """Project configuration loaded from unit_cover.yaml.

    Keys follow the build tool's vocabulary (``erl_opts``,
    ``eunit_compile_opts``, ``eunit_opts``); the Python field names are
    accepted as well.
    """

    compile_opts: Sequence[Option] = Field(
        default_factory=list,
        validation_alias=AliasChoices("erl_opts", "compile_opts"),
        description="General compiler options",
    )
    test_compile_opts: Sequence[Option] = Field(
        default_factory=list,
        validation_alias=AliasChoices("eunit_compile_opts", "test_compile_opts"),
        description="Compiler options applied only when building for tests",
    )
    test_opts: Sequence[Option] = Field(
        default_factory=list,
        validation_alias=AliasChoices("eunit_opts", "test_opts"),
        description="Options passed to the test runner",
    )
    cover_enabled: bool = Field(
        default=False, description="Instrument artifacts and write a coverage report"
    )


class GlobalOptions(Model):
    """Build-wide options given on the command line."""

    suite: Annotated[str, Field(pattern=r"^[^.]+$")] | None = Field(
        default=None,
        description="Run only this named suite instead of all modules; "
        "artifacts are flat, so dotted names are rejected",
    )
    verbose: bool = Field(default=False, description="Verbose runner output")


@dataclass(frozen=True, kw_only=True)
class BuildContext:
    """Values computed once at startup and shared by a whole invocation."""

    base_dir: Path
    output_dir: Path
    options: GlobalOptions
    property_testing: bool = False
