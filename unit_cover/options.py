"""Merging of project configuration into compiler and runner options."""

import importlib.util
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from unit_cover.models.config import Option, ProjectConfig

log = logging.getLogger(__name__)

TEST_DEFINE: Option = ("d", "TEST")
PROPERTY_TESTING_DEFINE: Option = ("d", "PROPERTY_TESTING")


def build_effective_options(
    config: ProjectConfig, *, property_testing: bool
) -> tuple[Option, ...]:
    """Build the compiler options used for a test build.

    Later entries take precedence; duplicates are left for the compiler
    to resolve.
    """
    extension_opts: list[Option] = [PROPERTY_TESTING_DEFINE] if property_testing else []
    return (
        TEST_DEFINE,
        "debug_info",
        *config.compile_opts,
        *config.test_compile_opts,
        *extension_opts,
    )


def build_runner_options(config: ProjectConfig, *, verbose: bool) -> tuple[Option, ...]:
    """Build the test runner options, with verbose first when requested."""
    base_opts: list[Option] = ["verbose"] if verbose else []
    return (*base_opts, *config.test_opts)


def detect_property_testing(
    package: str = "hypothesis", resource: str = "strategies/__init__.py"
) -> bool:
    """Check whether the property-testing extension is installed.

    The extension counts as available only when its installation directory
    exists and contains the given resource.
    """
    spec = importlib.util.find_spec(package)
    if spec is None or not spec.submodule_search_locations:
        available = False
    else:
        available = any(
            (Path(location) / resource).is_file()
            for location in spec.submodule_search_locations
        )

    log.debug("Property-testing availability (%s): %s", package, available)
    return available


def has_flag(options: Sequence[Option], flag: str) -> bool:
    """Check for a bare atom option."""
    return any(option == flag for option in options)


def option_value(options: Sequence[Option], key: str, default: Any = None) -> Any:
    """Return the value of the last ``(key, value)`` option.

    Options are ordered by increasing precedence, so later pairs override
    earlier ones.
    """
    for option in reversed(options):
        if isinstance(option, tuple) and option[0] == key:
            return option[1]
    return default


def append_values(options: Sequence[Option], key: str) -> list[Any]:
    """Concatenate the list values of every ``(key, [...])`` option."""
    values: list[Any] = []
    for option in options:
        if isinstance(option, tuple) and option[0] == key:
            value = option[1]
            if isinstance(value, (list, tuple)):
                values.extend(value)
            else:
                values.append(value)
    return values
