"""CLI entry point for the unit test and coverage plugin."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from unit_cover.config_loader import load_project_config
from unit_cover.coverage_controller import CoverageInitError
from unit_cover.models.config import BuildContext, GlobalOptions
from unit_cover.options import detect_property_testing
from unit_cover.orchestrator import EUNIT_DIR, TestOrchestrator, clean_output
from unit_cover.toolchains.base import CompileError
from unit_cover.toolchains.loading import load_toolchain_manifest

COMMANDS = ("eunit", "clean")


def build_context(base_dir: Path, options: GlobalOptions) -> BuildContext:
    """Compute the per-invocation context once, at startup."""
    return BuildContext(
        base_dir=base_dir,
        output_dir=base_dir / EUNIT_DIR,
        options=options,
        property_testing=detect_property_testing(),
    )


def run(
    command: str,
    base_dir: Path,
    options: GlobalOptions,
    toolchain_key: str = "python",
    toolchain_config_json: str = "{}",
    config_path: Path | None = None,
) -> int:
    """Run a plugin command and return the exit code."""
    log = logging.getLogger("unit_cover")

    if command == "clean":
        clean_output(base_dir / EUNIT_DIR)
        return 0

    log.info("Loading toolchain: %s", toolchain_key)
    manifest = load_toolchain_manifest(toolchain_key)

    context = build_context(base_dir, options)

    with manifest.open(toolchain_config_json) as toolchain:
        orchestrator = TestOrchestrator(toolchain=toolchain, context=context)
        config = load_project_config(base_dir, config_path)
        result = orchestrator.run_tests(config)

    if not result.passed:
        log.error("One or more unit tests failed.")
        if result.message:
            log.error("  Message: %s", result.message)
        return 1

    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Compile, run unit tests and report coverage"
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="eunit runs the tests, clean removes the output directory",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Project root (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Project configuration file (default: <base-dir>/unit_cover.yaml)",
    )
    parser.add_argument(
        "--toolchain",
        default="python",
        help="Toolchain key (default: python)",
    )
    parser.add_argument(
        "--toolchain-config",
        default="{}",
        help="JSON configuration for the toolchain",
    )
    parser.add_argument(
        "--suite",
        default=None,
        help="Run only the named suite",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show extra output from the test runner",
    )

    args = parser.parse_args()
    try:
        options = GlobalOptions(suite=args.suite, verbose=args.verbose)
    except ValidationError:
        parser.error(f"invalid suite name: {args.suite}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        exit_code = run(
            command=args.command,
            base_dir=args.base_dir,
            options=options,
            toolchain_key=args.toolchain,
            toolchain_config_json=args.toolchain_config,
            config_path=args.config,
        )
    except (CompileError, CoverageInitError) as e:
        logging.getLogger("unit_cover").error("%s", e)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
