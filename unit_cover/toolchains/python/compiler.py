"""Byte-compiles Python sources into sourceless artifacts."""

import logging
import py_compile
import warnings
from collections import Counter
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from unit_cover.models.config import Option
from unit_cover.options import has_flag, option_value
from unit_cover.toolchains.base import CompileError, Compiler

log = logging.getLogger(__name__)


class PythonCompiler(Compiler):
    """Compiles each ``name.py`` into ``<output_dir>/name.pyc``.

    The artifacts are importable on their own once the output directory is
    on ``sys.path``. Their code objects carry the absolute source path so
    coverage can be mapped back to the original file.
    """

    source_pattern: ClassVar[str] = r"^(?!__init__\.py$).+\.py$"
    artifact_suffix: ClassVar[str] = ".pyc"

    def compile(
        self,
        sources: Sequence[Path],
        output_dir: Path,
        options: Sequence[Option],
    ) -> Sequence[Path]:
        """Compile sources, stopping at the first failure."""
        duplicates = sorted(
            stem
            for stem, count in Counter(source.stem for source in sources).items()
            if count > 1
        )
        if duplicates:
            raise CompileError(f"Duplicate module names: {', '.join(duplicates)}")

        defines = [
            option[1]
            for option in options
            if isinstance(option, tuple) and option[0] == "d"
        ]
        if defines:
            log.debug("Macro definitions have no effect on Python sources: %s", defines)

        default_level = 0 if has_flag(options, "debug_info") else -1
        optimize = int(option_value(options, "optimize", default_level))

        artifacts: list[Path] = []
        with warnings.catch_warnings():
            if has_flag(options, "warnings_as_errors"):
                warnings.simplefilter("error")

            for source in sources:
                artifact = output_dir / f"{source.stem}{self.artifact_suffix}"
                log.debug("Compiling %s -> %s", source, artifact)
                try:
                    py_compile.compile(
                        str(source),
                        cfile=str(artifact),
                        dfile=str(source.resolve()),
                        doraise=True,
                        optimize=optimize,
                    )
                except py_compile.PyCompileError as e:
                    raise CompileError(f"Failed to compile {source}: {e.msg}") from e
                artifacts.append(artifact)

        return artifacts
