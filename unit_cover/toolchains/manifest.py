"""Plugin entry describing one language toolchain."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from unit_cover.toolchains.base import Toolchain


@dataclass(frozen=True, kw_only=True)
class ToolchainManifest[ConfigT: BaseModel]:
    """Pairs a toolchain's config model with the factory that opens it.

    The factory yields a ready compiler, test runner and coverage engine for
    a single build and releases whatever they hold when the build is over.
    """

    config_cls: type[ConfigT]
    toolchain_factory: Callable[[ConfigT], AbstractContextManager[Toolchain]]

    def open(self, raw_config: str) -> AbstractContextManager[Toolchain]:
        """Validate a JSON toolchain config and open the toolchain with it.

        Raises:
            pydantic.ValidationError: If the JSON does not fit ``config_cls``

        """
        config = self.config_cls.model_validate_json(raw_config)
        return self.toolchain_factory(config)
