from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from cssbuilder.errors import ConfigError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject tokens outside ' ', '+', '~', '>'
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuilderConfig:
        """Build a config from ``CSSBUILDER_*`` environment variables.

        Raises :class:`~cssbuilder.errors.ConfigError` when
        ``CSSBUILDER_LOG_LEVEL`` is not a standard logging level name.
        """
        env = os.environ if environ is None else environ
        strict = env.get("CSSBUILDER_STRICT_COMBINATORS", "").strip().lower() in _TRUTHY
        level = env.get("CSSBUILDER_LOG_LEVEL", "").strip().upper() or cls.log_level
        if level not in logging.getLevelNamesMapping():
            raise ConfigError(
                f"Unknown log level {level!r} in CSSBUILDER_LOG_LEVEL; "
                "expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return cls(strict_combinators=strict, log_level=level)
