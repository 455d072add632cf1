import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

from stepmatch.template import DEFAULT_PREFIX


@dataclass(frozen=True, slots=True)
class Settings:
    prefix: str = DEFAULT_PREFIX
    suggestions: int = 3
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        """Read settings from STEPMATCH_* variables; bad values raise ValueError."""
        suggestions = environ.get("STEPMATCH_SUGGESTIONS", "3")
        try:
            count = int(suggestions)
        except ValueError as error:
            raise ValueError(f"STEPMATCH_SUGGESTIONS must be an integer, got {suggestions!r}") from error

        log_level = environ.get("STEPMATCH_LOG_LEVEL", "WARNING").upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown STEPMATCH_LOG_LEVEL {log_level!r}")

        return cls(
            prefix=environ.get("STEPMATCH_PREFIX", DEFAULT_PREFIX),
            suggestions=count,
            log_level=log_level,
        )
