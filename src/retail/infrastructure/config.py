"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from retail.domain.exceptions import InvalidArgumentError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArgumentError(f"{name} must be a boolean, got {raw!r}")


def _parse_level(name: str, raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise InvalidArgumentError(f"{name} is not a log level: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    seed_demo_data: bool = True

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``environ``, defaulting to the process env.

        When reading the process env, a ``.env`` file in the working
        directory is loaded first; real environment variables win.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = dict(os.environ)

        return cls(
            log_level=_parse_level(
                "RETAIL_LOG_LEVEL", environ.get("RETAIL_LOG_LEVEL", "WARNING")
            ),
            seed_demo_data=_parse_bool(
                "RETAIL_SEED_DEMO_DATA", environ.get("RETAIL_SEED_DEMO_DATA", "true")
            ),
        )
