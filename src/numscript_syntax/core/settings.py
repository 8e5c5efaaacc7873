"""Process configuration for the Numscript tooling, on Pydantic Settings (v2).

Values come from real environment variables first, then from `.env` and
`.env.local` in the working directory.

`NUMSCRIPT_ENV` picks the default log level (`dev` logs at INFO, `test` and
`prod` only at WARNING); an explicit `LOG_LEVEL` always wins.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_MAX_SOURCE_BYTES = 8 * 1024 * 1024

_ENV_LOG_LEVELS: dict[EnvName, LogLevelName] = {
    "dev": "INFO",
    "test": "WARNING",
    "prod": "WARNING",
}


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Deployment flavour; maps from `NUMSCRIPT_ENV`.
    log_level : LogLevelName | None
        Explicit log level; maps from `LOG_LEVEL`. Unset means "derive it
        from `environment`".
    max_source_bytes : int
        Largest source `parse_source` accepts; maps from
        `NUMSCRIPT_MAX_SOURCE_BYTES`.
    """

    environment: EnvName = Field(default="dev", alias="NUMSCRIPT_ENV")
    log_level: LogLevelName | None = Field(default=None, alias="LOG_LEVEL")
    max_source_bytes: int = Field(
        default=DEFAULT_MAX_SOURCE_BYTES, gt=0, alias="NUMSCRIPT_MAX_SOURCE_BYTES"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> LogLevelName:
        return self.log_level or _ENV_LOG_LEVELS[self.environment]

    def log_level_numeric(self) -> int:
        """Return the numeric logging level for `effective_log_level`."""
        return int(getattr(logging, self.effective_log_level))


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


def get_logger(name: str = "numscript_syntax") -> logging.Logger:
    """Return a process-global logger at the configured level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
