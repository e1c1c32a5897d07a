"""Runtime settings read from the environment (``.env`` is loaded by run.py)."""

import math
import os
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

DEFAULT_CITIES_PATH = Path(__file__).resolve().parent / "data" / "cities.json"
DEFAULT_USER_AGENT = "RandomWeatherApp/1.0 (Educational Project)"


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 4200
    cities_path: Path = DEFAULT_CITIES_PATH
    max_attempts: int = 10
    retry_delay: float = 1.1
    http_timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    http_cache: str | None = None
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from ``RANDOMWEATHER_*`` variables, falling back to defaults.

        Raises:
            ConfigError: a numeric variable is malformed or out of range.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(f"RANDOMWEATHER_{name}")
            return value.strip() if value and value.strip() else None

        settings = cls(
            host=get("HOST") or cls.host,
            port=_number(get("PORT"), int, cls.port, "PORT"),
            cities_path=Path(get("CITIES_PATH")) if get("CITIES_PATH") else DEFAULT_CITIES_PATH,
            max_attempts=_number(get("MAX_ATTEMPTS"), int, cls.max_attempts, "MAX_ATTEMPTS"),
            retry_delay=_number(get("RETRY_DELAY"), float, cls.retry_delay, "RETRY_DELAY"),
            http_timeout=_number(get("HTTP_TIMEOUT"), float, cls.http_timeout, "HTTP_TIMEOUT"),
            user_agent=get("USER_AGENT") or DEFAULT_USER_AGENT,
            http_cache=get("HTTP_CACHE"),
            log_level=(get("LOG_LEVEL") or cls.log_level).upper(),
            log_file=get("LOG_FILE"),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not 0 < self.port < 65536:
            raise ConfigError(f"RANDOMWEATHER_PORT out of range: {self.port}")
        if self.max_attempts < 1:
            raise ConfigError("RANDOMWEATHER_MAX_ATTEMPTS must be at least 1")
        if not math.isfinite(self.retry_delay) or self.retry_delay < 0:
            raise ConfigError("RANDOMWEATHER_RETRY_DELAY must be a finite, non-negative number")
        if not math.isfinite(self.http_timeout) or self.http_timeout <= 0:
            raise ConfigError("RANDOMWEATHER_HTTP_TIMEOUT must be positive")
        try:
            logger.level(self.log_level)
        except ValueError:
            raise ConfigError(f"RANDOMWEATHER_LOG_LEVEL is not a known level: {self.log_level!r}") from None


def _number(raw, kind, default, name):
    if raw is None:
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"RANDOMWEATHER_{name} is not a valid {kind.__name__}: {raw!r}") from None
