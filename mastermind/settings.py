"""
Single place to:
- Load env vars from .env if present (dev convenience)
- Read game defaults from the environment
- Build the default GameConfiguration for new games
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .config import GameConfiguration, configure
from .errors import InvalidConfiguration
from .palette import DEFAULT_PALETTE

# dev convenience; in prod the platform injects env vars
load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}.") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidConfiguration(f"{name} must be a boolean, got {raw!r}.")


@dataclass(frozen=True)
class Settings:
    app_env: str = "local"
    code_length: int = 4
    max_attempts: int = 10
    allow_duplicates: bool = True
    log_level: str = "INFO"

    def default_configuration(self) -> GameConfiguration:
        return configure(
            length=self.code_length,
            max_attempts=self.max_attempts,
            allow_duplicates=self.allow_duplicates,
            palette=DEFAULT_PALETTE,
        )


def get_settings(env_file: Optional[str] = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file, override=True)
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        code_length=_env_int("MASTERMIND_CODE_LENGTH", 4),
        max_attempts=_env_int("MASTERMIND_MAX_ATTEMPTS", 10),
        allow_duplicates=_env_bool("MASTERMIND_ALLOW_DUPLICATES", True),
        log_level=os.getenv("MASTERMIND_LOG_LEVEL", "INFO").upper(),
    )
