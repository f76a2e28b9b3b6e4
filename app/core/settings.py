from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FailMode(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


DEFAULT_HIBP_PASSWORD_API = "https://api.pwnedpasswords.com/range"
DEFAULT_HIBP_TIMEOUT_SECONDS = 8.0
DEFAULT_HIBP_USER_AGENT = "password-check-service"
DEFAULT_PASSWORD_MIN_LENGTH = 12

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    hibp_password_api: str = DEFAULT_HIBP_PASSWORD_API
    hibp_timeout_seconds: float = DEFAULT_HIBP_TIMEOUT_SECONDS
    hibp_user_agent: str = DEFAULT_HIBP_USER_AGENT
    hibp_add_padding: bool = True
    fail_mode: FailMode = FailMode.OPEN
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH
    common_passwords_file: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        raw_mode = (os.getenv("BREACH_CHECK_FAIL_MODE") or FailMode.OPEN.value).strip().lower()
        try:
            fail_mode = FailMode(raw_mode)
        except ValueError:
            raise ValueError(
                f"BREACH_CHECK_FAIL_MODE must be 'open' or 'closed', got {raw_mode!r}"
            ) from None

        common_file = (os.getenv("COMMON_PASSWORDS_FILE") or "").strip()

        return cls(
            hibp_password_api=(
                os.getenv("HIBP_PASSWORD_API") or DEFAULT_HIBP_PASSWORD_API
            ).rstrip("/"),
            hibp_timeout_seconds=_env_number(
                "HIBP_TIMEOUT_SECONDS", DEFAULT_HIBP_TIMEOUT_SECONDS, float
            ),
            hibp_user_agent=os.getenv("HIBP_USER_AGENT") or DEFAULT_HIBP_USER_AGENT,
            hibp_add_padding=_env_bool("HIBP_ADD_PADDING", True),
            fail_mode=fail_mode,
            password_min_length=_env_number(
                "PASSWORD_MIN_LENGTH", DEFAULT_PASSWORD_MIN_LENGTH, int
            ),
            common_passwords_file=Path(common_file) if common_file else None,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Settings are read from the environment once per process.
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
