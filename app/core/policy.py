from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from app.core.settings import DEFAULT_PASSWORD_MIN_LENGTH, Settings

logger = logging.getLogger(__name__)


COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password",
    "password123",
    "12345678",
    "qwerty",
    "abc123",
    "monkey",
    "1234567",
    "letmein",
    "trustno1",
    "dragon",
    "baseball",
    "iloveyou",
    "master",
    "sunshine",
    "ashley",
    "welcome",
    "admin",
    "root",
    "123456789",
    "12345678910",
})


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Immutable local password rules.

    Entries of ``common_passwords`` are compared against the lower-cased
    candidate, so they are stored lower-cased as well.
    """

    min_length: int = DEFAULT_PASSWORD_MIN_LENGTH
    common_passwords: frozenset[str] = COMMON_PASSWORDS

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        normalized = frozenset(entry.lower() for entry in self.common_passwords)
        object.__setattr__(self, "common_passwords", normalized)

    def is_common(self, password: str) -> bool:
        return password.lower() in self.common_passwords


def load_common_passwords(path: Path) -> frozenset[str]:
    """
    One password per line. Blank lines and lines starting with ``#`` are skipped.
    """
    entries = set()
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            value = line.strip()
            if not value or value.startswith("#"):
                continue
            entries.add(value.lower())

    if not entries:
        raise ValueError(f"Common password list {path} is empty")

    logger.info("Loaded %d common passwords from %s", len(entries), path)
    return frozenset(entries)


def build_policy(settings: Settings) -> PasswordPolicy:
    common = COMMON_PASSWORDS
    if settings.common_passwords_file is not None:
        common = load_common_passwords(settings.common_passwords_file)

    return PasswordPolicy(
        min_length=settings.password_min_length,
        common_passwords=common,
    )
