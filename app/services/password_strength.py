import re
from typing import List

from app.core.policy import PasswordPolicy

# ASCII-only character classes; letters outside A-Z/a-z count as special characters.
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

COMMON_PASSWORD_ISSUE = "This password is too common and easily guessed"


def evaluate_password_strength(password: str, policy: PasswordPolicy) -> List[str]:
    """
    Every rule runs, so the caller sees all violations at once.
    An empty list means the password passes local policy.
    """
    issues = []

    if len(password) < policy.min_length:
        issues.append(f"Password must be at least {policy.min_length} characters long")

    if not _UPPER.search(password):
        issues.append("Password must contain at least one uppercase letter")

    if not _LOWER.search(password):
        issues.append("Password must contain at least one lowercase letter")

    if not _DIGIT.search(password):
        issues.append("Password must contain at least one number")

    if not _SPECIAL.search(password):
        issues.append("Password must contain at least one special character")

    if policy.is_common(password):
        issues.append(COMMON_PASSWORD_ISSUE)

    return issues
