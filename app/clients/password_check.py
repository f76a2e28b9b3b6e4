"""
Caller-side helper for the /check-password endpoint.

Never raises: transport failures, non-2xx answers and unreadable bodies
all come back as an ``api_error`` result, so UI code can advise the user
and carry on.
"""

import logging
import os
from enum import Enum
from typing import Optional

import requests
from pydantic import ValidationError

from app.models.password import PasswordAssessment

logger = logging.getLogger(__name__)

# Results are the same shape the endpoint returns.
PasswordCheckResult = PasswordAssessment

UNVERIFIED_RESULT = PasswordCheckResult(
    is_breached=False,
    is_weak=False,
    message="Unable to verify password security",
    api_error=True,
)


class StrengthLevel(str, Enum):
    UNKNOWN = "unknown"
    BREACHED = "breached"
    WEAK = "weak"
    STRONG = "strong"


_STRENGTH_TEXT = {
    StrengthLevel.UNKNOWN: "Enter a password",
    StrengthLevel.BREACHED: "Breached - Choose a different password",
    StrengthLevel.WEAK: "Weak - Please strengthen your password",
    StrengthLevel.STRONG: "Strong password",
}


class PasswordCheckClient:

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or os.getenv("PASSWORD_CHECK_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("PASSWORD_CHECK_API_KEY")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/check-password"

    def check_password(self, password: str) -> PasswordCheckResult:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            resp = self.session.post(
                self.endpoint,
                json={"password": password},
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return PasswordCheckResult.model_validate(resp.json())
        except (requests.RequestException, ValueError, ValidationError) as exc:
            logger.error("Error checking password: %s", exc.__class__.__name__)
            return UNVERIFIED_RESULT


def strength_level(result: Optional[PasswordCheckResult]) -> StrengthLevel:
    if result is None:
        return StrengthLevel.UNKNOWN
    if result.is_breached:
        return StrengthLevel.BREACHED
    if result.is_weak:
        return StrengthLevel.WEAK
    return StrengthLevel.STRONG


def strength_text(result: Optional[PasswordCheckResult]) -> str:
    return _STRENGTH_TEXT[strength_level(result)]
