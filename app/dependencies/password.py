from __future__ import annotations

from fastapi import Depends

from app.core.policy import PasswordPolicy, build_policy
from app.core.settings import Settings, get_settings
from app.services.breach.base import BreachProvider
from app.services.breach.hibp_provider import HIBPProvider

_policy: PasswordPolicy | None = None


def get_password_policy(settings: Settings = Depends(get_settings)) -> PasswordPolicy:
    global _policy
    if _policy is None:
        _policy = build_policy(settings)
    return _policy


def get_breach_provider(settings: Settings = Depends(get_settings)) -> BreachProvider:
    """
    Returns a new provider instance per request.
    """
    return HIBPProvider.from_settings(settings)
