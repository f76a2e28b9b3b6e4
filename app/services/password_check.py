import logging
from typing import List

from app.core.policy import PasswordPolicy
from app.core.settings import FailMode
from app.models.password import PasswordAssessment
from app.services.breach.base import BreachProvider, BreachServiceUnavailable
from app.services.breach.manager import (
    NOT_CHECKED,
    BreachStatus,
    BreachVerdict,
    check_password_breach,
)
from app.services.password_strength import evaluate_password_strength

logger = logging.getLogger(__name__)

BREACHED_MESSAGE = "This password has been exposed in a data breach"
SECURE_MESSAGE = "Password is secure"
UNVERIFIED_MESSAGE = (
    "Unable to check password breach status, but password meets strength requirements"
)


def build_assessment(issues: List[str], verdict: BreachVerdict) -> PasswordAssessment:
    """
    A NOT_CHECKED verdict means local policy rejected the password.
    """
    if verdict.status == BreachStatus.NOT_CHECKED:
        return PasswordAssessment(
            is_breached=False,
            is_weak=True,
            issues=issues,
        )

    if verdict.is_breached:
        return PasswordAssessment(
            is_breached=True,
            is_weak=False,
            breach_count=verdict.count,
            message=BREACHED_MESSAGE,
        )

    return PasswordAssessment(
        is_breached=False,
        is_weak=False,
        message=SECURE_MESSAGE,
    )


def assess_password(
    password: str,
    policy: PasswordPolicy,
    provider: BreachProvider,
    fail_mode: FailMode = FailMode.OPEN,
) -> PasswordAssessment:
    """
    Local policy first; the breach corpus is only consulted for passwords
    that pass it. In fail-closed mode BreachServiceUnavailable propagates.
    """
    issues = evaluate_password_strength(password, policy)
    if issues:
        return build_assessment(issues, NOT_CHECKED)

    try:
        verdict = check_password_breach(password, provider)
    except BreachServiceUnavailable:
        if fail_mode == FailMode.CLOSED:
            raise
        logger.warning("Breach lookup unavailable, allowing password on local policy only")
        return PasswordAssessment(
            is_breached=False,
            is_weak=False,
            api_error=True,
            message=UNVERIFIED_MESSAGE,
        )

    return build_assessment(issues, verdict)
