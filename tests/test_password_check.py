import json

import pytest

from app.core.settings import FailMode
from app.services.breach.base import BreachServiceUnavailable
from app.services.breach.manager import NOT_CHECKED, BreachStatus, BreachVerdict
from app.services.password_check import (
    BREACHED_MESSAGE,
    SECURE_MESSAGE,
    UNVERIFIED_MESSAGE,
    assess_password,
    build_assessment,
)


def test_weak_password_skips_breach_lookup(policy, provider):
    result = assess_password("password", policy, provider)

    assert result.is_weak
    assert not result.is_breached
    assert result.breach_count is None
    assert result.issues
    assert provider.requested_prefixes == []


def test_compliant_password_reaches_lookup(policy, provider, strong_password):
    result = assess_password(strong_password, policy, provider)

    assert len(provider.requested_prefixes) == 1
    assert result.to_response() == {
        "isBreached": False,
        "isWeak": False,
        "message": SECURE_MESSAGE,
    }


def test_breached_password(policy, provider, strong_password):
    provider.add_password(strong_password, 42)

    result = assess_password(strong_password, policy, provider)

    assert result.to_response() == {
        "isBreached": True,
        "isWeak": False,
        "breachCount": 42,
        "message": BREACHED_MESSAGE,
    }


def test_unavailable_lookup_fails_open(policy, provider, strong_password):
    provider.unavailable = True

    result = assess_password(strong_password, policy, provider)

    assert result.to_response() == {
        "isBreached": False,
        "isWeak": False,
        "apiError": True,
        "message": UNVERIFIED_MESSAGE,
    }


def test_unavailable_lookup_fail_closed_raises(policy, provider, strong_password):
    provider.unavailable = True

    with pytest.raises(BreachServiceUnavailable):
        assess_password(strong_password, policy, provider, fail_mode=FailMode.CLOSED)


def test_fail_closed_does_not_affect_weak_passwords(policy, provider):
    provider.unavailable = True

    result = assess_password("short", policy, provider, fail_mode=FailMode.CLOSED)

    assert result.is_weak
    assert provider.requested_prefixes == []


def test_repeated_assessment_is_identical(policy, provider, strong_password):
    provider.add_password(strong_password, 7)

    first = assess_password(strong_password, policy, provider)
    second = assess_password(strong_password, policy, provider)

    assert first == second
    assert json.dumps(first.to_response()) == json.dumps(second.to_response())


def test_not_checked_verdict_builds_weak_result():
    result = build_assessment(["Password must contain at least one number"], NOT_CHECKED)

    assert result.to_response() == {
        "isBreached": False,
        "isWeak": True,
        "issues": ["Password must contain at least one number"],
    }


def test_clean_verdict_builds_secure_result():
    result = build_assessment([], BreachVerdict(BreachStatus.CLEAN))

    assert result.message == SECURE_MESSAGE
    assert result.breach_count is None
