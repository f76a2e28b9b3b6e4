import pytest
from fastapi.testclient import TestClient

from app.core.policy import PasswordPolicy
from app.core.settings import Settings, get_settings
from app.dependencies.password import get_breach_provider, get_password_policy
from app.main import app
from app.services.breach.base import BreachProvider, BreachServiceUnavailable, RangeRecord
from app.services.breach.manager import split_password_hash

STRONG_PASSWORD = "Correct-Horse-9-Battery"


class StubBreachProvider(BreachProvider):
    """In-memory range corpus keyed by hash prefix."""

    def __init__(self, records=None, unavailable=False):
        self.records = records or {}
        self.unavailable = unavailable
        self.requested_prefixes = []

    def add_password(self, password, count):
        prefix, suffix = split_password_hash(password)
        self.records.setdefault(prefix, []).append(RangeRecord(suffix, count))

    def fetch_range(self, prefix):
        self.requested_prefixes.append(prefix)
        if self.unavailable:
            raise BreachServiceUnavailable("Password breach service unavailable")
        return list(self.records.get(prefix, []))


@pytest.fixture
def policy():
    return PasswordPolicy()


@pytest.fixture
def provider():
    return StubBreachProvider()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(policy, provider, settings):
    app.dependency_overrides[get_password_policy] = lambda: policy
    app.dependency_overrides[get_breach_provider] = lambda: provider
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def strong_password():
    return STRONG_PASSWORD
