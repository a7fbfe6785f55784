"""Shared fixtures: a default policy, a small injectable policy, and an API client."""
import pytest
from fastapi.testclient import TestClient

from password_gate import config as config_module
from password_gate import validator as validator_module
from password_gate.config import PolicyConfig
from password_gate.validator import PolicyValidator


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    """Drop cached settings/validator so env changes in a test take effect."""
    for var in (
        "PASSWORD_POLICY_MIN_LENGTH",
        "PASSWORD_POLICY_MAX_LENGTH",
        "PASSWORD_POLICY_MIN_CLASSES_REQUIRED",
        "PASSWORD_POLICY_MAX_CONSECUTIVE_REPEAT",
        "PASSWORD_POLICY_DENYLIST_FILE",
        "PASSWORD_POLICY_BANNED_SUBSTRINGS_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config_module, "_settings", None)
    monkeypatch.setattr(validator_module, "_validator", None)


@pytest.fixture
def validator():
    return PolicyValidator(PolicyConfig())


@pytest.fixture
def small_policy():
    """Tiny injected word lists so tests don't depend on the bundled data."""
    return PolicyConfig(
        denylist=frozenset({"Hunter2Hunter2", "correcthorse1!"}),
        banned_substrings=("password", "admin"),
    )


@pytest.fixture
def client():
    from password_gate.api.app import create_app

    with TestClient(create_app()) as c:
        yield c
