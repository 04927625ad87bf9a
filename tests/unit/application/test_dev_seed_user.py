"""
Name: Dev Seed User Tests

Responsibilities:
  - Disabled: no-op
  - Enabled: create once, idempotent afterwards
  - Production guard
"""

import pytest

from typeten.application.dev_seed_user import ensure_dev_user
from typeten.crosscutting.config import Settings
from typeten.infrastructure.repositories import InMemoryUserRepository

pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    return Settings(app_env="test", **overrides)


def test_disabled_is_noop():
    repo = InMemoryUserRepository()

    assert ensure_dev_user(_settings(dev_seed_user=False), user_repo=repo) is None
    assert repo.get_user("default-user") is None


def test_creates_user_once(clock):
    repo = InMemoryUserRepository()
    settings = _settings(dev_seed_user=True)

    created = ensure_dev_user(settings, user_repo=repo, clock=clock)
    again = ensure_dev_user(settings, user_repo=repo, clock=clock)

    assert created.id == "default-user"
    assert created.email == "user@typeten.local"
    assert again.id == created.id
    assert again.created_at == created.created_at


def test_existing_email_is_reused(user_repo, sample_user):
    settings = _settings(dev_seed_user=True, dev_seed_user_email=sample_user.email)

    user = ensure_dev_user(settings, user_repo=user_repo)

    assert user.id == sample_user.id
    assert user_repo.get_user("default-user") is None


def test_production_guard():
    settings = Settings(app_env="production", dev_seed_user=True)

    with pytest.raises(RuntimeError):
        ensure_dev_user(settings, user_repo=InMemoryUserRepository())
