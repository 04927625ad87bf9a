"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (no .env, APP_ENV=test)
  - Provide domain fixtures (user, text, session) and in-memory repositories
  - Provide a FastAPI TestClient with fresh container singletons

Collaborators:
  - pytest: Test framework
  - typeten.domain: Domain entities
  - typeten.infrastructure.repositories.in_memory: repositories under test
  - typeten.container: reset between API tests

Notes:
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "true")

from typeten.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None
app_config.get_settings.cache_clear()

from typeten.domain.entities import Session, TextInfo, User  # noqa: E402
from typeten.domain.practice_policy import PracticeActor  # noqa: E402
from typeten.infrastructure.repositories.in_memory import (  # noqa: E402
    InMemorySessionRepository,
    InMemoryTextRepository,
    InMemoryUserRepository,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Time / ids
# ============================================================================

T0 = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """R: Deterministic clock; each call advances one second."""

    def __init__(self, start: datetime = T0):
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now = current + timedelta(seconds=1)
        return current


class SequentialIds:
    """R: Deterministic id factory: prefix-1, prefix-2, ..."""

    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._n = 0

    def __call__(self) -> str:
        self._n += 1
        return f"{self._prefix}-{self._n}"


@pytest.fixture
def now() -> datetime:
    return T0


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_user(now: datetime) -> User:
    return User(id="user-1", email="ana@example.com", username="ana", created_at=now)


@pytest.fixture
def other_user(now: datetime) -> User:
    return User(id="user-2", email="bob@example.com", username="bob", created_at=now)


@pytest.fixture
def actor(sample_user: User) -> PracticeActor:
    return PracticeActor(user_id=sample_user.id)


@pytest.fixture
def other_actor(other_user: User) -> PracticeActor:
    return PracticeActor(user_id=other_user.id)


@pytest.fixture
def sample_text(sample_user: User, now: datetime) -> TextInfo:
    return TextInfo(
        id="text-1",
        user_id=sample_user.id,
        title="Lorem",
        total_lines=25,
        fragment_size=10,
        fragment_count=3,
        created_at=now,
    )


@pytest.fixture
def sample_session(sample_user: User, sample_text: TextInfo, now: datetime) -> Session:
    return Session.create("session-1", sample_user.id, sample_text.id, now)


# ============================================================================
# Repository Fixtures
# ============================================================================


@pytest.fixture
def user_repo(sample_user: User, other_user: User) -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    repo.create_user(sample_user)
    repo.create_user(other_user)
    return repo


@pytest.fixture
def text_repo() -> InMemoryTextRepository:
    return InMemoryTextRepository()


@pytest.fixture
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


# ============================================================================
# API
# ============================================================================


@pytest.fixture
def client():
    """R: TestClient over the real app with empty in-memory stores."""
    from fastapi.testclient import TestClient

    from typeten.api.main import app
    from typeten.container import reset_container

    reset_container()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_container()
