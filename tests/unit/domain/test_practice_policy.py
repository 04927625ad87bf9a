"""
Name: Practice Policy Unit Tests

Responsibilities:
  - Owner-only access to texts and sessions
  - Missing or blank actor never has access
"""

import pytest

from typeten.domain.practice_policy import (
    PracticeActor,
    can_access_session,
    can_practice_text,
    can_read_text,
)

pytestmark = pytest.mark.unit


def test_owner_can_read_and_practice_text(sample_text, actor):
    assert can_read_text(sample_text, actor) is True
    assert can_practice_text(sample_text, actor) is True


def test_other_user_cannot_read_text(sample_text, other_actor):
    assert can_read_text(sample_text, other_actor) is False


@pytest.mark.parametrize("candidate", [None, PracticeActor(user_id="   ")])
def test_missing_actor_has_no_access(sample_text, sample_session, candidate):
    assert can_read_text(sample_text, candidate) is False
    assert can_access_session(sample_session, candidate) is False


def test_session_owner_only(sample_session, actor, other_actor):
    assert can_access_session(sample_session, actor) is True
    assert can_access_session(sample_session, other_actor) is False
