"""
Name: In-Memory Repository Tests

Responsibilities:
  - Verify create / get / update / list contracts
  - Verify atomic writes (create_text, mutate_session)
  - Verify AlreadyExists / NotFound errors
  - Verify callers cannot mutate stored state
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from typeten.domain.entities import Session, TextFragment, TextInfo
from typeten.domain.errors import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidSessionOpError,
)
from typeten.infrastructure.repositories import (
    InMemorySessionRepository,
    InMemoryTextRepository,
    InMemoryUserRepository,
)

pytestmark = pytest.mark.unit


class TestInMemoryUserRepository:
    def test_create_and_get(self, sample_user):
        repo = InMemoryUserRepository()
        repo.create_user(sample_user)

        assert repo.get_user(sample_user.id) == sample_user

    def test_get_missing_returns_none(self):
        assert InMemoryUserRepository().get_user("missing") is None

    def test_duplicate_id_raises(self, sample_user):
        repo = InMemoryUserRepository()
        repo.create_user(sample_user)

        with pytest.raises(EntityAlreadyExistsError) as exc_info:
            repo.create_user(sample_user)

        assert exc_info.value.entity_id == sample_user.id

    def test_get_by_email_trims_input(self, sample_user):
        repo = InMemoryUserRepository()
        repo.create_user(sample_user)

        found = repo.get_user_by_email(f"  {sample_user.email} ")

        assert found is not None and found.id == sample_user.id
        assert repo.get_user_by_email("nobody@example.com") is None

    def test_returned_user_is_a_copy(self, sample_user):
        repo = InMemoryUserRepository()
        repo.create_user(sample_user)

        fetched = repo.get_user(sample_user.id)
        fetched.username = "changed"
        sample_user.username = "changed-too"

        assert repo.get_user(sample_user.id).username == "ana"


class TestInMemoryTextRepository:
    def _fragment(self, text_id: str, idx: int) -> TextFragment:
        return TextFragment(
            id=f"{text_id}_frag_{idx}", text_id=text_id, fragment_idx=idx, lines=["x"]
        )

    def test_text_info_roundtrip(self, sample_text):
        repo = InMemoryTextRepository()
        repo.create_text_info(sample_text)

        assert repo.get_text_info(sample_text.id) == sample_text
        assert repo.get_text_info("missing") is None

    def test_duplicate_text_raises(self, sample_text):
        repo = InMemoryTextRepository()
        repo.create_text_info(sample_text)

        with pytest.raises(EntityAlreadyExistsError):
            repo.create_text_info(sample_text)

    def test_list_texts_by_user_filters_owner(self, sample_text, now):
        repo = InMemoryTextRepository()
        repo.create_text_info(sample_text)
        repo.create_text_info(
            TextInfo(
                id="text-2",
                user_id="user-2",
                title="Other",
                total_lines=1,
                fragment_size=10,
                fragment_count=1,
                created_at=now,
            )
        )

        texts = repo.list_texts_by_user(sample_text.user_id)

        assert [t.id for t in texts] == [sample_text.id]
        assert repo.list_texts_by_user("nobody") == []

    def test_list_returns_new_list(self, sample_text):
        repo = InMemoryTextRepository()
        repo.create_text_info(sample_text)

        repo.list_texts_by_user(sample_text.user_id).clear()

        assert len(repo.list_texts_by_user(sample_text.user_id)) == 1

    def test_fragments_by_text(self):
        repo = InMemoryTextRepository()
        for idx in (2, 0, 1):
            repo.create_fragment(self._fragment("t1", idx))
        repo.create_fragment(self._fragment("t2", 0))

        fragments = repo.list_fragments_by_text("t1")

        assert sorted(f.fragment_idx for f in fragments) == [0, 1, 2]
        assert repo.get_fragment("t1_frag_1").fragment_idx == 1
        assert repo.get_fragment("missing") is None

    def test_duplicate_fragment_raises(self):
        repo = InMemoryTextRepository()
        repo.create_fragment(self._fragment("t1", 0))

        with pytest.raises(EntityAlreadyExistsError):
            repo.create_fragment(self._fragment("t1", 0))

    def test_create_text_stores_info_and_fragments(self, sample_text):
        repo = InMemoryTextRepository()
        fragments = [self._fragment(sample_text.id, idx) for idx in range(3)]

        repo.create_text(sample_text, fragments)

        assert repo.get_text_info(sample_text.id) == sample_text
        assert len(repo.list_fragments_by_text(sample_text.id)) == 3

    def test_create_text_is_all_or_nothing(self, sample_text):
        repo = InMemoryTextRepository()
        repo.create_fragment(self._fragment(sample_text.id, 1))
        fragments = [self._fragment(sample_text.id, idx) for idx in range(3)]

        with pytest.raises(EntityAlreadyExistsError) as exc_info:
            repo.create_text(sample_text, fragments)

        assert exc_info.value.entity == "fragment"
        assert repo.get_text_info(sample_text.id) is None
        assert repo.get_fragment(f"{sample_text.id}_frag_0") is None

    def test_create_text_rejects_repeated_fragment_ids(self, sample_text):
        repo = InMemoryTextRepository()
        fragment = self._fragment(sample_text.id, 0)

        with pytest.raises(EntityAlreadyExistsError):
            repo.create_text(sample_text, [fragment, fragment])

        assert repo.get_text_info(sample_text.id) is None
        assert repo.list_fragments_by_text(sample_text.id) == []


class TestInMemorySessionRepository:
    def test_create_and_get(self, sample_session):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        assert repo.get_session(sample_session.id) == sample_session
        assert repo.get_session("missing") is None

    def test_duplicate_raises(self, sample_session):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        with pytest.raises(EntityAlreadyExistsError):
            repo.create_session(sample_session)

    def test_mutating_fetched_session_does_not_touch_store(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        fetched = repo.get_session(sample_session.id)
        fetched.record_line_completed(90.0, 40.0, now)

        assert repo.get_session(sample_session.id).completed_lines == 0

    def test_mutating_original_after_create_does_not_touch_store(
        self, sample_session, now
    ):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        sample_session.mark_completed(now)

        assert repo.get_session(sample_session.id).is_completed is False

    def test_update_replaces_state(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        fetched = repo.get_session(sample_session.id)
        fetched.record_line_completed(90.0, 40.0, now)
        repo.update_session(fetched)

        stored = repo.get_session(sample_session.id)
        assert stored.completed_lines == 1
        assert stored.average_wpm == 40.0

    def test_update_missing_raises(self, sample_session):
        repo = InMemorySessionRepository()

        with pytest.raises(EntityNotFoundError):
            repo.update_session(sample_session)

    def test_mutate_session_applies_and_returns_copy(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        updated = repo.mutate_session(
            sample_session.id, lambda s: s.record_line_completed(90.0, 40.0, now)
        )
        updated.mark_completed(now)

        stored = repo.get_session(sample_session.id)
        assert stored.completed_lines == 1
        assert stored.is_completed is False

    def test_mutate_session_failure_keeps_state(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        with pytest.raises(InvalidSessionOpError):
            repo.mutate_session(
                sample_session.id,
                lambda s: s.record_line_completed(150.0, 40.0, now),
            )

        assert repo.get_session(sample_session.id) == sample_session

    def test_mutate_missing_session_raises(self):
        with pytest.raises(EntityNotFoundError):
            InMemorySessionRepository().mutate_session("missing", lambda s: None)

    def test_concurrent_mutations_are_not_lost(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)

        def record(_: int) -> None:
            repo.mutate_session(
                sample_session.id,
                lambda s: s.record_line_completed(100.0, 50.0, now),
            )

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(record, range(200)))

        assert repo.get_session(sample_session.id).completed_lines == 200

    def test_list_by_user(self, sample_session, now):
        repo = InMemorySessionRepository()
        repo.create_session(sample_session)
        repo.create_session(Session.create("s-other", "user-2", "text-1", now))

        sessions = repo.list_sessions_by_user(sample_session.user_id)

        assert [s.id for s in sessions] == [sample_session.id]
        sessions[0].mark_completed(now)
        assert repo.get_session(sample_session.id).is_completed is False

    def test_concurrent_creates(self, now):
        repo = InMemorySessionRepository()

        def create(i: int) -> None:
            repo.create_session(Session.create(f"s{i}", "u1", "t1", now))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(create, range(200)))

        assert len(repo.list_sessions_by_user("u1")) == 200

