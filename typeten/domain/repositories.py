"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for users, texts (+ fragments) and sessions.
- Keep the application/domain independent from the storage implementation.
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: User, TextInfo, TextFragment, Session
- domain.errors: EntityAlreadyExistsError, EntityNotFoundError
- infrastructure.repositories.in_memory: thread-safe implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- create_* raises EntityAlreadyExistsError on duplicate ids.
- get_* returns None when the entity does not exist.
- update_* / mutate_* raise EntityNotFoundError when the entity does not exist.
- Writes that touch several records (create_text, mutate_session) are atomic.
- list_* order is not part of the contract.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- Implementations must never hand out references to their internal state.
"""

from typing import Callable, List, Optional, Protocol, Sequence

from .entities import Session, TextFragment, TextInfo, User


class UserRepository(Protocol):
    """R: Interface for user persistence."""

    def create_user(self, user: User) -> None:
        """R: Persist a new user (EntityAlreadyExistsError on duplicate id)."""
        ...

    def get_user(self, user_id: str) -> Optional[User]:
        """R: Fetch user by id."""
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        """R: Fetch user by (trimmed) email; used for uniqueness checks."""
        ...


class TextRepository(Protocol):
    """
    R: Interface for text metadata and fragment persistence.

    Fragments are owned by their text: they are only created through this
    repository and never updated.
    """

    def create_text_info(self, info: TextInfo) -> None: ...

    def get_text_info(self, text_id: str) -> Optional[TextInfo]: ...

    def list_texts_by_user(self, user_id: str) -> List[TextInfo]: ...

    def create_fragment(self, fragment: TextFragment) -> None: ...

    def get_fragment(self, fragment_id: str) -> Optional[TextFragment]: ...

    def list_fragments_by_text(self, text_id: str) -> List[TextFragment]:
        """R: All fragments of a text (callers sort by fragment_idx)."""
        ...

    def create_text(self, info: TextInfo, fragments: Sequence[TextFragment]) -> None:
        """
        R: Persist a text and all its fragments, or nothing.

        EntityAlreadyExistsError if the text id or any fragment id is taken
        (or repeated within `fragments`); in that case nothing is stored.
        """
        ...


class SessionRepository(Protocol):
    """R: Interface for typing session persistence."""

    def create_session(self, session: Session) -> None: ...

    def get_session(self, session_id: str) -> Optional[Session]: ...

    def update_session(self, session: Session) -> None:
        """R: Replace stored state (EntityNotFoundError if unknown)."""
        ...

    def mutate_session(
        self, session_id: str, mutate: Callable[[Session], None]
    ) -> Session:
        """
        R: Atomic read-modify-write of one session.

        `mutate` receives a working copy of the stored session. If it returns,
        the copy replaces the stored state and a copy of it is returned; if it
        raises, the exception propagates and nothing is stored.
        EntityNotFoundError if the session does not exist.
        """
        ...

    def list_sessions_by_user(self, user_id: str) -> List[Session]: ...
