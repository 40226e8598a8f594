import uuid
from typing import MutableMapping, Optional

from berserker.errors import UnknownSession
from berserker.models import DEFAULT_BOARD_SIZE, DEFAULT_INITIAL_STASH, GameSession


class SessionRegistry:
    """Session id -> GameSession.

    Storage is any mutable mapping so a bounded or external store can be
    swapped in. Sessions are never evicted. Callers serialize access.
    """

    def __init__(self, storage: Optional[MutableMapping[str, GameSession]] = None,
                 board_size=DEFAULT_BOARD_SIZE, initial_stash=DEFAULT_INITIAL_STASH):
        self._sessions = storage if storage is not None else {}
        self.board_size = board_size
        self.initial_stash = initial_stash

    def _new_session(self, session_id: str) -> GameSession:
        return GameSession(session_id, self.board_size, self.initial_stash)

    def create(self) -> GameSession:
        session_id = uuid.uuid4().hex
        while session_id in self._sessions:
            session_id = uuid.uuid4().hex
        session = self._new_session(session_id)
        self._sessions[session_id] = session
        return session

    def get(self, session_id: str) -> GameSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise UnknownSession(f'no session {session_id!r}') from None

    def get_or_create(self, session_id: str) -> GameSession:
        session = self._sessions.get(session_id)
        if session is None:
            session = self._new_session(session_id)
            self._sessions[session_id] = session
        return session

    def reset(self, session_id: str) -> GameSession:
        session = self.get(session_id).fresh_copy()
        self._sessions[session_id] = session
        return session

    def __contains__(self, session_id):
        return session_id in self._sessions

    def __len__(self):
        return len(self._sessions)
