import logging
import threading
from typing import NamedTuple, Optional

from berserker.errors import GameError
from berserker.messages import ChatMessage, JoinMessage, Message, MoveMessage, ResetMessage
from berserker.services.games.registry import SessionRegistry
from berserker.services.games.rules import DEFAULT_LINE_LENGTH, resolve_placement
from berserker.services.games.seating import (
    assign_seat,
    color_for_seat,
    require_host,
    require_seat,
    seat_of,
)

_default_logger = logging.getLogger(__name__)

STATE_EVENT = 'state_update'
CHAT_EVENT = 'chat_message'


def room_for(session_id: str) -> str:
    return f"game:{session_id}"


class Outcome(NamedTuple):
    room: str
    event: str
    payload: dict
    seat: Optional[str] = None


class GameGateway:
    """Applies one inbound message at a time to the session registry.

    ``handle`` returns what has to be emitted to the session's room, or
    ``None`` when the message was rejected. Rejections are logged and
    never reported back to the sender.
    """

    def __init__(self, registry: SessionRegistry, line_length=DEFAULT_LINE_LENGTH, allow_hotseat=False,
                 logger=None):
        self.registry = registry
        # create_app hands in app.logger
        self.logger = logger or _default_logger
        self.line_length = line_length
        self.allow_hotseat = allow_hotseat
        # Socket handlers may run on worker threads
        self._lock = threading.RLock()
        self._handlers = {
            JoinMessage: ('join', self._join),
            MoveMessage: ('move', self._move),
            ResetMessage: ('reset', self._reset),
            ChatMessage: ('chat', self._chat),
        }

    def handle(self, message: Message, connection_id: str) -> Optional[Outcome]:
        entry = self._handlers.get(type(message))
        if entry is None:
            raise TypeError(f'no handler for {type(message).__name__}')
        tag, handler = entry
        with self._lock:
            try:
                return handler(message, connection_id)
            except GameError as exc:
                self.logger.info(
                    f"[{tag}-reject] session={message.session_id} sid={connection_id} "
                    f"reason={exc.reason} detail={exc}"
                )
                return None

    def _join(self, message: JoinMessage, connection_id: str) -> Outcome:
        session = self.registry.get_or_create(message.session_id)
        role = assign_seat(session, connection_id, message.name)
        self.logger.info(f"[join] session={session.session_id} sid={connection_id} name={message.name!r} seat={role}")
        return Outcome(room_for(session.session_id), STATE_EVENT, session.to_dict(), seat=role)

    def _move(self, message: MoveMessage, connection_id: str) -> Outcome:
        session = self.registry.get(message.session_id)
        if self.allow_hotseat:
            role = seat_of(session, connection_id)
            color = session.current_player
        else:
            role = require_seat(session, connection_id)
            color = color_for_seat(role)
        result = resolve_placement(session, message.row, message.col, color, self.line_length)
        self.logger.info(
            f"[move] session={session.session_id} seat={role} color={color} row={result.row} col={result.col} "
            f"pushes={len(result.pushes)} winner={result.winner}"
        )
        return Outcome(room_for(session.session_id), STATE_EVENT, session.to_dict())

    def _reset(self, message: ResetMessage, connection_id: str) -> Outcome:
        require_host(self.registry.get(message.session_id), connection_id)
        session = self.registry.reset(message.session_id)
        self.logger.info(f"[reset] session={session.session_id} sid={connection_id}")
        return Outcome(room_for(session.session_id), STATE_EVENT, session.to_dict())

    def _chat(self, message: ChatMessage, connection_id: str) -> Outcome:
        return Outcome(room_for(message.session_id), CHAT_EVENT, {'author': message.author, 'text': message.text})

    def create_session(self):
        with self._lock:
            return self.registry.create()

    def snapshot(self, session_id: str) -> dict:
        """Current snapshot of a session; raises ``UnknownSession``."""
        with self._lock:
            return self.registry.get(session_id).to_dict()
