"""Inbound socket messages.

Every socket event the server acts on is parsed into one of the
dataclasses below before it reaches the gateway; anything else is a
``MalformedMessage``.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

from berserker.errors import MalformedMessage

DEFAULT_PLAYER_NAME = 'Anonymous'
MAX_NAME_LENGTH = 64
MAX_CHAT_LENGTH = 500


@dataclass(frozen=True)
class JoinMessage:
    session_id: str
    name: str


@dataclass(frozen=True)
class MoveMessage:
    session_id: str
    row: int
    col: int


@dataclass(frozen=True)
class ResetMessage:
    session_id: str


@dataclass(frozen=True)
class ChatMessage:
    session_id: str
    author: str
    text: str


Message = Union[JoinMessage, MoveMessage, ResetMessage, ChatMessage]


def _session_id(data: Dict[str, Any]) -> str:
    session_id = data.get('sessionId')
    if not isinstance(session_id, str) or not session_id.strip():
        raise MalformedMessage('sessionId is required')
    return session_id.strip()


def _coordinate(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; True is not a row
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedMessage(f'{key} must be an integer')
    return value


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MalformedMessage(f'{key} must be a string')
    return value


def _parse_join(data):
    name = data.get('name')
    if name is not None and not isinstance(name, str):
        raise MalformedMessage('name must be a string')
    name = (name or '').strip()[:MAX_NAME_LENGTH] or DEFAULT_PLAYER_NAME
    return JoinMessage(_session_id(data), name)


def _parse_move(data):
    return MoveMessage(_session_id(data), _coordinate(data, 'row'), _coordinate(data, 'col'))


def _parse_reset(data):
    return ResetMessage(_session_id(data))


def _parse_chat(data):
    author = _text(data, 'author').strip()[:MAX_NAME_LENGTH] or DEFAULT_PLAYER_NAME
    return ChatMessage(_session_id(data), author, _text(data, 'text')[:MAX_CHAT_LENGTH])


PARSERS = {
    'join_game': _parse_join,
    'make_move': _parse_move,
    'reset_game': _parse_reset,
    'chat_message': _parse_chat,
}


def parse_message(event: str, data) -> Message:
    parser = PARSERS.get(event)
    if parser is None:
        raise MalformedMessage(f'unknown event {event!r}')
    if not isinstance(data, dict):
        raise MalformedMessage(f'{event} payload must be an object, got {type(data).__name__}')
    return parser(data)
