from flask import current_app, request
from flask_socketio import emit, join_room
from typing import Optional

from berserker import get_gateway, socketio
from berserker.errors import MalformedMessage
from berserker.messages import parse_message
from berserker.models import SEAT_COLORS
from berserker.services.games.gateway import Outcome


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _dispatch(event: str, data) -> Optional[Outcome]:
    """Parse and apply one event. Malformed events are logged and dropped."""
    try:
        message = parse_message(event, data)
    except MalformedMessage as exc:
        current_app.logger.warning(f"[malformed] event={event} sid={_get_sid()} error={exc}")
        return None
    return get_gateway().handle(message, _get_sid())


def _broadcast(outcome: Outcome) -> None:
    emit(outcome.event, outcome.payload, to=outcome.room)


def handle_connect():
    emit('connected', {'message': 'Connected to Berserker'})


def handle_disconnect(*args):
    # Seats stay bound to the dropped sid; there is no seat release
    current_app.logger.info(f"[disconnect] sid={_get_sid()}")


def handle_join_game(data):
    outcome = _dispatch('join_game', data)
    if outcome is None:
        return
    join_room(outcome.room)
    emit('joined', {
        'room': outcome.room,
        'seat': outcome.seat,
        'color': SEAT_COLORS.get(outcome.seat) if outcome.seat else None,
    })
    _broadcast(outcome)


def handle_make_move(data):
    outcome = _dispatch('make_move', data)
    if outcome is not None:
        _broadcast(outcome)


def handle_reset_game(data):
    outcome = _dispatch('reset_game', data)
    if outcome is not None:
        _broadcast(outcome)


def handle_chat_message(data):
    outcome = _dispatch('chat_message', data)
    if outcome is not None:
        _broadcast(outcome)


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the game namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join_game', handle_join_game, namespace=namespace)
    socketio.on_event('make_move', handle_make_move, namespace=namespace)
    socketio.on_event('reset_game', handle_reset_game, namespace=namespace)
    socketio.on_event('chat_message', handle_chat_message, namespace=namespace)
    socketio.on_event('ping', handle_ping, namespace=namespace)
