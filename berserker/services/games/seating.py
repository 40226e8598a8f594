from typing import Optional

from berserker.errors import NotASeatedPlayer, UnauthorizedReset
from berserker.models import GUEST, HOST, SEAT_COLORS, GameSession, Seat


def seat_of(session: GameSession, connection_id: str) -> Optional[str]:
    for role, seat in session.seats.items():
        if seat is not None and seat.connection_id == connection_id:
            return role
    return None


def color_for_seat(role: str) -> str:
    return SEAT_COLORS[role]


def assign_seat(session: GameSession, connection_id: str, name: str) -> Optional[str]:
    """Seat a joining connection in join order.

    Returns ``'host'``, ``'guest'``, or ``None`` for an observer. A
    connection that already holds a seat keeps it.
    """
    existing = seat_of(session, connection_id)
    if existing:
        return existing
    for role in (HOST, GUEST):
        if session.seats[role] is None:
            session.seats[role] = Seat(connection_id, name)
            return role
    return None


def require_seat(session: GameSession, connection_id: str) -> str:
    role = seat_of(session, connection_id)
    if role is None:
        raise NotASeatedPlayer(f'{connection_id} has no seat in {session.session_id}')
    return role


def require_host(session: GameSession, connection_id: str) -> None:
    if seat_of(session, connection_id) != HOST:
        raise UnauthorizedReset(f'{connection_id} is not the host of {session.session_id}')
