from typing import Dict, List, Optional

from berserker.errors import OutOfBounds

RED = 'red'
WHITE = 'white'
COLORS = (RED, WHITE)

HOST = 'host'
GUEST = 'guest'
SEAT_COLORS = {HOST: RED, GUEST: WHITE}

DEFAULT_BOARD_SIZE = 6
DEFAULT_INITIAL_STASH = 8


def other_color(color: str) -> str:
    return WHITE if color == RED else RED


class Board:
    """Square grid of cells holding ``None`` or a color."""

    def __init__(self, size=DEFAULT_BOARD_SIZE):
        if size < 1:
            raise ValueError(f'board size must be positive, got {size}')
        self._size = size
        self._cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, row, col) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row, col) -> Optional[str]:
        if not self.in_bounds(row, col):
            raise OutOfBounds(f'({row}, {col}) is off a {self._size}x{self._size} board')
        return self._cells[row][col]

    def set(self, row, col, color: Optional[str]) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(f'({row}, {col}) is off a {self._size}x{self._size} board')
        if color is not None and color not in COLORS:
            raise ValueError(f'unknown color {color!r}')
        self._cells[row][col] = color

    def count(self, color: str) -> int:
        return sum(row.count(color) for row in self._cells)

    def copy(self) -> 'Board':
        clone = Board(self._size)
        clone._cells = [list(row) for row in self._cells]
        return clone

    def to_list(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self._cells]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self):
        return f'Board(size={self._size}, red={self.count(RED)}, white={self.count(WHITE)})'


class Seat:
    def __init__(self, connection_id: str, name: str):
        self.connection_id = connection_id
        self.name = name

    def to_dict(self):
        return {'name': self.name}

    def __repr__(self):
        return f'Seat(connection_id={self.connection_id!r}, name={self.name!r})'


class GameSession:
    """One game: board, stashes, turn, winner and the two seats."""

    def __init__(self, session_id: str, board_size=DEFAULT_BOARD_SIZE, initial_stash=DEFAULT_INITIAL_STASH):
        self.session_id = session_id
        self.initial_stash = initial_stash
        self.board = Board(board_size)
        self.stash: Dict[str, int] = {color: initial_stash for color in COLORS}
        self.current_player = RED
        self.winner: Optional[str] = None
        self.move_count = 0
        self.seats: Dict[str, Optional[Seat]] = {HOST: None, GUEST: None}

    def fresh_copy(self) -> 'GameSession':
        """New game in the same room: empty board, seats carried over."""
        replacement = GameSession(self.session_id, self.board.size, self.initial_stash)
        replacement.seats = dict(self.seats)
        return replacement

    def state_key(self):
        """Everything a move may change, for before/after comparisons."""
        return (
            tuple(tuple(row) for row in self.board.to_list()),
            tuple(sorted(self.stash.items())),
            self.current_player,
            self.winner,
        )

    def to_dict(self):
        return {
            'sessionId': self.session_id,
            'board': self.board.to_list(),
            'stash': dict(self.stash),
            'currentPlayer': self.current_player,
            'winner': self.winner,
            'players': {
                role: seat.to_dict() if seat else None
                for role, seat in self.seats.items()
            },
            'moveCount': self.move_count,
        }
