from typing import List, NamedTuple, Optional, Tuple

from berserker.errors import CellOccupied, GameOver, NotYourTurn, OutOfBounds, StashEmpty
from berserker.models import Board, GameSession, other_color

DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)

# horizontal, vertical, diagonal-down, diagonal-up
LINE_ORIENTATIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

DEFAULT_LINE_LENGTH = 3


class Push(NamedTuple):
    origin: Tuple[int, int]
    destination: Optional[Tuple[int, int]]  # None when pushed off the board
    color: str


class PlacementResult(NamedTuple):
    row: int
    col: int
    color: str
    pushes: List[Push]
    winner: Optional[str]


def compute_pushes(board: Board, row: int, col: int) -> List[Push]:
    """Pushes caused by a pawn standing at (row, col).

    Every direction is evaluated against ``board`` as given; only the
    directly adjacent pawn can move, and only by one cell.
    """
    pushes = []
    for dr, dc in DIRECTIONS:
        adj_r, adj_c = row + dr, col + dc
        if not board.in_bounds(adj_r, adj_c):
            continue
        occupant = board.get(adj_r, adj_c)
        if occupant is None:
            continue
        next_r, next_c = adj_r + dr, adj_c + dc
        if not board.in_bounds(next_r, next_c):
            pushes.append(Push((adj_r, adj_c), None, occupant))
        elif board.get(next_r, next_c) is None:
            pushes.append(Push((adj_r, adj_c), (next_r, next_c), occupant))
    return pushes


def find_line_winner(board: Board, length=DEFAULT_LINE_LENGTH) -> Optional[str]:
    """First color holding ``length`` in a row, scanning row-major."""
    for r in range(board.size):
        for c in range(board.size):
            color = board.get(r, c)
            if color is None:
                continue
            for dr, dc in LINE_ORIENTATIONS:
                if all(
                    board.in_bounds(r + dr * i, c + dc * i) and board.get(r + dr * i, c + dc * i) == color
                    for i in range(1, length)
                ):
                    return color
    return None


def check_placement(session: GameSession, row: int, col: int, acting_color: str) -> None:
    """Raise the first rejection that applies to this placement, if any."""
    if session.winner:
        raise GameOver(f'{session.winner} already won')
    if not session.board.in_bounds(row, col):
        raise OutOfBounds(f'({row}, {col}) is off the board')
    if session.board.get(row, col) is not None:
        raise CellOccupied(f'({row}, {col}) is taken')
    if session.stash.get(acting_color, 0) <= 0:
        raise StashEmpty(f'{acting_color} has no pawns left')
    if acting_color != session.current_player:
        raise NotYourTurn(f'{session.current_player} to move, not {acting_color}')


def resolve_placement(session: GameSession, row: int, col: int, acting_color: str,
                      line_length=DEFAULT_LINE_LENGTH) -> PlacementResult:
    """Place a pawn, apply pushes, settle the winner or pass the turn.

    The new position is built on copies and written back to ``session``
    in a single step, so a rejected move leaves it untouched.
    """
    check_placement(session, row, col, acting_color)

    board = session.board.copy()
    stash = dict(session.stash)

    board.set(row, col, acting_color)
    stash[acting_color] -= 1

    pushes = compute_pushes(board, row, col)
    for push in pushes:
        board.set(*push.origin, None)
    for push in pushes:
        if push.destination is None:
            stash[push.color] += 1
        else:
            board.set(*push.destination, push.color)

    if stash[acting_color] == 0:
        winner = acting_color
    else:
        winner = find_line_winner(board, line_length)

    session.board = board
    session.stash = stash
    session.winner = winner
    session.move_count += 1
    if winner is None:
        session.current_player = other_color(acting_color)

    return PlacementResult(row, col, acting_color, pushes, winner)
