"""Rejection taxonomy for player input.

None of these are fatal: the gateway catches ``GameError``, logs it and
drops the request without touching session state or replying.
"""


class GameError(Exception):
    reason = 'game_error'

    def __init__(self, message=None):
        super().__init__(message or self.reason)


class GameOver(GameError):
    reason = 'game_over'


class OutOfBounds(GameError):
    reason = 'out_of_bounds'


class CellOccupied(GameError):
    reason = 'cell_occupied'


class StashEmpty(GameError):
    reason = 'stash_empty'


class NotYourTurn(GameError):
    reason = 'not_your_turn'


class NotASeatedPlayer(GameError):
    reason = 'not_a_seated_player'


class UnauthorizedReset(GameError):
    reason = 'unauthorized_reset'


class UnknownSession(GameError):
    reason = 'unknown_session'


class MalformedMessage(ValueError):
    """An inbound event whose shape does not match any message variant."""
