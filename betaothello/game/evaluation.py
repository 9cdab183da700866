"""Positional evaluation of a board state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .errors import InvalidArgumentError
from .types import BOARD_SIZE, Cell, validate_player

if TYPE_CHECKING:
    from .board import BoardState

Weights = Sequence[Sequence[int]]

# Indexed [y][x]. Corners are stable, the cells handing the opponent a corner are traps.
FIELD_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (50, -5, 4, 4, 4, 4, -5, 50),
    (-5, -10, 1, 1, 1, 1, -10, -5),
    (4, 1, 1, 1, 1, 1, 1, 4),
    (4, 1, 1, 1, 1, 1, 1, 4),
    (4, 1, 1, 1, 1, 1, 1, 4),
    (4, 1, 1, 1, 1, 1, 1, 4),
    (-5, -10, 1, 1, 1, 1, -10, -5),
    (50, -5, 4, 4, 4, 4, -5, 50),
)

# 32-bit extremes halved so scores can be combined up the search tree without overflow
MAX_SCORE = 2**31 - 1
MIN_SCORE = -(2**31)
WIN_SCORE = MAX_SCORE // 2
LOSS_SCORE = MIN_SCORE // 2


def validate_weights(weights: Weights) -> None:
    if weights is None:
        raise InvalidArgumentError("weights must not be None")
    if len(weights) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in weights):
        raise InvalidArgumentError("weights must be an 8x8 table")


def weighted_count(state: BoardState, player: Cell, weights: Weights) -> int:
    """Sum of weights[y][x] over every cell `player` occupies."""
    return sum(weights[p.y][p.x] for p in state.positions_of(player))


def rate_state(state: BoardState, player: Cell, weights: Weights = FIELD_WEIGHTS) -> int:
    """Score `state` from `player`'s point of view.

    A won position scores WIN_SCORE and a lost one LOSS_SCORE. Otherwise the
    weighted disk count minus the opponent's mobility.
    """
    validate_player(player)
    validate_weights(weights)
    return evaluate(state, player, weights)


def evaluate(state: BoardState, player: Cell, weights: Weights) -> int:
    """Same score as `rate_state` without checking the arguments.

    The search calls this once per explored node; `player` must be BLACK or
    WHITE and `weights` an 8x8 table.
    """
    opponent = player.opponent
    winner = state.winner()
    if winner is player:
        return WIN_SCORE
    if winner is opponent:
        return LOSS_SCORE
    return weighted_count(state, player, weights) - len(state.legal_moves(opponent, deep=True))
