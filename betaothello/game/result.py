"""Final outcome of a game, as handed to a score keeper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, NamedTuple, Optional

from .board import BoardState
from .types import Cell

if TYPE_CHECKING:
    from betaothello.agent.base import Agent


class GameResult(NamedTuple):
    winner: Cell  # Cell.EMPTY for a draw
    name: str
    score: int

    @property
    def is_draw(self) -> bool:
        return self.winner is Cell.EMPTY

    def __str__(self) -> str:
        if self.is_draw:
            return f"Draw ({self.score}-{self.score})"
        who = self.name or str(self.winner)
        return f"{who} ({self.winner}) wins with {self.score} disks"


def game_result(state: BoardState, players: Mapping[Cell, Agent]) -> Optional[GameResult]:
    """Winner, winner's name and disk count once the game is over, else None."""
    winner = state.winner()
    if winner is None:
        return None
    if winner is Cell.EMPTY:
        return GameResult(winner, "", state.count_cells(Cell.BLACK))
    player = players.get(winner)
    name = player.name if player is not None else ""
    return GameResult(winner, name, state.count_cells(winner))
