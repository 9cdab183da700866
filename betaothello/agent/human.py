from __future__ import annotations

from typing import Optional

from betaothello.game.board import BoardState
from betaothello.game.types import Position

from .base import Agent


class HumanPlayer(Agent):
    """Moves come from the UI, so this never proposes one."""

    def select_move(self, state: BoardState) -> Optional[Position]:
        return None

    @property
    def is_human(self) -> bool:
        return True
