from __future__ import annotations

import abc
from typing import Optional

from betaothello.game.board import BoardState
from betaothello.game.types import Cell, Position, validate_player


class Agent(abc.ABC):
    """Something that plays one colour. The set of kinds is closed: HumanPlayer, SearchAgent."""

    def __init__(self, color: Cell, name: Optional[str] = None) -> None:
        self.color = validate_player(color)
        self._name = name

    @abc.abstractmethod
    def select_move(self, state: BoardState) -> Optional[Position]:
        """Return the position this agent wants to play, or None."""

    @property
    def name(self) -> str:
        return self._name if self._name is not None else self.__class__.__name__

    @property
    def is_human(self) -> bool:
        return False
