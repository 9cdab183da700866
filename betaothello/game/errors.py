"""Error types raised by the Othello core.

Two kinds are kept apart so callers can tell a programming error from a move
the rules rejected:

- InvalidArgumentError: malformed input (out-of-range coordinates, EMPTY or
  None where a player is required, bad weight tables). Never recovered.
- InvalidMoveError: a well-formed position that is not a legal move for the
  acting player. A UI re-prompts the human.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .types import Cell, Position


class OthelloError(Exception):
    """Base exception for all Othello errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
    """
    code: str = "OTHELLO_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidArgumentError(OthelloError, ValueError):
    """Caller passed a value the core cannot work with."""
    code: str = "INVALID_ARGUMENT"


class InvalidMoveError(OthelloError):
    """Position is not a legal move for the acting player."""
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        player: Optional[Cell] = None,
        position: Optional[Position] = None,
    ) -> None:
        super().__init__(message)
        self.player = player
        self.position = position
