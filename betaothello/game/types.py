from __future__ import annotations

import enum
from typing import NamedTuple, Optional

from .errors import InvalidArgumentError

BOARD_SIZE = 8

# Column labels: A-H
COL_LABELS = "ABCDEFGH"


class Cell(enum.Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> Cell:
        if self is Cell.EMPTY:
            raise InvalidArgumentError("Cell.EMPTY has no opponent")
        return Cell.WHITE if self is Cell.BLACK else Cell.BLACK

    @property
    def is_player(self) -> bool:
        return self is not Cell.EMPTY

    def __str__(self) -> str:
        return self.name.capitalize()


class Position(NamedTuple):
    x: int  # 0 = leftmost column
    y: int  # 0 = topmost row

    @classmethod
    def of(cls, x: int, y: int) -> Position:
        """Return the pooled position for (x, y)."""
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise InvalidArgumentError(f"invalid field position: [{x}][{y}]")
        return _POOL[x][y]

    def __str__(self) -> str:
        return format_position(self)


_POOL: tuple[tuple[Position, ...], ...] = tuple(
    tuple(Position(x, y) for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)
)

# All 64 positions in (x, y) order
ALL_POSITIONS: tuple[Position, ...] = tuple(p for column in _POOL for p in column)


def validate_player(player: object) -> Cell:
    """Return `player` if it is BLACK or WHITE, raise InvalidArgumentError otherwise."""
    if player is None:
        raise InvalidArgumentError("player must not be None")
    if not isinstance(player, Cell):
        raise InvalidArgumentError(f"player must be a Cell, got {player!r}")
    if player is Cell.EMPTY:
        raise InvalidArgumentError("player must not be Cell.EMPTY")
    return player


def format_position(pos: Position) -> str:
    """Format a Position as a coordinate string like 'C4'."""
    return f"{COL_LABELS[pos.x]}{pos.y + 1}"


def parse_position(text: str) -> Optional[Position]:
    """Parse a coordinate string like 'C4' into a Position.

    Column is a letter A-H, row is a number 1-8.
    Returns None if the string is invalid.
    """
    text = text.strip().upper()
    if len(text) != 2:
        return None
    col_char, row_char = text
    if col_char not in COL_LABELS or not row_char.isdigit():
        return None
    row = int(row_char)
    if not (1 <= row <= BOARD_SIZE):
        return None
    return Position.of(COL_LABELS.index(col_char), row - 1)
