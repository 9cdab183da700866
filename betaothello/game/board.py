from __future__ import annotations

from typing import Optional, Sequence

from .errors import InvalidArgumentError, InvalidMoveError
from .evaluation import FIELD_WEIGHTS, Weights, rate_state
from .types import ALL_POSITIONS, BOARD_SIZE, Cell, Position, validate_player

# Each axis is a pair of opposite directions: vertical, horizontal, diagonal, anti-diagonal
AXES: tuple[tuple[tuple[int, int], tuple[int, int]], ...] = (
    ((0, 1), (0, -1)),
    ((1, 0), (-1, 0)),
    ((1, 1), (-1, -1)),
    ((1, -1), (-1, 1)),
)

CELL_CHARS = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
CHAR_CELLS = {c: cell for cell, c in CELL_CHARS.items()}

Grid = tuple[tuple[Cell, ...], ...]


def _neighbours(pos: Position) -> tuple[Position, ...]:
    return tuple(
        Position.of(pos.x + dx, pos.y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx or dy)
        and 0 <= pos.x + dx < BOARD_SIZE
        and 0 <= pos.y + dy < BOARD_SIZE
    )


NEIGHBOURS: dict[Position, tuple[Position, ...]] = {p: _neighbours(p) for p in ALL_POSITIONS}


def _initial_grid() -> Grid:
    cells = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    cells[3][3] = Cell.WHITE
    cells[4][4] = Cell.WHITE
    cells[4][3] = Cell.BLACK
    cells[3][4] = Cell.BLACK
    return tuple(tuple(column) for column in cells)


class BoardState:
    """Immutable 8x8 Othello position.

    The grid is stored column-major (``grid[x][y]``). The only mutable part is
    a private memo of ``legal_moves`` results keyed by (player, deep); it
    belongs to this instance alone and never changes what a query returns.
    """

    def __init__(self, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = _initial_grid()
        elif len(grid) != BOARD_SIZE or any(
            len(column) != BOARD_SIZE or not all(isinstance(c, Cell) for c in column)
            for column in grid
        ):
            raise InvalidArgumentError("grid must be 8 columns of 8 Cell values")
        self._grid: Grid = tuple(tuple(column) for column in grid)
        self._moves_cache: dict[tuple[Cell, bool], frozenset[Position]] = {}

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> BoardState:
        """Build a state from 8 strings of 8 characters ('.', 'B', 'W'), top row first."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise InvalidArgumentError("expected 8 rows of 8 characters")
        try:
            grid = tuple(
                tuple(CHAR_CELLS[rows[y][x].upper()] for y in range(BOARD_SIZE))
                for x in range(BOARD_SIZE)
            )
        except KeyError as exc:
            raise InvalidArgumentError(f"unknown cell character {exc.args[0]!r}") from exc
        return cls(grid)

    @classmethod
    def _from_trusted_grid(cls, grid: Grid) -> BoardState:
        state = cls.__new__(cls)
        state._grid = grid
        state._moves_cache = {}
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __str__(self) -> str:
        return "\n".join(
            "".join(CELL_CHARS[self._grid[x][y]] for x in range(BOARD_SIZE))
            for y in range(BOARD_SIZE)
        )

    def __repr__(self) -> str:
        return f"BoardState.from_rows({str(self).splitlines()!r})"

    # -- cell access ---------------------------------------------------------

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise InvalidArgumentError(f"invalid field position: [{x}][{y}]")
        return self._grid[x][y]

    def cell_at(self, pos: Position) -> Cell:
        if pos is None:
            raise InvalidArgumentError("position must not be None")
        return self.cell(pos.x, pos.y)

    def count_cells(self, cell: Cell) -> int:
        if not isinstance(cell, Cell):
            raise InvalidArgumentError(f"cell must be a Cell, got {cell!r}")
        return sum(column.count(cell) for column in self._grid)

    def positions_of(self, cell: Cell) -> frozenset[Position]:
        if not isinstance(cell, Cell):
            raise InvalidArgumentError(f"cell must be a Cell, got {cell!r}")
        return frozenset(p for p in ALL_POSITIONS if self._grid[p.x][p.y] is cell)

    # -- rules ---------------------------------------------------------------

    def legal_moves(self, player: Cell, deep: bool = True) -> frozenset[Position]:
        """Positions where `player` may place a disk.

        With ``deep=False`` this is the cheap superset of empty cells next to
        an opponent disk; with ``deep=True`` only those that flip something.
        """
        validate_player(player)
        key = (player, deep)
        cached = self._moves_cache.get(key)
        if cached is not None:
            return cached

        opponent = player.opponent
        candidates: set[Position] = set()
        for pos in self.positions_of(opponent):
            for n in NEIGHBOURS[pos]:
                if self._grid[n.x][n.y] is Cell.EMPTY:
                    candidates.add(n)

        if deep:
            moves = frozenset(p for p in candidates if self.lines_to_flip(p, player))
        else:
            moves = frozenset(candidates)
        self._moves_cache[key] = moves
        return moves

    def lines_to_flip(self, pos: Position, player: Cell) -> list[list[Position]]:
        """Opponent disks that placing at `pos` would flip, one list per axis."""
        self.cell_at(pos)
        validate_player(player)

        lines: list[list[Position]] = []
        for forward, backward in AXES:
            line = self._scan(pos, forward, player) + self._scan(pos, backward, player)
            if line:
                lines.append(line)
        return lines

    def _scan(self, pos: Position, direction: tuple[int, int], player: Cell) -> list[Position]:
        """Run of opponent disks from `pos` in one direction, if a `player` disk closes it."""
        dx, dy = direction
        run: list[Position] = []
        x, y = pos.x + dx, pos.y + dy
        while 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
            cell = self._grid[x][y]
            if cell is player:
                return run
            if cell is Cell.EMPTY:
                break
            run.append(Position.of(x, y))
            x += dx
            y += dy
        # Hit an empty cell or the edge before reaching one of our own disks
        return []

    def apply_move(self, player: Cell, pos: Position) -> BoardState:
        """Return the state after `player` places a disk at `pos`."""
        validate_player(player)
        self.cell_at(pos)
        if pos not in self.legal_moves(player, deep=True):
            raise InvalidMoveError(
                f"{pos} is not a valid move for player {player}", player=player, position=pos
            )
        lines = self.lines_to_flip(pos, player)
        if not lines:
            raise InvalidMoveError(
                f"{pos} does not flip any disk for player {player}", player=player, position=pos
            )

        cells = [list(column) for column in self._grid]
        for line in lines:
            for flipped in line:
                _set_flipped(cells, flipped, player)
        _set_flipped(cells, pos, player)
        return BoardState._from_trusted_grid(tuple(tuple(column) for column in cells))

    def is_game_over(self) -> bool:
        return (
            not self.legal_moves(Cell.BLACK, deep=True)
            and not self.legal_moves(Cell.WHITE, deep=True)
        )

    def winner(self) -> Optional[Cell]:
        """Winning colour, Cell.EMPTY for a draw, None while the game is running."""
        if not self.is_game_over():
            return None
        black = self.count_cells(Cell.BLACK)
        white = self.count_cells(Cell.WHITE)
        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return Cell.EMPTY

    def points(self, player: Cell) -> int:
        """Disk count, with the empty cells awarded to the winner of a finished game."""
        validate_player(player)
        num = self.count_cells(player)
        if self.winner() is player:
            return num + self.count_cells(Cell.EMPTY)
        return num

    def rate(self, player: Cell, weights: Weights = FIELD_WEIGHTS) -> int:
        return rate_state(self, player, weights)


def _set_flipped(cells: list[list[Cell]], pos: Position, player: Cell) -> None:
    assert cells[pos.x][pos.y] is not player, f"{pos} did not flip to {player}"
    cells[pos.x][pos.y] = player
