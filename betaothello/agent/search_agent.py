"""Search agent: minimax with alpha-beta pruning and a positional evaluation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from betaothello.agent.base import Agent
from betaothello.game.board import BoardState
from betaothello.game.errors import InvalidArgumentError
from betaothello.game.evaluation import (
    FIELD_WEIGHTS,
    Weights,
    evaluate,
    rate_state,
    validate_weights,
)
from betaothello.game.types import Cell, Position, validate_player

logger = logging.getLogger(__name__)

INF = math.inf

DEFAULT_DEPTH = 6

# Successors expanded per node before the depth bonus (64 explores everything)
BRANCHING_CAP = 3

# Extra width near the root: depth // divisor more successors per node
MAX_BONUS_DIVISOR = 3
MIN_BONUS_DIVISOR = 2

# Whose side a leaf is rated from: the player to move at that node, or the searching player
LEAF_ACTING = "acting"
LEAF_ROOT = "root"
LEAF_PERSPECTIVES = (LEAF_ACTING, LEAF_ROOT)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchConfig:
    depth: int = DEFAULT_DEPTH
    branching_cap: int = BRANCHING_CAP
    max_bonus_divisor: int = MAX_BONUS_DIVISOR
    min_bonus_divisor: int = MIN_BONUS_DIVISOR
    weights: Weights = FIELD_WEIGHTS
    leaf_perspective: str = LEAF_ACTING

    def __post_init__(self) -> None:
        for name in ("depth", "branching_cap", "max_bonus_divisor", "min_bonus_divisor"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise InvalidArgumentError(f"{name} must be a positive int, got {value!r}")
        validate_weights(self.weights)
        if self.leaf_perspective not in LEAF_PERSPECTIVES:
            raise InvalidArgumentError(
                f"leaf_perspective must be one of {LEAF_PERSPECTIVES}, got {self.leaf_perspective!r}"
            )


class SearchResult(NamedTuple):
    move: Optional[Position]
    score: float
    nodes: int


# ---------------------------------------------------------------------------
# Move ordering / branching limit
# ---------------------------------------------------------------------------

class MoveValue(NamedTuple):
    value: int
    move: Position
    result: BoardState


def explore_moves(
    moves: Iterable[Position],
    state: BoardState,
    player: Cell,
    limit: int,
    weights: Weights = FIELD_WEIGHTS,
) -> list[MoveValue]:
    """Apply every move, rate the result for `player`, keep the best `limit`.

    Equal ratings keep Position order so the search is reproducible. `weights`
    is not checked here; `SearchConfig` validates it once per search.
    """
    scored = []
    for move in sorted(moves):
        result = state.apply_move(player, move)
        scored.append(MoveValue(evaluate(result, player, weights), move, result))
    scored.sort(key=lambda mv: mv.value, reverse=True)
    return scored[:limit]


# ---------------------------------------------------------------------------
# Minimax with alpha-beta
# ---------------------------------------------------------------------------

class _AlphaBeta:
    """State of a single search: the root player and the move recorded at the root."""

    def __init__(self, root: Cell, config: SearchConfig) -> None:
        self.root = root
        self.config = config
        self.best_move: Optional[Position] = None
        self.nodes = 0

    def _rate(self, state: BoardState, player: Cell) -> int:
        if self.config.leaf_perspective == LEAF_ROOT:
            player = self.root
        return evaluate(state, player, self.config.weights)

    def _leaf(self, state: BoardState, player: Cell, depth: int) -> Optional[int]:
        """Score of a node that is not expanded, or None if the search goes on."""
        moves = state.legal_moves(player, deep=True)
        if depth > 0 and len(moves) > 1 and not state.is_game_over():
            return None
        if len(moves) == 1:
            # Forced move: score the position after it
            (move,) = moves
            if depth == self.config.depth:
                self.best_move = move
            return self._rate(state.apply_move(player, move), player)
        return self._rate(state, player)

    def max(self, state: BoardState, player: Cell, depth: int, alpha: float, beta: float) -> float:
        self.nodes += 1
        leaf = self._leaf(state, player, depth)
        if leaf is not None:
            return leaf

        limit = self.config.branching_cap + depth // self.config.max_bonus_divisor
        best = alpha
        for mv in explore_moves(
            state.legal_moves(player, deep=True), state, player, limit, self.config.weights
        ):
            val = self.min(mv.result, player.opponent, depth - 1, best, beta)
            if val > best:
                best = val
                if depth == self.config.depth:
                    self.best_move = mv.move
                if best >= beta:
                    break
        return best

    def min(self, state: BoardState, player: Cell, depth: int, alpha: float, beta: float) -> float:
        self.nodes += 1
        leaf = self._leaf(state, player, depth)
        if leaf is not None:
            return leaf

        limit = self.config.branching_cap + depth // self.config.min_bonus_divisor
        best = beta
        for mv in explore_moves(
            state.legal_moves(player, deep=True), state, player, limit, self.config.weights
        ):
            val = self.max(mv.result, player.opponent, depth - 1, alpha, best)
            if val < best:
                best = val
                if best <= alpha:
                    break
        return best


def search(
    state: BoardState,
    player: Cell,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Run the alpha-beta search for `player` and report the chosen move."""
    validate_player(player)
    if state is None:
        raise InvalidArgumentError("state must not be None")
    config = config or SearchConfig()

    if not state.legal_moves(player, deep=True):
        return SearchResult(None, rate_state(state, player, config.weights), 0)

    run = _AlphaBeta(player, config)
    score = run.max(state, player, config.depth, -INF, INF)
    logger.debug(
        "search %s depth=%d: move=%s score=%s nodes=%d",
        player, config.depth, run.best_move, score, run.nodes,
    )
    return SearchResult(run.best_move, score, run.nodes)


def choose_move(
    state: BoardState,
    player: Cell,
    config: Optional[SearchConfig] = None,
) -> Optional[Position]:
    return search(state, player, config).move


# ---------------------------------------------------------------------------
# SearchAgent
# ---------------------------------------------------------------------------

class SearchAgent(Agent):
    """Alpha-beta agent with positional evaluation and a capped branching factor."""

    def __init__(
        self,
        color: Cell,
        config: Optional[SearchConfig] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(color, name)
        self.config = config or SearchConfig()

    @property
    def depth(self) -> int:
        return self.config.depth

    @property
    def name(self) -> str:
        if self._name is not None:
            return self._name
        return f"SearchAgent(d={self.depth})"

    def select_move(self, state: BoardState) -> Optional[Position]:
        return choose_move(state, self.color, self.config)
