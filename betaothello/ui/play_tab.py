"""Play tab: Human vs Human or Human vs AI with interactive SVG board."""

from __future__ import annotations

import enum
import logging
import random as _random
import time as _time
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from betaothello.agent.base import Agent
from betaothello.agent.human import HumanPlayer
from betaothello.agent.search_agent import SearchAgent, SearchConfig
from betaothello.game.board import BoardState
from betaothello.game.errors import InvalidMoveError
from betaothello.game.result import game_result
from betaothello.game.types import Cell, Position, format_position, parse_position
from betaothello.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)


class GameMode(enum.Enum):
    PLAYER_VERSUS_PLAYER = "Player vs Player"
    PLAYER_VERSUS_AI = "Player vs AI"


AGENT_CHOICES: dict[str, SearchConfig] = {
    "SearchAgent (d=2)": SearchConfig(depth=2),
    "SearchAgent (d=4)": SearchConfig(depth=4),
    "SearchAgent (d=6)": SearchConfig(depth=6),
    "SearchAgent (d=6, full width)": SearchConfig(depth=6, branching_cap=64),
}


def make_players(
    mode: GameMode,
    human_player: Cell = Cell.BLACK,
    config: Optional[SearchConfig] = None,
) -> dict[Cell, Agent]:
    """Agents for both colours in the given mode."""
    if mode is GameMode.PLAYER_VERSUS_PLAYER:
        return {
            Cell.BLACK: HumanPlayer(Cell.BLACK, name="Player 1"),
            Cell.WHITE: HumanPlayer(Cell.WHITE, name="Player 2"),
        }
    ai = human_player.opponent
    return {
        human_player: HumanPlayer(human_player, name="You"),
        ai: SearchAgent(ai, config or next(iter(AGENT_CHOICES.values()))),
    }


@dataclass
class Move:
    player: Cell
    position: Optional[Position]  # None for a pass
    elapsed: Optional[float] = None


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    state: BoardState = field(default_factory=BoardState)
    to_move: Cell = Cell.BLACK
    mode: GameMode = GameMode.PLAYER_VERSUS_AI
    human_player: Cell = Cell.BLACK
    players: dict[Cell, Agent] = field(default_factory=dict)
    moves: list[Move] = field(default_factory=list)
    _turn_start: float = field(default_factory=_time.time)

    def __post_init__(self) -> None:
        if not self.players:
            self.players = make_players(self.mode, self.human_player)

    def reset(
        self,
        mode: Optional[GameMode] = None,
        human_player: Optional[Cell] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        if mode is not None:
            self.mode = mode
        if human_player is not None:
            self.human_player = human_player
        self.state = BoardState()
        self.to_move = Cell.BLACK
        self.moves = []
        self.players = make_players(self.mode, self.human_player, config)
        self._turn_start = _time.time()

    @property
    def is_over(self) -> bool:
        return self.state.is_game_over()

    @property
    def current_agent(self) -> Agent:
        return self.players[self.to_move]

    @property
    def last_move(self) -> Optional[Position]:
        for move in reversed(self.moves):
            if move.position is not None:
                return move.position
        return None

    def play(self, pos: Position, elapsed: Optional[float] = None) -> None:
        """Apply a move for the side to move and hand the turn over.

        Raises InvalidMoveError if `pos` is not legal; the session is unchanged then.
        """
        self.state = self.state.apply_move(self.to_move, pos)
        self.moves.append(Move(self.to_move, pos, elapsed))
        self.to_move = self.to_move.opponent
        self._turn_start = _time.time()

        if self.state.is_game_over():
            logger.info("Game over: %s", game_result(self.state, self.players))
        elif not self.state.legal_moves(self.to_move, deep=True):
            logger.debug("%s has no legal move and passes", self.to_move)
            self.moves.append(Move(self.to_move, None))
            self.to_move = self.to_move.opponent

    def advance(self) -> None:
        """Let agents move until a human has to act or the game ends."""
        while not self.state.is_game_over():
            t0 = _time.time()
            move = self.current_agent.select_move(self.state)
            if move is None:
                return
            self.play(move, elapsed=_time.time() - t0)

    def elapsed_since_turn_start(self) -> float:
        return _time.time() - self._turn_start

    @property
    def human_to_move(self) -> bool:
        return not self.is_over and self.current_agent.is_human

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        result = game_result(self.state, self.players)
        if result is None:
            return ""
        if result.is_draw:
            return "Draw!"
        if self.mode is GameMode.PLAYER_VERSUS_PLAYER:
            return f"{result.winner} wins!"
        return "You win!" if result.winner is self.human_player else "AI wins!"

    @property
    def game_over_outcome(self) -> str:
        """Banner colour key: "win" or "loss" for the human against the AI, else "neutral"."""
        result = game_result(self.state, self.players)
        if result is None or result.is_draw or self.mode is GameMode.PLAYER_VERSUS_PLAYER:
            return "neutral"
        return "win" if result.winner is self.human_player else "loss"

    @property
    def status_text(self) -> str:
        result = game_result(self.state, self.players)
        if result is not None:
            black = self.state.count_cells(Cell.BLACK)
            white = self.state.count_cells(Cell.WHITE)
            return f"Game over: {result} (Black {black}, White {white})"
        if self.human_to_move:
            return f"{self.current_agent.name} to move ({self.to_move})"
        return f"AI is thinking... ({self.to_move})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, move in enumerate(self.moves):
            where = format_position(move.position) if move.position is not None else "pass"
            t = f"{move.elapsed:.2f}" if move.elapsed is not None else "-"
            rows.append([str(i + 1), str(move.player), where, t])
        return rows


def _make_board_html(session: GameSession) -> str:
    clickable = (
        session.state.legal_moves(session.to_move, deep=True)
        if session.human_to_move
        else frozenset()
    )
    return render_board_svg(
        session.state,
        clickable_moves=clickable,
        last_move=session.last_move,
        game_over_message=session.game_over_banner,
        game_over_outcome=session.game_over_outcome,
    )


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.is_over:
        return _outputs(session) + ("",)

    if not session.human_to_move:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    point = parse_position(coord_text)
    if point is None:
        return _outputs(session, f"Invalid coordinate: '{coord_text}'. Use format like C4.") + ("",)

    try:
        session.play(point, elapsed=session.elapsed_since_turn_start())
    except InvalidMoveError:
        logger.debug("rejected human move %s for %s", point, session.to_move)
        return _outputs(session, f"{format_position(point)} is not a legal move.") + ("",)

    session.advance()
    return _outputs(session) + ("",)


def _new_game(mode_choice: str, color_choice: str, agent_choice: str, session: GameSession):
    """Start a new game. color_choice is 'Black', 'White', or 'Random'."""
    mode = GameMode(mode_choice)
    if color_choice == "Random":
        human = _random.choice([Cell.BLACK, Cell.WHITE])
    elif color_choice == "White":
        human = Cell.WHITE
    else:
        human = Cell.BLACK

    config = AGENT_CHOICES.get(agent_choice)
    session.reset(mode=mode, human_player=human, config=config)
    # If the AI is Black it opens
    session.advance()

    if mode is GameMode.PLAYER_VERSUS_PLAYER:
        info = "Two players at one board."
    else:
        info = f"You are {human}."
    return _outputs(session) + (info,)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(
                    BoardState(),
                    clickable_moves=BoardState().legal_moves(Cell.BLACK, deep=True),
                ),
                label="Board",
            )
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="You to move (Black)",
                label="Status",
                interactive=False,
                lines=2,
            )
            color_info = gr.Textbox(
                value="You are Black.",
                label="Color",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            mode_choice = gr.Radio(
                choices=[m.value for m in GameMode],
                value=GameMode.PLAYER_VERSUS_AI.value,
                label="Mode",
            )
            color_choice = gr.Radio(
                choices=["Random", "Black", "White"],
                value="Black",
                label="Play as",
            )
            agent_choice = gr.Dropdown(
                choices=list(AGENT_CHOICES.keys()),
                value=list(AGENT_CHOICES.keys())[0],
                label="Opponent",
            )
            new_game_btn = gr.Button("New Game", variant="primary")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. C4)",
                placeholder="C4",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button("Submit Move", elem_id="coord-submit")

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move", "Time (s)"],
                datatype=["number", "str", "str", "str"],
                interactive=False,
                column_count=4,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game,
        inputs=[mode_choice, color_choice, agent_choice, session_state],
        outputs=board_outputs + [color_info],
    )
