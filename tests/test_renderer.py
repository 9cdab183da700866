from betaothello.game.board import BoardState
from betaothello.game.types import Cell, Position
from betaothello.ui.board_component import (
    BANNER_COLORS,
    DISK_RADIUS,
    LAST_MOVE_COLOR,
    render_board_svg,
)


def test_initial_board_svg():
    s = BoardState()
    html = render_board_svg(s, clickable_moves=s.legal_moves(Cell.BLACK))
    assert html.startswith("<svg")
    assert html.endswith("</svg>")
    assert "othello-board" in html
    assert html.count(f'r="{DISK_RADIUS}"') == 4
    assert html.count('class="board-click"') == 4
    for coord in ("C4", "D3", "E6", "F5"):
        assert f'data-coord="{coord}"' in html


def test_not_clickable_by_default():
    html = render_board_svg(BoardState())
    assert html.count('class="board-click"') == 0


def test_disks_after_move():
    s = BoardState().apply_move(Cell.BLACK, Position(2, 3))
    html = render_board_svg(s, last_move=Position(2, 3))
    assert html.count(f'r="{DISK_RADIUS}"') == 5
    assert LAST_MOVE_COLOR in html


def test_no_banner_while_playing():
    html = render_board_svg(BoardState())
    assert "rgba(0, 0, 0, 0.7)" not in html


def test_banner_win():
    html = render_board_svg(BoardState(), game_over_message="You win!", game_over_outcome="win")
    assert "You win!" in html
    assert BANNER_COLORS["win"] in html


def test_banner_ai_wins():
    html = render_board_svg(BoardState(), game_over_message="AI wins!", game_over_outcome="loss")
    assert BANNER_COLORS["loss"] in html


def test_banner_draw():
    html = render_board_svg(BoardState(), game_over_message="Draw!")
    assert "Draw!" in html
    assert BANNER_COLORS["neutral"] in html


def test_banner_color_follows_outcome_not_text():
    html = render_board_svg(BoardState(), game_over_message="White wins!")
    assert BANNER_COLORS["neutral"] in html
    assert BANNER_COLORS["win"] not in html
    html = render_board_svg(
        BoardState(), game_over_message="Black wins!", game_over_outcome="loss"
    )
    assert BANNER_COLORS["loss"] in html
    assert BANNER_COLORS["win"] not in html
