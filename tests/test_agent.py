import pytest

from betaothello.agent.human import HumanPlayer
from betaothello.game.board import BoardState
from betaothello.game.errors import InvalidArgumentError
from betaothello.game.types import Cell


def test_human_player_never_proposes_a_move():
    player = HumanPlayer(Cell.BLACK)
    assert player.select_move(BoardState()) is None


def test_human_player_name():
    assert HumanPlayer(Cell.WHITE).name == "HumanPlayer"
    assert HumanPlayer(Cell.WHITE, name="Ada").name == "Ada"


def test_human_player_color():
    player = HumanPlayer(Cell.WHITE)
    assert player.color is Cell.WHITE
    assert player.is_human


@pytest.mark.parametrize("color", [Cell.EMPTY, None])
def test_invalid_color(color):
    with pytest.raises(InvalidArgumentError):
        HumanPlayer(color)
