"""Tests for the end-of-game result handed to score keepers."""

import pytest

from betaothello.agent.human import HumanPlayer
from betaothello.agent.search_agent import SearchAgent, SearchConfig
from betaothello.game.board import BoardState
from betaothello.game.result import GameResult, game_result
from betaothello.game.types import Cell, Position


@pytest.fixture
def players():
    return {
        Cell.BLACK: HumanPlayer(Cell.BLACK, name="Alice"),
        Cell.WHITE: SearchAgent(Cell.WHITE, SearchConfig(depth=2)),
    }


def test_running_game_has_no_result(players):
    assert game_result(BoardState(), players) is None


def test_winner(players):
    s = BoardState.from_rows(["BBBBBBBB"] * 7 + ["BBBBBBW."]).apply_move(
        Cell.BLACK, Position(7, 7)
    )
    result = game_result(s, players)
    assert result == GameResult(Cell.BLACK, "Alice", 64)
    assert not result.is_draw
    assert str(result) == "Alice (Black) wins with 64 disks"


def test_agent_winner_name(players):
    s = BoardState.from_rows(["BBBBBBBB"] * 3 + ["WWWWWWWW"] * 5)
    assert game_result(s, players) == GameResult(Cell.WHITE, "SearchAgent(d=2)", 40)


def test_draw(players):
    s = BoardState.from_rows(["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4)
    result = game_result(s, players)
    assert result.is_draw
    assert result == GameResult(Cell.EMPTY, "", 32)
    assert str(result) == "Draw (32-32)"


def test_missing_player_has_empty_name():
    s = BoardState.from_rows(["BBBBBBBB"] * 3 + ["WWWWWWWW"] * 5)
    assert game_result(s, {}).name == ""
