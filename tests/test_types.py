import pytest

from betaothello.game.errors import InvalidArgumentError, InvalidMoveError, OthelloError
from betaothello.game.types import (
    ALL_POSITIONS,
    Cell,
    Position,
    format_position,
    parse_position,
    validate_player,
)


def test_cell_opponent():
    assert Cell.BLACK.opponent is Cell.WHITE
    assert Cell.WHITE.opponent is Cell.BLACK


def test_empty_has_no_opponent():
    with pytest.raises(InvalidArgumentError):
        Cell.EMPTY.opponent


def test_cell_str():
    assert str(Cell.BLACK) == "Black"
    assert str(Cell.WHITE) == "White"
    assert str(Cell.EMPTY) == "Empty"


def test_position_is_value():
    p = Position(3, 5)
    assert p.x == 3
    assert p.y == 5
    assert p == Position(3, 5)
    assert hash(p) == hash(Position(3, 5))


def test_position_of_is_pooled():
    assert Position.of(2, 7) is Position.of(2, 7)
    assert Position.of(2, 7) == Position(2, 7)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_position_of_out_of_range(x, y):
    with pytest.raises(InvalidArgumentError):
        Position.of(x, y)


def test_all_positions():
    assert len(ALL_POSITIONS) == 64
    assert len(set(ALL_POSITIONS)) == 64
    assert list(ALL_POSITIONS) == sorted(ALL_POSITIONS)


class TestValidatePlayer:
    def test_players_accepted(self):
        assert validate_player(Cell.BLACK) is Cell.BLACK
        assert validate_player(Cell.WHITE) is Cell.WHITE

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_player(Cell.EMPTY)

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_player(None)

    def test_non_cell_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_player(1)


class TestCoordinates:
    def test_format(self):
        assert format_position(Position(0, 0)) == "A1"
        assert format_position(Position(2, 3)) == "C4"
        assert format_position(Position(7, 7)) == "H8"
        assert str(Position(2, 3)) == "C4"

    def test_parse_valid(self):
        assert parse_position("A1") == Position(0, 0)
        assert parse_position("c4") == Position(2, 3)
        assert parse_position(" H8 ") == Position(7, 7)

    def test_parse_invalid(self):
        assert parse_position("") is None
        assert parse_position("I1") is None
        assert parse_position("A0") is None
        assert parse_position("A9") is None
        assert parse_position("A10") is None
        assert parse_position("XX") is None


class TestErrors:
    def test_invalid_argument_is_value_error(self):
        err = InvalidArgumentError("bad")
        assert isinstance(err, ValueError)
        assert isinstance(err, OthelloError)
        assert str(err) == "[INVALID_ARGUMENT] bad"

    def test_invalid_move_carries_context(self):
        err = InvalidMoveError("nope", player=Cell.BLACK, position=Position(0, 0))
        assert not isinstance(err, ValueError)
        assert err.player is Cell.BLACK
        assert err.position == Position(0, 0)
        assert err.to_dict() == {"code": "INVALID_MOVE", "message": "nope"}
