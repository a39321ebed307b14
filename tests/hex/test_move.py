import pytest

from hexflip.hex.geometry import Pos
from hexflip.hex.move import (
    InvalidNotation,
    Leap,
    Move,
    Step,
    field_to_position,
    moves_to_fields,
    parse_move,
    parse_moves,
    position_to_field,
)


@pytest.mark.parametrize(
    ["field", "expected"],
    [
        pytest.param("0,0", (0, 0), id="origin"),
        pytest.param("6,2", (6, 2), id="inner"),
        pytest.param("16,8", (16, 8), id="two-digits"),
        pytest.param("-2,0", (-2, 0), id="negative"),
        pytest.param(" 4,0 ", (4, 0), id="surrounding-whitespace"),
    ],
)
def test_field_to_position_ok(field: str, expected: Pos) -> None:
    assert field_to_position(field) == expected


@pytest.mark.parametrize(
    ["field"],
    [
        pytest.param("", id="empty"),
        pytest.param("4", id="one-number"),
        pytest.param("4,0,1", id="three-numbers"),
        pytest.param("a,b", id="letters"),
        pytest.param("4, 0", id="inner-whitespace"),
    ],
)
def test_field_to_position_error(field: str) -> None:
    with pytest.raises(InvalidNotation):
        field_to_position(field)


def test_position_to_field() -> None:
    assert position_to_field((8, 0)) == "8,0"


@pytest.mark.parametrize(
    ["text", "expected"],
    [
        pytest.param("2,0", Step((2, 0)), id="step"),
        pytest.param("8,0>4,0", Leap((8, 0), (4, 0)), id="leap"),
    ],
)
def test_parse_move_ok(text: str, expected: Move) -> None:
    move = parse_move(text)
    assert move == expected
    assert move.to_field() == text


@pytest.mark.parametrize(
    ["text"],
    [
        pytest.param(">4,0", id="missing-source"),
        pytest.param("8,0>", id="missing-target"),
        pytest.param("0,0>2,0>4,0", id="two-arrows"),
        pytest.param("xx", id="garbage"),
    ],
)
def test_parse_move_error(text: str) -> None:
    with pytest.raises(InvalidNotation):
        parse_move(text)


def test_parse_moves() -> None:
    moves = parse_moves("2,0\n 8,0>4,0  6,0")
    assert moves == [Step((2, 0)), Leap((8, 0), (4, 0)), Step((6, 0))]
    assert moves_to_fields(moves) == "2,0 8,0>4,0 6,0"


def test_parse_moves_empty() -> None:
    assert parse_moves("  \n") == []


def test_step_and_leap_differ() -> None:
    assert Step((4, 0)) != Leap((4, 0), (4, 0))
    assert Step((4, 0)) != (4, 0)
    assert len({Step((4, 0)), Step((4, 0)), Leap((0, 0), (4, 0))}) == 2
