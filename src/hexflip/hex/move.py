from __future__ import annotations

import re
from typing import Union

from hexflip.hex.geometry import Pos

field_regex = re.compile(r"^(-?\d+),(-?\d+)$")


class InvalidNotation(ValueError):
    pass


def position_to_field(pos: Pos) -> str:
    x, y = pos
    return f"{x},{y}"


def field_to_position(field: str) -> Pos:
    match = field_regex.match(field.strip())

    if not match:
        raise InvalidNotation(f'Invalid field "{field}"')

    return (int(match.group(1)), int(match.group(2)))


class Step:
    """Places a piece of the player to move on `target`."""

    def __init__(self, target: Pos) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"Step({self.target})"

    def to_field(self) -> str:
        return position_to_field(self.target)

    def as_tuple(self) -> tuple[Pos, ...]:
        return (self.target,)

    def __hash__(self) -> int:
        return hash(("step", self.as_tuple()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Step):
            return False
        return self.as_tuple() == other.as_tuple()


class Leap:
    """Moves a piece from `source` to `target`, leaving `source` empty."""

    def __init__(self, source: Pos, target: Pos) -> None:
        self.source = source
        self.target = target

    def __repr__(self) -> str:
        return f"Leap({self.source}, {self.target})"

    def to_field(self) -> str:
        return position_to_field(self.source) + ">" + position_to_field(self.target)

    def as_tuple(self) -> tuple[Pos, ...]:
        return (self.source, self.target)

    def __hash__(self) -> int:
        return hash(("leap", self.as_tuple()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leap):
            return False
        return self.as_tuple() == other.as_tuple()


Move = Union[Step, Leap]


def parse_move(text: str) -> Move:
    if text.count(">") > 1:
        raise InvalidNotation(f'Invalid move "{text}"')

    if ">" in text:
        source, target = text.split(">")
        return Leap(field_to_position(source), field_to_position(target))

    return Step(field_to_position(text))


def parse_moves(text: str) -> list[Move]:
    return [parse_move(word) for word in text.split()]


def moves_to_fields(moves: list[Move]) -> str:
    return " ".join(move.to_field() for move in moves)
