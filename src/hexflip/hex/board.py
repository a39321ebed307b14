from __future__ import annotations

import textwrap
from enum import IntEnum
from pathlib import Path
from typing import Optional

from hexflip.hex.geometry import LEAP_DIRECTIONS, STEP_DIRECTIONS, Dir, Pos, offset
from hexflip.hex.move import InvalidNotation, Leap, Move, Step


class Piece(IntEnum):
    EMPTY = 0
    BLACK = -1
    WHITE = 1

    def opposite(self) -> Piece:
        return OPPOSITES[self]


OPPOSITES = {
    Piece.EMPTY: Piece.EMPTY,
    Piece.BLACK: Piece.WHITE,
    Piece.WHITE: Piece.BLACK,
}

BLACK = Piece.BLACK
WHITE = Piece.WHITE
EMPTY = Piece.EMPTY

PIECE_CHARS = {EMPTY: "-", BLACK: "X", WHITE: "O"}
CHAR_PIECES = {char: piece for piece, char in PIECE_CHARS.items()}

COLOR_NAMES = {
    "x": BLACK,
    "black": BLACK,
    "o": WHITE,
    "white": WHITE,
}


def parse_color(name: str) -> Piece:
    try:
        return COLOR_NAMES[name.strip().lower()]
    except KeyError:
        raise InvalidNotation(f'Unknown color "{name}"')


class NoPiecesOnBoard(ValueError):
    pass


class Board:
    """
    Board maps every cell of an irregular hex board to the piece on it.
    Positions that are not a key are off the board: queries report them as
    absent and writes to them are ignored. The set of cells never changes.
    """

    def __init__(self, cells: dict[Pos, Piece], turn: Piece) -> None:
        assert turn in [BLACK, WHITE]

        self.positions = cells
        self.turn = turn

    @classmethod
    def load(cls, text: str, turn: Piece = BLACK) -> Board:
        lines = [line.rstrip() for line in textwrap.dedent(text).split("\n")]
        lines = [line for line in lines if line]

        cells: dict[Pos, Piece] = {}
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char in CHAR_PIECES:
                    cells[(x, y)] = CHAR_PIECES[char]

        if not cells:
            raise NoPiecesOnBoard("No pieces on board.")

        board = Board(cells, turn)
        min_x, _, min_y, _ = board.bounds()
        if (min_x, min_y) != (0, 0):
            raise InvalidNotation("Board must start at column 0 and row 0")
        return board

    @classmethod
    def from_file(cls, file: Path, turn: Piece = BLACK) -> Board:
        return cls.load(file.read_text(), turn)

    def __repr__(self) -> str:
        return f"Board({len(self.positions)} cells, {self.turn.name})"

    def copy(self) -> Board:
        return Board(dict(self.positions), self.turn)

    def at(self, pos: Pos) -> Optional[Piece]:
        return self.positions.get(pos)

    def set(self, pos: Pos, piece: Piece) -> None:
        if pos in self.positions:
            self.positions[pos] = piece

    def _neighbors(self, pos: Pos, directions: list[Dir]) -> list[Pos]:
        if self.at(pos) is None:
            return []

        neighbors: list[Pos] = []
        for direction in directions:
            neighbor = offset(pos, direction)
            if self.at(neighbor) is not None:
                neighbors.append(neighbor)
        return neighbors

    def step_neighbors(self, pos: Pos) -> list[Pos]:
        return self._neighbors(pos, STEP_DIRECTIONS)

    def leap_neighbors(self, pos: Pos) -> list[Pos]:
        return self._neighbors(pos, LEAP_DIRECTIONS)

    def bounds(self) -> tuple[int, int, int, int]:
        """Returns (min_x, max_x, min_y, max_y), the board must have cells."""
        xs = [x for x, _ in self.positions]
        ys = [y for _, y in self.positions]
        return min(xs), max(xs), min(ys), max(ys)

    def apply_move(self, move: Move) -> None:
        """
        Places a piece for the player to move and flips every opponent piece
        directly adjacent to it. Legality of the move is not checked.
        """

        if isinstance(move, Leap):
            self.set(move.source, EMPTY)

        target = move.target
        self.set(target, self.turn)

        opponent = self.turn.opposite()
        for neighbor in self.step_neighbors(target):
            if self.at(neighbor) == opponent:
                self.set(neighbor, self.turn)

        self.turn = opponent

    def do_move(self, move: Move) -> Board:
        child = self.copy()
        child.apply_move(move)
        return child

    def cells(self) -> list[Pos]:
        return sorted(self.positions, key=lambda pos: (pos[1], pos[0]))

    def count(self, piece: Piece) -> int:
        return sum(1 for value in self.positions.values() if value == piece)

    def to_string(self) -> str:
        min_x, max_x, min_y, max_y = self.bounds()

        rows: list[str] = []
        for y in range(min_y, max_y + 1):
            row = ""
            for x in range(min_x, max_x + 1):
                piece = self.at((x, y))
                if piece is None:
                    row += " "
                else:
                    row += PIECE_CHARS[piece]
            rows.append(row.rstrip())
        return "\n".join(rows)

    def show(self) -> None:
        print(self.to_string())
        print(f"{PIECE_CHARS[self.turn]} to move")

    def as_tuple(self) -> tuple[tuple[tuple[Pos, Piece], ...], Piece]:
        return (tuple(sorted(self.positions.items())), self.turn)

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
