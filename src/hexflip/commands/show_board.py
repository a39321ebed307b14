from pathlib import Path
from typing import Optional

from hexflip.config import get_board_file
from hexflip.hex.board import PIECE_CHARS, Board
from hexflip.hex.geometry import Pos
from hexflip.hex.move import position_to_field


class ShowBoard:
    def __init__(self, file: Optional[Path], pos: Optional[Pos]) -> None:
        self.file = file or get_board_file()
        self.pos = pos

    def describe(self, board: Board, pos: Pos) -> list[str]:
        piece = board.at(pos)

        if piece is None:
            piece_text = "off board"
        else:
            piece_text = PIECE_CHARS[piece]

        steps = " ".join(position_to_field(n) for n in board.step_neighbors(pos))
        leaps = " ".join(position_to_field(n) for n in board.leap_neighbors(pos))

        field = position_to_field(pos)
        return [
            f"{field}: {piece_text}",
            f"steps: {steps}",
            f"leaps: {leaps}",
        ]

    def __call__(self) -> None:
        board = Board.from_file(self.file)
        board.show()

        if self.pos is not None:
            for line in self.describe(board, self.pos):
                print(line)
