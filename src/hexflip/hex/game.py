from __future__ import annotations

import re
from copy import copy
from pathlib import Path

from hexflip.hex.board import BLACK, Board, Piece, parse_color
from hexflip.hex.move import InvalidNotation, Move, parse_moves

metadata_regex = re.compile(r'\[(.*) "(.*)"\]')


class Game:
    """
    Game replays a scripted sequence of moves against a starting board.

    Game files look like this: optional metadata lines, the board diagram,
    an empty line and finally the moves.

        [Turn "X"]
        X - - - O

        2,0 8,0>4,0
    """

    def __init__(self) -> None:
        self.metadata: dict[str, str] = {}
        self.boards: list[Board] = []
        self.moves: list[Move] = []

    @classmethod
    def from_moves(cls, board: Board, moves: list[Move]) -> Game:
        boards = [board.copy()]

        for move in moves:
            board = board.do_move(move)
            boards.append(board)

        game = Game()
        game.boards = boards
        game.moves = copy(moves)
        return game

    @classmethod
    def from_file(cls, file: Path) -> Game:
        return cls.from_string(file.read_text())

    @classmethod
    def from_string(cls, string: str) -> Game:
        lines = string.strip("\n").split("\n")

        metadata: dict[str, str] = {}
        line_offset = 0
        for line_offset, line in enumerate(lines):
            if not line.strip().startswith("["):
                break

            match = metadata_regex.match(line.strip())

            if not match:
                raise InvalidNotation(f'Could not parse metadata "{line.strip()}"')

            metadata[match.group(1)] = match.group(2)
        else:
            # Only metadata, no board
            line_offset = len(lines)

        body = lines[line_offset:]

        while body and not body[0].strip():
            body = body[1:]

        try:
            separator = next(i for i, line in enumerate(body) if not line.strip())
        except StopIteration:
            separator = len(body)

        diagram = "\n".join(body[:separator])
        moves_text = " ".join(body[separator:])

        turn: Piece = BLACK
        if "Turn" in metadata:
            turn = parse_color(metadata["Turn"])

        board = Board.load(diagram, turn)

        game = cls.from_moves(board, parse_moves(moves_text))
        game.metadata = metadata
        return game

    def final_board(self) -> Board:
        return self.boards[-1]

    def zip_board_moves(self) -> zip[tuple[Board, Move]]:
        return zip(self.boards[:-1], self.moves, strict=True)
