from pathlib import Path

from hexflip.config import get_verbose
from hexflip.hex.board import BLACK, WHITE
from hexflip.hex.game import Game


class PlayGame:
    def __init__(self, file: Path, verbose: bool) -> None:
        self.file = file
        self.verbose = verbose or get_verbose()

    def __call__(self) -> None:
        game = Game.from_file(self.file)

        if self.verbose:
            for board, move in game.zip_board_moves():
                board.show()
                print(f"move: {move.to_field()}")
                print()

        board = game.final_board()
        board.show()
        print(f"X: {board.count(BLACK)} O: {board.count(WHITE)}")
