import typer
from pathlib import Path
from typing import NoReturn, Optional

from hexflip.commands.play_game import PlayGame
from hexflip.commands.show_board import ShowBoard
from hexflip.hex.board import NoPiecesOnBoard
from hexflip.hex.geometry import Pos
from hexflip.hex.move import InvalidNotation


def fail(error: Exception) -> NoReturn:
    print(f"Error: {error}")
    raise typer.Exit(code=1)


def show_command(
    file: Optional[Path] = typer.Argument(None),
    x: Optional[int] = typer.Option(None, "-x"),
    y: Optional[int] = typer.Option(None, "-y"),
) -> None:
    if (x is None) != (y is None):
        fail(ValueError("Options -x and -y must be used together"))

    pos: Optional[Pos] = None
    if x is not None and y is not None:
        pos = (x, y)

    try:
        ShowBoard(file, pos)()
    except (NoPiecesOnBoard, InvalidNotation, OSError) as e:
        fail(e)


def play_command(file: Path, verbose: bool = typer.Option(False, "-v")) -> None:
    try:
        PlayGame(file, verbose)()
    except (NoPiecesOnBoard, InvalidNotation, OSError) as e:
        fail(e)


def show() -> None:
    typer.run(show_command)


def play() -> None:
    typer.run(play_command)
