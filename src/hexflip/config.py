import os
from dotenv import load_dotenv
from pathlib import Path

from hexflip import PROJECT_ROOT

load_dotenv()


def resolve_path(string: str) -> Path:
    string = string.replace("PROJECT_ROOT", str(PROJECT_ROOT))
    string = string.replace("~", str(Path.home()))
    return Path(string).resolve()


def get_board_file() -> Path:
    return resolve_path(
        os.getenv("HEXFLIP_BOARD_FILE", "PROJECT_ROOT/boards/default.txt")
    )


def get_verbose() -> bool:
    return os.getenv("HEXFLIP_VERBOSE", "0") != "0"
