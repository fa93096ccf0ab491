"""
Design (file_selector.py)
- Purpose: Enumerate the asset files in the working directory and let the operator pick one.
- Inputs: Directory path; a ConsoleUI-like object for prompting.
- Outputs: list_json_files() -> list[Path]; prompt_file_choice() -> Path.
- Side effects: prompt_file_choice() prints the numbered list and reads one line.
"""

from pathlib import Path
from typing import List

from .config import ASSET_FILE_SUFFIX
from .errors import InvalidSelectionError


def list_json_files(directory: Path) -> List[Path]:
    """
    Return the *.json files in directory sorted by name, so the numbering is
    the same every time within a session. Missing directory yields [].
    """
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ASSET_FILE_SUFFIX),
        key=lambda p: p.name,
    )


def parse_file_choice(raw: str | None, count: int) -> int:
    """
    Convert a 1-based menu entry into a 0-based index.
    Raises InvalidSelectionError when non-numeric or outside [1, count].
    """
    try:
        choice = int((raw or "").strip())
    except ValueError:
        raise InvalidSelectionError("Invalid input. Please enter a valid file number.") from None
    if choice < 1 or choice > count:
        raise InvalidSelectionError("Invalid choice. Please choose a valid file number.")
    return choice - 1


def prompt_file_choice(files: List[Path], ui) -> Path:
    ui.show("Available asset files:")
    for number, path in enumerate(files, start=1):
        ui.show(f"[{number}] {path.name}")
    index = parse_file_choice(ui.ask("Choose a file by number: "), len(files))
    return files[index]
