"""
Design (storage.py)
- Purpose: Load and save an asset list to/from disk (JSON).
- Inputs: Path of an asset file, list of Asset for save, optional on_error callback.
- Outputs: list[Asset] on load; bool (saved or not) on save.
- Side effects: Reads/writes files; creates the assets directory. Failures are reported
                through on_error and the log instead of being raised.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

import simplejson as json

from .config import ASSETS_DIRNAME, DEFAULT_ASSETS_FILENAME
from .models import Asset
from .utils import article_sequence

logger = logging.getLogger(__name__)

ErrorCallback = Optional[Callable[[str], None]]


def _report(on_error: ErrorCallback, message: str) -> None:
    logger.error(message)
    if on_error is not None:
        on_error(message)


def get_assets_dir(base: Optional[Path] = None) -> Path:
    """
    Resolve the working directory ('Assets') relative to base, or to the
    current directory when base is not given.
    """
    return (base or Path.cwd()) / ASSETS_DIRNAME


def default_assets_path(directory: Path) -> Path:
    return directory / DEFAULT_ASSETS_FILENAME


def ensure_assets_dir(directory: Path) -> Path:
    """Create the working directory if absent. OSError propagates to the caller."""
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def load_assets(path: Path, on_error: ErrorCallback = None) -> List[Asset]:
    """
    Load assets from a JSON file. Returns an empty list on a missing file.
    Unreadable or malformed files are reported and also yield an empty list;
    individual invalid records are reported and skipped.
    """
    if not path.exists():
        logger.info("No asset file at %s; starting empty", path)
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, use_decimal=True)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        _report(on_error, f"Error loading assets: {exc}")
        return []
    if not isinstance(data, list):
        _report(on_error, f"Error loading assets: {path.name} does not contain a list of assets")
        return []
    assets: List[Asset] = []
    for position, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            _report(on_error, f"Skipping asset record {position} in {path.name}: not an object")
            continue
        try:
            assets.append(Asset.from_dict(item))
        except KeyError as exc:
            _report(on_error, f"Skipping asset record {position} in {path.name}: missing field {exc}")
        except (TypeError, ValueError) as exc:
            _report(on_error, f"Skipping asset record {position} in {path.name}: {exc}")
    logger.info("Loaded %d asset(s) from %s", len(assets), path)
    return assets


def next_article_number(assets: List[Asset]) -> int:
    """Numeric suffix of the last asset's article number + 1, or 1 when empty."""
    if not assets:
        return 1
    return article_sequence(assets[-1].article_number) + 1


def save_assets(assets: List[Asset], path: Path, on_error: ErrorCallback = None) -> bool:
    """
    Save the asset list as indented JSON, overwriting the file. Returns False
    (after reporting) when the directory or file cannot be written.
    """
    data = [a.to_dict() for a in assets]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, use_decimal=True)
    except (OSError, TypeError, ValueError) as exc:
        _report(on_error, f"Error saving assets: {exc}")
        return False
    logger.info("Saved %d asset(s) to %s", len(assets), path)
    return True
