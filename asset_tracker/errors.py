"""
Design (errors.py)
- Purpose: Exception types raised inside an operation and caught at the command-loop boundary.
- Side effects: None.
"""


class AssetTrackerError(Exception):
    """Base class for recoverable errors reported to the operator."""


class InvalidSelectionError(AssetTrackerError):
    """File choice was non-numeric or outside the listed range."""


class AssetNotFoundError(AssetTrackerError):
    """Article number is not present in the loaded store."""

    def __init__(self, article_number: str) -> None:
        super().__init__(f"Invalid article number {article_number!r}. Please choose a valid asset.")
        self.article_number = article_number
