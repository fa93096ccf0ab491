"""
Design (repository.py)
- Purpose: Encapsulate one file's assets behind a tiny API, so the command loop and UI
           never touch a bare list or a global counter. One AssetStore per loaded file.
- Inputs: Asset field values, Asset objects, article numbers.
- Outputs: Assets, counts and snapshots (copies) of the ordered asset list.
- Side effects: Mutates the internal list and the next-article-number counter.
"""

from decimal import Decimal
from pathlib import Path
from typing import Iterator, List, Optional

from .models import Asset
from .storage import ErrorCallback, load_assets, next_article_number
from .utils import format_article_number


class AssetStore:
    """
    Design (AssetStore)
    - State:
        _assets: list[Asset] in insertion order (= display order)
        _next_number: sequence value the next add() will use
    """

    def __init__(self, assets: Optional[List[Asset]] = None) -> None:
        self._assets: List[Asset] = []
        self._next_number = 1
        self.replace(assets or [])

    @classmethod
    def from_file(cls, path: Path, on_error: ErrorCallback = None) -> "AssetStore":
        return cls(load_assets(path, on_error))

    # -------- Loading --------

    def replace(self, assets: List[Asset]) -> None:
        """
        Purpose: Discard current contents and take over the given records.
        Side effects: Recomputes the counter from the last record.
        """
        self._assets = list(assets)
        self._next_number = next_article_number(self._assets)

    # -------- CRUD for assets --------

    def add(self, article_name: str, model: str, quantity: int, unit_price: Decimal, country: str) -> Asset:
        """
        Purpose: Create an asset with the next article number and append it.
        Outputs: The new Asset.
        Side effects: Increments the counter.
        """
        asset = Asset(
            article_number=format_article_number(self._next_number),
            article_name=article_name,
            model=model,
            quantity=quantity,
            unit_price=unit_price,
            country=country,
        )
        self._assets.append(asset)
        self._next_number += 1
        return asset

    def find(self, article_number: str) -> Asset | None:
        """
        Purpose: Case-insensitive exact lookup by article number.
        Outputs: Asset or None
        """
        wanted = article_number.strip().upper()
        for asset in self._assets:
            if asset.article_number.upper() == wanted:
                return asset
        return None

    def update(self, asset: Asset, article_name: str, model: str, quantity: int, unit_price: Decimal, country: str) -> Asset:
        """
        Purpose: Replace every editable field of an asset in place.
        Side effects: Mutates the given Asset; article number is kept.
        """
        asset.apply_update(article_name, model, quantity, unit_price, country)
        return asset

    def remove(self, asset: Asset) -> bool:
        """
        Purpose: Delete the first entry equal to asset.
        Outputs: True if removed, False if absent (no-op).
        """
        try:
            self._assets.remove(asset)
        except ValueError:
            return False
        return True

    def count(self) -> int:
        return len(self._assets)

    # -------- Snapshots for safe reading --------

    def snapshot(self) -> List[Asset]:
        return list(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.snapshot())
