"""
Command loop.

Design:
- Runs in the main thread; every iteration blocks on one line of operator input.
- Every cycle:
    1) Clear the screen and draw the dashboard.
    2) Read an option and dispatch it (1 add, 2 view, 3 update, 4 delete, 5 exit).
    3) Unknown options are reported and the loop continues unchanged.
- Stores:
    default_store: loaded from Assets/assets.json at startup; Add works on it and
                   Exit saves it back to the default file.
    working store: View/Update/Delete load the chosen file into its own store and
                   only ever save back to that file. Choosing the default file reloads
                   default_store itself, so the Exit save never writes stale data over it.
- Errors raised inside an operation are reported at the operation boundary; the loop
  keeps running. End of input behaves like Exit.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from .config import ASSET_FILE_SUFFIX
from .errors import AssetNotFoundError, AssetTrackerError
from .file_selector import list_json_files, prompt_file_choice
from .models import Asset
from .repository import AssetStore
from .storage import default_assets_path, load_assets, save_assets
from .ui import ConsoleUI

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandLoop:
    def __init__(self, ui: ConsoleUI, assets_dir: Path) -> None:
        self.ui = ui
        self.assets_dir = assets_dir
        self.default_path = default_assets_path(assets_dir)
        self.default_store = AssetStore.from_file(self.default_path, ui.error)
        self.state = LoopState.RUNNING
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.add_asset,
            "2": self.view_assets,
            "3": self.update_asset,
            "4": self.delete_asset,
            "5": self.request_exit,
        }

    # ---------- loop ----------

    def run(self) -> bool:
        """
        Loop until Exit (or end of input), then save the default store.
        Returns the result of that final save.
        """
        try:
            while self.state is LoopState.RUNNING:
                self.ui.clear()
                self.ui.render_dashboard()
                self.dispatch(self.ui.ask("Choose an option: "))
        except EOFError:
            logger.info("Input closed; exiting")
            self.state = LoopState.TERMINATED
        return self.shutdown()

    def dispatch(self, option: Optional[str]) -> None:
        action = self._actions.get(option or "")
        if action is None:
            self.ui.error("Invalid option. Please try again.")
            self.ui.pause()
            return
        action()

    def request_exit(self) -> None:
        self.state = LoopState.TERMINATED

    def shutdown(self) -> bool:
        saved = save_assets(self.default_store.snapshot(), self.default_path, self.ui.error)
        if saved:
            self.ui.show(f"Assets saved to {self.default_path.name}. Goodbye.")
        return saved

    # ---------- operations ----------

    def add_asset(self) -> None:
        self._run_operation("adding", self._add)

    def view_assets(self) -> None:
        self._run_operation("viewing", self._view)

    def update_asset(self) -> None:
        self._run_operation("updating", self._update)

    def delete_asset(self) -> None:
        self._run_operation("deleting", self._delete)

    def _run_operation(self, verb: str, operation: Callable[[], None]) -> None:
        try:
            operation()
        except EOFError:
            raise
        except AssetTrackerError as exc:
            logger.info("Operation aborted while %s asset: %s", verb, exc)
            self.ui.error(str(exc))
        except Exception as exc:
            logger.exception("Error %s asset", verb)
            self.ui.error(f"Error {verb} asset: {exc}")
        self.ui.pause()

    def _add(self) -> None:
        country = self.ui.country_code()
        article_name = self.ui.non_empty_string("Enter article name: ")
        model = self.ui.non_empty_string("Enter model: ")
        quantity = self.ui.non_negative_integer("Enter quantity: ")
        unit_price = self.ui.non_negative_decimal("Enter unit price: ")

        asset = self.default_store.add(article_name, model, quantity, unit_price, country)
        logger.info("Added asset %s", asset.article_number)
        self.ui.success("Asset added successfully.")
        self.ui.show(str(asset))
        self._save_added()

    def _save_added(self) -> None:
        self.ui.show("How would you like to save the assets?")
        self.ui.show("[1] Save to Default File")
        self.ui.show("[2] Save to Existing File")
        self.ui.show("[3] Save to New File")
        choice = self.ui.ask("Choose an option: ").strip()

        if choice == "1":
            path = self.default_path
        elif choice == "2":
            files = list_json_files(self.assets_dir)
            if not files:
                self.ui.error("No asset files found to save to.")
                return
            path = prompt_file_choice(files, self.ui)
        elif choice == "3":
            path = self._new_file_path(
                self.ui.non_empty_string("Enter the name of the new file (without extension): ")
            )
        else:
            self.ui.error("Invalid choice, saving to default file.")
            path = self.default_path
        self._save(self.default_store, path)

    def _new_file_path(self, name: str) -> Path:
        if name.lower().endswith(ASSET_FILE_SUFFIX):
            name = name[: -len(ASSET_FILE_SUFFIX)]
        if not name or Path(name).name != name or "\\" in name:
            raise AssetTrackerError("Invalid file name. Use a plain name without folders.")
        return self.assets_dir / f"{name}{ASSET_FILE_SUFFIX}"

    def _view(self) -> None:
        self.ui.clear()
        self.ui.render_dashboard()
        selected = self._choose_store()
        if selected is None:
            return
        _, store = selected
        self.ui.render_table(store)

    def _update(self) -> None:
        self.ui.clear()
        self.ui.render_dashboard()
        selected = self._choose_store()
        if selected is None:
            return
        path, store = selected
        self.ui.render_table(store)
        asset = self._find(store, "Enter article number to update (e.g., ATS0001): ")

        country = self.ui.country_code()
        article_name = self.ui.non_empty_string("Enter new article name: ")
        model = self.ui.non_empty_string("Enter new model: ")
        quantity = self.ui.non_negative_integer("Enter new quantity: ")
        unit_price = self.ui.non_negative_decimal("Enter new unit price: ")

        store.update(asset, article_name, model, quantity, unit_price, country)
        logger.info("Updated asset %s in %s", asset.article_number, path.name)
        self.ui.success("Asset updated successfully.")
        self._save(store, path)

    def _delete(self) -> None:
        self.ui.clear()
        self.ui.render_dashboard()
        selected = self._choose_store()
        if selected is None:
            return
        path, store = selected
        self.ui.render_table(store)
        asset = self._find(store, "Enter article number to delete (e.g., ATS0001): ")

        self.ui.render_asset_details(asset)
        confirmation = self.ui.ask("Are you sure you want to delete this asset? (y/n): ")
        if (confirmation or "").strip().lower() != "y":
            self.ui.show("Deletion canceled.")
            return
        store.remove(asset)
        logger.info("Deleted asset %s from %s", asset.article_number, path.name)
        self.ui.success("Asset deleted successfully.")
        self._save(store, path)

    # ---------- helpers ----------

    def _choose_store(self) -> Optional[Tuple[Path, AssetStore]]:
        """
        Ask for an existing asset file and load it. Returns None (after
        reporting) when there is nothing to work on.
        """
        files = list_json_files(self.assets_dir)
        if not files:
            self.ui.error("No asset files found. Please add an asset file first.")
            return None
        path = prompt_file_choice(files, self.ui)
        store = self._open_store(path)
        if store.count() == 0:
            self.ui.error("No assets found in the selected file.")
            return None
        return path, store

    def _open_store(self, path: Path) -> AssetStore:
        if path.resolve() == self.default_path.resolve():
            self.default_store.replace(load_assets(path, self.ui.error))
            return self.default_store
        return AssetStore.from_file(path, self.ui.error)

    def _find(self, store: AssetStore, prompt: str) -> Asset:
        article_number = self.ui.non_empty_string(prompt)
        asset = store.find(article_number)
        if asset is None:
            raise AssetNotFoundError(article_number)
        return asset

    def _save(self, store: AssetStore, path: Path) -> bool:
        saved = save_assets(store.snapshot(), path, self.ui.error)
        if saved:
            self.ui.success(f"Assets saved successfully to {path.name}.")
        return saved
