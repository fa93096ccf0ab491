"""
Design (ui.py)
- Purpose: Build and manage the terminal UI (dashboard, asset table, prompts, messages).
- Inputs: Callables for reading a line, writing a line and clearing the screen (injectable for tests).
- Outputs: None (renders text); prompt helpers return validated values.
- Side effects: Reads from stdin / writes to stdout by default.
"""

import shutil
from typing import Callable, Iterable, List, Optional

from .config import (
    ARTICLE_NAME_WIDTH,
    ARTICLE_NUMBER_WIDTH,
    COLOR_ACCENT,
    COLOR_ERROR,
    COLOR_SUCCESS,
    COUNTRY_WIDTH,
    DASHBOARD_OPTIONS,
    DASHBOARD_SUBTITLE,
    DASHBOARD_TITLE,
    FALLBACK_TERMINAL_WIDTH,
    MODEL_WIDTH,
    QUANTITY_WIDTH,
    TOTAL_PRICE_WIDTH,
    UNIT_PRICE_WIDTH,
)
from .models import Asset
from .utils import centered, clear_screen, color_supported, colorize, format_currency
from .validation import (
    ParseResult,
    parse_country_code,
    parse_non_empty,
    parse_non_negative_decimal,
    parse_non_negative_int,
)

# (header, width) in display order
COLUMNS = (
    ("Country", COUNTRY_WIDTH),
    ("Article Name", ARTICLE_NAME_WIDTH),
    ("Model", MODEL_WIDTH),
    ("Quantity", QUANTITY_WIDTH),
    ("Unit Price", UNIT_PRICE_WIDTH),
    ("Total Price", TOTAL_PRICE_WIDTH),
    ("Article Number", ARTICLE_NUMBER_WIDTH),
)


def _table_line(cells: Iterable[str]) -> str:
    parts = [f" {cell:<{width}} " for cell, (_, width) in zip(cells, COLUMNS)]
    return "|" + "|".join(parts) + "|"


def _asset_cells(asset: Asset) -> List[str]:
    return [
        asset.country,
        asset.article_name,
        asset.model,
        str(asset.quantity),
        format_currency(asset.unit_price),
        format_currency(asset.total_price),
        asset.article_number,
    ]


def format_table(assets: Iterable[Asset]) -> List[str]:
    """
    Render assets as fixed-width table lines: rule, header, rule, one line per
    asset, rule. Values wider than their column are not truncated.
    """
    header = _table_line(name for name, _ in COLUMNS)
    rule = "-" * len(header)
    lines = [rule, header, rule]
    lines.extend(_table_line(_asset_cells(asset)) for asset in assets)
    lines.append(rule)
    return lines


class ConsoleUI:
    """
    Design (ConsoleUI)
    - Purpose: Encapsulate all terminal input/output.
    - Public methods:
        show/error/success: write one line (errors in the warning color)
        ask: read one line after a prompt
        pause: wait for acknowledgement before returning to the menu
        render_dashboard/render_table/render_asset_details: formatted output
        non_empty_string/country_code/non_negative_integer/non_negative_decimal:
            reprompt until the matching validator accepts the input
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        clear_fn: Optional[Callable[[], None]] = None,
        color: Optional[bool] = None,
        width_fn: Optional[Callable[[], int]] = None,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or print
        self._clear = clear_fn or clear_screen
        self.color = color_supported() if color is None else color
        self._width_fn = width_fn or (
            lambda: shutil.get_terminal_size((FALLBACK_TERMINAL_WIDTH, 24)).columns
        )

    # ---------- basic I/O ----------

    def show(self, text: str = "") -> None:
        self._output(text)

    def error(self, message: str) -> None:
        self._output(colorize(message, COLOR_ERROR, self.color))

    def success(self, message: str) -> None:
        self._output(colorize(message, COLOR_SUCCESS, self.color))

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def clear(self) -> None:
        self._clear()

    def pause(self) -> None:
        self._input("Press Enter to continue...")

    # ---------- rendering ----------

    def render_dashboard(self) -> None:
        width = self._width_fn()
        rule = "-" * width
        for line in (
            centered(DASHBOARD_TITLE, width),
            rule,
            centered(DASHBOARD_SUBTITLE, width),
            rule,
            centered(DASHBOARD_OPTIONS, width),
            rule,
        ):
            self._output(colorize(line, COLOR_ACCENT, self.color))

    def render_table(self, assets: Iterable[Asset]) -> None:
        for line in format_table(assets):
            self._output(line)

    def render_asset_details(self, asset: Asset) -> None:
        """Show a single asset in the same layout as the full table."""
        self.show("Asset details:")
        self.render_table([asset])

    # ---------- validated prompts ----------

    def _prompt_until(self, prompt: str, parser: Callable[[Optional[str]], ParseResult]):
        while True:
            result = parser(self._input(prompt))
            if result.ok:
                return result.value
            self.error(result.error)

    def non_empty_string(self, prompt: str) -> str:
        return self._prompt_until(prompt, parse_non_empty)

    def country_code(self, prompt: str = "Enter country code (3 letters, e.g., SWE): ") -> str:
        return self._prompt_until(prompt, parse_country_code)

    def non_negative_integer(self, prompt: str):
        return self._prompt_until(prompt, parse_non_negative_int)

    def non_negative_decimal(self, prompt: str):
        return self._prompt_until(prompt, parse_non_negative_decimal)
