"""
Design (utils.py)
- Purpose: Reusable helpers: article number formatting/parsing, currency formatting,
           centering, ANSI coloring and screen clearing.
- Inputs: Various helper parameters (numbers, amounts, text).
- Outputs: Helper results (strings, ints).
- Side effects: clear_screen writes to the terminal; format_currency reads the active locale.
"""

import locale
import os
import re
import sys
from decimal import Decimal

from .config import (
    ARTICLE_DIGITS,
    ARTICLE_PREFIX,
    COLOR_RESET,
    CURRENCY_FALLBACK_SYMBOL,
)

ARTICLE_NUMBER_RE = re.compile(rf"^{ARTICLE_PREFIX}(\d{{{ARTICLE_DIGITS},}})$")


def format_article_number(sequence: int) -> str:
    """
    Purpose: Build an article number from its sequence value.
    Inputs: sequence (int >= 1)
    Outputs: e.g. 'ATS0001' for 1; widths beyond 4 digits grow ('ATS10000').
    """
    return f"{ARTICLE_PREFIX}{sequence:0{ARTICLE_DIGITS}d}"


def article_sequence(article_number: str) -> int:
    """
    Purpose: Extract the numeric suffix of an article number.
    Inputs: article_number such as 'ATS0037'
    Outputs: 37
    Raises: ValueError if the value does not look like an article number.
    """
    match = ARTICLE_NUMBER_RE.match(article_number)
    if not match:
        raise ValueError(f"Malformed article number: {article_number!r}")
    return int(match.group(1))


def format_currency(amount: Decimal) -> str:
    """
    Purpose: Render a price with the operator's locale currency symbol.
    Outputs: e.g. '$2,999.97'. Falls back to the configured symbol when the
             active locale has no monetary data (the default 'C' locale).
    """
    try:
        return locale.currency(amount, grouping=True)
    except ValueError:
        return f"{CURRENCY_FALLBACK_SYMBOL}{Decimal(amount):,.2f}"


def centered(text: str, width: int) -> str:
    padding = max((width - len(text)) // 2, 0)
    return " " * padding + text


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{COLOR_RESET}"


def color_supported(stream=None) -> bool:
    """True when the stream is a terminal and NO_COLOR is not set."""
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def clear_screen() -> None:
    if os.name == "nt":
        os.system("cls")
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()
