"""
Design (validation.py)
- Purpose: Pure parse/validate functions for operator input. The reprompt loops in ui.py
           call these; nothing here reads from or writes to the terminal.
- Inputs: Raw input strings (possibly None when input is unavailable).
- Outputs: ParseResult(ok, value, error).
- Side effects: None.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from .models import COUNTRY_LENGTH

PLAIN_INTEGER_RE = re.compile(r"^[0-9]+$")
PLAIN_DECIMAL_RE = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    value: Any = None
    error: str = ""

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(True, value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(False, None, error)


def parse_non_empty(raw: Optional[str]) -> ParseResult:
    if raw is None or not raw.strip():
        return ParseResult.failure("Input cannot be empty. Please try again.")
    return ParseResult.success(raw.strip())


def parse_country_code(raw: Optional[str]) -> ParseResult:
    """Accept exactly three ASCII letters in any case; the value is upper-cased ('usa' -> 'USA')."""
    code = (raw or "").strip().upper()
    if len(code) == COUNTRY_LENGTH and code.isascii() and code.isalpha():
        return ParseResult.success(code)
    return ParseResult.failure("Invalid country code. Please enter a valid 3-letter code.")


def parse_non_negative_int(raw: Optional[str]) -> ParseResult:
    text = (raw or "").strip()
    if not PLAIN_INTEGER_RE.match(text):
        return ParseResult.failure("Invalid input. Please enter a valid quantity (non-negative integer).")
    return ParseResult.success(int(text))


def parse_non_negative_decimal(raw: Optional[str]) -> ParseResult:
    """Plain ASCII digits with an optional decimal point ('12', '12.50', '.5'); no signs or exponents."""
    text = (raw or "").strip()
    if not PLAIN_DECIMAL_RE.match(text):
        return ParseResult.failure("Invalid input. Please enter a valid unit price (non-negative decimal).")
    return ParseResult.success(Decimal(text))
