"""
Design (models.py)
- Purpose: Define the typed data structure for the domain entity (Asset).
- Inputs: Field values (str, int, Decimal).
- Outputs: Dataclass instances; dict form for JSON persistence.
- Side effects: None.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from .utils import ARTICLE_NUMBER_RE, format_currency

COUNTRY_LENGTH = 3


def _require_text(field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")


def _to_decimal(field_name: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"{field_name} must be a finite number")
    return amount


def _check_editable(article_name: Any, model: Any, quantity: Any, unit_price: Decimal, country: Any) -> None:
    _require_text("article_name", article_name)
    _require_text("model", model)
    _require_text("country", country)
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("quantity must be an integer")
    if quantity < 0:
        raise ValueError("quantity must be >= 0")
    if unit_price < 0:
        raise ValueError("unit_price must be >= 0")
    if len(country) != COUNTRY_LENGTH or not (country.isascii() and country.isalpha() and country.isupper()):
        raise ValueError(f"country must be {COUNTRY_LENGTH} uppercase letters, got {country!r}")


@dataclass
class Asset:
    """
    Design (Asset)
    - Purpose: One inventory line item.
    - Fields:
        article_number: 'ATS' + zero-padded sequence; set once, read-only afterwards.
        article_name, model: non-empty strings.
        quantity: int >= 0.
        unit_price: Decimal >= 0.
        country: 3 uppercase letters (e.g. 'SWE').
    - Derived:
        total_price: quantity * unit_price, computed on every access.
    """
    article_number: str
    article_name: str
    model: str
    quantity: int
    unit_price: Decimal
    country: str

    def __post_init__(self) -> None:
        _require_text("article_number", self.article_number)
        if not ARTICLE_NUMBER_RE.match(self.article_number):
            raise ValueError(f"article_number is malformed: {self.article_number!r}")
        self.unit_price = _to_decimal("unit_price", self.unit_price)
        _check_editable(self.article_name, self.model, self.quantity, self.unit_price, self.country)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "article_number" and "article_number" in self.__dict__:
            raise AttributeError("article_number is read-only")
        super().__setattr__(name, value)

    @property
    def total_price(self) -> Decimal:
        return self.quantity * self.unit_price

    def apply_update(self, article_name: str, model: str, quantity: int, unit_price: Decimal, country: str) -> None:
        """
        Purpose: Replace every editable field at once, keeping the article number.
        Raises: ValueError (before any field changes) if a value breaks an invariant.
        """
        unit_price = _to_decimal("unit_price", unit_price)
        _check_editable(article_name, model, quantity, unit_price, country)
        self.article_name = article_name
        self.model = model
        self.quantity = quantity
        self.unit_price = unit_price
        self.country = country

    def to_dict(self) -> Dict[str, Any]:
        # totalPrice is written for readability only; from_dict never reads it
        return {
            "articleNumber": self.article_number,
            "articleName": self.article_name,
            "model": self.model,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "totalPrice": self.total_price,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Asset":
        """
        Build an Asset from a persisted record. Raises KeyError for a missing
        field and ValueError for an invalid one.
        """
        return cls(
            article_number=data["articleNumber"],
            article_name=data["articleName"],
            model=data["model"],
            quantity=data["quantity"],
            unit_price=_to_decimal("unit_price", data["unitPrice"]),
            country=data["country"],
        )

    def __str__(self) -> str:
        return (
            f"{self.article_number} | {self.article_name} | {self.model} | {self.quantity} | "
            f"{format_currency(self.unit_price)} | {format_currency(self.total_price)} | {self.country}"
        )
