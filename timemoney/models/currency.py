"""Currency catalog. Symbols are display labels only."""
from typing import Optional

from pydantic import BaseModel


class Currency(BaseModel):
    """A selectable currency."""

    code: str
    symbol: str
    name: str


CURRENCIES: list[Currency] = [
    Currency(code="ILS", symbol="₪", name="Israeli Shekel"),
    Currency(code="USD", symbol="$", name="US Dollar"),
    Currency(code="EUR", symbol="€", name="Euro"),
    Currency(code="NZD", symbol="NZ$", name="New Zealand Dollar"),
]


def get_currency(code: str) -> Optional[Currency]:
    """Look up a currency by code, or None if it is not in the catalog."""
    return next((c for c in CURRENCIES if c.code == code), None)
