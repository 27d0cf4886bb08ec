"""
Parser Value Types.

Immutable records passed into and out of the order parser. The parser never
touches the database; callers convert their menu rows into CatalogItem
snapshots and receive OrderLine results back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemCategory(str, Enum):
    """Fixed set of menu categories."""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"
    BEVERAGES = "beverages"
    STARTERS = "starters"
    GRAVY = "gravy"
    GENERAL = "general"


@dataclass(frozen=True)
class CatalogItem:
    """A sellable entry in the caller-supplied menu or shop catalog."""
    name: str
    unit_price: float
    local_name: Optional[str] = None
    unit: str = "piece"
    category: ItemCategory = ItemCategory.GENERAL
    item_id: Optional[int] = None


@dataclass(frozen=True)
class OrderLine:
    """One billed line produced by a parse call."""
    item_name: str
    quantity: int = 1
    unit_price: Optional[float] = None
    total_price: Optional[float] = None
    item_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }
