"""
Menu Item Schemas for Bill Bot
==============================

Pydantic models for menu item CRUD and for the public menu listing.

Endpoint Coverage:
------------------
- GET /admin/menu: List all menu items
- POST /admin/menu: Create a new menu item
- GET /admin/menu/{id}: Get a specific menu item
- PUT /admin/menu/{id}: Update a menu item
- DELETE /admin/menu/{id}: Delete a menu item
- GET /bill/menu: Available items plus the compact catalog

Menu Item Concepts:
-------------------
1. **Name / Local Name**: The English name is what bills show and what the
   parser's alias table resolves to. The Tamil name is for display and for
   the LLM prompt.

2. **Category**: One of breakfast, lunch, dinner, snacks, beverages,
   starters, gravy, general.

3. **Availability**: Unavailable items stay in the database (old bills keep
   their lines) but are left out of the catalog the parser sees.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..parsers.types import ItemCategory


class MenuItemOut(BaseModel):
    """
    Response model for menu item data.

    Can be created directly from SQLAlchemy MenuItem objects.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    local_name: Optional[str] = None
    price: float
    unit: str
    category: str
    is_available: bool
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MenuItemCreate(BaseModel):
    """
    Request model for creating a new menu item.

    Example:
        {
            "name": "Mushroom Dosa",
            "local_name": "காளான் தோசை",
            "price": 90,
            "category": "dinner"
        }
    """
    name: str = Field(..., min_length=1)
    local_name: Optional[str] = None
    price: float = Field(..., ge=0)
    unit: str = "piece"
    category: ItemCategory = ItemCategory.GENERAL
    is_available: bool = True
    description: Optional[str] = None


class MenuItemUpdate(BaseModel):
    """
    Request model for updating a menu item.

    All fields are optional - only provided fields will be updated.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    local_name: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None
    category: Optional[ItemCategory] = None
    is_available: Optional[bool] = None
    description: Optional[str] = None


class CompactCatalogEntry(BaseModel):
    """A catalog row as the LLM fallback sees it."""
    id: str
    name: str
    ta: str
    price: float
    unit: str
    category: str


class MenuListResponse(BaseModel):
    success: bool = True
    count: int
    menu_items: List[MenuItemOut]
    catalog: List[CompactCatalogEntry]


def menu_item_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Column values from a create/update payload, with enums flattened."""
    values = dict(data)
    if isinstance(values.get("category"), ItemCategory):
        values["category"] = values["category"].value
    return values
