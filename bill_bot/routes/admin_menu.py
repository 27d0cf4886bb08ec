"""
Admin Menu Routes for Bill Bot
==============================

This module contains admin endpoints for managing the hotel menu. Menu items
are what the order parser resolves spoken dish names to, so renaming an item
away from the names in the alias table makes it unreachable by voice.

Endpoints:
----------
- GET /admin/menu: List all menu items
- POST /admin/menu: Create a new menu item
- GET /admin/menu/{id}: Get a specific menu item
- PUT /admin/menu/{id}: Update a menu item
- DELETE /admin/menu/{id}: Delete a menu item

Authentication:
---------------
All endpoints require admin authentication via HTTP Basic Auth.
See auth.py for credential verification.

Usage:
------
    # Add a dish
    POST /admin/menu
    {
        "name": "Mushroom Dosa",
        "local_name": "காளான் தோசை",
        "price": 90,
        "category": "dinner"
    }

    # Take it off the menu without deleting it
    PUT /admin/menu/66
    {"is_available": false}
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth import verify_admin_credentials
from ..db import get_db
from ..models import MenuItem
from ..schemas.menu import MenuItemCreate, MenuItemOut, MenuItemUpdate, menu_item_values


logger = logging.getLogger(__name__)

# Router definition
admin_menu_router = APIRouter(prefix="/admin/menu", tags=["Admin - Menu"])


# =============================================================================
# Helper Functions
# =============================================================================

def serialize_menu_item(item: MenuItem) -> MenuItemOut:
    """Convert MenuItem model to response schema."""
    return MenuItemOut.model_validate(item)


def _get_item_or_404(db: Session, item_id: int) -> MenuItem:
    item = db.query(MenuItem).filter(MenuItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


def _ensure_name_free(db: Session, name: str, item_id: int = None) -> None:
    query = db.query(MenuItem).filter(MenuItem.name == name)
    if item_id is not None:
        query = query.filter(MenuItem.id != item_id)
    if query.first():
        raise HTTPException(status_code=409, detail=f"Menu item '{name}' already exists")


# =============================================================================
# Menu Endpoints
# =============================================================================

@admin_menu_router.get("", response_model=List[MenuItemOut])
def admin_menu(
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> List[MenuItemOut]:
    """List all menu items. Requires admin authentication."""
    items = db.query(MenuItem).order_by(MenuItem.id.asc()).all()
    return [serialize_menu_item(m) for m in items]


@admin_menu_router.post("", response_model=MenuItemOut, status_code=201)
def create_menu_item(
    payload: MenuItemCreate,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> MenuItemOut:
    """Create a new menu item. Requires admin authentication."""
    _ensure_name_free(db, payload.name)

    item = MenuItem(**menu_item_values(payload.model_dump()))
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Created menu item: %s (id=%d)", item.name, item.id)
    return serialize_menu_item(item)


@admin_menu_router.get("/{item_id}", response_model=MenuItemOut)
def get_menu_item(
    item_id: int,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> MenuItemOut:
    """Get a specific menu item by ID. Requires admin authentication."""
    return serialize_menu_item(_get_item_or_404(db, item_id))


@admin_menu_router.put("/{item_id}", response_model=MenuItemOut)
def update_menu_item(
    item_id: int,
    payload: MenuItemUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> MenuItemOut:
    """Update a menu item. Requires admin authentication."""
    item = _get_item_or_404(db, item_id)

    changes = menu_item_values(payload.model_dump(exclude_none=True))
    if "name" in changes:
        _ensure_name_free(db, changes["name"], item_id=item.id)
    for column, value in changes.items():
        setattr(item, column, value)

    db.commit()
    db.refresh(item)
    logger.info("Updated menu item: %s (id=%d)", item.name, item.id)
    return serialize_menu_item(item)


@admin_menu_router.delete("/{item_id}", status_code=204)
def delete_menu_item(
    item_id: int,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> None:
    """
    Delete a menu item. Requires admin authentication.

    Bill lines that referenced the item keep their copied name and price.
    """
    item = _get_item_or_404(db, item_id)
    logger.info("Deleting menu item: %s (id=%d)", item.name, item.id)
    db.delete(item)
    db.commit()
    return None
