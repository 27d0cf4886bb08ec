"""
Routes Package for Bill Bot
===========================

API route modules, one APIRouter per area. main.py mounts every router at
the root and again under /api/v1.

Route Organization:
-------------------
- **bills.py**: Bill generation, history, menu listing and daily report
- **generic_bills.py**: Shop billing against a caller-supplied catalog
- **admin_menu.py**: Menu item CRUD (HTTP Basic auth)
"""

from .bills import bills_router, limiter
from .generic_bills import generic_bills_router
from .admin_menu import admin_menu_router

__all__ = [
    "bills_router",
    "generic_bills_router",
    "admin_menu_router",
    "limiter",
]
