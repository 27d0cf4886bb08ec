"""
Schemas Package for Bill Bot
============================

Pydantic models used for API request validation, response serialization
and LLM fallback output.

Schema Organization:
--------------------
- **menu.py**: Menu item CRUD and menu listing schemas
- **bills.py**: Bill generation, history, report and shop bill schemas
- **llm_responses.py**: Structured output models for the LLM fallback

Naming Conventions:
-------------------
- *Out: Response models - what the API returns
- *Create / *Update: Request models for POST / PUT
- *Request / *Response: Complex request and response bodies
"""

# Menu schemas
from .menu import (
    CompactCatalogEntry,
    MenuItemCreate,
    MenuItemOut,
    MenuItemUpdate,
    MenuListResponse,
)

# Bill schemas
from .bills import (
    BillItemOut,
    BillListResponse,
    BillOut,
    BillResponse,
    CatalogItemIn,
    DailyReportItem,
    DailyReportResponse,
    GenerateBillRequest,
    GenericBillLine,
    GenericBillOut,
    GenericBillRequest,
    GenericBillResponse,
)

# LLM fallback schemas
from .llm_responses import (
    LLMGenericItem,
    LLMGenericOrderResponse,
    LLMOrderLine,
    LLMOrderResponse,
)

__all__ = [
    # Menu
    "CompactCatalogEntry",
    "MenuItemCreate",
    "MenuItemOut",
    "MenuItemUpdate",
    "MenuListResponse",
    # Bills
    "BillItemOut",
    "BillListResponse",
    "BillOut",
    "BillResponse",
    "CatalogItemIn",
    "DailyReportItem",
    "DailyReportResponse",
    "GenerateBillRequest",
    "GenericBillLine",
    "GenericBillOut",
    "GenericBillRequest",
    "GenericBillResponse",
    # LLM fallback
    "LLMGenericItem",
    "LLMGenericOrderResponse",
    "LLMOrderLine",
    "LLMOrderResponse",
]
