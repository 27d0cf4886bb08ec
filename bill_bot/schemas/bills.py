"""
Bill Schemas for Bill Bot
=========================

Pydantic models for bill generation, bill history and reports.

Endpoint Coverage:
------------------
- POST /bill/generate-bill: GenerateBillRequest -> BillResponse
- GET /bill/bills: BillListResponse
- GET /bill/bills/{id}: BillResponse
- GET /bill/reports/daily: DailyReportResponse
- POST /generic-bill/generate-bill: GenericBillRequest -> GenericBillResponse

Request Field Names:
--------------------
The mobile client sends camelCase (`voiceInput`); snake_case
(`voice_input`) is accepted as well.

Validation:
-----------
- voice_input cannot exceed MAX_VOICE_INPUT_LENGTH (default: 2000 chars)
- Empty or whitespace-only input is rejected by the route with 400, not
  here, so the client gets a readable message
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_VOICE_INPUT_LENGTH
from ..parsers.types import CatalogItem


class GenerateBillRequest(BaseModel):
    """Request body for menu bill generation."""
    model_config = ConfigDict(populate_by_name=True)

    voice_input: str = Field(..., alias="voiceInput", max_length=MAX_VOICE_INPUT_LENGTH)


class BillItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    menu_item_id: Optional[int] = None
    item_name: str
    quantity: int
    unit_price: float
    total_price: float


class BillOut(BaseModel):
    """
    Response model for a persisted bill.

    Attributes:
        parse_source: "deterministic" or "llm"
        usage: LLM token usage, only set when the fallback produced the bill
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    voice_input: str
    processed_text: Optional[str] = None
    subtotal: float
    tax: float
    total: float
    parse_source: str
    usage: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    items: List[BillItemOut] = []


class BillResponse(BaseModel):
    success: bool = True
    bill: BillOut


class BillListResponse(BaseModel):
    success: bool = True
    count: int
    bills: List[BillOut]


class DailyReportItem(BaseModel):
    item_name: str
    quantity: int
    revenue: float


class DailyReportResponse(BaseModel):
    success: bool = True
    day: str
    bill_count: int
    total_sales: float
    items: List[DailyReportItem]


# =============================================================================
# Generic Shop Bills
# =============================================================================

class CatalogItemIn(BaseModel):
    """A caller-supplied shop product."""
    name: str = Field(..., min_length=1)
    unit_price: float = Field(..., ge=0)
    local_name: Optional[str] = None
    unit: str = "piece"

    def to_catalog_item(self) -> CatalogItem:
        return CatalogItem(
            name=self.name,
            unit_price=self.unit_price,
            local_name=self.local_name,
            unit=self.unit,
        )


class GenericBillRequest(BaseModel):
    """
    Request body for a shop bill.

    Example:
        {
            "voiceInput": "ரெண்டு சிவப்பு கம்பி மூணு செருப்பு",
            "catalog": [{"name": "Red Wires", "unit_price": 50}]
        }
    """
    model_config = ConfigDict(populate_by_name=True)

    voice_input: str = Field(..., alias="voiceInput", max_length=MAX_VOICE_INPUT_LENGTH)
    catalog: Optional[List[CatalogItemIn]] = None


class GenericBillLine(BaseModel):
    item_name: str
    quantity: int
    unit_price: Optional[float] = None
    total_price: Optional[float] = None


class GenericBillOut(BaseModel):
    voice_input: str
    items: List[GenericBillLine]
    bill_total: float
    parse_source: str
    usage: Optional[Dict[str, Any]] = None


class GenericBillResponse(BaseModel):
    success: bool = True
    bill: GenericBillOut
