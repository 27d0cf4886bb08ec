"""
Bill Routes for Bill Bot
========================

This module contains the endpoints the billing app calls with speech-to-text
transcripts of hotel orders, plus bill history and the daily report.

Endpoints:
----------
- POST /bill/generate-bill: Parse a transcript and persist a bill
- GET /bill/bills: List bills, newest first
- GET /bill/bills/{id}: Get one bill
- GET /bill/menu: Available menu items and their compact catalog ids
- GET /bill/reports/daily: Sales summary for one day

Bill Generation Flow:
---------------------
1. Empty or whitespace input is rejected with 400
2. The deterministic parser runs against the live menu
3. If it recognizes nothing, the LLM fallback is tried (when enabled)
4. If nothing is recognized at all, 422 is returned
5. Otherwise the bill is persisted and returned with status 201

Rate Limiting:
--------------
Bill generation is rate limited per client IP (RATE_LIMIT_BILL, default
"30 per minute"). The limiter defined here is shared with the generic bill
routes and installed on the app in main.py.

Usage:
------
    POST /bill/generate-bill
    {"voiceInput": "ரெண்டு தோசை ஒரு ஆம்லெட்"}
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session

from ..config import RATE_LIMIT_ENABLED, get_rate_limit_bill
from ..db import get_db
from ..llm_fallback import build_compact_catalog
from ..models import MenuItem
from ..schemas.bills import (
    BillListResponse,
    BillOut,
    BillResponse,
    DailyReportResponse,
    GenerateBillRequest,
)
from ..schemas.menu import MenuItemOut, MenuListResponse
from ..services.billing import (
    EmptyOrderError,
    UnrecognizedOrderError,
    daily_report,
    generate_menu_bill,
    get_bill,
    list_bills,
    load_catalog,
)


logger = logging.getLogger(__name__)

# Router definition
bills_router = APIRouter(prefix="/bill", tags=["Bills"])


# =============================================================================
# Rate Limiting Setup
# =============================================================================

limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)


# =============================================================================
# Bill Endpoints
# =============================================================================

@bills_router.post("/generate-bill", response_model=BillResponse, status_code=201)
@limiter.limit(get_rate_limit_bill)
def generate_bill(
    request: Request,
    req: GenerateBillRequest,
    db: Session = Depends(get_db),
) -> BillResponse:
    """Generate and persist a bill from a hotel order transcript."""
    try:
        bill = generate_menu_bill(db, req.voice_input)
    except EmptyOrderError:
        raise HTTPException(status_code=400, detail="voiceInput is required")
    except UnrecognizedOrderError:
        raise HTTPException(
            status_code=422,
            detail="Could not recognize any menu items. Please try again.",
        )

    return BillResponse(bill=BillOut.model_validate(bill))


@bills_router.get("/bills", response_model=BillListResponse)
def get_bills(db: Session = Depends(get_db)) -> BillListResponse:
    """List all bills, newest first."""
    bills = [BillOut.model_validate(b) for b in list_bills(db)]
    return BillListResponse(count=len(bills), bills=bills)


@bills_router.get("/bills/{bill_id}", response_model=BillResponse)
def get_bill_detail(bill_id: int, db: Session = Depends(get_db)) -> BillResponse:
    """Get a single bill with its items."""
    bill = get_bill(db, bill_id)
    if not bill:
        raise HTTPException(status_code=404, detail="Bill not found")
    return BillResponse(bill=BillOut.model_validate(bill))


@bills_router.get("/menu", response_model=MenuListResponse)
def get_menu(db: Session = Depends(get_db)) -> MenuListResponse:
    """Available menu items, with the compact ids used by the LLM fallback."""
    items = (
        db.query(MenuItem)
        .filter(MenuItem.is_available.is_(True))
        .order_by(MenuItem.id)
        .all()
    )
    return MenuListResponse(
        count=len(items),
        menu_items=[MenuItemOut.model_validate(m) for m in items],
        catalog=build_compact_catalog(load_catalog(db)),
    )


# =============================================================================
# Report Endpoints
# =============================================================================

@bills_router.get("/reports/daily", response_model=DailyReportResponse)
def get_daily_report(
    day: Optional[date] = Query(None, description="Day as YYYY-MM-DD (default: today, UTC)"),
    db: Session = Depends(get_db),
) -> DailyReportResponse:
    """Bill count, sales total and per-item revenue for one day."""
    return DailyReportResponse(**daily_report(db, day))
