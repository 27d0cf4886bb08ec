"""
Generic Bill Routes for Bill Bot
================================

Billing for small shops that have no menu in our database. The caller may
send its own product list; when it sends none the default shop catalog is
used. An empty list means no products, so only the LLM fallback can bill.
Nothing here is persisted.

Endpoints:
----------
- POST /generic-bill/generate-bill: Itemize a free-form shop order

Usage:
------
    POST /generic-bill/generate-bill
    {
        "voiceInput": "ரெண்டு சிவப்பு கம்பி மூணு செருப்பு ஒரு புடவை",
        "catalog": [
            {"name": "Red Wires", "unit_price": 50},
            {"name": "Shoes", "unit_price": 200},
            {"name": "Saree", "unit_price": 500}
        ]
    }
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from ..config import get_rate_limit_bill
from ..schemas.bills import GenericBillOut, GenericBillRequest, GenericBillResponse
from ..services.billing import EmptyOrderError, UnrecognizedOrderError, build_generic_bill
from .bills import limiter


logger = logging.getLogger(__name__)

# Router definition
generic_bills_router = APIRouter(prefix="/generic-bill", tags=["Generic Bills"])


@generic_bills_router.post("/generate-bill", response_model=GenericBillResponse)
@limiter.limit(get_rate_limit_bill)
def generate_generic_bill(
    request: Request,
    req: GenericBillRequest,
) -> GenericBillResponse:
    """Itemize a shop order against the supplied or default catalog."""
    catalog = [item.to_catalog_item() for item in req.catalog] if req.catalog is not None else None

    try:
        bill = build_generic_bill(req.voice_input, catalog)
    except EmptyOrderError:
        raise HTTPException(status_code=400, detail="voiceInput is required")
    except UnrecognizedOrderError:
        raise HTTPException(
            status_code=422,
            detail="Could not recognize any items. Please try again.",
        )

    return GenericBillResponse(bill=GenericBillOut(**bill.to_dict()))
