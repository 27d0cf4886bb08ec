"""
Billing Service for Bill Bot
============================

This module turns a voice transcript into a persisted bill. It is the only
place that decides between the deterministic parser and the LLM fallback.

Key Functions:
--------------
- load_catalog: Live catalog (available menu items) for the parser
- generate_menu_bill: Parse, fall back if needed, persist and return a Bill
- build_generic_bill: Itemize a free-form shop order without persisting it
- list_bills / get_bill: Read persisted bills
- daily_report: Per-day sales summary

Parse Flow:
-----------
1. Deterministic parse against the live catalog (free, always tried first)
2. If nothing was recognized and LLM_FALLBACK_ENABLED, the LLM fallback
   (results cached per normalized input and catalog)
3. If still nothing, UnrecognizedOrderError

Tax Calculation:
----------------
- subtotal = sum of line totals
- tax = round(subtotal * TAX_RATE, 2)
- total = subtotal + tax
"""

import hashlib
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from .. import config
from ..llm_fallback import LLMParseResult, parse_generic_order_with_llm, parse_order_with_llm
from ..models import Bill, BillItem, MenuItem
from ..parsers import CatalogItem, OrderLine, bill_total, normalize_text, parse_order
from ..seed_menu import SHOP_CATALOG


logger = logging.getLogger(__name__)

PARSE_SOURCE_DETERMINISTIC = "deterministic"
PARSE_SOURCE_LLM = "llm"


class EmptyOrderError(ValueError):
    """Raised when the voice input is empty or whitespace only."""


class UnrecognizedOrderError(Exception):
    """Raised when neither parser recognized any item in the voice input."""

    def __init__(self, voice_input: str):
        super().__init__("No items recognized in voice input")
        self.voice_input = voice_input


def _require_voice_input(voice_input: Optional[str]) -> str:
    if not isinstance(voice_input, str) or not voice_input.strip():
        raise EmptyOrderError("voice input is empty")
    return voice_input.strip()


# =============================================================================
# LLM Result Cache
# =============================================================================
# {(normalized_input, catalog_fingerprint): LLMParseResult}, least recently
# used first.

LLM_CACHE: "OrderedDict[Tuple[str, str], LLMParseResult]" = OrderedDict()
_cache_lock = threading.Lock()


def llm_cache_key(voice_input: str, catalog: Sequence[CatalogItem]) -> Tuple[str, str]:
    """
    Cache key for a fallback result.

    The catalog fingerprint covers names, prices and order, since compact
    ids and line prices both depend on them.
    """
    digest = hashlib.sha1()
    for item in catalog:
        digest.update(f"{item.item_id}|{item.name}|{item.unit_price}\n".encode("utf-8"))
    return normalize_text(voice_input.lower()), digest.hexdigest()


def _cached_llm_parse(voice_input: str, catalog: Sequence[CatalogItem]) -> Optional[LLMParseResult]:
    key = llm_cache_key(voice_input, catalog)

    with _cache_lock:
        cached = LLM_CACHE.get(key)
        if cached is not None:
            LLM_CACHE.move_to_end(key)
            logger.debug("LLM cache hit for %r", key[0])
            return cached

    result = parse_order_with_llm(voice_input, catalog)
    # Only successful calls are cached; a failed call may succeed next time
    if result is None:
        return None

    with _cache_lock:
        LLM_CACHE[key] = result
        while len(LLM_CACHE) > max(0, config.LLM_CACHE_MAX_SIZE):
            LLM_CACHE.popitem(last=False)

    return result


def clear_llm_cache() -> int:
    """Empty the fallback cache. Returns the number of entries removed."""
    with _cache_lock:
        count = len(LLM_CACHE)
        LLM_CACHE.clear()
    return count


# =============================================================================
# Menu Bills
# =============================================================================

def load_catalog(db: Session) -> List[CatalogItem]:
    """Available menu items as parser catalog entries, in id order."""
    items = (
        db.query(MenuItem)
        .filter(MenuItem.is_available.is_(True))
        .order_by(MenuItem.id)
        .all()
    )
    return [item.to_catalog_item() for item in items]


def summarize_lines(lines: Iterable[OrderLine]) -> str:
    return ", ".join(f"{line.quantity} x {line.item_name}" for line in lines)


def create_bill(
    db: Session,
    voice_input: str,
    lines: Sequence[OrderLine],
    parse_source: str = PARSE_SOURCE_DETERMINISTIC,
    processed_text: Optional[str] = None,
    usage: Optional[Dict[str, Any]] = None,
) -> Bill:
    """
    Persist a bill and its lines.

    Lines without a price are stored at zero so the bill row stays
    consistent with its subtotal.
    """
    subtotal = float(bill_total(lines))
    tax = round(subtotal * config.TAX_RATE, 2)

    bill = Bill(
        voice_input=voice_input,
        processed_text=processed_text if processed_text is not None else summarize_lines(lines),
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        parse_source=parse_source,
        usage=usage,
    )
    for line in lines:
        bill.items.append(BillItem(
            menu_item_id=line.item_id,
            item_name=line.item_name,
            quantity=line.quantity,
            unit_price=line.unit_price or 0.0,
            total_price=line.total_price or 0.0,
        ))

    db.add(bill)
    db.commit()
    db.refresh(bill)
    return bill


def generate_menu_bill(db: Session, voice_input: str) -> Bill:
    """
    Parse a hotel order against the live menu and persist the bill.

    Args:
        db: Database session.
        voice_input: Raw transcript from the speech-to-text client.

    Returns:
        The persisted Bill with its items loaded.

    Raises:
        EmptyOrderError: voice_input is empty or whitespace.
        UnrecognizedOrderError: no parser recognized any menu item.
    """
    voice_input = _require_voice_input(voice_input)
    catalog = load_catalog(db)

    lines = parse_order(voice_input, catalog)
    parse_source = PARSE_SOURCE_DETERMINISTIC
    processed_text = None
    usage = None

    if not lines and config.LLM_FALLBACK_ENABLED:
        result = _cached_llm_parse(voice_input, catalog)
        if result is not None and result.lines:
            lines = result.lines
            parse_source = PARSE_SOURCE_LLM
            processed_text = result.processed or None
            usage = result.usage

    if not lines:
        logger.info("No items recognized in %r", voice_input[:80])
        raise UnrecognizedOrderError(voice_input)

    bill = create_bill(
        db,
        voice_input,
        lines,
        parse_source=parse_source,
        processed_text=processed_text,
        usage=usage,
    )
    logger.info(
        "Created bill %d via %s parser: %d lines, total=%.2f",
        bill.id, parse_source, len(bill.items), bill.total,
    )
    return bill


def list_bills(db: Session) -> List[Bill]:
    """All bills, newest first."""
    return db.query(Bill).order_by(Bill.created_at.desc(), Bill.id.desc()).all()


def get_bill(db: Session, bill_id: int) -> Optional[Bill]:
    return db.query(Bill).filter(Bill.id == bill_id).first()


# =============================================================================
# Generic Shop Bills
# =============================================================================

@dataclass
class GenericBill:
    """An itemized shop order. Not persisted."""
    voice_input: str
    items: List[Dict[str, Any]] = field(default_factory=list)
    bill_total: float = 0.0
    parse_source: str = PARSE_SOURCE_DETERMINISTIC
    usage: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "voice_input": self.voice_input,
            "items": self.items,
            "bill_total": self.bill_total,
            "parse_source": self.parse_source,
            "usage": self.usage,
        }


def build_generic_bill(
    voice_input: str,
    catalog: Optional[Sequence[CatalogItem]] = None,
) -> GenericBill:
    """
    Itemize a free-form shop order.

    The deterministic parser runs against the given catalog, or the default
    shop catalog when none is given. An empty catalog is used as is. If the
    parser recognizes nothing and the fallback is enabled, the generic LLM
    parser names the items itself; its lines may have no price.

    Raises:
        EmptyOrderError: voice_input is empty or whitespace.
        UnrecognizedOrderError: nothing was recognized.
    """
    voice_input = _require_voice_input(voice_input)
    catalog = list(catalog) if catalog is not None else list(SHOP_CATALOG)

    lines = parse_order(voice_input, catalog)
    if lines:
        items = [line.to_dict() for line in lines]
        logger.info("Generic bill via deterministic parser: %d lines", len(items))
        return GenericBill(
            voice_input=voice_input,
            items=items,
            bill_total=float(bill_total(lines)),
        )

    if config.LLM_FALLBACK_ENABLED:
        result = parse_generic_order_with_llm(voice_input)
        if result is not None and result.items:
            items = [item.to_dict() for item in result.items]
            total = sum(item.total_price for item in result.items if item.total_price is not None)
            logger.info("Generic bill via LLM parser: %d lines", len(items))
            return GenericBill(
                voice_input=voice_input,
                items=items,
                bill_total=float(total),
                parse_source=PARSE_SOURCE_LLM,
                usage=result.usage,
            )

    raise UnrecognizedOrderError(voice_input)


# =============================================================================
# Reports
# =============================================================================

def daily_report(db: Session, day: Optional[date] = None) -> Dict[str, Any]:
    """
    Summarize the bills created on one UTC day.

    Returns:
        Dict with day, bill_count, total_sales and items, where items are
        {item_name, quantity, revenue} ordered by revenue, highest first.
    """
    day = day or datetime.now(timezone.utc).date()
    start = datetime(day.year, day.month, day.day)
    end = start + timedelta(days=1)

    bills = (
        db.query(Bill)
        .filter(Bill.created_at >= start, Bill.created_at < end)
        .all()
    )

    per_item: Dict[str, Dict[str, Any]] = {}
    for bill in bills:
        for item in bill.items:
            entry = per_item.setdefault(
                item.item_name, {"item_name": item.item_name, "quantity": 0, "revenue": 0.0}
            )
            entry["quantity"] += item.quantity
            entry["revenue"] += item.total_price

    items = sorted(per_item.values(), key=lambda e: (-e["revenue"], e["item_name"]))
    return {
        "day": day.isoformat(),
        "bill_count": len(bills),
        "total_sales": round(sum(bill.total for bill in bills), 2),
        "items": items,
    }
