"""
LLM Fallback Parsers.

Used only when the deterministic parser recognizes nothing. Both parsers use
instructor over the OpenAI client so the model's answer is validated against
a pydantic schema before we look at it.

To keep prompts small the menu is sent as compact ids ("M0", "M1", ... in
base 36) and the model answers with ids and quantities. Prices and totals are
always computed here from the catalog.

Failures never propagate: a missing API key, a network error or an invalid
answer is logged and treated as "no lines".
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import instructor
from openai import OpenAI

from . import config
from .parsers.types import CatalogItem, OrderLine
from .schemas.llm_responses import LLMGenericOrderResponse, LLMOrderResponse

logger = logging.getLogger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass
class LLMParseResult:
    """Lines recovered by the fallback parser plus its bookkeeping."""
    processed: str
    lines: List[OrderLine]
    usage: Optional[Dict[str, Any]] = None


@dataclass
class GenericBillItem:
    name: str
    quantity: int
    unit_price: Optional[float] = None
    total_price: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_name": self.name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }


@dataclass
class GenericParseResult:
    items: List[GenericBillItem] = field(default_factory=list)
    usage: Optional[Dict[str, Any]] = None


def get_instructor_client():
    """Get instructor-wrapped OpenAI client."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY not set")
    return instructor.from_openai(OpenAI(api_key=api_key))


# =============================================================================
# Compact Catalog
# =============================================================================

def compact_id(index: int) -> str:
    """Short catalog id: 'M' followed by the index in base 36."""
    if index < 0:
        raise ValueError("index must not be negative")
    digits = ""
    while True:
        index, rem = divmod(index, 36)
        digits = _BASE36[rem] + digits
        if index == 0:
            return "M" + digits


def build_compact_catalog(catalog: Sequence[CatalogItem]) -> List[Dict[str, Any]]:
    """Catalog entries keyed by compact id, in catalog order."""
    return [
        {
            "id": compact_id(i),
            "name": item.name,
            "ta": item.local_name or "",
            "price": item.unit_price,
            "unit": item.unit,
            "category": item.category.value,
        }
        for i, item in enumerate(catalog)
    ]


def _usage_from_completion(completion, model: str) -> Optional[Dict[str, Any]]:
    usage = getattr(completion, "usage", None)
    if usage is None:
        return None
    usage_metrics = {
        "model": model,
        "prompt_tokens": getattr(usage, "prompt_tokens", None),
        "completion_tokens": getattr(usage, "completion_tokens", None),
        "total_tokens": getattr(usage, "total_tokens", None),
    }
    logger.info(
        "LLM usage: in=%s out=%s total=%s",
        usage_metrics["prompt_tokens"],
        usage_metrics["completion_tokens"],
        usage_metrics["total_tokens"],
    )
    return usage_metrics


# =============================================================================
# Menu-Backed Fallback
# =============================================================================

MENU_PROMPT = """TASK: Convert noisy Tamil/English speech text to bill items by MENU ID.
MENU (id|en|ta):
{catalog_lines}

RULES:
- Map slang/misspellings/accents (Tamil+Tanglish) to the closest menu item ID.
- Quantities can be digits or Tamil words (ஒரு, ரெண்டு, மூணு, நாலு...).
- Treat "Parotta" as "Parotta (2 pcs)" unless kothu/egg/chicken is said.
- If dosa has qualifiers (masala/ghee/egg), pick that specific item; else Plain Dosa.
- Ignore anything not in MENU. Do not invent items.
- If the same item is repeated, sum quantities.

TEXT:
\"\"\"{voice_input}\"\"\""""


def parse_order_with_llm(
    voice_input: str,
    catalog: Sequence[CatalogItem],
    client=None,
    model: Optional[str] = None,
) -> Optional[LLMParseResult]:
    """
    Ask the LLM to map an order to catalog ids.

    Args:
        voice_input: Raw transcript.
        catalog: Live catalog; its order defines the compact ids.
        client: Optional pre-created instructor client.
        model: Model name; defaults to OPENAI_MODEL.

    Returns:
        LLMParseResult (possibly with no lines), or None if the LLM could not
        be called.
    """
    model = model or config.OPENAI_MODEL
    if client is None:
        try:
            client = get_instructor_client()
        except ValueError:
            logger.warning("OPENAI_API_KEY not set; skipping LLM fallback")
            return None

    compact = build_compact_catalog(catalog)
    by_id = {entry["id"]: item for entry, item in zip(compact, catalog)}
    catalog_lines = "\n".join(f"{e['id']}|{e['name']}|{e['ta']}" for e in compact)

    try:
        response, completion = client.chat.completions.create_with_completion(
            model=model,
            response_model=LLMOrderResponse,
            messages=[{
                "role": "user",
                "content": MENU_PROMPT.format(catalog_lines=catalog_lines, voice_input=voice_input),
            }],
            max_retries=2,
        )
    except Exception as e:
        logger.error("LLM fallback failed: %s", str(e))
        return None

    quantities: Dict[str, int] = {}
    for line in response.lines:
        item_id = line.id.strip()
        if item_id not in by_id:
            logger.debug("LLM returned unknown menu id %s", item_id)
            continue
        quantities[item_id] = quantities.get(item_id, 0) + max(1, line.qty)

    lines = []
    for item_id, quantity in quantities.items():
        item = by_id[item_id]
        lines.append(OrderLine(
            item_name=item.name,
            quantity=quantity,
            unit_price=item.unit_price,
            total_price=item.unit_price * quantity,
            item_id=item.item_id,
        ))

    return LLMParseResult(
        processed=(response.processed or "")[:300],
        lines=lines,
        usage=_usage_from_completion(completion, model),
    )


# =============================================================================
# Free-Form Shop Fallback
# =============================================================================

GENERIC_PROMPT = """You are a billing assistant for small shops in Tamil Nadu. Parse the
customer order (Tamil/Tanglish/English) into items.

RULES:
1. Extract each item with its quantity and the TOTAL price said for it.
2. Tamil numbers: ஒரு(1), இரண்டு/ரெண்டு(2), மூன்று/மூணு(3), நான்கு/நாலு(4), ஐந்து(5)...
3. டஜன் means 12. "ரெண்டு கிலோ அரிசி" is 2 of Rice.
4. Normalize product names to English ("சிவப்பு கம்பி" is "Red Wires", "செருப்பு" is "Shoes").
5. Prices look like "50 ரூபாய்", "50 ரூ", "50 rupees". The price is for the whole line.
6. Default quantity is 1. Default price is null.

CUSTOMER ORDER: "{voice_input}\""""


def parse_generic_order_with_llm(
    voice_input: str,
    client=None,
    model: Optional[str] = None,
) -> Optional[GenericParseResult]:
    """
    Ask the LLM to itemize a free-form shop order.

    The spoken price is the line total, so unit price is derived as
    total / quantity rounded to 2 places.

    Returns:
        GenericParseResult, or None if the LLM could not be called.
    """
    model = model or config.OPENAI_MODEL
    if client is None:
        try:
            client = get_instructor_client()
        except ValueError:
            logger.warning("OPENAI_API_KEY not set; cannot parse generic orders")
            return None

    try:
        response, completion = client.chat.completions.create_with_completion(
            model=model,
            response_model=LLMGenericOrderResponse,
            messages=[{"role": "user", "content": GENERIC_PROMPT.format(voice_input=voice_input)}],
            max_retries=2,
        )
    except Exception as e:
        logger.error("Generic LLM parse failed: %s", str(e))
        return None

    items = []
    for raw in response.items:
        name = (raw.name or "").strip()
        if not name:
            continue
        quantity = max(1, raw.quantity)
        total = raw.total_price
        unit_price = round(total / quantity, 2) if total is not None else None
        items.append(GenericBillItem(name=name, quantity=quantity, unit_price=unit_price, total_price=total))

    return GenericParseResult(items=items, usage=_usage_from_completion(completion, model))
