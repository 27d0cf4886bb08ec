"""
Deterministic Order Parser.

Regex-and-lexicon parsing of Tamil, Tanglish and English order transcripts.
This is the free path: the billing service only calls the LLM fallback when
this returns no lines.

The scan works in three steps:

1. Every alias pattern is run over the normalized text. A match preceded by
   one of the alias's qualifier words is dropped.
2. For each surviving match, a quantity is searched for around it (see
   find_quantity_near). The text a quantity was read from is consumed so no
   other match can reuse it.
3. Quantities are summed per alias and each alias is resolved to a catalog
   entry and priced. Aliases the catalog does not carry are dropped.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .. import config
from .aliases import ALIAS_RULES, AliasKey, AliasRule, check_exhaustive
from .lexicon import DEFAULT_LEXICON, QuantityLexicon
from .normalizer import normalize_text
from .resolver import MenuResolver
from .types import CatalogItem, OrderLine

logger = logging.getLogger(__name__)


# =============================================================================
# Spans and Configuration
# =============================================================================

class Span(NamedTuple):
    """Half-open character range [start, end) in the normalized text."""
    start: int
    end: int

    def overlaps(self, other: "Span") -> bool:
        return not (self.end <= other.start or self.start >= other.end)

    def contains(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end

    @property
    def is_empty(self) -> bool:
        return self.start < 0 or self.end <= self.start


NO_SPAN = Span(-1, -1)


class QuantityHit(NamedTuple):
    quantity: int
    span: Span


@dataclass(frozen=True)
class ParserConfig:
    """
    Immutable parser configuration shared by all parse calls.

    Attributes:
        alias_rules: Ordered alias table; earlier rules claim quantities first.
        lexicon: Quantity words, units and compiled quantity patterns.
        quantity_window_before: Characters searched before a match for a quantity.
        quantity_window_after: Characters searched after a match for a quantity.
        qualifier_window: Characters before a match searched for qualifier words.
    """
    alias_rules: Tuple[AliasRule, ...] = ALIAS_RULES
    lexicon: QuantityLexicon = DEFAULT_LEXICON
    quantity_window_before: int = 14
    quantity_window_after: int = 10
    qualifier_window: int = 14

    def __post_init__(self):
        check_exhaustive(self.alias_rules)
        for name in ("quantity_window_before", "quantity_window_after", "qualifier_window"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


DEFAULT_PARSER_CONFIG = ParserConfig(
    quantity_window_before=config.QUANTITY_WINDOW_BEFORE,
    quantity_window_after=config.QUANTITY_WINDOW_AFTER,
    qualifier_window=config.QUALIFIER_WINDOW,
)


# =============================================================================
# Quantity Association
# =============================================================================

def _is_unused(span: Span, used_spans: Sequence[Span]) -> bool:
    return not any(span.overlaps(used) for used in used_spans)


def _hit_from_match(match, lexicon: QuantityLexicon, unit_group: str = "unit") -> Optional[QuantityHit]:
    count = match.group("count")
    unit = match.group(unit_group)
    if unit is None and "unit_only" in match.re.groupindex:
        unit = match.group("unit_only")
        unit_group = "unit_only" if unit is not None else unit_group

    quantity = lexicon.quantity_of(count, unit)
    if quantity <= 0:
        return None

    groups = [g for g, value in (("count", count), (unit_group, unit)) if value is not None]
    start = min(match.start(g) for g in groups)
    end = max(match.end(g) for g in groups)
    return QuantityHit(quantity, Span(start, end))


def find_quantity_near(
    text: str,
    start: int,
    end: int,
    used_spans: Sequence[Span],
    parser_config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> QuantityHit:
    """
    Find the quantity attached to the item matched at text[start:end].

    Tiers are tried in order and the first usable candidate wins:

    1. digits ending right before the match
    2. a number word ending right before the match
    3. digits starting right after the match (not followed by a currency word)
    4. a number word starting right after the match (same currency guard)

    A candidate overlapping a used span, or worth zero, falls through to the
    next tier. With no usable candidate the quantity is 1 and NO_SPAN is
    returned. A digit run cut by the edge of the before window is widened to
    its first digit.

    Args:
        text: Normalized transcript.
        start: Start offset of the item match.
        end: End offset of the item match.
        used_spans: Spans already consumed by earlier matches in this parse.
        parser_config: Window sizes and lexicon to use.

    Returns:
        QuantityHit with the quantity and the span it was read from.
    """
    lexicon = parser_config.lexicon
    before_start = max(0, start - parser_config.quantity_window_before)
    # Never cut a digit run in half at the window edge
    while 0 < before_start < start and text[before_start].isdigit() and text[before_start - 1].isdigit():
        before_start -= 1
    after_limit = min(len(text), end + parser_config.quantity_window_after)

    before_tiers = (lexicon.before_digit, lexicon.before_word)
    for pattern in before_tiers:
        match = pattern.search(text, before_start, start)
        if match is None:
            continue
        hit = _hit_from_match(match, lexicon)
        if hit is not None and _is_unused(hit.span, used_spans):
            return hit

    after_tiers = (lexicon.after_digit, lexicon.after_word)
    for pattern in after_tiers:
        # Lookaheads may read past the window; the quantity itself may not
        match = pattern.match(text, end)
        if match is None:
            continue
        hit = _hit_from_match(match, lexicon)
        if hit is None or hit.span.end > after_limit:
            continue
        if _is_unused(hit.span, used_spans):
            return hit

    return QuantityHit(1, NO_SPAN)


# =============================================================================
# Alias Scan and Aggregation
# =============================================================================

def collect_alias_quantities(
    text: str,
    parser_config: ParserConfig = DEFAULT_PARSER_CONFIG,
    used_spans: Optional[List[Span]] = None,
) -> Dict[AliasKey, int]:
    """
    Scan normalized text and sum the quantity of every alias mention.

    Within one alias, matches whose text overlaps an earlier match of the same
    alias are the same mention seen by another spelling variant and are
    counted once. A match lying wholly inside an item counted by an earlier
    rule ("dosa" inside "masala dosa") is part of that item and is skipped.

    Args:
        text: Normalized transcript.
        parser_config: Alias table, lexicon and windows.
        used_spans: Optional list that receives every consumed quantity span.

    Returns:
        Mapping of alias key to total quantity, in first-seen order.
    """
    quantities: Dict[AliasKey, int] = {}
    if used_spans is None:
        used_spans = []
    # Item spans counted by earlier (more specific) rules
    claimed: List[Span] = []

    for rule in parser_config.alias_rules:
        seen: List[Span] = []
        for pattern in rule.patterns:
            for match in pattern.finditer(text):
                item_span = Span(match.start(), match.end())
                if item_span.end <= item_span.start:
                    continue
                if any(item_span.overlaps(s) for s in seen):
                    continue
                if any(s.contains(item_span) for s in claimed):
                    logger.debug("Skipping %s at %d: inside an earlier item", rule.key.value, item_span.start)
                    continue

                preceding = text[max(0, item_span.start - parser_config.qualifier_window):item_span.start]
                if rule.is_qualified(preceding):
                    logger.debug(
                        "Skipping %s at %d: qualifier in %r", rule.key.value, item_span.start, preceding
                    )
                    continue

                seen.append(item_span)
                hit = find_quantity_near(text, item_span.start, item_span.end, used_spans, parser_config)
                if not hit.span.is_empty:
                    used_spans.append(hit.span)
                quantities[rule.key] = quantities.get(rule.key, 0) + hit.quantity

        claimed.extend(seen)

    return quantities


def aggregate_order_lines(
    quantities: Dict[AliasKey, int],
    catalog: Iterable[CatalogItem],
    parser_config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> List[OrderLine]:
    """Resolve summed alias quantities to priced order lines."""
    resolver = MenuResolver(catalog, parser_config.alias_rules)
    lines: List[OrderLine] = []

    for key, quantity in quantities.items():
        item = resolver.resolve(key)
        if item is None:
            logger.debug("No catalog entry for %s; dropping %d", key.value, quantity)
            continue
        lines.append(OrderLine(
            item_name=item.name,
            quantity=quantity,
            unit_price=item.unit_price,
            total_price=item.unit_price * quantity,
            item_id=item.item_id,
        ))

    return lines


def parse_order(
    raw_text,
    catalog: Iterable[CatalogItem],
    parser_config: Optional[ParserConfig] = None,
) -> List[OrderLine]:
    """
    Parse a raw order transcript into priced lines against a catalog.

    Never raises for bad input: None, non-strings and text with no known
    items all return an empty list.

    Example:
        >>> lines = parse_order("ரெண்டு தோசை ஒரு டீ", catalog)
        >>> [(l.item_name, l.quantity) for l in lines]
        [('Plain Dosa', 2), ('Tea', 1)]
    """
    parser_config = parser_config or DEFAULT_PARSER_CONFIG
    text = normalize_text(raw_text)
    if not text:
        return []

    quantities = collect_alias_quantities(text, parser_config)
    return aggregate_order_lines(quantities, catalog, parser_config)


def bill_total(lines: Iterable[OrderLine]) -> float:
    """Sum of line totals, ignoring lines without a price."""
    return sum(line.total_price for line in lines if line.total_price is not None)
