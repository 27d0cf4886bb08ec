"""
Parsers Package.

Deterministic parsing of spoken Tamil/Tanglish orders into priced bill lines.

Exports:
- Types: CatalogItem, OrderLine, ItemCategory
- Normalizer: normalize_text
- Lexicon: QuantityLexicon, DEFAULT_LEXICON
- Alias table: AliasKey, AliasRule, MenuMatchRule, ALIAS_RULES
- Resolver: MenuResolver
- Engine: parse_order, find_quantity_near, bill_total, ParserConfig
"""

from .types import CatalogItem, ItemCategory, OrderLine
from .normalizer import normalize_text
from .lexicon import DEFAULT_LEXICON, QuantityLexicon
from .aliases import ALIAS_RULES, AliasKey, AliasRule, MenuMatchRule
from .resolver import MenuResolver
from .deterministic import (
    DEFAULT_PARSER_CONFIG,
    NO_SPAN,
    ParserConfig,
    QuantityHit,
    Span,
    aggregate_order_lines,
    bill_total,
    collect_alias_quantities,
    find_quantity_near,
    parse_order,
)

__all__ = [
    "CatalogItem",
    "ItemCategory",
    "OrderLine",
    "normalize_text",
    "DEFAULT_LEXICON",
    "QuantityLexicon",
    "ALIAS_RULES",
    "AliasKey",
    "AliasRule",
    "MenuMatchRule",
    "MenuResolver",
    "DEFAULT_PARSER_CONFIG",
    "NO_SPAN",
    "ParserConfig",
    "QuantityHit",
    "Span",
    "aggregate_order_lines",
    "bill_total",
    "collect_alias_quantities",
    "find_quantity_near",
    "parse_order",
]
