"""
Menu Resolver.

Maps an AliasKey to the one catalog entry it bills as. An entry whose
name equals the key (case-insensitive) wins; otherwise the alias's
MenuMatchRule picks the first entry satisfying its include/exclude patterns.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .aliases import AliasKey, AliasRule
from .types import CatalogItem

logger = logging.getLogger(__name__)


class MenuResolver:
    """
    Resolve alias keys against one catalog snapshot.

    Args:
        catalog: Live catalog entries, in the order the caller supplied them.
        rules: Alias rules providing the fallback predicate for each key.
    """

    def __init__(self, catalog: Iterable[CatalogItem], rules: Iterable[AliasRule]):
        self._catalog: List[CatalogItem] = list(catalog)
        self._rules: Dict[AliasKey, AliasRule] = {rule.key: rule for rule in rules}
        self._by_name: Dict[str, CatalogItem] = {}
        for item in self._catalog:
            self._by_name.setdefault((item.name or "").strip().lower(), item)

    def resolve(self, key: AliasKey) -> Optional[CatalogItem]:
        """Return the catalog entry for key, or None if the catalog has none."""
        exact = self._by_name.get(key.value.lower())
        if exact is not None:
            return exact

        rule = self._rules.get(key)
        if rule is None:
            return None

        for item in self._catalog:
            if rule.menu_match.matches(item):
                logger.debug("Resolved %s to %s by pattern", key.value, item.name)
                return item
        return None
