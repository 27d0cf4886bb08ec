"""
Tests for resolving alias keys to catalog entries.
"""
from bill_bot.parsers import ALIAS_RULES, AliasKey, CatalogItem, MenuResolver


class TestMenuResolver:
    """Tests for MenuResolver.resolve()."""

    def test_exact_name_match(self, hotel_catalog):
        """A catalog entry named exactly like the key wins."""
        resolver = MenuResolver(hotel_catalog, ALIAS_RULES)
        assert resolver.resolve(AliasKey.PLAIN_DOSA).name == "Plain Dosa"
        assert resolver.resolve(AliasKey.PAROTTA).name == "Parotta (2 pcs)"

    def test_exact_match_ignores_case(self):
        catalog = [CatalogItem("masala dosa", 55), CatalogItem("MASALA DOSA", 99)]
        resolver = MenuResolver(catalog, ALIAS_RULES)
        assert resolver.resolve(AliasKey.MASALA_DOSA).unit_price == 55

    def test_pattern_match_when_names_differ(self):
        """A catalog with its own naming still resolves through menu patterns."""
        catalog = [
            CatalogItem("Masala Dosa", 50),
            CatalogItem("Dosa", 25, local_name="தோசை"),
            CatalogItem("Egg Parotta", 45),
            CatalogItem("Parotta", 20),
        ]
        resolver = MenuResolver(catalog, ALIAS_RULES)
        assert resolver.resolve(AliasKey.PLAIN_DOSA).name == "Dosa"
        assert resolver.resolve(AliasKey.PAROTTA).name == "Parotta"
        assert resolver.resolve(AliasKey.EGG_PAROTTA).name == "Egg Parotta"

    def test_first_pattern_match_wins(self):
        """With several candidates, catalog order decides."""
        catalog = [CatalogItem("Chicken Dum Biryani", 150), CatalogItem("Chicken Biryani Special", 170)]
        resolver = MenuResolver(catalog, ALIAS_RULES)
        assert resolver.resolve(AliasKey.CHICKEN_BIRYANI).name == "Chicken Dum Biryani"

    def test_unresolvable_key(self, hotel_catalog):
        """The hotel menu carries no tea."""
        resolver = MenuResolver(hotel_catalog, ALIAS_RULES)
        assert resolver.resolve(AliasKey.TEA) is None

    def test_empty_catalog(self):
        assert MenuResolver([], ALIAS_RULES).resolve(AliasKey.IDLY) is None
