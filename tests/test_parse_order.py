"""
Tests for parse_order(), the deterministic order parser.

Hotel tests run against the seeded hotel menu; shop tests against the default
shop catalog.
"""
import dataclasses
import re

import pytest

from bill_bot.parsers import (
    ALIAS_RULES,
    AliasKey,
    CatalogItem,
    OrderLine,
    ParserConfig,
    Span,
    bill_total,
    collect_alias_quantities,
    normalize_text,
    parse_order,
)


def _summary(lines):
    return [(line.item_name, line.quantity) for line in lines]


class TestHotelOrders:
    """Tests for orders against the hotel menu."""

    def test_tamil_order(self, hotel_catalog):
        lines = parse_order("ரெண்டு தோசை ஒரு ஆம்லெட்", hotel_catalog)
        assert _summary(lines) == [("Plain Dosa", 2), ("Omelette", 1)]
        assert [line.total_price for line in lines] == [60, 20]
        assert bill_total(lines) == 80

    def test_tanglish_order(self, hotel_catalog):
        lines = parse_order("rendu parotta", hotel_catalog)
        assert _summary(lines) == [("Parotta (2 pcs)", 2)]
        assert lines[0].total_price == 80

    def test_english_number_word(self, hotel_catalog):
        assert _summary(parse_order("two idly", hotel_catalog)) == [("Idly (4 pcs)", 2)]

    def test_case_insensitive(self, hotel_catalog):
        assert _summary(parse_order("2 DOSA", hotel_catalog)) == [("Plain Dosa", 2)]

    def test_punctuation_does_not_matter(self, hotel_catalog):
        assert _summary(parse_order("dosa, 2!", hotel_catalog)) == [("Plain Dosa", 2)]

    def test_price_is_not_a_quantity(self, hotel_catalog):
        assert _summary(parse_order("dosa 50 rupees", hotel_catalog)) == [("Plain Dosa", 1)]

    def test_catalog_prices_and_ids_are_carried(self):
        catalog = [CatalogItem("Plain Dosa", 35.5, item_id=7)]
        line = parse_order("3 dosa", catalog)[0]
        assert line == OrderLine("Plain Dosa", 3, 35.5, 106.5, item_id=7)


class TestSpecificity:
    """A qualified mention bills the specific item and never its generic sibling."""

    def test_egg_kothu_parotta(self, hotel_catalog):
        lines = parse_order("egg kothu parotta", hotel_catalog)
        assert _summary(lines) == [("Egg Kothu Parotta", 1)]

    def test_tamil_egg_kothu_parotta_with_quantity(self, hotel_catalog):
        lines = parse_order("ரெண்டு முட்டை கொத்து பரோட்டா", hotel_catalog)
        assert _summary(lines) == [("Egg Kothu Parotta", 2)]
        assert lines[0].total_price == 120

    def test_masala_dosa(self, hotel_catalog):
        assert _summary(parse_order("2 masala dosa", hotel_catalog)) == [("Masala Dosa", 2)]

    def test_ghee_dosa_in_tamil(self, hotel_catalog):
        assert _summary(parse_order("நெய் தோசை", hotel_catalog)) == [("Ghee Dosa", 1)]

    def test_double_omelette(self, hotel_catalog):
        assert _summary(parse_order("double omelette", hotel_catalog)) == [("Double Omelette", 1)]

    def test_parotta_with_egg(self, hotel_catalog):
        assert _summary(parse_order("parotta with egg", hotel_catalog)) == [("Egg Parotta", 1)]

    def test_kalakki_is_not_eggs(self, hotel_catalog):
        assert _summary(parse_order("ரெண்டு முட்டை கலக்கி", hotel_catalog)) == [("Kalakki", 2)]

    def test_plain_and_egg_parotta_together(self, hotel_catalog):
        lines = parse_order("ரெண்டு பரோட்டா ஒரு முட்டை பரோட்டா", hotel_catalog)
        assert _summary(lines) == [("Egg Parotta", 1), ("Parotta (2 pcs)", 2)]

    def test_qualifier_of_an_earlier_item_does_not_suppress(self, hotel_catalog):
        """'egg' in 'egg dosa' does not turn the next parotta into an egg parotta."""
        lines = parse_order("egg dosa 2 parotta", hotel_catalog)
        assert _summary(lines) == [("Parotta (2 pcs)", 2), ("Egg Dosa", 1)]

    def test_specific_and_plain_dosa_in_one_order(self, hotel_catalog):
        lines = parse_order("1 masala dosa 2 dosa", hotel_catalog)
        assert _summary(lines) == [("Masala Dosa", 1), ("Plain Dosa", 2)]

    def test_loose_egg_dosa_is_not_also_plain(self, hotel_catalog):
        """The generic word inside a longer specific match is part of it."""
        assert _summary(parse_order("எக்ஸ் போட்டு தோசை", hotel_catalog)) == [("Egg Dosa", 1)]

    def test_qualifier_only_reaches_back_a_short_window(self, hotel_catalog):
        """A qualifier far before a later plain mention does not suppress it."""
        lines = parse_order("masala dosa and one more plain dosa", hotel_catalog)
        assert _summary(lines) == [("Masala Dosa", 1), ("Plain Dosa", 1)]


class TestQuantityProperties:
    """Tests for quantity accumulation and consumption."""

    def test_word_and_digit_are_equivalent(self, hotel_catalog):
        assert parse_order("ரெண்டு தோசை", hotel_catalog) == parse_order("2 தோசை", hotel_catalog)
        assert _summary(parse_order("2 தோசை", hotel_catalog)) == [("Plain Dosa", 2)]

    def test_repeats_accumulate(self, hotel_catalog):
        lines = parse_order("2 தோசை 3 dosa", hotel_catalog)
        assert _summary(lines) == [("Plain Dosa", 5)]
        assert lines[0].total_price == 150

    def test_quantity_is_consumed_once(self, hotel_catalog):
        """The '2' after dosa is not also read as the quantity before idly."""
        lines = parse_order("dosa 2 idly", hotel_catalog)
        assert _summary(lines) == [("Plain Dosa", 2), ("Idly (4 pcs)", 1)]

    def test_consumed_spans_never_overlap(self):
        used = []
        quantities = collect_alias_quantities("dosa 2 idly 3 omelette", used_spans=used)
        assert quantities == {AliasKey.PLAIN_DOSA: 2, AliasKey.IDLY: 3, AliasKey.OMELETTE: 1}
        assert used == [Span(5, 6), Span(12, 13)]
        for i, a in enumerate(used):
            for b in used[i + 1:]:
                assert not a.overlaps(b)

    def test_overlapping_variants_of_one_alias_count_once(self, hotel_catalog):
        """Two spellings matching the same text are one mention."""
        rules = tuple(
            dataclasses.replace(rule, patterns=(re.compile("idly"), re.compile(r"id\w*")))
            if rule.key is AliasKey.IDLY else rule
            for rule in ALIAS_RULES
        )
        lines = parse_order("2 idly", hotel_catalog, ParserConfig(alias_rules=rules))
        assert _summary(lines) == [("Idly (4 pcs)", 2)]


class TestEdgeCases:
    """Tests for empty, unknown and partial input."""

    @pytest.mark.parametrize("raw", ["", "   ", None, 123, "!!!"])
    def test_empty_input(self, raw, hotel_catalog):
        assert parse_order(raw, hotel_catalog) == []

    def test_nothing_recognized(self, hotel_catalog):
        assert parse_order("hello how are you", hotel_catalog) == []

    def test_unresolvable_alias_is_dropped(self, hotel_catalog):
        """Tea is recognized but the hotel menu has no tea."""
        lines = parse_order("ஒரு டீ ரெண்டு தோசை", hotel_catalog)
        assert _summary(lines) == [("Plain Dosa", 2)]

    def test_empty_catalog(self):
        assert parse_order("ரெண்டு தோசை", []) == []

    def test_hotel_text_against_shop_catalog(self, shop_catalog):
        assert parse_order("ரெண்டு தோசை", shop_catalog) == []

    @pytest.mark.parametrize("text", [
        "ரெண்டு தோசை ஒரு ஆம்லெட்",
        "  2 தோசை,  3 dosa!! ",
        "egg kothu parotta 2",
    ])
    def test_normalized_input_parses_the_same(self, text, hotel_catalog):
        assert parse_order(normalize_text(text), hotel_catalog) == parse_order(text, hotel_catalog)

    def test_deterministic(self, hotel_catalog):
        text = "ரெண்டு பரோட்டா ஒரு முட்டை பரோட்டா மூணு இட்லி"
        assert parse_order(text, hotel_catalog) == parse_order(text, hotel_catalog)


class TestShopOrders:
    """Tests for orders against the shop catalog."""

    def test_end_to_end_shop_order(self, shop_catalog):
        text = "ரெண்டு சிவப்பு கம்பி 50 ரூபாய், மூணு செருப்பு 200 ரூ, ஒரு சரி 500 ரூபாய்"
        lines = parse_order(text, shop_catalog)
        assert _summary(lines) == [("Red Wires", 2), ("Shoes", 3), ("Saree", 1)]
        assert [line.unit_price for line in lines] == [50, 200, 500]
        assert [line.total_price for line in lines] == [100, 600, 500]
        assert bill_total(lines) == 1200

    def test_price_word_is_not_a_quantity(self, shop_catalog):
        """A price said as a word bills like the same price said in digits."""
        lines = parse_order("உப்பு பத்து ரூபாய்", shop_catalog)
        assert lines == parse_order("உப்பு 10 ரூபாய்", shop_catalog)
        assert _summary(lines) == [("Salt", 1)]
        assert lines[0].total_price == 20

    def test_dozen_eggs(self, shop_catalog):
        lines = parse_order("ரெண்டு டஜன் முட்டை", shop_catalog)
        assert _summary(lines) == [("Eggs", 24)]
        assert lines[0].total_price == 120

    def test_red_wires_are_not_also_wires(self, shop_catalog):
        assert _summary(parse_order("3 red wires", shop_catalog)) == [("Red Wires", 3)]

    def test_kilo_of_rice(self, shop_catalog):
        assert _summary(parse_order("அரிசி 5 கிலோ", shop_catalog)) == [("Rice", 5)]


class TestBillTotal:
    """Tests for bill_total()."""

    def test_ignores_unpriced_lines(self):
        lines = [OrderLine("Soap"), OrderLine("Comb", 2, 5.0, 10.0)]
        assert bill_total(lines) == 10.0

    def test_empty(self):
        assert bill_total([]) == 0

    def test_to_dict(self):
        assert OrderLine("Tea", 2, 10.0, 20.0, item_id=3).to_dict() == {
            "item_name": "Tea",
            "quantity": 2,
            "unit_price": 10.0,
            "total_price": 20.0,
        }
