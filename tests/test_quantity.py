"""
Tests for quantity association around an item mention.

Offsets below are into the normalized text; item spans are given by hand so
each tier can be exercised on its own.
"""
from bill_bot.parsers import (
    DEFAULT_PARSER_CONFIG,
    NO_SPAN,
    ParserConfig,
    QuantityHit,
    Span,
    find_quantity_near,
)


def _find(text, item, used=(), parser_config=DEFAULT_PARSER_CONFIG):
    start = text.index(item)
    return find_quantity_near(text, start, start + len(item), list(used), parser_config)


class TestTiers:
    """Tests for the four search tiers and their order."""

    def test_digits_before(self):
        """Tier 1: digits right before the item."""
        assert _find("2 dosa", "dosa") == QuantityHit(2, Span(0, 1))

    def test_digits_glued_to_item(self):
        assert _find("3dosa", "dosa") == QuantityHit(3, Span(0, 1))

    def test_word_before(self):
        """Tier 2: number word right before the item."""
        assert _find("ரெண்டு தோசை", "தோசை") == QuantityHit(2, Span(0, 6))

    def test_digits_after(self):
        """Tier 3: digits right after the item."""
        assert _find("dosa 3", "dosa") == QuantityHit(3, Span(5, 6))

    def test_word_after(self):
        """Tier 4: number word right after the item."""
        assert _find("idly moonu", "idly") == QuantityHit(3, Span(5, 10))

    def test_before_wins_over_after(self):
        """A quantity before the item is preferred to one after it."""
        assert _find("2 dosa 3", "dosa").quantity == 2

    def test_digits_win_over_words(self):
        """Digits before the item are preferred to a number word before it."""
        hit = _find("ரெண்டு 3 தோசை", "தோசை")
        assert hit.quantity == 3

    def test_default_is_one_with_no_span(self):
        """No quantity anywhere near the item means one."""
        assert _find("dosa", "dosa") == QuantityHit(1, NO_SPAN)

    def test_quantity_must_be_adjacent(self):
        """A number separated by other words is not attached."""
        assert _find("dosa please give 3", "dosa").quantity == 1


class TestUnits:
    """Tests for measurement units next to an item."""

    def test_count_and_dozen_before(self):
        hit = _find("ரெண்டு டஜன் முட்டை", "முட்டை")
        assert hit.quantity == 24
        assert hit.span == Span(0, 11)

    def test_bare_dozen_before(self):
        assert _find("டஜன் முட்டை", "முட்டை").quantity == 12

    def test_digits_and_dozen_before(self):
        assert _find("2 dozen eggs", "eggs").quantity == 24

    def test_kilo_after(self):
        assert _find("rice 2 kg", "rice") == QuantityHit(2, Span(5, 9))

    def test_bare_unit_after(self):
        assert _find("eggs dozen", "eggs").quantity == 12


class TestGuards:
    """Tests for candidates that must not become quantities."""

    def test_price_after_item_is_ignored(self):
        """'dosa 50 rupees' is one dosa costing fifty."""
        assert _find("dosa 50 rupees", "dosa").quantity == 1
        assert _find("தோசை 50 ரூபாய்", "தோசை").quantity == 1

    def test_price_word_after_item_is_ignored(self):
        """A price spoken as a number word is not a quantity either."""
        assert _find("உப்பு பத்து ரூபாய்", "உப்பு").quantity == 1
        assert _find("salt ten rupees", "salt").quantity == 1
        assert _find("salt ten", "salt").quantity == 10

    def test_zero_falls_through(self):
        """A zero count is skipped and the next tier is tried."""
        assert _find("0 dosa", "dosa").quantity == 1
        assert _find("0 dosa moonu", "dosa").quantity == 3

    def test_used_span_falls_through(self):
        """A quantity already consumed by another item is not reused."""
        hit = _find("dosa 2 idly", "idly", used=[Span(5, 6)])
        assert hit == QuantityHit(1, NO_SPAN)

    def test_used_before_falls_to_after(self):
        hit = _find("2 dosa 3", "dosa", used=[Span(0, 1)])
        assert hit == QuantityHit(3, Span(7, 8))


class TestWindows:
    """Tests for the configurable search windows."""

    def test_before_window_limits_search(self):
        narrow = ParserConfig(quantity_window_before=0)
        assert _find("2 dosa", "dosa", parser_config=narrow).quantity == 1

    def test_digit_run_is_not_cut_by_the_window(self):
        """A number longer than the before window is still read whole."""
        narrow = ParserConfig(quantity_window_before=2)
        assert _find("120 dosa", "dosa", parser_config=narrow) == QuantityHit(120, Span(0, 3))

    def test_after_window_limits_search(self):
        narrow = ParserConfig(quantity_window_after=1)
        assert _find("dosa 12", "dosa", parser_config=narrow).quantity == 1
        wide = ParserConfig(quantity_window_after=3)
        assert _find("dosa 12", "dosa", parser_config=wide).quantity == 12

    def test_default_windows(self):
        assert DEFAULT_PARSER_CONFIG.quantity_window_before == 14
        assert DEFAULT_PARSER_CONFIG.quantity_window_after == 10
        assert DEFAULT_PARSER_CONFIG.qualifier_window == 14
