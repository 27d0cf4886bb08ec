"""
Tests for transcript normalization.
"""
from bill_bot.parsers import normalize_text


class TestNormalizeText:
    """Tests for normalize_text()."""

    def test_collapses_whitespace_and_strips(self):
        """Runs of whitespace become one space and the ends are trimmed."""
        assert normalize_text("  ரெண்டு \t  தோசை\n ") == "ரெண்டு தோசை"

    def test_punctuation_becomes_space(self):
        """Punctuation separates words instead of joining them."""
        assert normalize_text("dosa,2!idly?") == "dosa 2 idly"
        assert normalize_text("தோசை.ரெண்டு") == "தோசை ரெண்டு"

    def test_ascii_symbols_become_space(self):
        """Symbols such as $ and + separate words."""
        assert normalize_text("dosa$2+idly") == "dosa 2 idly"

    def test_zero_width_characters_are_dropped(self):
        """Zero-width joiners from keyboards do not split a word."""
        assert normalize_text("தோ\u200bசை") == "தோசை"
        assert normalize_text("ஆம்\u200dலெட்") == "ஆம்லெட்"

    def test_composes_decomposed_vowel_signs(self):
        """Decomposed Tamil vowel signs are composed (NFC)."""
        assert normalize_text("\u0ba4\u0bc6\u0bbe") == "\u0ba4\u0bca"

    def test_rupee_sign_is_kept(self):
        """The rupee sign is a currency symbol, not punctuation."""
        assert normalize_text("50\u20b9") == "50\u20b9"

    def test_non_string_input_is_empty(self):
        """None and non-strings normalize to an empty string."""
        assert normalize_text(None) == ""
        assert normalize_text(42) == ""
        assert normalize_text(["dosa"]) == ""

    def test_idempotent(self):
        """Normalizing twice gives the same result as once."""
        raw = " ரெண்டு,, தோசை !! ஒரு\u200b டீ "
        once = normalize_text(raw)
        assert once == "ரெண்டு தோசை ஒரு டீ"
        assert normalize_text(once) == once
