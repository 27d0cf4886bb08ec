"""
Quantity Lexicon.

Maps spoken quantity expressions (digits, number words in three registers,
and measurement units) to integers and compiles the four regular expressions
used by the quantity search around an item mention.

Word alternations are compiled longest-first so a longer slang form is never
shadowed by a shorter word sharing its prefix, and every word is guarded so it
only matches as a whole word in Latin or Tamil script.
"""

import re
from typing import Dict, Iterable, List, Optional

from .constants import (
    CURRENCY_WORDS,
    ENGLISH_NUMBER_WORDS,
    TAMIL_NUMBER_WORDS,
    TANGLISH_NUMBER_WORDS,
    UNIT_SCALES,
)

# Latin letters plus the Tamil Unicode block (letters, vowel signs, virama)
WORD_CHARS = r"A-Za-z\u0B80-\u0BFF"


def longest_first(words: Iterable[str]) -> List[str]:
    """Sort words by length, longest first, keeping a stable order for ties."""
    return sorted(dict.fromkeys(words), key=len, reverse=True)


def guarded_alternation(words: Iterable[str]) -> str:
    """Build a whole-word regex alternation from a word list."""
    body = "|".join(re.escape(w) for w in longest_first(words))
    return rf"(?<![{WORD_CHARS}])(?:{body})(?![{WORD_CHARS}])"


class QuantityLexicon:
    """
    Lookup tables and compiled patterns for quantity expressions.

    Built once at import (see DEFAULT_LEXICON) and never mutated, so one
    instance is safely shared by concurrent parse calls.

    Args:
        number_words: Mapping of number word to its value.
        unit_scales: Mapping of unit word to its multiplier.
        currency_words: Words that mark a preceding digit run or number word
            as a price.
    """

    def __init__(
        self,
        number_words: Dict[str, int],
        unit_scales: Dict[str, int],
        currency_words: Iterable[str],
    ):
        self._numbers = {w.lower(): v for w, v in number_words.items()}
        self._units = {w.lower(): v for w, v in unit_scales.items()}
        self._currency = tuple(currency_words)
        self._currency_lower = frozenset(c.lower() for c in self._currency)

        for word, value in list(self._numbers.items()) + list(self._units.items()):
            if value <= 0:
                raise ValueError(f"Quantity word {word!r} must map to a positive value")

        numbers = guarded_alternation(number_words)
        units = guarded_alternation(unit_scales)
        currency = guarded_alternation(self._currency)

        # Tier 1: digits ending exactly where the item starts
        self.before_digit = re.compile(
            rf"(?<![0-9])(?P<count>[0-9]+)\s*(?:(?P<unit>{units})\s*)?$",
            re.IGNORECASE,
        )
        # Tier 2: number word and/or unit ending exactly where the item starts
        self.before_word = re.compile(
            rf"(?:(?P<count>{numbers})\s*)?(?:(?P<unit>{units})\s*)?$",
            re.IGNORECASE,
        )
        # Tier 3: digits starting right after the item, unless they are a price
        self.after_digit = re.compile(
            rf"\s*(?P<count>[0-9]+)(?![0-9])(?:\s*(?P<unit>{units}))?"
            rf"(?!\s*(?:{currency}))",
            re.IGNORECASE,
        )
        # Tier 4: number word and/or unit starting right after the item,
        # unless the number word is a price
        self.after_word = re.compile(
            rf"\s*(?:(?P<count>{numbers})(?:\s*(?P<unit>{units}))?(?!\s*(?:{currency}))"
            rf"|(?P<unit_only>{units}))",
            re.IGNORECASE,
        )

    def lookup(self, word: str) -> Optional[int]:
        """Return the value of a number word, or None if it is not one."""
        return self._numbers.get(word.lower())

    def unit_scale(self, word: str) -> Optional[int]:
        """Return the multiplier of a unit word, or None if it is not one."""
        return self._units.get(word.lower())

    def words(self) -> List[str]:
        """All number words, longest first."""
        return longest_first(self._numbers)

    def is_currency(self, word: str) -> bool:
        return word.lower() in self._currency_lower

    def quantity_of(self, count: Optional[str], unit: Optional[str]) -> int:
        """
        Convert a matched count and unit into an integer quantity.

        Either part may be missing. A bare unit counts as one of that unit.
        Returns 0 when nothing usable was matched.
        """
        if count is None and unit is None:
            return 0

        if count is None:
            value = 1
        elif count.isdigit():
            value = int(count)
        else:
            value = self.lookup(count) or 0

        scale = self.unit_scale(unit) if unit is not None else 1
        return value * (scale or 1)


DEFAULT_LEXICON = QuantityLexicon(
    number_words={**TAMIL_NUMBER_WORDS, **TANGLISH_NUMBER_WORDS, **ENGLISH_NUMBER_WORDS},
    unit_scales=UNIT_SCALES,
    currency_words=CURRENCY_WORDS,
)
