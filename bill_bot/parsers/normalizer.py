"""
Transcript Normalization.

Speech-to-text output arrives with mixed scripts, stray punctuation and
invisible joiners. Every matcher in the parser runs against the canonical
form produced here.
"""

import re
import unicodedata

# ASCII symbols that are not in a Unicode punctuation category but still
# separate words in a transcript.
_SYMBOL_SEPARATORS = frozenset("`~^+=<>|$")

_WHITESPACE_RUN = re.compile(r"\s+")


def _is_separator(ch: str) -> bool:
    return ch in _SYMBOL_SEPARATORS or unicodedata.category(ch).startswith("P")


def normalize_text(raw) -> str:
    """
    Return the canonical matching form of a raw transcript.

    Applies NFC composition, drops zero-width and other format characters,
    turns punctuation into spaces and collapses whitespace. Anything that is
    not a string normalizes to an empty string.
    """
    if not isinstance(raw, str):
        return ""

    text = unicodedata.normalize("NFC", raw)
    chars = []
    for ch in text:
        if unicodedata.category(ch) == "Cf":
            continue
        chars.append(" " if _is_separator(ch) else ch)

    return _WHITESPACE_RUN.sub(" ", "".join(chars)).strip()
