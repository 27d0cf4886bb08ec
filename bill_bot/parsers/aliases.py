"""
Alias Pattern Table.

Every orderable identity the parser understands is an AliasKey. Each key has
an AliasRule holding:

- patterns: spelling variants (Tamil script, transliteration, English) that
  recognize the item in free text
- qualifiers: words that, when found just before a match, mean the text
  belongs to a more specific sibling (so "masala dosa" is not also billed as
  a plain dosa)
- menu_match: how the key is found in a live catalog whose names may differ
  from the canonical key

The table is scanned in order. Qualifier-bearing aliases come before their
generic siblings, and hotel items come before shop goods.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple

from .lexicon import WORD_CHARS
from .types import CatalogItem


class AliasKey(str, Enum):
    """Closed set of item identities. Values are the canonical menu names."""
    # Hotel menu
    EGG_KOTHU_PAROTTA = "Egg Kothu Parotta"
    CHICKEN_KOTHU_PAROTTA = "Chicken Kothu Parotta"
    LIVER_KOTHU_PAROTTA = "Liver Kothu Parotta"
    VEG_KOTHU_PAROTTA = "Veg Kothu Parotta"
    EGG_PAROTTA = "Egg Parotta"
    PAROTTA = "Parotta (2 pcs)"
    SET_DOSA = "Set Dosa (1 pcs)"
    GHEE_DOSA = "Ghee Dosa"
    MASALA_DOSA = "Masala Dosa"
    EGG_DOSA = "Egg Dosa"
    ONION_DOSA = "Onion Dosa"
    PODI_DOSA = "Podi Dosa"
    KAL_DOSA = "Kal Dosa (2 pcs)"
    CHICKEN_DOSA = "Chicken Dosa"
    PLAIN_DOSA = "Plain Dosa"
    IDLY = "Idly (4 pcs)"
    KALAKKI = "Kalakki"
    DOUBLE_OMELETTE = "Double Omelette"
    OMELETTE = "Omelette"
    CHICKEN_BIRYANI = "Chicken Biryani"
    TEA = "Tea"
    CURD_RICE = "Curd Rice"
    # Shop goods
    RED_WIRES = "Red Wires"
    WIRES = "Wires"
    CABLES = "Cables"
    SHOES = "Shoes"
    SAREE = "Saree"
    SHIRT = "Shirt"
    PANTS = "Pants"
    JEANS = "Jeans"
    RICE = "Rice"
    MILK = "Milk"
    EGGS = "Eggs"
    BREAD = "Bread"
    SUGAR = "Sugar"
    SALT = "Salt"
    APPLES = "Apples"
    SCREWS = "Screws"
    NAILS = "Nails"
    HAMMER = "Hammer"


# =============================================================================
# Rule Types
# =============================================================================

@dataclass(frozen=True)
class MenuMatchRule:
    """
    Catalog predicate for one alias.

    An entry matches when every include pattern is found in its English or
    local name and the exclude pattern is found in neither.
    """
    include: Tuple[Pattern, ...]
    exclude: Optional[Pattern] = None

    def matches(self, item: CatalogItem) -> bool:
        names = [(item.name or "").lower(), (item.local_name or "").lower()]

        def has(pattern: Pattern) -> bool:
            return any(pattern.search(n) for n in names)

        if not all(has(p) for p in self.include):
            return False
        return self.exclude is None or not has(self.exclude)


@dataclass(frozen=True)
class AliasRule:
    key: AliasKey
    patterns: Tuple[Pattern, ...]
    menu_match: MenuMatchRule
    qualifiers: Tuple[Pattern, ...] = ()

    def is_qualified(self, preceding: str) -> bool:
        """
        True when the text just before a match names a more specific item.

        The qualifier has to lead into the match: only the rest of its own
        word, "with" and kothu words, and spaces may stand between them. A
        qualifier belonging to an earlier item ("egg dosa 2 parotta") does not
        count.
        """
        for qualifier in self.qualifiers:
            for match in qualifier.finditer(preceding):
                if QUALIFIER_BRIDGE.fullmatch(preceding, match.end()):
                    return True
        return False


# =============================================================================
# Pattern Helpers
# =============================================================================

def _compile(*sources: str) -> Tuple[Pattern, ...]:
    return tuple(re.compile(s, re.IGNORECASE) for s in sources)


def _word(source: str) -> str:
    """Guard a Tamil-script alternation so it only matches whole words."""
    return rf"(?<![{WORD_CHARS}])(?:{source})(?![{WORD_CHARS}])"


def _menu(*include: str, exclude: Optional[str] = None) -> MenuMatchRule:
    return MenuMatchRule(
        include=_compile(*include),
        exclude=re.compile(exclude, re.IGNORECASE) if exclude else None,
    )


def _rule(key, patterns, menu, qualifiers=()) -> AliasRule:
    return AliasRule(
        key=key,
        patterns=_compile(*patterns),
        menu_match=menu,
        qualifiers=_compile(*qualifiers),
    )


KOTHU_TA = r"(?:கொத்து|குத்து|கோத்து|கொத்த)"
KOTHU_EN = r"(?:kothu|kuthu|koththu)"
PAROTTA_TA = r"(?:பரோட்டா|புரோட்டா)"
PAROTTA_EN = r"(?:parotta|parota|porotta|barotta)"
EGG_TA = r"(?:முட்டை|[ஏஎ]க்+|ஏக்க|எக|அண்டு|அண்ட)"
WITH_TA = r"(?:உடன்|த்தோடு|தோடு|ஓடு|ஒடு|கூட)"
DOSA_EN = r"\bdosai?\b"

# Text allowed between a qualifier and the item it qualifies
QUALIFIER_BRIDGE = re.compile(
    rf"[{WORD_CHARS}]*(?:\s*(?:\bwith\b|{WITH_TA}|{KOTHU_TA}|\b{KOTHU_EN}\b))*\s*",
    re.IGNORECASE,
)

KOTHU_PAROTTA_MENU = r"kothu\s*parotta|கொத்து\s*பரோட்டா"

# Dish words that turn "முட்டை" into part of a hotel item name
EGG_DISH_WORDS = (
    r"(?:கொத்து|குத்து|கோத்து|கொத்த|பரோட்டா|புரோட்டா|தோசை|சப்பாத்தி|மசாலா"
    r"|மிளகு|பிரைட்|ப்ரைட்|ரைஸ்|ஆம்லெட்|கலக்கி|உடன்|த்தோடு|தோடு|ஓடு|ஒடு|கூட)"
)


# =============================================================================
# Alias Table
# =============================================================================

ALIAS_RULES: Tuple[AliasRule, ...] = (
    # --- Kothu parotta: specific before generic ---
    _rule(
        AliasKey.EGG_KOTHU_PAROTTA,
        [
            rf"{EGG_TA}\s*{KOTHU_TA}(?:\s*{PAROTTA_TA})?",
            rf"\begg\s*{KOTHU_EN}(?:\s*{PAROTTA_EN})?",
        ],
        _menu(r"egg|முட்டை", KOTHU_PAROTTA_MENU),
    ),
    _rule(
        AliasKey.CHICKEN_KOTHU_PAROTTA,
        [
            rf"சிக்கன்\s*{KOTHU_TA}(?:\s*{PAROTTA_TA})?",
            rf"\bchicken\s*{KOTHU_EN}(?:\s*{PAROTTA_EN})?",
        ],
        _menu(r"chicken|சிக்கன்", KOTHU_PAROTTA_MENU),
    ),
    _rule(
        AliasKey.LIVER_KOTHU_PAROTTA,
        [
            rf"கல்லீரல்\s*{KOTHU_TA}(?:\s*{PAROTTA_TA})?",
            rf"\bliver\s*{KOTHU_EN}(?:\s*{PAROTTA_EN})?",
        ],
        _menu(r"liver|கல்லீரல்", KOTHU_PAROTTA_MENU),
    ),
    _rule(
        AliasKey.VEG_KOTHU_PAROTTA,
        [
            rf"(?:(?:காய்கறி|வெஜ்)\s*)?{KOTHU_TA}\s*{PAROTTA_TA}",
            rf"(?:\bveg\s*)?\b{KOTHU_EN}\s*{PAROTTA_EN}",
        ],
        _menu(KOTHU_PAROTTA_MENU, exclude=r"egg|chicken|liver|முட்டை|சிக்கன்|கல்லீரல்"),
        qualifiers=[EGG_TA, r"\begg\b", r"சிக்கன்|\bchicken\b", r"கல்லீரல்|\bliver\b"],
    ),

    # --- Parotta ---
    _rule(
        AliasKey.EGG_PAROTTA,
        [
            rf"{EGG_TA}\s*(?:{WITH_TA}\s*)?{PAROTTA_TA}",
            rf"\begg\s*(?:with\s*)?{PAROTTA_EN}",
            rf"\b{PAROTTA_EN}\s*(?:with\s*)?egg\b",
        ],
        _menu(r"egg|முட்டை", r"parotta|parota|porotta|barotta|பரோட்டா", exclude=r"kothu|கொத்து"),
    ),
    _rule(
        AliasKey.PAROTTA,
        [
            PAROTTA_TA,
            rf"\b{PAROTTA_EN}\b(?!\s*(?:with\s*)?egg)",
        ],
        _menu(
            r"parotta|parota|பரோட்டா",
            exclude=r"kothu|egg|chicken|liver|கொத்து|முட்டை|சிக்கன்|கல்லீரல்",
        ),
        qualifiers=[
            KOTHU_TA, rf"\b{KOTHU_EN}\b", EGG_TA, r"\begg\b",
            r"சிக்கன்|\bchicken\b", r"கல்லீரல்|\bliver\b",
        ],
    ),

    # --- Dosa: every qualified variant before plain ---
    _rule(
        AliasKey.SET_DOSA,
        [r"செட்\s*தோசை", rf"\bset\s*{DOSA_EN}"],
        _menu(r"set\s*dosa|செட்\s*தோசை"),
    ),
    _rule(
        AliasKey.GHEE_DOSA,
        [r"நெய்\s*தோசை", rf"\bghee\s*{DOSA_EN}"],
        _menu(r"ghee\s*dosa|நெய்\s*தோசை"),
    ),
    _rule(
        AliasKey.MASALA_DOSA,
        [r"(?:மசாலா|மசால்)\s*தோசை", rf"\bmasala\s*{DOSA_EN}", rf"\bm\s*{DOSA_EN}"],
        _menu(r"masala\s*dosa|மசாலா\s*தோசை", exclude=r"ghee|egg|நெய்|முட்டை"),
    ),
    _rule(
        AliasKey.EGG_DOSA,
        [r"முட்டை\s*தோசை", rf"\begg\s*{DOSA_EN}", r"[ஏஎ]க்.{0,12}தோசை"],
        _menu(r"egg\s*dosa|முட்டை\s*தோசை"),
    ),
    _rule(
        AliasKey.ONION_DOSA,
        [r"வெங்காய(?:ம்)?\s*தோசை", rf"\bonion\s*{DOSA_EN}"],
        _menu(r"onion\s*dosa|வெங்காய\s*தோசை"),
    ),
    _rule(
        AliasKey.PODI_DOSA,
        [r"பொடி\s*தோசை", rf"\bpodi\s*{DOSA_EN}"],
        _menu(r"podi\s*dosa|பொடி\s*தோசை", exclude=r"masala|ghee|மசாலா|நெய்"),
    ),
    _rule(
        AliasKey.KAL_DOSA,
        [_word(r"கல்") + r"\s*தோசை", rf"\bkal\s*{DOSA_EN}"],
        _menu(r"kal\s*dosa|" + _word(r"கல்") + r"\s*தோசை"),
    ),
    _rule(
        AliasKey.CHICKEN_DOSA,
        [r"சிக்கன்\s*தோசை", rf"\bchicken\s*{DOSA_EN}"],
        _menu(r"chicken\s*dosa|சிக்கன்\s*தோசை"),
    ),
    _rule(
        AliasKey.PLAIN_DOSA,
        [r"(?:(?:பிளைன்|சாதா)\s*)?தோசை", rf"(?:\bplain\s*)?{DOSA_EN}"],
        _menu(
            r"\bdosa\b|தோசை",
            exclude=(
                r"masala|ghee|onion|egg|uthappam|\bset\b|\bkal\b|podi|chicken|keema|liver"
                r"|மசாலா|நெய்|வெங்காய|முட்டை|செட்|" + _word(r"கல்") + r"|பொடி|சிக்கன்|கீமா|கல்லீரல்"
            ),
        ),
        qualifiers=[
            r"மசாலா|மசால்|நெய்|முட்டை|[ஏஎ]க்|செட்|வெங்காய|பொடி|சிக்கன்|கல்லீரல்|கீமா",
            _word(r"கல்"),
            r"\b(?:masala|ghee|egg|set|onion|podi|kal|chicken|keema|liver|m)\b",
        ],
    ),

    # --- Other hotel items ---
    _rule(
        AliasKey.IDLY,
        [r"இட்லி", r"\b(?:idli|idly|itly)\b"],
        _menu(r"idli|idly|இட்லி", exclude=r"podi|onion|பொடி|வெங்காய"),
    ),
    _rule(
        AliasKey.KALAKKI,
        [r"(?:முட்டை\s*)?கலக்கி", r"(?:\begg\s*)?\bkalakki\b"],
        _menu(r"kalakki|கலக்கி|கலகி"),
    ),
    _rule(
        AliasKey.DOUBLE_OMELETTE,
        [r"டபுள்\s*ஆம்லெட்", r"\bdouble\s*om(?:e)?lett?e?\b"],
        _menu(r"double\s*omelet|டபுள்\s*ஆம்லெட்"),
    ),
    _rule(
        AliasKey.OMELETTE,
        [r"(?:முட்டை\s*)?ஆம்லெட்", r"(?:\begg\s*)?\bom(?:e)?lett?e?\b"],
        _menu(r"omelet|ஆம்லெட்", exclude=r"double|டபுள்"),
        qualifiers=[r"டபுள்|\bdouble\b"],
    ),
    _rule(
        AliasKey.CHICKEN_BIRYANI,
        [r"சிக்கன்\s*பிரியாணி", r"\bchicken\s*bir(?:i)?yani\b"],
        _menu(r"chicken|சிக்கன்", r"biryani|பிரியாணி"),
    ),
    _rule(
        AliasKey.TEA,
        [_word(r"டீ"), r"\btea\b"],
        _menu(r"\btea\b|" + _word(r"டீ")),
    ),
    _rule(
        AliasKey.CURD_RICE,
        [r"தயிர்\s*(?:சாதம்|சோறு|சா)?", r"\bcurd\s*rice\b"],
        _menu(r"curd\s*rice|தயிர்\s*(?:சாதம்|சோறு)"),
    ),

    # --- Shop goods ---
    _rule(
        AliasKey.RED_WIRES,
        [r"(?:சிவப்பு|ரெட்)\s*(?:கம்பி|வயர்)(?:கள்)?", r"\bred\s*wires?\b"],
        _menu(r"red\s*wire|சிவப்பு\s*(?:கம்பி|வயர்)"),
    ),
    _rule(
        AliasKey.WIRES,
        [_word(r"(?:கம்பி|வயர்)(?:கள்)?"), r"\bwires?\b"],
        _menu(r"wire|கம்பி|வயர்", exclude=r"\bred\b|சிவப்பு"),
        qualifiers=[r"சிவப்பு|ரெட்|\bred\b"],
    ),
    _rule(
        AliasKey.CABLES,
        [_word(r"கேபிள்(?:கள்)?"), r"\bcables?\b"],
        _menu(r"cable|கேபிள்"),
    ),
    _rule(
        AliasKey.SHOES,
        [_word(r"செருப்பு(?:கள்)?|ஷூஸ்|ஷூ"), r"\b(?:shoes?|chappals?)\b"],
        _menu(r"shoe|chappal|செருப்பு"),
    ),
    _rule(
        AliasKey.SAREE,
        [_word(r"சரி(?:கள்)?|சேலை(?:கள்)?|புடவை(?:கள்)?"), r"\b(?:sarees?|saris?)\b"],
        _menu(r"saree|\bsari\b|சேலை|புடவை"),
    ),
    _rule(
        AliasKey.SHIRT,
        [_word(r"சட்டை(?:கள்)?|சட்ட|சேட்டை|சேட்டு"), r"\bshirts?\b"],
        _menu(r"shirt|சட்டை"),
    ),
    _rule(
        AliasKey.PANTS,
        [_word(r"பேண்ட்(?:கள்)?"), r"\bpants\b"],
        _menu(r"\bpants?\b|பேண்ட்"),
    ),
    _rule(
        AliasKey.JEANS,
        [_word(r"ஜீன்ஸ்"), r"\bjeans\b"],
        _menu(r"jeans|ஜீன்ஸ்"),
    ),
    _rule(
        AliasKey.RICE,
        [_word(r"அரிசி|ரைஸ்"), r"\brice\b"],
        _menu(r"\brice\b|அரிசி", exclude=r"fried|curd|biryani|பிரைட்|தயிர்"),
        qualifiers=[r"பிரைட்|ப்ரைட்|தயிர்|\b(?:fried|curd|biryani)\b"],
    ),
    _rule(
        AliasKey.MILK,
        [_word(r"பால்|மில்க்"), r"\bmilk\b"],
        _menu(r"\bmilk\b|பால்"),
    ),
    _rule(
        AliasKey.EGGS,
        [
            _word(r"முட்டை(?:கள்)?") + rf"(?!\s*{EGG_DISH_WORDS})",
            _word(r"எக்ஸ்"),
            r"\beggs\b",
        ],
        _menu(r"\beggs\b|^முட்டை$"),
    ),
    _rule(
        AliasKey.BREAD,
        [_word(r"ரொட்டி|ப்ரெட்"), r"\bbread\b"],
        _menu(r"bread|ரொட்டி"),
    ),
    _rule(
        AliasKey.SUGAR,
        [_word(r"சர்க்கரை|சுகர்"), r"\bsugar\b"],
        _menu(r"sugar|சர்க்கரை"),
    ),
    _rule(
        AliasKey.SALT,
        [_word(r"உப்பு|சால்ட்"), r"\bsalt\b"],
        _menu(r"\bsalt\b|உப்பு"),
    ),
    _rule(
        AliasKey.APPLES,
        [_word(r"ஆப்பிள்(?:கள்)?"), r"\bapples?\b"],
        _menu(r"apple|ஆப்பிள்"),
    ),
    _rule(
        AliasKey.SCREWS,
        [_word(r"திருகு(?:கள்)?"), r"\bscrews?\b"],
        _menu(r"screw|திருகு"),
    ),
    _rule(
        AliasKey.NAILS,
        [_word(r"ஆணி(?:கள்)?"), r"\bnails?\b"],
        _menu(r"\bnails?\b|ஆணி"),
    ),
    _rule(
        AliasKey.HAMMER,
        [_word(r"சுத்தி(?:கள்)?"), r"\bhammers?\b"],
        _menu(r"hammer|சுத்தி"),
    ),
)


def check_exhaustive(rules: Tuple[AliasRule, ...]) -> None:
    """Raise RuntimeError unless every AliasKey has exactly one rule."""
    keys = [rule.key for rule in rules]
    missing = [k.name for k in AliasKey if k not in keys]
    duplicated = sorted({k.name for k in keys if keys.count(k) > 1})
    if missing or duplicated:
        raise RuntimeError(
            f"Alias table is inconsistent: missing={missing} duplicated={duplicated}"
        )


check_exhaustive(ALIAS_RULES)
