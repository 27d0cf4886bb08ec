"""
Parser Constants.

Number words, measurement units and currency words recognized in spoken
Tamil, Tanglish and English orders. Colloquial speech drops or stretches the
final vowel ("ரெண்ட", "ரெண்டே") so the elided and emphatic forms are listed
alongside the standard ones.
"""

# =============================================================================
# Number Words
# =============================================================================

TAMIL_NUMBER_WORDS = {
    # 1
    "ஓர்": 1, "ஒரு": 1, "ஒன்று": 1, "ஒண்ணு": 1, "ஒண்ண": 1, "ஒண்ணே": 1,
    # 2
    "இரண்டு": 2, "இரண்ட": 2, "ரெண்டு": 2, "ரெண்ட": 2, "ரெண்டே": 2,
    # 3
    "மூன்று": 3, "மூன்ற": 3, "மூணு": 3, "மூண": 3, "மூணே": 3,
    # 4
    "நான்கு": 4, "நான்க": 4, "நாலு": 4, "நால": 4, "நாலே": 4,
    # 5
    "ஐந்து": 5, "ஐந்த": 5, "அஞ்சு": 5,
    # 6
    "ஆறு": 6, "ஆற": 6, "ஆரு": 6,
    # 7
    "ஏழு": 7, "ஏழ": 7,
    # 8
    "எட்டு": 8, "எட்ட": 8,
    # 9
    "ஒன்பது": 9, "ஒன்பத": 9,
    # 10
    "பத்து": 10, "பத்த": 10,
}

# Tamil numbers spelled out in Latin script
TANGLISH_NUMBER_WORDS = {
    "oru": 1, "onnu": 1,
    "rendu": 2, "randu": 2,
    "moonu": 3, "munu": 3,
    "naalu": 4, "nalu": 4,
    "anju": 5,
    "aaru": 6,
    "ezhu": 7,
    "ettu": 8,
    "ombodhu": 9, "onbadhu": 9,
    "pathu": 10,
}

ENGLISH_NUMBER_WORDS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
}


# =============================================================================
# Measurement Units
# =============================================================================
# A unit word on its own means one unit of that size ("டஜன் முட்டை" is twelve
# eggs). After a count it multiplies ("ரெண்டு டஜன்" is twenty-four).

UNIT_SCALES = {
    "டஜன்": 12, "டசன்": 12, "dozen": 12,
    "கிலோ": 1, "கிலோகிராம்": 1, "kilo": 1, "kg": 1,
    "லிட்டர்": 1, "litre": 1, "liter": 1,
}


# =============================================================================
# Currency Words
# =============================================================================
# A digit run or number word followed by one of these is a spoken price, not a
# quantity.

CURRENCY_WORDS = (
    "ரூபாய்", "ரூபா", "ரூ",
    "rupees", "rupee", "rs",
    "₹",
)
