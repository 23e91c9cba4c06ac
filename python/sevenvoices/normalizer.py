"""Text normalization for sevenvoices.

Folds Latin-script letters with diacritics to their ASCII base so that
vowels like "é" or "ö" read as plain vowels. The Albanian "ë" is kept
as-is: it is the grapheme of the Closure voice.
"""

import unicodedata

CLOSURE_GRAPHEME = "ë"

# Character mapping for letters NFD decomposition does not fold
CHAR_MAP: dict[str, str] = {
    # Turkish
    "ı": "i", "İ": "i",
    # German
    "ß": "ss",
    # French
    "æ": "ae", "œ": "oe",
    # Polish
    "ł": "l",
    # Nordic
    "ø": "o", "Ø": "o",
    # Albanian closure vowel stays distinct
    "ë": CLOSURE_GRAPHEME, "Ë": CLOSURE_GRAPHEME,
}

def fold_char(char: str) -> str:
    """Fold a single character to its lowercase ASCII base.

    Args:
        char: Single character.

    Returns:
        Folded form (may be multiple chars for ligatures like ß→ss).
        Characters without an ASCII base (Greek, IPA, subscripts) are
        returned lowercased and otherwise unchanged.
    """
    if char in CHAR_MAP:
        return CHAR_MAP[char]

    lower = char.lower()
    if lower in CHAR_MAP:
        return CHAR_MAP[lower]

    # Strip combining marks: é -> e, ḱ -> k
    normalized = unicodedata.normalize("NFD", lower)
    ascii_chars = [
        c for c in normalized
        if unicodedata.category(c) != "Mn" and c.isascii()
    ]
    return "".join(ascii_chars) if ascii_chars else lower


def normalize_word(word: str) -> str:
    """Trim, compose (NFC) and lowercase a raw word."""
    return unicodedata.normalize("NFC", word.strip()).lower()
