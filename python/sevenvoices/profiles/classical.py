"""Classical profiles: reconstructed PIE, romanized Sanskrit, Ancient Greek.

These run ahead of the modern profiles in detection order because their
markers (asterisks, laryngeals, IAST diacritics, Greek script) are
unambiguous.
"""

import re
import unicodedata

from ..schema import ConsonantClass
from .base import LanguageProfile

P = ConsonantClass.PLOSIVE
AF = ConsonantClass.AFFRICATE
SF = ConsonantClass.SIBILANT_FRICATIVE
NF = ConsonantClass.NON_SIBILANT_FRICATIVE
N = ConsonantClass.NASAL
L = ConsonantClass.LIQUID
G = ConsonantClass.GLIDE

LARYNGEAL = re.compile(r"h?[₁₂₃]")


def strip_marks(s: str) -> str:
    """Drop combining marks (ḱ -> k, ǵ -> g)."""
    decomposed = unicodedata.normalize("NFD", s)
    return "".join(c for c in decomposed if unicodedata.category(c) != "Mn")


class PIEProfile(LanguageProfile):
    """Proto-Indo-European reconstructions (*h₁éḱwos)."""

    id = "pie"
    DETECT = re.compile(r"\*|h[₁₂₃]|[ḱǵ]|gʷ|kʷ|bh|dh|gh")
    DIGRAPHS = {
        # labiovelars and aspirates
        "kw": P, "gw": P,
        "kh": P, "gh": P, "th": P, "dh": P, "ph": P, "bh": P,
        "ks": SF,
    }
    LETTERS = {
        "p": P, "b": P, "t": P, "d": P, "k": P, "g": P, "q": P, "c": P,
        "s": SF, "z": SF, "x": SF,
        "h": NF, "f": NF, "v": NF,
        "m": N, "n": N,
        "l": L, "r": L,
        "y": G, "w": G, "j": G,
    }

    def prenormalize(self, chars: str) -> str:
        s = chars.replace("*", "")
        s = LARYNGEAL.sub("h", s)
        s = s.replace("ʷ", "w").replace("ʰ", "h")
        return strip_marks(s)


class SanskritProfile(LanguageProfile):
    """Sanskrit in IAST or plain ASCII romanization."""

    id = "sanskrit"
    DETECT = re.compile(r"[āīūṛṝḷḹṅñṇṭḍśṣḥṃṁ]|kh|gh|ch|jh")
    DIGRAPHS = {
        # aspirated plosives
        "kh": P, "gh": P, "th": P, "dh": P, "ph": P, "bh": P,
        # palatal affricates
        "ch": AF, "jh": AF,
        "ks": SF, "kṣ": SF,
    }
    LETTERS = {
        "k": P, "g": P, "t": P, "d": P, "p": P, "b": P, "q": P,
        "ṭ": P, "ḍ": P,
        "c": AF, "j": AF,
        "s": SF, "ś": SF, "ṣ": SF, "z": SF,
        "f": NF, "v": NF, "h": NF,
        "m": N, "n": N, "ñ": N, "ṅ": N, "ṇ": N,
        "l": L, "r": L,
        "y": G, "w": G,
    }


# Greek letters -> ASCII tokens, applied in order
GREEK_FOLDS: tuple[tuple[str, str], ...] = (
    ("άὰᾶἀἁἄἅἂἃα", "a"),
    ("έὲἐἑἔἕἒἓε", "e"),
    ("ίὶῖἰἱἴἵἲἳι", "i"),
    ("όὸοὀὁὄὅὂὃ", "o"),
    ("ύὺῦυὐὑὔὕὒὓ", "y"),
    ("ώὼωὠὡὤὥὢὣ", "o"),
    ("β", "b"), ("γ", "g"), ("δ", "d"), ("ζ", "z"), ("θ", "th"),
    ("κ", "k"), ("λ", "l"), ("μ", "m"), ("ν", "n"), ("ξ", "ks"),
    ("π", "p"), ("ρ", "r"), ("σς", "s"), ("τ", "t"),
    ("φ", "ph"), ("χ", "kh"), ("ψ", "ps"),
)

_GREEK_TABLE: dict[str, str] = {
    letter: ascii_form
    for letters, ascii_form in GREEK_FOLDS
    for letter in letters
}


class AncientGreekProfile(LanguageProfile):
    """Ancient Greek, in Greek script or latinized (philos, physis)."""

    id = "ancient_greek"
    DETECT = re.compile(
        r"[ἀ-῾]|[φθχψξβγδζκλμνπρστσς]|(ph|th|kh|ps|ks)\b",
    )
    DIGRAPHS = {
        "ph": P, "th": P, "kh": P,
        "ps": P, "ks": SF,
        "ch": NF,
    }
    LETTERS = {
        "p": P, "b": P, "t": P, "d": P, "k": P, "g": P,
        "z": AF,
        "s": SF, "x": SF,
        "f": NF, "v": NF, "h": NF,
        "m": N, "n": N,
        "l": L, "r": L,
        "w": G, "y": G,
    }

    def prenormalize(self, chars: str) -> str:
        return "".join(_GREEK_TABLE.get(c, c) for c in chars)
