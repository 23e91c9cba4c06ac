"""Base language profile interface.

A profile maps graphemes and digraphs to consonant archetype classes for one
language family, and knows how to recognise words of that family. Each
concrete profile is a subclass with class-level tables; the set of profiles
is closed and listed in detection order in profiles/__init__.py.
"""

import re
from abc import ABC
from typing import Optional

from ..schema import ConsonantClass

# Characters skipped by the single-letter pass
VOWEL_CHARS = frozenset("aeiouyë")

FALLBACK_CLASS = ConsonantClass.NON_SIBILANT_FRICATIVE


class LanguageProfile(ABC):
    """Base class for grapheme -> consonant-class profiles.

    Subclasses set:
        - id: profile identifier used for explicit overrides
        - DETECT: compiled pattern run over the raw word, or None
        - DIGRAPHS: two-character grapheme table
        - LETTERS: single grapheme table
    and may override prenormalize() to fold script or notation first.
    """

    id: str = "base"
    DETECT: Optional[re.Pattern] = None
    DIGRAPHS: dict[str, ConsonantClass] = {}
    LETTERS: dict[str, ConsonantClass] = {}

    def detect(self, word: str) -> bool:
        """Check if a raw word looks like it belongs to this family.

        Patterns are lowercase and case-sensitive (dotless i stays distinct
        from i); the word is lowercased first.
        """
        if self.DETECT is None:
            return False
        return bool(self.DETECT.search(word.lower()))

    def prenormalize(self, chars: str) -> str:
        """Profile-specific rewrite applied before classification."""
        return chars

    def classify(self, chars: str) -> ConsonantClass:
        """Classify one consonant window.

        Args:
            chars: Raw window substring.

        Returns:
            First digraph match scanning left to right, else first known
            consonant letter, else NonSibilantFricative.
        """
        s = self.prenormalize(chars.lower())

        for i in range(len(s) - 1):
            digraph = s[i:i + 2]
            if digraph in self.DIGRAPHS:
                return self.DIGRAPHS[digraph]

        for ch in s:
            if ch in VOWEL_CHARS:
                continue
            if ch in self.LETTERS:
                return self.LETTERS[ch]

        return FALLBACK_CLASS

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
