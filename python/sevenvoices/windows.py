"""Consonant windows: the raw text around and between base vowels.

Interior windows sit between two consecutive located base voices and drive
the C checksum, one per hop. Edge windows (before the first and after the
last located voice) only feed the edge bias of the E checksum.

Example ("damage", latin):
    prefix 'd' → Plosive
    interior 'mag' → Nasal
    (no suffix window: the word ends in a vowel)
"""

from dataclasses import dataclass
from typing import Optional

from .extract import BaseSequence
from .profiles import LanguageProfile
from .schema import ConsonantClass, ConsonantWindow


@dataclass(frozen=True)
class WindowReading:
    """Classified windows of one word."""

    interior: tuple[ConsonantWindow, ...] = ()
    prefix: Optional[ConsonantWindow] = None
    suffix: Optional[ConsonantWindow] = None

    @property
    def classes(self) -> tuple[ConsonantClass, ...]:
        return tuple(w.consonant_class for w in self.interior)

    @property
    def edges(self) -> list[ConsonantWindow]:
        return [w for w in (self.prefix, self.suffix) if w is not None]


def interior_windows(base: BaseSequence) -> list[str]:
    """Raw substrings between consecutive located base voices."""
    word = base.word
    return [
        word[base.spans[k][1]:base.spans[k + 1][0]]
        for k in range(len(base.spans) - 1)
    ]


def edge_windows(base: BaseSequence) -> tuple[str, str]:
    """Raw prefix and suffix clusters ("" when absent)."""
    if not base.spans:
        return "", ""
    word = base.word
    return word[:base.spans[0][0]], word[base.spans[-1][1]:]


def read_windows(base: BaseSequence, profile: LanguageProfile) -> WindowReading:
    """Locate and classify all windows of a word.

    Args:
        base: Extracted base sequence (carries the normalized word and spans).
        profile: Profile used for classification.

    Returns:
        WindowReading with interior and edge windows.
    """
    interior = tuple(
        ConsonantWindow(raw, profile.classify(raw), "interior")
        for raw in interior_windows(base)
    )

    prefix_raw, suffix_raw = edge_windows(base)
    prefix = (
        ConsonantWindow(prefix_raw, profile.classify(prefix_raw), "prefix")
        if prefix_raw else None
    )
    suffix = (
        ConsonantWindow(suffix_raw, profile.classify(suffix_raw), "suffix")
        if suffix_raw else None
    )

    return WindowReading(interior=interior, prefix=prefix, suffix=suffix)
