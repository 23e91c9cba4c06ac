"""Base extraction: raw word -> Base Sequence of Voices.

Rules, applied in one left-to-right scan over the normalized word:
    - vowel graphemes a e i o u y ë map to their Voice (diacritics folded)
    - "ie" collapses to a single Insight, consuming both characters
    - consecutive identical Voices collapse to the first occurrence
    - a terminal Network voice read from a final "y" (or "ý", "ÿ") becomes
      Insight
    - nothing found -> a single Balance voice

Ligatures that fold to two letters (æ -> ae, œ -> oe) read as consonants,
so "æther" has the base E and the prefix window 'æth'.

Example:
    "study" -> U, Y -> U, I     (terminal glide, not an edit)
    "damage" -> A, A, E -> A, E
"""

from dataclasses import dataclass
from typing import Optional

from .normalizer import fold_char, normalize_word
from .schema import Voice, sequence_key


@dataclass(frozen=True)
class BaseSequence:
    """Voices read directly off a word, before any edit search."""

    word: str                               # Normalized word the spans index into
    voices: tuple[Voice, ...]
    spans: tuple[tuple[int, int], ...]      # (start, end) per located voice
    raw_voices: tuple[Voice, ...]           # Before the terminal-glide rewrite
    defaulted: bool = False                 # True when nothing was extracted

    def __len__(self) -> int:
        return len(self.voices)

    @property
    def key(self) -> str:
        return sequence_key(self.voices)


def voice_at(word: str, index: int) -> Optional[Voice]:
    """Voice read from word[index], or None for non-vowels."""
    folded = fold_char(word[index])
    if len(folded) != 1:
        return None
    return Voice.from_grapheme(folded)


def scan_voices(word: str) -> list[tuple[Voice, tuple[int, int]]]:
    """Scan a normalized word into (voice, span) pairs.

    Args:
        word: Normalized (NFC, lowercase) word.

    Returns:
        Located voices with no two adjacent equal.
    """
    out: list[tuple[Voice, tuple[int, int]]] = []
    i = 0
    while i < len(word):
        voice = voice_at(word, i)
        if voice is None:
            i += 1
            continue

        # "ie" reads as one Insight
        if voice is Voice.I and i + 1 < len(word) and voice_at(word, i + 1) is Voice.E:
            if not out or out[-1][0] is not Voice.I:
                out.append((Voice.I, (i, i + 2)))
            i += 2
            continue

        if out and out[-1][0] is voice:
            i += 1
            continue

        out.append((voice, (i, i + 1)))
        i += 1
    return out


def normalize_terminal_glide(
    located: list[tuple[Voice, tuple[int, int]]],
    word: str,
) -> list[tuple[Voice, tuple[int, int]]]:
    """Rewrite a terminal Network voice to Insight when the word ends in "y".

    Accented forms ("ý", "ÿ") fold to "y" and count as well.

    If the rewrite would repeat a preceding Insight, the terminal voice is
    dropped instead so the sequence keeps no adjacent duplicates.
    """
    if not located or located[-1][0] is not Voice.Y:
        return located
    if fold_char(word[-1]) != "y":
        return located
    out = list(located[:-1])
    if out and out[-1][0] is Voice.I:
        return out
    out.append((Voice.I, located[-1][1]))
    return out


def extract_base(word: str) -> BaseSequence:
    """Extract the Base Sequence of a raw word.

    Args:
        word: Raw input word.

    Returns:
        Immutable BaseSequence (at least one voice).
    """
    normalized = normalize_word(word)
    located = scan_voices(normalized)
    raw_voices = tuple(v for v, _ in located)
    located = normalize_terminal_glide(located, normalized)

    if not located:
        return BaseSequence(
            word=normalized,
            voices=(Voice.O,),
            spans=(),
            raw_voices=raw_voices,
            defaulted=True,
        )

    return BaseSequence(
        word=normalized,
        voices=tuple(v for v, _ in located),
        spans=tuple(span for _, span in located),
        raw_voices=raw_voices,
    )
