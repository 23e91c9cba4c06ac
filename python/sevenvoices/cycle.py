"""Mod-7 cycle summary of a voice path.

Voices index into a mod-7 ring: A=1, E=2, I=3, O=4, U=5, Y=6, Ë=0.
The sum of a path's indices mod 7 gives its cycle state:

    0     balanced
    1-3   open
    4-6   overloaded

Inverse pairs (A,Y), (E,U), (I,O) sum to 7; pair coverage counts how many
of them a path contains.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from .schema import Path, Voice

VOICE_INDEX: dict[Voice, int] = {
    Voice.A: 1,
    Voice.E: 2,
    Voice.I: 3,
    Voice.O: 4,
    Voice.U: 5,
    Voice.Y: 6,
    Voice.CLOSURE: 0,
}

INVERSE_PAIRS: tuple[tuple[Voice, Voice], ...] = (
    (Voice.A, Voice.Y),
    (Voice.E, Voice.U),
    (Voice.I, Voice.O),
)


@dataclass(frozen=True)
class CycleSummary:
    """Mod-7 reading of one path."""

    voices: tuple[Voice, ...]
    index_path: tuple[int, ...]
    total_mod7: int
    cycle_state: str
    pair_coverage: int

    @property
    def principles(self) -> list[str]:
        return [v.principle for v in self.voices]

    def to_dict(self) -> dict[str, Any]:
        return {
            "voice_path": [v.value for v in self.voices],
            "index_path": list(self.index_path),
            "total_mod7": self.total_mod7,
            "cycle_state": self.cycle_state,
            "pair_coverage": self.pair_coverage,
            "principles": self.principles,
        }


def cycle_state(total: int) -> str:
    if total == 0:
        return "balanced"
    if total <= 3:
        return "open"
    return "overloaded"


def pair_coverage(voices: Sequence[Voice]) -> int:
    present = set(voices)
    return sum(1 for a, b in INVERSE_PAIRS if a in present and b in present)


def summarize(voices: Sequence[Voice]) -> CycleSummary:
    """Cycle summary of a voice sequence."""
    index_path = tuple(VOICE_INDEX[v] for v in voices)
    total = sum(index_path) % 7
    return CycleSummary(
        voices=tuple(voices),
        index_path=index_path,
        total_mod7=total,
        cycle_state=cycle_state(total),
        pair_coverage=pair_coverage(voices),
    )


def summarize_path(path: Path) -> CycleSummary:
    return summarize(path.voices)
