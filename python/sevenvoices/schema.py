"""Records and data structures for sevenvoices.

Core concept:
    - A word reduces to a sequence of Voices (vowel archetypes)
    - Each candidate sequence becomes an immutable Path with checksums
    - An Analysis bundles the primary Path, its frontier and diagnostics

Example:
    "study" -> base U, I -> primary Path U → I
    Checksums: V=55 (11 * 5), E=0, C=2
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path as FilePath
from typing import Any, Optional
import json


class Voice(Enum):
    """One of the seven vowel archetypes."""

    A = "A"
    E = "E"
    I = "I"
    O = "O"
    U = "U"
    Y = "Y"
    CLOSURE = "Ë"

    @property
    def grapheme(self) -> str:
        """Lowercase letter this Voice is read from."""
        return self.value.lower()

    @property
    def principle(self) -> str:
        return VOICE_NAMES[self]

    @classmethod
    def from_grapheme(cls, char: str) -> Optional["Voice"]:
        """Get Voice from a single (folded) vowel letter."""
        return _GRAPHEMES.get(char.lower())

    @classmethod
    def from_symbol(cls, symbol: str) -> "Voice":
        """Get Voice from its symbol ("A" ... "Ë")."""
        return cls(symbol.upper())


VOICE_NAMES: dict[Voice, str] = {
    Voice.A: "Action",
    Voice.E: "Expansion",
    Voice.I: "Insight",
    Voice.O: "Balance",
    Voice.U: "Unity",
    Voice.Y: "Network",
    Voice.CLOSURE: "Closure",
}

# Fixed order used everywhere the alphabet is enumerated
VOICES: tuple[Voice, ...] = (
    Voice.A, Voice.E, Voice.I, Voice.O, Voice.U, Voice.Y, Voice.CLOSURE,
)

_GRAPHEMES: dict[str, Voice] = {v.grapheme: v for v in VOICES}


class ConsonantClass(Enum):
    """Consonant archetype a window is classified into."""

    PLOSIVE = "Plosive"
    AFFRICATE = "Affricate"
    SIBILANT_FRICATIVE = "SibilantFricative"
    NON_SIBILANT_FRICATIVE = "NonSibilantFricative"
    NASAL = "Nasal"
    LIQUID = "Liquid"
    GLIDE = "Glide"


def sequence_key(voices: tuple[Voice, ...]) -> str:
    """Flat printable key for a Voice sequence ("UI", "AEË")."""
    return "".join(v.value for v in voices)


def format_voices(voices: tuple[Voice, ...]) -> str:
    """Arrow-joined form used in reports ("U → I")."""
    return " → ".join(v.value for v in voices)


@dataclass(frozen=True)
class Checksums:
    """The three fingerprints of a Path."""

    v: int      # Product of distinct Voice primes
    e: float    # Edit cost plus edge bias
    c: int      # Consonant-class ring-smoothness cost

    def to_dict(self) -> dict[str, Any]:
        return {"V": self.v, "E": self.e, "C": self.c}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Checksums":
        return cls(v=data["V"], e=data["E"], c=data["C"])


@dataclass(frozen=True)
class Path:
    """A candidate Voice sequence with its derived rails and checksums."""

    voices: tuple[Voice, ...]
    ring_path: tuple[int, ...]
    level_path: tuple[int, ...]
    ops: tuple[str, ...]
    checksums: Checksums
    kept: int               # Prefix positions equal to the base sequence

    @property
    def key(self) -> str:
        return sequence_key(self.voices)

    @property
    def ends_in_closure(self) -> bool:
        return bool(self.voices) and self.voices[-1] is Voice.CLOSURE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "voice_path": [v.value for v in self.voices],
            "ring_path": list(self.ring_path),
            "level_path": list(self.level_path),
            "ops": list(self.ops),
            "checksums": self.checksums.to_dict(),
            "kept": self.kept,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Create from dictionary."""
        return cls(
            voices=tuple(Voice.from_symbol(s) for s in data["voice_path"]),
            ring_path=tuple(data["ring_path"]),
            level_path=tuple(data["level_path"]),
            ops=tuple(data.get("ops", [])),
            checksums=Checksums.from_dict(data["checksums"]),
            kept=data["kept"],
        )


@dataclass(frozen=True)
class ConsonantWindow:
    """Raw consonant substring around or between located base vowels."""

    raw: str
    consonant_class: ConsonantClass
    position: str = "interior"      # "interior", "prefix" or "suffix"

    def describe(self) -> str:
        """Signal-style description, e.g. "prefix 'st' → SibilantFricative"."""
        return f"{self.position} '{self.raw}' → {self.consonant_class.value}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw,
            "class": self.consonant_class.value,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConsonantWindow":
        return cls(
            raw=data["raw"],
            consonant_class=ConsonantClass(data["class"]),
            position=data.get("position", "interior"),
        )


@dataclass
class Analysis:
    """Solver output for one word.

    Treated as an opaque record by caches: store it with save()/to_dict()
    under cache_key() and never edit it in place.
    """

    word: str
    normalized: str
    mode: str
    profile: str
    engine_version: str
    base: tuple[Voice, ...]
    primary: Path
    frontier: list[Path] = field(default_factory=list)
    windows: list[ConsonantWindow] = field(default_factory=list)
    edge_windows: list[ConsonantWindow] = field(default_factory=list)
    signals: list[str] = field(default_factory=list)

    @property
    def window_classes(self) -> list[ConsonantClass]:
        return [w.consonant_class for w in self.windows]

    def cache_key(self) -> tuple[str, str, str, str]:
        """Key an external cache should store this Analysis under."""
        return (self.normalized, self.mode, self.profile, self.engine_version)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "normalized": self.normalized,
            "mode": self.mode,
            "profile": self.profile,
            "engine_version": self.engine_version,
            "base": [v.value for v in self.base],
            "primary": self.primary.to_dict(),
            "frontier": [p.to_dict() for p in self.frontier],
            "windows": [w.to_dict() for w in self.windows],
            "edge_windows": [w.to_dict() for w in self.edge_windows],
            "signals": list(self.signals),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Analysis":
        """Create from dictionary."""
        return cls(
            word=data["word"],
            normalized=data["normalized"],
            mode=data["mode"],
            profile=data["profile"],
            engine_version=data["engine_version"],
            base=tuple(Voice.from_symbol(s) for s in data["base"]),
            primary=Path.from_dict(data["primary"]),
            frontier=[Path.from_dict(p) for p in data.get("frontier", [])],
            windows=[ConsonantWindow.from_dict(w) for w in data.get("windows", [])],
            edge_windows=[
                ConsonantWindow.from_dict(w) for w in data.get("edge_windows", [])
            ],
            signals=list(data.get("signals", [])),
        )

    def save(self, filepath: FilePath) -> None:
        """Save analysis to JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: FilePath) -> "Analysis":
        """Load analysis from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
