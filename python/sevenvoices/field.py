"""Consonant field: how well a solved path sits on its consonant windows.

Each interior hop of the primary path lands in the (from-voice, class) slot
of its window. A hop is smooth when its ring delta is inside the class's
preferred range and spiky otherwise. Edge windows add one spiky hit to the
first (prefix) or last (suffix) voice.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .manifest import VoiceManifest, default_manifest
from .schema import Analysis, ConsonantClass, Voice

CONFLICT_RATIO = 0.4
MAX_DOMINANT = 3


@dataclass
class Slot:
    """Smooth/spiky tallies of one (voice, class) pair."""

    voice: Voice
    consonant_class: ConsonantClass
    smooth: int = 0
    spiky: int = 0


@dataclass
class ConsonantField:
    """Slot grid plus its summary."""

    slots: dict[tuple[Voice, ConsonantClass], Slot] = field(default_factory=dict)
    smooth_hits: int = 0
    spiky_hits: int = 0

    @property
    def total(self) -> int:
        return self.smooth_hits + self.spiky_hits

    @property
    def smooth_ratio(self) -> float:
        return self.smooth_hits / self.total if self.total else 0.0

    @property
    def has_conflict(self) -> bool:
        return self.total > 0 and self.smooth_ratio < CONFLICT_RATIO and self.spiky_hits > 0

    def dominant_classes(self) -> list[ConsonantClass]:
        """Up to three classes with a positive smooth - spiky score."""
        scores: dict[ConsonantClass, int] = {c: 0 for c in ConsonantClass}
        for slot in self.slots.values():
            scores[slot.consonant_class] += slot.smooth - slot.spiky
        ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
        return [c for c, score in ranked if score > 0][:MAX_DOMINANT]

    def hit(self, voice: Voice, cls: ConsonantClass, smooth: bool) -> None:
        slot = self.slots[(voice, cls)]
        if smooth:
            slot.smooth += 1
            self.smooth_hits += 1
        else:
            slot.spiky += 1
            self.spiky_hits += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "smooth_hits": self.smooth_hits,
            "spiky_hits": self.spiky_hits,
            "smooth_ratio": self.smooth_ratio,
            "dominant_classes": [c.value for c in self.dominant_classes()],
            "has_conflict": self.has_conflict,
        }


def empty_field() -> ConsonantField:
    grid = ConsonantField()
    for voice in Voice:
        for cls in ConsonantClass:
            grid.slots[(voice, cls)] = Slot(voice, cls)
    return grid


def build_field(analysis: Analysis, manifest: Optional[VoiceManifest] = None) -> ConsonantField:
    """Tally the primary path of an analysis against its windows.

    Args:
        analysis: Solved analysis.
        manifest: Manifest the analysis was solved with (stock if None).

    Returns:
        ConsonantField.
    """
    manifest = manifest or default_manifest()
    grid = empty_field()
    voices = analysis.primary.voices
    rings = analysis.primary.ring_path
    classes = analysis.window_classes

    for i in range(min(len(voices) - 1, len(classes))):
        delta = abs(rings[i + 1] - rings[i])
        cls = classes[i]
        grid.hit(voices[i], cls, manifest.class_range(cls).contains(delta))

    for window in analysis.edge_windows:
        attach = voices[0] if window.position == "prefix" else voices[-1]
        grid.hit(attach, window.consonant_class, smooth=False)

    return grid
