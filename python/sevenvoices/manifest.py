"""Voice manifest: the static rule tables of the engine.

A manifest is an immutable value passed into every solve call. Several
manifest versions can coexist; nothing here is registered globally.

Usage:
    from sevenvoices.manifest import default_manifest

    manifest = default_manifest()
    weighted = manifest.with_overrides(edge_weight=0.25, version="core-1-edge")
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .schema import ConsonantClass, Voice, VOICES

ENGINE_NAME = "SevenVoices Core"
ENGINE_VERSION = "2025-11-14-core-3"


@dataclass(frozen=True)
class VoiceSpec:
    """Ring, level and prime fingerprint of one Voice."""

    ring: int       # 0 (center) .. 3
    level: int      # +1 high, 0 mid, -1 low
    prime: int


@dataclass(frozen=True)
class ClassSpec:
    """Preferred ring-delta interval of one consonant class."""

    lo: int
    hi: int
    align: Voice
    examples: tuple[str, ...] = ()

    def distance(self, delta: int) -> int:
        """How far a ring delta falls outside [lo, hi]."""
        return max(0, self.lo - delta) + max(0, delta - self.hi)

    def contains(self, delta: int) -> bool:
        return self.lo <= delta <= self.hi


@dataclass(frozen=True)
class OpCosts:
    """Cost of each edit operation kind."""

    substitute: int = 1
    delete: int = 3
    insert_closure: int = 2

    def to_dict(self) -> dict[str, int]:
        return {
            "substitute": self.substitute,
            "delete": self.delete,
            "insert_closure": self.insert_closure,
        }


DEFAULT_VOICES: dict[Voice, VoiceSpec] = {
    Voice.A: VoiceSpec(ring=3, level=1, prime=2),
    Voice.E: VoiceSpec(ring=2, level=1, prime=3),
    Voice.I: VoiceSpec(ring=1, level=1, prime=5),
    Voice.O: VoiceSpec(ring=0, level=0, prime=7),
    Voice.U: VoiceSpec(ring=1, level=-1, prime=11),
    Voice.Y: VoiceSpec(ring=2, level=-1, prime=13),
    Voice.CLOSURE: VoiceSpec(ring=3, level=-1, prime=17),
}

DEFAULT_CLASSES: dict[ConsonantClass, ClassSpec] = {
    ConsonantClass.PLOSIVE: ClassSpec(
        2, 3, Voice.A, ("p", "b", "t", "d", "k", "g", "q", "c", "ck", "gj"),
    ),
    ConsonantClass.AFFRICATE: ClassSpec(
        1, 2, Voice.I, ("ch", "j", "dz", "ts", "dʒ", "tʃ", "ç", "xh"),
    ),
    ConsonantClass.SIBILANT_FRICATIVE: ClassSpec(
        1, 2, Voice.Y, ("s", "z", "sh", "zh", "x"),
    ),
    ConsonantClass.NON_SIBILANT_FRICATIVE: ClassSpec(
        1, 1, Voice.E, ("f", "v", "h", "th", "ph", "dh"),
    ),
    ConsonantClass.NASAL: ClassSpec(0, 1, Voice.CLOSURE, ("m", "n", "nj")),
    ConsonantClass.LIQUID: ClassSpec(0, 1, Voice.O, ("l", "r", "ll", "rr")),
    ConsonantClass.GLIDE: ClassSpec(0, 1, Voice.U, ("w", "y")),
}


@dataclass(frozen=True)
class VoiceManifest:
    """Immutable engine configuration."""

    name: str = ENGINE_NAME
    version: str = ENGINE_VERSION
    voices: dict[Voice, VoiceSpec] = field(
        default_factory=lambda: dict(DEFAULT_VOICES)
    )
    op_costs: OpCosts = field(default_factory=OpCosts)
    edge_weight: float = 0.0
    classes: dict[ConsonantClass, ClassSpec] = field(
        default_factory=lambda: dict(DEFAULT_CLASSES)
    )

    def __post_init__(self):
        """Validate tables."""
        missing = [v.value for v in VOICES if v not in self.voices]
        if missing:
            raise ValueError(f"Manifest missing voices: {missing}")
        primes = [spec.prime for spec in self.voices.values()]
        if len(set(primes)) != len(primes):
            raise ValueError("Voice primes must be distinct")
        for voice, spec in self.voices.items():
            if not 0 <= spec.ring <= 3:
                raise ValueError(f"Ring out of range for {voice.value}: {spec.ring}")
            if spec.level not in (-1, 0, 1):
                raise ValueError(f"Level out of range for {voice.value}: {spec.level}")
        missing_cls = [c.value for c in ConsonantClass if c not in self.classes]
        if missing_cls:
            raise ValueError(f"Manifest missing consonant classes: {missing_cls}")
        for cls, spec in self.classes.items():
            if spec.lo > spec.hi:
                raise ValueError(f"Empty preferred range for {cls.value}")
        costs = self.op_costs
        if min(costs.substitute, costs.delete, costs.insert_closure) < 0:
            raise ValueError("Operation costs must be non-negative")
        if self.edge_weight < 0:
            raise ValueError("Edge weight must be non-negative")

    def ring(self, voice: Voice) -> int:
        return self.voices[voice].ring

    def level(self, voice: Voice) -> int:
        return self.voices[voice].level

    def prime(self, voice: Voice) -> int:
        return self.voices[voice].prime

    def class_range(self, cls: ConsonantClass) -> ClassSpec:
        return self.classes[cls]

    def with_overrides(
        self,
        name: Optional[str] = None,
        version: Optional[str] = None,
        op_costs: Optional[OpCosts] = None,
        edge_weight: Optional[float] = None,
    ) -> "VoiceManifest":
        """Derive a new manifest with some fields replaced."""
        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if version is not None:
            changes["version"] = version
        if op_costs is not None:
            changes["op_costs"] = op_costs
        if edge_weight is not None:
            changes["edge_weight"] = float(edge_weight)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize manifest for metadata."""
        return {
            "name": self.name,
            "version": self.version,
            "voices": {
                v.value: {"ring": s.ring, "level": s.level, "prime": s.prime}
                for v, s in self.voices.items()
            },
            "op_costs": self.op_costs.to_dict(),
            "edge_weight": self.edge_weight,
            "classes": {
                c.value: {"preferred": [s.lo, s.hi], "align": s.align.value}
                for c, s in self.classes.items()
            },
        }


def default_manifest() -> VoiceManifest:
    """Build the stock manifest."""
    return VoiceManifest()


def manifest_from_dict(data: dict[str, Any], base: Optional[VoiceManifest] = None) -> VoiceManifest:
    """Build a manifest from a config "manifest" block.

    Args:
        data: Mapping with optional name, version, op_costs, edge_weight.
        base: Manifest to start from (stock manifest if None).

    Returns:
        New VoiceManifest.
    """
    base = base or default_manifest()
    op_costs = None
    if "op_costs" in data:
        raw = data["op_costs"]
        op_costs = OpCosts(
            substitute=raw.get("substitute", base.op_costs.substitute),
            delete=raw.get("delete", base.op_costs.delete),
            insert_closure=raw.get("insert_closure", base.op_costs.insert_closure),
        )
    return base.with_overrides(
        name=data.get("name"),
        version=data.get("version"),
        op_costs=op_costs,
        edge_weight=data.get("edge_weight"),
    )
