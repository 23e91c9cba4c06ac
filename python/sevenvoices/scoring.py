"""Path materialization, checksums and ranking.

Checksums:
    V: product of the primes of the distinct voices present (a set
       fingerprint: A A E E and A E share V)
    C: per hop, how far the ring delta falls outside the preferred range of
       that hop's interior window class (Glide range when no window exists)
    E: edit cost, plus the edge bias of the first hop (prefix window) and
       of the last hop (suffix window), scaled by the manifest edge weight

Ranking is ascending on (E, ring penalty, C, -kept, V), then paths ending
in Closure first; remaining ties keep discovery order.
"""

import logging
from typing import Optional, Sequence

from .manifest import VoiceManifest
from .schema import Checksums, ConsonantClass, Path, Voice
from .search import CLOSURE_LABEL, SearchState
from .windows import WindowReading

logger = logging.getLogger(__name__)

# Range used for hops with no classified interior window
HOP_FALLBACK_CLASS = ConsonantClass.GLIDE

FRONTIER_MARGIN = 2


class InvariantViolation(RuntimeError):
    """A materialized path broke an engine invariant. Never retried."""


def checksum_v(voices: Sequence[Voice], manifest: VoiceManifest) -> int:
    """Product of distinct voice primes."""
    product = 1
    for voice in set(voices):
        product *= manifest.prime(voice)
    return product


def ring_deltas(voices: Sequence[Voice], manifest: VoiceManifest) -> list[int]:
    """Absolute ring change of each hop."""
    rings = [manifest.ring(v) for v in voices]
    return [abs(rings[i + 1] - rings[i]) for i in range(len(rings) - 1)]


def ring_penalty(voices: Sequence[Voice], manifest: VoiceManifest) -> int:
    """Sum of absolute ring changes, unweighted by consonant class."""
    return sum(ring_deltas(voices, manifest))


def checksum_c(
    voices: Sequence[Voice],
    classes: Sequence[ConsonantClass],
    manifest: VoiceManifest,
) -> int:
    """Consonant-class ring-smoothness cost over all hops."""
    total = 0
    for i, delta in enumerate(ring_deltas(voices, manifest)):
        cls = classes[i] if i < len(classes) else HOP_FALLBACK_CLASS
        total += manifest.class_range(cls).distance(delta)
    return total


def edge_bias(
    voices: Sequence[Voice],
    reading: WindowReading,
    manifest: VoiceManifest,
) -> float:
    """Edge-window correction added to E.

    Only the first hop sees the prefix window and only the last hop sees
    the suffix window. Single-voice paths have no hop and no bias.
    """
    deltas = ring_deltas(voices, manifest)
    if not deltas:
        return 0.0

    bias = 0.0
    if reading.prefix is not None:
        spec = manifest.class_range(reading.prefix.consonant_class)
        bias += manifest.edge_weight * spec.distance(deltas[0])
    if reading.suffix is not None:
        spec = manifest.class_range(reading.suffix.consonant_class)
        bias += manifest.edge_weight * spec.distance(deltas[-1])
    return bias


def kept_count(base: Sequence[Voice], candidate: Sequence[Voice]) -> int:
    """Positions where the candidate still matches the base."""
    return sum(
        1 for i in range(min(len(base), len(candidate)))
        if base[i] is candidate[i]
    )


def check_invariants(path: Path, base: Sequence[Voice]) -> None:
    """Raise InvariantViolation if a path is malformed."""
    limit = min(len(base), len(path.voices))
    if path.kept > limit:
        raise InvariantViolation(
            f"Keeps overflow: kept={path.kept} base={len(base)} seq={len(path.voices)}"
        )
    for label in path.ops:
        if label.startswith(("insert", "closure")) and label != CLOSURE_LABEL:
            raise InvariantViolation(f"Illegal insert op: {label}")


def materialize(
    state: SearchState,
    base: Sequence[Voice],
    reading: WindowReading,
    manifest: VoiceManifest,
) -> Path:
    """Convert a search state into a scored Path.

    Args:
        state: Search state.
        base: Base sequence (reference for kept).
        reading: Classified windows of the word.
        manifest: Engine manifest.

    Returns:
        Immutable Path.

    Raises:
        InvariantViolation: kept overflow or an illegal insertion label.
    """
    voices = state.sequence
    bias = edge_bias(voices, reading, manifest)
    path = Path(
        voices=voices,
        ring_path=tuple(manifest.ring(v) for v in voices),
        level_path=tuple(manifest.level(v) for v in voices),
        ops=state.labels,
        checksums=Checksums(
            v=checksum_v(voices, manifest),
            e=state.cost + bias if bias else state.cost,
            c=checksum_c(voices, reading.classes, manifest),
        ),
        kept=kept_count(base, voices),
    )
    check_invariants(path, base)
    return path


def rank_key(path: Path, manifest: VoiceManifest) -> tuple:
    """Sort key of a path; lower is better."""
    return (
        path.checksums.e,
        ring_penalty(path.voices, manifest),
        path.checksums.c,
        -path.kept,
        path.checksums.v,
        0 if path.ends_in_closure else 1,
    )


def dedupe(paths: Sequence[Path]) -> list[Path]:
    """Keep the first path per voice sequence."""
    seen: set[tuple[Voice, ...]] = set()
    out: list[Path] = []
    for path in paths:
        if path.voices in seen:
            continue
        seen.add(path.voices)
        out.append(path)
    return out


def rank_paths(paths: Sequence[Path], manifest: VoiceManifest) -> list[Path]:
    """Deduplicate and sort paths best-first (stable)."""
    return sorted(dedupe(paths), key=lambda p: rank_key(p, manifest))


def select(
    ranked: Sequence[Path],
    beam_width: int,
    margin: Optional[float] = None,
) -> tuple[Path, list[Path]]:
    """Split ranked paths into primary and frontier.

    Args:
        ranked: Paths sorted best-first (non-empty).
        beam_width: Primary plus at most beam_width - 1 frontier paths.
        margin: Frontier keeps paths with E <= primary E + margin.

    Returns:
        (primary, frontier)
    """
    if not ranked:
        raise ValueError("No paths to select from")
    margin = FRONTIER_MARGIN if margin is None else margin
    primary = ranked[0]
    ceiling = primary.checksums.e + margin
    frontier = [p for p in ranked[1:beam_width] if p.checksums.e <= ceiling]
    return primary, frontier
