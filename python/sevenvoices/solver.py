"""Solver facade: word -> primary path, frontier and diagnostics.

Usage:
    from sevenvoices.solver import analyze, SolveOptions, solve_word

    result = analyze("study")                       # strict, auto profile
    result.primary.voices                           # (Voice.U, Voice.I)

    options = SolveOptions.for_mode("open", profile="albanian")
    result = solve_word("zemër", options, manifest=my_manifest)

Every call owns its queue and visited set and reads only the manifest it is
given, so calls can run concurrently without coordination.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .extract import extract_base
from .manifest import VoiceManifest, default_manifest
from .profiles import AUTO, choose_profile
from .schema import Analysis, sequence_key
from .scoring import FRONTIER_MARGIN, materialize, rank_paths, select
from .search import SearchOptions, enumerate_states
from .windows import read_windows

logger = logging.getLogger(__name__)

STRICT = "strict"
OPEN = "open"
MODES = (STRICT, OPEN)

DEFAULT_BEAM_WIDTH = 8


@dataclass(frozen=True)
class SolveOptions:
    """Search regime and output selection for one solve call."""

    mode: str = STRICT
    max_ops: int = 1
    allow_delete: bool = False
    allow_closure: bool = False
    beam_width: int = DEFAULT_BEAM_WIDTH
    frontier_margin: float = FRONTIER_MARGIN
    profile: str = AUTO

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode: {self.mode}. Available: {list(MODES)}")
        if self.beam_width < 1:
            raise ValueError(f"beam_width must be >= 1, got {self.beam_width}")
        if self.max_ops < 0:
            raise ValueError(f"max_ops must be >= 0, got {self.max_ops}")
        # A strict label must not hide an open-regime search
        if self.mode == STRICT and (
            self.max_ops > 1 or self.allow_delete or self.allow_closure
        ):
            raise ValueError(
                "strict mode allows one substitution only; use mode='open' "
                "for deletes, closure or max_ops > 1"
            )

    @classmethod
    def for_mode(
        cls,
        mode: str = STRICT,
        profile: str = AUTO,
        beam_width: int = DEFAULT_BEAM_WIDTH,
        frontier_margin: float = FRONTIER_MARGIN,
    ) -> "SolveOptions":
        """Options of a named regime.

        strict: one substitution at most, no deletes, no closure.
        open: up to two edits, deletes and closure insertion allowed.
        """
        if mode == STRICT:
            return cls(
                mode=STRICT, max_ops=1, allow_delete=False, allow_closure=False,
                beam_width=beam_width, frontier_margin=frontier_margin,
                profile=profile,
            )
        if mode == OPEN:
            return cls(
                mode=OPEN, max_ops=2, allow_delete=True, allow_closure=True,
                beam_width=beam_width, frontier_margin=frontier_margin,
                profile=profile,
            )
        raise ValueError(f"Unknown mode: {mode}. Available: {list(MODES)}")

    @property
    def search(self) -> SearchOptions:
        return SearchOptions(
            max_ops=self.max_ops,
            allow_delete=self.allow_delete,
            allow_closure=self.allow_closure,
        )


def solve_word(
    word: str,
    options: Optional[SolveOptions] = None,
    manifest: Optional[VoiceManifest] = None,
) -> Analysis:
    """Run the full engine on one word.

    Args:
        word: Raw input word.
        options: Search regime (strict, auto profile if None).
        manifest: Engine manifest (stock manifest if None).

    Returns:
        Analysis with primary path, frontier, windows and signals.

    Raises:
        ValueError: Empty word.
        InvariantViolation: A path broke an engine invariant.
    """
    if not word or not word.strip():
        raise ValueError("Input word cannot be empty")

    options = options or SolveOptions()
    manifest = manifest or default_manifest()

    base = extract_base(word)
    profile = choose_profile(base.word, options.profile)
    reading = read_windows(base, profile)

    states = enumerate_states(base.voices, options.search, manifest.op_costs)
    paths = [materialize(st, base.voices, reading, manifest) for st in states]
    ranked = rank_paths(paths, manifest)
    primary, frontier = select(ranked, options.beam_width, options.frontier_margin)

    logger.debug(
        "Solved %r: %d paths, primary=%s E=%s, frontier=%d",
        base.word, len(ranked), primary.key, primary.checksums.e, len(frontier),
    )

    signals = [
        f"engine={manifest.version}",
        f"alphabet={profile.id}",
        f"base_raw={sequence_key(base.raw_voices) or '-'}",
        f"base_norm={'-' if base.defaulted else base.key}",
        f"cons_windows={','.join(c.value for c in reading.classes) or '-'}",
    ]
    signals.extend(w.describe() for w in reading.edges)

    return Analysis(
        word=word,
        normalized=base.word,
        mode=options.mode,
        profile=profile.id,
        engine_version=manifest.version,
        base=base.voices,
        primary=primary,
        frontier=frontier,
        windows=list(reading.interior),
        edge_windows=reading.edges,
        signals=signals,
    )


def analyze(
    word: str,
    mode: str = STRICT,
    profile: str = AUTO,
    manifest: Optional[VoiceManifest] = None,
    beam_width: int = DEFAULT_BEAM_WIDTH,
) -> Analysis:
    """Convenience wrapper: solve a word in a named mode."""
    options = SolveOptions.for_mode(mode, profile=profile, beam_width=beam_width)
    return solve_word(word, options, manifest=manifest)
