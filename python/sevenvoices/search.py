"""Bounded edit search over Voice sequences.

Starting from the base sequence, every sequence reachable with at most
max_ops edits is enumerated breadth-first. Three edit kinds exist:

    Substitute     S[i] -> v           ("U→I")
    Delete         remove S[i]         ("delete A")
    InsertClosure  append Ë            ("closure Ë")

No other insertion is legal. A sequence is visited once; the first (and
therefore shallowest) arrival wins. That is only a shortest-cost guarantee
while costs are non-negative and depth stays small; non-uniform costs would
need a priority-queue search instead.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Union

from .manifest import OpCosts
from .schema import Voice, VOICES

logger = logging.getLogger(__name__)

CLOSURE_LABEL = f"closure {Voice.CLOSURE.value}"


@dataclass(frozen=True)
class Substitute:
    """Replace the voice at index with another voice."""

    index: int
    old: Voice
    new: Voice

    @property
    def label(self) -> str:
        return f"{self.old.value}→{self.new.value}"


@dataclass(frozen=True)
class Delete:
    """Remove the voice at index."""

    index: int
    voice: Voice

    @property
    def label(self) -> str:
        return f"delete {self.voice.value}"


@dataclass(frozen=True)
class InsertClosure:
    """Append the Closure voice."""

    @property
    def label(self) -> str:
        return CLOSURE_LABEL


EditOp = Union[Substitute, Delete, InsertClosure]


@dataclass(frozen=True)
class SearchOptions:
    """Bounds of one search."""

    max_ops: int = 1
    allow_delete: bool = False
    allow_closure: bool = False


@dataclass(frozen=True)
class SearchState:
    """A sequence, its accumulated edit cost and the edits that built it."""

    sequence: tuple[Voice, ...]
    cost: int = 0
    ops: tuple[EditOp, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.ops)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(op.label for op in self.ops)


def apply(state: SearchState, op: EditOp, costs: OpCosts) -> SearchState:
    """Apply one edit to a state.

    Args:
        state: State to edit.
        op: Edit operation.
        costs: Operation costs.

    Returns:
        New state with the edit appended to its history.
    """
    seq = state.sequence
    if isinstance(op, Substitute):
        if seq[op.index] is not op.old:
            raise ValueError(f"Substitute expects {op.old.value} at {op.index}")
        sequence = seq[:op.index] + (op.new,) + seq[op.index + 1:]
        cost = costs.substitute
    elif isinstance(op, Delete):
        if len(seq) <= 1:
            raise ValueError("Cannot delete the only voice")
        sequence = seq[:op.index] + seq[op.index + 1:]
        cost = costs.delete
    elif isinstance(op, InsertClosure):
        if seq and seq[-1] is Voice.CLOSURE:
            raise ValueError("Sequence already ends in closure")
        sequence = seq + (Voice.CLOSURE,)
        cost = costs.insert_closure
    else:
        raise TypeError(f"Unknown edit op: {op!r}")

    return SearchState(sequence=sequence, cost=state.cost + cost, ops=state.ops + (op,))


def edit_ops(sequence: tuple[Voice, ...], options: SearchOptions) -> Iterator[EditOp]:
    """Yield every legal edit of a sequence, in a fixed order."""
    for i, current in enumerate(sequence):
        for voice in VOICES:
            if voice is not current:
                yield Substitute(i, current, voice)

    if options.allow_delete and len(sequence) > 1:
        for i, current in enumerate(sequence):
            yield Delete(i, current)

    if options.allow_closure and sequence[-1] is not Voice.CLOSURE:
        yield InsertClosure()


def neighbors(state: SearchState, options: SearchOptions, costs: OpCosts) -> list[SearchState]:
    """All states one edit away from state."""
    return [apply(state, op, costs) for op in edit_ops(state.sequence, options)]


def enumerate_states(
    base: tuple[Voice, ...],
    options: SearchOptions,
    costs: OpCosts,
) -> list[SearchState]:
    """Breadth-first enumeration of all states within options.max_ops edits.

    Args:
        base: Root sequence.
        options: Search bounds.
        costs: Operation costs.

    Returns:
        States in discovery order, root first, one per distinct sequence.
    """
    root = SearchState(sequence=tuple(base))
    queue = deque([root])
    visited = {root.sequence}
    collected: list[SearchState] = []

    while queue:
        state = queue.popleft()
        collected.append(state)
        if state.depth >= options.max_ops:
            continue

        for nxt in neighbors(state, options, costs):
            if nxt.sequence in visited:
                continue
            visited.add(nxt.sequence)
            queue.append(nxt)

    logger.debug(
        "Enumerated %d states from %s (max_ops=%d)",
        len(collected), "".join(v.value for v in base), options.max_ops,
    )
    return collected
