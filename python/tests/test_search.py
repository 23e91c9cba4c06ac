"""Tests for the bounded edit search."""

import pytest
from sevenvoices.manifest import OpCosts
from sevenvoices.schema import Voice
from sevenvoices.search import (
    CLOSURE_LABEL,
    Delete,
    InsertClosure,
    SearchOptions,
    SearchState,
    Substitute,
    apply,
    edit_ops,
    enumerate_states,
    neighbors,
)

A, E, I, O, U, Y, CL = (
    Voice.A, Voice.E, Voice.I, Voice.O, Voice.U, Voice.Y, Voice.CLOSURE,
)

STRICT = SearchOptions(max_ops=1)
OPEN = SearchOptions(max_ops=2, allow_delete=True, allow_closure=True)


class TestLabels:
    """Tests for edit op labels."""

    def test_labels(self):
        """Test printable labels."""
        assert Substitute(0, U, I).label == "U→I"
        assert Delete(1, A).label == "delete A"
        assert InsertClosure().label == CLOSURE_LABEL == "closure Ë"


class TestApply:
    """Tests for apply function."""

    def test_substitute(self):
        """Test substitution replaces one voice."""
        state = apply(SearchState((U, I)), Substitute(1, I, E), OpCosts())
        assert state.sequence == (U, E)
        assert state.cost == 1
        assert state.labels == ("I→E",)

    def test_delete(self):
        """Test deletion removes one voice."""
        state = apply(SearchState((A, E)), Delete(0, A), OpCosts())
        assert state.sequence == (E,)
        assert state.cost == 3

    def test_closure(self):
        """Test closure appends Ë."""
        state = apply(SearchState((A, E)), InsertClosure(), OpCosts())
        assert state.sequence == (A, E, CL)
        assert state.cost == 2
        assert state.depth == 1

    def test_costs_accumulate(self):
        """Test costs add up along a path."""
        costs = OpCosts(substitute=2, delete=5, insert_closure=4)
        state = apply(SearchState((A, E)), Substitute(0, A, O), costs)
        state = apply(state, InsertClosure(), costs)
        assert state.cost == 6
        assert state.labels == ("A→O", "closure Ë")

    def test_substitute_mismatch(self):
        """Test substitution of the wrong voice raises."""
        with pytest.raises(ValueError):
            apply(SearchState((U, I)), Substitute(0, A, E), OpCosts())

    def test_delete_last_voice(self):
        """Test the only voice cannot be deleted."""
        with pytest.raises(ValueError):
            apply(SearchState((I,)), Delete(0, I), OpCosts())

    def test_double_closure(self):
        """Test closure cannot follow closure."""
        with pytest.raises(ValueError):
            apply(SearchState((E, CL)), InsertClosure(), OpCosts())

    def test_unknown_op(self):
        """Test unknown ops are rejected."""
        with pytest.raises(TypeError):
            apply(SearchState((E,)), "insert A", OpCosts())


class TestEditOps:
    """Tests for edit_ops function."""

    def test_strict_only_substitutes(self):
        """Test strict options yield substitutions only."""
        ops = list(edit_ops((U, I), STRICT))
        assert len(ops) == 12
        assert all(isinstance(op, Substitute) for op in ops)

    def test_open_ops(self):
        """Test open options add deletes and closure."""
        ops = list(edit_ops((A, E), OPEN))
        assert len(ops) == 15
        assert ops[:6] == [Substitute(0, A, v) for v in (E, I, O, U, Y, CL)]
        assert ops[12:14] == [Delete(0, A), Delete(1, E)]
        assert ops[-1] == InsertClosure()

    def test_no_delete_single(self):
        """Test single voice sequences offer no delete."""
        ops = list(edit_ops((I,), OPEN))
        assert not any(isinstance(op, Delete) for op in ops)

    def test_no_closure_after_closure(self):
        """Test closure is not offered twice."""
        ops = list(edit_ops((E, CL), OPEN))
        assert InsertClosure() not in ops

    def test_neighbors(self):
        """Test neighbors apply each op."""
        states = neighbors(SearchState((I,)), STRICT, OpCosts())
        assert [s.sequence for s in states] == [(A,), (E,), (O,), (U,), (Y,), (CL,)]


class TestEnumerateStates:
    """Tests for enumerate_states function."""

    def test_root_first(self):
        """Test the base sequence is discovered first at cost 0."""
        states = enumerate_states((U, I), STRICT, OpCosts())
        assert states[0].sequence == (U, I)
        assert states[0].cost == 0
        assert states[0].ops == ()

    def test_strict_count(self):
        """Test root plus one substitution per position and voice."""
        states = enumerate_states((U, I), STRICT, OpCosts())
        assert len(states) == 13
        assert all(s.depth <= 1 for s in states)

    def test_zero_ops(self):
        """Test max_ops=0 returns the root only."""
        states = enumerate_states((U, I), SearchOptions(max_ops=0), OpCosts())
        assert [s.sequence for s in states] == [(U, I)]

    def test_unique_sequences(self):
        """Test each sequence is visited once."""
        states = enumerate_states((A, E), OPEN, OpCosts())
        sequences = [s.sequence for s in states]
        assert len(sequences) == len(set(sequences))

    def test_open_bounds(self):
        """Test open search respects depth and insertion limits."""
        states = enumerate_states((A, E), OPEN, OpCosts())
        for state in states:
            assert state.depth <= 2
            assert len(state.sequence) <= 3
            assert state.labels.count(CLOSURE_LABEL) <= 1

    def test_shallowest_arrival_wins(self):
        """Test a sequence keeps the cost of its first discovery."""
        states = enumerate_states((A, E), OPEN, OpCosts())
        by_seq = {s.sequence: s for s in states}
        assert by_seq[(E,)].labels == ("delete A",)
        assert by_seq[(E,)].cost == 3
        assert by_seq[(O, E)].cost == 1
