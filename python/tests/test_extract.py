"""Tests for base extraction."""

import pytest
from sevenvoices.extract import (
    extract_base,
    normalize_terminal_glide,
    scan_voices,
    voice_at,
)
from sevenvoices.schema import Voice

A, E, I, O, U, Y, CL = (
    Voice.A, Voice.E, Voice.I, Voice.O, Voice.U, Voice.Y, Voice.CLOSURE,
)


class TestVoiceAt:
    """Tests for voice_at function."""

    def test_vowels(self):
        """Test plain and accented vowels."""
        assert voice_at("study", 2) == U
        assert voice_at("café", 3) == E
        assert voice_at("zemër", 3) == CL

    def test_consonants(self):
        """Test consonants and symbols read as nothing."""
        assert voice_at("study", 0) is None
        assert voice_at("*h₁", 0) is None
        assert voice_at("ß", 0) is None


class TestScanVoices:
    """Tests for scan_voices function."""

    def test_spans(self):
        """Test each located voice carries its span."""
        located = scan_voices("study")
        assert located == [(U, (2, 3)), (Y, (4, 5))]

    def test_ie_digraph(self):
        """Test "ie" reads as one Insight spanning two characters."""
        assert scan_voices("piece") == [(I, (1, 3)), (E, (4, 5))]

    def test_collapse_keeps_first(self):
        """Test duplicate runs collapse to the first occurrence."""
        assert scan_voices("damage") == [(A, (1, 2)), (E, (5, 6))]
        assert scan_voices("book") == [(O, (1, 2))]

    def test_no_vowels(self):
        """Test a vowel-less word."""
        assert scan_voices("psst") == []


class TestTerminalGlide:
    """Tests for normalize_terminal_glide function."""

    def test_rewrite(self):
        """Test final y becomes Insight."""
        out = normalize_terminal_glide([(U, (2, 3)), (Y, (4, 5))], "study")
        assert out == [(U, (2, 3)), (I, (4, 5))]

    def test_drop_after_insight(self):
        """Test rewrite that would repeat Insight drops the voice."""
        out = normalize_terminal_glide([(A, (1, 2)), (I, (2, 3)), (Y, (4, 5))], "daisy")
        assert out == [(A, (1, 2)), (I, (2, 3))]

    def test_initial_y_untouched(self):
        """Test a Network voice not at the end is kept."""
        located = [(Y, (0, 1)), (E, (1, 2))]
        assert normalize_terminal_glide(located, "yes") == located


class TestExtractBase:
    """Tests for extract_base function."""

    @pytest.mark.parametrize("word,expected", [
        ("study", (U, I)),
        ("damage", (A, E)),
        ("hope", (O, E)),
        ("mind", (I,)),
        ("piece", (I, E)),
        ("boy", (O, I)),
        ("book", (O,)),
        ("café", (A, E)),
        ("yes", (Y, E)),
        ("zemër", (E, CL)),
        ("daisy", (A, I)),
    ])
    def test_base_sequences(self, word, expected):
        """Test base sequences of known words."""
        assert extract_base(word).voices == expected

    def test_raw_voices(self):
        """Test raw voices are kept before the terminal rewrite."""
        base = extract_base("study")
        assert base.raw_voices == (U, Y)
        assert base.key == "UI"
        assert base.defaulted is False

    def test_daisy_raw(self):
        """Test dropped terminal voice still appears in raw voices."""
        assert extract_base("daisy").raw_voices == (A, I, Y)

    def test_accented_terminal_y(self):
        """Test a final ÿ folds to y and is rewritten like one."""
        base = extract_base("BOŸ")
        assert base.word == "boÿ"
        assert base.raw_voices == (O, Y)
        assert base.voices == (O, I)

    def test_ligature_reads_as_consonant(self):
        """Test æ folds to two letters and is skipped."""
        base = extract_base("æther")
        assert base.voices == (E,)
        assert base.spans == ((3, 4),)

    def test_default_balance(self):
        """Test a word with no vowels defaults to Balance."""
        base = extract_base("psst")
        assert base.voices == (O,)
        assert base.spans == ()
        assert base.defaulted is True
        assert len(base) == 1

    def test_normalizes_case(self):
        """Test extraction is case and whitespace insensitive."""
        base = extract_base("  STUDY ")
        assert base.word == "study"
        assert base.voices == (U, I)

    def test_no_adjacent_duplicates(self, sample_words):
        """Test no two adjacent voices are equal."""
        for word in sample_words:
            voices = extract_base(word).voices
            assert voices
            for a, b in zip(voices, voices[1:]):
                assert a is not b, word
