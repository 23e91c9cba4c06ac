"""Tests for the schema module."""

import pytest
import json
import tempfile
from pathlib import Path as FilePath
from sevenvoices.schema import (
    Analysis,
    Checksums,
    ConsonantClass,
    ConsonantWindow,
    Path,
    Voice,
    VOICES,
    format_voices,
    sequence_key,
)


class TestVoice:
    """Tests for Voice enum."""

    def test_from_grapheme(self):
        """Test vowel letters map to voices."""
        assert Voice.from_grapheme("a") == Voice.A
        assert Voice.from_grapheme("Y") == Voice.Y
        assert Voice.from_grapheme("ë") == Voice.CLOSURE

    def test_from_grapheme_non_vowel(self):
        """Test non-vowels return None."""
        assert Voice.from_grapheme("s") is None
        assert Voice.from_grapheme("é") is None

    def test_from_symbol(self):
        """Test symbol lookup."""
        assert Voice.from_symbol("U") == Voice.U
        assert Voice.from_symbol("ë") == Voice.CLOSURE

    def test_principles(self):
        """Test principle names."""
        assert Voice.A.principle == "Action"
        assert Voice.O.principle == "Balance"
        assert Voice.CLOSURE.principle == "Closure"

    def test_alphabet_order(self):
        """Test fixed alphabet order."""
        assert sequence_key(VOICES) == "AEIOUYË"
        assert len(set(VOICES)) == 7


class TestFormatting:
    """Tests for sequence helpers."""

    def test_sequence_key(self):
        """Test flat key."""
        assert sequence_key((Voice.U, Voice.I)) == "UI"
        assert sequence_key(()) == ""

    def test_format_voices(self):
        """Test arrow-joined form."""
        assert format_voices((Voice.U, Voice.I)) == "U → I"
        assert format_voices((Voice.O,)) == "O"


def make_path():
    return Path(
        voices=(Voice.A, Voice.E, Voice.CLOSURE),
        ring_path=(3, 2, 3),
        level_path=(1, 1, -1),
        ops=("closure Ë",),
        checksums=Checksums(v=102, e=2, c=1),
        kept=2,
    )


class TestPath:
    """Tests for Path dataclass."""

    def test_key_and_closure(self):
        """Test derived properties."""
        path = make_path()
        assert path.key == "AEË"
        assert path.ends_in_closure is True

    def test_to_dict(self):
        """Test Path serialization."""
        d = make_path().to_dict()
        assert d["voice_path"] == ["A", "E", "Ë"]
        assert d["ring_path"] == [3, 2, 3]
        assert d["checksums"] == {"V": 102, "E": 2, "C": 1}
        assert d["ops"] == ["closure Ë"]
        assert d["kept"] == 2

    def test_from_dict(self):
        """Test Path deserialization."""
        path = make_path()
        assert Path.from_dict(path.to_dict()) == path

    def test_frozen(self):
        """Test paths are immutable."""
        path = make_path()
        with pytest.raises(AttributeError):
            path.kept = 0


class TestConsonantWindow:
    """Tests for ConsonantWindow dataclass."""

    def test_describe(self):
        """Test signal description."""
        window = ConsonantWindow("st", ConsonantClass.SIBILANT_FRICATIVE, "prefix")
        assert window.describe() == "prefix 'st' → SibilantFricative"

    def test_default_position(self):
        """Test interior is the default position."""
        window = ConsonantWindow("d", ConsonantClass.PLOSIVE)
        assert window.position == "interior"
        assert window.to_dict() == {"raw": "d", "class": "Plosive", "position": "interior"}


class TestAnalysis:
    """Tests for Analysis dataclass."""

    def make_analysis(self):
        primary = Path(
            voices=(Voice.U, Voice.I),
            ring_path=(1, 1),
            level_path=(-1, 1),
            ops=(),
            checksums=Checksums(v=55, e=0, c=2),
            kept=2,
        )
        return Analysis(
            word="Study",
            normalized="study",
            mode="strict",
            profile="german",
            engine_version="2025-11-14-core-3",
            base=(Voice.U, Voice.I),
            primary=primary,
            frontier=[make_path()],
            windows=[ConsonantWindow("d", ConsonantClass.PLOSIVE)],
            edge_windows=[
                ConsonantWindow("st", ConsonantClass.SIBILANT_FRICATIVE, "prefix")
            ],
            signals=["engine=2025-11-14-core-3"],
        )

    def test_cache_key(self):
        """Test cache key uses normalized word, mode, profile, version."""
        analysis = self.make_analysis()
        assert analysis.cache_key() == (
            "study", "strict", "german", "2025-11-14-core-3",
        )

    def test_window_classes(self):
        """Test interior window classes."""
        assert self.make_analysis().window_classes == [ConsonantClass.PLOSIVE]

    def test_from_dict(self):
        """Test Analysis deserialization."""
        analysis = self.make_analysis()
        assert Analysis.from_dict(analysis.to_dict()) == analysis

    def test_save_and_load(self):
        """Test Analysis save and load."""
        analysis = self.make_analysis()

        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = FilePath(tmpdir) / "cache" / "study.json"
            analysis.save(filepath)

            assert filepath.exists()
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
            assert data["primary"]["voice_path"] == ["U", "I"]
            assert data["edge_windows"][0]["raw"] == "st"

            loaded = Analysis.load(filepath)
            assert loaded == analysis
