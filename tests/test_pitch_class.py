"""Tests for pitch class spelling and key preferences."""

import pytest

from songcraft.pitch_class import (
    FLAT_NAMES,
    SHARP_NAMES,
    UnknownNoteError,
    key_name_of,
    name_of,
    note_to_pc,
    pitch_class_of,
    preferred_accidental,
    roots_match,
    transpose_pitch_class,
)


class TestPitchClassOf:
    """Test note name lookup."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("C", 0),
            ("C#", 1),
            ("Db", 1),
            ("E", 4),
            ("F#", 6),
            ("Gb", 6),
            ("Ab", 8),
            ("Bb", 10),
            ("B", 11),
        ],
    )
    def test_known_names(self, name: str, expected: int) -> None:
        """Test sharp and flat spellings resolve to the same classes."""
        assert pitch_class_of(name) == expected

    @pytest.mark.parametrize("name", ["H", "c", "Cb", "E#", "", "C##", "Am"])
    def test_unknown_names_raise(self, name: str) -> None:
        """Test names outside both spelling tables are rejected."""
        with pytest.raises(UnknownNoteError, match="Unknown note"):
            pitch_class_of(name)

    def test_unknown_note_error_is_value_error(self) -> None:
        """Test callers catching ValueError also catch unknown notes."""
        with pytest.raises(ValueError):
            pitch_class_of("X")


class TestNameOf:
    """Test pitch class spelling."""

    def test_sharp_spelling(self) -> None:
        assert [name_of(pc, "sharp") for pc in range(12)] == list(SHARP_NAMES)

    def test_flat_spelling(self) -> None:
        assert [name_of(pc, "flat") for pc in range(12)] == list(FLAT_NAMES)

    def test_default_is_sharp(self) -> None:
        assert name_of(1) == "C#"

    @pytest.mark.parametrize(("pc", "expected"), [(12, "C"), (-1, "B"), (-13, "B"), (25, "C#")])
    def test_normalizes_modulo_12(self, pc: int, expected: str) -> None:
        """Test out-of-range and negative classes wrap around."""
        assert name_of(pc) == expected

    @pytest.mark.parametrize("name", list(SHARP_NAMES) + list(FLAT_NAMES))
    @pytest.mark.parametrize("preference", ["sharp", "flat"])
    def test_spelling_round_trip_keeps_pitch_class(self, name: str, preference: str) -> None:
        """Test respelling a note never changes its pitch class."""
        assert pitch_class_of(name_of(pitch_class_of(name), preference)) == pitch_class_of(name)


class TestPreferredAccidental:
    """Test key signature accidental preference."""

    @pytest.mark.parametrize("key", ["F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"])
    def test_flat_keys(self, key: str) -> None:
        assert preferred_accidental(key) == "flat"

    @pytest.mark.parametrize("key", ["G", "D", "A", "E", "B", "F#", "C#"])
    def test_sharp_keys(self, key: str) -> None:
        assert preferred_accidental(key) == "sharp"

    @pytest.mark.parametrize("key", ["C", "G#", "not a key", ""])
    def test_other_keys_default_to_sharp(self, key: str) -> None:
        assert preferred_accidental(key) == "sharp"


class TestHelpers:
    """Test the smaller pitch class helpers."""

    def test_note_to_pc_accepts_enharmonic_spellings(self) -> None:
        assert note_to_pc("Cb") == 11
        assert note_to_pc("E#") == 5
        assert note_to_pc("B#") == 0
        assert note_to_pc("Fb") == 4

    def test_note_to_pc_accepts_double_accidentals(self) -> None:
        """Test the double sharps and flats pychord spells with."""
        assert note_to_pc("G##") == 9
        assert note_to_pc("F##") == 7
        assert note_to_pc("Dbb") == 0
        assert note_to_pc("Cbb") == 10
        with pytest.raises(UnknownNoteError):
            note_to_pc("C###")

    def test_note_to_pc_unknown(self) -> None:
        with pytest.raises(UnknownNoteError):
            note_to_pc("H")

    def test_transpose_pitch_class(self) -> None:
        assert transpose_pitch_class(0, 7) == 7
        assert transpose_pitch_class(2, -3) == 11
        assert transpose_pitch_class(5, -48) == 5

    @pytest.mark.parametrize(
        ("pc", "expected"),
        [(0, "C"), (1, "Db"), (3, "Eb"), (5, "F"), (6, "Gb"), (7, "G"), (8, "Ab"), (10, "Bb"), (11, "B")],
    )
    def test_key_name_of(self, pc: int, expected: str) -> None:
        assert key_name_of(pc) == expected

    def test_roots_match(self) -> None:
        assert roots_match("C#", "Db") is True
        assert roots_match("C", "D") is False
        assert roots_match("C", None) is False
        assert roots_match("C", "H") is False
