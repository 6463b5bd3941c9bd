"""Pitch class operations for note spelling and transposition.

This module provides the canonical 12-tone pitch class (0-11, C=0)
representation used throughout songcraft, together with sharp/flat
spelling tables and the key-signature accidental preference.
"""

from __future__ import annotations

import re
from typing import Literal

Accidental = Literal["sharp", "flat"]

# Spelling tables indexed by pitch class
SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

NOTE_NAMES: dict[str, tuple[str, ...]] = {
    "sharp": SHARP_NAMES,
    "flat": FLAT_NAMES,
}

# Keys whose signatures are written with flats / sharps
FLAT_KEYS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})
SHARP_KEYS: frozenset[str] = frozenset({"G", "D", "A", "E", "B", "F#", "C#"})


# Every spelling a chord library may hand back, including E#, Fb, B#, Cb
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Double accidentals as spelled by pychord (e.g., "G##", "Dbb")
DOUBLE_ACCIDENTAL_RE = re.compile(r"^([A-G])(##|bb)$")


class UnknownNoteError(ValueError):
    """Raised when a note name is in neither spelling table."""


def pitch_class_of(name: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    name : str
        Note name in sharp or flat spelling (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    UnknownNoteError
        If the name matches neither the sharp nor the flat table.

    Examples
    --------
    >>> pitch_class_of("F#")
    6
    >>> pitch_class_of("Bb")
    10
    """
    if name in SHARP_NAMES:
        return SHARP_NAMES.index(name)
    if name in FLAT_NAMES:
        return FLAT_NAMES.index(name)
    msg = f"Unknown note: {name}"
    raise UnknownNoteError(msg)


def note_to_pc(note: str) -> int:
    """Convert any spelling of a note, including E#/Fb/B#/Cb and double
    accidentals, to pitch class.

    Raises
    ------
    UnknownNoteError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("Cb")
    11
    >>> note_to_pc("G##")
    9
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    match = DOUBLE_ACCIDENTAL_RE.match(note) if isinstance(note, str) else None
    if match:
        letter, accidental = match.groups()
        offset = 2 if accidental == "##" else -2
        return (NOTE_TO_PC[letter] + offset) % 12
    msg = f"Unknown note: {note}"
    raise UnknownNoteError(msg)


def name_of(pc: int, preference: Accidental = "sharp") -> str:
    """Spell a pitch class, normalizing it modulo 12 first.

    Examples
    --------
    >>> name_of(10, "flat")
    'Bb'
    >>> name_of(-1)
    'B'
    """
    return NOTE_NAMES[preference][pc % 12]


def preferred_accidental(key: str) -> Accidental:
    """Return the accidental spelling preferred by a key signature.

    Keys outside both the flat and sharp sets (including C) read as sharp.

    Examples
    --------
    >>> preferred_accidental("Eb")
    'flat'
    >>> preferred_accidental("A")
    'sharp'
    >>> preferred_accidental("C")
    'sharp'
    """
    if key in FLAT_KEYS:
        return "flat"
    if key in SHARP_KEYS:
        return "sharp"
    return "sharp"


def key_name_of(pc: int) -> str:
    """Spell a pitch class as a major key name.

    Flat spelling is used where it names a flat key (Db, Eb, Gb, Ab, Bb),
    sharp spelling otherwise.

    Examples
    --------
    >>> key_name_of(10)
    'Bb'
    >>> key_name_of(6)
    'Gb'
    >>> key_name_of(2)
    'D'
    """
    flat = name_of(pc, "flat")
    if flat in FLAT_KEYS:
        return flat
    return name_of(pc, "sharp")


def transpose_pitch_class(pc: int, semitones: int) -> int:
    """Move a pitch class by a number of semitones (positive = up).

    Examples
    --------
    >>> transpose_pitch_class(0, -1)
    11
    >>> transpose_pitch_class(11, 50)
    1
    """
    return (pc + semitones) % 12


def roots_match(note1: str | None, note2: str | None) -> bool:
    """Check if two note names are enharmonically equivalent.

    Unknown or missing names never match.

    Examples
    --------
    >>> roots_match("C#", "Db")
    True
    >>> roots_match("C", "H")
    False
    """
    if note1 is None or note2 is None:
        return False
    try:
        return pitch_class_of(note1) == pitch_class_of(note2)
    except UnknownNoteError:
        return False
