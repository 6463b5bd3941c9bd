"""Octave placement for resolved chord notes."""

from __future__ import annotations

import re

from songcraft.pitch_class import UnknownNoteError, name_of, note_to_pc, preferred_accidental

# Note name with an optional octave number (e.g., "C#4", "Bb-1")
NOTE_RE = re.compile(r"^([A-G](?:#|b)?)(-?\d+)?$")

DEFAULT_OCTAVE = 4
NINTH = 14


def midi_number(note: str, octave: int | None = None) -> int:
    """Convert a note to a MIDI note number (C4 = 60).

    Parameters
    ----------
    note : str
        Note name, optionally with an octave (e.g., "E", "E4").
    octave : int | None
        Octave to use. Overrides the octave in ``note``; when neither is
        given the note is placed in octave 4.

    Returns
    -------
    int
        The MIDI note number.

    Raises
    ------
    UnknownNoteError
        If ``note`` is not a note name.

    Examples
    --------
    >>> midi_number("A4")
    69
    >>> midi_number("C")
    60
    >>> midi_number("Bb", octave=2)
    46
    """
    match = NOTE_RE.match(note)
    if not match:
        msg = f"Unknown note: {note}"
        raise UnknownNoteError(msg)
    if octave is None:
        octave = int(match.group(2)) if match.group(2) is not None else DEFAULT_OCTAVE
    return (octave + 1) * 12 + note_to_pc(match.group(1))


def voice_with_octaves(notes: list[str], base_octave: int = 3) -> list[str]:
    """Assign octaves to a chord's notes.

    Duplicates are dropped (first occurrence wins). The first three notes
    sit in ``base_octave`` and the rest one octave up. A plain triad also
    gets its ninth (root + 14 semitones) on top.

    Parameters
    ----------
    notes : list[str]
        Pitch-class note names, root first (e.g., ``["C", "E", "G"]``).
    base_octave : int
        Octave of the lower notes.

    Returns
    -------
    list[str]
        Notes with octave numbers (e.g., ``["C3", "E3", "G3", "D4"]``).

    Raises
    ------
    UnknownNoteError
        If a note is not a bare note name.

    Examples
    --------
    >>> voice_with_octaves(["A", "C", "E", "G"])
    ['A3', 'C3', 'E3', 'G4']
    """
    unique = list(dict.fromkeys(notes))
    voiced = []
    for i, note in enumerate(unique):
        note_to_pc(note)
        octave = base_octave if i < 3 else base_octave + 1
        voiced.append(f"{note}{octave}")

    if len(unique) == 3:
        root = unique[0]
        ninth = midi_number(root, base_octave) + NINTH
        voiced.append(f"{name_of(ninth, preferred_accidental(root))}{ninth // 12 - 1}")

    return voiced
