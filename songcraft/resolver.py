"""Chord-to-notes resolution.

A resolver turns a chord symbol into the pitch-class note names of the
chord (no octaves). Two implementations are provided:

- ``IntervalTableResolver`` uses fixed interval tables and needs nothing
  beyond this package.
- ``PychordResolver`` asks the ``pychord`` library first and falls back to
  another resolver when pychord rejects the symbol.

Callers pick one at construction time, usually through ``create_resolver``.

Examples
--------
>>> chord_notes("Cmaj7")
['C', 'E', 'G', 'B']
>>> chord_notes("bVII") is None
True
"""

from __future__ import annotations

import logging
from typing import Protocol

from songcraft.chord_symbol import parse_chord_symbol
from songcraft.pitch_class import (
    FLAT_NAMES,
    SHARP_NAMES,
    Accidental,
    UnknownNoteError,
    name_of,
    note_to_pc,
    preferred_accidental,
)

logger = logging.getLogger(__name__)

# Semitones above the root, keyed by normalized quality
INTERVALS_BY_QUALITY: dict[str, tuple[int, ...]] = {
    "m7b5": (0, 3, 6, 10),
    "dim7": (0, 3, 6, 9),
    "dim": (0, 3, 6),
    "maj7": (0, 4, 7, 11),
    "m7": (0, 3, 7, 10),
    "7": (0, 4, 7, 10),
    "m": (0, 3, 7),
}
MAJOR_TRIAD: tuple[int, ...] = (0, 4, 7)

# Normalized qualities that pychord spells differently
PYCHORD_QUALITY: dict[str, str] = {
    "m7b5": "m7-5",
}


class ChordNotesResolver(Protocol):
    """Anything that can expand a chord symbol into note names."""

    def resolve(self, symbol: str) -> list[str] | None:
        """Return the chord's note names, or None for non-chord symbols."""
        ...


class IntervalTableResolver:
    """Resolve chords from the built-in interval tables.

    Unknown qualities are voiced as a major triad. Notes are spelled with
    the accidental preferred by the root itself (e.g., Bb chords in flats).
    """

    def resolve(self, symbol: str) -> list[str] | None:
        chord = parse_chord_symbol(symbol)
        if chord is None:
            return None
        root_pc = note_to_pc(chord.root)
        preference = preferred_accidental(chord.root)
        intervals = INTERVALS_BY_QUALITY.get(chord.quality, MAJOR_TRIAD)
        return [name_of(root_pc + interval, preference) for interval in intervals]


class PychordResolver:
    """Resolve chords with pychord, falling back when pychord cannot.

    Notes are returned root first. Spellings outside the plain sharp and
    flat tables (E#, Cb, double accidentals) are respelled with the
    accidental preferred by the root.

    Parameters
    ----------
    fallback : ChordNotesResolver | None
        Resolver used when pychord rejects a symbol or returns no notes.
        Defaults to ``IntervalTableResolver``.
    """

    def __init__(self, fallback: ChordNotesResolver | None = None) -> None:
        self.fallback = fallback if fallback is not None else IntervalTableResolver()

    def resolve(self, symbol: str) -> list[str] | None:
        from pychord import Chord as PyChord

        chord = parse_chord_symbol(symbol)
        if chord is None:
            return None
        quality = PYCHORD_QUALITY.get(chord.quality, chord.quality)
        name = f"{chord.root}{quality}"
        try:
            notes = PyChord(name).components()
        except ValueError as e:
            logger.debug(f"pychord rejected {name!r} ({e}); using fallback")
            return self.fallback.resolve(symbol)
        if not notes:
            return self.fallback.resolve(symbol)
        preference = preferred_accidental(chord.root)
        try:
            spelled = [_plain_spelling(note, preference) for note in notes]
        except UnknownNoteError as e:
            logger.debug(f"pychord spelled {name!r} as {notes} ({e}); using fallback")
            return self.fallback.resolve(symbol)

        # Root first; pychord puts a slash bass ahead of it
        root_pc = note_to_pc(chord.root)
        for i, note in enumerate(spelled):
            if note_to_pc(note) == root_pc:
                spelled.insert(0, spelled.pop(i))
                break
        return spelled


def _plain_spelling(note: str, preference: Accidental) -> str:
    """Keep sharp/flat table names, respell E#, Cb, G## and the like."""
    if note in SHARP_NAMES or note in FLAT_NAMES:
        return note
    return name_of(note_to_pc(note), preference)


def create_resolver(use_library: bool = True) -> ChordNotesResolver:
    """Build the resolver for an application.

    Parameters
    ----------
    use_library : bool
        If True (default), prefer pychord with the interval tables as
        fallback. If False, use the interval tables only.

    Returns
    -------
    ChordNotesResolver
        The selected resolver.
    """
    if use_library:
        return PychordResolver(fallback=IntervalTableResolver())
    return IntervalTableResolver()


_DEFAULT_RESOLVER = IntervalTableResolver()


def chord_notes(symbol: str, resolver: ChordNotesResolver | None = None) -> list[str] | None:
    """Expand a chord symbol into pitch-class note names.

    Parameters
    ----------
    symbol : str
        The chord symbol (e.g., "Am7", "F#dim").
    resolver : ChordNotesResolver | None
        Resolver to use. Defaults to the built-in interval tables.

    Returns
    -------
    list[str] | None
        Note names without octaves, or None if the symbol does not start
        with a note letter (e.g., "bIII").
    """
    return (resolver or _DEFAULT_RESOLVER).resolve(symbol)
