"""Chord symbol parsing, quality normalization and transposition.

This module splits chord symbols into root and suffix, maps suffix
aliases onto a small canonical set of qualities, and transposes chord
symbols either one at a time or inline in ChordPro text.
"""

from __future__ import annotations

import re

from songcraft.models import ChordSymbol
from songcraft.pitch_class import (
    Accidental,
    name_of,
    note_to_pc,
    transpose_pitch_class,
)

# Root with optional accidental, then the suffix
SYMBOL_RE = re.compile(r"^([A-G](?:#|b)?)(.*)$", re.DOTALL)

# Inline ChordPro chord: [symbol]
BRACKET_CHORD_RE = re.compile(r"\[([^\]]+)\]")

# Section label made of words only (e.g., "Chorus", "Pre-Chorus", "Verse 2")
SECTION_LABEL_RE = re.compile(r"^[A-Za-z][A-Za-z'-]*(?:\s+[\w'-]+)*$")

# Strict chord grammar for telling "[Cmaj7]" apart from "[Chorus]".
# The root is case-sensitive, the quality vocabulary is not.
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?i:"
    r"m(?:aj|in)?(?:7|9|11|13)?|"  # minor variants: m, min, maj, maj7, m7, m9, etc.
    r"dim(?:7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24]?(?:7)?|"  # suspended
    r"add[29]|"  # added tones
    r"7|9|11|13|6|"  # extensions
    r"m7-5|m7b5|ø|"  # half-diminished
    r"mM7|mmaj7|"  # minor-major seventh
    r"5"  # power chord
    r")*"
    r"(?:/[A-G][b#]?)?$",  # Optional slash bass
)

# Canonical qualities produced by normalize_quality
CANONICAL_QUALITIES: frozenset[str] = frozenset({"", "m", "7", "maj7", "m7", "dim", "dim7", "m7b5"})

_QUALITY_ALIASES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^maj7$", re.IGNORECASE), "maj7"),
    (re.compile(r"^M7$"), "maj7"),
    (re.compile(r"^(?:m7b5|ø)$", re.IGNORECASE), "m7b5"),
    (re.compile(r"^dim7$", re.IGNORECASE), "dim7"),
    (re.compile(r"^(?:dim|o)$", re.IGNORECASE), "dim"),
    (re.compile(r"^m7$"), "m7"),
    (re.compile(r"^m(?!aj)"), "m"),
    (re.compile(r"^7$"), "7"),
)


def parse_chord_symbol(symbol: str) -> ChordSymbol | None:
    """Split a chord symbol into root and suffix.

    Parameters
    ----------
    symbol : str
        The chord symbol (e.g., "Bbm7", "F#dim").

    Returns
    -------
    ChordSymbol | None
        The parsed symbol, or None if it does not start with a note name
        (e.g., roman-numeral placeholders such as "bVII").

    Examples
    --------
    >>> parse_chord_symbol("Bbm7")
    ChordSymbol(root='Bb', suffix='m7')
    >>> parse_chord_symbol("bVII") is None
    True
    """
    match = SYMBOL_RE.match(symbol)
    if not match:
        return None
    return ChordSymbol(root=match.group(1), suffix=match.group(2))


def normalize_quality(suffix: str) -> str:
    """Map a chord suffix onto a canonical quality.

    Parameters
    ----------
    suffix : str
        The raw suffix (e.g., "Maj7", "ø", "min").

    Returns
    -------
    str
        The canonical quality, or the stripped suffix unchanged when it has
        no known alias.

    Examples
    --------
    >>> normalize_quality("Maj7")
    'maj7'
    >>> normalize_quality("m7")
    'm7'
    >>> normalize_quality("sus4")
    'sus4'
    """
    stripped = suffix.strip()
    if not stripped:
        return ""
    for pattern, quality in _QUALITY_ALIASES:
        if pattern.search(stripped):
            return quality
    return stripped


def is_chord_like(label: str) -> bool:
    """Check whether a label reads as a chord rather than a word.

    Examples
    --------
    >>> is_chord_like("Cmaj7")
    True
    >>> is_chord_like("Chorus")
    False
    """
    return bool(CHORD_RE.match(label.strip()))


def transpose_chord_symbol(symbol: str, semitones: int, preference: Accidental = "sharp") -> str:
    """Transpose the root of a chord symbol.

    The suffix is carried over verbatim. Text that does not start with a
    note name is returned unchanged.

    Parameters
    ----------
    symbol : str
        The chord symbol to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).
    preference : Accidental
        Spelling for the new root.

    Returns
    -------
    str
        The transposed chord symbol.

    Examples
    --------
    >>> transpose_chord_symbol("Am7", 3)
    'Cm7'
    >>> transpose_chord_symbol("C", -2, "flat")
    'Bb'
    >>> transpose_chord_symbol("bVII", 5)
    'bVII'
    """
    chord = parse_chord_symbol(symbol)
    if chord is None:
        return symbol
    new_pc = transpose_pitch_class(note_to_pc(chord.root), semitones + 1200)
    return f"{name_of(new_pc, preference)}{chord.suffix}"


def transpose_text(text: str, semitones: int, preference: Accidental = "sharp") -> str:
    """Transpose every bracketed chord in ChordPro text.

    Text outside brackets is left untouched, and so is a bracketed section
    label such as ``[Chorus]`` or ``[Verse 2]``, wherever it appears.

    Examples
    --------
    >>> transpose_text("[C]Hello [G]world", 2)
    '[D]Hello [A]world'
    >>> transpose_text("[Chorus]\\n[C]Hey", 1)
    '[Chorus]\\n[C#]Hey'
    """

    def _replace(match: re.Match[str]) -> str:
        label = match.group(1)
        if is_section_label(label):
            return match.group(0)
        return f"[{transpose_chord_symbol(label, semitones, preference)}]"

    return BRACKET_CHORD_RE.sub(_replace, text)


def is_section_label(label: str) -> bool:
    """Check if a bracketed label names a section rather than a chord.

    Examples
    --------
    >>> is_section_label("Chorus")
    True
    >>> is_section_label("Cmin")
    False
    >>> is_section_label("C7b9")
    False
    """
    label = label.strip()
    return not is_chord_like(label) and SECTION_LABEL_RE.match(label) is not None


def last_chord_before(text: str, position: int) -> str | None:
    """Return the last bracketed chord that closes at or before a cursor.

    Parameters
    ----------
    text : str
        ChordPro text.
    position : int
        Cursor offset into ``text``.

    Returns
    -------
    str | None
        The chord symbol inside the brackets, or None if there is none.

    Examples
    --------
    >>> last_chord_before("[C]Hello [G]world", 10)
    'C'
    """
    last = None
    for match in BRACKET_CHORD_RE.finditer(text[: max(position, 0)]):
        last = match.group(1)
    return last
