"""Diatonic chord palette for a major key.

The palette is built by transposing the unaltered C major scale
(C D E F G A B) by the key's pitch class and applying fixed quality
templates per scale degree.
"""

from songcraft.models import DiatonicPalette
from songcraft.pitch_class import name_of, note_to_pc, pitch_class_of, preferred_accidental

# Unaltered C major scale, one entry per degree
DEGREE_ROOTS: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

# Major-scale quality templates per degree
TRIAD_QUALITIES: tuple[str, ...] = ("", "m", "m", "", "", "m", "dim")
SEVENTH_QUALITIES: tuple[str, ...] = ("maj7", "m7", "m7", "maj7", "7", "m7", "m7b5")

# Borrowed-chord labels; not pitches
BORROWED_LABELS: tuple[str, ...] = ("bIII", "bVI", "bVII")


def degree_roots(key: str) -> tuple[str, ...]:
    """Return the roots of scale degrees 1-7 in a major key.

    Raises
    ------
    UnknownNoteError
        If ``key`` is not a note name.

    Examples
    --------
    >>> degree_roots("F")
    ('F', 'G', 'A', 'Bb', 'C', 'D', 'E')
    """
    preference = preferred_accidental(key)
    offset = note_to_pc(key)
    return tuple(name_of(pitch_class_of(root) + offset, preference) for root in DEGREE_ROOTS)


def diatonic_palette(key: str) -> DiatonicPalette:
    """Generate the diatonic triads and sevenths for a major key.

    Parameters
    ----------
    key : str
        The key signature (e.g., "C", "Eb", "F#").

    Returns
    -------
    DiatonicPalette
        Triads and sevenths on degrees 1-7 plus the borrowed-chord labels.

    Raises
    ------
    UnknownNoteError
        If ``key`` is not a note name.

    Examples
    --------
    >>> diatonic_palette("C").triads
    ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim']
    >>> diatonic_palette("G").sevenths[4]
    'D7'
    """
    roots = degree_roots(key)
    return DiatonicPalette(
        key=key,
        triads=[root + quality for root, quality in zip(roots, TRIAD_QUALITIES)],
        sevenths=[root + quality for root, quality in zip(roots, SEVENTH_QUALITIES)],
        borrowed=list(BORROWED_LABELS),
    )
