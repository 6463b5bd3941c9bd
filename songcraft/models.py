"""Chord data models for songcraft.

This module provides the representations shared by the chord-symbol
parser, the palette generator and the notes resolver.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordSymbol:
    """A chord symbol split into root and free-text suffix.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    suffix : str
        Everything after the root, kept verbatim (e.g., "m7b5", "Maj7").

    Examples
    --------
    >>> chord = ChordSymbol(root="G", suffix="Maj7")
    >>> chord.quality
    'maj7'
    >>> str(chord)
    'GMaj7'
    """

    root: str
    suffix: str = ""

    @property
    def quality(self) -> str:
        """Normalized quality of the suffix.

        Returns
        -------
        str
            One of "", "m", "7", "maj7", "m7", "dim", "dim7", "m7b5",
            or the suffix itself when it has no known alias.
        """
        from songcraft.chord_symbol import normalize_quality

        return normalize_quality(self.suffix)

    def __str__(self) -> str:
        """Return the symbol as written."""
        return f"{self.root}{self.suffix}"


@dataclass(frozen=True)
class DiatonicPalette:
    """The chords offered for a major key.

    Parameters
    ----------
    key : str
        The key the palette was generated for.
    triads : list[str]
        Triads on scale degrees 1-7.
    sevenths : list[str]
        Seventh chords on scale degrees 1-7.
    borrowed : list[str]
        Borrowed-chord labels. These are placeholders, not playable chords.
    """

    key: str
    triads: list[str]
    sevenths: list[str]
    borrowed: list[str]

    def all_symbols(self) -> list[str]:
        """Return every palette entry in display order."""
        return self.triads + self.sevenths + self.borrowed
