"""Data models for bar/measure chord charts.

This module defines the tokens produced by the chart parser and the
structures built from them for grid rendering and playback.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordBeat:
    """A chord and the number of beats it lasts within its bar.

    Parameters
    ----------
    symbol : str
        The chord symbol as written (e.g., "Am7").
    beats : int
        Beat count; 0 means "not given" until beats are assigned.

    Examples
    --------
    >>> ChordBeat(symbol="G", beats=2)
    ChordBeat(symbol='G', beats=2)
    """

    symbol: str
    beats: int = 0


@dataclass(frozen=True)
class SectionToken:
    """A section header such as ``[Chorus]``.

    Parameters
    ----------
    title : str
        The section title without brackets.
    """

    title: str


@dataclass(frozen=True)
class BarToken:
    """One measure of the chart.

    Parameters
    ----------
    chords : tuple[ChordBeat, ...]
        Chords in the bar, left to right. Empty for a rest bar.
    """

    chords: tuple[ChordBeat, ...] = ()

    @property
    def total_beats(self) -> int:
        """Sum of the beat counts of all chords in the bar."""
        return sum(chord.beats for chord in self.chords)

    @property
    def is_rest(self) -> bool:
        """True if the bar holds no chords."""
        return not self.chords


ChartToken = SectionToken | BarToken


@dataclass(frozen=True)
class ChartRow:
    """A visual line of the chart grid.

    Parameters
    ----------
    title : str | None
        Section title if this row opens a section, None otherwise.
    bars : tuple[BarToken, ...]
        The bars drawn on this line.
    """

    title: str | None
    bars: tuple[BarToken, ...]


@dataclass(frozen=True)
class ScheduledChord:
    """A chord placed on the playback timeline.

    Parameters
    ----------
    symbol : str
        The chord symbol.
    start_ms : float
        Offset from the start of the chart in milliseconds.
    duration_ms : float
        How long the chord sounds in milliseconds.
    bar_index : int
        Zero-based index of the bar the chord belongs to.
    """

    symbol: str
    start_ms: float
    duration_ms: float
    bar_index: int
