"""Chord tokenizer for a single bar of a chart.

A bar segment holds chords written either bracketed (``[Am7]``) or bare
(``Am7``), each optionally followed by an explicit beat count in braces
(``Am7{3}``). Anything else in the segment is ignored.
"""

from __future__ import annotations

import re
from dataclasses import replace

from songcraft.chart.models import ChordBeat

CHORD_TOKEN_RE = re.compile(
    r"(?:"
    r"\[(?P<bracketed>[^\]|]+)\]"  # [symbol]
    r"|"
    r"(?<![^\s\]}])(?P<bare>[A-G](?:#|b)?[^\s|{}\[\]]*)"  # bare symbol at a token boundary
    r")"
    r"(?:\{(?P<beats>\d+)\})?"  # optional {beats}
)


def tokenize_segment(segment: str) -> list[ChordBeat]:
    """Extract chords and explicit beat counts from one bar.

    Parameters
    ----------
    segment : str
        Text between two bar delimiters.

    Returns
    -------
    list[ChordBeat]
        Chords in order of appearance. Chords without ``{n}`` have
        ``beats=0``.

    Examples
    --------
    >>> tokenize_segment("Am G{3}")
    [ChordBeat(symbol='Am', beats=0), ChordBeat(symbol='G', beats=3)]
    >>> tokenize_segment("[F#m7]{2} [Bsus4]")
    [ChordBeat(symbol='F#m7', beats=2), ChordBeat(symbol='Bsus4', beats=0)]
    >>> tokenize_segment("(tacet)")
    []
    """
    chords: list[ChordBeat] = []
    for match in CHORD_TOKEN_RE.finditer(segment):
        symbol = (match.group("bracketed") or match.group("bare")).strip()
        if not symbol:
            continue
        beats = int(match.group("beats")) if match.group("beats") else 0
        chords.append(ChordBeat(symbol=symbol, beats=beats))
    return chords


def assign_beats(chords: list[ChordBeat], beats_per_bar: int) -> tuple[ChordBeat, ...]:
    """Fill in beat counts for chords that did not give one.

    Chords with a zero beat count share ``beats_per_bar`` evenly; the
    remainder goes to the last of them. Explicit counts are kept as-is and
    do not reduce the shared total.

    Parameters
    ----------
    chords : list[ChordBeat]
        Chords of one bar.
    beats_per_bar : int
        Beats in a bar from the time signature.

    Returns
    -------
    tuple[ChordBeat, ...]
        The chords with beat counts assigned.

    Examples
    --------
    >>> [c.beats for c in assign_beats([ChordBeat("C"), ChordBeat("G"), ChordBeat("Em")], 4)]
    [1, 1, 2]
    """
    pending = [i for i, chord in enumerate(chords) if not chord.beats]
    if not pending:
        return tuple(chords)

    base = beats_per_bar // len(pending)
    remainder = beats_per_bar - base * len(pending)

    assigned = list(chords)
    for i in pending:
        assigned[i] = replace(assigned[i], beats=base)
    last = pending[-1]
    assigned[last] = replace(assigned[last], beats=base + remainder)
    return tuple(assigned)
