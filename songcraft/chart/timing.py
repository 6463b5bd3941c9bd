"""Playback timing for parsed charts.

Each bar lasts ``beats_per_bar * beat_ms`` regardless of the beat counts
written in it; chords are scaled so that a bar whose explicit counts do
not add up still fills exactly one bar.
"""

from __future__ import annotations

from songcraft.chart.models import BarToken, ChartToken, ScheduledChord

DEFAULT_BPM = 90


def beat_ms_for_tempo(bpm: float) -> float:
    """Return the length of one beat in milliseconds.

    Examples
    --------
    >>> beat_ms_for_tempo(120)
    500.0
    """
    if bpm <= 0:
        msg = f"Tempo must be positive, got {bpm}"
        raise ValueError(msg)
    return 60000 / bpm


def schedule(
    tokens: list[ChartToken],
    beats_per_bar: int = 4,
    beat_ms: float | None = None,
) -> list[ScheduledChord]:
    """Place the chords of a chart on a timeline.

    Parameters
    ----------
    tokens : list[ChartToken]
        Output of ``parse_chart``. Section tokens take no time.
    beats_per_bar : int
        Beats in a bar from the time signature.
    beat_ms : float | None
        Length of a beat in milliseconds. Defaults to the beat length at
        90 BPM.

    Returns
    -------
    list[ScheduledChord]
        Chords with start offsets and durations. Rest bars, and bars whose
        beats add up to zero, leave a bar of silence. Chords with zero beats
        are not scheduled.

    Examples
    --------
    >>> from songcraft.chart.parser import parse_chart
    >>> [(c.symbol, c.start_ms, c.duration_ms) for c in schedule(parse_chart("C | G{1} D{3}"), 4, 500)]
    [('C', 0.0, 2000.0), ('G', 2000.0, 500.0), ('D', 2500.0, 1500.0)]
    """
    if beat_ms is None:
        beat_ms = beat_ms_for_tempo(DEFAULT_BPM)
    bar_ms = beats_per_bar * beat_ms

    scheduled: list[ScheduledChord] = []
    bar_start = 0.0
    bar_index = 0

    for token in tokens:
        if not isinstance(token, BarToken):
            continue

        total = token.total_beats
        if total > 0:
            offset = bar_start
            for chord in token.chords:
                duration = chord.beats * bar_ms / total
                if duration > 0:
                    scheduled.append(
                        ScheduledChord(
                            symbol=chord.symbol,
                            start_ms=offset,
                            duration_ms=duration,
                            bar_index=bar_index,
                        )
                    )
                offset += duration

        bar_start += bar_ms
        bar_index += 1

    return scheduled


def total_duration_ms(tokens: list[ChartToken], beats_per_bar: int = 4, beat_ms: float | None = None) -> float:
    """Return the playing time of a chart in milliseconds."""
    if beat_ms is None:
        beat_ms = beat_ms_for_tempo(DEFAULT_BPM)
    bars = sum(1 for token in tokens if isinstance(token, BarToken))
    return bars * beats_per_bar * beat_ms
