"""Bar/measure chord charts.

This module parses bar-delimited chord charts into section and bar
tokens, and lays them out as a grid or a playback timeline.
"""

from songcraft.chart.layout import layout_rows, render_grid
from songcraft.chart.models import (
    BarToken,
    ChartRow,
    ChartToken,
    ChordBeat,
    ScheduledChord,
    SectionToken,
)
from songcraft.chart.parser import parse_chart
from songcraft.chart.timing import beat_ms_for_tempo, schedule, total_duration_ms
from songcraft.chart.tokenizer import assign_beats, tokenize_segment

__all__ = [
    "BarToken",
    "ChartRow",
    "ChartToken",
    "ChordBeat",
    "ScheduledChord",
    "SectionToken",
    "assign_beats",
    "beat_ms_for_tempo",
    "layout_rows",
    "parse_chart",
    "render_grid",
    "schedule",
    "tokenize_segment",
    "total_duration_ms",
]
