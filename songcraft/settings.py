"""Editor settings shared by the palette, chart and playback helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Literal

from songcraft.chart.layout import DEFAULT_BARS_PER_LINE
from songcraft.chart.parser import DEFAULT_BEATS_PER_BAR
from songcraft.chart.timing import DEFAULT_BPM
from songcraft.pitch_class import note_to_pc

Layout = Literal["compact", "comfy", "large"]
LAYOUTS: tuple[str, ...] = ("compact", "comfy", "large")

# UI field names mapped to dataclass fields
_FIELD_ALIASES: dict[str, str] = {
    "key": "key",
    "beatsPerBar": "beats_per_bar",
    "beats_per_bar": "beats_per_bar",
    "barsPerLine": "bars_per_line",
    "bars_per_line": "bars_per_line",
    "layout": "layout",
    "bpm": "bpm",
}


@dataclass(frozen=True)
class EditorSettings:
    """Settings chosen in the songwriting editor.

    Parameters
    ----------
    key : str
        Key signature of the song (e.g., "C", "Bb").
    beats_per_bar : int
        Beats in a bar from the time signature.
    bars_per_line : int
        Bars per row of the chart grid.
    layout : Layout
        Grid density: "compact", "comfy" or "large".
    bpm : int
        Playback tempo in beats per minute.

    Raises
    ------
    ValueError
        If any field is out of range. An unknown key raises
        ``UnknownNoteError``, itself a ``ValueError``.

    Examples
    --------
    >>> EditorSettings.from_mapping({"key": "Eb", "beatsPerBar": 3}).beats_per_bar
    3
    """

    key: str = "C"
    beats_per_bar: int = DEFAULT_BEATS_PER_BAR
    bars_per_line: int = DEFAULT_BARS_PER_LINE
    layout: Layout = "comfy"
    bpm: int = DEFAULT_BPM

    def __post_init__(self) -> None:
        note_to_pc(self.key)
        if self.beats_per_bar < 1:
            msg = f"beats_per_bar must be at least 1, got {self.beats_per_bar}"
            raise ValueError(msg)
        if self.bars_per_line < 1:
            msg = f"bars_per_line must be at least 1, got {self.bars_per_line}"
            raise ValueError(msg)
        if self.layout not in LAYOUTS:
            msg = f"Unknown layout: {self.layout} (expected one of {', '.join(LAYOUTS)})"
            raise ValueError(msg)
        if self.bpm <= 0:
            msg = f"bpm must be positive, got {self.bpm}"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EditorSettings:
        """Build settings from a UI record, accepting camelCase field names.

        Unrecognized fields are ignored. Numeric fields that cannot be read
        as integers (including nulls) raise ``ValueError``.
        """
        kwargs: dict[str, Any] = {}
        for name, value in data.items():
            field = _FIELD_ALIASES.get(name)
            if field is None:
                continue
            if field in ("key", "layout"):
                kwargs[field] = value
                continue
            try:
                kwargs[field] = int(value)
            except (TypeError, ValueError) as e:
                msg = f"{name} must be an integer, got {value!r}"
                raise ValueError(msg) from e
        return cls(**kwargs)

    def with_key(self, key: str) -> EditorSettings:
        """Return a copy with a different key."""
        return replace(self, key=key)
