"""Tests for chart grid layout and playback timing."""

import pytest

from songcraft.chart import (
    BarToken,
    ChartRow,
    ChordBeat,
    SectionToken,
    beat_ms_for_tempo,
    layout_rows,
    parse_chart,
    render_grid,
    schedule,
    total_duration_ms,
)


class TestLayoutRows:
    """Test grouping bars into rows."""

    def test_groups_by_bars_per_line(self) -> None:
        rows = layout_rows(parse_chart("C | D | E | F | G | A"), bars_per_line=4)
        assert [len(row.bars) for row in rows] == [4, 2]
        assert all(row.title is None for row in rows)

    def test_section_starts_new_row(self) -> None:
        rows = layout_rows(parse_chart("C | D\n[Chorus]\nF | G | A"), bars_per_line=4)
        assert [(row.title, len(row.bars)) for row in rows] == [(None, 2), ("Chorus", 3)]

    def test_title_only_on_first_row_of_section(self) -> None:
        rows = layout_rows(parse_chart("[Verse]\nC | D | E"), bars_per_line=2)
        assert [(row.title, len(row.bars)) for row in rows] == [("Verse", 2), (None, 1)]

    def test_empty_section_keeps_its_row(self) -> None:
        rows = layout_rows(parse_chart("[Intro]\n[Verse]\nC"))
        assert rows == [
            ChartRow(title="Intro", bars=()),
            ChartRow(title="Verse", bars=(BarToken((ChordBeat("C", 4),)),)),
        ]

    def test_full_row_at_section_boundary(self) -> None:
        rows = layout_rows(parse_chart("C | D\n[Chorus]\nE"), bars_per_line=2)
        assert [(row.title, len(row.bars)) for row in rows] == [(None, 2), ("Chorus", 1)]

    def test_no_tokens(self) -> None:
        assert layout_rows([]) == []

    def test_bars_per_line_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="bars_per_line"):
            layout_rows([], bars_per_line=0)


class TestRenderGrid:
    def test_render(self) -> None:
        text = render_grid(layout_rows(parse_chart("[Intro]\nC | G D"), 4))
        assert text == "[Intro]\n| C | G{2} D{2} |"

    def test_rest_bar(self) -> None:
        assert render_grid(layout_rows(parse_chart("C || G"), 4)) == "| C | - | G |"


class TestTiming:
    """Test playback scheduling."""

    def test_beat_ms_for_tempo(self) -> None:
        assert beat_ms_for_tempo(120) == 500.0
        assert beat_ms_for_tempo(60) == 1000.0

    @pytest.mark.parametrize("bpm", [0, -10])
    def test_invalid_tempo(self, bpm: int) -> None:
        with pytest.raises(ValueError, match="Tempo"):
            beat_ms_for_tempo(bpm)

    def test_even_bars(self) -> None:
        events = schedule(parse_chart("C | Am G"), beats_per_bar=4, beat_ms=500)
        assert [(e.symbol, e.start_ms, e.duration_ms, e.bar_index) for e in events] == [
            ("C", 0.0, 2000.0, 0),
            ("Am", 2000.0, 1000.0, 1),
            ("G", 3000.0, 1000.0, 1),
        ]

    def test_uneven_explicit_beats_scaled_to_bar(self) -> None:
        """Test a bar whose counts overshoot still lasts one bar."""
        events = schedule(parse_chart("C{4} G{4} | D"), beats_per_bar=4, beat_ms=500)
        assert [(e.symbol, e.start_ms, e.duration_ms) for e in events] == [
            ("C", 0.0, 1000.0),
            ("G", 1000.0, 1000.0),
            ("D", 2000.0, 2000.0),
        ]

    def test_rest_bar_keeps_time(self) -> None:
        events = schedule(parse_chart("C || G"), beats_per_bar=4, beat_ms=500)
        assert [(e.symbol, e.start_ms, e.bar_index) for e in events] == [("C", 0.0, 0), ("G", 4000.0, 2)]

    def test_sections_take_no_time(self) -> None:
        tokens = [SectionToken("Intro"), BarToken((ChordBeat("C", 4),))]
        (event,) = schedule(tokens, beats_per_bar=4, beat_ms=250)
        assert event.start_ms == 0.0
        assert event.duration_ms == 1000.0

    def test_zero_beat_chords_not_scheduled(self) -> None:
        tokens = [BarToken((ChordBeat("C", 0), ChordBeat("G", 4)))]
        assert [e.symbol for e in schedule(tokens, 4, 500)] == ["G"]

    def test_default_tempo(self) -> None:
        (event,) = schedule(parse_chart("C"))
        assert event.duration_ms == pytest.approx(4 * 60000 / 90)

    def test_total_duration(self) -> None:
        tokens = parse_chart("[Intro]\nC | G | %")
        assert total_duration_ms(tokens, beats_per_bar=3, beat_ms=500) == 4500.0
