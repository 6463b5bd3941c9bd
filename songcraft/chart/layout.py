"""Grid layout for parsed charts.

Groups bars into visual rows of a fixed width. A section header always
starts a new row.
"""

from __future__ import annotations

from songcraft.chart.models import BarToken, ChartRow, ChartToken, SectionToken

DEFAULT_BARS_PER_LINE = 4


def layout_rows(tokens: list[ChartToken], bars_per_line: int = DEFAULT_BARS_PER_LINE) -> list[ChartRow]:
    """Group chart tokens into rows of at most ``bars_per_line`` bars.

    Parameters
    ----------
    tokens : list[ChartToken]
        Output of ``parse_chart``.
    bars_per_line : int
        Maximum number of bars per row.

    Returns
    -------
    list[ChartRow]
        Rows in order. The first row of a section carries its title; a
        section without bars still yields one (empty) row.

    Raises
    ------
    ValueError
        If ``bars_per_line`` is less than 1.
    """
    if bars_per_line < 1:
        msg = f"bars_per_line must be at least 1, got {bars_per_line}"
        raise ValueError(msg)

    rows: list[ChartRow] = []
    title: str | None = None
    pending_title = False
    current: list[BarToken] = []

    def flush() -> None:
        nonlocal title, pending_title, current
        if current or pending_title:
            rows.append(ChartRow(title=title, bars=tuple(current)))
        title = None
        pending_title = False
        current = []

    for token in tokens:
        if isinstance(token, SectionToken):
            flush()
            title = token.title
            pending_title = True
            continue
        current.append(token)
        if len(current) == bars_per_line:
            flush()

    flush()
    return rows


def render_grid(rows: list[ChartRow]) -> str:
    """Render rows as plain text, one bar per ``|`` cell.

    Examples
    --------
    >>> from songcraft.chart.parser import parse_chart
    >>> print(render_grid(layout_rows(parse_chart("[Intro]\\nC | G{3} D"), 4)))
    [Intro]
    | C | G{3} D{4} |
    """
    lines = []
    for row in rows:
        if row.title is not None:
            lines.append(f"[{row.title}]")
        if row.bars:
            lines.append("| " + " | ".join(_render_bar(bar) for bar in row.bars) + " |")
    return "\n".join(lines)


def _render_bar(bar: BarToken) -> str:
    """Render one bar; beat counts are shown only for split bars."""
    if bar.is_rest:
        return "-"
    if len(bar.chords) == 1:
        return bar.chords[0].symbol
    return " ".join(f"{chord.symbol}{{{chord.beats}}}" for chord in bar.chords)
