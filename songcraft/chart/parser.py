"""Bar/measure chart parser.

This module provides the parse_chart() function that turns bar-delimited
chord chart text into an ordered list of section and bar tokens.

The parse is lenient: text that does not look like a chord is skipped and
never raises, so it can run on every keystroke of a live editor.
"""

from __future__ import annotations

import re

from songcraft.chart.models import BarToken, ChartToken, SectionToken
from songcraft.chart.tokenizer import assign_beats, tokenize_segment
from songcraft.chord_symbol import is_chord_like

# Section header pattern: [Section Name]
SECTION_HEADER_RE = re.compile(r"^\s*\[([^\]]+)\]\s*$")

BAR_DELIMITER = "|"
REPEAT_MARK = "%"
DEFAULT_BEATS_PER_BAR = 4


def preprocess(text: str) -> list[str]:
    """Normalize line endings and split text into lines.

    Parameters
    ----------
    text : str
        The raw chart text.

    Returns
    -------
    list[str]
        List of lines without trailing newlines.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def extract_section_title(line: str) -> str | None:
    """Extract the section title from a header line.

    Bracketed labels that read as a chord (e.g., ``[Cmaj7]``) are not
    headers.

    Parameters
    ----------
    line : str
        The line to check.

    Returns
    -------
    str | None
        The section title if this is a header, None otherwise.

    Examples
    --------
    >>> extract_section_title("[Chorus]")
    'Chorus'
    >>> extract_section_title("[Cmaj7]") is None
    True
    """
    match = SECTION_HEADER_RE.match(line)
    if not match:
        return None
    label = match.group(1).strip()
    if not label or is_chord_like(label):
        return None
    return label


def find_last_bar(tokens: list[ChartToken]) -> BarToken | None:
    """Return the most recent bar token, skipping section headers."""
    for token in reversed(tokens):
        if isinstance(token, BarToken):
            return token
    return None


def parse_chart(text: str, beats_per_bar: int = DEFAULT_BEATS_PER_BAR) -> list[ChartToken]:
    """Parse a bar-delimited chord chart.

    Each line is either a section header (``[Verse]``) or a run of bars
    separated by ``|``. Within a bar, chords may carry an explicit beat
    count (``G{3}``); the others share the bar evenly. A bar holding only
    ``%`` repeats the previous bar.

    Parameters
    ----------
    text : str
        The chart text.
    beats_per_bar : int
        Beats in a bar from the time signature.

    Returns
    -------
    list[ChartToken]
        Section and bar tokens in source order.

    Raises
    ------
    ValueError
        If ``beats_per_bar`` is less than 1.

    Examples
    --------
    >>> tokens = parse_chart("[Verse]\\nC | Am G | %")
    >>> tokens[0]
    SectionToken(title='Verse')
    >>> [[(c.symbol, c.beats) for c in t.chords] for t in tokens[1:]]
    [[('C', 4)], [('Am', 2), ('G', 2)], [('Am', 2), ('G', 2)]]
    """
    if beats_per_bar < 1:
        msg = f"beats_per_bar must be at least 1, got {beats_per_bar}"
        raise ValueError(msg)

    tokens: list[ChartToken] = []

    for line in preprocess(text):
        if not line.strip():
            continue

        title = extract_section_title(line)
        if title is not None:
            tokens.append(SectionToken(title=title))
            continue

        for raw in line.split(BAR_DELIMITER):
            segment = raw.strip()

            # Only a chart-opening delimiter is ignored
            if not segment and not tokens:
                continue

            if segment == REPEAT_MARK:
                previous = find_last_bar(tokens)
                if previous is not None:
                    tokens.append(BarToken(chords=previous.chords))
                continue

            chords = tokenize_segment(segment)
            tokens.append(BarToken(chords=assign_beats(chords, beats_per_bar)))

    return tokens
