"""Command-line tool for transposing songs and inspecting chord charts.

Usage:
    songcraft transpose song.cho --semitones 2 [--key Bb]
    songcraft palette Eb
    songcraft notes Am7 [--octave 3] [--builtin]
    songcraft chart chart.txt [--beats-per-bar 3] [--bars-per-line 4] [--json]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from songcraft.chart import BarToken, ChartToken, layout_rows, parse_chart, render_grid
from songcraft.chord_symbol import transpose_text
from songcraft.palette import diatonic_palette
from songcraft.pitch_class import preferred_accidental
from songcraft.resolver import create_resolver
from songcraft.settings import EditorSettings
from songcraft.voicing import voice_with_octaves

logger = logging.getLogger(__name__)


def token_to_dict(token: ChartToken) -> dict[str, Any]:
    """Convert a chart token to a JSON-serializable dict."""
    if isinstance(token, BarToken):
        return {"type": "bar", "chords": [asdict(chord) for chord in token.chords]}
    return {"type": "section", "title": token.title}


def cmd_transpose(args: argparse.Namespace) -> int:
    text = args.file.read_text()
    preference = preferred_accidental(args.key) if args.key else "sharp"
    sys.stdout.write(transpose_text(text, args.semitones, preference))
    return 0


def cmd_palette(args: argparse.Namespace) -> int:
    palette = diatonic_palette(args.key)
    print(f"Triads:   {' '.join(palette.triads)}")
    print(f"Sevenths: {' '.join(palette.sevenths)}")
    print(f"Borrowed: {' '.join(palette.borrowed)}")
    return 0


def cmd_notes(args: argparse.Namespace) -> int:
    resolver = create_resolver(use_library=not args.builtin)
    notes = resolver.resolve(args.symbol)
    if notes is None:
        print(f"Not a playable chord: {args.symbol}", file=sys.stderr)
        return 1
    print(" ".join(voice_with_octaves(notes, args.octave)))
    return 0


def cmd_chart(args: argparse.Namespace) -> int:
    settings = EditorSettings(beats_per_bar=args.beats_per_bar, bars_per_line=args.bars_per_line)
    tokens = parse_chart(args.file.read_text(), settings.beats_per_bar)
    logger.info(f"Parsed {len(tokens)} tokens from {args.file}")
    if args.json:
        print(json.dumps([token_to_dict(token) for token in tokens], indent=2))
    else:
        print(render_grid(layout_rows(tokens, settings.bars_per_line)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the songcraft command."""
    parser = argparse.ArgumentParser(
        prog="songcraft",
        description="Transpose ChordPro songs and inspect chord charts",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transpose = subparsers.add_parser("transpose", help="Transpose [chord] annotations in a ChordPro file")
    transpose.add_argument("file", type=Path, help="ChordPro file")
    transpose.add_argument(
        "--semitones",
        type=int,
        required=True,
        help="Semitones to transpose by (negative = down)",
    )
    transpose.add_argument(
        "--key",
        default=None,
        help="Key whose accidentals to spell with (default: sharps)",
    )
    transpose.set_defaults(func=cmd_transpose)

    palette = subparsers.add_parser("palette", help="Show the diatonic chords of a major key")
    palette.add_argument("key", help="Key signature, e.g. Eb")
    palette.set_defaults(func=cmd_palette)

    notes = subparsers.add_parser("notes", help="Show the voiced notes of a chord")
    notes.add_argument("symbol", help="Chord symbol, e.g. Am7")
    notes.add_argument("--octave", type=int, default=3, help="Base octave")
    notes.add_argument(
        "--builtin",
        action="store_true",
        help="Use the built-in interval tables instead of pychord",
    )
    notes.set_defaults(func=cmd_notes)

    chart = subparsers.add_parser("chart", help="Parse a bar-delimited chord chart")
    chart.add_argument("file", type=Path, help="Chart file")
    chart.add_argument("--beats-per-bar", type=int, default=4, help="Beats per bar")
    chart.add_argument("--bars-per-line", type=int, default=4, help="Bars per grid row")
    chart.add_argument("--json", action="store_true", help="Print tokens as JSON")
    chart.set_defaults(func=cmd_chart)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the songcraft command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
