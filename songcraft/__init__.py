"""Music-theory helpers for a songwriting workspace.

This library provides pitch-class spelling, chord-symbol transposition
(single symbols and inline ChordPro text), diatonic chord palettes,
chord-to-notes resolution and a bar/measure chord chart parser.

Examples
--------
>>> from songcraft import diatonic_palette, transpose_text, chord_notes

>>> diatonic_palette("C").triads
['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim']

>>> transpose_text("[C]Hello [Am]world", 3, "flat")
'[Eb]Hello [Cm]world'

>>> chord_notes("Cmaj7")
['C', 'E', 'G', 'B']
"""

from songcraft.chord_symbol import (
    is_chord_like,
    last_chord_before,
    normalize_quality,
    parse_chord_symbol,
    transpose_chord_symbol,
    transpose_text,
)
from songcraft.context import EngineContext
from songcraft.models import ChordSymbol, DiatonicPalette
from songcraft.palette import diatonic_palette
from songcraft.pitch_class import (
    UnknownNoteError,
    name_of,
    pitch_class_of,
    preferred_accidental,
)
from songcraft.resolver import (
    ChordNotesResolver,
    IntervalTableResolver,
    PychordResolver,
    chord_notes,
    create_resolver,
)
from songcraft.settings import EditorSettings
from songcraft.song import Song, SongFormatError
from songcraft.voicing import midi_number, voice_with_octaves

__version__ = "0.1.0"

__all__ = [
    "ChordNotesResolver",
    "ChordSymbol",
    "DiatonicPalette",
    "EditorSettings",
    "EngineContext",
    "IntervalTableResolver",
    "PychordResolver",
    "Song",
    "SongFormatError",
    "UnknownNoteError",
    "chord_notes",
    "create_resolver",
    "diatonic_palette",
    "is_chord_like",
    "last_chord_before",
    "midi_number",
    "name_of",
    "normalize_quality",
    "parse_chord_symbol",
    "pitch_class_of",
    "preferred_accidental",
    "transpose_chord_symbol",
    "transpose_text",
    "voice_with_octaves",
]
