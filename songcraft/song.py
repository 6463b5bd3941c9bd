"""Song documents and their JSON export format.

A song is what the editor saves: a title, key, tempo and the ChordPro
body. Exports use the ``.songcraft.json`` format::

    {
      "title": "Untitled",
      "key": "C",
      "bpm": 90,
      "body_chordpro": "[C]Hello [G]world"
    }
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from typing import Any

from songcraft.chart.timing import DEFAULT_BPM
from songcraft.chord_symbol import transpose_text
from songcraft.pitch_class import key_name_of, note_to_pc, preferred_accidental, transpose_pitch_class

EXPORT_SUFFIX = ".songcraft.json"


class SongFormatError(ValueError):
    """Raised when a song export cannot be read."""


@dataclass(frozen=True)
class Song:
    """A song as edited in the workspace.

    Parameters
    ----------
    title : str
        Song title.
    key : str
        Key signature.
    bpm : int
        Tempo in beats per minute.
    body_chordpro : str
        Lyrics with inline ``[chord]`` annotations.
    """

    title: str = "Untitled"
    key: str = "C"
    bpm: int = DEFAULT_BPM
    body_chordpro: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the export payload."""
        return asdict(self)

    def to_json(self) -> str:
        """Serialize to the export format."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Song:
        """Build a song from an export payload; missing fields use defaults."""
        defaults = cls()
        try:
            bpm = int(data.get("bpm") or defaults.bpm)
        except (TypeError, ValueError) as e:
            msg = f"Invalid bpm: {data.get('bpm')!r}"
            raise SongFormatError(msg) from e
        return cls(
            title=data.get("title") or defaults.title,
            key=data.get("key") or defaults.key,
            bpm=bpm,
            body_chordpro=data.get("body_chordpro") or defaults.body_chordpro,
        )

    @classmethod
    def from_json(cls, text: str) -> Song:
        """Parse an export file.

        Raises
        ------
        SongFormatError
            If the text is not JSON or not a JSON object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON file: {e}"
            raise SongFormatError(msg) from e
        if not isinstance(data, dict):
            msg = f"Expected a JSON object, got {type(data).__name__}"
            raise SongFormatError(msg)
        return cls.from_dict(data)

    def export_filename(self) -> str:
        """Return the download name for this song."""
        return f"{self.title or 'song'}{EXPORT_SUFFIX}"

    def transposed(self, semitones: int) -> Song:
        """Return the song moved by ``semitones``, key included.

        Chords are spelled with the accidentals of the new key.

        Raises
        ------
        UnknownNoteError
            If the song's key is not a note name.
        """
        new_key = key_name_of(transpose_pitch_class(note_to_pc(self.key), semitones))
        preference = preferred_accidental(new_key)
        return replace(
            self,
            key=new_key,
            body_chordpro=transpose_text(self.body_chordpro, semitones, preference),
        )
