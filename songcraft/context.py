"""Engine context for editor controllers.

``EngineContext`` bundles what a songwriting editor needs besides the pure
functions: the chosen notes resolver, the current settings and a draft
store. Controllers receive it explicitly instead of reaching for
module-level state, and its owner controls its lifetime::

    with EngineContext(settings=EditorSettings(key="G")) as ctx:
        palette = ctx.palette()
        notes = ctx.audition_notes("Em7")
"""

from __future__ import annotations

import logging

from songcraft.chart.layout import layout_rows
from songcraft.chart.models import ChartRow, ChartToken
from songcraft.chart.parser import parse_chart
from songcraft.chord_symbol import transpose_text
from songcraft.models import DiatonicPalette
from songcraft.palette import diatonic_palette
from songcraft.pitch_class import preferred_accidental
from songcraft.resolver import ChordNotesResolver, create_resolver
from songcraft.settings import EditorSettings
from songcraft.song import Song
from songcraft.voicing import voice_with_octaves

logger = logging.getLogger(__name__)

DEFAULT_DRAFT_ID = "current"


class EngineContext:
    """Resolver, settings and drafts for one editor session.

    Parameters
    ----------
    resolver : ChordNotesResolver | None
        Resolver used for auditioning chords. Defaults to
        ``create_resolver()``.
    settings : EditorSettings | None
        Initial settings. Defaults to ``EditorSettings()``.
    """

    def __init__(
        self,
        resolver: ChordNotesResolver | None = None,
        settings: EditorSettings | None = None,
    ) -> None:
        self.resolver = resolver if resolver is not None else create_resolver()
        self.settings = settings if settings is not None else EditorSettings()
        self._drafts: dict[str, Song] = {}
        self._active = False

    @property
    def active(self) -> bool:
        """True between ``init()`` and ``dispose()``."""
        return self._active

    def init(self) -> EngineContext:
        """Make the context usable and return it."""
        self._active = True
        logger.debug(f"Engine context ready (resolver={type(self.resolver).__name__}, key={self.settings.key})")
        return self

    def dispose(self) -> None:
        """Drop drafts and close the context. Safe to call twice."""
        if self._active:
            logger.debug(f"Disposing engine context ({len(self._drafts)} drafts)")
        self._drafts.clear()
        self._active = False

    def __enter__(self) -> EngineContext:
        return self.init()

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def _require_active(self) -> None:
        if not self._active:
            msg = "EngineContext is not initialised; call init() first"
            raise RuntimeError(msg)

    def set_key(self, key: str) -> DiatonicPalette:
        """Change the song key and return the regenerated palette."""
        self._require_active()
        self.settings = self.settings.with_key(key)
        return self.palette()

    def palette(self) -> DiatonicPalette:
        """Return the diatonic palette for the current key."""
        self._require_active()
        return diatonic_palette(self.settings.key)

    def transpose(self, text: str, semitones: int) -> str:
        """Transpose ChordPro text, spelled for the current key."""
        self._require_active()
        return transpose_text(text, semitones, preferred_accidental(self.settings.key))

    def parse(self, text: str) -> list[ChartToken]:
        """Parse chart text with the current beats per bar."""
        self._require_active()
        return parse_chart(text, self.settings.beats_per_bar)

    def rows(self, text: str) -> list[ChartRow]:
        """Parse chart text and lay it out with the current settings."""
        return layout_rows(self.parse(text), self.settings.bars_per_line)

    def audition_notes(self, symbol: str, base_octave: int = 3) -> list[str]:
        """Return voiced notes for a palette click.

        Symbols that are not chords (e.g., "bVII") fall back to the tonic
        chord of the current key.
        """
        self._require_active()
        notes = self.resolver.resolve(symbol)
        if not notes:
            logger.debug(f"No notes for {symbol!r}; auditioning tonic {self.settings.key}")
            notes = self.resolver.resolve(self.settings.key) or []
        return voice_with_octaves(notes, base_octave)

    def save_draft(self, song: Song, draft_id: str = DEFAULT_DRAFT_ID) -> None:
        """Keep a local draft of a song."""
        self._require_active()
        self._drafts[draft_id] = song

    def load_draft(self, draft_id: str = DEFAULT_DRAFT_ID) -> Song | None:
        """Return a saved draft, or None."""
        self._require_active()
        return self._drafts.get(draft_id)
