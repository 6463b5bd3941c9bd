"""Tests for the engine context."""

import pytest

from songcraft import EditorSettings, EngineContext, IntervalTableResolver, PychordResolver, Song
from songcraft.chart import SectionToken


@pytest.fixture
def ctx():
    context = EngineContext(resolver=IntervalTableResolver(), settings=EditorSettings(key="G"))
    context.init()
    yield context
    context.dispose()


class TestLifecycle:
    def test_requires_init(self) -> None:
        context = EngineContext(resolver=IntervalTableResolver())
        with pytest.raises(RuntimeError, match="init"):
            context.palette()

    def test_context_manager(self) -> None:
        with EngineContext(resolver=IntervalTableResolver()) as context:
            assert context.active
            context.save_draft(Song(title="Draft"))
        assert not context.active
        with pytest.raises(RuntimeError):
            context.load_draft()

    def test_dispose_clears_drafts(self) -> None:
        context = EngineContext(resolver=IntervalTableResolver()).init()
        context.save_draft(Song(title="Draft"))
        context.dispose()
        context.dispose()
        context.init()
        assert context.load_draft() is None

    def test_default_resolver_selected_at_construction(self) -> None:
        context = EngineContext()
        assert context.resolver is not None
        assert context.settings == EditorSettings()


class TestOperations:
    def test_palette_follows_key(self, ctx) -> None:
        assert ctx.palette().triads[0] == "G"
        palette = ctx.set_key("F")
        assert palette.triads == ["F", "Gm", "Am", "Bb", "C", "Dm", "Edim"]
        assert ctx.settings.key == "F"

    def test_transpose_uses_key_spelling(self, ctx) -> None:
        ctx.set_key("Eb")
        assert ctx.transpose("[C]Hi", 1) == "[Db]Hi"

    def test_parse_uses_beats_per_bar(self) -> None:
        settings = EditorSettings(beats_per_bar=3, bars_per_line=1)
        with EngineContext(resolver=IntervalTableResolver(), settings=settings) as context:
            tokens = context.parse("[Waltz]\nC G")
            assert tokens[0] == SectionToken("Waltz")
            assert [c.beats for c in tokens[1].chords] == [1, 2]
            assert len(context.rows("C | G")) == 2

    def test_audition_notes(self, ctx) -> None:
        assert ctx.audition_notes("Em7") == ["E3", "G3", "B3", "D4"]

    def test_audition_placeholder_falls_back_to_tonic(self, ctx) -> None:
        assert ctx.audition_notes("bVII") == ["G3", "B3", "D3", "A4"]

    def test_drafts(self, ctx) -> None:
        song = Song(title="Idea", key="G")
        ctx.save_draft(song)
        ctx.save_draft(Song(title="Other"), draft_id="other")
        assert ctx.load_draft() == song
        assert ctx.load_draft("other").title == "Other"
        assert ctx.load_draft("missing") is None


class TestAuditionWithPychord:
    """Test auditioning through the pychord resolver."""

    @pytest.fixture
    def library_ctx(self):
        pytest.importorskip("pychord")
        with EngineContext(resolver=PychordResolver()) as context:
            yield context

    def test_double_sharp_spellings(self, library_ctx) -> None:
        assert library_ctx.audition_notes("E#") == ["F3", "A3", "C3", "G4"]

    def test_slash_chord_ninth_above_root(self, library_ctx) -> None:
        assert library_ctx.audition_notes("C/E") == ["C3", "E3", "G3", "D4"]
