"""Unit tests for the editor session."""

import pytest

from mailcraft.document import parse_template
from mailcraft.preview import PreviewDocument, marker_element
from mailcraft.schema import SectionKind, Viewport
from mailcraft.session import EditorSession

SOURCE = """---
title: Test
---

<x-base>

  <x-core.hero headline="Hi" />

  <x-core.copy body="Hello" padding="0 48px" m:padding="0 16px" />

  <x-core.spacer size="24px" />

  <x-core.divider />

</x-base>
"""


@pytest.fixture
def session() -> EditorSession:
    return EditorSession(SOURCE, recorder_window=10)


class TestSourceSync:
    """Raw and visual edits keep source and document in step."""

    @pytest.mark.unit
    def test_visual_edit_reserializes(self, session):
        session.set_prop(0, "headline", "Spring Event")
        assert 'headline="Spring Event"' in session.source
        assert parse_template(session.source) == session.document

    @pytest.mark.unit
    def test_raw_edit_parses(self, session):
        assert session.set_source("<x-base><x-core.spacer /></x-base>")
        assert [c.type for c in session.document.components] == ["spacer"]
        assert session.parse_error is None

    @pytest.mark.unit
    def test_invalid_raw_edit_keeps_last_good_document(self, session):
        before = session.document
        assert not session.set_source("<x-base><x-core.hero>")
        assert session.document is before
        assert session.parse_error is not None
        assert session.source == "<x-base><x-core.hero>"

    @pytest.mark.unit
    def test_starter_by_default(self):
        session = EditorSession()
        assert session.document.frontmatter["title"] == "Untitled Template"
        assert session.history.current == session.source


class TestIndexState:
    """Structural edits remap expanded, hidden and selected."""

    @pytest.mark.unit
    def test_delete_remaps(self, session):
        session.expanded = {1, 3}
        session.hidden = {3}
        session.select(3)
        session.delete_component(2)
        assert session.expanded == {1, 2}
        assert session.hidden == {2}
        assert session.selected == 2

    @pytest.mark.unit
    def test_delete_selected_clears_selection(self, session):
        session.select(1)
        session.delete_component(1)
        assert session.selected is None

    @pytest.mark.unit
    def test_duplicate_opens_copy(self, session):
        session.expanded = {2}
        session.hidden = {0}
        copy = session.duplicate_component(0)
        assert copy == 1
        assert session.expanded == {1, 3}
        assert session.hidden == {0}
        assert session.document.components[1] == session.document.components[0]

    @pytest.mark.unit
    def test_add_opens_new_component(self, session):
        session.expanded = {0}
        index = session.add_component("spacer", index=0)
        assert index == 0
        assert session.expanded == {0, 1}

    @pytest.mark.unit
    def test_move_remaps(self, session):
        session.hidden = {0}
        session.select(3)
        session.move_component(0, 3)
        assert [c.type for c in session.document.components] == ["copy", "spacer", "divider", "hero"]
        assert session.hidden == {3}
        assert session.selected == 2

    @pytest.mark.unit
    def test_singleton_rejected_without_changes(self, session):
        session.add_component("footer")
        before = session.source
        with pytest.raises(ValueError):
            session.add_component("footer")
        assert session.source == before

    @pytest.mark.unit
    def test_toggles(self, session):
        assert session.toggle_hidden(1)
        assert not session.toggle_hidden(1)
        assert session.toggle_expanded(2)
        with pytest.raises(IndexError):
            session.toggle_hidden(9)

    @pytest.mark.unit
    def test_raw_edit_prunes_state(self, session):
        session.expanded = {0, 3}
        session.select(3)
        session.set_source("<x-base><x-core.spacer /></x-base>")
        assert session.expanded == {0}
        assert session.selected is None


class TestUndoRedo:
    """History integration."""

    @pytest.mark.unit
    def test_prop_burst_undoes_as_one(self, session):
        session.set_prop(0, "headline", "A")
        session.set_prop(0, "headline", "AB")
        assert session.undo()
        assert session.document.components[0].props["headline"] == "Hi"
        assert session.redo()
        assert session.document.components[0].props["headline"] == "AB"

    @pytest.mark.unit
    def test_structural_edits_are_separate_steps(self, session):
        session.delete_component(3)
        session.delete_component(2)
        session.undo()
        assert len(session.document.components) == 3
        session.undo()
        assert len(session.document.components) == 4
        assert not session.undo()

    @pytest.mark.unit
    def test_undo_prunes_index_state(self, session):
        index = session.add_component("spacer")
        session.select(index)
        session.undo()
        assert session.selected is None
        assert index not in session.expanded


class TestQueries:
    """Resolution, forms and projection."""

    @pytest.mark.unit
    def test_resolve_by_viewport(self, session):
        assert session.resolve(1, "padding") == "0 48px"
        session.set_viewport(Viewport.MOBILE)
        assert session.resolve(1, "padding") == "0 16px"
        assert session.resolve(1, "body-color") == "#4b5563"

    @pytest.mark.unit
    def test_resolve_unknown_prop(self, session):
        assert session.resolve(2, "made-up") is None

    @pytest.mark.unit
    def test_form(self, session):
        sections = session.form(1)
        assert sections
        assert all(s.kind != SectionKind.RAW for s in sections)

    @pytest.mark.unit
    def test_preview_markup_honors_hidden(self, session):
        session.toggle_hidden(0)
        markup = session.preview_markup()
        assert "x-core.hero" not in markup
        assert marker_element(1) in markup
        assert marker_element(0) not in markup


class TestLiveStyle:
    """Document first, then the preview DOM."""

    @pytest.mark.unit
    def test_patches_after_writing_prop(self, session):
        preview = PreviewDocument.parse('<table><tr data-tpl="1"><td style="color: #000000">x</td></tr></table>')
        assert session.live_style(1, "text-color", "#ffffff", preview) == 1
        assert session.document.components[1].props["text-color"] == "#ffffff"
        assert 'style="color: #ffffff"' in preview.to_html()

    @pytest.mark.unit
    def test_mobile_override_not_patched(self, session):
        preview = PreviewDocument.parse('<table><tr data-tpl="1"><td style="padding: 0 48px">x</td></tr></table>')
        assert session.live_style(1, "m:padding", "0 8px", preview) == 0
        assert session.document.components[1].props["m:padding"] == "0 8px"
        assert "0 48px" in preview.to_html()

    @pytest.mark.unit
    def test_padding_normalized(self, session):
        preview = PreviewDocument.parse('<table><tr data-tpl="1"><td style="padding: 1px">x</td></tr></table>')
        session.live_style(1, "padding", "10px 10px 10px 10px", preview)
        assert 'style="padding: 10px"' in preview.to_html()

    @pytest.mark.unit
    def test_base_style(self, session):
        preview = PreviewDocument.parse('<table class="email-container"><tr><td>x</td></tr></table>')
        assert session.live_base_style("content-bg", "#fafafa", preview) == 1
        assert session.document.base_props["content-bg"] == "#fafafa"
