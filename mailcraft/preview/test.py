"""Unit tests for preview projection and index recovery."""

import pytest

from mailcraft.document import parse_template
from mailcraft.preview import (
    MARKER_ATTR,
    has_markers,
    marker_element,
    project_for_preview,
    recover_indices,
    tagged_indices,
)


class TestProjectForPreview:
    """Marker insertion."""

    @pytest.mark.unit
    def test_marker_before_each_component(self, three_component_doc):
        markup = project_for_preview(three_component_doc)
        lines = markup.splitlines()
        for index, tag in enumerate(["x-core.header", "x-core.copy", "x-core.spacer"]):
            pos = next(i for i, line in enumerate(lines) if tag in line)
            assert lines[pos - 1].strip() == marker_element(index)
        assert markup.count(MARKER_ATTR) == 4

    @pytest.mark.unit
    def test_end_marker_after_last(self, three_component_doc):
        markup = project_for_preview(three_component_doc)
        assert markup.index(marker_element("end")) > markup.index("x-core.spacer")
        assert markup.rstrip().endswith("</x-base>")

    @pytest.mark.unit
    def test_hidden_components_omitted(self, three_component_doc):
        markup = project_for_preview(three_component_doc, hidden={1})
        assert "x-core.copy" not in markup
        assert marker_element(1) not in markup
        assert marker_element(2) in markup

    @pytest.mark.unit
    def test_projection_parses_back(self, three_component_doc):
        # Markers are skipped by the parser
        assert parse_template(project_for_preview(three_component_doc)) == three_component_doc

    @pytest.mark.unit
    def test_empty_document_has_end_marker(self):
        markup = project_for_preview(parse_template("<x-base></x-base>"))
        assert marker_element("end") in markup


class TestRecoverIndices:
    """Tagging compiled rows."""

    @pytest.mark.unit
    def test_marker_round_trip(self, three_component_doc, compiler):
        html = recover_indices(compiler(project_for_preview(three_component_doc)))
        assert tagged_indices(html) == {0, 1, 2}
        assert not has_markers(html)
        assert "display:none" not in html

    @pytest.mark.unit
    def test_rows_attributed_within_span(self, three_component_doc, compiler):
        html = recover_indices(compiler(project_for_preview(three_component_doc)))
        copy_start = html.index('data-tpl="1"')
        assert html.index(">copy<") > copy_start
        assert html.index(">copy<") < html.index('data-tpl="2"')
        assert '<tr data-tpl="1" class="inner">' in html

    @pytest.mark.unit
    def test_rows_outside_spans_untouched(self, three_component_doc, compiler):
        html = recover_indices(compiler(project_for_preview(three_component_doc)))
        assert html.lstrip().startswith('<html><body style="margin: 0"><table role="presentation"')
        assert '<tr><td><table class="email-container"' in html

    @pytest.mark.unit
    def test_hidden_index_absent(self, three_component_doc, compiler):
        html = recover_indices(compiler(project_for_preview(three_component_doc, hidden={0})))
        assert tagged_indices(html) == {1, 2}

    @pytest.mark.unit
    def test_no_markers_returns_input(self):
        html = "<table><tr><td>x</td></tr></table>"
        assert recover_indices(html) is html

    @pytest.mark.unit
    def test_tolerates_attribute_order_and_whitespace(self):
        html = (
            "<div style='display: none' data-tpl='4'>\n</div>"
            "<table><tr><td>a</td></tr></table>"
            '<DIV data-tpl="end" class="x"></DIV>'
            "<table><tr><td>after</td></tr></table>"
        )
        result = recover_indices(html)
        assert result == (
            '<table><tr data-tpl="4"><td>a</td></tr></table>'
            "<table><tr><td>after</td></tr></table>"
        )

    @pytest.mark.unit
    def test_does_not_touch_similar_tags(self):
        html = marker_element(0) + "<track src='a'><tr>" + marker_element("end")
        assert recover_indices(html) == "<track src='a'><tr data-tpl=\"0\">"
