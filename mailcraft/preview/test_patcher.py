"""Unit tests for the preview DOM and live style patching."""

import pytest

from mailcraft.preview import (
    PROP_CSS_MAP,
    PreviewDocument,
    css_property_for,
    css_value_for,
    patch_base_style,
    patch_live_style,
    project_for_preview,
    recover_indices,
)
from mailcraft.schema import list_component_schemas


@pytest.fixture
def preview(three_component_doc, compiler):
    return PreviewDocument.parse(recover_indices(compiler(project_for_preview(three_component_doc))))


class TestPreviewDocument:
    """Element tree parsing and serialization."""

    @pytest.mark.unit
    def test_unedited_round_trip(self):
        html = '<!DOCTYPE html><html><body><!-- c --><p class="a">x &amp; y<br></p></body></html>'
        assert PreviewDocument.parse(html).to_html() == html

    @pytest.mark.unit
    def test_rows_by_index(self, preview):
        rows = preview.rows(1)
        assert [r.classes for r in rows] == [[], ["inner"]]
        assert preview.rows(7) == []

    @pytest.mark.unit
    def test_style_helpers(self):
        el = PreviewDocument.parse('<td style="color: red; Padding:4px">x</td>').find(lambda e: e.tag == "td")
        assert el.get_style("padding") == "4px"
        assert el.has_style("color")
        assert not el.has_style("margin")
        el.set_style("color", "blue")
        el.set_style("margin", "0")
        assert el.get("style") == "color: blue; padding: 4px; margin: 0"

    @pytest.mark.unit
    def test_semicolon_inside_url_kept(self):
        style = "background-image:url(data:image/png;base64,AAAA); color:red"
        el = PreviewDocument.parse(f'<td style="{style}">x</td>').find(lambda e: e.tag == "td")
        assert el.get_style("background-image") == "url(data:image/png;base64,AAAA)"
        el.set_style("color", "blue")
        assert el.get("style") == "background-image: url(data:image/png;base64,AAAA); color: blue"


class TestPatchLiveStyle:
    """Patching one component's rows."""

    @pytest.mark.unit
    def test_overwrites_existing_declarations(self, preview):
        assert patch_live_style(preview, 1, "color", "#ff0000") == 1
        inner = preview.find_all(lambda el: el.tag == "td" and el.has_style("color"))
        assert [el.get_style("color") for el in inner] == ["#111111", "#ff0000", "#111111"]

    @pytest.mark.unit
    def test_other_components_untouched(self, preview):
        patch_live_style(preview, 0, "background-color", "#000000")
        values = [
            el.get_style("background-color")
            for el in preview.find_all(lambda el: el.tag == "td" and el.has_style("background-color"))
        ]
        assert values == ["#000000", "#fafafa", "#fafafa"]

    @pytest.mark.unit
    def test_fallback_to_first_cell(self, preview):
        assert patch_live_style(preview, 2, "font-size", "18px") == 1
        row = preview.rows(2)[0]
        assert row.element_children()[0].get_style("font-size") == "18px"

    @pytest.mark.unit
    def test_idempotent(self, preview):
        patch_live_style(preview, 1, "color", "#ff0000")
        first = preview.to_html()
        patch_live_style(preview, 1, "color", "#ff0000")
        assert preview.to_html() == first

    @pytest.mark.unit
    def test_no_rows(self, preview):
        before = preview.to_html()
        assert patch_live_style(preview, 9, "color", "#ff0000") == 0
        assert preview.to_html() == before


class TestPatchBaseStyle:
    """Patching wrapper elements."""

    @pytest.mark.unit
    def test_body_background(self, preview):
        assert patch_base_style(preview, "body-bg", "#eeeeee") == 2
        assert preview.body.get_style("background-color") == "#eeeeee"
        outer = preview.find(lambda el: el.tag == "table" and el.get("role") == "presentation")
        assert outer.get_style("background-color") == "#eeeeee"
        assert outer.get_style("width") == "100%"

    @pytest.mark.unit
    def test_content_background(self, preview):
        assert patch_base_style(preview, "content-bg", "#f0f0f0") == 1
        container = preview.find(lambda el: "email-container" in el.classes)
        assert container.get_style("background-color") == "#f0f0f0"

    @pytest.mark.unit
    def test_unknown_key(self, preview):
        assert patch_base_style(preview, "font-family", "Arial") == 0


class TestCssMapping:
    """Prop key to CSS property mapping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("text-color", "color"),
            ("bg-color", "background-color"),
            ("padding", "padding"),
            ("button-radius", "border-radius"),
            ("m:padding", None),
            ("headline", None),
        ],
    )
    def test_css_property_for(self, key, expected):
        assert css_property_for(key) == expected

    @pytest.mark.unit
    def test_every_mapped_key_is_a_catalog_prop(self):
        catalog_keys = {p.key for schema in list_component_schemas() for p in schema.props}
        assert sorted(set(PROP_CSS_MAP) - catalog_keys) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("key", ["card-background", "card-padding", "cta-bg-color"])
    def test_overlay_card_props_patchable(self, key):
        assert css_property_for(key) is not None

    @pytest.mark.unit
    def test_css_value_for_font_size(self):
        assert css_value_for("font-size", "16") == "16px"
        assert css_value_for("color", "#123456") == "#123456"
