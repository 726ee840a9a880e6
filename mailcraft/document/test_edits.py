"""Unit tests for document edits and index remapping."""

import pytest

from mailcraft.document import (
    IndexRemap,
    ParsedComponent,
    ParsedTemplate,
    add_component,
    delete_component,
    duplicate_component,
    move_component,
    parse_template,
    remove_prop,
    serialize_template,
    set_base_prop,
    set_content,
    set_frontmatter,
    set_prop,
)
from mailcraft.schema import Viewport, get_component_schema, resolve_prop


@pytest.fixture
def doc():
    """Four components, indices 0..3."""
    return ParsedTemplate(
        frontmatter={"title": "Edits"},
        components=(
            ParsedComponent("header"),
            ParsedComponent("hero", {"headline": "A"}),
            ParsedComponent("copy", {"body": "B"}),
            ParsedComponent("spacer", {"size": "8px"}),
        ),
    )


def _types(d: ParsedTemplate) -> list[str]:
    return [c.type for c in d.components]


class TestDeleteComponent:
    """Deleting drops the index and shifts later ones down."""

    @pytest.mark.unit
    def test_expanded_remap(self, doc):
        new_doc, remap = delete_component(doc, 1)
        assert _types(new_doc) == ["header", "copy", "spacer"]
        assert remap.apply({1, 3}) == {2}

    @pytest.mark.unit
    def test_selection_of_deleted_is_cleared(self, doc):
        _, remap = delete_component(doc, 2)
        assert remap.map_index(2) is None
        assert remap.map_index(3) == 2
        assert remap.map_index(None) is None

    @pytest.mark.unit
    def test_original_untouched(self, doc):
        delete_component(doc, 0)
        assert len(doc.components) == 4

    @pytest.mark.unit
    def test_out_of_range(self, doc):
        with pytest.raises(IndexError):
            delete_component(doc, 4)


class TestDuplicateComponent:
    """Duplicating inserts a copy after the source."""

    @pytest.mark.unit
    def test_copy_inserted_after(self, doc):
        new_doc, remap = duplicate_component(doc, 1)
        assert _types(new_doc) == ["header", "hero", "hero", "copy", "spacer"]
        assert new_doc.components[2] == doc.components[1]
        assert new_doc.components[2].props is not doc.components[1].props
        assert remap.apply({0, 1, 3}) == {0, 1, 4}

    @pytest.mark.unit
    def test_include_copy(self, doc):
        _, remap = duplicate_component(doc, 1)
        assert remap.apply({1}, include_copy=True) == {1, 2}
        assert remap.apply({0}, include_copy=True) == {0}
        assert remap.inserted == 2

    @pytest.mark.unit
    def test_singleton_cannot_be_duplicated(self):
        doc = ParsedTemplate(components=(ParsedComponent("footer"),))
        with pytest.raises(ValueError, match="Only one footer"):
            duplicate_component(doc, 0)


class TestMoveComponent:
    """Reordering rotates the affected range."""

    @pytest.mark.unit
    def test_move_forward(self, doc):
        new_doc, remap = move_component(doc, 0, 2)
        assert _types(new_doc) == ["hero", "copy", "header", "spacer"]
        assert remap.targets == (2, 0, 1, 3)

    @pytest.mark.unit
    def test_move_backward(self, doc):
        new_doc, remap = move_component(doc, 3, 1)
        assert _types(new_doc) == ["header", "spacer", "hero", "copy"]
        assert remap.targets == (0, 2, 3, 1)

    @pytest.mark.unit
    def test_remap_follows_components(self, doc):
        new_doc, remap = move_component(doc, 1, 3)
        for old, new in enumerate(remap.targets):
            assert new_doc.components[new] == doc.components[old]

    @pytest.mark.unit
    def test_same_position_is_identity(self, doc):
        new_doc, remap = move_component(doc, 2, 2)
        assert new_doc == doc
        assert remap == IndexRemap.identity(4)


class TestAddComponent:
    """Inserting components."""

    @pytest.mark.unit
    def test_append_seeds_defaults(self, doc):
        new_doc, remap = add_component(doc, "image")
        assert new_doc.components[-1].type == "image"
        assert new_doc.components[-1].props["image"] == "[Image URL]"
        assert remap.inserted == 4
        assert remap.apply({0, 3}) == {0, 3}

    @pytest.mark.unit
    def test_insert_shifts_later(self, doc):
        new_doc, remap = add_component(doc, "divider", props={}, index=1)
        assert _types(new_doc)[1] == "divider"
        assert remap.apply({0, 1, 3}) == {0, 2, 4}

    @pytest.mark.unit
    def test_unknown_type_empty_props(self, doc):
        new_doc, _ = add_component(doc, "carousel")
        assert new_doc.components[-1].props == {}

    @pytest.mark.unit
    def test_singleton_footer(self, doc):
        with_footer, _ = add_component(doc, "footer")
        with pytest.raises(ValueError):
            add_component(with_footer, "footer")

    @pytest.mark.unit
    def test_bad_position(self, doc):
        with pytest.raises(IndexError):
            add_component(doc, "copy", index=9)


class TestRemapErrors:
    """Stale indices are programming errors."""

    @pytest.mark.unit
    def test_stale_index_raises(self, doc):
        _, remap = delete_component(doc, 0)
        with pytest.raises(IndexError):
            remap.apply({7})


class TestPropEdits:
    """Non-structural edits."""

    @pytest.mark.unit
    def test_set_and_round_trip(self, doc):
        new_doc = set_prop(doc, 2, "padding", "0 20px")
        assert new_doc.components[2].props["padding"] == "0 20px"
        assert parse_template(serialize_template(new_doc)) == new_doc

    @pytest.mark.unit
    def test_responsive_fallback_cycle(self, doc):
        prop = get_component_schema("copy").get_prop("padding")
        d1 = set_prop(doc, 2, "padding", "desktop-val")
        assert resolve_prop(d1.components[2].props, prop, Viewport.MOBILE) == "desktop-val"

        d2 = set_prop(d1, 2, "m:padding", "mobile-val")
        assert resolve_prop(d2.components[2].props, prop, Viewport.MOBILE) == "mobile-val"
        assert resolve_prop(d2.components[2].props, prop, Viewport.DESKTOP) == "desktop-val"

        d3 = set_prop(d2, 2, "m:padding", "")
        assert "m:padding" not in d3.components[2].props
        assert resolve_prop(d3.components[2].props, prop, Viewport.MOBILE) == "desktop-val"

    @pytest.mark.unit
    def test_remove_prop(self, doc):
        new_doc = remove_prop(doc, 1, "headline")
        assert new_doc.components[1].props == {}
        assert remove_prop(new_doc, 1, "missing") is new_doc

    @pytest.mark.unit
    def test_set_content(self, doc):
        new_doc = set_content(doc, 0, "  Hello  ")
        assert new_doc.components[0].content == "Hello"
        assert set_content(new_doc, 0, "   ").components[0].content is None

    @pytest.mark.unit
    def test_frontmatter_and_base(self, doc):
        new_doc = set_frontmatter(doc, "subject", "Hi: there")
        new_doc = set_base_prop(new_doc, "bg-color", "#fafafa")
        assert new_doc.frontmatter == {"title": "Edits", "subject": "Hi: there"}
        assert new_doc.base_props == {"bg-color": "#fafafa"}
        assert parse_template(serialize_template(new_doc)) == new_doc
        cleared = set_base_prop(set_frontmatter(new_doc, "subject", None), "bg-color", "")
        assert cleared.frontmatter == {"title": "Edits"}
        assert cleared.base_props == {}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["'Spring'", " padded", "trailing ", '"Spring"'])
    def test_frontmatter_value_survives_serialization(self, value):
        edited = set_frontmatter(ParsedTemplate(), "title", value)
        assert parse_template(serialize_template(edited)).frontmatter == {"title": value}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["&quot;", "Q&amp;A", "a & b", "&quot;x\" 'y'"])
    def test_prop_value_with_entities_survives_serialization(self, doc, value):
        edited = set_prop(doc, 2, "body", value)
        assert parse_template(serialize_template(edited)).components[2].props["body"] == value

    @pytest.mark.unit
    def test_set_prop_bad_index(self, doc):
        with pytest.raises(IndexError):
            set_prop(doc, -1, "a", "b")
