"""Unit tests for the Schema module."""

import pytest

from mailcraft.schema import (
    COMPONENT_REGISTRY,
    ComponentSchema,
    PropDefinition,
    PropKeyKind,
    PropType,
    SectionKind,
    Viewport,
    active_item_count,
    active_slots,
    build_form,
    classify_prop_key,
    default_props,
    export_schema_catalog,
    get_component_schema,
    hidden_slots,
    is_prop_visible,
    list_component_schemas,
    mobile_key,
    register_schema,
    resolve_prop,
    resolve_props,
    unknown_prop_keys,
)


class TestComponentRegistry:
    """Tests for the built-in catalog."""

    @pytest.mark.unit
    def test_builtin_types_registered(self):
        for name in (
            "header",
            "hero",
            "spacer",
            "copy",
            "cta",
            "vehicle-card",
            "features",
            "image",
            "image-overlay",
            "image-card-overlay",
            "divider",
            "countdown-stat",
            "testimonial",
            "split",
            "footer",
        ):
            assert name in COMPONENT_REGISTRY, f"Missing schema for {name}"

    @pytest.mark.unit
    def test_unknown_type_is_none(self):
        assert get_component_schema("carousel") is None

    @pytest.mark.unit
    def test_list_preserves_catalog_order(self):
        names = [s.name for s in list_component_schemas()]
        assert names[0] == "header"
        assert names[-1] == "footer"

    @pytest.mark.unit
    def test_prop_keys_unique_per_schema(self):
        for schema in list_component_schemas():
            keys = [p.key for p in schema.props]
            assert len(keys) == len(set(keys)), f"Duplicate prop key in {schema.name}"

    @pytest.mark.unit
    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_schema(get_component_schema("hero"))

    @pytest.mark.unit
    def test_register_new_schema(self, monkeypatch):
        monkeypatch.setattr("mailcraft.schema.lib.COMPONENT_REGISTRY", dict(COMPONENT_REGISTRY))
        schema = ComponentSchema(
            name="banner",
            label="Banner",
            icon="FlagIcon",
            props=(PropDefinition("text", "Text", PropType.TEXT),),
        )
        register_schema(schema)
        assert get_component_schema("banner") is schema

    @pytest.mark.unit
    def test_button_defaults_applied(self):
        hero = get_component_schema("hero")
        assert hero.get_prop("primary-button-bg-color").default == "#ffffff"
        assert hero.get_prop("secondary-button-border-width").default == "1px"
        cta = get_component_schema("cta")
        assert cta.get_prop("button-border-width").default == "0px"

    @pytest.mark.unit
    def test_split_buttons_and_tracking(self):
        split = get_component_schema("split")
        assert split.get_prop("secondary-button-text").default == "Learn More"
        assert split.get_prop("secondary-utm-source").conditional_on == "secondary-button-text"
        assert [o.value for o in split.get_prop("image-side").options] == ["left", "right"]

    @pytest.mark.unit
    def test_overlay_schemas(self):
        overlay = get_component_schema("image-overlay")
        assert overlay.get_prop("image").required
        assert [o.value for o in overlay.get_prop("overlay").options] == ["light", "medium", "dark", "heavy"]
        card = get_component_schema("image-card-overlay")
        assert card.get_prop("card-padding").responsive
        assert card.get_prop("cta-bg-color") is not None

    @pytest.mark.unit
    def test_vehicle_card_defaults(self):
        card = get_component_schema("vehicle-card")
        assert card.get_prop("vehicle-make").default == "{{contact.vehicle_make}}"
        assert card.get_prop("border-width").default == "1px"


class TestResolveProp:
    """Responsive fallback resolution."""

    @pytest.fixture
    def padding(self):
        return get_component_schema("copy").get_prop("padding")

    @pytest.mark.unit
    def test_mobile_override_wins_on_mobile(self, padding):
        props = {"padding": "0 48px", "m:padding": "0 16px"}
        assert resolve_prop(props, padding, Viewport.MOBILE) == "0 16px"
        assert resolve_prop(props, padding, Viewport.DESKTOP) == "0 48px"

    @pytest.mark.unit
    def test_empty_override_falls_back(self, padding):
        props = {"padding": "0 20px", "m:padding": ""}
        assert resolve_prop(props, padding, Viewport.MOBILE) == "0 20px"

    @pytest.mark.unit
    def test_schema_default_when_unset(self, padding):
        assert resolve_prop({}, padding, Viewport.MOBILE) == "0 48px"

    @pytest.mark.unit
    def test_none_without_default(self):
        prop = get_component_schema("image").get_prop("alt")
        assert resolve_prop({}, prop) is None

    @pytest.mark.unit
    def test_non_responsive_ignores_override(self):
        prop = get_component_schema("copy").get_prop("body-color")
        props = {"body-color": "#000000", "m:body-color": "#ff0000"}
        assert resolve_prop(props, prop, Viewport.MOBILE) == "#000000"

    @pytest.mark.unit
    def test_resolve_props_unknown_type(self):
        assert resolve_props("carousel", {"a": "1"}) == {"a": "1"}

    @pytest.mark.unit
    def test_resolve_props_known_type(self):
        resolved = resolve_props("spacer", {"m:size": "24px"}, Viewport.MOBILE)
        assert resolved == {"size": "24px", "bg-color": "#ffffff"}

    @pytest.mark.unit
    def test_mobile_key(self):
        assert mobile_key("padding") == "m:padding"


class TestRepeatableGroups:
    """Numbered and slot-style groups."""

    @pytest.fixture
    def feature_group(self):
        return get_component_schema("features").get_group("feature")

    @pytest.fixture
    def social_group(self):
        return get_component_schema("footer").get_group("social")

    @pytest.mark.unit
    def test_numbered_detection(self, feature_group, social_group):
        assert feature_group.is_numbered
        assert not social_group.is_numbered

    @pytest.mark.unit
    def test_item_keys(self, feature_group):
        assert feature_group.item_keys(2) == (
            "feature2",
            "feature2-desc",
            "feature2-icon",
            "feature2-image",
        )

    @pytest.mark.unit
    def test_active_count_is_highest_filled(self, feature_group):
        assert active_item_count(feature_group, {"feature3-desc": "x"}) == 3

    @pytest.mark.unit
    def test_active_count_floor_is_one(self, feature_group):
        assert active_item_count(feature_group, {}) == 1
        assert active_item_count(feature_group, {"feature1": ""}) == 1

    @pytest.mark.unit
    def test_slots(self, social_group):
        props = {"facebook-url": "https://fb.example", "x-url": ""}
        assert active_slots(social_group, props) == ["facebook-url"]
        assert "x-url" in hidden_slots(social_group, props)
        assert "facebook-url" not in hidden_slots(social_group, props)


class TestVisibility:
    """conditional_on gating."""

    @pytest.mark.unit
    def test_toggle_controller(self):
        cta = get_component_schema("cta")
        phone_text = cta.get_prop("phone-text")
        assert is_prop_visible(cta, phone_text, {})
        assert is_prop_visible(cta, phone_text, {"show-phone": "true"})
        assert not is_prop_visible(cta, phone_text, {"show-phone": "false"})

    @pytest.mark.unit
    def test_text_controller_requires_non_blank(self):
        hero = get_component_schema("hero")
        prop = hero.get_prop("secondary-utm-source")
        # Controller falls back to its default button text.
        assert is_prop_visible(hero, prop, {})
        assert not is_prop_visible(hero, prop, {"secondary-button-text": "   "})

    @pytest.mark.unit
    def test_unconditional_prop(self):
        copy = get_component_schema("copy")
        assert is_prop_visible(copy, copy.get_prop("body"), {})


class TestClassification:
    """Stored key classification."""

    @pytest.mark.unit
    def test_kinds(self):
        features = get_component_schema("features")
        assert classify_prop_key(features, "padding") == PropKeyKind.SCHEMA
        assert classify_prop_key(features, "feature2-desc") == PropKeyKind.GROUP
        assert classify_prop_key(features, "m:padding") == PropKeyKind.MOBILE
        assert classify_prop_key(features, "m:text-color") == PropKeyKind.UNKNOWN
        assert classify_prop_key(features, "data-legacy") == PropKeyKind.UNKNOWN

    @pytest.mark.unit
    def test_unknown_keys_in_order(self):
        keys = ["body", "zeta", "m:padding", "alpha"]
        assert unknown_prop_keys("copy", keys) == ["zeta", "alpha"]

    @pytest.mark.unit
    def test_unknown_type_all_unknown(self):
        assert unknown_prop_keys("carousel", ["a"]) == ["a"]


class TestDefaultProps:
    """Seed props for new components."""

    @pytest.mark.unit
    def test_required_with_default(self):
        assert default_props(get_component_schema("copy"))["body"].startswith("Thank you")

    @pytest.mark.unit
    def test_required_without_default_gets_label(self):
        props = default_props(get_component_schema("image"))
        assert props["image"] == "[Image URL]"
        assert props["width"] == "600px"
        assert "alt" not in props

    @pytest.mark.unit
    def test_defaults_seeded_in_schema_order(self):
        assert default_props(get_component_schema("spacer")) == {
            "size": "48px",
            "bg-color": "#ffffff",
        }


class TestBuildForm:
    """Form model generation."""

    @pytest.mark.unit
    def test_unknown_type_raw_section(self):
        sections = build_form("carousel", {"a": "1", "b": "2"})
        assert len(sections) == 1
        assert sections[0].kind == SectionKind.RAW
        assert [f.key for f in sections[0].fields()] == ["a", "b"]

    @pytest.mark.unit
    def test_half_props_share_rows(self):
        sections = build_form("copy", {})
        text = sections[0]
        assert text.title == "text"
        pairs = [tuple(f.key for f in row) for row in text.rows]
        assert ("greeting-size", "greeting-color") in pairs
        assert ("greeting",) in pairs

    @pytest.mark.unit
    def test_mobile_viewport_writes_override_keys(self):
        sections = build_form("spacer", {"size": "48px"}, Viewport.MOBILE)
        keys = [f.key for s in sections for f in s.fields()]
        assert "m:size" in keys
        assert "bg-color" in keys

    @pytest.mark.unit
    def test_numbered_group_section(self):
        sections = build_form("features", {"feature2": "Parts"})
        groups = [s for s in sections if s.kind == SectionKind.GROUP]
        assert len(groups) == 1
        assert len(groups[0].items) == 2

    @pytest.mark.unit
    def test_slot_group_section(self):
        sections = build_form("footer", {"facebook-url": "https://fb.example"})
        social = next(s for s in sections if s.kind == SectionKind.GROUP)
        assert [f.key for f in social.fields()] == ["facebook-url"]
        assert "instagram-url" in social.addable

    @pytest.mark.unit
    def test_hidden_conditional_props_omitted(self):
        sections = build_form("cta", {"show-phone": "false"})
        keys = [f.key for s in sections for f in s.fields()]
        assert "show-phone" in keys
        assert "phone-text" not in keys


class TestExport:
    """Catalog export."""

    @pytest.mark.unit
    def test_export_shape(self):
        catalog = export_schema_catalog()
        names = [c["name"] for c in catalog["components"]]
        assert "features" in names
        features = next(c for c in catalog["components"] if c["name"] == "features")
        assert features["repeatableGroups"][0]["maxItems"] == 4
        assert "url" in catalog["propTypes"]
