"""Unit tests for the value codecs."""

import pytest

from mailcraft.codec import (
    BoxSides,
    CornerRadii,
    UnitValue,
    ensure_unit,
    normalize_padding,
    normalize_radius,
    parse_padding,
    parse_radius,
    parse_unit,
    serialize_padding,
    serialize_radius,
    serialize_unit,
    strip_unit,
)


def _effective(sides: BoxSides) -> tuple[str, ...]:
    """Per-side values after unit normalization."""
    return tuple(
        ensure_unit(v) or "0px" for v in (sides.top, sides.right, sides.bottom, sides.left)
    )


class TestEnsureUnit:
    """Tests for single-dimension normalization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("50", "50px"),
            ("0", "0px"),
            ("50%", "50%"),
            ("", ""),
            ("12px", "12px"),
            ("12PX", "12px"),
            ("1.5", "1.5px"),
            (" 8 ", "8px"),
            ("auto", "auto"),
            ("1.5em", "1.5em"),
            ("px", ""),
        ],
    )
    def test_normalization(self, raw, expected):
        assert ensure_unit(raw) == expected


class TestStripUnit:
    """Tests for display-only unit stripping."""

    @pytest.mark.unit
    def test_strips_px(self):
        assert strip_unit("24px") == "24"
        assert strip_unit("24PX") == "24"

    @pytest.mark.unit
    def test_leaves_other_units(self):
        assert strip_unit("50%") == "50%"
        assert strip_unit("") == ""


class TestUnitCodec:
    """Tests for number/unit splitting."""

    @pytest.mark.unit
    def test_parse_with_unit(self):
        assert parse_unit("24px") == UnitValue("24", "px")
        assert parse_unit("1.5em") == UnitValue("1.5", "em")
        assert parse_unit("50%") == UnitValue("50", "%")

    @pytest.mark.unit
    def test_parse_non_numeric_passes_through(self):
        assert parse_unit("auto") == UnitValue("auto", "")

    @pytest.mark.unit
    def test_serialize_bare_number_gets_px(self):
        assert serialize_unit(UnitValue("16")) == "16px"
        assert serialize_unit(UnitValue("16", "em")) == "16em"
        assert serialize_unit(UnitValue("")) == ""


class TestParsePadding:
    """Tests for shorthand expansion."""

    @pytest.mark.unit
    def test_one_token(self):
        assert parse_padding("10px") == BoxSides("10px", "10px", "10px", "10px")

    @pytest.mark.unit
    def test_two_tokens(self):
        assert parse_padding("10px 20px") == BoxSides("10px", "20px", "10px", "20px")

    @pytest.mark.unit
    def test_three_tokens(self):
        assert parse_padding("1px 2px 3px") == BoxSides("1px", "2px", "3px", "2px")

    @pytest.mark.unit
    def test_four_tokens(self):
        assert parse_padding("1px 2px 3px 4px") == BoxSides("1px", "2px", "3px", "4px")

    @pytest.mark.unit
    def test_empty(self):
        assert parse_padding("") == BoxSides()
        assert parse_padding("").is_empty()

    @pytest.mark.unit
    def test_extra_whitespace(self):
        assert parse_padding("  10px   20px ") == BoxSides("10px", "20px", "10px", "20px")


class TestSerializePadding:
    """Tests for shortest-shorthand collapsing."""

    @pytest.mark.unit
    def test_all_equal(self):
        assert serialize_padding(BoxSides("10px", "10px", "10px", "10px")) == "10px"

    @pytest.mark.unit
    def test_vertical_horizontal_pairs(self):
        assert serialize_padding(BoxSides("10px", "20px", "10px", "20px")) == "10px 20px"

    @pytest.mark.unit
    def test_left_right_only(self):
        assert serialize_padding(BoxSides("1px", "2px", "3px", "2px")) == "1px 2px 3px"

    @pytest.mark.unit
    def test_fully_distinct(self):
        assert serialize_padding(BoxSides("1px", "2px", "3px", "4px")) == "1px 2px 3px 4px"

    @pytest.mark.unit
    def test_all_empty_is_unset(self):
        assert serialize_padding(BoxSides()) == ""

    @pytest.mark.unit
    def test_partial_sides_default_to_zero(self):
        assert serialize_padding(BoxSides(top="10")) == "10px 0px 0px"

    @pytest.mark.unit
    def test_bare_numbers_gain_units(self):
        assert serialize_padding(BoxSides("0", "48", "0", "48")) == "0px 48px"


class TestShorthandEquivalence:
    """parse(serialize(parse(s))) keeps the effective per-side values."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        ["10px", "0 48px", "16px 36px", "1px 2px 3px", "1 2 3 4", "5% 10px", "0", "48px 40px"],
    )
    def test_padding_round_trip(self, value):
        first = parse_padding(value)
        again = parse_padding(serialize_padding(first))
        assert _effective(again) == _effective(first)
        assert parse_padding(serialize_padding(again)) == again

    @pytest.mark.unit
    def test_normalize_padding_shrinks(self):
        assert normalize_padding("10px 10px 10px 10px") == "10px"
        assert normalize_padding("0 48 0 48") == "0px 48px"


class TestRadiusCodec:
    """Radius mirrors the padding rules over corners."""

    @pytest.mark.unit
    def test_parse(self):
        assert parse_radius("8px 0") == CornerRadii("8px", "0", "8px", "0")

    @pytest.mark.unit
    def test_serialize_collapses(self):
        assert serialize_radius(CornerRadii("8", "8", "8", "8")) == "8px"
        assert serialize_radius(CornerRadii("8px", "0", "8px", "0")) == "8px 0px"
        assert serialize_radius(CornerRadii("1px", "2px", "3px", "4px")) == "1px 2px 3px 4px"
        assert serialize_radius(CornerRadii()) == ""

    @pytest.mark.unit
    def test_normalize(self):
        assert normalize_radius("0") == "0px"
