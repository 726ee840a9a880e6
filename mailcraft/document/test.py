"""Unit tests for the template parser and serializer."""

import pytest

from mailcraft.document import (
    ParsedComponent,
    ParsedTemplate,
    StarterMode,
    TemplateParseError,
    format_attribute,
    parse_template,
    serialize_component,
    serialize_template,
    starter_template,
    try_parse_template,
)

E2E_SOURCE = '---\ntitle: Test\n---\n\n<x-base>\n\n  <x-core.hero headline="Hi" />\n\n</x-base>\n'

MULTILINE_SOURCE = """---
title: Spring Service
subject: "Save 15%: this week only"
preheader: 'Book now'
---

<x-base
  bg-color="#f3f4f6"
  content-bg="#ffffff"
  font-family="Arial"
>

  <x-core.copy
    body="Hello there"
    padding="0 48px"
    m:padding="0 16px"
  />

  <x-core.spacer size="24px" />

  <x-core.custom label="Raw">Inner <b>markup</b></x-core.custom>

</x-base>
"""


class TestParseTemplate:
    """Tests for parse_template."""

    @pytest.mark.unit
    def test_end_to_end_source(self):
        doc = parse_template(E2E_SOURCE)
        assert doc.frontmatter == {"title": "Test"}
        assert doc.base_props == {}
        assert doc.components == (ParsedComponent("hero", {"headline": "Hi"}),)

    @pytest.mark.unit
    def test_frontmatter_quotes_stripped(self):
        doc = parse_template(MULTILINE_SOURCE)
        assert doc.frontmatter == {
            "title": "Spring Service",
            "subject": "Save 15%: this week only",
            "preheader": "Book now",
        }

    @pytest.mark.unit
    def test_multiline_root_attributes_in_order(self):
        doc = parse_template(MULTILINE_SOURCE)
        assert list(doc.base_props) == ["bg-color", "content-bg", "font-family"]
        assert doc.base_props["bg-color"] == "#f3f4f6"

    @pytest.mark.unit
    def test_mobile_override_keys(self):
        doc = parse_template(MULTILINE_SOURCE)
        assert doc.components[0].props == {
            "body": "Hello there",
            "padding": "0 48px",
            "m:padding": "0 16px",
        }

    @pytest.mark.unit
    def test_inner_content_captured(self):
        doc = parse_template(MULTILINE_SOURCE)
        custom = doc.components[2]
        assert custom.type == "custom"
        assert custom.content == "Inner <b>markup</b>"

    @pytest.mark.unit
    def test_no_frontmatter(self):
        doc = parse_template('<x-base><x-core.spacer size="8px" /></x-base>')
        assert doc.frontmatter == {}
        assert len(doc.components) == 1

    @pytest.mark.unit
    def test_markers_and_foreign_children_skipped(self):
        source = (
            "<x-base>\n"
            '<div data-tpl="0" style="display:none"></div>\n'
            '<x-core.hero headline="A" />\n'
            "<table><tr><td>stray</td></tr></table>\n"
            '<div data-tpl="end" style="display:none"></div>\n'
            "</x-base>"
        )
        doc = parse_template(source)
        assert [c.type for c in doc.components] == ["hero"]

    @pytest.mark.unit
    def test_single_quoted_and_entity_values(self):
        source = """<x-base><x-core.copy body='Say "hi"' greeting="It&quot;s" /></x-base>"""
        doc = parse_template(source)
        assert doc.components[0].props == {"body": 'Say "hi"', "greeting": 'It"s'}

    @pytest.mark.unit
    def test_amp_entity_decoded_once(self):
        source = '<x-base><x-core.copy body="&amp;quot;" greeting="Q&amp;A" link="?a=1&b=2" /></x-base>'
        props = parse_template(source).components[0].props
        assert props == {"body": "&quot;", "greeting": "Q&A", "link": "?a=1&b=2"}

    @pytest.mark.unit
    def test_attribute_value_containing_gt(self):
        doc = parse_template('<x-base><x-core.copy body="a > b" /></x-base>')
        assert doc.components[0].props["body"] == "a > b"

    @pytest.mark.unit
    def test_crlf_line_endings(self):
        doc = parse_template(E2E_SOURCE.replace("\n", "\r\n"))
        assert doc.frontmatter == {"title": "Test"}

    @pytest.mark.unit
    def test_self_closing_root(self):
        doc = parse_template('---\ntitle: Empty\n---\n<x-base bg-color="#fff" />')
        assert doc.base_props == {"bg-color": "#fff"}
        assert doc.components == ()


class TestParseErrors:
    """Unrecoverable input raises TemplateParseError."""

    @pytest.mark.unit
    def test_unclosed_frontmatter(self):
        with pytest.raises(TemplateParseError) as exc_info:
            parse_template("---\ntitle: Test\n<x-base></x-base>")
        assert exc_info.value.line == 1

    @pytest.mark.unit
    def test_missing_root(self):
        with pytest.raises(TemplateParseError, match="Missing"):
            parse_template("---\ntitle: Test\n---\n\njust text")

    @pytest.mark.unit
    def test_wrong_root(self):
        with pytest.raises(TemplateParseError, match="Expected"):
            parse_template("<x-core.hero />")

    @pytest.mark.unit
    def test_unclosed_root(self):
        with pytest.raises(TemplateParseError, match="Unclosed <x-base>"):
            parse_template('<x-base>\n  <x-core.hero headline="Hi" />\n')

    @pytest.mark.unit
    def test_unclosed_component_reports_line(self):
        source = "---\ntitle: T\n---\n<x-base>\n<x-core.copy body=\"x\">\n</x-base>"
        with pytest.raises(TemplateParseError) as exc_info:
            parse_template(source)
        assert exc_info.value.line == 5

    @pytest.mark.unit
    def test_is_value_error(self):
        assert issubclass(TemplateParseError, ValueError)

    @pytest.mark.unit
    def test_try_parse_returns_none(self):
        assert try_parse_template("<x-base>") is None
        assert try_parse_template(E2E_SOURCE) is not None


class TestSerializeTemplate:
    """Tests for serialize_template formatting."""

    @pytest.mark.unit
    def test_end_to_end_reproduces_source(self):
        assert serialize_template(parse_template(E2E_SOURCE)) == E2E_SOURCE

    @pytest.mark.unit
    def test_frontmatter_quoting(self):
        doc = ParsedTemplate(
            frontmatter={"title": "Plain", "subject": "a: b", "tag": "{x}", "q": 'say "hi"'},
        )
        lines = serialize_template(doc).splitlines()
        assert lines[1] == "title: Plain"
        assert lines[2] == 'subject: "a: b"'
        assert lines[3] == 'tag: "{x}"'
        assert lines[4] == 'q: "say "hi""'

    @pytest.mark.unit
    def test_frontmatter_quotes_values_that_would_change(self):
        doc = ParsedTemplate(frontmatter={"a": "'Spring'", "b": " padded", "c": "'open"})
        lines = serialize_template(doc).splitlines()
        assert lines[1] == "a: \"'Spring'\""
        assert lines[2] == 'b: " padded"'
        assert lines[3] == "c: 'open"

    @pytest.mark.unit
    def test_root_inline_up_to_two(self):
        doc = ParsedTemplate(base_props={"a": "1", "b": "2"})
        assert '<x-base a="1" b="2">' in serialize_template(doc)

    @pytest.mark.unit
    def test_root_multiline_above_two(self):
        doc = ParsedTemplate(base_props={"a": "1", "b": "2", "c": "3"})
        assert '<x-base\n  a="1"\n  b="2"\n  c="3"\n>' in serialize_template(doc)

    @pytest.mark.unit
    def test_component_forms(self):
        assert serialize_component(ParsedComponent("header")) == "  <x-core.header />"
        assert (
            serialize_component(ParsedComponent("spacer", {"size": "8px"}))
            == '  <x-core.spacer size="8px" />'
        )
        assert (
            serialize_component(ParsedComponent("custom", {"a": "1"}, "Body"))
            == '  <x-core.custom a="1">Body</x-core.custom>'
        )

    @pytest.mark.unit
    def test_component_multiline(self):
        comp = ParsedComponent("copy", {"a": "1", "b": "2", "c": "3"})
        assert serialize_component(comp) == '  <x-core.copy\n    a="1"\n    b="2"\n    c="3"\n  />'

    @pytest.mark.unit
    def test_component_multiline_with_content(self):
        comp = ParsedComponent("custom", {"a": "1", "b": "2", "c": "3"}, "Body")
        assert serialize_component(comp) == (
            '  <x-core.custom\n    a="1"\n    b="2"\n    c="3">\n    Body\n  </x-core.custom>'
        )

    @pytest.mark.unit
    def test_attribute_quoting(self):
        assert format_attribute("k", "plain") == 'k="plain"'
        assert format_attribute("k", 'say "hi"') == "k='say \"hi\"'"
        assert format_attribute("k", "it's \"x\"") == 'k="it\'s &quot;x&quot;"'
        assert format_attribute("k", "&quot;") == 'k="&amp;quot;"'
        assert format_attribute("k", "a=1&b=2") == 'k="a=1&b=2"'

    @pytest.mark.unit
    def test_deterministic(self):
        doc = parse_template(MULTILINE_SOURCE)
        assert serialize_template(doc) == serialize_template(doc)


class TestRoundTrip:
    """parse(serialize(d)) == d."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "doc",
        [
            ParsedTemplate(),
            ParsedTemplate(
                frontmatter={"title": "T", "subject": "Hi {{contact.first_name}}: news"},
                base_props={"bg-color": "#fff", "content-bg": "#eee", "width": "600px"},
                components=(
                    ParsedComponent("hero", {"headline": "Hi", "m:hero-height": "300px"}),
                    ParsedComponent("copy", {"body": "it's \"quoted\"", "a": "1", "b": "2"}),
                    ParsedComponent("custom", {}, "Line one\n    line two"),
                    ParsedComponent("legacy-block", {"data-x": "keep me"}),
                ),
            ),
            ParsedTemplate(
                frontmatter={"title": "'Spring'", "preheader": "  padded ", "tag": '"quoted"'},
            ),
            ParsedTemplate(
                components=(
                    ParsedComponent("copy", {"body": "&quot;", "greeting": "Q&amp;A"}),
                    ParsedComponent("copy", {"body": "R&D says \"hi\" & it's &quot;ok&quot;"}),
                    ParsedComponent("cta", {"button-url": "https://x.test/?a=1&b=2"}),
                ),
            ),
        ],
    )
    def test_round_trip(self, doc):
        assert parse_template(serialize_template(doc)) == doc

    @pytest.mark.unit
    def test_multiline_source_round_trip(self):
        doc = parse_template(MULTILINE_SOURCE)
        assert parse_template(serialize_template(doc)) == doc


class TestStarters:
    """Starter templates."""

    @pytest.mark.unit
    @pytest.mark.parametrize("mode", list(StarterMode))
    def test_starter_parses(self, mode):
        doc = parse_template(starter_template("Welcome", mode))
        assert doc.frontmatter == {"title": "Welcome"}
        assert doc.components[0].type == "header"
        assert doc.components[-1].type == "footer"

    @pytest.mark.unit
    def test_starter_is_canonical(self):
        source = starter_template()
        assert serialize_template(parse_template(source)) == source
