"""Shared fixtures for preview tests."""

import re

import pytest

from mailcraft.document import ParsedComponent, ParsedTemplate

_FRONTMATTER = re.compile(r"\A---\n.*?\n---\n", re.DOTALL)
_COMPONENT = re.compile(r"<x-core\.([\w-]+)[^>]*?/>", re.DOTALL)


def fake_compile(markup: str) -> str:
    """Stand-in for the HTML compiler.

    Passes marker elements through untouched, like the real compiler, and
    expands each component into a two-row table.
    """
    body = _FRONTMATTER.sub("", markup)
    body = re.sub(
        r"<x-base[^>]*>",
        '<html><body style="margin: 0">'
        '<table role="presentation" style="width: 100%">'
        '<tr><td><table class="email-container" style="background-color: #ffffff">',
        body,
    )
    body = body.replace("</x-base>", "</table></td></tr></table></body></html>")
    return _COMPONENT.sub(
        lambda m: (
            f'<tr><td style="padding: 0 48px; background-color: #fafafa">'
            f'<table><TR class="inner"><td style="color: #111111">{m.group(1)}</td></TR></table>'
            f"</td></tr>"
        ),
        body,
    )


@pytest.fixture
def three_component_doc():
    return ParsedTemplate(
        frontmatter={"title": "Preview"},
        components=(
            ParsedComponent("header"),
            ParsedComponent("copy", {"body": "Hello"}),
            ParsedComponent("spacer", {"size": "24px"}),
        ),
    )


@pytest.fixture
def compiler():
    return fake_compile
