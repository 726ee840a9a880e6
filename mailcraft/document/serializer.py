"""Template serializer.

Output is deterministic and matches hand-authored templates: a frontmatter
block, the ``x-base`` root, and one component per paragraph. Elements with at
most two attributes stay on one line; larger ones put each attribute on its
own indented line.
"""

import re
from collections.abc import Mapping

from .models import ParsedComponent, ParsedTemplate
from .parser import FRONTMATTER_DELIMITER, ROOT_TAG

COMPONENT_NAMESPACE = "x-core"
INLINE_ATTRIBUTE_LIMIT = 2
INDENT = "  "

_FRONTMATTER_QUOTE_CHARS = (":", "{", '"')

# An ampersand the parser would read as the start of an entity
_ENTITY_AMP = re.compile(r"&(?=(?:quot|amp);)")


def component_tag(component_type: str) -> str:
    return f"{COMPONENT_NAMESPACE}.{component_type}"


def format_attribute(key: str, value: str) -> str:
    """Format one attribute.

    Values containing ``"`` are single-quoted. If they contain both quote
    kinds, ``"`` is written as ``&quot;``. An ``&`` that would otherwise read
    back as an entity is written as ``&amp;``.
    """
    value = _ENTITY_AMP.sub("&amp;", value)
    if '"' in value:
        if "'" not in value:
            return f"{key}='{value}'"
        value = value.replace('"', "&quot;")
    return f'{key}="{value}"'


def format_frontmatter_value(value: str) -> str:
    """Double-quote a value the parser would otherwise read differently.

    That is a value containing ``:``, ``{`` or ``"``, one already wrapped in
    quotes, or one with surrounding whitespace.
    """
    wrapped = len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"')
    if wrapped or value != value.strip() or any(ch in value for ch in _FRONTMATTER_QUOTE_CHARS):
        return f'"{value}"'
    return value


def _inline_attributes(attrs: Mapping[str, str]) -> str:
    return "".join(f" {format_attribute(k, v)}" for k, v in attrs.items())


def serialize_component(component: ParsedComponent, indent: str = INDENT) -> str:
    """Serialize a single component element.

    Args:
        component: Component to serialize.
        indent: Leading indentation of the element.

    Returns:
        The element text without a trailing newline.
    """
    tag = component_tag(component.type)
    content = component.content

    if len(component.props) <= INLINE_ATTRIBUTE_LIMIT:
        attrs = _inline_attributes(component.props)
        if content:
            return f"{indent}<{tag}{attrs}>{content}</{tag}>"
        return f"{indent}<{tag}{attrs} />"

    lines = [f"{indent}<{tag}"]
    lines.extend(f"{indent}{INDENT}{format_attribute(k, v)}" for k, v in component.props.items())
    if content:
        lines[-1] += ">"
        lines.append(f"{indent}{INDENT}{content}")
        lines.append(f"{indent}</{tag}>")
    else:
        lines.append(f"{indent}/>")
    return "\n".join(lines)


def serialize_root_open(base_props: Mapping[str, str]) -> str:
    """Serialize the ``x-base`` opening tag."""
    if len(base_props) <= INLINE_ATTRIBUTE_LIMIT:
        return f"<{ROOT_TAG}{_inline_attributes(base_props)}>"
    lines = [f"<{ROOT_TAG}"]
    lines.extend(f"{INDENT}{format_attribute(k, v)}" for k, v in base_props.items())
    lines.append(">")
    return "\n".join(lines)


def serialize_frontmatter(frontmatter: Mapping[str, str]) -> list[str]:
    lines = [FRONTMATTER_DELIMITER]
    lines.extend(f"{k}: {format_frontmatter_value(v)}" for k, v in frontmatter.items())
    lines.append(FRONTMATTER_DELIMITER)
    return lines


def serialize_template(template: ParsedTemplate) -> str:
    """Serialize a document to source text.

    Example:
        >>> doc = ParsedTemplate({"title": "Test"}, {}, (ParsedComponent("hero", {"headline": "Hi"}),))
        >>> print(serialize_template(doc))
        ---
        title: Test
        ---
        <BLANKLINE>
        <x-base>
        <BLANKLINE>
          <x-core.hero headline="Hi" />
        <BLANKLINE>
        </x-base>
        <BLANKLINE>
    """
    lines = serialize_frontmatter(template.frontmatter)
    lines.append("")
    lines.append(serialize_root_open(template.base_props))
    for component in template.components:
        lines.append("")
        lines.append(serialize_component(component))
    lines.append("")
    lines.append(f"</{ROOT_TAG}>")
    lines.append("")
    return "\n".join(lines)


__all__ = [
    "COMPONENT_NAMESPACE",
    "component_tag",
    "format_attribute",
    "format_frontmatter_value",
    "serialize_component",
    "serialize_frontmatter",
    "serialize_root_open",
    "serialize_template",
]
