"""Template parser.

Reads the source format::

    ---
    title: Spring Service
    ---

    <x-base bg-color="#ffffff">
      <x-core.hero headline="Hi" />
    </x-base>

The parser is a small tag scanner rather than a full HTML parser: component
markup is XML-like and attribute values are always quoted, so a tokenizer
over tags is enough to recover frontmatter, base props and components.
"""

import logging
import re

from .models import ParsedComponent, ParsedTemplate

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
ROOT_TAG = "x-base"

_TAG = re.compile(
    r"""<!--.*?-->"""
    r"""|<(?P<end>/)?(?P<name>[A-Za-z][\w:.-]*)"""
    r"""(?P<attrs>(?:\s+[\w:.@-]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>/=]+))?)*)"""
    r"""\s*(?P<self>/)?>""",
    re.DOTALL,
)
_ATTR = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_ENTITY = re.compile(r"&(quot|amp);")
_ENTITY_CHARS = {"quot": '"', "amp": "&"}
_COMPONENT_NAME = re.compile(r"^x-[\w-]+\.(?P<type>[\w-]+)$")
_VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link", "col", "area", "base", "wbr"})


class TemplateParseError(ValueError):
    """Raised when source text has no recoverable template structure.

    Attributes:
        line: 1-based line number the failure was detected at, if known.
    """

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


def _line_at(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def _unquote(value: str) -> str:
    """Strip one layer of matching double or single quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_attributes(attr_string: str) -> dict[str, str]:
    """Parse ``key="value"`` and ``key='value'`` pairs in source order.

    Keys may contain ``:`` so ``m:`` mobile overrides parse as ordinary
    attributes. ``&quot;`` and ``&amp;`` inside a value decode to ``"`` and
    ``&``; any other ``&`` is kept as written.
    """
    attrs: dict[str, str] = {}
    for match in _ATTR.finditer(attr_string or ""):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attrs[match.group(1)] = _ENTITY.sub(lambda m: _ENTITY_CHARS[m.group(1)], value)
    return attrs


def _parse_frontmatter(lines: list[str]) -> tuple[dict[str, str], int]:
    """Parse the frontmatter block.

    Returns:
        The frontmatter map and the index of the first body line.
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return {}, 0

    for end in range(1, len(lines)):
        if lines[end].rstrip() == FRONTMATTER_DELIMITER:
            break
    else:
        raise TemplateParseError("Unclosed frontmatter block", line=1)

    frontmatter: dict[str, str] = {}
    for line in lines[1:end]:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition(":")
        if not sep:
            logger.debug(f"Ignoring frontmatter line without a key: {stripped!r}")
            continue
        frontmatter[key.strip()] = _unquote(value.strip())
    return frontmatter, end + 1


def _find_closing(text: str, name: str, start: int, end: int) -> re.Match | None:
    """Find the end tag matching an open ``name`` tag, honoring nesting."""
    depth = 1
    pos = start
    while True:
        match = _TAG.search(text, pos, end)
        if match is None:
            return None
        pos = match.end()
        if match.group("name") != name:
            continue
        if match.group("end"):
            depth -= 1
            if depth == 0:
                return match
        elif not match.group("self"):
            depth += 1


def _parse_components(text: str, start: int, end: int) -> list[ParsedComponent]:
    components: list[ParsedComponent] = []
    pos = start
    while True:
        match = _TAG.search(text, pos, end)
        if match is None:
            return components
        name = match.group("name")
        if name is None or match.group("end"):
            # Comment or stray end tag
            pos = match.end()
            continue

        content: str | None = None
        if match.group("self") or name.lower() in _VOID_TAGS:
            pos = match.end()
        else:
            closing = _find_closing(text, name, match.end(), end)
            if closing is None:
                raise TemplateParseError(f"Unclosed <{name}> element", line=_line_at(text, match.start()))
            content = text[match.end() : closing.start()].strip() or None
            pos = closing.end()

        component_name = _COMPONENT_NAME.match(name)
        if component_name is None:
            # Markers and other non-component markup
            continue
        components.append(
            ParsedComponent(
                type=component_name.group("type"),
                props=parse_attributes(match.group("attrs")),
                content=content,
            )
        )


def parse_template(source: str) -> ParsedTemplate:
    """Parse template source into a ParsedTemplate.

    Args:
        source: Template source text.

    Returns:
        The parsed document. A source without frontmatter yields an empty
        frontmatter map.

    Raises:
        TemplateParseError: If the frontmatter is unclosed, the ``x-base``
            root is missing or unclosed, or a component element is unclosed.
    """
    text = source.replace("\r\n", "\n").lstrip("\ufeff")
    lines = text.split("\n")
    frontmatter, body_line = _parse_frontmatter(lines)
    body_start = sum(len(line) + 1 for line in lines[:body_line])

    root = None
    pos = body_start
    while True:
        match = _TAG.search(text, pos)
        if match is None:
            break
        if match.group("name") is not None and not match.group("end"):
            root = match
            break
        pos = match.end()

    if root is None:
        raise TemplateParseError(f"Missing <{ROOT_TAG}> root element", line=body_line + 1)
    if root.group("name") != ROOT_TAG:
        raise TemplateParseError(
            f"Expected <{ROOT_TAG}> root element, found <{root.group('name')}>",
            line=_line_at(text, root.start()),
        )

    base_props = parse_attributes(root.group("attrs"))
    components: list[ParsedComponent] = []
    if not root.group("self"):
        closing = _find_closing(text, ROOT_TAG, root.end(), len(text))
        if closing is None:
            raise TemplateParseError(f"Unclosed <{ROOT_TAG}> element", line=_line_at(text, root.start()))
        components = _parse_components(text, root.end(), closing.start())

    return ParsedTemplate(frontmatter=frontmatter, base_props=base_props, components=tuple(components))


def try_parse_template(source: str) -> ParsedTemplate | None:
    """Parse source, returning None instead of raising on failure."""
    try:
        return parse_template(source)
    except TemplateParseError as e:
        logger.debug(f"Template parse failed: {e}")
        return None


__all__ = [
    "FRONTMATTER_DELIMITER",
    "ROOT_TAG",
    "TemplateParseError",
    "parse_attributes",
    "parse_template",
    "try_parse_template",
]
