"""Mutable preview DOM.

A small element tree built with the standard library HTML parser, enough to
find tagged rows, read and write inline styles, and serialize the result
back to HTML. Text, comments and declarations are kept verbatim so a
document that is parsed and written back without edits keeps its content.
"""

import re
from collections.abc import Callable, Iterator
from html import escape
from html.parser import HTMLParser

from .projector import MARKER_ATTR

# Declaration separator outside url(...) and other parenthesized values
_DECLARATION_SPLIT = re.compile(r";(?![^(]*\))")

# Self-closing tags
VOID_TAGS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}


class Element:
    """An element node.

    Attributes:
        tag: Lowercase tag name. The document root uses "#document".
        attrs: Attribute pairs in source order. Boolean attributes have None.
        children: Child elements and raw text chunks.
        parent: Parent element, None for the root.
    """

    def __init__(self, tag: str, attrs: list[tuple[str, str | None]] | None = None, parent=None):
        self.tag = tag
        self.attrs: list[list] = [[k, v] for k, v in (attrs or [])]
        self.children: list["Element | str"] = []
        self.parent: Element | None = parent
        self.self_closing = False

    def __repr__(self) -> str:
        return f"<Element {self.tag} attrs={len(self.attrs)} children={len(self.children)}>"

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def set(self, name: str, value: str | None) -> None:
        for pair in self.attrs:
            if pair[0] == name:
                pair[1] = value
                return
        self.attrs.append([name, value])

    @property
    def classes(self) -> list[str]:
        return (self.get("class") or "").split()

    # -------------------------------------------------------------------------
    # Inline styles
    # -------------------------------------------------------------------------

    def _declarations(self) -> list[tuple[str, str]]:
        declarations = []
        for part in _DECLARATION_SPLIT.split(self.get("style") or ""):
            name, sep, value = part.partition(":")
            if sep and name.strip():
                declarations.append((name.strip().lower(), value.strip()))
        return declarations

    def get_style(self, prop: str) -> str | None:
        """Inline value of a CSS property, or None when not declared."""
        prop = prop.lower()
        for name, value in self._declarations():
            if name == prop:
                return value
        return None

    def has_style(self, prop: str) -> bool:
        value = self.get_style(prop)
        return bool(value)

    def set_style(self, prop: str, value: str) -> None:
        """Set a CSS property, keeping declaration order."""
        prop = prop.lower()
        declarations = self._declarations()
        for i, (name, _) in enumerate(declarations):
            if name == prop:
                declarations[i] = (name, value)
                break
        else:
            declarations.append((prop, value))
        self.set("style", "; ".join(f"{n}: {v}" for n, v in declarations))

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def element_children(self) -> list["Element"]:
        return [c for c in self.children if isinstance(c, Element)]

    def iter(self) -> Iterator["Element"]:
        """This element and all descendant elements, depth first."""
        yield self
        for child in self.element_children():
            yield from child.iter()

    def find_all(self, predicate: Callable[["Element"], bool]) -> list["Element"]:
        return [el for el in self.iter() if predicate(el)]

    def find(self, predicate: Callable[["Element"], bool]) -> "Element | None":
        for el in self.iter():
            if predicate(el):
                return el
        return None

    def find_tag(self, tag: str, **attrs: str) -> "Element | None":
        """First element with ``tag`` whose attributes equal ``attrs``.

        Attribute names use underscores for dashes (``data_tpl="1"``).
        """
        wanted = {k.replace("_", "-"): v for k, v in attrs.items()}
        return self.find(
            lambda el: el.tag == tag and all(el.get(k) == v for k, v in wanted.items())
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _open_tag(self) -> str:
        parts = [self.tag]
        for key, value in self.attrs:
            if value is None:
                parts.append(key)
            else:
                parts.append(f'{key}="{escape(value, quote=True)}"')
        end = " />" if self.self_closing else ">"
        return "<" + " ".join(parts) + end

    def to_html(self) -> str:
        if self.tag == "#document":
            return "".join(_render(c) for c in self.children)
        if self.self_closing or self.tag in VOID_TAGS:
            return self._open_tag()
        inner = "".join(_render(c) for c in self.children)
        return f"{self._open_tag()}{inner}</{self.tag}>"


def _render(node: "Element | str") -> str:
    if isinstance(node, Element):
        return node.to_html()
    return node


class _TreeBuilder(HTMLParser):
    """HTML parser that builds an Element tree."""

    def __init__(self):
        super().__init__(convert_charrefs=False)
        self.root = Element("#document")
        self.stack: list[Element] = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        node = Element(tag, attrs, parent=self.stack[-1])
        self.stack[-1].children.append(node)
        if tag not in VOID_TAGS:
            self.stack.append(node)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        node = Element(tag, attrs, parent=self.stack[-1])
        node.self_closing = True
        self.stack[-1].children.append(node)

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_TAGS:
            return
        # Close up to the nearest matching open element; ignore stray end tags
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth].tag == tag:
                del self.stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self.stack[-1].children.append(data)

    def handle_entityref(self, name: str) -> None:
        self.stack[-1].children.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.stack[-1].children.append(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self.stack[-1].children.append(f"<!--{data}-->")

    def handle_decl(self, decl: str) -> None:
        self.stack[-1].children.append(f"<!{decl}>")

    def handle_pi(self, data: str) -> None:
        self.stack[-1].children.append(f"<?{data}>")

    def unknown_decl(self, data: str) -> None:
        self.stack[-1].children.append(f"<![{data}]>")


class PreviewDocument:
    """Parsed preview HTML.

    Example:
        >>> doc = PreviewDocument.parse('<table><tr data-tpl="0"><td>Hi</td></tr></table>')
        >>> doc.rows(0)[0].tag
        'tr'
    """

    def __init__(self, root: Element):
        self.root = root

    @classmethod
    def parse(cls, html: str) -> "PreviewDocument":
        builder = _TreeBuilder()
        builder.feed(html)
        builder.close()
        return cls(builder.root)

    @property
    def body(self) -> Element | None:
        return self.root.find(lambda el: el.tag == "body")

    def rows(self, index: int, attr: str = MARKER_ATTR) -> list[Element]:
        """Rows tagged with a component index, in document order."""
        value = str(index)
        return self.root.find_all(lambda el: el.tag == "tr" and el.get(attr) == value)

    def find(self, predicate: Callable[[Element], bool]) -> Element | None:
        return self.root.find(predicate)

    def find_all(self, predicate: Callable[[Element], bool]) -> list[Element]:
        return self.root.find_all(predicate)

    def to_html(self) -> str:
        return self.root.to_html()


__all__ = ["VOID_TAGS", "Element", "PreviewDocument"]
