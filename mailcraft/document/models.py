"""Document model for email templates.

A template is a frontmatter block, one ``x-base`` root carrying base props,
and an ordered list of components. The component's position in that list is
its identity for the rest of a session.

Values are treated as immutable: edits build new instances rather than
mutating dictionaries in place.
"""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ParsedComponent:
    """One component element.

    Attributes:
        type: Component type name, the tag name without its namespace.
        props: Attribute values in source order. Always strings.
        content: Trimmed inner content for non-self-closing elements.
    """

    type: str
    props: dict[str, str] = field(default_factory=dict)
    content: str | None = None

    def with_props(self, props: dict[str, str]) -> "ParsedComponent":
        return replace(self, props=dict(props))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "props": dict(self.props)}
        if self.content is not None:
            data["content"] = self.content
        return data


@dataclass(frozen=True)
class ParsedTemplate:
    """A parsed template document.

    Attributes:
        frontmatter: Metadata block (title, subject, preheader, ...).
        base_props: Attributes of the ``x-base`` root element.
        components: Components in document order.
    """

    frontmatter: dict[str, str] = field(default_factory=dict)
    base_props: dict[str, str] = field(default_factory=dict)
    components: tuple[ParsedComponent, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    def component(self, index: int) -> ParsedComponent:
        """Component at ``index``.

        Raises:
            IndexError: If the index does not address a component.
        """
        if not 0 <= index < len(self.components):
            raise IndexError(f"Component index {index} out of range (0..{len(self.components) - 1})")
        return self.components[index]

    def with_components(self, components) -> "ParsedTemplate":
        return replace(self, components=tuple(components))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "frontmatter": dict(self.frontmatter),
            "baseProps": dict(self.base_props),
            "components": [c.to_dict() for c in self.components],
        }


__all__ = ["ParsedComponent", "ParsedTemplate"]
