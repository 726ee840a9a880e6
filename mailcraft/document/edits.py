"""Document edits and index remapping.

Components are identified by their position. Every structural edit therefore
returns an IndexRemap alongside the new document, and callers holding
index-keyed state (expanded panels, hidden components, the selection) must
pass it through the remap.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from ..schema import default_props, get_component_schema, is_mobile_key
from .models import ParsedComponent, ParsedTemplate

logger = logging.getLogger(__name__)

SINGLETON_TYPES = frozenset({"footer"})


# =============================================================================
# Index Remap
# =============================================================================


@dataclass(frozen=True)
class IndexRemap:
    """Old-index to new-index mapping produced by a structural edit.

    Attributes:
        targets: New index for each old index, or None if it was removed.
        inserted: Index of a newly inserted component, if any.
        source: Old index the inserted component was copied from.
    """

    targets: tuple[int | None, ...]
    inserted: int | None = None
    source: int | None = None

    @classmethod
    def identity(cls, size: int) -> "IndexRemap":
        return cls(targets=tuple(range(size)))

    def map_index(self, index: int | None) -> int | None:
        """Map a single optional index, such as the current selection.

        Raises:
            IndexError: If ``index`` did not exist before the edit.
        """
        if index is None:
            return None
        if not 0 <= index < len(self.targets):
            raise IndexError(f"Index {index} did not exist before the edit")
        return self.targets[index]

    def apply(self, indices: Iterable[int], include_copy: bool = False) -> set[int]:
        """Map a set of indices.

        Args:
            indices: Indices valid before the edit.
            include_copy: For duplications, also mark the copy when its
                source is in ``indices``.

        Returns:
            Indices valid after the edit. Removed indices are dropped.
        """
        indices = set(indices)
        result: set[int] = set()
        for index in indices:
            mapped = self.map_index(index)
            if mapped is not None:
                result.add(mapped)
        if include_copy and self.source is not None and self.source in indices:
            result.add(self.inserted)
        return result


def _check_index(doc: ParsedTemplate, index: int) -> None:
    if not 0 <= index < len(doc.components):
        raise IndexError(f"Component index {index} out of range for {len(doc.components)} components")


# =============================================================================
# Structural Edits
# =============================================================================


def add_component(
    doc: ParsedTemplate,
    component_type: str,
    props: Mapping[str, str] | None = None,
    index: int | None = None,
    content: str | None = None,
) -> tuple[ParsedTemplate, IndexRemap]:
    """Insert a new component.

    Args:
        doc: Current document.
        component_type: Type of the new component.
        props: Initial props. Defaults to the schema's seed props.
        index: Insert position. Defaults to the end of the document.
        content: Optional inner content.

    Returns:
        The new document and the remap (indices ``>= index`` shift up).

    Raises:
        ValueError: If the type is a singleton already present.
        IndexError: If ``index`` is outside ``0..len(components)``.
    """
    if component_type in SINGLETON_TYPES and any(
        c.type == component_type for c in doc.components
    ):
        raise ValueError(f"Only one {component_type} component is allowed per template")

    size = len(doc.components)
    if index is None:
        index = size
    if not 0 <= index <= size:
        raise IndexError(f"Insert position {index} out of range for {size} components")

    if props is None:
        schema = get_component_schema(component_type)
        props = default_props(schema) if schema else {}

    component = ParsedComponent(type=component_type, props=dict(props), content=content or None)
    components = list(doc.components)
    components.insert(index, component)
    remap = IndexRemap(
        targets=tuple(i if i < index else i + 1 for i in range(size)),
        inserted=index,
    )
    logger.debug(f"Added {component_type} at index {index}")
    return doc.with_components(components), remap


def delete_component(doc: ParsedTemplate, index: int) -> tuple[ParsedTemplate, IndexRemap]:
    """Remove the component at ``index``; later indices shift down."""
    _check_index(doc, index)
    components = list(doc.components)
    del components[index]
    targets = tuple(
        None if i == index else (i if i < index else i - 1) for i in range(len(doc.components))
    )
    return doc.with_components(components), IndexRemap(targets=targets)


def duplicate_component(doc: ParsedTemplate, index: int) -> tuple[ParsedTemplate, IndexRemap]:
    """Copy the component at ``index`` into ``index + 1``."""
    _check_index(doc, index)
    original = doc.components[index]
    if original.type in SINGLETON_TYPES:
        raise ValueError(f"Only one {original.type} component is allowed per template")
    components = list(doc.components)
    components.insert(index + 1, original.with_props(original.props))
    targets = tuple(i if i <= index else i + 1 for i in range(len(doc.components)))
    remap = IndexRemap(targets=targets, inserted=index + 1, source=index)
    return doc.with_components(components), remap


def move_component(doc: ParsedTemplate, from_index: int, to_index: int) -> tuple[ParsedTemplate, IndexRemap]:
    """Move a component, rotating every index in between.

    Moving forward shifts ``(from, to]`` down by one; moving backward shifts
    ``[to, from)`` up by one.
    """
    _check_index(doc, from_index)
    _check_index(doc, to_index)
    components = list(doc.components)
    moved = components.pop(from_index)
    components.insert(to_index, moved)

    def target(i: int) -> int:
        if i == from_index:
            return to_index
        if from_index < to_index and from_index < i <= to_index:
            return i - 1
        if to_index < from_index and to_index <= i < from_index:
            return i + 1
        return i

    remap = IndexRemap(targets=tuple(target(i) for i in range(len(doc.components))))
    return doc.with_components(components), remap


# =============================================================================
# Non-structural Edits
# =============================================================================


def _replace_component(doc: ParsedTemplate, index: int, component: ParsedComponent) -> ParsedTemplate:
    components = list(doc.components)
    components[index] = component
    return doc.with_components(components)


def set_prop(doc: ParsedTemplate, index: int, key: str, value: str) -> ParsedTemplate:
    """Set one prop of a component.

    An empty value on an ``m:`` key removes the override so mobile
    resolution falls back to the desktop value. Other keys keep empty
    values, which resolve to the schema default.
    """
    _check_index(doc, index)
    component = doc.components[index]
    props = dict(component.props)
    if is_mobile_key(key) and not value:
        props.pop(key, None)
    else:
        props[key] = value
    return _replace_component(doc, index, component.with_props(props))


def remove_prop(doc: ParsedTemplate, index: int, key: str) -> ParsedTemplate:
    _check_index(doc, index)
    component = doc.components[index]
    if key not in component.props:
        return doc
    props = {k: v for k, v in component.props.items() if k != key}
    return _replace_component(doc, index, component.with_props(props))


def set_content(doc: ParsedTemplate, index: int, content: str | None) -> ParsedTemplate:
    """Replace a component's inner content. Blank content makes it self-closing."""
    _check_index(doc, index)
    component = doc.components[index]
    content = content.strip() if content else None
    return _replace_component(doc, index, replace(component, content=content or None))


def set_frontmatter(doc: ParsedTemplate, key: str, value: str | None) -> ParsedTemplate:
    """Set a frontmatter entry; None removes it."""
    frontmatter = dict(doc.frontmatter)
    if value is None:
        frontmatter.pop(key, None)
    else:
        frontmatter[key] = value
    return replace(doc, frontmatter=frontmatter)


def set_base_prop(doc: ParsedTemplate, key: str, value: str | None) -> ParsedTemplate:
    """Set an ``x-base`` attribute; None or "" removes it."""
    base_props = dict(doc.base_props)
    if value:
        base_props[key] = value
    else:
        base_props.pop(key, None)
    return replace(doc, base_props=base_props)


__all__ = [
    "SINGLETON_TYPES",
    "IndexRemap",
    "add_component",
    "delete_component",
    "duplicate_component",
    "move_component",
    "remove_prop",
    "set_base_prop",
    "set_content",
    "set_frontmatter",
    "set_prop",
]
