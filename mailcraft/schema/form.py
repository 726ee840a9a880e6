"""Visual-editor form model.

Turns a component's schema and stored props into an ordered list of form
sections. The model is UI-agnostic: it only decides which fields appear, in
which rows, and which storage key each field writes to.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .lib import (
    active_item_count,
    get_component_schema,
    hidden_slots,
    is_prop_visible,
    mobile_key,
    resolve_prop,
)
from .models import ComponentSchema, PropDefinition, RepeatableGroup, Viewport


class SectionKind(str, Enum):
    PROPS = "props"
    GROUP = "group"
    RAW = "raw"


@dataclass(frozen=True)
class FormField:
    """A single editable field.

    Attributes:
        key: Storage key the field writes to. Responsive props edited in the
            mobile viewport write to their ``m:`` override key.
        prop: Declaring prop, or None for raw fields of unknown types.
        value: Value currently stored under ``key`` ("" when unset).
        resolved: Effective value after fallback, for placeholders.
    """

    key: str
    prop: PropDefinition | None
    value: str
    resolved: str | None

    @property
    def half(self) -> bool:
        return bool(self.prop and self.prop.half)


FormRow = tuple[FormField, ...]


@dataclass(frozen=True)
class FormSection:
    """A run of rows, one repeatable group, or the raw fallback.

    Attributes:
        kind: Section kind.
        title: Visual group name, group label, or component type.
        rows: Field rows. For numbered groups, the rows of every item.
        group: Repeatable group shown by a GROUP section.
        items: Per-item rows of a numbered group.
        addable: Empty slots of a non-numbered group that can be added.
    """

    kind: SectionKind
    title: str
    rows: tuple[FormRow, ...] = ()
    group: RepeatableGroup | None = None
    items: tuple[tuple[FormRow, ...], ...] = ()
    addable: tuple[str, ...] = ()

    def fields(self) -> list[FormField]:
        return [f for row in self.rows for f in row]


def _make_field(props: Mapping[str, str], prop: PropDefinition, viewport: Viewport) -> FormField:
    key = prop.key
    if prop.responsive and viewport == Viewport.MOBILE:
        key = mobile_key(prop.key)
    return FormField(
        key=key,
        prop=prop,
        value=props.get(key, ""),
        resolved=resolve_prop(props, prop, viewport),
    )


def chunk_rows(fields: list[FormField]) -> tuple[FormRow, ...]:
    """Pair adjacent half-width fields; everything else gets its own row."""
    rows: list[FormRow] = []
    i = 0
    while i < len(fields):
        current = fields[i]
        if current.half and i + 1 < len(fields) and fields[i + 1].half:
            rows.append((current, fields[i + 1]))
            i += 2
        else:
            rows.append((current,))
            i += 1
    return tuple(rows)


def _group_section(
    schema: ComponentSchema,
    group: RepeatableGroup,
    props: Mapping[str, str],
    viewport: Viewport,
) -> FormSection:
    def fields_for(keys) -> list[FormField]:
        fields = []
        for key in keys:
            prop = schema.get_prop(key)
            if prop is None:
                fields.append(FormField(key, None, props.get(key, ""), props.get(key) or None))
            elif is_prop_visible(schema, prop, props, viewport):
                fields.append(_make_field(props, prop, viewport))
        return fields

    if group.is_numbered:
        count = active_item_count(group, props)
        items = tuple(chunk_rows(fields_for(group.item_keys(n))) for n in range(1, count + 1))
        return FormSection(
            kind=SectionKind.GROUP,
            title=group.label,
            rows=tuple(row for item in items for row in item),
            group=group,
            items=items,
        )

    addable = tuple(hidden_slots(group, props))
    visible = [key for key in group.props_per_item if key not in addable]
    return FormSection(
        kind=SectionKind.GROUP,
        title=group.label,
        rows=chunk_rows(fields_for(visible)),
        group=group,
        addable=addable,
    )


def build_form(
    component_type: str,
    props: Mapping[str, str],
    viewport: Viewport = Viewport.DESKTOP,
) -> list[FormSection]:
    """Build the property form for one component.

    Standard props are collected into sections by their visual group and
    chunked into rows. Each repeatable group becomes its own section at the
    position of its first declared prop. Hidden conditional props are left
    out. Unknown types get a single raw section listing the stored props.

    Args:
        component_type: Component type name.
        props: Stored props of the component.
        viewport: Active preview width.

    Returns:
        Ordered form sections.
    """
    schema = get_component_schema(component_type)
    if schema is None:
        raw = [FormField(key, None, value, value or None) for key, value in props.items()]
        return [FormSection(kind=SectionKind.RAW, title=component_type, rows=chunk_rows(raw))]

    sections: list[FormSection] = []
    pending: list[FormField] = []
    pending_title: str | None = None
    emitted_groups: set[str] = set()

    def flush() -> None:
        nonlocal pending, pending_title
        if pending:
            sections.append(
                FormSection(
                    kind=SectionKind.PROPS,
                    title=pending_title or "general",
                    rows=chunk_rows(pending),
                )
            )
        pending = []
        pending_title = None

    for prop in schema.props:
        if prop.repeatable_group:
            if prop.repeatable_group in emitted_groups:
                continue
            group = schema.get_group(prop.repeatable_group)
            if group is None:
                continue
            flush()
            sections.append(_group_section(schema, group, props, viewport))
            emitted_groups.add(group.key)
            continue
        if not is_prop_visible(schema, prop, props, viewport):
            continue
        title = prop.group or "general"
        if pending and title != pending_title:
            flush()
        pending_title = title
        pending.append(_make_field(props, prop, viewport))
    flush()
    return sections


__all__ = [
    "FormField",
    "FormRow",
    "FormSection",
    "SectionKind",
    "build_form",
    "chunk_rows",
]
