"""Component schema registry and prop resolution.

The registry maps a component type name to its ComponentSchema. Unknown
types are legal everywhere: lookups return None and callers fall back to
raw key/value handling.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .catalog import BUILTIN_SCHEMAS
from .models import (
    MOBILE_PREFIX,
    ComponentSchema,
    PropDefinition,
    PropKeyKind,
    PropType,
    RepeatableGroup,
    Viewport,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Registry
# =============================================================================

COMPONENT_REGISTRY: dict[str, ComponentSchema] = {}


def register_schema(schema: ComponentSchema) -> ComponentSchema:
    """Add a schema to the registry.

    Raises:
        ValueError: If a schema with the same name is already registered.
    """
    if schema.name in COMPONENT_REGISTRY:
        raise ValueError(f"Component schema already registered: {schema.name}")
    COMPONENT_REGISTRY[schema.name] = schema
    logger.debug(f"Registered component schema: {schema.name}")
    return schema


for _schema in BUILTIN_SCHEMAS:
    register_schema(_schema)


def get_component_schema(component_type: str) -> ComponentSchema | None:
    """Look up the schema for a component type.

    Args:
        component_type: Type name as written in markup (e.g. "hero").

    Returns:
        The ComponentSchema, or None for unknown types.
    """
    return COMPONENT_REGISTRY.get(component_type)


def list_component_schemas() -> list[ComponentSchema]:
    """All registered schemas in catalog order."""
    return list(COMPONENT_REGISTRY.values())


# =============================================================================
# Responsive Overrides
# =============================================================================


def mobile_key(key: str) -> str:
    """Storage key of the mobile override for ``key``."""
    return f"{MOBILE_PREFIX}{key}"


def is_mobile_key(key: str) -> bool:
    return key.startswith(MOBILE_PREFIX)


def resolve_prop(
    props: Mapping[str, str],
    prop: PropDefinition,
    viewport: Viewport = Viewport.DESKTOP,
) -> str | None:
    """Resolve the effective value of a prop.

    Resolution order:
        1. The ``m:`` override, when the prop is responsive and the viewport
           is mobile and the override is non-empty.
        2. The stored value, when non-empty.
        3. The schema default.
        4. None.

    Example:
        >>> resolve_prop({"padding": "0 48px", "m:padding": "0 16px"}, prop, Viewport.MOBILE)
        '0 16px'
    """
    if prop.responsive and viewport == Viewport.MOBILE:
        override = props.get(mobile_key(prop.key))
        if override:
            return override
    value = props.get(prop.key)
    if value:
        return value
    return prop.default


def resolve_props(
    component_type: str,
    props: Mapping[str, str],
    viewport: Viewport = Viewport.DESKTOP,
) -> dict[str, str | None]:
    """Resolve every declared prop of a component.

    Unknown types resolve to their stored props unchanged.
    """
    schema = get_component_schema(component_type)
    if schema is None:
        return dict(props)
    return {prop.key: resolve_prop(props, prop, viewport) for prop in schema.props}


# =============================================================================
# Repeatable Groups
# =============================================================================


def is_numbered_group(group: RepeatableGroup) -> bool:
    return group.is_numbered


def group_item_keys(group: RepeatableGroup, n: int) -> tuple[str, ...]:
    """Prop keys of the n-th (1-based) item of a numbered group."""
    return group.item_keys(n)


def active_item_count(group: RepeatableGroup, props: Mapping[str, str]) -> int:
    """Number of instances of a numbered group to show.

    The highest 1-based instance with any non-empty value, never less than
    one so an empty group still shows a blank first item.
    """
    count = 1
    for n in range(1, group.max_items + 1):
        if any(props.get(key) for key in group.item_keys(n)):
            count = n
    return count


def active_slots(group: RepeatableGroup, props: Mapping[str, str]) -> list[str]:
    """Slots of a non-numbered group that hold a value."""
    return [key for key in group.props_per_item if props.get(key)]


def hidden_slots(group: RepeatableGroup, props: Mapping[str, str]) -> list[str]:
    """Slots of a non-numbered group offered through an add affordance."""
    return [key for key in group.props_per_item if not props.get(key)]


def _group_prop_keys(schema: ComponentSchema) -> set[str]:
    keys: set[str] = set()
    for group in schema.repeatable_groups:
        if group.is_numbered:
            for n in range(1, group.max_items + 1):
                keys.update(group.item_keys(n))
        else:
            keys.update(group.props_per_item)
    return keys


# =============================================================================
# Visibility and Classification
# =============================================================================


def is_prop_visible(
    schema: ComponentSchema,
    prop: PropDefinition,
    props: Mapping[str, str],
    viewport: Viewport = Viewport.DESKTOP,
) -> bool:
    """Apply the ``conditional_on`` rule.

    A toggle controller must resolve to "true"; any other controller must
    resolve to a non-blank value. Props without a controller are visible.
    """
    if not prop.conditional_on:
        return True
    controller = schema.get_prop(prop.conditional_on)
    if controller is None:
        value = props.get(prop.conditional_on)
        return bool(value and value.strip())
    value = resolve_prop(props, controller, viewport)
    if controller.type == PropType.TOGGLE:
        return value == "true"
    return bool(value and value.strip())


def classify_prop_key(schema: ComponentSchema | None, key: str) -> PropKeyKind:
    """Classify a stored key against a schema.

    ``m:`` keys only count as mobile overrides when their base key is a
    responsive prop; anything else the schema does not know is UNKNOWN.
    """
    if schema is None:
        return PropKeyKind.UNKNOWN
    if is_mobile_key(key):
        base = schema.get_prop(key[len(MOBILE_PREFIX) :])
        if base is not None and base.responsive:
            return PropKeyKind.MOBILE
        return PropKeyKind.UNKNOWN
    prop = schema.get_prop(key)
    if prop is not None:
        return PropKeyKind.GROUP if prop.repeatable_group else PropKeyKind.SCHEMA
    if key in _group_prop_keys(schema):
        return PropKeyKind.GROUP
    return PropKeyKind.UNKNOWN


def unknown_prop_keys(component_type: str, props: Iterable[str]) -> list[str]:
    """Stored keys that no schema rule accounts for, in stored order."""
    schema = get_component_schema(component_type)
    return [key for key in props if classify_prop_key(schema, key) == PropKeyKind.UNKNOWN]


# =============================================================================
# Defaults and Export
# =============================================================================


def default_props(schema: ComponentSchema) -> dict[str, str]:
    """Seed props for a newly added component.

    Every prop with a default is seeded with it. Required props without a
    default get a bracketed label placeholder so the component renders
    something visible.
    """
    props: dict[str, str] = {}
    for prop in schema.props:
        if prop.default:
            props[prop.key] = prop.default
        elif prop.required:
            props[prop.key] = f"[{prop.label}]"
    return props


def export_schema_catalog() -> dict[str, Any]:
    """JSON-serializable dump of every registered schema."""
    return {
        "components": [schema.to_dict() for schema in list_component_schemas()],
        "propTypes": [t.value for t in PropType],
        "mobilePrefix": MOBILE_PREFIX,
    }


__all__ = [
    "COMPONENT_REGISTRY",
    "active_item_count",
    "active_slots",
    "classify_prop_key",
    "default_props",
    "export_schema_catalog",
    "get_component_schema",
    "group_item_keys",
    "hidden_slots",
    "is_mobile_key",
    "is_numbered_group",
    "is_prop_visible",
    "list_component_schemas",
    "mobile_key",
    "register_schema",
    "resolve_prop",
    "resolve_props",
    "unknown_prop_keys",
]
