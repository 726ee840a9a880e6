"""Component schema registry - prop catalog, resolution and form model.

Example usage:
    >>> from mailcraft.schema import Viewport, get_component_schema, resolve_prop
    >>> schema = get_component_schema("copy")
    >>> padding = schema.get_prop("padding")
    >>> resolve_prop({"m:padding": "0 16px"}, padding, Viewport.MOBILE)
    '0 16px'
"""

from .catalog import BUILTIN_SCHEMAS, border_props, button_props, gradient_props, tracking_props
from .form import FormField, FormRow, FormSection, SectionKind, build_form, chunk_rows
from .lib import (
    COMPONENT_REGISTRY,
    active_item_count,
    active_slots,
    classify_prop_key,
    default_props,
    export_schema_catalog,
    get_component_schema,
    group_item_keys,
    hidden_slots,
    is_mobile_key,
    is_numbered_group,
    is_prop_visible,
    list_component_schemas,
    mobile_key,
    register_schema,
    resolve_prop,
    resolve_props,
    unknown_prop_keys,
)
from .models import (
    ITEM_PLACEHOLDER,
    MOBILE_PREFIX,
    ButtonSet,
    ComponentSchema,
    PropDefinition,
    PropKeyKind,
    PropType,
    RepeatableGroup,
    SelectOption,
    Viewport,
)

__all__ = [
    # Models
    "ButtonSet",
    "ComponentSchema",
    "PropDefinition",
    "PropKeyKind",
    "PropType",
    "RepeatableGroup",
    "SelectOption",
    "Viewport",
    "ITEM_PLACEHOLDER",
    "MOBILE_PREFIX",
    # Registry
    "BUILTIN_SCHEMAS",
    "COMPONENT_REGISTRY",
    "get_component_schema",
    "list_component_schemas",
    "register_schema",
    "export_schema_catalog",
    # Prop builders
    "border_props",
    "button_props",
    "gradient_props",
    "tracking_props",
    # Resolution
    "mobile_key",
    "is_mobile_key",
    "resolve_prop",
    "resolve_props",
    "default_props",
    # Repeatable groups
    "is_numbered_group",
    "group_item_keys",
    "active_item_count",
    "active_slots",
    "hidden_slots",
    # Visibility and classification
    "is_prop_visible",
    "classify_prop_key",
    "unknown_prop_keys",
    # Form model
    "FormField",
    "FormRow",
    "FormSection",
    "SectionKind",
    "build_form",
    "chunk_rows",
]
