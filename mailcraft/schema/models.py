"""Data models for component schemas.

A component schema is static metadata: it describes which props a component
type accepts and how the visual editor should present them. Documents never
embed schemas; they only reference them by type name.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MOBILE_PREFIX = "m:"
ITEM_PLACEHOLDER = "{n}"


class PropType(str, Enum):
    """Editor field types for component props."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    COLOR = "color"
    SELECT = "select"
    TOGGLE = "toggle"
    PADDING = "padding"
    RADIUS = "radius"
    UNIT = "unit"
    IMAGE = "image"
    URL = "url"


class ButtonSet(str, Enum):
    """Button variant a prop belongs to, for components with two buttons."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class Viewport(str, Enum):
    """Active preview width. Mobile enables responsive overrides."""

    DESKTOP = "desktop"
    MOBILE = "mobile"


class PropKeyKind(str, Enum):
    """How a stored prop key relates to its component schema."""

    SCHEMA = "schema"
    GROUP = "group"
    MOBILE = "mobile"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SelectOption:
    """One choice of a select-typed prop."""

    label: str
    value: str


@dataclass(frozen=True)
class PropDefinition:
    """Declaration of a single component prop.

    Attributes:
        key: Attribute name in the template markup.
        label: Human-readable field label.
        type: Editor field type.
        default: Value used when the prop is unset.
        placeholder: Hint text for empty fields.
        options: Choices for select-typed props.
        half: Lay out side-by-side with an adjacent half-width prop.
        group: Visual grouping (text, background, layout, border, ...).
        repeatable_group: Key of the repeatable group owning this prop.
        conditional_on: Prop key whose value gates this prop's visibility.
        button_set: Primary/secondary button tab this prop belongs to.
        responsive: Eligible for an ``m:`` mobile override.
        separator: Draw a divider before this field.
        required: New components are seeded with a placeholder value.
        description: Optional help text.
    """

    key: str
    label: str
    type: PropType
    default: str | None = None
    placeholder: str | None = None
    options: tuple[SelectOption, ...] = ()
    half: bool = False
    group: str | None = None
    repeatable_group: str | None = None
    conditional_on: str | None = None
    button_set: ButtonSet | None = None
    responsive: bool = False
    separator: bool = False
    required: bool = False
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary, omitting unset optional fields."""
        data: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type.value,
        }
        if self.default is not None:
            data["default"] = self.default
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.options:
            data["options"] = [{"label": o.label, "value": o.value} for o in self.options]
        for flag in ("half", "responsive", "separator", "required"):
            if getattr(self, flag):
                data[flag] = True
        if self.group:
            data["group"] = self.group
        if self.repeatable_group:
            data["repeatableGroup"] = self.repeatable_group
        if self.conditional_on:
            data["conditionalOn"] = self.conditional_on
        if self.button_set:
            data["buttonSet"] = self.button_set.value
        if self.description:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class RepeatableGroup:
    """A cluster of props repeated per sub-item.

    Numbered groups use ``{n}`` in their item templates (``feature{n}``);
    groups without the placeholder are flat sets of optional named slots,
    such as social links.
    """

    key: str
    label: str
    props_per_item: tuple[str, ...]
    max_items: int = 1

    @property
    def is_numbered(self) -> bool:
        return any(ITEM_PLACEHOLDER in p for p in self.props_per_item)

    def item_keys(self, n: int) -> tuple[str, ...]:
        """Prop keys of the n-th (1-based) item of a numbered group."""
        return tuple(p.replace(ITEM_PLACEHOLDER, str(n)) for p in self.props_per_item)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "maxItems": self.max_items,
            "propsPerItem": list(self.props_per_item),
        }


@dataclass(frozen=True)
class ComponentSchema:
    """Schema of a component type: its ordered props and repeatable groups."""

    name: str
    label: str
    icon: str
    props: tuple[PropDefinition, ...]
    repeatable_groups: tuple[RepeatableGroup, ...] = field(default_factory=tuple)

    def get_prop(self, key: str) -> PropDefinition | None:
        """Find a declared prop by key."""
        for prop in self.props:
            if prop.key == key:
                return prop
        return None

    def get_group(self, key: str) -> RepeatableGroup | None:
        """Find a repeatable group by key."""
        for group in self.repeatable_groups:
            if group.key == key:
                return group
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert schema to dictionary for catalog export."""
        return {
            "name": self.name,
            "label": self.label,
            "icon": self.icon,
            "props": [p.to_dict() for p in self.props],
            "repeatableGroups": [g.to_dict() for g in self.repeatable_groups],
        }


__all__ = [
    "ITEM_PLACEHOLDER",
    "MOBILE_PREFIX",
    "ButtonSet",
    "ComponentSchema",
    "PropDefinition",
    "PropKeyKind",
    "PropType",
    "RepeatableGroup",
    "SelectOption",
    "Viewport",
]
