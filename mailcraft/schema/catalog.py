"""Built-in component catalog.

Every schema is declared once here and registered at import time. Shared
prop families (borders, gradients, buttons, UTM tracking) come from the
builder functions below so components stay consistent with each other.
"""

from .models import (
    ButtonSet,
    ComponentSchema,
    PropDefinition,
    PropType,
    RepeatableGroup,
    SelectOption,
)

# =============================================================================
# Shared Options
# =============================================================================

BORDER_STYLE_OPTIONS = (
    SelectOption("None", "none"),
    SelectOption("Solid", "solid"),
    SelectOption("Dashed", "dashed"),
    SelectOption("Dotted", "dotted"),
)

ALIGN_OPTIONS = (
    SelectOption("Left", "left"),
    SelectOption("Center", "center"),
    SelectOption("Right", "right"),
)

VALIGN_OPTIONS = (
    SelectOption("Top", "top"),
    SelectOption("Middle", "middle"),
    SelectOption("Bottom", "bottom"),
)

GRADIENT_DIRECTION_OPTIONS = tuple(
    SelectOption(f"To {d.title()}", f"to {d}")
    for d in (
        "bottom",
        "top",
        "right",
        "left",
        "bottom right",
        "bottom left",
        "top right",
        "top left",
    )
)

FONT_WEIGHT_OPTIONS = (
    SelectOption("400 (Normal)", "400"),
    SelectOption("500 (Medium)", "500"),
    SelectOption("600 (Semibold)", "600"),
    SelectOption("700 (Bold)", "700"),
    SelectOption("800 (Extra Bold)", "800"),
)

TEXT_TRANSFORM_OPTIONS = (
    SelectOption("None", "none"),
    SelectOption("Uppercase", "uppercase"),
    SelectOption("Lowercase", "lowercase"),
    SelectOption("Capitalize", "capitalize"),
)


# =============================================================================
# Prop Builders
# =============================================================================


def border_props(prefix: str = "border", default_width: str = "0px") -> list[PropDefinition]:
    """All-sides border shorthand followed by per-side overrides."""
    props = [
        PropDefinition(f"{prefix}-color", "Color", PropType.COLOR, half=True, group="border"),
        PropDefinition(
            f"{prefix}-width",
            "Width",
            PropType.UNIT,
            default=default_width,
            half=True,
            group="border",
        ),
        PropDefinition(
            f"{prefix}-style",
            "Style",
            PropType.SELECT,
            options=BORDER_STYLE_OPTIONS,
            half=True,
            group="border",
        ),
    ]
    for side in ("top", "right", "bottom", "left"):
        label = side.title()
        props += [
            PropDefinition(
                f"{prefix}-{side}-color", f"{label} Color", PropType.COLOR, half=True, group="border"
            ),
            PropDefinition(
                f"{prefix}-{side}-width", f"{label} Width", PropType.UNIT, half=True, group="border"
            ),
            PropDefinition(
                f"{prefix}-{side}-style",
                f"{label} Style",
                PropType.SELECT,
                options=BORDER_STYLE_OPTIONS,
                half=True,
                group="border",
            ),
        ]
    return props


def gradient_props() -> list[PropDefinition]:
    """Gradient controls for the background group."""
    return [
        PropDefinition(
            "gradient-type",
            "Gradient",
            PropType.SELECT,
            options=(
                SelectOption("None", "none"),
                SelectOption("Linear", "linear"),
                SelectOption("Radial", "radial"),
            ),
            group="background",
        ),
        PropDefinition(
            "gradient-angle", "Angle", PropType.NUMBER, default="180", half=True, group="background"
        ),
        PropDefinition(
            "gradient-direction",
            "Direction",
            PropType.SELECT,
            options=GRADIENT_DIRECTION_OPTIONS,
            half=True,
            group="background",
        ),
        PropDefinition("gradient-start", "Start", PropType.COLOR, half=True, group="background"),
        PropDefinition(
            "gradient-start-position",
            "Start Location",
            PropType.NUMBER,
            default="0",
            half=True,
            group="background",
        ),
        PropDefinition("gradient-end", "End", PropType.COLOR, half=True, group="background"),
        PropDefinition(
            "gradient-end-position",
            "End Location",
            PropType.NUMBER,
            default="100",
            half=True,
            group="background",
        ),
    ]


def button_props(
    prefix: str,
    button_set: ButtonSet | None = None,
    **defaults: str,
) -> list[PropDefinition]:
    """Full button design props.

    Args:
        prefix: Key prefix such as "button" or "primary-button".
        button_set: Tab the props belong to on two-button components.
        **defaults: Defaults keyed by suffix with underscores, for example
            ``bg_color="#111111"`` for ``<prefix>-bg-color``.
    """

    def prop(suffix: str, label: str, prop_type: PropType, **kwargs) -> PropDefinition:
        default = defaults.get(suffix.replace("-", "_"), kwargs.pop("default", None))
        return PropDefinition(
            f"{prefix}-{suffix}",
            label,
            prop_type,
            default=default,
            group="buttons",
            button_set=button_set,
            **kwargs,
        )

    return [
        prop("text", "Text", PropType.TEXT),
        prop("url", "URL", PropType.URL),
        prop("padding", "Padding", PropType.PADDING, responsive=True),
        prop("bg-color", "Background", PropType.COLOR, half=True, separator=True),
        prop("text-color", "Text Color", PropType.COLOR, half=True),
        prop(
            "border-style",
            "Border Type",
            PropType.SELECT,
            options=BORDER_STYLE_OPTIONS,
            separator=True,
        ),
        prop("border-width", "Border Width", PropType.UNIT, default="0px", half=True),
        prop("border-color", "Border Color", PropType.COLOR, half=True),
        prop("radius", "Border Radius", PropType.RADIUS, responsive=True),
        prop("font-size", "Font Size", PropType.UNIT, half=True, responsive=True, separator=True),
        prop("font-weight", "Font Weight", PropType.SELECT, options=FONT_WEIGHT_OPTIONS, half=True),
        prop("letter-spacing", "Letter Spacing", PropType.UNIT, half=True, responsive=True),
        prop(
            "text-transform",
            "Text Transform",
            PropType.SELECT,
            options=TEXT_TRANSFORM_OPTIONS,
            half=True,
        ),
    ]


def tracking_props(
    prefix: str = "",
    button_set: ButtonSet | None = None,
    conditional_on: str | None = None,
    source: str | None = "email",
    medium: str | None = "lifecycle",
    campaign: str | None = None,
) -> list[PropDefinition]:
    """UTM tracking props, optionally tied to a button tab."""

    def prop(key: str, label: str, default: str | None = None, half: bool = True):
        return PropDefinition(
            f"{prefix}{key}",
            label,
            PropType.TEXT,
            default=default or None,
            half=half,
            group="tracking",
            button_set=button_set,
            conditional_on=conditional_on,
        )

    return [
        prop("utm-source", "UTM Source", source),
        prop("utm-medium", "UTM Medium", medium),
        prop("utm-campaign", "UTM Campaign", campaign, half=False),
        prop("utm-content", "UTM Content"),
        prop("utm-term", "UTM Term"),
    ]


_BUTTON_STYLE = {
    "radius": "0",
    "font_size": "12px",
    "font_weight": "700",
    "letter_spacing": "2px",
    "text_transform": "uppercase",
}


# =============================================================================
# Component Schemas
# =============================================================================

HEADER = ComponentSchema(
    name="header",
    label="Header",
    icon="HeaderIcon",
    props=(
        PropDefinition(
            "logo-url",
            "Logo",
            PropType.IMAGE,
            default="{{custom_values.logo_url}}",
            group="background",
        ),
        PropDefinition(
            "logo-alt", "ALT", PropType.TEXT, default="{{location.name}}", group="background"
        ),
        PropDefinition(
            "link-url",
            "Link URL",
            PropType.URL,
            default="{{custom_values.website_url}}",
            group="background",
        ),
        PropDefinition("bg-color", "Background", PropType.COLOR, default="#ffffff", group="background"),
        PropDefinition(
            "align",
            "Alignment",
            PropType.SELECT,
            default="center",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "logo-width", "Logo Width", PropType.UNIT, default="200px", group="layout", responsive=True
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="35px", group="layout", responsive=True
        ),
        PropDefinition(
            "border-radius",
            "Border Radius",
            PropType.RADIUS,
            default="0",
            group="border",
            responsive=True,
        ),
    ),
)

HERO = ComponentSchema(
    name="hero",
    label="Hero Banner",
    icon="PhotoIcon",
    props=(
        PropDefinition("eyebrow", "Eyebrow", PropType.TEXT, default="Service Event", group="text"),
        PropDefinition(
            "headline",
            "Headline",
            PropType.TEXT,
            default="Your Vehicle Deserves the Best",
            group="text",
            required=True,
        ),
        PropDefinition(
            "subheadline",
            "Subheadline",
            PropType.TEXTAREA,
            default="Schedule your next service with confidence.",
            group="text",
        ),
        PropDefinition(
            "eyebrow-size",
            "Eyebrow Size",
            PropType.UNIT,
            half=True,
            group="text",
            responsive=True,
            separator=True,
        ),
        PropDefinition(
            "eyebrow-color",
            "Eyebrow Color",
            PropType.COLOR,
            default="rgba(255,255,255,0.72)",
            half=True,
            group="text",
        ),
        PropDefinition(
            "headline-size", "Headline Size", PropType.UNIT, half=True, group="text", responsive=True
        ),
        PropDefinition(
            "headline-color",
            "Headline Color",
            PropType.COLOR,
            default="#ffffff",
            half=True,
            group="text",
        ),
        PropDefinition(
            "subheadline-size", "Sub Size", PropType.UNIT, half=True, group="text", responsive=True
        ),
        PropDefinition(
            "subheadline-color",
            "Sub Color",
            PropType.COLOR,
            default="rgba(255,255,255,0.88)",
            half=True,
            group="text",
        ),
        PropDefinition(
            "bg-image",
            "Background Image",
            PropType.IMAGE,
            default="https://images.unsplash.com/photo-1492144534655-ae79c964c9d7?w=1200",
            group="background",
        ),
        PropDefinition(
            "fallback-bg", "Fallback Color", PropType.COLOR, default="#111111", group="background"
        ),
        PropDefinition(
            "overlay-opacity",
            "Image Overlay Opacity",
            PropType.NUMBER,
            default="45",
            placeholder="0-100",
            group="background",
        ),
        *gradient_props(),
        *button_props(
            "primary-button",
            ButtonSet.PRIMARY,
            text="Schedule Service",
            url="{{custom_values.service_scheduler_url}}",
            padding="16px 36px",
            bg_color="#ffffff",
            text_color="#111111",
            **_BUTTON_STYLE,
        ),
        PropDefinition(
            "button-gap",
            "Button Gap",
            PropType.UNIT,
            default="12px",
            group="buttons",
            responsive=True,
            button_set=ButtonSet.SECONDARY,
        ),
        *button_props(
            "secondary-button",
            ButtonSet.SECONDARY,
            text="View Inventory",
            url="{{custom_values.website_url}}",
            padding="16px 36px",
            bg_color="transparent",
            text_color="#ffffff",
            border_style="solid",
            border_width="1px",
            border_color="#ffffff",
            **_BUTTON_STYLE,
        ),
        PropDefinition(
            "hero-height", "Height", PropType.UNIT, default="500px", group="layout", responsive=True
        ),
        PropDefinition(
            "text-align",
            "Text Align",
            PropType.SELECT,
            default="left",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "content-valign",
            "Vertical Align",
            PropType.SELECT,
            default="bottom",
            options=VALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "content-padding",
            "Content Padding",
            PropType.PADDING,
            default="48px",
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "border-radius",
            "Border Radius",
            PropType.RADIUS,
            default="0",
            group="border",
            responsive=True,
        ),
        *border_props(),
        *tracking_props(button_set=ButtonSet.PRIMARY, campaign="service-reminder"),
        *tracking_props(
            prefix="secondary-",
            button_set=ButtonSet.SECONDARY,
            conditional_on="secondary-button-text",
            source=None,
            medium=None,
        ),
    ),
)

SPACER = ComponentSchema(
    name="spacer",
    label="Spacer",
    icon="ArrowsUpDownIcon",
    props=(
        PropDefinition("size", "Height", PropType.UNIT, default="48px", group="layout", responsive=True),
        PropDefinition("bg-color", "Background", PropType.COLOR, default="#ffffff", group="background"),
    ),
)

COPY = ComponentSchema(
    name="copy",
    label="Copy Block",
    icon="TextIcon",
    props=(
        PropDefinition(
            "greeting", "Greeting", PropType.TEXT, default="Hi {{contact.first_name}},", group="text"
        ),
        PropDefinition(
            "body",
            "Body Text",
            PropType.TEXTAREA,
            default="Thank you for choosing us for your vehicle care.",
            group="text",
            required=True,
        ),
        PropDefinition(
            "greeting-size",
            "Greeting Size",
            PropType.UNIT,
            half=True,
            group="text",
            responsive=True,
            separator=True,
        ),
        PropDefinition(
            "greeting-color",
            "Greeting Color",
            PropType.COLOR,
            default="#111111",
            half=True,
            group="text",
        ),
        PropDefinition("body-size", "Body Size", PropType.UNIT, half=True, group="text", responsive=True),
        PropDefinition(
            "body-color", "Body Color", PropType.COLOR, default="#4b5563", half=True, group="text"
        ),
        PropDefinition(
            "line-height", "Line Height", PropType.UNIT, default="1.8", group="text", responsive=True
        ),
        PropDefinition(
            "bg-color", "Background Color", PropType.COLOR, default="#ffffff", group="background"
        ),
        PropDefinition("bg-image", "Background Image", PropType.IMAGE, group="background"),
        PropDefinition(
            "align",
            "Alignment",
            PropType.SELECT,
            default="left",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="0 48px", group="layout", responsive=True
        ),
        *border_props(),
    ),
)

CTA = ComponentSchema(
    name="cta",
    label="Button",
    icon="ButtonIcon",
    props=(
        *button_props(
            "button",
            text="Book Your Appointment",
            url="{{custom_values.service_scheduler_url}}",
            padding="18px 44px",
            bg_color="#111111",
            text_color="#ffffff",
            **_BUTTON_STYLE,
        ),
        PropDefinition(
            "show-phone", "Show Phone", PropType.TOGGLE, default="true", half=True, group="buttons"
        ),
        PropDefinition(
            "phone-text",
            "Phone Text",
            PropType.TEXT,
            default="Or call your Service Advisor",
            half=True,
            group="buttons",
            conditional_on="show-phone",
        ),
        PropDefinition(
            "phone-color",
            "Phone Color",
            PropType.COLOR,
            default="#6b7280",
            half=True,
            group="buttons",
            conditional_on="show-phone",
        ),
        PropDefinition(
            "phone-link-color",
            "Phone Link",
            PropType.COLOR,
            default="#111111",
            half=True,
            group="buttons",
            conditional_on="show-phone",
        ),
        PropDefinition(
            "section-bg-color", "Section BG", PropType.COLOR, default="#ffffff", group="background"
        ),
        PropDefinition(
            "align",
            "Alignment",
            PropType.SELECT,
            default="center",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "section-padding",
            "Padding",
            PropType.PADDING,
            default="0 48px",
            group="layout",
            responsive=True,
        ),
        *border_props("section-border"),
        *tracking_props(campaign="service-reminder"),
    ),
)

_FEATURE_DEFAULTS = (
    ("Factory-Trained Technicians", "Expert service from professionals who know your vehicle."),
    ("Genuine OEM Parts", "High-quality original parts designed for long-term performance."),
    ("Complimentary Inspection", "We check key systems to help prevent surprises."),
    ("Flexible Scheduling", "Choose appointment times that fit your schedule."),
)


def _feature_item_props() -> list[PropDefinition]:
    props = []
    for n, (title, desc) in enumerate(_FEATURE_DEFAULTS, start=1):
        props += [
            PropDefinition(f"feature{n}", "Title", PropType.TEXT, default=title, repeatable_group="feature"),
            PropDefinition(
                f"feature{n}-desc",
                "Description",
                PropType.TEXTAREA,
                default=desc,
                repeatable_group="feature",
            ),
            PropDefinition(
                f"feature{n}-icon", "Icon URL", PropType.IMAGE, half=True, repeatable_group="feature"
            ),
            PropDefinition(
                f"feature{n}-image", "Image URL", PropType.IMAGE, half=True, repeatable_group="feature"
            ),
        ]
    return props


FEATURES = ComponentSchema(
    name="features",
    label="Features Grid",
    icon="GridIcon",
    props=(
        PropDefinition(
            "section-title", "Section Title", PropType.TEXT, default="Why Service With Us", group="text"
        ),
        PropDefinition(
            "title-color", "Title Color", PropType.COLOR, default="#6b7280", half=True, group="text"
        ),
        PropDefinition(
            "text-color", "Text Color", PropType.COLOR, default="#111111", half=True, group="text"
        ),
        PropDefinition(
            "bg-color", "Background", PropType.COLOR, default="#ffffff", half=True, group="background"
        ),
        PropDefinition(
            "card-bg-color", "Card BG", PropType.COLOR, default="#f3f4f6", half=True, group="background"
        ),
        PropDefinition(
            "accent-color", "Accent Color", PropType.COLOR, default="#111111", group="background"
        ),
        *gradient_props(),
        PropDefinition(
            "variant",
            "Variant",
            PropType.SELECT,
            default="icon",
            options=(SelectOption("Icon", "icon"), SelectOption("Image", "image")),
            group="layout",
        ),
        PropDefinition(
            "card-radius",
            "Card Border Radius",
            PropType.RADIUS,
            default="0",
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="0 48px", group="layout", responsive=True
        ),
        *border_props(),
        *_feature_item_props(),
    ),
    repeatable_groups=(
        RepeatableGroup(
            key="feature",
            label="Feature",
            props_per_item=("feature{n}", "feature{n}-desc", "feature{n}-icon", "feature{n}-image"),
            max_items=4,
        ),
    ),
)

IMAGE = ComponentSchema(
    name="image",
    label="Image",
    icon="PhotoIcon",
    props=(
        PropDefinition("alt", "Alt Text", PropType.TEXT, group="text"),
        PropDefinition("image", "Image URL", PropType.IMAGE, group="background", required=True),
        PropDefinition(
            "width", "Width", PropType.UNIT, default="600px", half=True, group="layout", responsive=True
        ),
        PropDefinition(
            "max-height", "Max Height", PropType.UNIT, half=True, group="layout", responsive=True
        ),
        PropDefinition("radius", "Border Radius", PropType.RADIUS, group="layout", responsive=True),
        PropDefinition("padding", "Padding", PropType.PADDING, group="layout", responsive=True),
        *border_props(),
    ),
)

DIVIDER = ComponentSchema(
    name="divider",
    label="Divider",
    icon="MinusIcon",
    props=(
        PropDefinition("color", "Color", PropType.COLOR, default="#e5e7eb", group="border"),
        PropDefinition("thickness", "Thickness", PropType.UNIT, default="1px", half=True, group="border"),
        PropDefinition(
            "style",
            "Style",
            PropType.SELECT,
            options=BORDER_STYLE_OPTIONS[1:],
            half=True,
            group="border",
        ),
        PropDefinition("bg-color", "Background", PropType.COLOR, default="#ffffff", group="background"),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="0 48px", group="layout", responsive=True
        ),
        PropDefinition("margin", "Margin", PropType.PADDING, default="0", group="layout", responsive=True),
    ),
)

TESTIMONIAL = ComponentSchema(
    name="testimonial",
    label="Testimonial",
    icon="ChatBubbleLeftIcon",
    props=(
        PropDefinition(
            "quote",
            "Quote",
            PropType.TEXTAREA,
            default="Exceptional service every time.",
            group="text",
            required=True,
        ),
        PropDefinition("author", "Author", PropType.TEXT, default="Sarah M.", half=True, group="text"),
        PropDefinition(
            "source", "Source", PropType.TEXT, default="Google Review", half=True, group="text"
        ),
        PropDefinition(
            "quote-color",
            "Quote Color",
            PropType.COLOR,
            default="#111111",
            half=True,
            group="text",
            separator=True,
        ),
        PropDefinition(
            "author-color", "Author Color", PropType.COLOR, default="#111111", half=True, group="text"
        ),
        PropDefinition("source-color", "Source Color", PropType.COLOR, default="#6b7280", group="text"),
        PropDefinition(
            "bg-color", "Background", PropType.COLOR, default="#f3f4f6", half=True, group="background"
        ),
        PropDefinition(
            "accent-color", "Accent", PropType.COLOR, default="#111111", half=True, group="background"
        ),
        *gradient_props(),
        PropDefinition(
            "align",
            "Alignment",
            PropType.SELECT,
            default="center",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "radius", "Border Radius", PropType.RADIUS, default="0", group="layout", responsive=True
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="32px", group="layout", responsive=True
        ),
        *border_props("border", "0.5px"),
    ),
)

VEHICLE_CARD = ComponentSchema(
    name="vehicle-card",
    label="Vehicle Card",
    icon="CarIcon",
    props=(
        PropDefinition(
            "show-stats", "Show Stats", PropType.TOGGLE, default="true", group="stats"
        ),
        PropDefinition(
            "stat-1-label", "Stat 1 Label", PropType.TEXT, default="Last Service", half=True, group="stats"
        ),
        PropDefinition(
            "stat-1-value",
            "Stat 1 Value",
            PropType.TEXT,
            default="{{contact.last_service_date}}",
            half=True,
            group="stats",
        ),
        PropDefinition(
            "stat-2-label",
            "Stat 2 Label",
            PropType.TEXT,
            default="Current Mileage",
            half=True,
            group="stats",
        ),
        PropDefinition(
            "stat-2-value",
            "Stat 2 Value",
            PropType.TEXT,
            default="{{contact.vehicle_mileage}} mi",
            half=True,
            group="stats",
        ),
        PropDefinition(
            "stat-label-color",
            "Label Color",
            PropType.COLOR,
            default="#6b7280",
            half=True,
            group="stats",
            separator=True,
        ),
        PropDefinition(
            "stat-value-color", "Value Color", PropType.COLOR, default="#111111", half=True, group="stats"
        ),
        PropDefinition(
            "stat-divider-width",
            "Inner Border Width",
            PropType.UNIT,
            default="0.5px",
            half=True,
            group="stats",
        ),
        PropDefinition(
            "stat-divider-color",
            "Inner Border Color",
            PropType.COLOR,
            default="#d1d5db",
            half=True,
            group="stats",
        ),
        PropDefinition("card-label", "Card Label", PropType.TEXT, default="Your Vehicle", group="text"),
        *(
            PropDefinition(
                f"vehicle-{field}",
                field.title(),
                PropType.TEXT,
                default=f"{{{{contact.vehicle_{field}}}}}",
                half=True,
                group="text",
            )
            for field in ("year", "make", "model")
        ),
        PropDefinition(
            "label-color",
            "Label Color",
            PropType.COLOR,
            default="#6b7280",
            half=True,
            group="text",
            separator=True,
        ),
        PropDefinition(
            "vehicle-color", "Vehicle Color", PropType.COLOR, default="#111111", half=True, group="text"
        ),
        PropDefinition(
            "section-bg-color",
            "Section BG",
            PropType.COLOR,
            default="#ffffff",
            half=True,
            group="background",
        ),
        PropDefinition(
            "bg-color", "Card BG", PropType.COLOR, default="#f3f4f6", half=True, group="background"
        ),
        PropDefinition(
            "accent-color", "Accent", PropType.COLOR, default="#111111", half=True, group="background"
        ),
        *gradient_props(),
        PropDefinition(
            "radius", "Border Radius", PropType.RADIUS, default="0", group="border", responsive=True
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="0 48px", group="layout", responsive=True
        ),
        *border_props("border", "1px"),
    ),
)

IMAGE_OVERLAY = ComponentSchema(
    name="image-overlay",
    label="Image Overlay",
    icon="PaintBrushIcon",
    props=(
        PropDefinition("heading", "Heading", PropType.TEXT, group="text"),
        PropDefinition("description", "Description", PropType.TEXTAREA, group="text"),
        PropDefinition(
            "heading-size",
            "Heading Size",
            PropType.UNIT,
            half=True,
            group="text",
            responsive=True,
            separator=True,
        ),
        PropDefinition("heading-color", "Heading Color", PropType.COLOR, half=True, group="text"),
        PropDefinition(
            "image", "Background Image", PropType.IMAGE, group="background", required=True
        ),
        PropDefinition(
            "overlay",
            "Overlay Preset",
            PropType.SELECT,
            options=tuple(
                SelectOption(level.title(), level) for level in ("light", "medium", "dark", "heavy")
            ),
            group="background",
        ),
        *button_props("button"),
        PropDefinition(
            "align", "Alignment", PropType.SELECT, options=ALIGN_OPTIONS, group="layout", responsive=True
        ),
        PropDefinition(
            "content-padding", "Content Padding", PropType.PADDING, group="layout", responsive=True
        ),
        *border_props(),
        *tracking_props(),
    ),
)

IMAGE_CARD_OVERLAY = ComponentSchema(
    name="image-card-overlay",
    label="Image Card Overlay",
    icon="RectangleGroupIcon",
    props=(
        PropDefinition("eyebrow", "Eyebrow", PropType.TEXT, group="text"),
        PropDefinition("headline", "Headline", PropType.TEXT, group="text"),
        PropDefinition("body", "Body", PropType.TEXTAREA, group="text"),
        PropDefinition(
            "eyebrow-color", "Eyebrow Color", PropType.COLOR, half=True, group="text", separator=True
        ),
        PropDefinition("headline-color", "Headline Color", PropType.COLOR, half=True, group="text"),
        PropDefinition("body-color", "Body Color", PropType.COLOR, group="text"),
        PropDefinition(
            "background-image",
            "Background Image",
            PropType.IMAGE,
            group="background",
            required=True,
        ),
        PropDefinition("card-background", "Card BG", PropType.COLOR, group="background"),
        *button_props("cta"),
        PropDefinition(
            "card-align",
            "Card Align",
            PropType.SELECT,
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "card-max-width", "Card Max Width", PropType.UNIT, group="layout", responsive=True
        ),
        PropDefinition(
            "card-padding", "Card Padding", PropType.PADDING, group="layout", responsive=True
        ),
        PropDefinition(
            "card-radius", "Card Border Radius", PropType.RADIUS, group="layout", responsive=True
        ),
        *border_props(),
        *tracking_props(),
    ),
)

COUNTDOWN_STAT = ComponentSchema(
    name="countdown-stat",
    label="Countdown Stat",
    icon="CountdownIcon",
    props=(
        PropDefinition(
            "label", "Label", PropType.TEXT, default="Offer Ends In", half=True, group="text"
        ),
        PropDefinition(
            "value", "Value", PropType.TEXT, default="3 DAYS", half=True, group="text", required=True
        ),
        PropDefinition(
            "caption",
            "Caption",
            PropType.TEXT,
            default="Schedule by Friday to save 15%",
            group="text",
        ),
        PropDefinition(
            "value-size",
            "Value Size",
            PropType.UNIT,
            half=True,
            group="text",
            responsive=True,
            separator=True,
        ),
        PropDefinition(
            "value-color", "Value Color", PropType.COLOR, default="#111111", half=True, group="text"
        ),
        PropDefinition(
            "label-color", "Label Color", PropType.COLOR, default="#6b7280", half=True, group="text"
        ),
        PropDefinition(
            "caption-color", "Caption Color", PropType.COLOR, default="#4b5563", half=True, group="text"
        ),
        PropDefinition("bg-color", "Background", PropType.COLOR, default="#f3f4f6", group="background"),
        *gradient_props(),
        PropDefinition(
            "align",
            "Alignment",
            PropType.SELECT,
            default="center",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "radius", "Border Radius", PropType.RADIUS, default="0", group="layout", responsive=True
        ),
        PropDefinition(
            "padding", "Padding", PropType.PADDING, default="28px 32px", group="layout", responsive=True
        ),
        *border_props(),
    ),
)

SPLIT = ComponentSchema(
    name="split",
    label="Split Section",
    icon="SplitIcon",
    props=(
        PropDefinition("eyebrow", "Eyebrow", PropType.TEXT, default="Service Spotlight", group="text"),
        PropDefinition(
            "headline",
            "Headline",
            PropType.TEXT,
            default="Keep Your Vehicle Ready for Every Mile",
            group="text",
            required=True,
        ),
        PropDefinition(
            "description",
            "Description",
            PropType.TEXTAREA,
            default="Our certified team delivers fast, transparent service tailored to your vehicle.",
            group="text",
        ),
        PropDefinition(
            "eyebrow-size",
            "Eyebrow Size",
            PropType.UNIT,
            half=True,
            group="text",
            responsive=True,
            separator=True,
        ),
        PropDefinition(
            "eyebrow-color", "Eyebrow Color", PropType.COLOR, default="#6b7280", half=True, group="text"
        ),
        PropDefinition(
            "headline-size", "Headline Size", PropType.UNIT, half=True, group="text", responsive=True
        ),
        PropDefinition(
            "headline-color",
            "Headline Color",
            PropType.COLOR,
            default="#111111",
            half=True,
            group="text",
        ),
        PropDefinition(
            "description-size", "Desc Size", PropType.UNIT, half=True, group="text", responsive=True
        ),
        PropDefinition(
            "description-color",
            "Desc Color",
            PropType.COLOR,
            default="#4b5563",
            half=True,
            group="text",
        ),
        PropDefinition(
            "image",
            "Image",
            PropType.IMAGE,
            default="https://images.unsplash.com/photo-1486262715619-67b85e0b08d3?w=1200",
            group="background",
            required=True,
        ),
        PropDefinition(
            "image-alt", "Image Alt Text", PropType.TEXT, default="Service bay", group="background"
        ),
        PropDefinition(
            "image-fit",
            "Image Fit",
            PropType.SELECT,
            default="cover",
            options=(SelectOption("Auto", "auto"), SelectOption("Cover", "cover")),
            group="background",
        ),
        PropDefinition(
            "image-position",
            "Image Position",
            PropType.TEXT,
            default="center center",
            placeholder="center center",
            group="background",
        ),
        PropDefinition(
            "bg-color",
            "Section Background",
            PropType.COLOR,
            default="#ffffff",
            half=True,
            group="background",
        ),
        PropDefinition(
            "text-bg-color",
            "Text Column BG",
            PropType.COLOR,
            default="#f9fafb",
            half=True,
            group="background",
        ),
        *button_props(
            "primary-button",
            ButtonSet.PRIMARY,
            text="Schedule Service",
            url="{{custom_values.service_scheduler_url}}",
            padding="14px 28px",
            bg_color="#111111",
            text_color="#ffffff",
            **_BUTTON_STYLE,
        ),
        PropDefinition(
            "button-gap",
            "Button Gap",
            PropType.UNIT,
            default="12px",
            group="buttons",
            responsive=True,
            button_set=ButtonSet.SECONDARY,
        ),
        *button_props(
            "secondary-button",
            ButtonSet.SECONDARY,
            text="Learn More",
            url="{{custom_values.website_url}}",
            padding="14px 28px",
            bg_color="transparent",
            text_color="#111111",
            border_style="solid",
            border_width="1px",
            border_color="#111111",
            **_BUTTON_STYLE,
        ),
        PropDefinition(
            "image-side",
            "Image Side",
            PropType.SELECT,
            default="left",
            options=ALIGN_OPTIONS[::2],
            group="layout",
        ),
        PropDefinition(
            "text-align",
            "Text Align",
            PropType.SELECT,
            default="left",
            options=ALIGN_OPTIONS,
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "content-valign",
            "Vertical Align",
            PropType.SELECT,
            default="middle",
            options=VALIGN_OPTIONS,
            group="layout",
        ),
        PropDefinition(
            "content-padding",
            "Text Padding",
            PropType.PADDING,
            default="32px",
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "border-radius",
            "Border Radius",
            PropType.RADIUS,
            default="0",
            group="border",
            responsive=True,
        ),
        *border_props(),
        *tracking_props(button_set=ButtonSet.PRIMARY, campaign="service-reminder"),
        *tracking_props(
            prefix="secondary-",
            button_set=ButtonSet.SECONDARY,
            conditional_on="secondary-button-text",
            source=None,
            medium=None,
        ),
    ),
)

_SOCIAL_LINKS = (
    ("facebook-url", "Facebook", "{{custom_values.facebook}}"),
    ("instagram-url", "Instagram", "{{custom_values.instagram}}"),
    ("youtube-url", "YouTube", "{{custom_values.youtube}}"),
    ("linkedin-url", "LinkedIn", None),
    ("tiktok-url", "TikTok", "{{custom_values.tiktok}}"),
    ("x-url", "X (Twitter)", "{{custom_values.x}}"),
)

FOOTER = ComponentSchema(
    name="footer",
    label="Footer",
    icon="FooterIcon",
    props=(
        PropDefinition(
            "dealer-name", "Business Name", PropType.TEXT, default="{{location.name}}", group="text"
        ),
        PropDefinition(
            "text-color", "Text Color", PropType.COLOR, default="#bdbdbd", half=True, group="text"
        ),
        PropDefinition(
            "dealer-name-color", "Name Color", PropType.COLOR, default="#ffffff", half=True, group="text"
        ),
        PropDefinition(
            "link-color", "Link Color", PropType.COLOR, default="#bdbdbd", half=True, group="text"
        ),
        PropDefinition(
            "phone-color", "Phone Color", PropType.COLOR, default="#ffffff", half=True, group="text"
        ),
        PropDefinition(
            "copyright-color",
            "Copyright Color",
            PropType.COLOR,
            default="rgba(255,255,255,0.4)",
            group="text",
            separator=True,
        ),
        PropDefinition(
            "logo-url",
            "Logo",
            PropType.IMAGE,
            default="{{custom_values.logo_url}}",
            group="background",
        ),
        PropDefinition(
            "bg-color", "Background", PropType.COLOR, default="#111111", half=True, group="background"
        ),
        PropDefinition(
            "icon-color", "Icon Color", PropType.COLOR, default="#bdbdbd", half=True, group="background"
        ),
        PropDefinition(
            "variant",
            "Style",
            PropType.SELECT,
            default="dealer",
            options=(SelectOption("Dealer", "dealer"), SelectOption("Brand", "brand")),
            group="layout",
        ),
        PropDefinition(
            "logo-width", "Logo Width", PropType.UNIT, default="220px", group="layout", responsive=True
        ),
        PropDefinition(
            "container-padding",
            "Padding",
            PropType.PADDING,
            default="48px 40px",
            group="layout",
            responsive=True,
        ),
        PropDefinition(
            "divider-color", "Divider Color", PropType.COLOR, default="#2a2a2a", group="border"
        ),
        *(
            PropDefinition(key, label, PropType.URL, default=default, repeatable_group="social")
            for key, label, default in _SOCIAL_LINKS
        ),
    ),
    repeatable_groups=(
        RepeatableGroup(
            key="social",
            label="Social Link",
            props_per_item=tuple(key for key, _, _ in _SOCIAL_LINKS),
            max_items=6,
        ),
    ),
)

BUILTIN_SCHEMAS: tuple[ComponentSchema, ...] = (
    HEADER,
    HERO,
    SPACER,
    COPY,
    CTA,
    VEHICLE_CARD,
    FEATURES,
    IMAGE,
    IMAGE_OVERLAY,
    IMAGE_CARD_OVERLAY,
    DIVIDER,
    COUNTDOWN_STAT,
    TESTIMONIAL,
    SPLIT,
    FOOTER,
)

__all__ = [
    "ALIGN_OPTIONS",
    "BORDER_STYLE_OPTIONS",
    "BUILTIN_SCHEMAS",
    "border_props",
    "button_props",
    "gradient_props",
    "tracking_props",
]
