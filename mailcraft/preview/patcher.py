"""Live style patching of the rendered preview.

Small continuous edits (dragging a color picker, nudging a padding) are
applied straight to the preview DOM so they show without a recompile. The
patch is best-effort: the prop is always written to the document first and
the next full compile replaces the patched DOM.
"""

import logging

from ..codec import ensure_unit, normalize_padding, normalize_radius
from ..schema import is_mobile_key
from .dom import Element, PreviewDocument

logger = logging.getLogger(__name__)

# Props that map directly onto one inline CSS property. Composed props
# (border shorthands, gradients) always go through the compiler.
PROP_CSS_MAP: dict[str, str] = {
    # Colors
    "bg-color": "background-color",
    "section-bg-color": "background-color",
    "card-bg-color": "background-color",
    "card-background": "background-color",
    "divider-color": "background-color",
    "button-bg-color": "background-color",
    "primary-button-bg-color": "background-color",
    "secondary-button-bg-color": "background-color",
    "cta-bg-color": "background-color",
    "text-color": "color",
    "link-color": "color",
    "dealer-name-color": "color",
    "phone-color": "color",
    "icon-color": "color",
    "copyright-color": "color",
    "eyebrow-color": "color",
    "headline-color": "color",
    "subheadline-color": "color",
    "body-color": "color",
    "greeting-color": "color",
    "title-color": "color",
    "quote-color": "color",
    "author-color": "color",
    "source-color": "color",
    "button-text-color": "color",
    "primary-button-text-color": "color",
    "secondary-button-text-color": "color",
    "cta-text-color": "color",
    "heading-color": "color",
    "description-color": "color",
    # Spacing
    "padding": "padding",
    "container-padding": "padding",
    "content-padding": "padding",
    "section-padding": "padding",
    "card-padding": "padding",
    # Font
    "greeting-size": "font-size",
    "body-size": "font-size",
    "headline-size": "font-size",
    "subheadline-size": "font-size",
    "eyebrow-size": "font-size",
    "heading-size": "font-size",
    "description-size": "font-size",
    # Radius
    "radius": "border-radius",
    "card-radius": "border-radius",
    "button-radius": "border-radius",
}

BASE_PROP_SELECTORS = ("body-bg", "content-bg")


def css_property_for(prop_key: str) -> str | None:
    """CSS property a prop can be live-patched through.

    Mobile overrides return None: they are applied by media queries in the
    compiled output, not by inline styles.
    """
    if is_mobile_key(prop_key):
        return None
    return PROP_CSS_MAP.get(prop_key)


def css_value_for(css_property: str, value: str) -> str:
    """Normalize a stored prop value for use as an inline CSS value."""
    if css_property == "padding":
        return normalize_padding(value)
    if css_property == "border-radius":
        return normalize_radius(value)
    if css_property == "font-size":
        return ensure_unit(value)
    return value


def patch_live_style(preview: PreviewDocument, index: int, css_property: str, value: str) -> int:
    """Overwrite a CSS property inside one component's rendered rows.

    Every element in the rows tagged ``index`` (the rows themselves and
    their descendants) that already declares ``css_property`` gets the new
    value. The property is never added to other elements, except for the
    fallback: if nothing declares it, it is set on the first direct ``td``
    of the first tagged row.

    Args:
        preview: Parsed preview document.
        index: Component index.
        css_property: CSS property name.
        value: New CSS value.

    Returns:
        Number of elements written.
    """
    rows = preview.rows(index)
    if not rows:
        logger.debug(f"No tagged rows for component {index}")
        return 0

    seen: set[int] = set()
    touched = 0
    for row in rows:
        for el in row.iter():
            if id(el) in seen:
                continue
            seen.add(id(el))
            if el.has_style(css_property):
                el.set_style(css_property, value)
                touched += 1
    if touched:
        return touched

    cell = next((c for c in rows[0].element_children() if c.tag == "td"), None)
    if cell is None:
        return 0
    cell.set_style(css_property, value)
    return 1


def patch_base_style(preview: PreviewDocument, prop_key: str, value: str) -> int:
    """Patch a base layout prop on its wrapper elements.

    ``body-bg`` sets the background of ``body`` and of the outer
    presentation table; ``content-bg`` sets the background of the
    ``.email-container`` table. Other keys are ignored.

    Returns:
        Number of elements written.
    """
    targets: list[Element | None] = []
    if prop_key == "body-bg":
        targets.append(preview.body)
        targets.append(preview.find(lambda el: el.tag == "table" and el.get("role") == "presentation"))
    elif prop_key == "content-bg":
        targets.append(preview.find(lambda el: "email-container" in el.classes))
    else:
        return 0

    touched = 0
    for el in targets:
        if el is not None:
            el.set_style("background-color", value)
            touched += 1
    return touched


__all__ = [
    "BASE_PROP_SELECTORS",
    "PROP_CSS_MAP",
    "css_property_for",
    "css_value_for",
    "patch_base_style",
    "patch_live_style",
]
