"""Preview synchronization - marker projection, index recovery and live patching.

Example usage:
    >>> from mailcraft.preview import project_for_preview, recover_indices
    >>> markup = project_for_preview(doc, hidden={2})
    >>> html = recover_indices(compiled_html)
"""

from .dom import VOID_TAGS, Element, PreviewDocument
from .patcher import (
    BASE_PROP_SELECTORS,
    PROP_CSS_MAP,
    css_property_for,
    css_value_for,
    patch_base_style,
    patch_live_style,
)
from .projector import (
    END_MARKER,
    MARKER_ATTR,
    has_markers,
    marker_element,
    project_for_preview,
    recover_indices,
    tagged_indices,
)

__all__ = [
    # Projection
    "END_MARKER",
    "MARKER_ATTR",
    "has_markers",
    "marker_element",
    "project_for_preview",
    "recover_indices",
    "tagged_indices",
    # DOM
    "VOID_TAGS",
    "Element",
    "PreviewDocument",
    # Live patching
    "BASE_PROP_SELECTORS",
    "PROP_CSS_MAP",
    "css_property_for",
    "css_value_for",
    "patch_base_style",
    "patch_live_style",
]
