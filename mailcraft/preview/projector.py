"""Preview projection and index recovery.

Before compiling, the document is serialized with an invisible marker
element in front of every visible component. Compilers keep elements (they
may strip comments), so after compilation each marker still sits in front of
the HTML its component produced. Recovery tags every table row in that span
with the component index and removes the markers.
"""

import logging
import re
from collections.abc import Iterable

from ..document import ParsedTemplate, ROOT_TAG
from ..document.serializer import INDENT, serialize_component, serialize_frontmatter, serialize_root_open

logger = logging.getLogger(__name__)

MARKER_ATTR = "data-tpl"
END_MARKER = "end"

_MARKER = re.compile(
    r"""<div\b[^>]*?\b""" + MARKER_ATTR + r"""\s*=\s*["']?(\d+|""" + END_MARKER + r""")["']?[^>]*>\s*</div\s*>""",
    re.IGNORECASE,
)
_ROW_OPEN = re.compile(r"<tr(\s|>)", re.IGNORECASE)
_TAGGED_ROW = re.compile(r"<tr\b[^>]*?\b" + MARKER_ATTR + r"""\s*=\s*["'](\d+)["']""", re.IGNORECASE)


def marker_element(marker_id: int | str) -> str:
    """Invisible, content-less marker element."""
    return f'<div {MARKER_ATTR}="{marker_id}" style="display:none"></div>'


def project_for_preview(doc: ParsedTemplate, hidden: Iterable[int] = ()) -> str:
    """Serialize a document as compiler input with component markers.

    Args:
        doc: Document to project.
        hidden: Indices of components to leave out of the preview.

    Returns:
        Markup with a marker before each visible component (carrying its
        original index) and a terminal end marker.
    """
    hidden = set(hidden)
    lines = serialize_frontmatter(doc.frontmatter)
    lines.append("")
    lines.append(serialize_root_open(doc.base_props))
    for index, component in enumerate(doc.components):
        if index in hidden:
            continue
        lines.append("")
        lines.append(f"{INDENT}{marker_element(index)}")
        lines.append(serialize_component(component))
    lines.append(f"{INDENT}{marker_element(END_MARKER)}")
    lines.append("")
    lines.append(f"</{ROOT_TAG}>")
    lines.append("")
    return "\n".join(lines)


def recover_indices(html: str) -> str:
    """Tag compiled rows with their component index and drop the markers.

    Every ``<tr`` between a marker and the next marker (or the end of the
    document) gets ``data-tpl="<index>"``. The end marker only closes the
    last span. Without markers the HTML is returned unchanged.
    """
    markers = list(_MARKER.finditer(html))
    if not markers:
        logger.debug("No preview markers found in compiled HTML")
        return html

    parts = [html[: markers[0].start()]]
    for i, marker in enumerate(markers):
        span_end = markers[i + 1].start() if i + 1 < len(markers) else len(html)
        span = html[marker.end() : span_end]
        marker_id = marker.group(1).lower()
        if marker_id != END_MARKER:
            span = _ROW_OPEN.sub(
                lambda m, index=marker_id: f'<tr {MARKER_ATTR}="{index}"{m.group(1)}', span
            )
        parts.append(span)
    return "".join(parts)


def tagged_indices(html: str) -> set[int]:
    """Component indices present as tagged rows in recovered HTML."""
    return {int(m.group(1)) for m in _TAGGED_ROW.finditer(html)}


def has_markers(html: str) -> bool:
    return _MARKER.search(html) is not None


__all__ = [
    "END_MARKER",
    "MARKER_ATTR",
    "has_markers",
    "marker_element",
    "project_for_preview",
    "recover_indices",
    "tagged_indices",
]
