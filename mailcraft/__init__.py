"""mailcraft: email template document model and preview synchronization."""

from mailcraft.document import ParsedComponent, ParsedTemplate, parse_template, serialize_template
from mailcraft.preview import project_for_preview, recover_indices
from mailcraft.schema import Viewport, get_component_schema, resolve_prop
from mailcraft.session import EditorSession

__version__ = "0.1.0"

__all__ = [
    # Document
    "ParsedComponent",
    "ParsedTemplate",
    "parse_template",
    "serialize_template",
    # Schema
    "Viewport",
    "get_component_schema",
    "resolve_prop",
    # Preview
    "project_for_preview",
    "recover_indices",
    # Session
    "EditorSession",
]
