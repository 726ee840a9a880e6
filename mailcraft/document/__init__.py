"""Template document model - parse, serialize and edit email templates.

Example usage:
    >>> from mailcraft.document import parse_template, serialize_template, set_prop
    >>> doc = parse_template(source)
    >>> doc = set_prop(doc, 0, "headline", "Spring Service Event")
    >>> source = serialize_template(doc)
"""

from .edits import (
    SINGLETON_TYPES,
    IndexRemap,
    add_component,
    delete_component,
    duplicate_component,
    move_component,
    remove_prop,
    set_base_prop,
    set_content,
    set_frontmatter,
    set_prop,
)
from .models import ParsedComponent, ParsedTemplate
from .parser import (
    FRONTMATTER_DELIMITER,
    ROOT_TAG,
    TemplateParseError,
    parse_attributes,
    parse_template,
    try_parse_template,
)
from .serializer import (
    COMPONENT_NAMESPACE,
    component_tag,
    format_attribute,
    format_frontmatter_value,
    serialize_component,
    serialize_frontmatter,
    serialize_root_open,
    serialize_template,
)
from .starters import DEFAULT_TITLE, StarterMode, starter_document, starter_template

__all__ = [
    # Models
    "ParsedComponent",
    "ParsedTemplate",
    # Parser
    "FRONTMATTER_DELIMITER",
    "ROOT_TAG",
    "TemplateParseError",
    "parse_attributes",
    "parse_template",
    "try_parse_template",
    # Serializer
    "COMPONENT_NAMESPACE",
    "component_tag",
    "format_attribute",
    "format_frontmatter_value",
    "serialize_component",
    "serialize_frontmatter",
    "serialize_root_open",
    "serialize_template",
    # Edits
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
    # Starters
    "DEFAULT_TITLE",
    "StarterMode",
    "starter_document",
    "starter_template",
]
