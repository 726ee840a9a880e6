"""Value codecs - reversible transforms for CSS dimension props.

Example usage:
    >>> from mailcraft.codec import parse_padding, serialize_padding
    >>> serialize_padding(parse_padding("10 20 10 20"))
    '10px 20px'
"""

from .lib import (
    BoxSides,
    CornerRadii,
    UnitValue,
    ensure_unit,
    normalize_padding,
    normalize_radius,
    parse_padding,
    parse_radius,
    parse_unit,
    serialize_padding,
    serialize_radius,
    serialize_unit,
    strip_unit,
)

__all__ = [
    # Types
    "BoxSides",
    "CornerRadii",
    "UnitValue",
    # Single dimension
    "ensure_unit",
    "strip_unit",
    "parse_unit",
    "serialize_unit",
    # Shorthands
    "parse_padding",
    "serialize_padding",
    "normalize_padding",
    "parse_radius",
    "serialize_radius",
    "normalize_radius",
]
