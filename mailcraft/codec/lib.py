"""Value codecs for CSS-shorthand prop values.

Props are always stored as strings. The visual editor shows some of them in
a friendlier shape (four padding sides, four radius corners, a number plus a
unit) and writes them back as the shortest equivalent CSS shorthand.

The codecs are permissive: a value they do not understand is passed through
unchanged rather than rejected.
"""

import re
from dataclasses import dataclass

_PX_SUFFIX = re.compile(r"px$", re.IGNORECASE)
_NUMERIC = re.compile(r"^\d+(\.\d+)?$")
_UNIT_VALUE = re.compile(r"^(-?\d*\.?\d+)([a-z%]*)$", re.IGNORECASE)


# =============================================================================
# Single dimension
# =============================================================================


def strip_unit(value: str) -> str:
    """Remove a trailing ``px`` for display.

    Args:
        value: Stored value such as "12px".

    Returns:
        The value without its ``px`` suffix. Never used for storage.
    """
    if not value:
        return ""
    return _PX_SUFFIX.sub("", value)


def ensure_unit(value: str) -> str:
    """Normalize a single dimension for storage.

    Bare numbers gain a ``px`` unit, ``"0"`` becomes ``"0px"`` and anything
    non-numeric (percentages, ``auto``, ``em`` values) passes through.

    Args:
        value: Raw user input.

    Returns:
        Normalized dimension, or "" for empty input.
    """
    if not value:
        return ""
    stripped = _PX_SUFFIX.sub("", value.strip()).strip()
    if not stripped:
        return ""
    if stripped == "0":
        return "0px"
    if _NUMERIC.match(stripped):
        return f"{stripped}px"
    return stripped


@dataclass(frozen=True)
class UnitValue:
    """A single dimension split into its number and unit.

    Values that are not numeric keep their raw text in ``number`` with an
    empty ``unit``.
    """

    number: str
    unit: str = ""


def parse_unit(value: str) -> UnitValue:
    """Split a dimension such as "24px" or "1.5em" into number and unit."""
    text = (value or "").strip()
    match = _UNIT_VALUE.match(text)
    if not match:
        return UnitValue(number=text)
    return UnitValue(number=match.group(1), unit=match.group(2).lower())


def serialize_unit(value: UnitValue) -> str:
    """Join a UnitValue back into a stored dimension.

    A number without a unit is treated as pixels.
    """
    if not value.number:
        return ""
    if value.unit:
        return f"{value.number}{value.unit}"
    return ensure_unit(value.number)


# =============================================================================
# Four-sided shorthands
# =============================================================================


@dataclass(frozen=True)
class BoxSides:
    """Padding or margin sides, in CSS order."""

    top: str = ""
    right: str = ""
    bottom: str = ""
    left: str = ""

    def is_empty(self) -> bool:
        return not (self.top or self.right or self.bottom or self.left)


@dataclass(frozen=True)
class CornerRadii:
    """Border radius corners, clockwise from top-left."""

    tl: str = ""
    tr: str = ""
    br: str = ""
    bl: str = ""

    def is_empty(self) -> bool:
        return not (self.tl or self.tr or self.br or self.bl)


def _expand_shorthand(value: str) -> tuple[str, str, str, str]:
    """Expand a 1-4 token CSS shorthand into four positional values."""
    if not value or not value.strip():
        return ("", "", "", "")
    parts = value.split()
    if len(parts) == 1:
        return (parts[0], parts[0], parts[0], parts[0])
    if len(parts) == 2:
        return (parts[0], parts[1], parts[0], parts[1])
    if len(parts) == 3:
        return (parts[0], parts[1], parts[2], parts[1])
    return (parts[0], parts[1], parts[2], parts[3])


def _collapse_shorthand(a: str, b: str, c: str, d: str) -> str:
    """Collapse four positional values into the shortest shorthand."""
    if not (a or b or c or d):
        return ""
    a, b, c, d = (ensure_unit(v) or "0px" for v in (a, b, c, d))
    if a == b == c == d:
        return a
    if a == c and b == d:
        return f"{a} {b}"
    if b == d:
        return f"{a} {b} {c}"
    return f"{a} {b} {c} {d}"


def parse_padding(value: str) -> BoxSides:
    """Parse a padding or margin shorthand into its four sides.

    Example:
        >>> parse_padding("10px 20px")
        BoxSides(top='10px', right='20px', bottom='10px', left='20px')
    """
    return BoxSides(*_expand_shorthand(value))


def serialize_padding(sides: BoxSides) -> str:
    """Serialize four sides to the shortest equivalent shorthand.

    Each side is unit-normalized and empty sides become ``0px``. All-empty
    input yields "" which means unset rather than zero.
    """
    return _collapse_shorthand(sides.top, sides.right, sides.bottom, sides.left)


def parse_radius(value: str) -> CornerRadii:
    """Parse a border-radius shorthand into its four corners."""
    return CornerRadii(*_expand_shorthand(value))


def serialize_radius(corners: CornerRadii) -> str:
    """Serialize four corners to the shortest border-radius shorthand."""
    return _collapse_shorthand(corners.tl, corners.tr, corners.br, corners.bl)


def normalize_padding(value: str) -> str:
    """Rewrite a padding value in its minimal normalized form."""
    return serialize_padding(parse_padding(value))


def normalize_radius(value: str) -> str:
    """Rewrite a radius value in its minimal normalized form."""
    return serialize_radius(parse_radius(value))


__all__ = [
    "BoxSides",
    "CornerRadii",
    "UnitValue",
    "ensure_unit",
    "normalize_padding",
    "normalize_radius",
    "parse_padding",
    "parse_radius",
    "parse_unit",
    "serialize_padding",
    "serialize_radius",
    "serialize_unit",
    "strip_unit",
]
