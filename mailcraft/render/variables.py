"""Merge-tag preview variables.

The compiler substitutes ``{{name}}`` tokens with preview values so the
rendered preview shows realistic contact and location data instead of raw
mustache text.
"""

import re
from collections.abc import Mapping

_TOKEN = re.compile(r"\{\{([^}]+)\}\}")

SAMPLE_PREVIEW_VARIABLES: dict[str, str] = {
    "{{unsubscribe_link}}": "https://example.com/unsubscribe",
    "{{message.id}}": "preview-message-id",
    # Contact
    "{{contact.first_name}}": "Alex",
    "{{contact.last_name}}": "Customer",
    "{{contact.full_name}}": "Alex Customer",
    "{{contact.email}}": "alex.customer@example.com",
    "{{contact.phone}}": "(801) 555-0199",
    "{{contact.address1}}": "450 N Main St",
    "{{contact.city}}": "Layton",
    "{{contact.state}}": "UT",
    "{{contact.postal_code}}": "84041",
    "{{contact.country}}": "US",
    "{{contact.vehicle_year}}": "2021",
    "{{contact.vehicle_make}}": "Mazda",
    "{{contact.vehicle_model}}": "CX-5",
    "{{contact.vehicle_mileage}}": "42000",
    # Location
    "{{location.name}}": "Preview Dealer",
    "{{location.email}}": "dealer@example.com",
    "{{location.phone}}": "(801) 555-0100",
    "{{location.address}}": "450 N Main St",
    "{{location.city}}": "Layton",
    "{{location.state}}": "UT",
    "{{location.postal_code}}": "84041",
}


def preview_variable_token(key: str) -> str:
    """Normalize a variable name into its ``{{name}}`` token.

    Example:
        >>> preview_variable_token("contact.first_name")
        '{{contact.first_name}}'
        >>> preview_variable_token("{contact.city}")
        '{{contact.city}}'
    """
    trimmed = key.strip()
    if trimmed.startswith("{{") and trimmed.endswith("}}"):
        return trimmed
    return "{{" + trimmed.lstrip("{").rstrip("}") + "}}"


def build_preview_variables(overrides: Mapping[str, str | None] | None = None) -> dict[str, str]:
    """Sample variables merged with caller overrides.

    Override keys may be bare names or tokens. Empty and None values are
    skipped so they never blank out a sample value.
    """
    values = dict(SAMPLE_PREVIEW_VARIABLES)
    for key, value in (overrides or {}).items():
        if value is None or value == "":
            continue
        values[preview_variable_token(key)] = str(value)
    return values


def find_missing_preview_variables(markup: str, variables: Mapping[str, str]) -> list[str]:
    """Variable names used in ``markup`` that have no non-empty value.

    Template expressions (pipes, calls, block helpers) are not variables and
    are ignored.

    Returns:
        Sorted, de-duplicated names without the braces.
    """
    missing: set[str] = set()
    for match in _TOKEN.finditer(markup):
        name = match.group(1).strip()
        if not name or "|" in name or "(" in name or name == "yield" or name[0] in "#/":
            continue
        if not variables.get("{{" + name + "}}"):
            missing.add(name)
    return sorted(missing)


__all__ = [
    "SAMPLE_PREVIEW_VARIABLES",
    "build_preview_variables",
    "find_missing_preview_variables",
    "preview_variable_token",
]
