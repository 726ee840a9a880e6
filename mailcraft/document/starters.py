"""Starter templates for new documents.

Starters are built as documents and serialized, so a freshly created
template is already in canonical form.
"""

from enum import Enum

from .models import ParsedComponent, ParsedTemplate
from .serializer import serialize_template

DEFAULT_TITLE = "Untitled Template"
_ACCENT = "#4f46e5"


class StarterMode(str, Enum):
    """Editor mode a starter is tailored for."""

    VISUAL = "visual"
    CODE = "code"


def _button(prefix: str, text: str) -> dict[str, str]:
    return {
        f"{prefix}-text": text,
        f"{prefix}-url": "#",
        f"{prefix}-bg-color": _ACCENT,
        f"{prefix}-text-color": "#ffffff",
        f"{prefix}-radius": "8px",
    }


def _visual_components() -> list[ParsedComponent]:
    return [
        ParsedComponent("header"),
        ParsedComponent(
            "hero",
            {
                "headline": "Your Headline Goes Here",
                "subheadline": "Add a brief description that captures your audience's attention.",
                "fallback-bg": "#1a1a2e",
                "headline-color": "#ffffff",
                "subheadline-color": "#e0e0e0",
                "hero-height": "420px",
                "text-align": "center",
                "content-valign": "middle",
                **_button("primary-button", "Get Started"),
            },
        ),
        ParsedComponent("spacer", {"size": "40px"}),
        ParsedComponent(
            "copy",
            {
                "greeting": "Hi {{contact.first_name}},",
                "body": "Thank you for being a valued member of our community.",
                "align": "center",
                "padding": "20px 40px",
            },
        ),
        ParsedComponent("spacer", {"size": "24px"}),
        ParsedComponent(
            "features",
            {
                "section-title": "What We Offer",
                "feature1": "Quality Service",
                "feature1-desc": "Exceptional quality in everything we do.",
                "feature2": "Expert Team",
                "feature2-desc": "An experienced team here to help you reach your goals.",
                "feature3": "Fast Results",
                "feature3-desc": "The results you need, quickly and efficiently.",
                "variant": "icon",
                "accent-color": _ACCENT,
                "padding": "20px 40px",
            },
        ),
        ParsedComponent("spacer", {"size": "24px"}),
        ParsedComponent(
            "cta",
            {
                **_button("button", "Learn More"),
                "section-padding": "20px 40px",
                "align": "center",
            },
        ),
        ParsedComponent("spacer", {"size": "40px"}),
        ParsedComponent("footer"),
    ]


def _code_components() -> list[ParsedComponent]:
    return [
        ParsedComponent("header"),
        ParsedComponent("spacer", {"size": "24px"}),
        ParsedComponent(
            "copy",
            {
                "greeting": "Hi {{contact.first_name}},",
                "body": "Thank you for being part of our community.",
                "align": "left",
                "padding": "20px 40px",
            },
        ),
        ParsedComponent("divider", {"color": "#e5e7eb", "padding": "0 40px"}),
        ParsedComponent(
            "copy",
            {
                "body": "Add the main content of your email here.",
                "align": "left",
                "padding": "20px 40px",
            },
        ),
        ParsedComponent(
            "cta",
            {
                **_button("button", "Take Action"),
                "section-padding": "20px 40px",
                "align": "center",
            },
        ),
        ParsedComponent("spacer", {"size": "24px"}),
        ParsedComponent("footer"),
    ]


def starter_document(title: str = DEFAULT_TITLE, mode: StarterMode = StarterMode.VISUAL) -> ParsedTemplate:
    """Build the starter document for an editor mode."""
    components = _code_components() if mode == StarterMode.CODE else _visual_components()
    return ParsedTemplate(frontmatter={"title": title}, base_props={}, components=tuple(components))


def starter_template(title: str = DEFAULT_TITLE, mode: StarterMode = StarterMode.VISUAL) -> str:
    """Serialized starter source for a new template."""
    return serialize_template(starter_document(title, mode))


__all__ = ["DEFAULT_TITLE", "StarterMode", "starter_document", "starter_template"]
