"""Inline rich text rendering.

Turns a Notion ``rich_text`` array into an HTML string. Text spans are
escaped once, newlines become ``<br>``, and annotations are applied in a
fixed nesting order no matter how they are listed on the input.
"""

import logging
from typing import Any, Iterable, List, Optional
from pydantic import ValidationError
from notion_html.api.models import Annotations, DateMention, RichTextSpan

logger = logging.getLogger(__name__)

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

BACKGROUND_SUFFIX = "_background"

# Innermost first.
ANNOTATION_TAGS = [
    ("bold", "strong"),
    ("italic", "em"),
    ("underline", "u"),
    ("strikethrough", "s"),
    ("code", "code"),
]


def escape_html(text: Any) -> str:
    """Escape the five markup-significant characters."""
    if text is None:
        return ""
    return str(text).translate(_ESCAPES)


def style_for_color(color: Optional[str]) -> Optional[str]:
    """Map a Notion color token to an inline CSS declaration."""
    if not color or color == "default":
        return None
    if color.endswith(BACKGROUND_SUFFIX):
        return f"background-color: {color[: -len(BACKGROUND_SUFFIX)]}"
    return f"color: {color}"


def format_text(content: str, annotations: Annotations) -> str:
    """Wrap already-escaped content in its annotation tags."""
    for flag, tag in ANNOTATION_TAGS:
        if getattr(annotations, flag):
            content = f"<{tag}>{content}</{tag}>"

    style = style_for_color(annotations.color)
    if style:
        content = f'<span style="{escape_html(style)}">{content}</span>'
    return content


def _render_text(span: RichTextSpan) -> str:
    content = span.text.content if span.text else span.plain_text
    content = escape_html(content).replace("\n", "<br>")
    content = format_text(content, span.annotations)

    url = span.link_url
    if url:
        return (
            f'<a href="{escape_html(url)}" target="_blank" '
            f'rel="noopener noreferrer">{content}</a>'
        )
    return content


def _render_mention(span: RichTextSpan) -> str:
    mention = span.mention or {}
    if mention.get("type") == "date":
        try:
            date = DateMention.model_validate(mention.get("date"))
        except ValidationError as e:
            logger.warning("Invalid date mention, rendering as text: %s", e)
        else:
            return (
                f'<time datetime="{escape_html(date.start)}">'
                f"{escape_html(span.plain_text)}</time>"
            )
    return f"<span>{escape_html(span.plain_text)}</span>"


def _render_equation(span: RichTextSpan) -> str:
    expression = span.equation.expression if span.equation else ""
    return (
        f'<span class="equation" data-equation="{escape_html(expression)}">'
        f"{escape_html(span.plain_text)}</span>"
    )


def render_span(span: RichTextSpan) -> str:
    if span.type == "text":
        return _render_text(span)
    if span.type == "mention":
        return _render_mention(span)
    if span.type == "equation":
        return _render_equation(span)
    # Unknown span kinds pass their fallback through untouched.
    return span.plain_text or ""


def _as_span(item: Any) -> Optional[RichTextSpan]:
    if isinstance(item, RichTextSpan):
        return item
    try:
        return RichTextSpan.model_validate(item)
    except ValidationError as e:
        logger.warning("Skipping invalid rich text span: %s", e)
        return None


def render_rich_text(spans: Any) -> str:
    """Render a rich text array into one inline HTML string."""
    if not isinstance(spans, (list, tuple)):
        return ""

    parts: List[str] = []
    for item in spans:
        span = _as_span(item)
        if span is not None:
            parts.append(render_span(span))
    return "".join(parts)


def plain_text(spans: Iterable[Any]) -> str:
    """Concatenate the plain text of a rich text array."""
    parts = []
    for item in spans or []:
        if isinstance(item, RichTextSpan):
            parts.append(item.plain_text)
        elif isinstance(item, dict):
            parts.append(str(item.get("plain_text") or ""))
    return "".join(parts)
