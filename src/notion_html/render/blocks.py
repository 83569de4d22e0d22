import logging
from typing import Any, Callable, Dict, Optional
from pydantic import BaseModel, ValidationError
from notion_html.api.models import (
    PAYLOAD_MODELS,
    BookmarkPayload,
    CalloutPayload,
    ChildPagePayload,
    CodePayload,
    ImagePayload,
    NotionBlock,
    TextPayload,
)
from notion_html.render.inline import escape_html, plain_text, render_rich_text

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_ALT = "Notion image"
DEFAULT_CODE_LANGUAGE = "plaintext"
CALLOUT_STYLE = (
    "border:1px solid #eee; padding: 10px; margin: 10px 0; border-radius: 4px;"
)


def as_block(raw: Any) -> Optional[NotionBlock]:
    """Validate a raw block dict, returning None when it has no usable type."""
    if isinstance(raw, NotionBlock):
        return raw
    if not isinstance(raw, dict) or not raw.get("type"):
        logger.warning("Skipping invalid block: %r", raw)
        return None
    try:
        return NotionBlock.model_validate(raw)
    except ValidationError as e:
        logger.warning("Skipping invalid block %s: %s", raw.get("id"), e)
        return None


def _children_html(block: NotionBlock, payload: BaseModel, nesting_level: int) -> str:
    """Render children attached either on the payload or on the block."""
    if not block.has_children:
        return ""

    # Imported here: the walker calls back into this module.
    from notion_html.render.walker import render_blocks

    nested = getattr(payload, "children", None)
    if isinstance(nested, list):
        return render_blocks(nested, nesting_level + 1)
    if isinstance(block.children, list):
        return render_blocks(block.children, nesting_level + 1)
    logger.debug("Block %s has children but none were attached", block.id)
    return ""


def _paragraph(block, payload: TextPayload, children: str) -> str:
    """Indented children are rendered after the paragraph rather than dropped."""
    content = render_rich_text(payload.rich_text)
    return f"<p>{content or '&nbsp;'}</p>\n{children}"


def _heading(level: int) -> Callable[..., str]:
    def render(block, payload: TextPayload, children: str) -> str:
        return f"<h{level}>{render_rich_text(payload.rich_text)}</h{level}>\n"

    return render


def _list_item(block, payload: TextPayload, children: str) -> str:
    return f"<li>{render_rich_text(payload.rich_text)}{children}</li>\n"


def _image(block, payload: ImagePayload, children: str) -> str:
    src = escape_html(payload.source_url or "")
    caption = render_rich_text(payload.caption)
    alt = escape_html(plain_text(payload.caption)) or DEFAULT_IMAGE_ALT
    return (
        f'<figure><img src="{src}" alt="{alt}">'
        f"<figcaption>{caption}</figcaption></figure>\n"
    )


def _divider(block, payload, children: str) -> str:
    return "<hr />\n"


def _quote(block, payload: TextPayload, children: str) -> str:
    return f"<blockquote>{render_rich_text(payload.rich_text)}{children}</blockquote>\n"


def _code(block, payload: CodePayload, children: str) -> str:
    language = escape_html(payload.language or DEFAULT_CODE_LANGUAGE)
    return (
        f'<pre><code class="language-{language}">'
        f"{render_rich_text(payload.rich_text)}</code></pre>\n"
    )


def _callout(block, payload: CalloutPayload, children: str) -> str:
    icon = payload.icon
    emoji = icon.emoji if icon and icon.type == "emoji" and icon.emoji else ""
    html = f'<div class="callout" style="{CALLOUT_STYLE}">'
    if emoji:
        html += f'<span style="margin-right: 8px;">{escape_html(emoji)}</span>'
    html += f"<span>{render_rich_text(payload.rich_text)}</span>"
    return html + children + "</div>\n"


def _toggle(block, payload: TextPayload, children: str) -> str:
    summary = render_rich_text(payload.rich_text)
    return f"<details><summary>{summary}</summary>{children}</details>\n"


def _child_page(block, payload: ChildPagePayload, children: str) -> str:
    return f'<div class="child-page">Child Page: {escape_html(payload.title)}</div>\n'


def _bookmark(block, payload: BookmarkPayload, children: str) -> str:
    url = escape_html(payload.url)
    return (
        f'<a href="{url}" target="_blank" rel="noopener noreferrer" '
        f'class="bookmark">{url}</a>\n'
    )


RENDERERS: Dict[str, Callable[..., str]] = {
    "paragraph": _paragraph,
    "heading_1": _heading(1),
    "heading_2": _heading(2),
    "heading_3": _heading(3),
    "bulleted_list_item": _list_item,
    "numbered_list_item": _list_item,
    "image": _image,
    "divider": _divider,
    "quote": _quote,
    "code": _code,
    "callout": _callout,
    "toggle": _toggle,
    "child_page": _child_page,
    "bookmark": _bookmark,
}

# Kinds that render their children.
CONTAINER_TYPES = {
    "paragraph",
    "bulleted_list_item",
    "numbered_list_item",
    "quote",
    "callout",
    "toggle",
}


def render_block(raw: Any, nesting_level: int = 0) -> str:
    """Render one block into an HTML fragment.

    Malformed and unsupported blocks render as an empty string and log a
    warning; they never raise.
    """
    block = as_block(raw)
    if block is None:
        return ""

    renderer = RENDERERS.get(block.type)
    if renderer is None:
        logger.warning("Unsupported block type: %s (block %s)", block.type, block.id)
        return ""

    raw_payload = block.payload
    if raw_payload is None:
        logger.warning("Skipping block with missing data for type: %s", block.type)
        return ""

    try:
        payload = PAYLOAD_MODELS[block.type].model_validate(raw_payload)
    except ValidationError as e:
        logger.warning(
            "Skipping block %s with invalid %s data: %s", block.id, block.type, e
        )
        return ""

    children = ""
    if block.type in CONTAINER_TYPES:
        children = _children_html(block, payload, nesting_level)
    return renderer(block, payload, children)
