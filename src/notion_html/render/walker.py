"""Top-level block tree walker.

Consecutive list items of the same kind are collected into a call-local
``ListBuffer`` and emitted as one ``<ul>`` / ``<ol>`` container.
"""

import logging
from typing import Any, List, Optional
from pydantic import BaseModel, Field
from notion_html.api.models import LIST_ITEM_TYPES
from notion_html.render.blocks import render_block

logger = logging.getLogger(__name__)

LIST_TAGS = {"bulleted_list_item": "ul", "numbered_list_item": "ol"}


class ListBuffer(BaseModel):
    """Either no open list (kind is None) or an open list of one kind."""

    kind: Optional[str] = None
    items: List[Any] = Field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.kind is not None and bool(self.items)

    def reset(self):
        self.kind = None
        self.items = []


def _block_type(raw: Any) -> Optional[str]:
    if isinstance(raw, BaseModel):
        return getattr(raw, "type", None)
    if isinstance(raw, dict):
        return raw.get("type")
    return None


def flush_list_buffer(buffer: ListBuffer, nesting_level: int) -> str:
    """Emit the buffered items as one list container and reset the buffer."""
    if not buffer.is_open:
        return ""

    tag = LIST_TAGS[buffer.kind]
    html = f"<{tag}>\n"
    for item in buffer.items:
        html += render_block(item, nesting_level)
    html += f"</{tag}>\n"

    buffer.reset()
    return html


def render_blocks(blocks: Any, nesting_level: int = 0) -> str:
    """Convert a sequence of Notion blocks to an HTML fragment.

    Args:
        blocks: Block dicts as returned by the Notion API (or NotionBlock
            models), with children already attached.
        nesting_level: Recursion depth, increased by one for child blocks.

    Returns:
        The HTML fragment. Invalid input gives an empty string.
    """
    if not isinstance(blocks, (list, tuple)):
        logger.error(
            "Invalid input: expected a list of blocks, got %s", type(blocks).__name__
        )
        return ""

    html = ""
    buffer = ListBuffer()

    for i, block in enumerate(blocks):
        block_type = _block_type(block)

        if block_type in LIST_ITEM_TYPES:
            if buffer.kind is None:
                buffer.kind = block_type
            elif buffer.kind != block_type:
                html += flush_list_buffer(buffer, nesting_level)
                buffer.kind = block_type
            buffer.items.append(block)

            next_type = _block_type(blocks[i + 1]) if i + 1 < len(blocks) else None
            if next_type not in LIST_ITEM_TYPES:
                html += flush_list_buffer(buffer, nesting_level)
            continue

        html += flush_list_buffer(buffer, nesting_level)
        html += render_block(block, nesting_level)

    html += flush_list_buffer(buffer, nesting_level)
    return html
