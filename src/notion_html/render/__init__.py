from notion_html.render.blocks import render_block
from notion_html.render.inline import escape_html, render_rich_text
from notion_html.render.walker import ListBuffer, flush_list_buffer, render_blocks

__all__ = [
    "ListBuffer",
    "escape_html",
    "flush_list_buffer",
    "render_block",
    "render_blocks",
    "render_rich_text",
]
