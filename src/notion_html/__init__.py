"""Render Notion block trees to HTML."""

from notion_html.render import render_blocks, render_rich_text

__version__ = "0.1.0"
__all__ = ["render_blocks", "render_rich_text"]
