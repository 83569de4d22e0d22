import logging
import os
import re
from pathlib import Path
from typing import Optional
from notion_html.api.models import PageContent
from notion_html.render import escape_html, render_blocks

logger = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<article>
<h1 class="page-title">{title}</h1>
{body}</article>
</body>
</html>
"""


def render_page(page_content: PageContent) -> str:
    """Render the page body as an HTML fragment."""
    return render_blocks(page_content.blocks)


def render_document(page_content: PageContent) -> str:
    """Wrap the rendered page in a standalone HTML document."""
    return DOCUMENT_TEMPLATE.format(
        title=escape_html(page_content.title), body=render_page(page_content)
    )


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "untitled"


def save_html(page_content: PageContent, output_dir: Optional[str] = None) -> Path:
    """Write the page as an HTML document and return the file path."""
    output_dir = output_dir or os.getenv("NOTION_HTML_OUTPUT_DIR", "html_exports")
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)

    filename = path / f"{slugify(page_content.title)}.html"
    filename.write_text(render_document(page_content), encoding="utf-8")
    logger.info("Saved %s to %s", page_content.title, filename)
    return filename
