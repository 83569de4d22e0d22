"""HTTP surface for the renderer."""

import logging
from typing import Any, List
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
from notion_html import __version__
from notion_html.api.client import NotionClient
from notion_html.export import render_document
from notion_html.render import render_blocks

logger = logging.getLogger(__name__)

app = FastAPI(title="notion-html", version=__version__)


class RenderRequest(BaseModel):
    blocks: List[Any]


class RenderResponse(BaseModel):
    html: str


def get_notion_client() -> NotionClient:
    try:
        return NotionClient()
    except ValueError as e:
        logger.error("Notion client unavailable: %s", e)
        raise HTTPException(status_code=503, detail=str(e))


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest):
    """Render an already materialized block tree to an HTML fragment."""
    return RenderResponse(html=render_blocks(request.blocks))


@app.get("/pages/{page_id}/html", response_class=HTMLResponse)
def page_html(page_id: str, client: NotionClient = Depends(get_notion_client)):
    """Fetch a page from Notion and return it as an HTML document."""
    page_content = client.get_page_content(page_id)
    if page_content is None:
        raise HTTPException(status_code=404, detail=f"Page {page_id} not found")
    return HTMLResponse(render_document(page_content))


def run(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
