import logging
import os
from typing import Any, Dict, List, Optional
import httpx
from dotenv import load_dotenv
from notion_client import APIResponseError, Client
from notion_client.errors import RequestTimeoutError
from notion_client.helpers import iterate_paginated_api
from .models import NotionPage, PageContent

logger = logging.getLogger(__name__)

# API failures plus timeouts and transport errors raised by the SDK
NOTION_ERRORS = (APIResponseError, RequestTimeoutError, httpx.HTTPError)


def _title_from_page(page: Dict[str, Any]) -> str:
    """Find the title property of a page, whatever it is named."""
    for prop in page.get("properties", {}).values():
        if prop.get("type") == "title" and prop.get("title"):
            return "".join(rt.get("plain_text", "") for rt in prop["title"])
    return "Untitled"


class NotionClient:
    """Reads pages from a Notion workspace and materializes their block trees.

    The renderer never talks to Notion itself; this client attaches every
    child block up front so the tree can be rendered without further I/O.
    """

    def __init__(self, token: Optional[str] = None, client: Optional[Client] = None):
        load_dotenv()
        self.token = token or os.getenv("NOTION_TOKEN")
        if not self.token and client is None:
            raise ValueError("NOTION_TOKEN not found in environment variables")
        self.client = client or Client(auth=self.token)

    def _search(self, object_type: str) -> List[Dict[str, Any]]:
        return list(
            iterate_paginated_api(
                self.client.search,
                filter={"property": "object", "value": object_type},
            )
        )

    def list_shared_pages(self) -> List[NotionPage]:
        """List all pages shared with the integration."""
        try:
            return [
                NotionPage(
                    id=page["id"],
                    title=_title_from_page(page),
                    url=page.get("url", ""),
                    type="page",
                )
                for page in self._search("page")
            ]
        except NOTION_ERRORS as e:
            logger.error("Error listing pages: %s", e)
            return []

    def list_shared_databases(self) -> List[NotionPage]:
        """List all databases shared with the integration."""
        try:
            databases = []
            for database in self._search("database"):
                title = "".join(
                    rt.get("plain_text", "") for rt in database.get("title", [])
                )
                databases.append(
                    NotionPage(
                        id=database["id"],
                        title=title or "Untitled",
                        url=database.get("url", ""),
                        type="database",
                    )
                )
            return databases
        except NOTION_ERRORS as e:
            logger.error("Error listing databases: %s", e)
            return []

    def get_block_tree(self, block_id: str) -> List[Dict[str, Any]]:
        """Recursively fetch the children of a block, attaching nested children."""
        blocks = []
        for block in iterate_paginated_api(
            self.client.blocks.children.list, block_id=block_id
        ):
            # child pages are rendered as references, never expanded
            if block.get("has_children") and block.get("type") != "child_page":
                block["children"] = self.get_block_tree(block["id"])
            blocks.append(block)
        return blocks

    def get_page_content(self, page_id: str) -> Optional[PageContent]:
        """Retrieve a page's title and its full block tree."""
        try:
            page = self.client.pages.retrieve(page_id=page_id)
            blocks = self.get_block_tree(page_id)
            return PageContent(id=page_id, title=_title_from_page(page), blocks=blocks)
        except NOTION_ERRORS as e:
            logger.error("Error getting page content for %s: %s", page_id, e)
            return None
