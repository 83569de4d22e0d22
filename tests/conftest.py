"""
Common test fixtures for the notion_html project.
"""

import pytest
from unittest.mock import MagicMock
from notion_html.api.client import NotionClient


def text_span(content, href=None, **annotations):
    """Build a Notion text rich_text item."""
    return {
        "type": "text",
        "text": {"content": content, "link": {"url": href} if href else None},
        "annotations": {
            "bold": False,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
            **annotations,
        },
        "plain_text": content,
        "href": href,
    }


def block(block_type, payload=None, children=None, block_id="block"):
    """Build a Notion block dict with its payload stored under its type."""
    data = {
        "object": "block",
        "id": block_id,
        "type": block_type,
        "has_children": bool(children),
        block_type: payload if payload is not None else {},
    }
    if children:
        data["children"] = children
    return data


def text_block(block_type, text="", children=None, block_id="block"):
    rich_text = [text_span(text)] if text else []
    return block(
        block_type,
        {"rich_text": rich_text, "color": "default"},
        children=children,
        block_id=block_id,
    )


def paragraph(text="", children=None):
    return text_block("paragraph", text, children)


def bulleted(text, children=None):
    return text_block("bulleted_list_item", text, children)


def numbered(text, children=None):
    return text_block("numbered_list_item", text, children)


@pytest.fixture
def sample_blocks():
    """A small page: heading, paragraph, a nested bulleted list and a toggle."""
    return [
        text_block("heading_1", "Weekly notes"),
        paragraph("Plans for the week."),
        bulleted("Ship release", children=[bulleted("Write changelog")]),
        bulleted("Review PRs"),
        {
            "object": "block",
            "id": "toggle-1",
            "type": "toggle",
            "has_children": True,
            "toggle": {
                "rich_text": [text_span("Details")],
                "children": [paragraph("Hidden text")],
            },
        },
    ]


@pytest.fixture
def mock_sdk():
    """A mocked notion_client.Client serving one page."""
    sdk = MagicMock()
    sdk.search.return_value = {
        "results": [
            {
                "object": "page",
                "id": "page-1",
                "url": "https://www.notion.so/page-1",
                "properties": {
                    "Name": {
                        "type": "title",
                        "title": [{"plain_text": "Weekly notes"}],
                    }
                },
            }
        ],
        "has_more": False,
        "next_cursor": None,
    }
    sdk.pages.retrieve.return_value = sdk.search.return_value["results"][0]

    page_children = [
        {
            "object": "block",
            "id": "b1",
            "type": "paragraph",
            "has_children": False,
            "paragraph": {"rich_text": [text_span("First")]},
        },
        {
            "object": "block",
            "id": "b2",
            "type": "bulleted_list_item",
            "has_children": True,
            "bulleted_list_item": {"rich_text": [text_span("Parent")]},
        },
    ]
    nested_children = [
        {
            "object": "block",
            "id": "b3",
            "type": "bulleted_list_item",
            "has_children": False,
            "bulleted_list_item": {"rich_text": [text_span("Child")]},
        }
    ]

    def list_children(block_id, start_cursor=None):
        response = {"results": [], "has_more": False, "next_cursor": None}
        if block_id == "page-1" and start_cursor is None:
            response.update(results=page_children[:1], has_more=True, next_cursor="c1")
        elif block_id == "page-1":
            response.update(results=page_children[1:])
        elif block_id == "b2":
            response.update(results=nested_children)
        return response

    sdk.blocks.children.list.side_effect = list_children
    return sdk


@pytest.fixture
def notion_client(mock_sdk):
    """Fixture providing a NotionClient backed by the mocked SDK."""
    return NotionClient(token="secret-test-token", client=mock_sdk)
