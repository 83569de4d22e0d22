from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Annotations(BaseModel):
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    code: bool = False
    color: Optional[str] = "default"


class Link(BaseModel):
    url: str


class TextContent(BaseModel):
    content: str = ""
    link: Optional[Link] = None


class Equation(BaseModel):
    expression: str = ""


class DateMention(BaseModel):
    model_config = ConfigDict(extra="allow")

    start: Optional[str] = None
    end: Optional[str] = None


class RichTextSpan(BaseModel):
    """One formatted run of inline content (Notion rich_text item)."""

    model_config = ConfigDict(extra="allow")

    type: str = "text"
    plain_text: str = ""
    annotations: Annotations = Field(default_factory=Annotations)
    text: Optional[TextContent] = None
    mention: Optional[Dict[str, Any]] = None
    equation: Optional[Equation] = None

    @property
    def link_url(self) -> Optional[str]:
        if self.text and self.text.link:
            return self.text.link.url
        return None


# Kind payloads. Each block kind stores its payload under the key named
# after the kind, e.g. block["paragraph"] for a paragraph block.


class TextPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    # spans are validated one by one when rendered
    rich_text: List[Any] = Field(default_factory=list)
    color: Optional[str] = None
    children: Optional[List[Any]] = None


class CalloutIcon(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    emoji: Optional[str] = None


class CalloutPayload(TextPayload):
    icon: Optional[CalloutIcon] = None


class CodePayload(TextPayload):
    language: Optional[str] = None
    caption: List[Any] = Field(default_factory=list)


class FileSource(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str


class ImagePayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "external"
    external: Optional[FileSource] = None
    file: Optional[FileSource] = None
    caption: List[Any] = Field(default_factory=list)
    children: Optional[List[Any]] = None

    @property
    def source_url(self) -> Optional[str]:
        source = self.external if self.type == "external" else self.file
        return source.url if source else None


class DividerPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    children: Optional[List[Any]] = None


class ChildPagePayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = ""


class BookmarkPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str
    caption: List[Any] = Field(default_factory=list)
    children: Optional[List[Any]] = None


PAYLOAD_MODELS = {
    "paragraph": TextPayload,
    "heading_1": TextPayload,
    "heading_2": TextPayload,
    "heading_3": TextPayload,
    "bulleted_list_item": TextPayload,
    "numbered_list_item": TextPayload,
    "quote": TextPayload,
    "toggle": TextPayload,
    "callout": CalloutPayload,
    "code": CodePayload,
    "image": ImagePayload,
    "divider": DividerPayload,
    "child_page": ChildPagePayload,
    "bookmark": BookmarkPayload,
}

LIST_ITEM_TYPES = ("bulleted_list_item", "numbered_list_item")


class NotionBlock(BaseModel):
    """A single node of a Notion block tree.

    The kind payload is kept as an extra field named after ``type`` so raw
    Notion API JSON validates as-is. Children stay unvalidated so that a
    malformed child only affects its own rendering.
    """

    model_config = ConfigDict(extra="allow")

    id: str = ""
    type: str
    has_children: bool = False
    children: Optional[List[Any]] = None

    @property
    def payload(self) -> Any:
        return (self.model_extra or {}).get(self.type)


class NotionPage(BaseModel):
    id: str
    title: str
    url: str
    type: str


class PageContent(BaseModel):
    id: Optional[str] = None
    title: str
    blocks: List[Any]
