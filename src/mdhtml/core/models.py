"""Typed block and inline node models produced by the parser"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextNode(_Node):
    """Plain text, emitted verbatim."""
    type: Literal["text"] = "text"
    value: str


class LinkNode(_Node):
    type: Literal["link"] = "link"
    href: str
    text: str


class BoldNode(_Node):
    type: Literal["bold"] = "bold"
    value: str


class ItalicNode(_Node):
    type: Literal["italic"] = "italic"
    value: str


InlineNode = Annotated[
    Union[TextNode, LinkNode, BoldNode, ItalicNode],
    Field(discriminator="type"),
]


class HeadingNode(_Node):
    """A `#` heading; value is kept verbatim, inline spans are not parsed."""
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, description="Count of leading '#'; may exceed 6")
    value: str


class ParagraphNode(_Node):
    type: Literal["paragraph"] = "paragraph"
    value: tuple[InlineNode, ...] = ()


BlockNode = Annotated[
    Union[HeadingNode, ParagraphNode],
    Field(discriminator="type"),
]


class Document(_Node):
    """Parse result: front matter plus ordered block content.

    frontmatter is stored as a read-only mapping; it serializes as a plain dict.
    """
    frontmatter: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    content: tuple[BlockNode, ...] = ()

    @field_validator("frontmatter", mode="after")
    @classmethod
    def freeze_frontmatter(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("frontmatter")
    def dump_frontmatter(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)
