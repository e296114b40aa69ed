"""HTML serialization of parsed block/inline nodes"""

from typing import Iterable

from mdhtml.core.models import (
    BlockNode,
    BoldNode,
    HeadingNode,
    InlineNode,
    ItalicNode,
    LinkNode,
    ParagraphNode,
    TextNode,
)


MAX_HEADING_LEVEL = 6


def render_inline(nodes: Iterable[InlineNode]) -> str:
    """Concatenate inline nodes as HTML. Values are not escaped."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(node.value)
        elif isinstance(node, LinkNode):
            parts.append(f'<a href="{node.href}">{node.text}</a>')
        elif isinstance(node, BoldNode):
            parts.append(f"<strong>{node.value}</strong>")
        elif isinstance(node, ItalicNode):
            parts.append(f"<em>{node.value}</em>")
    return "".join(parts)


def render_block(node: BlockNode) -> str:
    """Render one block as a single newline-terminated line."""
    if isinstance(node, HeadingNode):
        tag = f"h{min(node.level, MAX_HEADING_LEVEL)}"
        return f"<{tag}>{node.value}</{tag}>\n"
    if isinstance(node, ParagraphNode):
        return f"<p>{render_inline(node.value)}</p>\n"
    raise TypeError(f"Unsupported block node: {type(node).__name__}")


def render(blocks: Iterable[BlockNode]) -> str:
    """Render a sequence of block nodes to an HTML fragment."""
    return "".join(render_block(b) for b in blocks)
