"""Inline span parser for **bold**, *italic* and [text](href) spans.

Matchers are tried in fixed priority order (bold, italic, link) at the
current position. Each returns the node plus the index just past the span,
or None. When nothing matches, text is emitted up to the next position
where some matcher succeeds, so every character is consumed exactly once.

`SpanLimits` records the last place each span can still close. With it, a
matcher only scans ahead when it is going to succeed, so a paragraph full
of unclosed `*` or `[` parses in linear time.
"""

from typing import Callable, NamedTuple, Optional

from mdhtml.core.models import BoldNode, InlineNode, ItalicNode, LinkNode, TextNode


Match = Optional[tuple[InlineNode, int]]


class SpanLimits(NamedTuple):
    last_double_star: int   # start of the last "**"
    last_star: int
    last_link_mid: int      # last "](" still followed by a non-empty href and ")"


def scan_limits(text: str) -> SpanLimits:
    last_paren = text.rfind(")")
    return SpanLimits(
        last_double_star=text.rfind("**"),
        last_star=text.rfind("*"),
        last_link_mid=text.rfind("](", 0, max(last_paren - 1, 0)),
    )


def match_bold(text: str, pos: int, limits: SpanLimits | None = None) -> Match:
    """`**value**` with the shortest non-empty value."""
    if not text.startswith("**", pos):
        return None
    if limits is not None and limits.last_double_star < pos + 3:
        return None
    close = text.find("**", pos + 3)
    if close == -1:
        return None
    return BoldNode(value=text[pos + 2:close]), close + 2


def match_italic(text: str, pos: int, limits: SpanLimits | None = None) -> Match:
    """`*value*` with the shortest non-empty value."""
    if not text.startswith("*", pos):
        return None
    if limits is not None and limits.last_star < pos + 2:
        return None
    close = text.find("*", pos + 2)
    if close == -1:
        return None
    return ItalicNode(value=text[pos + 1:close]), close + 1


def match_link(text: str, pos: int, limits: SpanLimits | None = None) -> Match:
    """`[text](href)` with the shortest non-empty text and href."""
    if not text.startswith("[", pos):
        return None
    if limits is not None and limits.last_link_mid < pos + 2:
        return None
    mid = text.find("](", pos + 2)
    if mid == -1:
        return None
    # a later "](" can only push the closing paren further right
    close = text.find(")", mid + 3)
    if close == -1:
        return None
    return LinkNode(text=text[pos + 1:mid], href=text[mid + 2:close]), close + 1


MATCHERS: tuple[Callable[[str, int, Optional[SpanLimits]], Match], ...] = (
    match_bold,
    match_italic,
    match_link,
)


def match_span(text: str, pos: int, limits: SpanLimits | None = None) -> Match:
    """Return the first successful matcher result at pos, in priority order."""
    for matcher in MATCHERS:
        found = matcher(text, pos, limits)
        if found is not None:
            return found
    return None


def find_next_marker(text: str, pos: int, limits: SpanLimits | None = None) -> int:
    """Index of the next span start after pos that actually matches, else -1."""
    if limits is None:
        limits = scan_limits(text)
    for i in range(pos + 1, len(text)):
        if text[i] in "*[" and match_span(text, i, limits) is not None:
            return i
    return -1


def parse_inline(text: str) -> list[InlineNode]:
    """Split flattened paragraph text into a gapless list of inline nodes."""
    limits = scan_limits(text)
    nodes: list[InlineNode] = []
    pos = 0
    while pos < len(text):
        found = match_span(text, pos, limits)
        if found is not None:
            node, pos = found
            nodes.append(node)
            continue

        nxt = find_next_marker(text, pos, limits)
        end = nxt if nxt != -1 else len(text)
        nodes.append(TextNode(value=text[pos:end]))
        pos = end

    return nodes
