"""Line-oriented block parser: headings and blank-line separated paragraphs"""

from mdhtml.core.extract.inline import parse_inline
from mdhtml.core.models import BlockNode, HeadingNode, ParagraphNode


def _heading(line: str) -> HeadingNode:
    """Build a heading from a stripped line starting with '#'."""
    value = line.lstrip("#")
    return HeadingNode(level=len(line) - len(value), value=value.strip())


def _paragraph(lines: list[str]) -> ParagraphNode | None:
    """Join accumulated lines with single spaces; None when nothing is pending."""
    if not lines:
        return None
    text = " ".join(lines).strip()
    return ParagraphNode(value=tuple(parse_inline(text)))


def parse_blocks(lines: list[str]) -> list[BlockNode]:
    """Convert body lines into an ordered list of HeadingNode / ParagraphNode."""
    blocks: list[BlockNode] = []
    pending: list[str] = []

    def _flush() -> None:
        para = _paragraph(pending)
        if para is not None:
            blocks.append(para)
        pending.clear()

    for raw in lines:
        line = raw.strip()
        if not line:
            _flush()
        elif line.startswith("#"):
            _flush()
            blocks.append(_heading(line))
        else:
            pending.append(line)
    _flush()

    return blocks
