"""Markdown source discovery and parse entry points"""

from pathlib import Path

from mdhtml.core.extract.blocks import parse_blocks
from mdhtml.core.extract.frontmatter import split_frontmatter
from mdhtml.core.models import Document


MD_EXTENSIONS = {'.md'}
BOM = "\ufeff"


def parse(text: str) -> Document:
    """Parse markdown text into front matter and block content. Never raises."""
    lines = text.removeprefix(BOM).replace("\r\n", "\n").split("\n")
    frontmatter, body = split_frontmatter(lines)
    return Document(frontmatter=frontmatter, content=tuple(parse_blocks(body)))


def parse_file(path: Path) -> Document:
    return parse(path.read_text(encoding='utf-8'))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)
