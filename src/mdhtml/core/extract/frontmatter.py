"""Leading `---` delimited key/value front matter"""

import logging


logger = logging.getLogger(__name__)

DELIMITER = "---"


def _first_content_line(lines: list[str]) -> int | None:
    for i, line in enumerate(lines):
        if line.strip():
            return i
    return None


def split_frontmatter(lines: list[str]) -> tuple[dict[str, str], list[str]]:
    """Return (frontmatter, body_lines).

    Front matter is only recognised when the first non-blank line is `---`
    and a closing `---` follows. Otherwise the whole input is body.
    """
    start = _first_content_line(lines)
    if start is None or lines[start].strip() != DELIMITER:
        return {}, lines

    frontmatter: dict[str, str] = {}
    for i in range(start + 1, len(lines)):
        line = lines[i].strip()
        if line == DELIMITER:
            return frontmatter, lines[i + 1:]
        if not line:
            continue
        key, _, value = line.partition(":")
        # duplicate keys: last one wins
        frontmatter[key.strip()] = value.strip()

    logger.warning("Unterminated front matter at line %d; treating document as body", start + 1)
    return {}, lines
