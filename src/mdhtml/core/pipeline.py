"""Site build orchestration: discover, parse, template, write"""

import logging
from pathlib import Path, PurePosixPath

from mdhtml.core.parse import discover_files, parse_file
from mdhtml.core.site import output_path, render_index, render_page


logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Cannot read template {path}: {e}") from e


def run_build(
    source_dir: Path,
    output_dir: Path,
    template_name: str,
    site_title: str,
    ) -> list[tuple[Path, Path]]:
    """Render every .md file under source_dir into output_dir, then the blog index.

    Returns (source_path, output_path) pairs, the index page last.
    """
    template = _read_template(source_dir / template_name)
    results = []
    entries = []

    for src in discover_files(source_dir):
        dest = output_path(source_dir, src, output_dir)
        rel = PurePosixPath(dest.relative_to(output_dir).as_posix())
        try:
            doc = parse_file(src)
            page, entry = render_page(template, doc, rel, site_title)
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(page, encoding='utf-8')
        except Exception as e:
            raise RuntimeError(f"Failed to build {src}: {e}") from e
        logger.debug("Rendered %s -> %s", src, dest)
        if entry is not None:
            entries.append(entry)
        results.append((src, dest))

    index = output_dir / INDEX_PAGE
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        index.write_text(render_index(template, entries, site_title), encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Failed to write index {index}: {e}") from e
    results.append((source_dir / template_name, index))
    logger.info("Built %d page(s) and index of %d blog post(s)", len(results) - 1, len(entries))
    return results
