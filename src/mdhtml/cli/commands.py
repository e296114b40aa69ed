"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdhtml.config import Settings, load_config
from mdhtml.core.parse import parse_file
from mdhtml.core.pipeline import run_build
from mdhtml.core.render import render


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def build_cmd(
    source: Annotated[Optional[str], typer.Option("--source-dir", help="Directory of .md sources")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="Template file inside the source dir")] = None,
    title: Annotated[Optional[str], typer.Option("--site-title", help="Site title used in page titles")] = None,
    ):
    """Render every markdown page into the template and write the blog index."""
    settings = _settings(overrides={
        "source_dir": source, "output_dir": out, "template": template, "site_title": title,
    })
    source_dir = Path(settings.source_dir)
    output_dir = Path(settings.output_dir)
    if not source_dir.is_dir():
        _fail(f"Source directory not found: {source_dir}")

    try:
        results = run_build(source_dir, output_dir, settings.template, settings.site_title)
    except RuntimeError as e:
        _fail("Build failed", e)
    for src, dest in results:
        typer.echo(f"  {src} -> {dest}")
    typer.echo(f"Built {len(results)} page(s) in {output_dir}/")


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to render")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the parsed document as JSON")] = False,
    ):
    """Print the HTML fragment (or parsed JSON) for a single markdown file."""
    _settings()
    try:
        doc = parse_file(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    if as_json:
        typer.echo(doc.model_dump_json(indent=2))
    else:
        typer.echo(render(doc.content), nl=False)
