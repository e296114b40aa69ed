"""Page templating, blog header and blog index generation"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from mdhtml.core.models import Document
from mdhtml.core.render import render


BLOG_DIR = "blog"
LATE_KEYS = ("content",)


@dataclass(frozen=True)
class BlogEntry:
    title: str
    date: str
    path: str                       # site-absolute href, e.g. /blog/post.html


def render_template(template: str, **context: str) -> str:
    """Replace `{{key}}` placeholders; `content` is substituted last."""
    output = template
    for key, value in context.items():
        if key in LATE_KEYS:
            continue
        output = output.replace(f"{{{{{key}}}}}", value)
    for key in LATE_KEYS:
        if key in context:
            output = output.replace(f"{{{{{key}}}}}", context[key])
    return output


def page_title(site_title: str, title: str | None = None) -> str:
    return f"{site_title} - {title}" if title else site_title


def is_blog_page(rel_path: PurePosixPath) -> bool:
    return len(rel_path.parts) > 1 and rel_path.parts[0] == BLOG_DIR


def render_page(
    template: str,
    doc: Document,
    rel_path: PurePosixPath,
    site_title: str,
    ) -> tuple[str, BlogEntry | None]:
    """Render a parsed document into the page template.

    rel_path is the output path relative to the site root (`.html` suffix).
    Pages under blog/ get a `date: title` header and yield a BlogEntry for
    the index; other pages return None as the entry.
    """
    context = dict(doc.frontmatter)
    if "title" in doc.frontmatter:
        context["title"] = page_title(site_title, doc.frontmatter["title"])

    body = render(doc.content)
    entry = None
    if is_blog_page(rel_path):
        title = doc.frontmatter.get("title", "")
        date = doc.frontmatter.get("date", "")
        body = f"<h2>{date}: {title}</h2>\n{body}"
        entry = BlogEntry(title=title, date=date, path=f"/{rel_path}")

    context["content"] = body
    return render_template(template, **context), entry


def render_index(template: str, entries: list[BlogEntry], site_title: str) -> str:
    """Index page listing blog entries, newest date first."""
    items = "\n".join(
        f'<li><a href="{e.path}">{e.date}: {e.title}</a></li>'
        for e in sorted(entries, key=lambda e: e.date, reverse=True)
    )
    content = f"<h3>blog:</h3>\n<ul>\n{items}\n</ul>\n"
    return render_template(template, title=page_title(site_title), content=content)


def output_path(source_root: Path, source: Path, output_root: Path) -> Path:
    """Mirror source's location under output_root with an .html suffix."""
    return output_root / source.relative_to(source_root).with_suffix(".html")
