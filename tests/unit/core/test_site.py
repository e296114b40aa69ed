"""Unit tests for core/site.py"""

from pathlib import Path, PurePosixPath

from mdhtml.core.parse import parse
from mdhtml.core.site import BlogEntry, output_path, render_index, render_page, render_template


TEMPLATE = "<title>{{title}}</title><main>{{content}}</main>"


def test_render_template_replaces_all_placeholders():
    out = render_template("{{a}} {{b}} {{a}}", a="1", b="2")
    assert out == "1 2 1"


def test_render_template_content_not_re_expanded():
    """Placeholders inside substituted content are left alone."""
    out = render_template("{{content}}|{{title}}", content="{{title}}", title="T")
    assert out == "{{title}}|T"


def test_render_template_unknown_placeholder_kept():
    assert render_template("{{missing}}", title="x") == "{{missing}}"


def test_render_page_regular():
    doc = parse("---\ntitle: About\n---\n# About me")
    html, entry = render_page(TEMPLATE, doc, PurePosixPath("about.html"), "Site")
    assert html == "<title>Site - About</title><main><h1>About me</h1>\n</main>"
    assert entry is None


def test_render_page_fills_other_frontmatter_keys():
    doc = parse("---\nauthor: Agnes\n---\nhi")
    html, _ = render_page("{{author}}:{{content}}", doc, PurePosixPath("a.html"), "Site")
    assert html == "Agnes:<p>hi</p>\n"


def test_render_page_blog_header_and_entry():
    doc = parse("---\ntitle: First\ndate: 2024-03-01\n---\nHello *world*")
    html, entry = render_page(TEMPLATE, doc, PurePosixPath("blog/first.html"), "Site")
    assert html == (
        "<title>Site - First</title>"
        "<main><h2>2024-03-01: First</h2>\n<p>Hello <em>world</em></p>\n</main>"
    )
    assert entry == BlogEntry(title="First", date="2024-03-01", path="/blog/first.html")


def test_render_page_top_level_blog_html_is_not_a_post():
    doc = parse("x")
    _, entry = render_page(TEMPLATE, doc, PurePosixPath("blog.html"), "Site")
    assert entry is None


def test_render_index_sorted_newest_first():
    entries = [
        BlogEntry(title="Old", date="2023-01-01", path="/blog/old.html"),
        BlogEntry(title="New", date="2024-06-01", path="/blog/new.html"),
    ]
    html = render_index(TEMPLATE, entries, "Site")
    assert html == (
        "<title>Site</title><main><h3>blog:</h3>\n<ul>\n"
        '<li><a href="/blog/new.html">2024-06-01: New</a></li>\n'
        '<li><a href="/blog/old.html">2023-01-01: Old</a></li>\n'
        "</ul>\n</main>"
    )


def test_output_path_mirrors_tree():
    assert output_path(Path("content"), Path("content/blog/post.md"), Path("public")) == \
        Path("public/blog/post.html")
