"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdhtml.cli.commands import build_cmd, render_cmd


app = typer.Typer(name="mdhtml", no_args_is_help=True, help="Restricted markdown to HTML static site builder")

app.command(name="build")(build_cmd)
app.command(name="render")(render_cmd)
