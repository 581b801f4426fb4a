"""Command-line interface for SlideSite.

This module defines the CLI commands using Click framework.

Commands:
- build: Render the slides and make the output relocatable.
- serve: Build, serve the output locally and rebuild on changes.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(version=__version__, prog_name="slidesite")
def cli():
    """SlideSite static slide builder."""


@cli.command()
@click.option("--content-dir", help="Markdown directory (overrides slidesite.yaml)")
@click.option("--theme", help="Theme stylesheet (overrides slidesite.yaml)")
@click.option("--output-dir", help="Output directory (overrides slidesite.yaml)")
def build(content_dir: str | None, theme: str | None, output_dir: str | None):
    """Render the slides into a static site."""
    project_root = Path.cwd()
    from .build import BuildError, build_site
    from .config import load_config

    config = load_config(project_root)
    for key, value in (
        ("content_dir", content_dir),
        ("theme", theme),
        ("output_dir", output_dir),
    ):
        if value is not None:
            config[key] = value

    try:
        result = build_site(project_root, config=config)
    except BuildError as exc:
        _report_build_error(exc, project_root)
        raise SystemExit(1) from None
    click.echo(f"Rewrote {len(result.rewritten)} HTML files in {result.output_dir}")


@cli.command()
@click.option(
    "--port",
    type=int,
    required=False,
    help="Port to run the preview server (overrides slidesite.yaml)",
)
def serve(port: int | None):
    """Serve the built site and rebuild on changes."""
    project_root = Path.cwd()
    from .build import BuildError
    from .server import PreviewServer

    server = PreviewServer(project_root, http_port=port)
    try:
        server.start()
    except BuildError as exc:
        _report_build_error(exc, project_root)
        raise SystemExit(1) from None


def _report_build_error(exc, project_root: Path) -> None:
    """Print a build failure to stderr."""
    try:
        shown = exc.source_path.relative_to(project_root)
    except ValueError:
        shown = exc.source_path
    click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
    click.echo(click.style(f"  File: {shown}", fg="yellow"), err=True)
    click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
    command = getattr(exc, "command", None)
    if command:
        click.echo(click.style(f"  Command: {' '.join(command)}", fg="white"), err=True)


def main():
    """Entry point for the CLI application."""
    cli()
