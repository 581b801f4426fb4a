"""Site building functionality for SlideSite.

A build is a strict linear sequence; each stage is a precondition for the next
and the first failure aborts the run:

1. Render the slides with the external renderer in static mode.
2. Promote the readme page to the site's index.html.
3. Discover the generated HTML files (top level of the output directory only).
4. Rewrite server-root links in each of those files in place.

Rewrites are not transactional: files fixed up before a failure stay fixed up.

Key functions:
- build_site: Run the whole pipeline for a project.
- postprocess_site: Run stages 2-4 on an already rendered output directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import load_config
from .errors import BuildError, RenderError
from .html_utils import LINK_SUBSTITUTIONS, link_substitutions, rewrite_links
from .protocols import SiteRenderer
from .renderers import RevealMdRenderer

__all__ = [
    "BuildError",
    "BuildResult",
    "RenderError",
    "build_site",
    "discover_html_files",
    "postprocess_site",
    "promote_readme",
    "rewrite_html_file",
]

INDEX_FILENAME = "index.html"


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        output_dir: Directory where the site was built.
        index_path: The site's index.html, promoted from the readme page.
        rewritten: HTML files whose links were rewritten, in processing order.
    """

    output_dir: Path
    index_path: Path
    rewritten: list[Path] = field(default_factory=list)


def build_site(
    project_root: Path,
    renderer: SiteRenderer | None = None,
    config: dict[str, Any] | None = None,
    output_dir_override: Path | None = None,
) -> BuildResult:
    """Build the static slide site.

    Args:
        project_root: Root directory of the project.
        renderer: Renderer to produce the raw HTML; defaults to reveal-md.
        config: Configuration mapping; loaded from slidesite.yaml when omitted.
        output_dir_override: Optional path to write the build output instead
            of the configured output_dir.

    Returns:
        BuildResult describing the finished site.

    Raises:
        BuildError: If any stage fails. A RenderError means no output file
            was touched by the post-processing stages.
    """
    if config is None:
        config = load_config(project_root)
    if renderer is None:
        renderer = RevealMdRenderer(project_root, str(config["renderer"]))

    content_dir = project_root / str(config["content_dir"])
    theme = project_root / str(config["theme"])
    output_dir = output_dir_override or (project_root / str(config["output_dir"]))

    renderer.render(content_dir, output_dir, theme)
    return postprocess_site(output_dir, readme=str(config["readme"]))


def postprocess_site(output_dir: Path, readme: str = "README") -> BuildResult:
    """Make a rendered output directory relocatable.

    Args:
        output_dir: Directory holding the renderer's output.
        readme: Stem of the readme document whose page becomes the index.

    Returns:
        BuildResult describing the finished site.
    """
    index_path = promote_readme(output_dir, readme)
    substitutions = link_substitutions(readme)
    rewritten = []
    for path in discover_html_files(output_dir):
        rewrite_html_file(path, substitutions)
        rewritten.append(path)
    return BuildResult(output_dir=output_dir, index_path=index_path, rewritten=rewritten)


def promote_readme(output_dir: Path, readme: str = "README") -> Path:
    """Replace the renderer's generic index.html with the readme page.

    Args:
        output_dir: Directory holding the renderer's output.
        readme: Stem of the readme document.

    Returns:
        Path to the new index.html.

    Raises:
        BuildError: If either the readme page or index.html is missing, or
            the files cannot be moved.
    """
    readme_path = output_dir / f"{readme}.html"
    index_path = output_dir / INDEX_FILENAME

    # Checked up front so a missing readme never leaves the site without an index.
    if not readme_path.is_file():
        raise BuildError(readme_path, "Expected readme page was not generated")
    if not index_path.is_file():
        raise BuildError(index_path, "Expected index page was not generated")

    try:
        index_path.unlink()
        readme_path.rename(index_path)
    except OSError as exc:
        raise BuildError(readme_path, _format_error_message(exc), exc) from exc
    return index_path


def discover_html_files(output_dir: Path) -> list[Path]:
    """List the HTML files directly inside the output directory.

    Subdirectories are not searched and dotfiles are skipped.

    Args:
        output_dir: Directory holding the renderer's output.

    Returns:
        Sorted list of HTML file paths.

    Raises:
        BuildError: If the directory cannot be listed.
    """
    try:
        entries = list(output_dir.iterdir())
    except OSError as exc:
        raise BuildError(output_dir, _format_error_message(exc), exc) from exc
    return sorted(
        path
        for path in entries
        if path.name.endswith(".html")
        and not path.name.startswith(".")
        and path.is_file()
    )


def rewrite_html_file(
    path: Path, substitutions: Iterable[tuple[str, str]] = LINK_SUBSTITUTIONS
) -> bool:
    """Rewrite the links of one HTML file in place.

    The file is always written back, even when nothing changed. Line endings
    are kept as they are; only the substitutions alter the content.

    Args:
        path: HTML file to rewrite.
        substitutions: Ordered literal (search, replacement) pairs.

    Returns:
        True if the content changed.

    Raises:
        BuildError: If the file cannot be read or written.
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            original = f.read()
        rewritten = rewrite_links(original, substitutions)
        path.write_text(rewritten, encoding="utf-8", newline="")
    except (OSError, UnicodeError) as exc:
        raise BuildError(path, _format_error_message(exc), exc) from exc
    return rewritten != original


def _format_error_message(exc: Exception) -> str:
    """Format an exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__
    error_msg = str(exc)

    # BuildError reports the path itself
    if isinstance(exc, OSError) and exc.strerror:
        error_msg = exc.strerror
    if isinstance(exc, UnicodeDecodeError):
        return f"Not valid UTF-8 text: {error_msg}"

    return f"{error_type}: {error_msg}"
