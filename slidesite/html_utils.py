"""HTML link rewriting for SlideSite.

The slide renderer emits pages that assume they are served from a web server
root: assets are referenced as ``/_assets/...``, navigation links still point
at the ``.md`` sources, and the readme page keeps its own name. This module
holds the pure text transformation that fixes those links; file handling
lives in build.py.

Functions:
    link_substitutions: Build the ordered substitution rules for a readme name.
    rewrite_links: Apply the link substitutions to an HTML string.
"""

from __future__ import annotations

from collections.abc import Iterable


def link_substitutions(readme: str = "README") -> tuple[tuple[str, str], ...]:
    """Build the ordered link substitutions for a site.

    Applied in order, every occurrence. No replacement reintroduces a search
    string, so a second pass over rewritten text is a no-op.

    Args:
        readme: Stem of the readme document whose page becomes index.html.

    Returns:
        Tuple of literal (search, replacement) pairs.
    """
    return (
        ('href="/_assets', 'href="./_assets'),
        (".md", ".html"),
        (f"{readme}.html", "index.html"),
    )


LINK_SUBSTITUTIONS = link_substitutions()


def rewrite_links(
    html: str, substitutions: Iterable[tuple[str, str]] = LINK_SUBSTITUTIONS
) -> str:
    """Rewrite server-root links in rendered HTML to relative ones.

    Args:
        html: HTML content to process.
        substitutions: Ordered literal (search, replacement) pairs.

    Returns:
        HTML with every substitution applied.

    Examples:
        >>> rewrite_links('<link href="/_assets/style.css">')
        '<link href="./_assets/style.css">'

        >>> rewrite_links('<a href="README.md">Home</a>')
        '<a href="index.html">Home</a>'
    """
    for search, replacement in substitutions:
        html = html.replace(search, replacement)
    return html
