"""Protocol definitions for SlideSite.

The slide renderer is an external collaborator. The build pipeline only
depends on this interface, so tests can swap in a fake renderer that writes
pre-canned HTML files instead of running the real tool.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SiteRenderer(Protocol):
    """Protocol for turning a directory of slide markdown into static HTML.

    After a successful call the output directory must contain one HTML file
    per markdown document, a generic ``index.html`` and a page rendered from
    the project's readme. Implementations raise on failure instead of
    returning a status.
    """

    @abstractmethod
    def render(self, content_dir: Path, output_dir: Path, theme: Path) -> None:
        """Render the slides in static mode.

        Args:
            content_dir: Directory containing the markdown documents.
            output_dir: Directory the static site is written to.
            theme: Path to the theme stylesheet.

        Raises:
            RenderError: If the renderer cannot be run or reports failure.
        """
        ...
