"""Slide renderer adapters for SlideSite.

Key classes:
- RevealMdRenderer: Runs the reveal-md CLI in static mode.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import RenderError
from .executable_utils import find_executable


class RevealMdRenderer:
    """Renders slides with the reveal-md command line tool.

    The renderer's own output is not captured: it streams straight to the
    terminal while the build runs.

    Attributes:
        project_root: Directory the command runs in; relative paths resolve here.
        executable: Name of the renderer executable.
    """

    def __init__(self, project_root: Path, executable: str = "reveal-md"):
        self.project_root = project_root
        self.executable = executable

    def command(
        self, renderer_bin: str, content_dir: Path, output_dir: Path, theme: Path
    ) -> list[str]:
        """Build the reveal-md command line for a static export."""
        return [
            renderer_bin,
            str(content_dir),
            "--static",
            str(output_dir),
            "--theme",
            str(theme),
        ]

    def render(self, content_dir: Path, output_dir: Path, theme: Path) -> None:
        """Run reveal-md and wait for it to finish.

        Args:
            content_dir: Directory containing the markdown documents.
            output_dir: Directory the static site is written to.
            theme: Path to the theme stylesheet.

        Raises:
            RenderError: If reveal-md is missing, cannot be started, or exits
                with a non-zero status.
        """
        renderer_bin = find_executable(
            self.executable, self.project_root, prefer_local=True
        )
        if not renderer_bin:
            raise RenderError(
                content_dir,
                f"{self.executable} not found. Install it with "
                f"`npm install -D {self.executable}` in the project.",
            )

        cmd = self.command(renderer_bin, content_dir, output_dir, theme)
        try:
            result = subprocess.run(cmd, cwd=self.project_root)
        except OSError as exc:
            raise RenderError(
                content_dir,
                f"Could not run {self.executable}: {exc}",
                command=cmd,
                original_error=exc,
            ) from exc

        if result.returncode != 0:
            raise RenderError(
                content_dir,
                f"{self.executable} exited with status {result.returncode}",
                command=cmd,
                returncode=result.returncode,
            )
