"""Exceptions raised while building a SlideSite site."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the file or directory that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


class RenderError(BuildError):
    """The external slide renderer could not be run or exited with an error.

    Attributes:
        command: Command line that was (or would have been) executed.
        returncode: Exit status of the renderer, None if it never started.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        original_error: Exception | None = None,
    ):
        self.command = command or []
        self.returncode = returncode
        super().__init__(source_path, message, original_error)
