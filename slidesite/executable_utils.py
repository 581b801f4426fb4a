"""Executable discovery utilities for SlideSite.

The slide renderer is a Node tool, usually installed per project as a dev
dependency. This module finds it either on the system PATH or in the
project's local node_modules/.bin directory.

Functions:
    find_executable: Locate an executable in PATH or node_modules.
"""

from __future__ import annotations

import shutil
from pathlib import Path


def find_executable(
    name: str, project_root: Path | None = None, prefer_local: bool = False
) -> str | None:
    """Find an executable in PATH or local node_modules.

    By default the system PATH is searched first and the project's
    node_modules/.bin second. With ``prefer_local`` the order is reversed, so a
    version pinned in the project's package.json wins over a global install.

    Args:
        name: Name of the executable to find (e.g., 'reveal-md').
        project_root: Optional project root directory to search for
            local node_modules installations.
        prefer_local: Check node_modules/.bin before the system PATH.

    Returns:
        Full path to the executable if found, None otherwise.

    Examples:
        >>> find_executable('node')
        '/usr/local/bin/node'

        >>> find_executable('reveal-md', Path('/my/slides'), prefer_local=True)
        '/my/slides/node_modules/.bin/reveal-md'
    """
    local = None
    if project_root is not None:
        candidate = project_root / "node_modules" / ".bin" / name
        if candidate.exists():
            local = str(candidate)

    if prefer_local and local:
        return local

    found = shutil.which(name)
    if found:
        return found

    return local
