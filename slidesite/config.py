"""Configuration loading for SlideSite.

Settings live in an optional ``slidesite.yaml`` at the project root. Every key
has a default, so a project without the file builds with the stock invocation:
``reveal-md markdown/workshop/ --static _static --theme themes/simplabs.css``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "slidesite.yaml"

DEFAULT_CONFIG = {
    "renderer": "reveal-md",
    "content_dir": "markdown/workshop/",
    "theme": "themes/simplabs.css",
    "output_dir": "_static",
    "readme": "README",
    "port": 4000,
}


def load_config(project_root: Path) -> dict[str, Any]:
    """Load site configuration from slidesite.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config
