"""SlideSite static slide builder.

This package turns a directory of workshop slide markdown into a relocatable
static HTML site. The heavy lifting (themes, pagination, asset bundling) is done
by an external slide renderer; SlideSite runs it in static mode and then fixes
up the generated pages so they can be opened from any base path or a file:// URL.

The main entry point is the CLI module, which provides commands for building
the site and previewing it locally.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
