"""Entry point for the SlideSite CLI.

Allows running the package directly with ``python -m slidesite``.
"""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
