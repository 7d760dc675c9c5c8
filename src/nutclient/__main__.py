"""Entry point for running nutclient as a module

Usage:
  python -m nutclient list     # Uses this __main__.py file
  uv run nutclient list        # Uses __init__.py through pyproject.toml entry point
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
