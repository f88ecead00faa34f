"""Module entry point for friendgraph.

Run with: python -m friendgraph
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
