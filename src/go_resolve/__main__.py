"""Entry point for running go-resolve as a module.

Allows the package to be run as:
    python -m go_resolve
"""

import sys

from go_resolve.cli import main

if __name__ == "__main__":
    sys.exit(main())
