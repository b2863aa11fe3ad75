"""Entry point for ``python -m linky``."""

import sys

from linky.cli import main

if __name__ == "__main__":
    sys.exit(main())
