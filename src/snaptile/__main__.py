"""Entry point for ``python -m snaptile``."""

import sys

from snaptile import main

if __name__ == "__main__":
    sys.exit(main())
