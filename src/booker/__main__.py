"""Entry point for ``python -m booker``."""

import sys

from booker.cli import main

if __name__ == "__main__":
    sys.exit(main())
