"""Module entry point for ``python -m sidetag``."""

import sys

from sidetag.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
