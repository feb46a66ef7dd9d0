"""Module entry point for running with python -m pagescript."""

import sys

from pagescript.cli import main

if __name__ == "__main__":
    sys.exit(main())
