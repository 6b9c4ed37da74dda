#!/usr/bin/env python3
"""Script to print the SSH URL of every repository of a GitHub user."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ghrepos.cli import main


if __name__ == "__main__":
    sys.exit(main())
