#!/usr/bin/env python3
"""
Enable running graphview as a module: python -m graphview

Usage:
    python -m graphview --help
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
