#!/usr/bin/env python3
"""
Circle and Addition Demo

Prints the exported helpers, the area and circumference of a circle with
radius 4 and the sum 2 + 2.

Usage:
    python scripts/index.py
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from starter_utils import demo


if __name__ == "__main__":
    demo.main()
