#!/usr/bin/env python3
"""
Portfolio Analysis CLI Entry Point
==================================
Minimal CLI wrapper for the calculation engine.

Usage:
    python scripts/analyze_portfolio.py --holdings holdings.json --monthly 500 --years 20
    # or after pip install -e .
    analyze-portfolio --holdings holdings.json
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from wealth_engine.core.runner import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
