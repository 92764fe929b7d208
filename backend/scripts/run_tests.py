#!/usr/bin/env python3
"""Run the microchess unittest suite without installing the package."""
from __future__ import annotations

import argparse
import sys
import unittest
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))


def main() -> int:
    ap = argparse.ArgumentParser(description="Discover and run backend/tests")
    ap.add_argument("-k", "--pattern", default="test_*.py", help="test module glob")
    ap.add_argument("-q", "--quiet", action="store_true")
    args = ap.parse_args()

    suite = unittest.defaultTestLoader.discover(str(BACKEND_DIR / "tests"), pattern=args.pattern)
    res = unittest.TextTestRunner(verbosity=1 if args.quiet else 2).run(suite)
    return 0 if res.wasSuccessful() else 1


if __name__ == "__main__":
    raise SystemExit(main())
