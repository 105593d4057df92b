"""Run the unittest suites without installing the package.

Usage: python tests/run_tests.py [pattern]
"""
import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
SRC_DIR = TESTS_DIR.parent / "src"


def run(pattern: str = "test_*.py") -> bool:
    """Discover suites matching pattern and report whether all passed."""
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    suite = unittest.defaultTestLoader.discover(str(TESTS_DIR), pattern=pattern, top_level_dir=str(TESTS_DIR))
    return unittest.TextTestRunner(verbosity=2).run(suite).wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run(*sys.argv[1:2]) else 1)
