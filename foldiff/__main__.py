"""Run foldiff as a Python module.

Usage: python -m foldiff
"""
import sys

from foldiff import main


def run():
    """Start the command-line interface."""
    sys.exit(main.main())


if __name__ == '__main__':
    run()
