"""
Main entry point for running the package as a module.

Usage:
    python -m gallerygen
    python -m gallerygen build --project-root site
    python -m gallerygen report --project-root site --type dangling
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
