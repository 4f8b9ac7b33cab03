"""
Main entry point for the push_manifest package.

Allows running the generator as: python -m push_manifest
"""

import sys

from push_manifest.cli import main

if __name__ == "__main__":
    sys.exit(main())
