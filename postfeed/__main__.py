"""Entry point for running postfeed as a module.

Usage:
    python -m postfeed --mock
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
