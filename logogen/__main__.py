"""
Main entry point for running the package as a module.

Usage:
    python -m logogen --input logo.png
    python -m logogen --input logo.png --output icons --config config/dimensions.json
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
