"""Entry point for running the demo as a module: python -m dragcanvas"""

import sys
from .ui import main

if __name__ == "__main__":
    sys.exit(main())
