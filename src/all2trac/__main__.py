#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run the Trac renderer CLI with ``python -m all2trac``."""

import sys

from all2trac.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
