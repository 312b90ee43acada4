# parse_homeowners.py

from __future__ import annotations

import sys

from homeowners.cli import main

if __name__ == "__main__":
    sys.exit(main())
