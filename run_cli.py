#!/usr/bin/env python3
"""Entry point for tailoring a resume from the command line."""

import sys

from services.cli.tailor import main


if __name__ == "__main__":
    sys.exit(main())
