#!/usr/bin/env python3
"""Run the downloader, saving papers into gate-papers/ next to this script."""

import sys
from pathlib import Path

from gatepapers.cli import main

if __name__ == "__main__":
    sys.exit(main(script_dir=Path(__file__).resolve().parent))
