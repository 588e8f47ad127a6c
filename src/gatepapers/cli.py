"""Command-line entry point for the paper downloader."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DownloadConfig, OUTPUT_DIR_NAME, REQUEST_TIMEOUT
from .scraper import OutputDirectoryError, PaperDownloader

logger = logging.getLogger("gatepapers.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download question papers linked from the configured source pages.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Directory to save papers in (default: ./{OUTPUT_DIR_NAME})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help="Seconds to wait for each HTTP request",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, script_dir: Optional[Path] = None) -> int:
    """Run a download. Returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    if args.output is not None:
        config = DownloadConfig(output_dir=args.output, timeout=args.timeout)
    else:
        config = DownloadConfig.for_script(script_dir or Path.cwd(), timeout=args.timeout)

    try:
        PaperDownloader(config).run()
    except OutputDirectoryError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
