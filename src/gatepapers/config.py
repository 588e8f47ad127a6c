"""
Download settings. Edit the lists below to change which pages are scanned
and which papers are kept.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

SOURCE_PAGES = [
    "https://gate2025.iitr.ac.in/download.html",
    "https://gate2024.iisc.ac.in/download/",
    "https://gate.iitk.ac.in/GATE2023/download.php",
]

KEYWORDS = ("CS", "Computer")
TARGET_EXTENSION = ".pdf"
OUTPUT_DIR_NAME = "gate-papers"

# Direct links that are always downloaded, whether or not they pass the filter.
# Use this when the source pages stop listing papers as plain links, e.g.
#   "https://gate2025.iitr.ac.in/doc/2025/CS.pdf",
MANUAL_URLS: List[str] = []

REQUEST_TIMEOUT = 30
CHUNK_SIZE = 8192
USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'


@dataclass
class DownloadConfig:
    """Settings for a single download run."""

    output_dir: Path = Path(OUTPUT_DIR_NAME)
    source_pages: List[str] = field(default_factory=lambda: list(SOURCE_PAGES))
    keywords: Tuple[str, ...] = KEYWORDS
    extension: str = TARGET_EXTENSION
    manual_urls: List[str] = field(default_factory=lambda: list(MANUAL_URLS))
    timeout: float = REQUEST_TIMEOUT
    chunk_size: int = CHUNK_SIZE

    @classmethod
    def for_script(cls, script_dir: Path, **overrides) -> "DownloadConfig":
        """Build a config whose output directory sits beside the given script."""
        return cls(output_dir=Path(script_dir) / OUTPUT_DIR_NAME, **overrides)
