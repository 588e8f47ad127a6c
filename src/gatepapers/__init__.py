"""Download GATE question papers linked from a fixed set of pages."""

from .config import DownloadConfig
from .scraper import OutputDirectoryError, PaperDownloader

__version__ = "0.1.0"

__all__ = ["DownloadConfig", "OutputDirectoryError", "PaperDownloader", "__version__"]
