#!/usr/bin/env python3
"""
Question paper downloader.
Scans a fixed set of pages for document links, keeps the ones matching the
configured keywords and saves them into a local directory.
"""

import os
import logging
from pathlib import Path
from urllib.parse import urljoin, urlparse
from typing import List, Optional, Tuple

import requests

from .config import DownloadConfig, USER_AGENT
from .extractors import extract_links, has_extension
from .models import (
    CandidateLink,
    DownloadResult,
    DownloadTarget,
    PageResult,
    RunReport,
    DOWNLOADED,
    FAILED,
    SKIPPED,
)

logger = logging.getLogger(__name__)

PART_SUFFIX = '.part'


class OutputDirectoryError(Exception):
    """The output directory does not exist and could not be created."""


def check_status(response: requests.Response, url: str):
    """Raise requests.HTTPError for anything other than a 2xx response."""
    response.raise_for_status()
    if not 200 <= response.status_code < 300:
        raise requests.HTTPError(f"{response.status_code} for url: {url}", response=response)


class PaperDownloader:
    """Finds matching documents on the source pages and downloads them."""

    def __init__(self, config: Optional[DownloadConfig] = None):
        """
        Initialize the downloader.

        Args:
            config: Download settings; defaults to the values in gatepapers.config
        """
        self.config = config or DownloadConfig()
        self.output_dir = Path(self.config.output_dir)
        self.headers = {'User-Agent': USER_AGENT}

    def ensure_output_dir(self) -> Path:
        """Create the output directory and any missing parents."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Cannot create output directory {self.output_dir}: {e}") from e
        return self.output_dir

    def fetch_page(self, url: str) -> str:
        """Return the HTML body of a page. Raises requests.RequestException on failure."""
        response = requests.get(url, timeout=self.config.timeout, headers=self.headers)
        check_status(response, url)
        return response.text

    def extract_links(self, html: str, page_url: str) -> List[CandidateLink]:
        """Extract candidate document links from page HTML."""
        return extract_links(html, page_url, self.config.extension)

    def matches_filter(self, link: CandidateLink) -> bool:
        """Keep links with the target extension and a keyword in the href or link text."""
        if not has_extension(link.href, self.config.extension):
            return False
        href = link.href.lower()
        text = link.text.lower()
        return any(keyword.lower() in href or keyword.lower() in text for keyword in self.config.keywords)

    def resolve_url(self, link: CandidateLink) -> str:
        """Make a link absolute against the page it was found on."""
        href = link.href.strip()
        if urlparse(href).scheme:
            return href
        return urljoin(link.base_url, href)

    def scan_page(self, url: str) -> PageResult:
        """Fetch one source page and return its matching links."""
        logger.info("Scanning %s", url)
        try:
            html = self.fetch_page(url)
        except requests.RequestException as e:
            logger.warning("Could not fetch %s: %s", url, e)
            return PageResult(url, ok=False, error=str(e))

        candidates = self.extract_links(html, url)
        matches = [link for link in candidates if self.matches_filter(link)]
        logger.info("  Found %d %s link(s), %d matching", len(candidates), self.config.extension, len(matches))
        return PageResult(url, ok=True, links=matches)

    def collect_urls(self, page_urls: List[str]) -> Tuple[List[str], List[PageResult]]:
        """Scan pages in order. Returns (sorted unique URLs, per-page results)."""
        pages = []
        urls = set()
        for page_url in page_urls:
            result = self.scan_page(page_url)
            pages.append(result)
            for link in result.links:
                urls.add(self.resolve_url(link))
        return sorted(urls), pages

    def target_for(self, url: str) -> DownloadTarget:
        """Pair a URL with the last segment of its path."""
        return DownloadTarget(url, os.path.basename(urlparse(url).path))

    def download_file(self, url: str) -> DownloadResult:
        """Download a single file unless a file with the same name is already present."""
        target = self.target_for(url)
        if not target.file_name:
            logger.warning("Could not download %s: no file name in URL", url)
            return DownloadResult(url, None, FAILED, "no file name in URL")

        filepath = self.output_dir / target.file_name
        if filepath.exists():
            logger.info("Skipping %s (already exists)", target.file_name)
            return DownloadResult(url, target.file_name, SKIPPED)

        # Partial downloads never carry the final name, so a rerun will fetch them again.
        part_path = filepath.with_name(target.file_name + PART_SUFFIX)
        logger.info("Downloading %s", url)
        try:
            with requests.get(url, timeout=self.config.timeout, headers=self.headers, stream=True) as response:
                check_status(response, url)
                with open(part_path, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                        f.write(chunk)
            os.replace(part_path, filepath)
        except (requests.RequestException, OSError) as e:
            if part_path.exists():
                part_path.unlink()
            logger.warning("Could not download %s: %s", url, e)
            return DownloadResult(url, target.file_name, FAILED, str(e))

        logger.info("  Saved: %s", target.file_name)
        return DownloadResult(url, target.file_name, DOWNLOADED)

    def run(self) -> RunReport:
        """Scan every source page, then download everything found plus the manual URLs."""
        self.ensure_output_dir()
        logger.info("Output directory: %s", self.output_dir)

        found, pages = self.collect_urls(self.config.source_pages)
        if not found:
            logger.warning(
                "No matching %s links found on any source page. "
                "The pages may have changed; add direct links to MANUAL_URLS in gatepapers/config.py.",
                self.config.extension,
            )

        manual = [url.strip() for url in self.config.manual_urls if url.strip()]
        urls = sorted(set(found) | set(manual))

        report = RunReport(self.output_dir, pages=pages, used_manual_only=not found and bool(manual))
        logger.info("%d file(s) to process", len(urls))
        for url in urls:
            report.downloads.append(self.download_file(url))

        logger.info("Done. Files are in %s (%s)", self.output_dir, report.summary())
        return report
