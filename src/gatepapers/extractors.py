"""
Link extraction strategies.

StructuralExtractor walks the parsed HTML tree. RegexExtractor scans the raw
markup and is only used when the structural pass fails or finds nothing,
which happens on pages with badly broken markup.
"""

import html as htmllib
import logging
import re
from typing import List
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .config import TARGET_EXTENSION
from .models import CandidateLink

logger = logging.getLogger(__name__)

UNRESOLVABLE_SCHEMES = ('javascript', 'mailto', 'tel', 'data')

# The text group stops at the next anchor so one malformed tag cannot swallow the rest of the page.
ANCHOR_PATTERN = re.compile(
    r"""(?<![\w-])href\s*=\s*(["'])(?P<href>[^"']+?)\1"""
    r"""(?:[^>]*>(?P<text>(?:(?!<a\b|</a>).)*)</a>)?""",
    re.IGNORECASE | re.DOTALL,
)
TAG_PATTERN = re.compile(r'<[^>]+>')


def has_extension(href: str, extension: str) -> bool:
    """Check the URL path (query and fragment ignored) ends with extension."""
    return urlparse(href.strip()).path.lower().endswith(extension.lower())


def is_resolvable(href: str) -> bool:
    """Reject empty, fragment-only and script/mail links."""
    href = href.strip()
    if not href or href.startswith('#'):
        return False
    return urlparse(href).scheme.lower() not in UNRESOLVABLE_SCHEMES


class LinkExtractor:
    """Base class for strategies that pull document links out of a page."""

    def __init__(self, extension: str = TARGET_EXTENSION):
        self.extension = extension

    def extract_links(self, html: str, base_url: str) -> List[CandidateLink]:
        raise NotImplementedError

    def accepts(self, href: str) -> bool:
        return is_resolvable(href) and has_extension(href, self.extension)


class StructuralExtractor(LinkExtractor):
    """Extracts anchors from a BeautifulSoup parse tree."""

    def extract_links(self, html: str, base_url: str) -> List[CandidateLink]:
        soup = BeautifulSoup(html, 'html.parser')

        base_tag = soup.find('base', href=True)
        if base_tag and base_tag['href'].strip():
            base_url = urljoin(base_url, base_tag['href'].strip())

        links = []
        for anchor in soup.find_all('a', href=True):
            href = anchor['href'].strip()
            if not self.accepts(href):
                continue
            links.append(CandidateLink(href, anchor.get_text(' ', strip=True), base_url))
        return links


class RegexExtractor(LinkExtractor):
    """Finds href="...pdf" attributes directly in the raw markup."""

    def extract_links(self, html: str, base_url: str) -> List[CandidateLink]:
        links = []
        for match in ANCHOR_PATTERN.finditer(html):
            href = htmllib.unescape(match.group('href')).strip()
            if not self.accepts(href):
                continue
            text = match.group('text') or ''
            text = ' '.join(htmllib.unescape(TAG_PATTERN.sub(' ', text)).split())
            links.append(CandidateLink(href, text, base_url))
        return links


def extract_links(html: str, base_url: str, extension: str = TARGET_EXTENSION) -> List[CandidateLink]:
    """Extract document links, falling back to the regex scan when parsing finds none."""
    try:
        links = StructuralExtractor(extension).extract_links(html, base_url)
    except Exception as e:
        logger.debug("HTML parse failed for %s (%s), using regex scan", base_url, e)
        links = []

    if links:
        return links

    logger.debug("No links from HTML parse of %s, using regex scan", base_url)
    return RegexExtractor(extension).extract_links(html, base_url)
