"""Shared fixtures: an in-memory web that stands in for requests.get."""

import os
from unittest.mock import patch

import pytest
import requests

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, url, body=b"", status=200, fail_after_chunks=None):
        self.url = url
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status
        self.fail_after_chunks = fail_after_chunks

    @property
    def text(self):
        return self.body.decode("utf-8")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error for url: {self.url}", response=self)

    def iter_content(self, chunk_size=1):
        for index, start in enumerate(range(0, len(self.body), chunk_size)):
            if self.fail_after_chunks is not None and index >= self.fail_after_chunks:
                raise requests.ConnectionError("Connection reset by peer")
            yield self.body[start:start + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeWeb:
    """Routes URLs to canned responses and records every GET."""

    def __init__(self):
        self.routes = {}
        self.requested = []

    def add(self, url, body=b"", status=200, fail_after_chunks=None):
        self.routes[url] = dict(body=body, status=status, fail_after_chunks=fail_after_chunks)

    def get(self, url, **kwargs):
        self.requested.append(url)
        if url not in self.routes:
            raise requests.ConnectionError(f"Failed to establish a new connection: {url}")
        return FakeResponse(url, **self.routes[url])

    def count(self, url):
        return self.requested.count(url)


@pytest.fixture
def fake_web():
    web = FakeWeb()
    with patch("gatepapers.scraper.requests.get", side_effect=web.get):
        yield web


@pytest.fixture
def papers_page():
    """HTML of a paper listing page with CS, EC and non-document links."""
    with open(os.path.join(FIXTURES_DIR, "papers_page.html"), "r", encoding="utf-8") as f:
        return f.read()
