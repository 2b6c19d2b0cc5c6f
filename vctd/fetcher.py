"""HTTP fetcher with a fixed delay between requests."""

from __future__ import annotations

import logging
import time
from typing import Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from .config import get_config
from .exceptions import NetworkError

logger = logging.getLogger(__name__)


class VLRFetcher:
    """Fetches vlr.gg pages one at a time.

    Every request after the first one waits ``delay`` seconds before it is
    sent. Failed requests are not retried.
    """

    def __init__(
        self,
        delay: Optional[float] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        config = get_config()
        self.delay = config.request_delay if delay is None else delay
        self.base_url = base_url or config.vlr_base
        self.timeout = config.timeout if timeout is None else timeout
        self.request_count = 0
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    def url_for(self, url: str) -> str:
        """Resolve a site-relative link against the base URL."""
        return url if url.startswith("http") else urljoin(self.base_url, url)

    def fetch(self, url: str) -> str:
        """Fetch a page and return its body as text."""
        if self.request_count > 0 and self.delay > 0:
            time.sleep(self.delay)
        self.request_count += 1

        full_url = self.url_for(url)
        logger.debug(f"Fetching: {full_url}")

        try:
            response = self.session.get(full_url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch: {e}", url=full_url) from e

        if response.status_code >= 400:
            raise NetworkError("HTTP error", url=full_url, status_code=response.status_code)

        content_type = response.headers.get("Content-Type", "")
        if content_type and "text" not in content_type and "html" not in content_type:
            raise NetworkError(
                "Response is not text",
                url=full_url,
                status_code=response.status_code,
                context={"content_type": content_type},
            )

        return response.text

    def fetch_soup(self, url: str) -> BeautifulSoup:
        """Fetch a page and return a BeautifulSoup object."""
        return BeautifulSoup(self.fetch(url), "html.parser")

    def close(self) -> None:
        self.session.close()
