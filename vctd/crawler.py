"""Event crawler: walks an event's stages, brackets and series pages."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from .fetcher import VLRFetcher
from .models import Match
from .parser import VLRParser

logger = logging.getLogger(__name__)


class EventCrawler:
    """Collects every match of a vlr.gg event.

    Pages are fetched strictly one after another, so the returned matches
    follow the order in which their pages were discovered. Any fetch or
    parse error aborts the whole crawl.
    """

    def __init__(self, fetcher: Optional[VLRFetcher] = None, parser: Optional[VLRParser] = None):
        self.fetcher = fetcher or VLRFetcher()
        self.parser = parser or VLRParser()

    def crawl(self, event_url: str) -> List[Match]:
        """Fetch the event page and every other stage tab it links to."""
        soup = self.fetcher.fetch_soup(event_url)
        logger.info("Fetched initial page...")

        matches = self.matches_for_event(soup)
        logger.info(f"Found {len(matches)} matches from initial event")

        event_pages = self.parser.extract_subnav_links(soup)
        logger.info(f"Going to fetch following pages: {event_pages}")

        for page in event_pages:
            stage_soup = self.fetcher.fetch_soup(page)
            logger.info(f"Parsing event {page}")
            matches.extend(self.matches_for_event(stage_soup))

        logger.info(f"Collected {len(matches)} matches")
        return matches

    def matches_for_event(self, soup: BeautifulSoup) -> List[Match]:
        """Fetch and parse every series linked from an event page's bracket."""
        matches: List[Match] = []
        for series_url in self.parser.extract_bracket_links(soup):
            logger.info(f"Parsing series {series_url}")
            series_soup = self.fetcher.fetch_soup(series_url)
            matches.extend(self.parser.extract_matches(series_soup))
        return matches
