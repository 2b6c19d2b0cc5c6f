"""
vctd - VCT data scraper and analyzer for vlr.gg

Crawls a tournament event, extracts every played map with its teams,
scores, rosters and agent picks, and reports how often each five-agent
composition is fielded on a map.

Example usage:
    >>> import vctd
    >>>
    >>> matches = vctd.EventCrawler().crawl("https://www.vlr.gg/event/2283/valorant-champions-2025")
    >>> vctd.dump_matches(matches, "champions.json")
    >>>
    >>> for composition, rate in vctd.composition_frequencies(matches, "Ascent"):
    ...     print(f"{rate:.2%} {[a.name for a in composition]}")
"""

__version__ = "0.1.0"

from .models import Map, Agent, Player, Team, Match
from .parser import VLRParser
from .fetcher import VLRFetcher
from .crawler import EventCrawler
from .analyzer import list_maps, composition_frequencies
from .storage import dump_matches, load_matches

from .exceptions import (
    VctdError,
    NetworkError,
    ScrapingError,
    ScoreParseError,
    DatasetError,
    InvalidEventUrlError,
)

from .config import configure, reset_config

__all__ = [
    # Models
    "Map",
    "Agent",
    "Player",
    "Team",
    "Match",

    # Scraping
    "VLRParser",
    "VLRFetcher",
    "EventCrawler",

    # Analysis and storage
    "list_maps",
    "composition_frequencies",
    "dump_matches",
    "load_matches",

    # Exceptions for error handling
    "VctdError",
    "NetworkError",
    "ScrapingError",
    "ScoreParseError",
    "DatasetError",
    "InvalidEventUrlError",

    # Configuration
    "configure",
    "reset_config",
]
