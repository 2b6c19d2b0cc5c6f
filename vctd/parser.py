"""Parsers for vlr.gg event and series pages.

All parsers are strict: a missing element, an unexpected number of
elements or a malformed score raises ``ScrapingError`` and nothing from
the page is returned.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .exceptions import ScoreParseError, ScrapingError
from .models import Agent, Map, Match, Player, Team

logger = logging.getLogger(__name__)

SUBNAV_SELECTOR = ".wf-subnav-item:not(.mod-active)"
BRACKET_ITEM_SELECTOR = "a.bracket-item"
SHOWMATCH_MARKER = "showmatch"
SUMMARY_GAME_ID = "all"


def _select_one(element: Tag, selector: str, game_id: Optional[str] = None) -> Tag:
    found = element.select_one(selector)
    if found is None:
        raise ScrapingError(f"Missing element '{selector}'", context={"game": game_id})
    return found


def _select_exactly(element: Tag, selector: str, count: int, game_id: Optional[str] = None) -> List[Tag]:
    found = element.select(selector)
    if len(found) != count:
        raise ScrapingError(
            f"Expected {count} '{selector}' elements, found {len(found)}",
            context={"game": game_id},
        )
    return found


def _first_child(element: Tag, game_id: Optional[str] = None) -> Tag:
    child = element.find(True, recursive=False)
    if child is None:
        raise ScrapingError(f"Element <{element.name}> has no child element", context={"game": game_id})
    return child


def _text(element: Tag, game_id: Optional[str] = None) -> str:
    """First non-blank text node under ``element``, stripped."""
    text = next(element.stripped_strings, None)
    if text is None:
        raise ScrapingError(f"Element <{element.name}> has no text", context={"game": game_id})
    return text


def _parse_score(element: Tag, game_id: Optional[str] = None) -> int:
    text = _text(element, game_id)
    if not (text.isascii() and text.isdigit()):
        raise ScoreParseError(f"Score '{text}' is not an unsigned integer", context={"game": game_id})
    return int(text)


class VLRParser:
    """Parses vlr.gg HTML pages."""

    @staticmethod
    def extract_links(soup: BeautifulSoup, selector: str) -> List[str]:
        """Return the href of every element matching ``selector``, in page order."""
        links = []
        for element in soup.select(selector):
            href = element.get("href")
            if not href:
                raise ScrapingError(f"Link '{selector}' has no href")
            links.append(href)
        return links

    @staticmethod
    def extract_subnav_links(soup: BeautifulSoup) -> List[str]:
        """Event stage tabs other than the one being viewed, skipping showmatches."""
        return [
            href for href in VLRParser.extract_links(soup, SUBNAV_SELECTOR)
            if SHOWMATCH_MARKER not in href
        ]

    @staticmethod
    def extract_bracket_links(soup: BeautifulSoup) -> List[str]:
        """Series links from the bracket of an event page."""
        return VLRParser.extract_links(soup, BRACKET_ITEM_SELECTOR)

    @staticmethod
    def parse_map_name(header: Tag, game_id: Optional[str] = None) -> str:
        map_container = _select_exactly(header, ".map", 1, game_id)[0]
        return _text(_first_child(_first_child(map_container, game_id), game_id), game_id)

    @staticmethod
    def parse_team_header(team: Tag, game_id: Optional[str] = None) -> Tuple[str, int, bool]:
        """Return (team name, score, won) for one side of a game header."""
        name = _text(_select_one(team, ".team-name", game_id), game_id)
        win_score = team.select_one(".score.mod-win")
        if win_score is not None:
            return name, _parse_score(win_score, game_id), True
        return name, _parse_score(_select_one(team, ".score", game_id), game_id), False

    @staticmethod
    def parse_roster(table: Tag, game_id: Optional[str] = None) -> List[Tuple[str, str]]:
        """Return (player name, agent name) for every row of a scoreboard table."""
        roster = []
        for row in table.select("tbody > tr"):
            player_name = _text(_select_one(row, ".mod-player .text-of", game_id), game_id)
            agent_img = _select_one(row, ".mod-agent img", game_id)
            agent_name = agent_img.get("title")
            if not agent_name:
                raise ScrapingError(
                    "Agent image has no title",
                    context={"game": game_id, "player": player_name},
                )
            roster.append((player_name, agent_name.strip()))
        return roster

    @staticmethod
    def parse_game(game: Tag) -> Match:
        """Parse one game tab of a series page."""
        game_id = game.get("data-game-id")
        header = _select_one(game, ".vm-stats-game-header", game_id)
        map_name = VLRParser.parse_map_name(header, game_id)

        sides = [
            VLRParser.parse_team_header(team, game_id)
            for team in _select_exactly(header, ".team", 2, game_id)
        ]
        winners = [side for side in sides if side[2]]
        losers = [side for side in sides if not side[2]]
        if len(winners) != 1:
            raise ScrapingError(
                f"Expected exactly one winning team, found {len(winners)}",
                context={"game": game_id},
            )
        team_won, won_score, _ = winners[0]
        team_lost, lost_score, _ = losers[0]

        team_players: dict[str, List[str]] = {}
        agents: dict[str, str] = {}
        tables = _select_exactly(game, "table.mod-overview", 2, game_id)
        for (team_name, _, _), table in zip(sides, tables):
            for player_name, agent_name in VLRParser.parse_roster(table, game_id):
                team_players.setdefault(team_name, []).append(player_name)
                agents[player_name] = agent_name

        return Match(
            map=Map(map_name),
            team_won=Team(team_won, [Player(p) for p in team_players.get(team_won, [])]),
            team_lost=Team(team_lost, [Player(p) for p in team_players.get(team_lost, [])]),
            won_score=won_score,
            lost_score=lost_score,
            agents={Player(p): Agent(a) for p, a in agents.items()},
        )

    @staticmethod
    def extract_matches(soup: BeautifulSoup) -> List[Match]:
        """Parse every played game on a series page, skipping the summary tab."""
        matches = []
        for game in soup.select(".vm-stats-game"):
            if game.get("data-game-id") == SUMMARY_GAME_ID:
                continue
            matches.append(VLRParser.parse_game(game))
        logger.debug(f"Parsed {len(matches)} games")
        return matches
