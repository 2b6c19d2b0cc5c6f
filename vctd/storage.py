"""JSON persistence of scraped matches.

Maps, agents and players are written as bare strings so datasets stay
compatible with files produced by earlier versions of the scraper.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .exceptions import DatasetError
from .models import Agent, Map, Match, Player, Team

logger = logging.getLogger(__name__)


def team_to_dict(team: Team) -> dict[str, Any]:
    return {"name": team.name, "players": [p.name for p in team.players]}


def match_to_dict(match: Match) -> dict[str, Any]:
    return {
        "map": match.map.name,
        "team_won": team_to_dict(match.team_won),
        "team_lost": team_to_dict(match.team_lost),
        "won_score": match.won_score,
        "lost_score": match.lost_score,
        "agents": {player.name: agent.name for player, agent in match.agents.items()},
    }


def _score(value: Any, key: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DatasetError(f"Field '{key}' must be an unsigned integer", context={"value": value})
    return value


def team_from_dict(data: dict[str, Any]) -> Team:
    return Team(name=str(data["name"]), players=[Player(str(name)) for name in data["players"]])


def match_from_dict(data: dict[str, Any]) -> Match:
    """Build a Match from its JSON form, raising DatasetError on a bad shape."""
    try:
        return Match(
            map=Map(str(data["map"])),
            team_won=team_from_dict(data["team_won"]),
            team_lost=team_from_dict(data["team_lost"]),
            won_score=_score(data["won_score"], "won_score"),
            lost_score=_score(data["lost_score"], "lost_score"),
            agents={Player(str(p)): Agent(str(a)) for p, a in data["agents"].items()},
        )
    except KeyError as e:
        raise DatasetError(f"Match record is missing field {e}") from e
    except (TypeError, AttributeError) as e:
        raise DatasetError(f"Malformed match record: {e}") from e


def dump_matches(matches: Iterable[Match], path: str | Path) -> None:
    """Write matches to ``path`` as a JSON array."""
    records = [match_to_dict(m) for m in matches]
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, ensure_ascii=False)
    except OSError as e:
        raise DatasetError(f"Could not write dataset: {e}", context={"path": path}) from e
    logger.info(f"Wrote {len(records)} matches to {path}")


def load_matches(path: str | Path) -> list[Match]:
    """Read a JSON array of matches written by ``dump_matches``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError("Dataset file not found", context={"path": path}) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not read dataset: {e}", context={"path": path}) from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset is not valid JSON: {e}", context={"path": path}) from e

    if not isinstance(records, list):
        raise DatasetError("Dataset must be a JSON array of matches", context={"path": path})

    matches = [match_from_dict(record) for record in records]
    logger.debug(f"Loaded {len(matches)} matches from {path}")
    return matches
