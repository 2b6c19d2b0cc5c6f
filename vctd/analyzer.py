"""Agent composition statistics over a scraped dataset."""

from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple

from .models import Agent, Map, Match

Composition = Tuple[Agent, ...]


def list_maps(matches: Iterable[Match]) -> Set[Map]:
    """Distinct maps played across the dataset."""
    return {m.map for m in matches}


def composition_counts(matches: Iterable[Match]) -> Dict[Tuple[str, Tuple[str, ...]], int]:
    """Count (map name, sorted agent names) over both sides of every match.

    Keys keep first-seen order.
    """
    counts: Dict[Tuple[str, Tuple[str, ...]], int] = {}
    for m in matches:
        for team in (m.team_won, m.team_lost):
            key = (m.map.name, tuple(agent.name for agent in m.composition(team)))
            counts[key] = counts.get(key, 0) + 1
    return counts


def composition_frequencies(matches: Iterable[Match], map_name: str) -> List[Tuple[Composition, float]]:
    """Appearance rate of each agent composition on ``map_name``.

    A rate is the number of times a composition was fielded divided by the
    number of team sides observed on the map (two per match), so the rates
    of one map add up to 1. Results are sorted by ascending rate; equal
    rates keep the order in which compositions were first seen.

    Returns an empty list when no match was played on ``map_name``.
    """
    matches = list(matches)
    sides = 2 * sum(1 for m in matches if m.map.name == map_name)
    if sides == 0:
        return []

    rates = [
        (tuple(Agent(name) for name in agents), count / sides)
        for (name, agents), count in composition_counts(matches).items()
        if name == map_name
    ]
    rates.sort(key=lambda entry: entry[1])
    return rates
