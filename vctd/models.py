"""Match data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Map:
    """A playable map."""

    name: str


@dataclass(frozen=True, order=True)
class Agent:
    """A selectable agent. Ordered by name."""

    name: str


@dataclass(frozen=True)
class Player:
    """A competitor, identified by name."""

    name: str


@dataclass(frozen=True)
class Team:
    """One side of a match with its roster in page order."""

    name: str
    players: list["Player"] = field(default_factory=list)


@dataclass(frozen=True)
class Match:
    """One played map within a series."""

    map: Map
    team_won: Team
    team_lost: Team
    won_score: int
    lost_score: int
    agents: dict["Player", "Agent"] = field(default_factory=dict)

    @property
    def players(self) -> list[Player]:
        return self.team_won.players + self.team_lost.players

    def composition(self, team: Team) -> tuple[Agent, ...]:
        """Sorted agents fielded by ``team``'s roster in this match."""
        roster = set(team.players)
        return tuple(sorted(agent for player, agent in self.agents.items() if player in roster))
