# tests/helpers.py

import os

from bs4 import BeautifulSoup

from vctd.models import Agent, Map, Match, Player, Team

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "HTML_samples")


def read_sample(filename: str) -> str:
    """Read an HTML sample as text."""
    path = os.path.join(SAMPLES_DIR, filename)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_html(filename: str) -> BeautifulSoup:
    """Load an HTML file and return BeautifulSoup object."""
    return BeautifulSoup(read_sample(filename), 'html.parser')


def roster_rows(roster) -> str:
    rows = []
    for player, agent in roster:
        agent_img = f'<img src="/img/{agent}.png" title="{agent}">' if agent else '<img src="/img/x.png">'
        rows.append(
            f'<tr><td class="mod-player"><a><div class="text-of"> {player} </div></a></td>'
            f'<td class="mod-agents"><span class="mod-agent">{agent_img}</span></td></tr>'
        )
    return "\n".join(rows)


def game_html(game_id, map_name, first, second, tables=None) -> str:
    """Build one game tab.

    ``first`` and ``second`` are (team name, score, won, roster) tuples,
    where roster is a list of (player, agent) pairs.
    """
    def team(name, score, won):
        win = " mod-win" if won else ""
        return f'<div class="team"><div class="team-name"> {name} </div><div class="score{win}"> {score} </div></div>'

    if tables is None:
        tables = "".join(
            f'<table class="wf-table-inset mod-overview"><tbody>{roster_rows(side[3])}</tbody></table>'
            for side in (first, second)
        )
    return (
        f'<div class="vm-stats-game" data-game-id="{game_id}">'
        f'<div class="vm-stats-game-header">'
        f'{team(*first[:3])}'
        f'<div class="map"><div><span> {map_name} <span class="picked">PICK</span></span></div></div>'
        f'{team(*second[:3])}'
        f'</div>{tables}</div>'
    )


def series_html(*games) -> str:
    summary = '<div class="vm-stats-game" data-game-id="all"><p>All maps</p></div>'
    return f'<html><body><div class="vm-stats">{summary}{"".join(games)}</div></body></html>'


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'html.parser')


def make_match(map_name, won, lost, won_score=13, lost_score=7) -> Match:
    """Build a Match from (team name, [(player, agent), ...]) pairs."""
    agents = {Player(p): Agent(a) for _, roster in (won, lost) for p, a in roster}
    return Match(
        map=Map(map_name),
        team_won=Team(won[0], [Player(p) for p, _ in won[1]]),
        team_lost=Team(lost[0], [Player(p) for p, _ in lost[1]]),
        won_score=won_score,
        lost_score=lost_score,
        agents=agents,
    )
