"""Default roster — the eight clubs of a fresh championship."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional

from championship.models.team import Team

DEFAULT_CLUBS = [
    "NO PASARAN!",
    "BARTSELIOMA",
    "KTEL",
    "NONAME",
    "MIHANIKOI",
    "ASALAGITOS",
    "ASTERAS EXARXION",
    "TIGANITIS",
]

PLAYER_CLUB = "NO PASARAN!"


def create_roster(
    names: Sequence[str] = DEFAULT_CLUBS,
    player_club: Optional[str] = PLAYER_CLUB,
    rng: Optional[random.Random] = None,
) -> list[Team]:
    """Create teams with ids from 1 in the given order.

    Strengths are drawn from ``rng`` when one is supplied, otherwise every
    club gets the default rating.
    """
    teams = []
    for team_id, name in enumerate(names, 1):
        team = Team(id=team_id, name=name, is_player_controlled=(name == player_club))
        if rng is not None:
            team.strength = round(rng.uniform(40.0, 75.0), 1)
        teams.append(team)
    return teams
