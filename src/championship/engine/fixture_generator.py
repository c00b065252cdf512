"""Fixture generator — double round-robin scheduling for a championship.

Uses the circle method: the first team stays put while the others rotate
around it, so every pair meets once per leg. The second leg repeats the
first leg's pairings with home and away swapped.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Union

from championship.engine.errors import DuplicateParticipant, InvalidRosterSize
from championship.models.match import ScheduledMatch
from championship.models.team import Team

logger = logging.getLogger(__name__)

# Synthetic opponent for odd rosters. Real ids are >= 0.
BYE_ID = -1

TeamLike = Union[Team, int]


def _team_id(team: TeamLike) -> int:
    return team.id if isinstance(team, Team) else int(team)


def generate_round_robin(team_ids: Sequence[int]) -> list[list[tuple[int, int]]]:
    """Generate the pairings of a full double round-robin.

    Args:
        team_ids: Ordered team ids. Order seeds the rotation.

    Returns:
        List of rounds, each a list of (home, away) tuples.
        Total rounds = (n-1) * 2 for n teams.

    Raises:
        InvalidRosterSize: If the count is odd or fewer than 2.
    """
    n = len(team_ids)
    if n < 2 or n % 2 != 0:
        raise InvalidRosterSize(n)

    half = n // 2

    # First leg: (n-1) rounds using circle method
    first_leg: list[list[tuple[int, int]]] = []
    rotation = list(team_ids)

    for _ in range(n - 1):
        first_leg.append([(rotation[i], rotation[n - 1 - i]) for i in range(half)])

        # Rotate: fix position 0, rotate rest clockwise
        rotation = [rotation[0]] + [rotation[-1]] + rotation[1:-1]

    # Second leg: same pairings, venues reversed
    second_leg = [[(away, home) for home, away in rnd] for rnd in first_leg]

    return first_leg + second_leg


def generate_fixtures(
    teams: Sequence[TeamLike],
    check_unique: bool = False,
) -> list[ScheduledMatch]:
    """Build the season calendar for an even roster.

    Args:
        teams: Ordered teams (or bare team ids).
        check_unique: Reject rosters that repeat a team id.

    Returns:
        n * (n-1) matches in round-major order, ids numbered from 0.

    Raises:
        InvalidRosterSize: If the count is odd or fewer than 2.
        DuplicateParticipant: If ``check_unique`` is set and an id repeats.
    """
    team_ids = [_team_id(t) for t in teams]

    if check_unique:
        repeated = [tid for tid, count in Counter(team_ids).items() if count > 1]
        if repeated:
            raise DuplicateParticipant(repeated)

    rounds = generate_round_robin(team_ids)

    matches: list[ScheduledMatch] = []
    for matchweek, pairings in enumerate(rounds):
        for home, away in pairings:
            matches.append(
                ScheduledMatch(
                    id=len(matches),
                    home_team_id=home,
                    away_team_id=away,
                    matchweek=matchweek,
                )
            )

    logger.debug(f"Generated {len(matches)} fixtures over {len(rounds)} matchweeks")
    return matches


def pad_with_bye(team_ids: Sequence[int]) -> list[int]:
    """Append the bye sentinel to an odd roster so it can be scheduled."""
    padded = list(team_ids)
    if len(padded) % 2 != 0:
        padded.append(BYE_ID)
    return padded


def matches_per_season(num_teams: int) -> int:
    """Total fixtures in a double round-robin of an even roster."""
    return num_teams * (num_teams - 1)


def total_matchdays(num_teams: int) -> int:
    """Total matchdays in a double round-robin season (byes included)."""
    n = num_teams if num_teams % 2 == 0 else num_teams + 1
    return (n - 1) * 2
