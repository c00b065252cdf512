"""Standings calculator — ranks teams by points, goal difference, goals scored."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from championship.models.team import Team


def standings_key(team: Team) -> tuple[int, int, int]:
    return (team.points, team.goal_difference, team.goals_for)


def compute_standings(teams: Iterable[Team]) -> list[Team]:
    """Return teams sorted by points, then GD, then GF (best first).

    The sort is stable: teams level on all three keys keep their input order.
    The input is left untouched.
    """
    return sorted(teams, key=standings_key, reverse=True)


@dataclass(frozen=True)
class StandingsRow:
    """One line of a rendered league table."""
    position: int
    team_id: int
    name: str
    played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int

    @classmethod
    def from_team(cls, position: int, team: Team) -> "StandingsRow":
        return cls(
            position=position,
            team_id=team.id,
            name=team.name,
            played=team.matches_played,
            wins=team.wins,
            draws=team.draws,
            losses=team.losses,
            goals_for=team.goals_for,
            goals_against=team.goals_against,
            goal_difference=team.goal_difference,
            points=team.points,
        )


def standings_table(teams: Iterable[Team]) -> list[StandingsRow]:
    """Ranked rows ready for display, positions starting at 1."""
    return [StandingsRow.from_team(i, team) for i, team in enumerate(compute_standings(teams), 1)]


def format_table(rows: list[StandingsRow], name_width: int = 25) -> str:
    """Render standings rows as a fixed-width text table."""
    header = (
        f"{'#':>2}  {'Team':<{name_width}} {'P':>3} {'W':>3} {'D':>3} {'L':>3} "
        f"{'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}"
    )
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            f"{row.position:>2}  {row.name[:name_width]:<{name_width}} {row.played:>3} "
            f"{row.wins:>3} {row.draws:>3} {row.losses:>3} "
            f"{row.goals_for:>4} {row.goals_against:>4} {row.goal_difference:>+4} "
            f"{row.points:>4}"
        )
    return "\n".join(lines)
