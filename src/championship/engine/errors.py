"""Exceptions raised by the championship engine."""

from __future__ import annotations


class ChampionshipError(ValueError):
    """Base class for every championship validation failure."""


class InvalidRosterSize(ChampionshipError):
    """Fixture generation needs an even roster of at least two teams."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Need an even number of teams (at least 2), got {count}")


class DuplicateParticipant(ChampionshipError):
    """The same team id was passed more than once."""

    def __init__(self, team_ids: list[int]):
        self.team_ids = team_ids
        super().__init__(f"Duplicate team ids in roster: {sorted(team_ids)}")


class UnknownMatch(ChampionshipError, LookupError):
    """A result was reported for a match that is not in the calendar."""


class MatchAlreadyPlayed(ChampionshipError):
    """A match result can be recorded only once."""


class InvalidScore(ChampionshipError):
    """Scores must be non-negative integers."""


class RoundNotComplete(ChampionshipError):
    """The matchweek pointer cannot advance past unplayed fixtures."""
