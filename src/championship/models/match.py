"""Scheduled match model — one fixture in the championship calendar."""

from __future__ import annotations

import numbers
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from championship.engine.errors import InvalidScore, MatchAlreadyPlayed

_IDENTITY_FIELDS = frozenset({"id", "home_team_id", "away_team_id", "matchweek"})


class ScheduledMatch(BaseModel):
    """A fixture between two distinct teams.

    Identity (teams, venue order, matchweek) is fixed at creation. The played
    flag and scores change once, through ``record_score``.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=0, description="Position in the season calendar")
    home_team_id: int
    away_team_id: int
    matchweek: int = Field(ge=0, description="Round number, origin 0")
    is_played: bool = Field(default=False)
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _distinct_teams(self) -> "ScheduledMatch":
        if self.home_team_id == self.away_team_id:
            raise ValueError(f"Team {self.home_team_id} cannot play itself")
        return self

    def __setattr__(self, name: str, value) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"ScheduledMatch.{name} is immutable once created")
        super().__setattr__(name, value)

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def opponent_of(self, team_id: int) -> int:
        if team_id == self.home_team_id:
            return self.away_team_id
        if team_id == self.away_team_id:
            return self.home_team_id
        raise KeyError(f"Team {team_id} does not play in match {self.id}")

    def record_score(self, home_score: int, away_score: int) -> None:
        """Mark the match as played with its final score."""
        if self.is_played:
            raise MatchAlreadyPlayed(f"Match {self.id} already has a result: {self.scoreline()}")
        if not all(
            isinstance(s, numbers.Integral) and not isinstance(s, bool)
            for s in (home_score, away_score)
        ):
            raise InvalidScore(f"Scores must be whole numbers, got {home_score!r}-{away_score!r}")
        home_score, away_score = int(home_score), int(away_score)
        if home_score < 0 or away_score < 0:
            raise InvalidScore(f"Scores must be non-negative, got {home_score}-{away_score}")
        self.home_score = home_score
        self.away_score = away_score
        self.is_played = True

    @property
    def winner_id(self) -> Optional[int]:
        """Winning team id, or None for a draw or an unplayed match."""
        if not self.is_played or self.home_score == self.away_score:
            return None
        if self.home_score > self.away_score:
            return self.home_team_id
        return self.away_team_id

    def scoreline(self) -> str:
        if not self.is_played:
            return f"{self.home_team_id} v {self.away_team_id}"
        return f"{self.home_team_id} {self.home_score} - {self.away_score} {self.away_team_id}"
