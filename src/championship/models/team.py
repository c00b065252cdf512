"""Team model — a championship participant and its season counters."""

from __future__ import annotations

from pydantic import BaseModel, Field

POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1


class Team(BaseModel):
    """A club taking part in the championship."""
    id: int = Field(ge=0, description="Stable identifier, unique within a season")
    name: str
    is_player_controlled: bool = Field(default=False)
    strength: float = Field(default=50.0, ge=1.0, le=100.0, description="Quick-sim rating")

    # Season tracking
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    goals_for: int = Field(default=0, ge=0)
    goals_against: int = Field(default=0, ge=0)

    @property
    def points(self) -> int:
        return self.wins * POINTS_PER_WIN + self.draws * POINTS_PER_DRAW

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def matches_played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points_per_match(self) -> float:
        return self.points / max(1, self.matches_played)

    def reset_season(self) -> None:
        """Zero the standings counters while preserving identity."""
        self.wins = 0
        self.draws = 0
        self.losses = 0
        self.goals_for = 0
        self.goals_against = 0

    def apply_result(self, goals_for: int, goals_against: int) -> None:
        """Apply a single match result to standings."""
        self.goals_for += goals_for
        self.goals_against += goals_against
        if goals_for > goals_against:
            self.wins += 1
        elif goals_for == goals_against:
            self.draws += 1
        else:
            self.losses += 1
