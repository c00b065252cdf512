"""Match reports — finished results delivered by the match simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchReport:
    """Final score of one scheduled match."""
    match_id: int
    home_score: int
    away_score: int

    @property
    def winner(self) -> str:
        """'home', 'away', or 'draw'."""
        if self.home_score > self.away_score:
            return "home"
        elif self.away_score > self.home_score:
            return "away"
        return "draw"

    @property
    def total_goals(self) -> int:
        return self.home_score + self.away_score

    def to_dict(self) -> dict:
        return {
            "match_id": self.match_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "winner": self.winner,
        }
