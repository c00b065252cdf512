"""Model exports for the championship engine."""

from championship.models.match import ScheduledMatch
from championship.models.team import Team

__all__ = [
    "ScheduledMatch",
    "Team",
]
