"""Quick score simulator — instant results for matches nobody watches.

Stands in for the real-time match engine when AI clubs play each other:
goal counts are Poisson draws whose means come from the ratio of team
strengths, with a multiplier for the home side.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from championship.config import QuickSimSettings
from championship.engine.match_report import MatchReport
from championship.models.match import ScheduledMatch
from championship.models.team import Team

logger = logging.getLogger(__name__)


class QuickSimulator:
    """Poisson score generator driven by ``Team.strength``."""

    def __init__(
        self,
        settings: QuickSimSettings | None = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.settings = settings or QuickSimSettings()
        self.rng = rng if rng is not None else np.random.default_rng()

    def expected_goals(self, attack_strength: float, defence_strength: float) -> float:
        ratio = attack_strength / max(defence_strength, 1.0)
        return min(self.settings.max_expected_goals, max(0.0, ratio * self.settings.goal_scale))

    def simulate_score(self, home: Team, away: Team) -> tuple[int, int]:
        home_strength = home.strength * self.settings.home_advantage
        away_strength = away.strength

        home_goals = int(self.rng.poisson(self.expected_goals(home_strength, away_strength)))
        away_goals = int(self.rng.poisson(self.expected_goals(away_strength, home_strength)))

        cap = self.settings.max_goals
        return min(home_goals, cap), min(away_goals, cap)

    def __call__(self, match: ScheduledMatch, home: Team, away: Team) -> MatchReport:
        home_goals, away_goals = self.simulate_score(home, away)
        logger.debug(f"Quick-sim {home.name} {home_goals} - {away_goals} {away.name}")
        return MatchReport(match_id=match.id, home_score=home_goals, away_score=away_goals)
