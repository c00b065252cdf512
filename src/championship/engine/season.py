"""Championship — season controller owning the roster, calendar and matchweek.

Generates the fixture calendar at season start, folds reported results into
team counters, and serves standings and "what's next" queries to the
presentation layer.
"""

from __future__ import annotations

import logging
import random
import threading
from collections import Counter
from collections.abc import Callable, Sequence
from typing import Optional

from championship.config import SeasonConfig
from championship.engine.errors import (
    DuplicateParticipant,
    RoundNotComplete,
    UnknownMatch,
)
from championship.engine.fixture_generator import (
    BYE_ID,
    generate_fixtures,
    pad_with_bye,
)
from championship.engine.match_report import MatchReport
from championship.engine.standings import compute_standings
from championship.models.match import ScheduledMatch
from championship.models.team import Team

logger = logging.getLogger(__name__)

# (match, home, away) -> report
MatchSimulatorFn = Callable[[ScheduledMatch, Team, Team], MatchReport]


class Championship:
    """Run a double round-robin championship."""

    def __init__(self, teams: Sequence[Team], config: SeasonConfig | None = None):
        """Initialize the championship.

        Args:
            teams: Ordered roster. Order seeds the fixture rotation.
            config: Season settings. Defaults if None.
        """
        self.config = config or SeasonConfig()
        self.teams: list[Team] = list(teams)
        self._teams_by_id = {t.id: t for t in self.teams}
        if len(self._teams_by_id) != len(self.teams):
            counts = Counter(t.id for t in self.teams)
            raise DuplicateParticipant([tid for tid, n in counts.items() if n > 1])

        self.matches: list[ScheduledMatch] = []
        self._matches_by_id: dict[int, ScheduledMatch] = {}
        self.current_matchweek = 0
        self.total_matchweeks = 0
        self._lock = threading.Lock()

    # ── Season lifecycle ─────────────────────────────────────────────────

    def start_season(self) -> list[ScheduledMatch]:
        """Reset counters and replace the calendar with a freshly generated one.

        Nothing changes if generation fails.
        """
        team_ids = [t.id for t in self.teams]
        if self.config.shuffle_fixtures:
            random.Random(self.config.seed).shuffle(team_ids)
        if self.config.allow_bye:
            team_ids = pad_with_bye(team_ids)

        fixtures = generate_fixtures(team_ids, check_unique=self.config.check_unique_ids)

        for team in self.teams:
            team.reset_season()

        self.total_matchweeks = max((m.matchweek for m in fixtures), default=-1) + 1
        self.matches = [m for m in fixtures if not m.involves(BYE_ID)]
        self._matches_by_id = {m.id: m for m in self.matches}
        self.current_matchweek = 0

        logger.info(
            f"Season {self.config.season_id}: {len(self.teams)} teams, "
            f"{len(self.matches)} matches over {self.total_matchweeks} matchweeks"
        )
        return self.matches

    @property
    def is_complete(self) -> bool:
        return bool(self.matches) and all(m.is_played for m in self.matches)

    @property
    def played_matches(self) -> list[ScheduledMatch]:
        return [m for m in self.matches if m.is_played]

    @property
    def remaining_matches(self) -> list[ScheduledMatch]:
        return [m for m in self.matches if not m.is_played]

    # ── Queries ──────────────────────────────────────────────────────────

    def get_team(self, team_id: int) -> Team:
        try:
            return self._teams_by_id[team_id]
        except KeyError:
            raise KeyError(f"Unknown team id: {team_id}") from None

    def get_match(self, match_id: int) -> ScheduledMatch:
        try:
            return self._matches_by_id[match_id]
        except KeyError:
            raise UnknownMatch(f"No match with id {match_id} in the calendar") from None

    @property
    def player_team(self) -> Optional[Team]:
        return next((t for t in self.teams if t.is_player_controlled), None)

    def matches_for_matchweek(self, matchweek: int) -> list[ScheduledMatch]:
        return [m for m in self.matches if m.matchweek == matchweek]

    def next_match_for(self, team_id: int) -> Optional[ScheduledMatch]:
        """First unplayed fixture involving the team, in calendar order."""
        return next((m for m in self.matches if not m.is_played and m.involves(team_id)), None)

    def standings(self) -> list[Team]:
        return compute_standings(self.teams)

    # ── Results ──────────────────────────────────────────────────────────

    def record_result(self, report: MatchReport) -> ScheduledMatch:
        """Mark a match played and fold its score into both teams' counters."""
        with self._lock:
            match = self.get_match(report.match_id)
            match.record_score(report.home_score, report.away_score)

            self.get_team(match.home_team_id).apply_result(report.home_score, report.away_score)
            self.get_team(match.away_team_id).apply_result(report.away_score, report.home_score)

        logger.debug(f"Matchweek {match.matchweek}: {match.scoreline()}")
        return match

    def simulate_matchweek(
        self,
        matchweek: int,
        simulator: MatchSimulatorFn,
        skip_player_matches: bool = False,
    ) -> list[MatchReport]:
        """Play every unplayed match of a matchweek through ``simulator``.

        With ``skip_player_matches`` the player-controlled team's fixture is
        left for the interactive match engine.
        """
        player = self.player_team
        reports = []
        for match in self.matches_for_matchweek(matchweek):
            if match.is_played:
                continue
            if skip_player_matches and player is not None and match.involves(player.id):
                continue
            home = self.get_team(match.home_team_id)
            away = self.get_team(match.away_team_id)
            report = simulator(match, home, away)
            self.record_result(report)
            reports.append(report)

        logger.info(f"Matchweek {matchweek}: {len(reports)} matches simulated")
        return reports

    def advance_matchweek(self) -> int:
        """Move to the next matchweek once every fixture of the current one is played."""
        pending = [m for m in self.matches_for_matchweek(self.current_matchweek) if not m.is_played]
        if pending:
            raise RoundNotComplete(
                f"Matchweek {self.current_matchweek} still has {len(pending)} unplayed matches"
            )
        if self.current_matchweek < self.total_matchweeks:
            self.current_matchweek += 1
        return self.current_matchweek

    def play_full_season(self, simulator: MatchSimulatorFn) -> list[MatchReport]:
        """Simulate all remaining matchweeks."""
        reports: list[MatchReport] = []
        while self.current_matchweek < self.total_matchweeks:
            reports.extend(self.simulate_matchweek(self.current_matchweek, simulator))
            self.advance_matchweek()

        logger.info(
            f"Season {self.config.season_id} complete! "
            f"{len(self.played_matches)} matches, "
            f"{sum(r.total_goals for r in reports)} goals"
        )
        return reports
