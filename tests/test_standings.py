"""Tests for the standings calculator — ordering, tie-breaks, stability."""

from __future__ import annotations

import pytest

from championship.engine.standings import (
    compute_standings,
    format_table,
    standings_key,
    standings_table,
)
from championship.models.team import Team


def _team(team_id: int, **counters) -> Team:
    return Team(id=team_id, name=f"Team {team_id}", **counters)


class TestComputeStandings:
    def test_points_first(self):
        a = _team(1, wins=1, goals_for=1)
        b = _team(2, draws=4, goals_for=0)
        assert [t.id for t in compute_standings([a, b])] == [2, 1]

    def test_goal_difference_breaks_points_tie(self):
        a = _team(1, wins=2, goals_for=3, goals_against=2)
        b = _team(2, wins=2, goals_for=3, goals_against=0)
        assert [t.id for t in compute_standings([a, b])] == [2, 1]

    def test_goals_scored_breaks_goal_difference_tie(self):
        x = _team(1, wins=2, goals_for=6, goals_against=3)
        y = _team(2, wins=2, goals_for=4, goals_against=1)
        assert [t.id for t in compute_standings([y, x])] == [1, 2]

    def test_all_zero_counters_keep_input_order(self):
        teams = [_team(i) for i in (5, 3, 8, 1)]
        assert [t.id for t in compute_standings(teams)] == [5, 3, 8, 1]

    def test_full_tie_is_stable(self):
        a = _team(1, wins=1, goals_for=2, goals_against=1)
        b = _team(2, wins=1, goals_for=2, goals_against=1)
        assert [t.id for t in compute_standings([b, a])] == [2, 1]

    def test_idempotent(self):
        teams = [_team(1, wins=2), _team(2, draws=3), _team(3, wins=1, draws=3)]
        first = compute_standings(teams)
        second = compute_standings(teams)
        assert [t.id for t in first] == [t.id for t in second]

    def test_input_not_mutated(self):
        teams = [_team(1), _team(2, wins=3)]
        snapshot = [t.model_dump() for t in teams]
        result = compute_standings(teams)
        assert [t.id for t in teams] == [1, 2]
        assert [t.model_dump() for t in teams] == snapshot
        assert result is not teams

    @pytest.mark.parametrize("extra_wins", [1, 2, 5])
    def test_extra_win_never_lowers_rank(self, extra_wins):
        teams = [
            _team(1, wins=3, goals_for=5),
            _team(2, wins=2, draws=2, goals_for=7, goals_against=2),
            _team(3, wins=1, goals_for=1, goals_against=4),
        ]
        before = [t.id for t in compute_standings(teams)].index(3)
        teams[2].wins += extra_wins
        after = [t.id for t in compute_standings(teams)].index(3)
        assert after <= before

    def test_key(self):
        t = _team(1, wins=2, draws=1, goals_for=5, goals_against=2)
        assert standings_key(t) == (7, 3, 5)


class TestStandingsTable:
    def test_rows(self):
        teams = [_team(1, losses=1, goals_against=2), _team(2, wins=1, goals_for=2)]
        rows = standings_table(teams)
        assert [r.position for r in rows] == [1, 2]
        assert rows[0].team_id == 2
        assert rows[0].points == 3
        assert rows[1].goal_difference == -2
        assert rows[1].played == 1

    def test_format_table(self):
        rows = standings_table([_team(1, wins=1, goals_for=3, goals_against=1)])
        text = format_table(rows)
        lines = text.splitlines()
        assert lines[0].split()[:2] == ["#", "Team"]
        assert "Team 1" in lines[2]
        assert lines[2].rstrip().endswith("3")
        assert "+2" in lines[2]
