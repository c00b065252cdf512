"""Tests for default roster creation."""

from __future__ import annotations

import random

from championship.engine.roster import DEFAULT_CLUBS, PLAYER_CLUB, create_roster


def test_default_roster():
    teams = create_roster()
    assert [t.name for t in teams] == DEFAULT_CLUBS
    assert [t.id for t in teams] == list(range(1, 9))
    assert [t.name for t in teams if t.is_player_controlled] == [PLAYER_CLUB]
    assert all(t.strength == 50.0 for t in teams)


def test_random_strengths_are_seeded():
    first = create_roster(rng=random.Random(5))
    second = create_roster(rng=random.Random(5))
    assert [t.strength for t in first] == [t.strength for t in second]
    assert all(40.0 <= t.strength <= 75.0 for t in first)


def test_custom_names_without_player_club():
    teams = create_roster(["Red", "Blue"], player_club=None)
    assert [t.name for t in teams] == ["Red", "Blue"]
    assert not any(t.is_player_controlled for t in teams)
