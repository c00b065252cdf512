#!/usr/bin/env python3
"""run_full_season.py — Simulate a full championship season.

Usage:
    python scripts/run_full_season.py
    python scripts/run_full_season.py --config config/season.json
    python scripts/run_full_season.py --seed 7 --show-fixtures
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from championship.config import SeasonConfig, load_config
from championship.engine.errors import ChampionshipError
from championship.engine.quick_sim import QuickSimulator
from championship.engine.roster import create_roster
from championship.engine.season import Championship
from championship.engine.standings import format_table, standings_table

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("season")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Championship — Full Season Simulation")
    parser.add_argument("--config", default=None, help="Path to season JSON config")
    parser.add_argument("--seed", type=int, default=None, help="Seed for strengths and scores")
    parser.add_argument("--show-fixtures", action="store_true", help="Print the calendar first")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    args = parser.parse_args(argv)

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    config = load_config(args.config) if args.config else SeasonConfig()
    teams = create_roster(rng=random.Random(args.seed))
    championship = Championship(teams, config=config)

    try:
        championship.start_season()
    except ChampionshipError as exc:
        logger.error(f"Cannot schedule season: {exc}")
        return 1

    names = {t.id: t.name for t in teams}
    if args.show_fixtures:
        for week in range(championship.total_matchweeks):
            print(f"  Matchweek {week + 1}")
            for match in championship.matches_for_matchweek(week):
                print(f"     {names[match.home_team_id]:<20} v {names[match.away_team_id]}")
        print()

    simulator = QuickSimulator(config.quick_sim, rng=np.random.default_rng(args.seed))
    reports = championship.play_full_season(simulator)

    print()
    print("=" * 60)
    print(f"  🏆 SEASON {config.season_id} COMPLETE!")
    print(f"  ⚽ {sum(r.total_goals for r in reports)} goals in {len(reports)} matches")
    print("=" * 60)
    print()
    print(format_table(standings_table(championship.teams)))
    print()
    print(f"  Champion: {championship.standings()[0].name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
