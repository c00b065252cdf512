"""Season configuration — explicit settings handed to the season controller.

Loaded from a JSON file of the form::

    {
        "season": {"season_id": "25/26", "shuffle_fixtures": true, "seed": 7},
        "quick_sim": {"home_advantage": 1.15, "goal_scale": 1.5}
    }

Missing keys fall back to the defaults below.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class QuickSimSettings(BaseModel):
    """Tuning constants for the quick score simulator."""
    home_advantage: float = Field(default=1.15, ge=1.0, description="Home strength multiplier")
    goal_scale: float = Field(default=1.5, gt=0.0, description="Expected goals at equal strength")
    max_expected_goals: float = Field(default=6.0, gt=0.0)
    max_goals: int = Field(default=8, ge=0, description="Hard cap on goals per side")


class SeasonConfig(BaseModel):
    """Settings for one championship season."""
    season_id: str = Field(default="25/26", description="Season identifier")
    shuffle_fixtures: bool = Field(
        default=False, description="Shuffle roster order before generating the calendar",
    )
    seed: Optional[int] = Field(default=None, description="Seed for roster shuffling")
    allow_bye: bool = Field(
        default=False, description="Pad odd rosters with a bye instead of rejecting them",
    )
    check_unique_ids: bool = Field(default=False, description="Reject repeated team ids")
    quick_sim: QuickSimSettings = Field(default_factory=QuickSimSettings)


def load_config(path: str | Path) -> SeasonConfig:
    """Load a SeasonConfig from JSON, using defaults when the file is absent."""
    path = Path(path)
    if not path.exists():
        logger.warning(f"Config file not found: {path}, using defaults")
        return SeasonConfig()

    with open(path) as f:
        raw = json.load(f)

    season = dict(raw.get("season", {}))
    if "quick_sim" in raw:
        season["quick_sim"] = raw["quick_sim"]
    return SeasonConfig.model_validate(season)
