"""
Load progression and rep-scheme selection.

Percentages are of the athlete's one-rep max. Every curve here returns a
value in (0, MAX_LOAD_PERCENT].
"""

from __future__ import annotations

import random

from app.config.programming import (
    DEFAULT_BASE_PERCENT,
    DELOAD_BLOCK_INCREMENT,
    DELOAD_EVERY_N_WEEKS,
    DELOAD_FACTOR,
    INTENSITY_TO_PERCENT,
    LINEAR_WEEKLY_INCREMENT,
    MAX_LOAD_PERCENT,
    REP_SCHEMES,
    WAVE_PATTERN,
)
from app.models.enums import TrainingGoal


def _cap(percent: float) -> float:
    return min(percent, MAX_LOAD_PERCENT)


def base_percent_for_intensity(intensity: int) -> float:
    return INTENSITY_TO_PERCENT.get(intensity, DEFAULT_BASE_PERCENT)


def linear_progression(week: int, base_percent: float) -> float:
    """+2.5% per week."""
    return _cap(base_percent + (week - 1) * LINEAR_WEEKLY_INCREMENT)


def wave_progression(week: int, base_percent: float) -> float:
    """8-week repeating offset pattern around the base."""
    return _cap(base_percent + WAVE_PATTERN[(week - 1) % len(WAVE_PATTERN)])


def deload_progression(week: int, base_percent: float) -> float:
    """Every 4th week drops to 70% of base; other weeks gain 5% per completed block."""
    if week % DELOAD_EVERY_N_WEEKS == 0:
        return _cap(base_percent * DELOAD_FACTOR)
    completed_blocks = (week - 1) // DELOAD_EVERY_N_WEEKS
    return _cap(base_percent + completed_blocks * DELOAD_BLOCK_INCREMENT)


PROGRESSIONS = {
    "linear": linear_progression,
    "wave": wave_progression,
    "deload": deload_progression,
}


def select_rep_scheme(goal: TrainingGoal | str, rng: random.Random) -> str:
    """Pick a rep scheme for ``goal`` uniformly at random.

    Unknown goals use the strength list. This is the only non-deterministic
    choice for a given week, pass a seeded ``rng`` for reproducible output.
    """
    key = goal.value if isinstance(goal, TrainingGoal) else goal
    schemes = REP_SCHEMES.get(key, REP_SCHEMES[TrainingGoal.STRENGTH.value])
    return rng.choice(schemes)
