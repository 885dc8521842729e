"""
Scoring weights and duration estimates for a session.
"""
import math

from specs import (
    DifficultyId,
    ModeId,
    ScoreWeights,
    get_difficulty,
    get_mode,
)

# Slower speech stretches a session, rapid speech compresses it
PACE_MULTIPLIERS = {
    "slow": 1.3,
    "rapid": 0.7,
}


def score_weights(mode_id: ModeId) -> ScoreWeights:
    """Percentage weight of civics, English, N-400, reading and writing for a mode"""
    return get_mode(mode_id).score_weights


def estimated_duration(mode_id: ModeId, difficulty_id: DifficultyId) -> int:
    """
    Estimate session length in minutes.

    The mode's base duration is scaled by the difficulty's speaking pace and
    rounded to the nearest minute (halves round up).
    """
    mode = get_mode(mode_id)
    difficulty = get_difficulty(difficulty_id)

    minutes = mode.duration * PACE_MULTIPLIERS.get(difficulty.speaking_pace, 1.0)
    return int(math.floor(minutes + 0.5))
