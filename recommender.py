"""
Recommendation Engine - picks a scenario, mode and difficulty for a learner.

All functions are pure decision lists over the learner profile. The first
rule that matches wins.
"""
from typing import Union

from specs import DifficultyLevel, InterviewMode, ScenarioType
from state import LearnerProfile, Recommendation

# Senior accommodations (65/20 rule)
SENIOR_MIN_AGE = 65
SENIOR_MIN_YEARS_IN_US = 20

RECENT_ARRIVAL_MAX_YEARS = 6
LONG_RESIDENCE_MIN_YEARS = 15

# Mode thresholds
MODE_MIN_SESSIONS = 3
MODE_CONFIDENCE_BELOW = 60
MODE_FULL_BELOW = 80

# Difficulty thresholds
DIFFICULTY_MIN_SESSIONS = 5
DIFFICULTY_INTERMEDIATE_FROM = 70
DIFFICULTY_ADVANCED_FROM = 80
DIFFICULTY_EXPERT_FROM = 90

Number = Union[int, float]


def recommend_scenario(profile: LearnerProfile) -> ScenarioType:
    """
    Map a learner profile to the applicant scenario that fits it best.

    Precedence:
    1. Senior (65+ years old, 20+ years in the US)
    2. Military service
    3. Travel history
    4. Employment gaps
    5. Recent arrival (6 years or fewer)
    6. Long residence (15 years or more)
    7. Standard first-time applicant

    A years_in_us of 0 is a real value and counts as a recent arrival.
    """
    age = profile.age
    years = profile.years_in_us

    if age is not None and years is not None:
        if age >= SENIOR_MIN_AGE and years >= SENIOR_MIN_YEARS_IN_US:
            return ScenarioType.SENIOR_65PLUS

    if profile.is_military:
        return ScenarioType.MILITARY_SERVICE

    if profile.has_travel:
        return ScenarioType.COMPLEX_TRAVEL

    if profile.has_employment_gaps:
        return ScenarioType.EMPLOYMENT_GAPS

    if years is not None and years <= RECENT_ARRIVAL_MAX_YEARS:
        return ScenarioType.RECENT_ARRIVAL

    if years is not None and years >= LONG_RESIDENCE_MIN_YEARS:
        return ScenarioType.LONG_RESIDENCE

    return ScenarioType.FIRST_TIME_STANDARD


def recommend_mode(accuracy: Number, sessions: Number) -> InterviewMode:
    """Pick a practice mode from rolling accuracy (0-100) and completed sessions"""
    # New learners build confidence first
    if sessions < MODE_MIN_SESSIONS:
        return InterviewMode.CONFIDENCE

    if accuracy < MODE_CONFIDENCE_BELOW:
        return InterviewMode.CONFIDENCE

    if accuracy < MODE_FULL_BELOW:
        return InterviewMode.FULL

    return InterviewMode.STRESS


def recommend_difficulty(accuracy: Number, sessions: Number) -> DifficultyLevel:
    """Pick a difficulty tier from rolling accuracy (0-100) and completed sessions"""
    if sessions < DIFFICULTY_MIN_SESSIONS:
        return DifficultyLevel.BEGINNER

    if accuracy < DIFFICULTY_INTERMEDIATE_FROM:
        return DifficultyLevel.BEGINNER
    elif accuracy < DIFFICULTY_ADVANCED_FROM:
        return DifficultyLevel.INTERMEDIATE
    elif accuracy < DIFFICULTY_EXPERT_FROM:
        return DifficultyLevel.ADVANCED
    else:
        return DifficultyLevel.EXPERT


def recommend(profile: LearnerProfile) -> Recommendation:
    """Run all three recommendations for one profile"""
    return Recommendation(
        scenario=recommend_scenario(profile),
        mode=recommend_mode(profile.accuracy, profile.total_sessions),
        difficulty=recommend_difficulty(profile.accuracy, profile.total_sessions),
    )
