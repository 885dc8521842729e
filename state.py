"""
Inputs and outputs of the session configurator.
"""
from typing import Optional

from pydantic import BaseModel, Field

from specs import (
    CustomSettings,
    DifficultyLevel,
    InterviewMode,
    ScenarioType,
    ScoreWeights,
)


class LearnerProfile(BaseModel):
    """
    Snapshot of a learner, read from the progress store for one request.

    Numeric fields left as None never satisfy a recommendation rule.
    Accuracy and session counts are taken as given; clamping them is the
    caller's job.
    """
    age: Optional[int] = None
    years_in_us: Optional[float] = None
    has_travel: bool = False
    has_employment_gaps: bool = False
    is_military: bool = False

    accuracy: float = 0  # rolling, 0-100
    total_sessions: int = 0


class Recommendation(BaseModel):
    scenario: ScenarioType
    mode: InterviewMode
    difficulty: DifficultyLevel


class SessionPlan(BaseModel):
    """Everything the interview engine needs to run one practice session"""
    scenario_id: ScenarioType
    mode_id: InterviewMode
    difficulty_id: DifficultyLevel

    system_prompt: str = Field(min_length=1)
    score_weights: ScoreWeights
    estimated_duration: int  # minutes

    custom_settings: Optional[CustomSettings] = None

    class Config:
        frozen = True
