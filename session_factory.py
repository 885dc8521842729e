"""
Session Factory

Entry point for turning a learner profile into a SessionPlan the interview
engine can run.

Usage:
    from session_factory import create_session_plan, plan_to_messages
    from state import LearnerProfile

    profile = LearnerProfile(age=70, years_in_us=25, accuracy=72, total_sessions=8)
    plan = create_session_plan(profile)

    # Explicit choices override the recommendations
    plan = create_session_plan(profile, mode="full", difficulty="advanced")

    # Custom mode requires validated settings
    plan = create_session_plan(
        profile,
        mode="custom",
        custom_settings={"categories": ["american_history"], "question_count": 10},
    )

    messages = plan_to_messages(plan)
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import ValidationError

from prompts import build_session_prompt
from recommender import recommend_difficulty, recommend_mode, recommend_scenario
from scoring import estimated_duration, score_weights
from specs import (
    CustomSettings,
    DifficultyId,
    DifficultyLevel,
    InterviewMode,
    InvalidCustomSettingsError,
    ModeId,
    ScenarioId,
    ScenarioType,
    UnsupportedDifficultyError,
    coerce_id,
    get_mode,
    nearest_supported_difficulty,
    validate_custom_settings,
)
from state import LearnerProfile, SessionPlan

logger = logging.getLogger(__name__)

CustomSettingsInput = Union[CustomSettings, Mapping[str, Any]]


def create_session_plan(
    profile: LearnerProfile,
    mode: Optional[ModeId] = None,
    difficulty: Optional[DifficultyId] = None,
    scenario: Optional[ScenarioId] = None,
    custom_settings: Optional[CustomSettingsInput] = None,
) -> SessionPlan:
    """
    Build a SessionPlan for one practice session.

    Anything not chosen explicitly is recommended from the profile.

    Args:
        profile: Learner snapshot from the progress store
        mode: Practice mode (recommended when omitted)
        difficulty: Difficulty tier (recommended when omitted)
        scenario: Applicant scenario (recommended when omitted)
        custom_settings: Required for custom mode, ignored otherwise

    Returns:
        Immutable SessionPlan

    Raises:
        CatalogNotFoundError: an explicit id is not in the catalog
        InvalidCustomSettingsError: custom mode without valid settings
        UnsupportedDifficultyError: an explicit difficulty the mode does not offer
    """
    if scenario is None:
        scenario_id = recommend_scenario(profile)
        logger.debug("Recommended scenario %s", scenario_id.value)
    else:
        scenario_id = coerce_id(ScenarioType, scenario, "scenario")

    if mode is None:
        mode_id = recommend_mode(profile.accuracy, profile.total_sessions)
        logger.debug("Recommended mode %s", mode_id.value)
    else:
        mode_id = coerce_id(InterviewMode, mode, "mode")

    settings = None
    if mode_id == InterviewMode.CUSTOM:
        settings = _prepare_custom_settings(custom_settings)
        if difficulty is None:
            difficulty = settings.difficulty

    difficulty_id = _resolve_difficulty(profile, mode_id, difficulty)

    return SessionPlan(
        scenario_id=scenario_id,
        mode_id=mode_id,
        difficulty_id=difficulty_id,
        system_prompt=build_session_prompt(mode_id, difficulty_id, scenario_id, settings),
        score_weights=score_weights(mode_id),
        estimated_duration=estimated_duration(mode_id, difficulty_id),
        custom_settings=settings,
    )


def _prepare_custom_settings(custom_settings: Optional[CustomSettingsInput]) -> CustomSettings:
    """Validate custom settings and return them as a CustomSettings."""
    if custom_settings is None:
        raise InvalidCustomSettingsError(["Custom mode requires custom settings"])

    errors = validate_custom_settings(custom_settings).errors

    if isinstance(custom_settings, Mapping):
        missing = [key for key in ("categories", "question_count") if custom_settings.get(key) is None]
        errors += [f"Missing required setting: {key}" for key in missing]

    if errors:
        logger.warning("Rejected custom settings: %s", errors)
        raise InvalidCustomSettingsError(errors)

    if isinstance(custom_settings, CustomSettings):
        return custom_settings

    try:
        return CustomSettings(**custom_settings)
    except ValidationError as e:
        errors = [_describe_field_error(error) for error in e.errors()]
        logger.warning("Rejected custom settings: %s", errors)
        raise InvalidCustomSettingsError(errors) from None


def _describe_field_error(error) -> str:
    field = ".".join(str(part) for part in error["loc"])
    return f"Invalid {field}: {error['msg']}"


def _resolve_difficulty(
    profile: LearnerProfile,
    mode_id: InterviewMode,
    difficulty: Optional[DifficultyId],
) -> DifficultyLevel:
    """
    Pick the difficulty for a mode.

    An explicit tier must be one the mode supports. A recommended tier is
    clamped into the mode's supported range instead.
    """
    mode_config = get_mode(mode_id)

    if difficulty is not None:
        level = coerce_id(DifficultyLevel, difficulty, "difficulty")
        if not mode_config.supports(level):
            raise UnsupportedDifficultyError(mode_id.value, level.value)
        return level

    recommended = recommend_difficulty(profile.accuracy, profile.total_sessions)
    level = nearest_supported_difficulty(mode_id, recommended)
    if level != recommended:
        logger.info(
            "Clamped difficulty %s to %s for mode %s",
            recommended.value, level.value, mode_id.value,
        )
    return level


def plan_to_messages(plan: SessionPlan, opening: Optional[str] = None) -> List[BaseMessage]:
    """
    Convert a plan into chat messages for the interview engine.

    Args:
        plan: The session plan
        opening: Optional first message from the applicant side

    Returns:
        SystemMessage with the plan's prompt, then the opening if given
    """
    messages: List[BaseMessage] = [SystemMessage(content=plan.system_prompt)]
    if opening:
        messages.append(HumanMessage(content=opening))
    return messages
