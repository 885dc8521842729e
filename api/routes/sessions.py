"""
Session configuration API routes.
Exposes the catalogs, recommendations and session-plan creation to the learner app.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import Optional, Dict, Any
import logging
import random

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from recommender import recommend
from session_factory import create_session_plan
from specs import (
    CatalogNotFoundError,
    DifficultyConfig,
    InvalidCustomSettingsError,
    ModeConfig,
    Scenario,
    UnsupportedDifficultyError,
    ValidationResult,
    get_available_categories,
    get_category_label,
    get_mode,
    get_random_scenario,
    get_scenario,
    list_difficulties,
    list_modes,
    list_scenarios,
    validate_custom_settings,
)
from state import LearnerProfile, Recommendation, SessionPlan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["sessions"])


def get_random_source() -> random.Random:
    """Random source for scenario selection. Overridden in tests."""
    return random.Random()


class CategoryInfo(BaseModel):
    id: str
    label: str


class SessionPlanRequest(BaseModel):
    profile: LearnerProfile = LearnerProfile()
    mode: Optional[str] = None
    difficulty: Optional[str] = None
    scenario: Optional[str] = None
    custom_settings: Optional[Dict[str, Any]] = None


# =============================================================================
# CATALOG
# =============================================================================

@router.get("/modes", response_model=list[ModeConfig])
async def get_modes():
    """List all practice modes."""
    return list_modes()


@router.get("/modes/{mode_id}", response_model=ModeConfig)
async def get_mode_by_id(mode_id: str):
    """Get one practice mode."""
    try:
        return get_mode(mode_id)
    except CatalogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/difficulties", response_model=list[DifficultyConfig])
async def get_difficulties():
    """List all difficulty tiers, easiest first."""
    return list_difficulties()


@router.get("/categories", response_model=list[CategoryInfo])
async def get_categories():
    """List civics categories available to custom sessions."""
    return [
        CategoryInfo(id=category, label=get_category_label(category))
        for category in get_available_categories()
    ]


@router.get("/scenarios", response_model=list[Scenario])
async def get_scenarios():
    """List all applicant scenarios."""
    return list_scenarios()


# Registered before /scenarios/{scenario_id} so "random" is not taken as an id
@router.get("/scenarios/random", response_model=Scenario)
async def get_random(
    seed: Optional[int] = None,
    rng: random.Random = Depends(get_random_source),
):
    """Pick a scenario at random. A seed makes the pick repeatable."""
    if seed is not None:
        rng = random.Random(seed)
    return get_random_scenario(rng)


@router.get("/scenarios/{scenario_id}", response_model=Scenario)
async def get_scenario_by_id(scenario_id: str):
    """Get one applicant scenario."""
    try:
        return get_scenario(scenario_id)
    except CatalogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

@router.post("/recommendations", response_model=Recommendation)
async def get_recommendation(profile: LearnerProfile):
    """Recommend a scenario, mode and difficulty for a learner."""
    return recommend(profile)


@router.post("/custom-settings/validate", response_model=ValidationResult)
async def validate_settings(settings: Dict[str, Any]):
    """Check custom settings. Problems are reported in the body, not as an error status."""
    return validate_custom_settings(settings)


@router.post("/session-plans", response_model=SessionPlan)
async def create_plan(request: SessionPlanRequest):
    """Build a session plan, recommending anything the request leaves out."""
    try:
        return create_session_plan(
            request.profile,
            mode=request.mode,
            difficulty=request.difficulty,
            scenario=request.scenario,
            custom_settings=request.custom_settings,
        )
    except CatalogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidCustomSettingsError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    except UnsupportedDifficultyError as e:
        logger.info("Refused session plan: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
