"""
Interview Catalog

Static registries the session configurator selects from: interview phases,
practice modes, difficulty tiers, civics categories and applicant scenarios,
plus validation of learner-supplied custom settings.

Usage:
    from specs import (
        get_mode,
        get_difficulty,
        get_scenario,
        list_scenarios,
        validate_custom_settings,
    )

    mode = get_mode("full")
    difficulty = get_difficulty("beginner")
    scenario = get_scenario("senior_65plus")

    result = validate_custom_settings({"question_count": 10, "categories": ["american_history"]})
    if not result.valid:
        show_errors(result.errors)
"""

from .errors import (
    CatalogNotFoundError,
    InvalidCustomSettingsError,
    UnsupportedDifficultyError,
)

from .mode_schema import (
    # Enums
    Phase,
    InterviewMode,
    DifficultyLevel,
    ModeId,
    DifficultyId,
    PhaseId,

    # Models
    PhaseInfo,
    ModeConfig,
    DifficultyConfig,
    ScoreWeights,

    # Registries
    PHASES,
    INTERVIEW_MODES,
    DIFFICULTY_CONFIGS,
    CATEGORY_FOCUS_AREAS,

    # Lookups
    get_phase,
    get_mode,
    get_difficulty,
    list_modes,
    list_difficulties,
    get_available_categories,
    get_category_label,
    nearest_supported_difficulty,
    coerce_id,
)

from .scenario_schema import (
    ScenarioType,
    ScenarioId,
    ApplicantProfile,
    CivicsPreferences,
    Scenario,
    INTERVIEW_SCENARIOS,
    get_scenario,
    list_scenarios,
    get_scenarios_by_difficulty,
    get_random_scenario,
)

from .custom_settings import (
    CustomSettings,
    ValidationResult,
    validate_custom_settings,
    MIN_QUESTION_COUNT,
    MAX_QUESTION_COUNT,
    MIN_TIME_LIMIT_MINUTES,
)

__all__ = [
    # Errors
    "CatalogNotFoundError",
    "InvalidCustomSettingsError",
    "UnsupportedDifficultyError",

    # Enums
    "Phase",
    "InterviewMode",
    "DifficultyLevel",
    "ScenarioType",
    "ModeId",
    "DifficultyId",
    "PhaseId",
    "ScenarioId",

    # Models
    "PhaseInfo",
    "ModeConfig",
    "DifficultyConfig",
    "ScoreWeights",
    "ApplicantProfile",
    "CivicsPreferences",
    "Scenario",
    "CustomSettings",
    "ValidationResult",

    # Registries
    "PHASES",
    "INTERVIEW_MODES",
    "DIFFICULTY_CONFIGS",
    "CATEGORY_FOCUS_AREAS",
    "INTERVIEW_SCENARIOS",

    # Lookups
    "get_phase",
    "get_mode",
    "get_difficulty",
    "list_modes",
    "list_difficulties",
    "get_available_categories",
    "get_category_label",
    "nearest_supported_difficulty",
    "coerce_id",
    "get_scenario",
    "list_scenarios",
    "get_scenarios_by_difficulty",
    "get_random_scenario",

    # Validation
    "validate_custom_settings",
    "MIN_QUESTION_COUNT",
    "MAX_QUESTION_COUNT",
    "MIN_TIME_LIMIT_MINUTES",
]
