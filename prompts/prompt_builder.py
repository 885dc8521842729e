"""
Prompt Builder for the interview officer.

The system prompt handed to the conversational engine is assembled from:
1. A fixed role framing (USCIS officer)
2. A behavioral instruction for the practice mode
3. Difficulty settings (pace, encouragement, leniency)
4. The phases the mode runs, in order
5. Question counts
6. General guidelines

Optionally followed by the applicant scenario the learner is rehearsing.
Output is plain text: no markup beyond line breaks and "-" bullets.
"""

from typing import Optional, Sequence

from specs import (
    CustomSettings,
    DifficultyConfig,
    DifficultyId,
    InterviewMode,
    ModeConfig,
    ModeId,
    Scenario,
    ScenarioId,
    get_difficulty,
    get_mode,
    get_phase,
    get_scenario,
)


ROLE_FRAMING = "You are a professional USCIS officer conducting a naturalization interview. "

GENERAL_GUIDELINES = """

General Guidelines:
- Maintain a professional and respectful tone
- Clearly articulate each question
- Listen carefully to responses
- Provide appropriate feedback based on difficulty level
- Complete the interview naturally within the time limit
- Remember: The goal is to help the applicant prepare while maintaining realism"""

DEFAULT_FOCUS = "various topics"


# =============================================================================
# PROMPT BUILDERS
# =============================================================================

def build_system_prompt(
    mode_id: ModeId,
    difficulty_id: DifficultyId,
    custom_settings: Optional[CustomSettings] = None,
) -> str:
    """
    Build the interviewer system prompt for a mode and difficulty.

    Args:
        mode_id: Practice mode
        difficulty_id: Difficulty tier
        custom_settings: Only read in custom mode, for its focus areas

    Returns:
        The prompt text. Same inputs always give the same text.
    """
    mode = get_mode(mode_id)
    difficulty = get_difficulty(difficulty_id)

    sections = [
        ROLE_FRAMING,
        _build_mode_instruction(mode, custom_settings),
        _build_difficulty_section(difficulty),
        _build_phase_section(mode),
        _build_question_count_section(mode),
        GENERAL_GUIDELINES,
    ]

    return "".join(sections)


def build_session_prompt(
    mode_id: ModeId,
    difficulty_id: DifficultyId,
    scenario_id: ScenarioId,
    custom_settings: Optional[CustomSettings] = None,
) -> str:
    """System prompt followed by the applicant scenario section"""
    base = build_system_prompt(mode_id, difficulty_id, custom_settings)
    scenario = get_scenario(scenario_id)
    return f"{base}\n\n{build_scenario_section(scenario)}"


def _build_mode_instruction(mode: ModeConfig, custom_settings: Optional[CustomSettings]) -> str:
    """One behavioral sentence per mode."""

    if mode.id == InterviewMode.QUICK:
        return (
            f"This is a quick civics practice session ({mode.duration} minutes). "
            "Focus on civics questions only. "
        )
    elif mode.id == InterviewMode.FULL:
        return (
            f"This is a complete naturalization interview simulation ({mode.duration} minutes). "
            "Follow the standard USCIS interview structure. "
        )
    elif mode.id == InterviewMode.STRESS:
        return (
            "This is a stress test simulation. Ask questions rapidly with minimal waiting time. "
            "Maintain professional pressure to test the applicant's performance under stress. "
        )
    elif mode.id == InterviewMode.CONFIDENCE:
        return (
            "This is a confidence-building session. Be extra encouraging and supportive. "
            "Use simpler questions and provide positive reinforcement frequently. "
        )
    elif mode.id == InterviewMode.CUSTOM:
        focus_areas = custom_settings.focus_areas if custom_settings else ()
        focus_text = ", ".join(focus_areas) if focus_areas else DEFAULT_FOCUS
        return f"This is a custom practice session focusing on: {focus_text}. "

    raise ValueError(f"No instruction for mode: {mode.id}")


def _build_difficulty_section(difficulty: DifficultyConfig) -> str:
    """Difficulty header plus behavior lines switched on by its flags."""

    lines = [
        f"\n\nDifficulty Level: {difficulty.name}\n",
        f"Speaking Pace: {difficulty.speaking_pace}\n",
        f"Encouragement: {difficulty.encouragement_level}\n",
    ]

    if difficulty.allow_rephrasing:
        lines.append("- Rephrase questions if the applicant doesn't understand\n")

    if difficulty.encouragement_level == "high":
        lines.append("- Provide frequent positive reinforcement\n")
        lines.append("- Be patient and understanding\n")

    if difficulty.strict_evaluation:
        lines.append("- Evaluate answers strictly but fairly\n")
        lines.append("- Note even minor errors in responses\n")
    else:
        lines.append("- Be lenient with minor grammatical errors that don't affect meaning\n")
        lines.append("- Focus on whether the applicant understands the content\n")

    return "".join(lines)


def _build_phase_section(mode: ModeConfig) -> str:
    lines = ["\n\nInterview Phases to Complete:\n"]
    for phase in mode.phases:
        info = get_phase(phase)
        lines.append(f"- {info.name}: {info.description}\n")
    return "".join(lines)


def _build_question_count_section(mode: ModeConfig) -> str:
    lines = []

    if mode.civics_question_count > 0:
        lines.append(
            f"\nAsk {mode.civics_question_count} civics questions from the official 100/128-question list.\n"
        )

    if mode.n400_question_count > 0:
        lines.append(
            f"Ask {mode.n400_question_count} questions about the applicant's N-400 application.\n"
        )

    return "".join(lines)


# =============================================================================
# SCENARIO SECTION
# =============================================================================

def build_scenario_section(scenario: Scenario) -> str:
    """
    Render the applicant persona for the interviewer.

    Includes the persona instructions, the N-400 questions to focus on and
    any special considerations.
    """
    parts = [
        f"Applicant Scenario: {scenario.name}",
        "",
        scenario.system_prompt,
        "",
        "N-400 Focus Questions:",
        _bullets(scenario.n400_focus_questions),
    ]

    if scenario.special_considerations:
        parts.extend([
            "",
            "Special Considerations:",
            _bullets(scenario.special_considerations),
        ])

    return "\n".join(parts)


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"- {item}" for item in items)
