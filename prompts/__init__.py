"""
Prompt templates for the interview officer.
"""
from .prompt_builder import (
    build_scenario_section,
    build_session_prompt,
    build_system_prompt,
)

__all__ = ["build_system_prompt", "build_session_prompt", "build_scenario_section"]
