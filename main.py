"""
Main entry point for the Naturalization Interview session configurator.
Provides a CLI for previewing the session plan a learner would get.
"""
import random
import sys

from recommender import recommend
from session_factory import create_session_plan
from specs import (
    CatalogNotFoundError,
    InterviewMode,
    UnsupportedDifficultyError,
    get_random_scenario,
    list_difficulties,
    list_modes,
    list_scenarios,
)
from state import LearnerProfile, SessionPlan


def print_separator():
    print("=" * 60)


def print_catalog():
    """Print modes, difficulty tiers and scenarios."""
    print("\nPractice Modes:")
    print("-" * 40)
    for mode in list_modes():
        tiers = ", ".join(level.value for level in mode.supported_difficulties)
        print(f"  {mode.id.value:<12} {mode.name} ({mode.duration} min) [{tiers}]")

    print("\nDifficulty Levels:")
    print("-" * 40)
    for difficulty in list_difficulties():
        print(f"  {difficulty.level.value:<12} {difficulty.description}")

    print("\nScenarios:")
    print("-" * 40)
    for scenario in list_scenarios():
        print(f"  {scenario.id.value:<22} {scenario.name}")
    print()


def print_plan(plan: SessionPlan):
    """Print a session plan."""
    print_separator()
    print("SESSION PLAN")
    print_separator()
    print(f"\nScenario:   {plan.scenario_id.value}")
    print(f"Mode:       {plan.mode_id.value}")
    print(f"Difficulty: {plan.difficulty_id.value}")
    print(f"Duration:   ~{plan.estimated_duration} min")

    print("\nScore Weights:")
    print("-" * 40)
    for section, weight in plan.score_weights.model_dump().items():
        if weight:
            print(f"  {section:<10} {weight}%")

    print("\nSystem Prompt:")
    print("-" * 40)
    print(plan.system_prompt)
    print()


def build_profile(args) -> LearnerProfile:
    return LearnerProfile(
        age=args.age,
        years_in_us=args.years,
        has_travel=args.travel,
        has_employment_gaps=args.employment_gaps,
        is_military=args.military,
        accuracy=args.accuracy,
        total_sessions=args.sessions,
    )


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Naturalization Interview session configurator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Anything not given is recommended from the learner profile.

Examples:
  python main.py --age 70 --years 25            # Senior applicant
  python main.py --accuracy 85 --sessions 12    # Experienced learner
  python main.py --mode full --difficulty expert
  python main.py --seed 7                       # Random scenario, repeatable
  python main.py --list                         # Show the catalog
        """,
    )
    parser.add_argument("--age", type=int, help="Applicant age in years")
    parser.add_argument("--years", type=float, help="Years living in the US")
    parser.add_argument("--travel", action="store_true", help="Has extended travel history")
    parser.add_argument("--employment-gaps", action="store_true", help="Has employment gaps")
    parser.add_argument("--military", action="store_true", help="Has served in the US military")
    parser.add_argument("--accuracy", type=float, default=0, help="Rolling accuracy, 0-100")
    parser.add_argument("--sessions", type=int, default=0, help="Completed practice sessions")
    parser.add_argument("--mode", help="Practice mode (recommended if omitted)")
    parser.add_argument("--difficulty", help="Difficulty level (recommended if omitted)")
    parser.add_argument("--scenario", help="Applicant scenario (recommended if omitted)")
    parser.add_argument(
        "--seed",
        type=int,
        help="Pick a random scenario with this seed instead of recommending one",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List modes, difficulties and scenarios and exit",
    )

    args = parser.parse_args()

    if args.list:
        print_catalog()
        return

    if args.mode == InterviewMode.CUSTOM.value:
        print("Custom mode needs custom settings; use the API to configure it.")
        sys.exit(1)

    profile = build_profile(args)

    scenario = args.scenario
    if scenario is None and args.seed is not None:
        scenario = get_random_scenario(random.Random(args.seed)).id

    try:
        plan = create_session_plan(
            profile,
            mode=args.mode,
            difficulty=args.difficulty,
            scenario=scenario,
        )
    except (CatalogNotFoundError, UnsupportedDifficultyError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    rec = recommend(profile)
    print(
        f"\nRecommended for this profile: {rec.scenario.value} / "
        f"{rec.mode.value} / {rec.difficulty.value}\n"
    )
    print_plan(plan)


if __name__ == "__main__":
    main()
