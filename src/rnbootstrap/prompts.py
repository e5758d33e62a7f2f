"""
Interactive configuration prompts.
"""
from .models import GenerationChoice

EXPO_QUESTION = "Use Expo? (y/N): "
STORYBOOK_QUESTION = "Include Storybook? (Y/n): "
DETOX_QUESTION = "Include Detox E2E testing? (Y/n): "


def _first_char(answer: str) -> str:
    return answer.strip().lower()[:1]


def ask_yes_no(question: str, default: bool, ask=input) -> bool:
    """
    Ask one yes/no question. Empty input, EOF and anything unrecognised
    fall back to `default`; only the explicit opposite answer flips it.
    """
    try:
        answer = ask(question)
    except EOFError:
        answer = ""

    if default:
        return _first_char(answer) != "n"
    return _first_char(answer) == "y"


def collect_choices(project_name: str, ask=input) -> GenerationChoice:
    print("🔧 Configuration Options:")
    use_expo = ask_yes_no(EXPO_QUESTION, default=False, ask=ask)
    include_storybook = ask_yes_no(STORYBOOK_QUESTION, default=True, ask=ask)
    include_detox = ask_yes_no(DETOX_QUESTION, default=True, ask=ask)

    choice = GenerationChoice(
        project_name=project_name,
        use_expo=use_expo,
        include_storybook=include_storybook,
        include_detox=include_detox,
    )
    print_choice_summary(choice)
    return choice


def print_choice_summary(choice: GenerationChoice):
    print("\n📋 Project Configuration:")
    print(f"  • Framework: {choice.framework_label}")
    print(f"  • Storybook: {'Yes' if choice.include_storybook else 'No'}")
    print(f"  • E2E Testing: {'Yes' if choice.include_detox else 'No'}")
    print("")
