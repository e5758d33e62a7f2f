"""
Bootstraps the bare React Native / Expo project.
"""
import os

from .config import settings
from .models import GenerationChoice
from .runner import run_command


def bootstrap_command(choice: GenerationChoice, config=settings) -> str:
    template = config.expo_command if choice.use_expo else config.react_native_command
    return template.format(name=choice.project_name)


def initialize_project(choice: GenerationChoice, run=run_command, config=settings) -> str:
    """
    Run the framework's project-creation command, then chdir into the new
    project. Returns the absolute project root.
    """
    print(f"📱 Initializing {choice.framework_label} project...")
    run(bootstrap_command(choice, config))

    project_root = os.path.abspath(choice.project_name)
    os.chdir(project_root)
    return project_root
