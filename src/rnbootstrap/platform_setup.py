"""
Host-specific post-processing (CocoaPods for the React Native CLI variant).
"""
import os
import platform

from .config import settings
from .models import GenerationChoice
from .runner import run_command


def needs_pod_install(choice: GenerationChoice, system: str | None = None, config=settings) -> bool:
    # Expo manages native deps itself; pods only exist on macOS
    if choice.use_expo:
        return False
    return (system or platform.system()) == config.pod_platform


def install_ios_pods(choice: GenerationChoice, run=run_command, system: str | None = None,
                     project_dir: str | None = None, config=settings) -> bool:
    """Run `pod install` in ios/ when applicable. Returns True if it ran."""
    if not needs_pod_install(choice, system, config):
        return False

    print("🍎 Installing iOS pods...")
    ios_dir = os.path.join(project_dir or os.getcwd(), config.ios_dir)
    run(config.pod_command, cwd=ios_dir)
    return True
