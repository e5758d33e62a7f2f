"""
Per-run data passed between the generation stages.
"""
import re
from dataclasses import dataclass

# RN app names must be alnum and start with a letter
PROJECT_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


def is_valid_project_name(name) -> bool:
    return bool(name) and PROJECT_NAME_RE.fullmatch(name) is not None


@dataclass(frozen=True)
class GenerationChoice:
    """Answers collected from the prompts. Immutable for the rest of the run."""

    project_name: str
    use_expo: bool = False
    include_storybook: bool = True
    include_detox: bool = True

    def __post_init__(self):
        if not is_valid_project_name(self.project_name):
            raise ValueError(
                f"Invalid project name {self.project_name!r}: must start with a letter "
                "and contain only letters and numbers"
            )

    @property
    def framework_label(self) -> str:
        return "Expo" if self.use_expo else "React Native CLI"


@dataclass(frozen=True)
class DependencySet:
    """Runtime and development package lists, de-duplicated, in install order."""

    runtime: tuple = ()
    dev: tuple = ()
