#!/usr/bin/env python3
'''
Template store composition.

Copies the bundled template (core files plus the feature packs selected by
the prompts) into the freshly bootstrapped project.
'''
import os
import shutil
from dataclasses import dataclass
from typing import Callable

from .config import TEMPLATE_DIR
from .models import GenerationChoice


@dataclass(frozen=True)
class FileGroup:
    name: str
    paths: tuple
    condition: Callable[[GenerationChoice], bool] = lambda choice: True

    def applies_to(self, choice: GenerationChoice) -> bool:
        return self.condition(choice)


CORE_FILES = FileGroup(
    "core",
    (
        "src/",
        "App.tsx",
        "babel.config.js",
        "tsconfig.json",
        ".env",
        ".env.example",
        ".prettierrc.js",
        ".eslintrc.js",
        "jest.config.js",
        "metro.config.js",
        "env/",
    ),
)

STORYBOOK_FILES = FileGroup(
    "storybook",
    (".storybook/", "stories/"),
    lambda choice: choice.include_storybook,
)

DETOX_FILES = FileGroup(
    "detox",
    ("__tests__/", ".detoxrc.js"),
    lambda choice: choice.include_detox,
)

FILE_GROUPS = (CORE_FILES, STORYBOOK_FILES, DETOX_FILES)


def selected_groups(choice: GenerationChoice, groups=FILE_GROUPS) -> list:
    return [group for group in groups if group.applies_to(choice)]


def copy_recursive(src: str, dest: str) -> list:
    """
    Copy a file or directory tree depth-first, creating destination
    directories as needed and overwriting existing files. A missing `src`
    is skipped. Returns the destination files written.
    """
    if not os.path.exists(src):
        return []

    if os.path.isdir(src):
        os.makedirs(dest, exist_ok=True)
        written = []
        for entry in sorted(os.listdir(src)):
            written.extend(copy_recursive(os.path.join(src, entry), os.path.join(dest, entry)))
        return written

    dest_dir = os.path.dirname(dest)
    if dest_dir:
        os.makedirs(dest_dir, exist_ok=True)
    shutil.copyfile(src, dest)
    return [dest]


def copy_group(group: FileGroup, source_dir: str, dest_dir: str) -> list:
    written = []
    for rel_path in group.paths:
        rel_path = rel_path.rstrip("/")
        written.extend(copy_recursive(os.path.join(source_dir, rel_path),
                                      os.path.join(dest_dir, rel_path)))
    return written


def compose_template(choice: GenerationChoice, source_dir: str = TEMPLATE_DIR, dest_dir: str | None = None) -> list:
    """Copy every file group enabled by `choice` into `dest_dir` (default: cwd)."""
    dest_dir = dest_dir or os.getcwd()
    print("📋 Setting up bootstrap template...")

    written = []
    for group in selected_groups(choice):
        files = copy_group(group, source_dir, dest_dir)
        print(f"  ✓ {group.name}: {len(files)} file(s)")
        written.extend(files)
    return written
