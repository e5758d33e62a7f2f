"""Shared fixtures for rnbootstrap tests."""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path

import pytest

from rnbootstrap.models import GenerationChoice


class FakeRunner:
    """Stands in for run_command: records calls instead of spawning processes.

    A bootstrap command (`create-expo-app` / `react-native init`) creates the
    project directory with a minimal package.json, the way the real tools do.
    Commands containing ``fail_on`` raise CalledProcessError.
    """

    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple[str, str | None]] = []
        self.fail_on = fail_on

    def __call__(self, command: str, cwd=None):
        self.calls.append((command, cwd))
        if self.fail_on and self.fail_on in command:
            raise subprocess.CalledProcessError(1, command)
        if "create-expo-app" in command or "react-native init" in command:
            tokens = command.split()
            name = tokens[tokens.index("init") + 1] if "init" in tokens else tokens[2]
            project = Path(os.getcwd()) / name
            project.mkdir(parents=True, exist_ok=True)
            manifest = {
                "name": name.lower(),
                "version": "0.0.1",
                "private": True,
                "scripts": {"start": "react-native start", "test": "jest"},
            }
            (project / "package.json").write_text(json.dumps(manifest, indent=2))
        return subprocess.CompletedProcess(command, 0)

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]


class FakeInput:
    """Replays canned answers for input(); raises EOFError when exhausted."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def template_store(tmp_path: Path) -> Path:
    """A small template store with a file from each group."""
    store = tmp_path / "template"
    files = {
        "App.tsx": "export default function App() {}\n",
        "babel.config.js": "module.exports = {};\n",
        "tsconfig.json": "{}\n",
        ".env.example": "API_BASE_URL=\n",
        "src/store/index.ts": "export {};\n",
        "src/login/containers/LoginScreen.tsx": "export {};\n",
        "env/.env.development": "API_BASE_URL=dev\n",
        ".storybook/main.js": "module.exports = {};\n",
        "stories/Button.stories.tsx": "export {};\n",
        "__tests__/e2e/login.e2e.ts": "describe('login', () => {});\n",
        ".detoxrc.js": "module.exports = {};\n",
    }
    for rel, content in files.items():
        path = store / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return store


@pytest.fixture
def default_choice() -> GenerationChoice:
    return GenerationChoice(project_name="MyApp")


@pytest.fixture
def fake_input():
    """Factory: ``fake_input("y", "", "n")`` builds a scripted input()."""
    return FakeInput


@pytest.fixture
def make_runner():
    """Factory for runners that fail on a given command fragment."""
    return FakeRunner
