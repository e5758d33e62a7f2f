"""End-to-end tests for the generation pipeline (rnbootstrap.generator).

External commands are replaced by FakeRunner, prompts by FakeInput; the
bundled template store is copied for real.
"""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path

import pytest

from rnbootstrap.dependencies import DETOX_DEV_DEPENDENCIES, STORYBOOK_DEV_DEPENDENCIES
from rnbootstrap.generator import GenerationRun, Stage, generate_project
from rnbootstrap.manifest import CONVENIENCE_SCRIPTS, ManifestError


class TestGenerationRun:
    def test_default_answers_on_macos(self, workdir, fake_runner, fake_input):
        run = generate_project("MyApp", run=fake_runner, ask=fake_input("n", "", ""),
                               system="Darwin")
        project = workdir / "MyApp"

        assert run.stage is Stage.DONE
        assert run.choice.use_expo is False
        assert run.choice.include_storybook is True
        assert run.choice.include_detox is True

        commands = fake_runner.commands
        assert commands[0] == (
            "npx react-native init MyApp --template react-native-template-typescript"
        )
        assert commands[1].startswith("npm install @react-navigation/native")
        assert commands[2].startswith("npm install --save-dev ")
        for package in STORYBOOK_DEV_DEPENDENCIES + DETOX_DEV_DEPENDENCIES:
            assert package in commands[2].split()
        assert fake_runner.calls[3] == ("pod install", str(project / "ios"))
        assert len(commands) == 4

        assert (project / "App.tsx").is_file()
        assert (project / "src" / "navigation" / "AppNavigator.tsx").is_file()
        assert (project / ".storybook" / "main.js").is_file()
        assert (project / ".detoxrc.js").is_file()

        manifest = json.loads((project / "package.json").read_text())
        for name, command in CONVENIENCE_SCRIPTS.items():
            assert manifest["scripts"][name] == command
        assert manifest["scripts"]["start"] == "react-native start"

    def test_no_pods_off_macos(self, workdir, fake_runner, fake_input):
        run = generate_project("MyApp", run=fake_runner, ask=fake_input("", "", ""),
                               system="Linux")

        assert run.pods_installed is False
        assert not any("pod install" == c for c in fake_runner.commands)
        assert len(fake_runner.commands) == 3

    def test_expo_without_packs(self, workdir, fake_runner, fake_input):
        run = generate_project("ExpoApp", run=fake_runner, ask=fake_input("y", "n", "n"),
                               system="Darwin")
        project = workdir / "ExpoApp"

        assert fake_runner.commands[0] == (
            "npx create-expo-app ExpoApp --template blank-typescript"
        )
        assert "detox" not in fake_runner.commands[2].split()
        assert run.pods_installed is False
        assert (project / "App.tsx").is_file()
        assert not (project / ".storybook").exists()
        assert not (project / "__tests__").exists()

    def test_completion_report(self, workdir, fake_runner, fake_input, capsys):
        generate_project("MyApp", run=fake_runner, ask=fake_input("", "", ""), system="Linux")
        out = capsys.readouterr().out

        assert "Project created successfully" in out
        assert "cd MyApp" in out
        assert "npm run storybook" in out
        assert "npm run test:e2e" in out

    def test_works_from_project_root(self, workdir, fake_runner, fake_input):
        generate_project("MyApp", run=fake_runner, ask=fake_input("", "", ""), system="Linux")
        assert Path(os.getcwd()) == workdir / "MyApp"


class TestFailures:
    def test_bootstrap_failure_stops_pipeline(self, workdir, make_runner, fake_input):
        runner = make_runner(fail_on="react-native init")
        run = GenerationRun("MyApp", run=runner, ask=fake_input("", "", ""), system="Darwin")

        with pytest.raises(subprocess.CalledProcessError):
            run.execute()

        assert run.stage is Stage.FAILED
        assert len(runner.commands) == 1
        assert not (workdir / "MyApp").exists()

    def test_install_failure_leaves_manifest_untouched(self, workdir, make_runner, fake_input):
        runner = make_runner(fail_on="--save-dev")
        run = GenerationRun("MyApp", run=runner, ask=fake_input("", "", ""), system="Darwin")

        with pytest.raises(subprocess.CalledProcessError):
            run.execute()

        assert run.stage is Stage.FAILED
        assert not any(c == "pod install" for c in runner.commands)
        manifest = json.loads((workdir / "MyApp" / "package.json").read_text())
        assert "type-check" not in manifest["scripts"]

    def test_missing_manifest_is_fatal(self, workdir, fake_input):
        def runner(command, cwd=None):
            if "react-native init" in command:
                (workdir / "MyApp").mkdir()

        run = GenerationRun("MyApp", run=runner, ask=fake_input("", "", ""), system="Linux")

        with pytest.raises(ManifestError):
            run.execute()

        assert run.stage is Stage.FAILED

    def test_run_cannot_be_reused(self, workdir, fake_runner, fake_input):
        run = generate_project("MyApp", run=fake_runner, ask=fake_input("", "", ""),
                               system="Linux")
        with pytest.raises(RuntimeError):
            run.execute()
