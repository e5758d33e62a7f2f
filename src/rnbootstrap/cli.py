#!/usr/bin/env python3
import sys
import argparse
import os
import subprocess

from . import __version__
from .config import settings
from .generator import generate_project
from .models import is_valid_project_name
from .verify import verify_template

FRAMEWORK_NAME = settings.framework_name
CLI_NAME = settings.cli_name


def error(message: str):
    print(f"❌ {message}", file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description=f"{FRAMEWORK_NAME} - React Native project generator",
    )
    parser.add_argument("name", nargs='?', help="The name of the project to create (letters and numbers)")
    parser.add_argument("--verify", action="store_true", help="Check the bundled template store and exit")
    parser.add_argument("-V", "--version", action="version", version=f"{FRAMEWORK_NAME} {__version__}")
    return parser


def handle_new(name) -> int:
    """Validate the project name, then run the whole generation pipeline."""
    if not name:
        error("Please provide a project name")
        print(f"Usage: {CLI_NAME} <ProjectName>")
        return 1

    if not is_valid_project_name(name):
        error("Project name must start with a letter and contain only letters and numbers")
        return 1

    print(f"🚀 {FRAMEWORK_NAME} CLI")
    print("=====================================\n")
    print(f"📱 Creating React Native project: {name}\n")

    try:
        generate_project(name)
    except subprocess.CalledProcessError as e:
        error(f"Error creating project: command failed with exit code {e.returncode}: {e.cmd}")
        return 1
    except Exception as e:
        error(f"Error creating project: {e}")
        return 1
    return 0


# -----------------------------------------------------------------------------
# CLI entrypoint
# -----------------------------------------------------------------------------
def main(argv=None) -> int:
    original_cwd = os.getcwd()
    try:
        try:
            args = create_parser().parse_args(argv)
        except SystemExit as e:
            # argparse usage errors exit 2; -h and --version exit 0
            if e.code in (0, None):
                raise
            return 1

        if args.verify:
            return 0 if verify_template() else 1

        return handle_new(args.name)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    finally:
        try:
            os.chdir(original_cwd)
        except (FileNotFoundError, OSError):
            os.chdir(os.path.expanduser("~"))


if __name__ == "__main__":
    sys.exit(main())
