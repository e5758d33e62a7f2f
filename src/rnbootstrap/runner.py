"""
External command execution.

Every external process (bootstrap, package installs, pod install) goes
through `run_command`. Stages take the runner as an argument so tests can
pass a fake one.
"""
import subprocess


def run_command(command: str, cwd=None):
    '''Run a shell command with inherited stdio; raise CalledProcessError on non-zero exit.'''
    print(f"Running: {command}")
    return subprocess.run(command, shell=True, cwd=cwd, check=True)
