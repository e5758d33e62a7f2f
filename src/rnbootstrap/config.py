"""
Generator configuration, loaded from the bundled config.toml.
"""
import os
import tomllib
from dataclasses import dataclass

script_dir = os.path.dirname(os.path.abspath(__file__))
CONFIG_PATH = os.path.join(script_dir, "config.toml")
TEMPLATE_DIR = os.path.join(script_dir, "template")


@dataclass(frozen=True)
class Settings:
    framework_name: str
    cli_name: str
    expo_command: str
    react_native_command: str
    install_command: str
    install_dev_command: str
    pod_platform: str
    ios_dir: str
    pod_command: str


def load_config(path: str | None = None) -> Settings:
    """Read config.toml (the bundled one unless `path` is given)."""
    with open(path or CONFIG_PATH, "rb") as f:
        config = tomllib.load(f)

    bootstrap = config["bootstrap"]
    packages = config["packages"]
    ios = config["ios"]
    return Settings(
        framework_name=config["framework_name"],
        cli_name=config.get("cli_name", config["framework_name"].lower()),
        expo_command=bootstrap["expo"],
        react_native_command=bootstrap["react_native"],
        install_command=packages["install"],
        install_dev_command=packages["install_dev"],
        pod_platform=ios.get("platform", "Darwin"),
        ios_dir=ios.get("directory", "ios"),
        pod_command=ios.get("pod_install", "pod install"),
    )


settings = load_config()
