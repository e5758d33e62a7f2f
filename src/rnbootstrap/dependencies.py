"""
Dependency planning and installation.

The installed package set is the base lists plus the increments of every
row in DEPENDENCY_INCREMENTS whose condition holds for the run.
"""
from .config import settings
from .models import DependencySet, GenerationChoice
from .runner import run_command

BASE_DEPENDENCIES = (
    "@react-navigation/native",
    "@react-navigation/stack",
    "@react-navigation/bottom-tabs",
    "@react-navigation/drawer",
    "react-native-screens",
    "react-native-safe-area-context",
    "react-native-gesture-handler",
    "react-native-reanimated",
    "zustand",
    "react-native-mmkv",
    "axios",
    "@apollo/client",
    "graphql",
    "@tanstack/react-query",
    "react-hook-form",
    "@hookform/resolvers",
    "yup",
    "react-native-vector-icons",
    "react-native-modal",
    "react-native-toast-message",
    "react-native-config",
    "@react-native-community/netinfo",
    "@react-native-async-storage/async-storage",
)

BASE_DEV_DEPENDENCIES = (
    "babel-plugin-module-resolver",
    "@types/react-native-sqlite-storage",
    "@types/react-native-vector-icons",
)

# Packages with native modules that Expo's managed workflow can't link
NATIVE_DEPENDENCIES = (
    "react-native-splash-screen",
    "react-native-sqlite-storage",
    "react-native-push-notification",
    "@react-native-firebase/app",
    "@react-native-firebase/messaging",
    "@react-native-firebase/analytics",
    "react-native-keychain",
    "@rnmapbox/maps",
    "@sentry/react-native",
    "react-native-fs",
    "react-native-document-picker",
    "react-native-image-picker",
    "react-native-permissions",
)

NATIVE_DEV_DEPENDENCIES = (
    "reactotron-react-native",
    "reactotron-redux",
    "reactotron-flipper",
)

STORYBOOK_DEV_DEPENDENCIES = (
    "@storybook/react-native",
    "@storybook/addon-actions",
    "@storybook/addon-controls",
    "@storybook/addon-ondevice-actions",
    "@storybook/addon-ondevice-controls",
)

DETOX_DEV_DEPENDENCIES = ("detox",)

# (condition, runtime increment, dev increment)
DEPENDENCY_INCREMENTS = (
    (lambda choice: not choice.use_expo, NATIVE_DEPENDENCIES, ()),
    (lambda choice: choice.include_storybook, (), STORYBOOK_DEV_DEPENDENCIES),
    (lambda choice: choice.include_detox, (), DETOX_DEV_DEPENDENCIES),
    (lambda choice: not choice.use_expo, (), NATIVE_DEV_DEPENDENCIES),
)


def _unique(packages) -> tuple:
    # first occurrence wins, order preserved
    return tuple(dict.fromkeys(packages))


def plan_dependencies(choice: GenerationChoice, increments=DEPENDENCY_INCREMENTS) -> DependencySet:
    runtime = list(BASE_DEPENDENCIES)
    dev = list(BASE_DEV_DEPENDENCIES)
    for condition, runtime_increment, dev_increment in increments:
        if condition(choice):
            runtime.extend(runtime_increment)
            dev.extend(dev_increment)
    return DependencySet(runtime=_unique(runtime), dev=_unique(dev))


def install_command(packages, dev: bool = False, config=settings) -> str:
    base = config.install_dev_command if dev else config.install_command
    return " ".join([base, *packages])


def install_dependencies(deps: DependencySet, run=run_command, config=settings):
    """Install runtime then dev packages, one batched command each."""
    print("📦 Installing dependencies...")
    print("  Installing production dependencies...")
    run(install_command(deps.runtime, config=config))

    print("  Installing development dependencies...")
    run(install_command(deps.dev, dev=True, config=config))
