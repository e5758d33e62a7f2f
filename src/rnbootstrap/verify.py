"""
Sanity checks for the bundled template store.

`rn-bootstrap --verify` runs these before publishing, so a missing payload
file is caught here rather than silently skipped during generation.
"""
import json
import os

from .config import TEMPLATE_DIR

REQUIRED_DIRECTORIES = [
    "src",
    "src/components",
    "src/navigation",
    "src/store",
    "src/types",
    "src/constants",
    "src/services",
    "src/splash/containers",
    "src/login/containers",
    "src/login/services",
    "src/home/containers",
    "src/list/containers",
    "src/list/services",
    "src/about/containers",
    "env",
    ".storybook",
    "stories",
    "__tests__",
]

REQUIRED_FILES = [
    "App.tsx",
    "babel.config.js",
    "tsconfig.json",
    ".env.example",
    ".detoxrc.js",
    "src/components/GlobalModal.tsx",
    "src/components/NetworkStatusProvider.tsx",
    "src/navigation/AppNavigator.tsx",
    "src/store/index.ts",
    "src/types/index.ts",
    "src/constants/index.ts",
    "src/services/apolloClient.ts",
    "src/services/databaseService.ts",
    "src/services/notificationService.ts",
    "src/services/sentryService.ts",
    "src/services/reactotronService.ts",
    "src/splash/containers/SplashScreen.tsx",
    "src/login/containers/LoginScreen.tsx",
    "src/login/services/authService.ts",
    "src/home/containers/HomeScreen.tsx",
    "src/list/containers/ListScreen.tsx",
    "src/list/services/listService.ts",
    "src/about/containers/AboutScreen.tsx",
]


def _check(ok: bool, label: str, problem: str) -> bool:
    print(f"  ✅ {label}" if ok else f"  ❌ {label} - {problem}")
    return ok


def check_tsconfig_paths(template_dir: str) -> bool:
    try:
        with open(os.path.join(template_dir, "tsconfig.json"), "r", encoding="utf-8") as f:
            ts_config = json.load(f)
    except (OSError, ValueError):
        return _check(False, "tsconfig.json", "Invalid JSON")
    compiler_options = ts_config.get("compilerOptions") if isinstance(ts_config, dict) else None
    paths = compiler_options.get("paths") if isinstance(compiler_options, dict) else None
    return _check(bool(paths), "Path aliases configured", "Not configured")


def check_babel_resolver(template_dir: str) -> bool:
    try:
        with open(os.path.join(template_dir, "babel.config.js"), "r", encoding="utf-8") as f:
            source = f.read()
    except OSError:
        return _check(False, "babel.config.js", "Cannot read")
    return _check("module-resolver" in source, "Module resolver plugin configured", "Not configured")


def verify_template(template_dir: str = TEMPLATE_DIR) -> bool:
    """Print a checklist for the template store. Returns True if everything is present."""
    print(f"🔍 Verifying template store at {template_dir}...\n")
    results = []

    print("📁 Checking directories...")
    for d in REQUIRED_DIRECTORIES:
        results.append(_check(os.path.isdir(os.path.join(template_dir, d)), d, "Missing or not a directory"))

    print("\n📄 Checking files...")
    for f in REQUIRED_FILES:
        results.append(_check(os.path.isfile(os.path.join(template_dir, f)), f, "Missing or not a file"))

    print("\n🔷 Checking TypeScript configuration...")
    results.append(check_tsconfig_paths(template_dir))

    print("\n🔄 Checking Babel configuration...")
    results.append(check_babel_resolver(template_dir))

    print("\n" + "=" * 50)
    if all(results):
        print("🎉 All checks passed! The template store is complete.")
        return True
    print("❌ Some checks failed. Please fix the issues above.")
    return False
