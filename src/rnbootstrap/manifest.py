"""
package.json finalization: merge the convenience scripts into the
generated project's manifest.
"""
import json
import os

MANIFEST_NAME = "package.json"

CONVENIENCE_SCRIPTS = {
    "type-check": "tsc --noEmit",
    "lint:fix": "eslint . --fix",
    "test:watch": "jest --watch",
    "test:coverage": "jest --coverage",
    "clean": "react-native clean",
    "clean:android": "cd android && ./gradlew clean && cd ..",
    "clean:ios": "cd ios && xcodebuild clean && cd ..",
    "pod-install": "cd ios && pod install && cd ..",
}


class ManifestError(ValueError):
    """package.json is missing or not a JSON object with a `scripts` object."""


def merge_scripts(manifest: dict, scripts: dict = CONVENIENCE_SCRIPTS) -> dict:
    """Return a copy of `manifest` with `scripts` merged into its scripts mapping."""
    if not isinstance(manifest, dict):
        raise ManifestError(f"{MANIFEST_NAME} must contain a JSON object")

    existing = manifest.get("scripts")
    if existing is None:
        existing = {}
    if not isinstance(existing, dict):
        raise ManifestError(f"'scripts' in {MANIFEST_NAME} must be a JSON object")

    merged = dict(manifest)
    merged["scripts"] = {**existing, **scripts}
    return merged


def finalize_manifest(project_dir: str | None = None, scripts: dict = CONVENIENCE_SCRIPTS) -> str:
    """Rewrite <project_dir>/package.json with the scripts merged in. Returns its path."""
    path = os.path.join(project_dir or os.getcwd(), MANIFEST_NAME)
    print("🔧 Final setup...")

    try:
        with open(path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"{path} not found") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"could not parse {path}: {e}") from e

    merged = merge_scripts(manifest, scripts)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(merged, indent=2, ensure_ascii=False) + "\n")
    return path
