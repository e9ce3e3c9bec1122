"""Version information for the scaffolder.

Installed builds report the distribution version from package metadata.
When running from a source checkout (the directory two levels above the
package holds this project's own pyproject.toml), the commit date and hash
of that checkout are appended. Git is never asked about any other repo,
including the project being scaffolded.
"""

import os
import subprocess
from importlib import metadata

DIST_NAME = "claude-token-optimizer"
PACKAGE_VERSION = "1.0.0"

_REPO_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return PACKAGE_VERSION


def is_source_checkout(repo_dir: str) -> bool:
    """Return True if repo_dir is this project's source tree, not just any directory."""
    pyproject = os.path.join(repo_dir, "pyproject.toml")
    try:
        with open(pyproject, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError:
        return False
    return f'name = "{DIST_NAME}"' in content


def _checkout_git(repo_dir: str, *args: str) -> str | None:
    """Run git against the source checkout. Return stdout or None on failure."""
    try:
        result = subprocess.run(
            ["git", "-C", repo_dir, *args],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def get_version() -> str:
    """Return '1.0.0' for installed builds, or '1.0.0 (2026-02-13 g3a7f2c1)' from a checkout."""
    version = _installed_version()
    if not is_source_checkout(_REPO_DIR):
        return version
    commit = _checkout_git(_REPO_DIR, "rev-parse", "--short", "HEAD")
    if not commit:
        return version
    date = _checkout_git(_REPO_DIR, "log", "-1", "--format=%cs") or "unknown"
    return f"{version} ({date} g{commit})"
