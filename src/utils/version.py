import logging
import os
import subprocess
from typing import NamedTuple

logger = logging.getLogger(__name__)


class VersionInfo(NamedTuple):
    """Bot version information"""
    commit: str
    branch: str
    version: str = "0.1.0"  # Semantic version


def get_git_info() -> VersionInfo:
    """Get current git commit and branch information

    GIT_COMMIT and GIT_BRANCH override git itself, for deployments that ship
    without a .git directory.

    Returns:
        VersionInfo: Current version information
    """
    commit = os.getenv("GIT_COMMIT")
    branch = os.getenv("GIT_BRANCH")
    if commit and branch:
        return VersionInfo(commit=commit, branch=branch)

    try:
        commit = subprocess.check_output(
            ['git', 'rev-parse', '--short', 'HEAD'],
            text=True,
            stderr=subprocess.DEVNULL
        ).strip()

        branch = subprocess.check_output(
            ['git', 'rev-parse', '--abbrev-ref', 'HEAD'],
            text=True,
            stderr=subprocess.DEVNULL
        ).strip()

        return VersionInfo(commit=commit, branch=branch)
    except (subprocess.CalledProcessError, OSError) as e:
        logger.error(f"Failed to get git info: {e}")
        return VersionInfo(commit="unknown", branch="unknown")
