"""Local git identity lookup."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


def read_git_user_name() -> str | None:
    """Return `git config user.name`, or None when git has no identity.

    A missing git executable, a non-zero exit and an empty value all mean
    "not configured"; none of them raise.
    """

    try:
        completed = subprocess.run(
            ["git", "config", "user.name"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError) as exc:
        logger.debug("git identity unavailable: %s", exc)
        return None
    name = completed.stdout.strip()
    if not name:
        return None
    logger.debug("git identity resolved to %r", name)
    return name
