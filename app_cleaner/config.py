from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

# Relative to ~/Library
USER_LIBRARY_DIRS: Tuple[str, ...] = (
    "Application Support",
    "Caches",
    "Preferences",
    "Logs",
    "Saved Application State",
)
SYSTEM_ROOTS: Tuple[Path, ...] = (
    Path("/Library/Application Support"),
    Path("/Library/Caches"),
    Path("/Library/LaunchAgents"),
    Path("/Library/LaunchDaemons"),
)
LOG_DIR_NAME = ".app_cleaner"
LOG_FILE_NAME = "cleanup_log.txt"


class HomeDirectoryError(RuntimeError):
    """The current user's home directory could not be determined."""


@dataclass(frozen=True)
class CleanerPaths:
    home: Path
    search_roots: Tuple[Path, ...]
    log_file: Path


def resolve_home() -> Path:
    """
    Ask the OS for the invoking user's home directory.
    Raises HomeDirectoryError when it cannot be resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise HomeDirectoryError(f"could not get current user: {exc}") from exc
    if not home.is_absolute():
        raise HomeDirectoryError(f"could not get current user: bad home directory {home!r}")
    return home


def build_paths(home: Optional[Path] = None) -> CleanerPaths:
    """Build the search roots and log location once, for the whole run."""
    if home is None:
        home = resolve_home()
    library = home / "Library"
    user_roots = tuple(library / name for name in USER_LIBRARY_DIRS)
    return CleanerPaths(
        home=home,
        search_roots=user_roots + SYSTEM_ROOTS,
        log_file=home / LOG_DIR_NAME / LOG_FILE_NAME,
    )


def ensure_parent(path: Path) -> None:
    """Create the parent directory for a file if needed."""
    os.makedirs(path.parent, exist_ok=True)
