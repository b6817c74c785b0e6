from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Tuple

from .config import CleanerPaths
from .models import Candidate, ScanWarning


def normalize_name(name: str) -> str:
    """Lowercase a name and drop its spaces, e.g. 'Google Chrome' -> 'googlechrome'."""
    return name.replace(" ", "").lower()


def matches_keyword(entry_name: str, keyword: str) -> bool:
    return keyword in normalize_name(entry_name)


def size_of_path(path: Path) -> int:
    """
    Return total size in bytes of a file or directory tree.
    Unreadable entries are skipped; symlinks are not followed.
    """
    try:
        if path.is_symlink() or not path.is_dir():
            return path.lstat().st_size
    except OSError:
        return 0
    total = 0
    for root, _dirs, files in os.walk(path):
        for filename in files:
            fpath = Path(root) / filename
            try:
                total += fpath.lstat().st_size
            except OSError:
                continue
    return total


def human_size(n: float) -> str:
    for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
        if n < 1024:
            return f"{n:.2f}{unit}"
        n /= 1024
    return f"{n:.2f}EB"


def _root_children(root: Path) -> List[Path]:
    # Errors here belong to the root itself and are reported by the caller
    return sorted(root.iterdir())


def locate(app_name: str, paths: CleanerPaths) -> Tuple[List[Candidate], List[ScanWarning]]:
    """
    Find direct children of each search root whose name contains the app name.

    Matching ignores case and spaces. Entries nested deeper than one level are
    never considered, which keeps unrelated files inside other apps' folders out
    of the results. A root that cannot be read yields a ScanWarning and the
    remaining roots are still searched.
    """
    keyword = normalize_name(app_name.strip())
    if not keyword:
        raise ValueError("application name must not be empty")

    found: Dict[str, Candidate] = {}
    warnings: List[ScanWarning] = []

    for root in paths.search_roots:
        try:
            children = _root_children(root)
        except OSError as exc:
            warnings.append(ScanWarning(root=root, detail=exc.strerror or str(exc)))
            continue

        for entry in children:
            if not matches_keyword(entry.name, keyword):
                continue
            abs_path = Path(os.path.abspath(entry))
            if str(abs_path) in found:
                continue
            found[str(abs_path)] = Candidate(
                path=abs_path,
                root=root,
                size_bytes=size_of_path(abs_path),
            )

    return list(found.values()), warnings
