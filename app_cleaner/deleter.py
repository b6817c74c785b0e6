from __future__ import annotations

import errno
import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from .auditlog import AuditLog
from .models import DeletionOutcome, DeletionStatus, ErrorKind

_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}


def classify_error(exc: OSError) -> ErrorKind:
    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return ErrorKind.PERMISSION
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return ErrorKind.NOT_FOUND
    return ErrorKind.OTHER


def sudo_remove_command(path: Path) -> str:
    """
    Return a copy-pasteable elevated removal command for path.

    Backslash, double quote, dollar and backtick are escaped so the shell sees
    the real path inside the double quotes; for such paths the printed text
    differs from the raw path on purpose.
    """
    quoted = str(path)
    for ch in ("\\", '"', "$", "`"):
        quoted = quoted.replace(ch, "\\" + ch)
    return f'sudo rm -rf "{quoted}"'


def remove_path(path: Path) -> None:
    """Remove a file, symlink or whole directory tree. Raises OSError on failure."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def delete_one(path: Path) -> DeletionOutcome:
    try:
        remove_path(path)
    except OSError as exc:
        kind = classify_error(exc)
        status = DeletionStatus.PERMISSION_DENIED if kind is ErrorKind.PERMISSION else DeletionStatus.ERROR
        return DeletionOutcome(path=path, status=status, detail=str(exc), kind=kind)
    return DeletionOutcome(path=path, status=DeletionStatus.DELETED)


def report(outcome: DeletionOutcome) -> None:
    if outcome.status is DeletionStatus.DELETED:
        print(f"✅ DELETED: {outcome.path}")
    elif outcome.status is DeletionStatus.PERMISSION_DENIED:
        print(f"❌ PERMISSION DENIED for: {outcome.path}")
        print(
            "   This file requires administrator privileges. "
            "To delete it, run this command in your terminal:"
        )
        print(f"   {sudo_remove_command(outcome.path)}")
        print()
    else:
        print(f"❌ ERROR deleting {outcome.path}: {outcome.detail}")


def delete_all(paths: Iterable[Path], audit: Optional[AuditLog] = None) -> List[DeletionOutcome]:
    """
    Delete every path in order and print one outcome per item.

    A failure on one path never stops the rest. Nothing is retried and nothing
    is raised to the caller.
    """
    outcomes: List[DeletionOutcome] = []
    print("\n🚀 Starting deletion...")
    for path in paths:
        print(f"Attempting to delete: {path}")
        outcome = delete_one(Path(path))
        report(outcome)
        if audit is not None:
            if outcome.ok:
                audit.log(f"Deleted: {outcome.path}")
            else:
                audit.log(f"ERROR ({outcome.status.value}) deleting: {outcome.path} ({outcome.detail})")
        outcomes.append(outcome)
    print("\n✨ Cleanup process finished.")
    return outcomes
