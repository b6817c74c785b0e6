from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .config import ensure_parent


class AuditLog:
    """
    Append-only record of deletion events.

    Lines are timestamped the same way on every write. A log that cannot be
    written only costs a single warning; the cleanup itself carries on.
    """

    def __init__(self, log_path: Path):
        self.log_path = log_path
        self._warned = False

    def log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] {message}"
        try:
            ensure_parent(self.log_path)
            with self.log_path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        except OSError:
            if not self._warned:
                print(f"[WARN] Failed to write log: {self.log_path}")
                self._warned = True
