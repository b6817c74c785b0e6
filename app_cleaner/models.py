from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Candidate:
    path: Path
    root: Path  # search root it was found under; diagnostics only
    size_bytes: Optional[int] = None


@dataclass(frozen=True)
class ScanWarning:
    root: Path
    detail: str

    def __str__(self) -> str:
        return f"Could not fully search '{self.root}': {self.detail}"


class SelectionKind(Enum):
    QUIT = "quit"
    ALL = "all"
    INDICES = "indices"


@dataclass(frozen=True)
class SelectionCommand:
    kind: SelectionKind
    indices: Tuple[int, ...] = ()  # 1-based
    invalid_tokens: Tuple[str, ...] = ()


class ErrorKind(Enum):
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    OTHER = "other"


class DeletionStatus(Enum):
    DELETED = "deleted"
    PERMISSION_DENIED = "permission_denied"
    ERROR = "error"


@dataclass(frozen=True)
class DeletionOutcome:
    path: Path
    status: DeletionStatus
    detail: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.status is DeletionStatus.DELETED


class ConsoleState(Enum):
    PROMPTING = "prompting"
    CONFIRMING = "confirming"
    DELETING = "deleting"
    DONE = "done"
