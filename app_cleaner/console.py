from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .auditlog import AuditLog
from .deleter import delete_all
from .models import Candidate, ConsoleState, SelectionCommand, SelectionKind
from .scanner import human_size

_INDEX_RE = re.compile(r"[+-]?[0-9]+")

INSTRUCTIONS = "Enter numbers to delete (e.g., 1 3 4), 'all' to delete everything, or 'quit' to exit."


def parse_selection(text: str, count: int) -> SelectionCommand:
    """
    Turn one line of user input into a SelectionCommand.

    'quit' and 'all' are matched case-insensitively. Anything else is split on
    whitespace and every token is checked on its own: tokens that are not
    integers in 1..count land in invalid_tokens, the rest are kept in the
    order typed with repeats dropped.
    """
    stripped = text.strip()
    lowered = stripped.lower()
    if lowered == "quit":
        return SelectionCommand(SelectionKind.QUIT)
    if lowered == "all":
        return SelectionCommand(SelectionKind.ALL, indices=tuple(range(1, count + 1)))

    indices: List[int] = []
    invalid: List[str] = []
    for token in stripped.split():
        if not _INDEX_RE.fullmatch(token):
            invalid.append(token)
            continue
        idx = int(token)
        if idx < 1 or idx > count:
            invalid.append(token)
            continue
        if idx not in indices:
            indices.append(idx)
    return SelectionCommand(SelectionKind.INDICES, indices=tuple(indices), invalid_tokens=tuple(invalid))


class DeletionConsole:
    """
    Interactive menu over a fixed list of candidates.

    States: PROMPTING -> CONFIRMING -> DELETING -> DONE. A cancelled
    confirmation goes back to PROMPTING and forgets the selection. After one
    confirmed deletion the console is DONE; the list is not rescanned.
    """

    def __init__(
        self,
        candidates: Sequence[Candidate],
        audit: Optional[AuditLog] = None,
        prompt: Callable[[str], str] = input,
        app_name: Optional[str] = None,
    ):
        self.candidates = list(candidates)
        self.audit = audit
        self.prompt = prompt
        self.app_name = app_name
        self.state = ConsoleState.PROMPTING
        self.selection: List[Candidate] = []

    def _read(self, message: str) -> Optional[str]:
        try:
            return self.prompt(message)
        except EOFError:
            return None

    def show_candidates(self) -> None:
        print("\nFound potential leftover files and folders:")
        for i, candidate in enumerate(self.candidates, start=1):
            line = f"  [{i}] {candidate.path}"
            if candidate.size_bytes is not None:
                line += f" ({human_size(candidate.size_bytes)})"
            print(line)

    def _prompting(self) -> ConsoleState:
        self.show_candidates()
        print(f"\n{INSTRUCTIONS}")
        text = self._read("> ")
        if text is None:
            print("\nExiting without changes.")
            return ConsoleState.DONE

        command = parse_selection(text, len(self.candidates))
        if command.kind is SelectionKind.QUIT:
            print("Exiting without changes.")
            return ConsoleState.DONE
        for token in command.invalid_tokens:
            print(f"Invalid selection: '{token}'. Please enter a valid number.")
        self.selection = [self.candidates[i - 1] for i in command.indices]
        if not self.selection:
            return ConsoleState.PROMPTING
        return ConsoleState.CONFIRMING

    def _confirming(self) -> ConsoleState:
        print("\n--- DELETION SUMMARY ---")
        for candidate in self.selection:
            print(f"  - {candidate.path}")
        total = sum(c.size_bytes or 0 for c in self.selection)
        print(f"Total to delete: {human_size(total)}")
        answer = self._read("Proceed with deleting these items? [y/N]: ")
        if answer is not None and answer.strip().lower() == "y":
            return ConsoleState.DELETING
        print("Deletion cancelled.")
        self.selection = []
        return ConsoleState.PROMPTING

    def _deleting(self) -> ConsoleState:
        paths: List[Path] = [c.path for c in self.selection]
        if self.audit is not None:
            label = f" for '{self.app_name}'" if self.app_name else ""
            self.audit.log(f"Deleting {len(paths)} item(s){label}")
        delete_all(paths, audit=self.audit)
        if self.audit is not None:
            self.audit.log("Deletion complete.")
        return ConsoleState.DONE

    def step(self) -> ConsoleState:
        handlers = {
            ConsoleState.PROMPTING: self._prompting,
            ConsoleState.CONFIRMING: self._confirming,
            ConsoleState.DELETING: self._deleting,
        }
        if self.state is not ConsoleState.DONE:
            self.state = handlers[self.state]()
        return self.state

    def run(self) -> None:
        while self.step() is not ConsoleState.DONE:
            pass
