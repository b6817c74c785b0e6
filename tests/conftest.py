from pathlib import Path

import pytest

from app_cleaner.config import CleanerPaths


@pytest.fixture
def cleaner_paths(tmp_path):
    """Two throwaway search roots under tmp_path, plus a log file location."""
    roots = (tmp_path / "Application Support", tmp_path / "Caches")
    for root in roots:
        root.mkdir()
    return CleanerPaths(
        home=tmp_path,
        search_roots=roots,
        log_file=tmp_path / ".app_cleaner" / "cleanup_log.txt",
    )


def make_file(path: Path, content: str = "x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class ScriptedInput:
    """Stands in for input(): replays answers, then raises EOFError."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message=""):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)
