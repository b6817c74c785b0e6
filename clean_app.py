#!/usr/bin/env python
"""
Leftover cleaner for macOS applications.

Asks for an application name, searches the usual Library folders for entries
named after it, and deletes the ones the user picks after a confirmation.
"""
from __future__ import annotations

import sys
from typing import Callable

from app_cleaner.auditlog import AuditLog
from app_cleaner.config import HomeDirectoryError, build_paths
from app_cleaner.console import DeletionConsole
from app_cleaner.scanner import locate


def read_app_name(prompt: Callable[[str], str] = input) -> str:
    try:
        return prompt("Enter the name of the application to clean up (e.g., Docker): ").strip()
    except EOFError:
        return ""


def main(prompt: Callable[[str], str] = input) -> int:
    print("--- Application Cleaner (macOS Edition) ---")
    app_name = read_app_name(prompt)
    if not app_name:
        print("Application name cannot be empty. Exiting.")
        return 0

    try:
        paths = build_paths()
    except HomeDirectoryError as exc:
        print(f"Error during file search: {exc}")
        return 1

    print(f"\n🔍 Searching for files related to '{app_name}'...")
    candidates, warnings = locate(app_name, paths)
    for warning in warnings:
        print(f"⚠️  {warning}")

    if not candidates:
        print("✅ No associated files found in common locations.")
        return 0

    console = DeletionConsole(
        candidates,
        audit=AuditLog(paths.log_file),
        prompt=prompt,
        app_name=app_name,
    )
    console.run()
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
