"""Helpers shared by the output translators."""

from __future__ import annotations

import re
from collections.abc import Iterable

from testplane.testing.models import TestItem

# SGR and erase-in-line sequences emitted by colored reporters
ANSI_ESCAPE = re.compile(r"\x1B\[(?:[0-9]{1,3}(?:;[0-9]{1,3})*)?[mK]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


def find_target(path: str, target_files: Iterable[str]) -> str | None:
    """Return the target file equal to ``path``, else the first one containing it."""
    targets = list(target_files)
    if path in targets:
        return path
    return next((t for t in targets if path and path in t), None)


def match_by_suffix(test_id: str, tests: Iterable[TestItem]) -> TestItem | None:
    """Find the item whose id is a ``::``-suffix of ``test_id`` or vice versa."""
    for item in tests:
        if item.id == test_id:
            return item
    for item in tests:
        if test_id.endswith(f"::{item.id}") or item.id.endswith(f"::{test_id}"):
            return item
    return None
