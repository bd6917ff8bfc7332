"""Roster provider backed by a static JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from .base import RosterProvider


class JsonFileRosterProvider(RosterProvider):
    """Read roster records from a JSON array on disk.

    The file is parsed on every call to `fighters()`; nothing is cached at
    module level.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fighters(self):  # type: ignore[override]
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{self.path}: expected a JSON array of fighters")
        return data
