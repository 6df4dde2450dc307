"""
Persisted high-score table: a JSON array of {name, score}, best first
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, List, Optional

from .configs.game_config import HIGHSCORE_CONFIG

logger = logging.getLogger(__name__)


def _valid_entry(entry) -> bool:
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("name"), str)
        and isinstance(entry.get("score"), int)
        and not isinstance(entry.get("score"), bool)
    )


class HighScoreTable:
    """
    Top scores, descending. On ties the older entry keeps the higher rank.
    A missing or malformed file loads as an empty table.
    """

    def __init__(self, path: Optional[str] = None, max_entries: int = HIGHSCORE_CONFIG["max_entries"]):
        self.path = path
        self.max_entries = max_entries
        self.entries: List[Dict] = []

    def load(self) -> "HighScoreTable":
        self.entries = []
        if self.path is None or not os.path.exists(self.path):
            return self

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable high scores at %s: %s", self.path, exc)
            return self

        if not isinstance(data, list) or not all(_valid_entry(e) for e in data):
            logger.warning("Ignoring malformed high scores at %s", self.path)
            return self

        entries = [{"name": e["name"], "score": e["score"]} for e in data]
        self.entries = sorted(entries, key=lambda e: e["score"], reverse=True)[: self.max_entries]
        return self

    def save(self):
        """Write the table; failures are logged, never raised"""
        if self.path is None:
            return
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.entries, f, indent=2)
        except OSError as exc:
            logger.warning("Could not save high scores to %s: %s", self.path, exc)

    def qualifies(self, score: int) -> bool:
        if len(self.entries) < self.max_entries:
            return True
        return score > self.entries[-1]["score"]

    def record(self, name: str, score: int) -> bool:
        """Insert ``score`` if it makes the table; returns whether it did"""
        if not self.qualifies(score):
            return False
        self.entries.append({"name": name, "score": int(score)})
        # sort is stable, so an equal older score stays ahead
        self.entries.sort(key=lambda e: e["score"], reverse=True)
        del self.entries[self.max_entries:]
        return True

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
