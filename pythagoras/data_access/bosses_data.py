"""Load boss flavor text and dialogue from JSON."""

import json
from typing import Dict, List, Optional


class BossesData:
    def __init__(self, path: str):
        self._path = path
        self._bosses: Dict[str, dict] = {}
        self.load()

    def load(self):
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                self._bosses = json.load(f)
        except (OSError, json.JSONDecodeError):
            self._bosses = {}

    def all(self) -> Dict[str, dict]:
        return self._bosses

    def get(self, key: str, default: Optional[dict] = None) -> dict:
        if default is None:
            default = {}
        return self._bosses.get(key, default)

    def dialogue(self, key: str) -> List[str]:
        lines = self.get(key).get("dialogue", [])
        if not isinstance(lines, list):
            return []
        return [str(line) for line in lines]
