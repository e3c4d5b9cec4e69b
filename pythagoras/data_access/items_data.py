"""Load the item catalog from JSON."""

import json
import logging
from typing import Dict, Optional

from pythagoras.models import InventoryItem

logger = logging.getLogger(__name__)


class ItemsData:
    def __init__(self, path: str):
        self._path = path
        self._items: Dict[str, dict] = {}
        self.load()

    def load(self):
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                self._items = json.load(f)
        except (OSError, json.JSONDecodeError):
            self._items = {}

    def all(self) -> Dict[str, dict]:
        return self._items

    def get(self, key: str, default: Optional[dict] = None) -> dict:
        if default is None:
            default = {}
        return self._items.get(key, default)

    def create(self, key: str) -> InventoryItem:
        data = self._items.get(key)
        if data is None:
            logger.warning("Unknown item %r; using a plain entry.", key)
            data = {}
        return InventoryItem(
            key=key,
            name=data.get("name", key.replace("_", " ").title()),
            quantity=int(data.get("quantity", 1)),
            description=data.get("desc", ""),
            usable=bool(data.get("usable", False)),
            value=int(data.get("value", 0)),
            effect=str(data.get("effect", "")),
        )

