"""Load place names, shop names and travel exits from JSON."""

import json
import logging
from typing import Dict, List, Optional

from pythagoras.models import Place

logger = logging.getLogger(__name__)


class PlacesData:
    def __init__(self, path: str):
        self._path = path
        self._places: Dict[str, dict] = {}
        self.load()

    def load(self):
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                self._places = json.load(f)
        except (OSError, json.JSONDecodeError):
            self._places = {}

    def all(self) -> Dict[str, dict]:
        return self._places

    def get(self, key: str, default: Optional[dict] = None) -> dict:
        if default is None:
            default = {}
        return self._places.get(key, default)

    def name(self, place: Place) -> str:
        return self.get(place.value).get("name", place.value.replace("_", " ").title())

    def shop_name(self, place: Place) -> str:
        return self.get(place.value).get("shop", f"Shop of {self.name(place)}")

    def exits(self, place: Place) -> List[Place]:
        exits = []
        for key in self.get(place.value).get("exits", []):
            try:
                exits.append(Place(key))
            except ValueError:
                logger.warning("Ignoring unknown exit %r from %s.", key, place.value)
        return exits
