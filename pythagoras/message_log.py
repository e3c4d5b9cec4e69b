"""Bounded narrative log read by the presentation layer."""

import logging
from collections import deque
from typing import Iterator, List, Optional

from pythagoras.config import MESSAGE_LOG_LIMIT

logger = logging.getLogger(__name__)


class MessageLog:
    def __init__(self, limit: int = MESSAGE_LOG_LIMIT, messages: Optional[List[str]] = None):
        self._entries = deque(maxlen=limit)
        for message in messages or []:
            self.add(message)

    def add(self, message: str):
        # deque drops the oldest entry once the limit is reached
        self._entries.append(message)
        logger.debug("log: %s", message)

    def recent(self, count: Optional[int] = None) -> List[str]:
        entries = list(self._entries)
        if count is None:
            return entries
        if count <= 0:
            return []
        return entries[-count:]

    def latest(self) -> Optional[str]:
        if not self._entries:
            return None
        return self._entries[-1]

    def clear(self):
        self._entries.clear()

    @property
    def limit(self) -> int:
        return self._entries.maxlen

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
