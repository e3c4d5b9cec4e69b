"""Command registry and dispatch helpers."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from pythagoras.data_access.items_data import ItemsData
from pythagoras.dice import RandomSource
from pythagoras.state import GameState

logger = logging.getLogger(__name__)

CommandHandler = Callable[["CommandContext"], None]


@dataclass
class CommandContext:
    state: GameState
    items_data: ItemsData
    rng: RandomSource


class CommandRegistry:
    def __init__(self):
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, command_id: str, handler: CommandHandler):
        self._handlers[command_id] = handler

    def has(self, command_id: str) -> bool:
        return command_id in self._handlers

    def dispatch(self, command_id: str, ctx: CommandContext) -> bool:
        handler = self._handlers.get(command_id)
        if handler is None:
            logger.debug("No handler for %s", command_id)
            return False
        handler(ctx)
        return True
