"""Outer run loop for the terminal driver."""

import logging
from typing import Callable, List

from pythagoras.commands.intents import RunSignal
from pythagoras.commands.keymap import map_key_to_intent
from pythagoras.session import GameSession
from pythagoras.ui.screens import generate_lines

logger = logging.getLogger(__name__)


def run_game(
    session: GameSession,
    read_keypress: Callable[[], str],
    render_lines: Callable[[List[str]], None],
) -> None:
    while True:
        render_lines(generate_lines(session.snapshot()))
        intent = map_key_to_intent(read_keypress(), session.state.mode)
        if intent is None:
            continue
        if session.submit_intent(intent) is RunSignal.STOP:
            logger.info("Run loop stopped")
            return
