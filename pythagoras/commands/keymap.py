"""Key-to-intent mapping, scoped by the active game mode."""

from typing import Dict, Optional

from pythagoras.commands.intents import Intent
from pythagoras.models import GameMode

GLOBAL_KEYS: Dict[str, Intent] = {
    "q": Intent.QUIT,
    "ESC": Intent.QUIT,
    "\x03": Intent.QUIT,
    "LEFT": Intent.LEFT,
    "RIGHT": Intent.RIGHT,
    "UP": Intent.UP,
    "DOWN": Intent.DOWN,
    "ENTER": Intent.CONFIRM,
    "\r": Intent.CONFIRM,
    "\n": Intent.CONFIRM,
}

MODE_KEYS: Dict[GameMode, Dict[str, Intent]] = {
    GameMode.MAIN_MENU: {
        "s": Intent.START_STORY,
        "e": Intent.EXIT,
        "t": Intent.TEST,
        "h": Intent.HEAL,
        "i": Intent.OPEN_INVENTORY,
        "w": Intent.OPEN_SHOP,
        "n": Intent.NEW_GAME,
        "g": Intent.MINIGAME,
    },
    GameMode.STORY: {
        "c": Intent.CONTINUE,
        "h": Intent.HEAL,
        "v": Intent.GIVE_UP,
        "b": Intent.START_BATTLE,
        "m": Intent.MAIN_MENU,
    },
    GameMode.BATTLE: {
        " ": Intent.CONTINUE,
    },
    GameMode.SHOP: {
        " ": Intent.CONFIRM,
        "m": Intent.MAIN_MENU,
    },
    GameMode.INVENTORY: {
        "b": Intent.BACK,
    },
    GameMode.MERCY: {
        " ": Intent.CONFIRM,
        "b": Intent.BACK,
    },
    GameMode.HEAL: {
        "h": Intent.HEAL,
        "m": Intent.MAIN_MENU,
    },
    GameMode.MINIGAME: {
        "m": Intent.MAIN_MENU,
    },
    GameMode.TEST: {
        "m": Intent.MAIN_MENU,
    },
    GameMode.GAME_OVER: {
        "e": Intent.EXIT,
    },
}

NUMBER_KEYS = {str(n): Intent[f"NUM{n}"] for n in range(1, 10)}


def map_key_to_intent(ch: str, mode: GameMode) -> Optional[Intent]:
    if not ch:
        return None
    key = ch if len(ch) > 1 else ch.lower()
    if key in GLOBAL_KEYS:
        return GLOBAL_KEYS[key]
    mode_keys = MODE_KEYS.get(mode, {})
    if key in mode_keys:
        return mode_keys[key]
    if key in NUMBER_KEYS and mode in (GameMode.STORY, GameMode.INVENTORY):
        return NUMBER_KEYS[key]
    return None
