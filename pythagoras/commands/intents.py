"""Discrete intents submitted by the presentation layer."""

from enum import Enum


class Intent(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    BACK = "back"
    CONTINUE = "continue"
    QUIT = "quit"
    EXIT = "exit"
    START_STORY = "start_story"
    START_BATTLE = "start_battle"
    OPEN_SHOP = "open_shop"
    OPEN_INVENTORY = "open_inventory"
    HEAL = "heal"
    MAIN_MENU = "main_menu"
    NEW_GAME = "new_game"
    GIVE_UP = "give_up"
    TEST = "test"
    MINIGAME = "minigame"
    NUM1 = "num1"
    NUM2 = "num2"
    NUM3 = "num3"
    NUM4 = "num4"
    NUM5 = "num5"
    NUM6 = "num6"
    NUM7 = "num7"
    NUM8 = "num8"
    NUM9 = "num9"

    def number(self):
        """1-based slot for NUM intents, None otherwise."""
        if self.name.startswith("NUM"):
            return int(self.name.replace("NUM", ""))
        return None


class RunSignal(Enum):
    CONTINUE = "continue"
    STOP = "stop"
