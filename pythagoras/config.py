"""Filesystem and runtime configuration."""

import os

BASE_DIR = os.path.dirname(__file__)
DATA_DIR = os.path.join(BASE_DIR, "data")

LOG_LEVEL = os.environ.get("PYTHAGORAS_LOG_LEVEL", "WARNING").upper()

MESSAGE_LOG_LIMIT = 10
MERCY_CHANCE = 7
SPECIAL_ATTACK_CHANCE = 0.6
DAMAGE_VARIANCE = (0.8, 1.2)
HEAL_FACTOR = 1.2
SHOP_ITEM_KEY = "health_potion"
WELCOME_MESSAGE = "Welcome to the world of Pythagoras!"
