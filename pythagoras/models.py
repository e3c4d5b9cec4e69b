from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class GameMode(Enum):
    MAIN_MENU = "main_menu"
    STORY = "story"
    BATTLE = "battle"
    SHOP = "shop"
    INVENTORY = "inventory"
    MERCY = "mercy"
    HEAL = "heal"
    MINIGAME = "minigame"
    GAME_OVER = "game_over"
    TEST = "test"


class StoryState(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3


class BossArchetype(Enum):
    EARLY = "early"
    MID = "mid"
    LATE = "late"
    FINAL = "final"


class Place(Enum):
    SAMOS = "samos"
    SANDS_OF_SAMOS = "sands_of_samos"
    TYRE = "tyre"
    COLUMNS_OF_TYRE = "columns_of_tyre"
    CROTON = "croton"
    SCHOOL_OF_CROTON = "school_of_croton"
    BABYLON = "babylon"
    BABYLON_PALACE = "babylon_palace"
    OLYMPIA = "olympia"
    SYROS = "syros"
    MILETUS = "miletus"


class _CyclicOption(Enum):
    def next(self):
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    def previous(self):
        members = list(type(self))
        return members[(members.index(self) - 1) % len(members)]


class FightOption(_CyclicOption):
    ATTACK = "Attack"
    DEFEND = "Defend"
    INVENTORY = "Inventory"
    MERCY = "Mercy"


class ShopOption(_CyclicOption):
    BUY = "Buy"
    SELL = "Sell"
    INVENTORY = "Inventory"
    EXIT = "Exit"


@dataclass
class InventoryItem:
    key: str
    name: str
    quantity: int = 1
    description: str = ""
    usable: bool = False
    value: int = 0
    effect: str = ""


@dataclass
class Player:
    health: float
    damage: float
    defense: float
    level: int
    experience: float
    experience_multiplier: float
    heal_value: float
    heal_multiplier: float
    inventory: List[InventoryItem] = field(default_factory=list)
    location: Place = Place.SAMOS
    fight_option: FightOption = FightOption.ATTACK
    shop_option: ShopOption = ShopOption.BUY
    inventory_index: int = 0

    @staticmethod
    def new() -> "Player":
        return Player(
            health=100.0,
            damage=15.0,
            defense=5.0,
            level=1,
            experience=0.0,
            experience_multiplier=1.0,
            heal_value=20.0,
            heal_multiplier=1.0,
        )

    def max_health(self) -> float:
        return 100.0 + (self.level - 1) * 20.0

    def health_percentage(self) -> float:
        return self.health / self.max_health() * 100.0

    def is_defeated(self) -> bool:
        return self.health <= 0

    def gain_experience(self, amount: float) -> float:
        gained = amount * self.experience_multiplier
        self.experience += gained
        return gained

    def add_item(self, item: InventoryItem):
        self.inventory.append(item)

    def item_names(self) -> List[str]:
        return [item.name for item in self.inventory]


@dataclass
class Enemy:
    name: str
    health: float
    damage: float
    strength_factor: float
    heal: float
    alive: bool = True
    defense: float = 0.0

    @staticmethod
    def new(name: str = "Bandit") -> "Enemy":
        return Enemy(
            name=name,
            health=150.0,
            damage=10.0,
            strength_factor=1.1,
            heal=15.0,
        )


@dataclass
class Boss:
    archetype: BossArchetype
    name: str
    max_health: float
    current_health: float
    damage: float
    defense: float
    special_cooldown: int
    cooldown: int = 0
    phase: int = 1
    description: str = ""
    special_ability: str = ""
    dialogue: List[str] = field(default_factory=list)
    dialogue_index: int = 0

    @property
    def defeated(self) -> bool:
        return self.current_health <= 0

    # Shared with Enemy so the resolver can treat both as defenders.
    @property
    def health(self) -> float:
        return self.current_health

    @health.setter
    def health(self, value: float):
        self.current_health = value

    def health_percentage(self) -> float:
        return self.current_health / self.max_health * 100.0

    def special_ready(self) -> bool:
        return self.cooldown == 0

    def reset_cooldown(self):
        self.cooldown = self.special_cooldown

    def tick_cooldown(self):
        if self.cooldown > 0:
            self.cooldown -= 1

    def current_dialogue(self) -> Optional[str]:
        if self.dialogue_index < len(self.dialogue):
            return self.dialogue[self.dialogue_index]
        return None

    def advance_dialogue(self) -> bool:
        if self.dialogue_index >= len(self.dialogue):
            return False
        self.dialogue_index += 1
        return True
