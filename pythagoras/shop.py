from typing import Optional

from pythagoras.config import HEAL_FACTOR, SHOP_ITEM_KEY
from pythagoras.data_access.items_data import ItemsData
from pythagoras.models import InventoryItem, Player


def buy(player: Player, items_data: ItemsData, key: str = SHOP_ITEM_KEY) -> InventoryItem:
    item = items_data.create(key)
    player.add_item(item)
    return item


def sell(player: Player) -> Optional[InventoryItem]:
    if not player.inventory:
        return None
    item = player.inventory.pop()
    if player.inventory_index >= len(player.inventory):
        player.inventory_index = max(0, len(player.inventory) - 1)
    return item


def heal(player: Player) -> float:
    """Heal-center treatment; never raises health above the level cap."""
    before = player.health
    player.health = min(player.health * HEAL_FACTOR, player.max_health())
    player.health = max(player.health, before)
    return player.health - before


def use_item(player: Player, index: int) -> str:
    if not 0 <= index < len(player.inventory):
        return "Invalid item selection."
    item = player.inventory[index]
    if not item.usable:
        return f"{item.name} cannot be used."
    if item.effect == "heal":
        if player.health >= player.max_health():
            return "Your health is already full."
        amount = player.heal_value * player.heal_multiplier
        restored = min(amount, player.max_health() - player.health)
        player.health += restored
        message = f"Used {item.name} and restored {restored:.0f} HP."
    else:
        message = f"Used {item.name}."
    player.inventory.pop(index)
    if player.inventory_index >= len(player.inventory):
        player.inventory_index = max(0, len(player.inventory) - 1)
    return message
