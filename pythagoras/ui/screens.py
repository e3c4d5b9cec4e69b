"""Plain-text screen composition from a session snapshot."""

from typing import List

from pythagoras.models import GameMode, StoryState
from pythagoras.state import Snapshot

STORY_TEXT = {
    StoryState.FIRST: [
        "In the sixth century BC, the great mathematician Pythagoras",
        "travelled across the Mediterranean world",
        "in search of universal knowledge...",
    ],
    StoryState.SECOND: [
        "After years of study in Egypt and Babylon,",
        "Pythagoras learned the secrets of geometry",
        "and the mystical relations between numbers.",
    ],
    StoryState.THIRD: [
        "In Croton, Pythagoras founded a community of scholars",
        "where mathematics, philosophy and music met",
        "in perfect harmony.",
    ],
}

HINTS = {
    GameMode.MAIN_MENU: "(S) Story | (W) Shop | (I) Inventory | (H) Heal | (N) New game | (G) Minigame | (T) Test | (E) Exit | (Q) Quit",
    GameMode.STORY: "(C) Continue | (1-9) Travel | (B) Battle | (H) Heal | (V) Give up | (M) Menu",
    GameMode.BATTLE: "(<- ->) Choose | (Enter) Confirm | (Space) Dialogue",
    GameMode.SHOP: "(<- ->) Choose | (Enter) Confirm | (M) Menu",
    GameMode.INVENTORY: "(Up/Down) Select | (Enter) Use | (B) Back",
    GameMode.MERCY: "(Enter) Continue | (B) Back to battle",
    GameMode.HEAL: "(H) Heal | (M) Menu",
    GameMode.MINIGAME: "(M) Menu",
    GameMode.TEST: "(M) Menu",
    GameMode.GAME_OVER: "(E) Exit",
}


def _options_line(options, selected) -> str:
    parts = []
    for option in options:
        label = option.value
        parts.append(f"[{label}]" if option == selected else f" {label} ")
    return "  ".join(parts)


def _body_lines(snapshot: Snapshot) -> List[str]:
    mode = snapshot.mode
    if mode == GameMode.MAIN_MENU:
        return ["Main Menu", "", "The Story of Pythagoras"]
    if mode == GameMode.STORY:
        lines = ["The Story of Pythagoras", ""] + STORY_TEXT[snapshot.story_state]
        if snapshot.exits:
            lines.append("")
            lines.extend(f"  [{idx}] {name}" for idx, name in enumerate(snapshot.exits, start=1))
        return lines
    if mode == GameMode.BATTLE:
        lines = []
        if snapshot.boss:
            boss = snapshot.boss
            lines.append(f"{boss.name} - phase {boss.phase}")
            lines.append(f"HP {boss.health:.0f}/{boss.max_health:.0f} ({boss.health_percentage:.0f}%)")
            special = "READY" if boss.special_ready else f"{boss.cooldown} turn(s)"
            lines.append(f"Special: {special}")
            if boss.dialogue_line:
                lines.append(f'"{boss.dialogue_line}"')
        elif snapshot.enemy:
            lines.append(f"{snapshot.enemy.name} - HP {snapshot.enemy.health:.0f}")
        lines.append("")
        lines.append(_options_line(type(snapshot.fight_option), snapshot.fight_option))
        return lines
    if mode == GameMode.SHOP:
        return [snapshot.shop_name, "", _options_line(type(snapshot.shop_option), snapshot.shop_option)]
    if mode == GameMode.INVENTORY:
        if not snapshot.inventory:
            return ["Inventory", "", "Inventory is empty."]
        lines = ["Inventory", ""]
        for idx, name in enumerate(snapshot.inventory):
            marker = ">" if idx == snapshot.inventory_index else " "
            lines.append(f"{marker} {idx + 1}. {name}")
        return lines
    if mode == GameMode.MERCY:
        if snapshot.mercy_outcome is None:
            return ["Mercy", "", "..."]
        verdict = "Your mercy was accepted." if snapshot.mercy_outcome else "Your mercy was refused."
        return ["Mercy", "", verdict]
    if mode == GameMode.HEAL:
        return ["Healing Sanctuary"]
    if mode == GameMode.GAME_OVER:
        return ["GAME OVER"]
    return [mode.value.replace("_", " ").title()]


def generate_lines(snapshot: Snapshot) -> List[str]:
    player = snapshot.player
    lines = _body_lines(snapshot)
    lines.append("")
    lines.append(
        f"HP {player.health:.0f}/{player.max_health:.0f} ({player.health_percentage:.0f}%)"
        f" | LVL {player.level} | XP {player.experience:.0f}"
        f" | ATK {player.damage:.0f} | DEF {player.defense:.0f} | {player.place}"
    )
    lines.append("")
    messages = list(snapshot.messages)
    for idx, message in enumerate(messages):
        prefix = "> " if idx == len(messages) - 1 else "  "
        lines.append(prefix + message)
    lines.append("")
    lines.append(HINTS.get(snapshot.mode, ""))
    return lines
