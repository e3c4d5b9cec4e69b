"""Boss archetypes, phase transitions, special attacks and victory rewards.

Each archetype is a fixed template. Phases only ever move forward: the
transition predicate is checked after every player attack and each phase
effect is applied exactly once. Boss defense only mitigates damage the player
deals; nothing the boss deals is reduced by the player's defense.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pythagoras.data_access.bosses_data import BossesData
from pythagoras.message_log import MessageLog
from pythagoras.models import Boss, BossArchetype, Place, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchetypeStats:
    max_health: float
    damage: float
    defense: float
    special_cooldown: int
    phase_thresholds: Tuple[float, ...]


@dataclass(frozen=True)
class Reward:
    experience: float
    item_key: str
    message: str
    damage_bonus: float = 0.0
    heal_multiplier_bonus: float = 0.0
    level_bonus: int = 0


ARCHETYPES: Dict[BossArchetype, ArchetypeStats] = {
    BossArchetype.EARLY: ArchetypeStats(200.0, 25.0, 10.0, 3, (50.0,)),
    BossArchetype.MID: ArchetypeStats(350.0, 35.0, 15.0, 4, (40.0,)),
    BossArchetype.LATE: ArchetypeStats(500.0, 45.0, 20.0, 5, (30.0,)),
    BossArchetype.FINAL: ArchetypeStats(750.0, 60.0, 25.0, 3, (60.0, 25.0)),
}

DEFAULT_NAMES = {
    BossArchetype.EARLY: "Guardian of Samos",
    BossArchetype.MID: "Tyrant of Tyre",
    BossArchetype.LATE: "Babylonian Sage",
    BossArchetype.FINAL: "Shadow of Chaos",
}

REWARDS: Dict[BossArchetype, Reward] = {
    BossArchetype.EARLY: Reward(
        experience=100.0,
        item_key="geometric_fragment",
        message="You have defeated the Guardian of Samos!",
    ),
    BossArchetype.MID: Reward(
        experience=200.0,
        item_key="tyrants_crown",
        message="You have freed Tyre from the tyrant!",
        damage_bonus=5.0,
    ),
    BossArchetype.LATE: Reward(
        experience=300.0,
        item_key="babylonian_tablet",
        message="You have gained the wisdom of Babylon!",
        heal_multiplier_bonus=0.5,
    ),
    BossArchetype.FINAL: Reward(
        experience=500.0,
        item_key="crystal_of_order",
        message="You have defeated Chaos! You are a true follower of Pythagoras!",
        level_bonus=1,
    ),
}

LAIRS: Dict[Place, BossArchetype] = {
    Place.SANDS_OF_SAMOS: BossArchetype.EARLY,
    Place.COLUMNS_OF_TYRE: BossArchetype.MID,
    Place.BABYLON_PALACE: BossArchetype.LATE,
    Place.OLYMPIA: BossArchetype.FINAL,
}


def boss_for_place(place: Place) -> Optional[BossArchetype]:
    return LAIRS.get(place)


def create_boss(archetype: BossArchetype, flavor: Optional[BossesData] = None) -> Boss:
    """Build a fresh boss: full health, phase 1, special ready."""
    stats = ARCHETYPES[archetype]
    data = flavor.get(archetype.value) if flavor else {}
    dialogue = flavor.dialogue(archetype.value) if flavor else []
    return Boss(
        archetype=archetype,
        name=data.get("name", DEFAULT_NAMES[archetype]),
        max_health=stats.max_health,
        current_health=stats.max_health,
        damage=stats.damage,
        defense=stats.defense,
        special_cooldown=stats.special_cooldown,
        cooldown=0,
        phase=1,
        description=data.get("desc", ""),
        special_ability=data.get("special", ""),
        dialogue=dialogue,
        dialogue_index=0,
    )


def max_phase(archetype: BossArchetype) -> int:
    return len(ARCHETYPES[archetype].phase_thresholds) + 1


def should_enter_next_phase(boss: Boss) -> bool:
    thresholds = ARCHETYPES[boss.archetype].phase_thresholds
    if boss.phase > len(thresholds):
        return False
    return boss.health_percentage() <= thresholds[boss.phase - 1]


def enter_next_phase(boss: Boss):
    boss.phase += 1
    archetype = boss.archetype
    if archetype is BossArchetype.EARLY:
        if boss.phase == 2:
            boss.damage *= 1.2
            boss.special_cooldown = 2
    elif archetype is BossArchetype.MID:
        if boss.phase == 2:
            boss.damage *= 1.3
            boss.defense *= 0.8
    elif archetype is BossArchetype.LATE:
        if boss.phase == 2:
            boss.current_health = min(boss.current_health + 100.0, boss.max_health)
            boss.damage *= 1.4
    elif archetype is BossArchetype.FINAL:
        if boss.phase == 2:
            boss.damage *= 1.5
            boss.special_cooldown = 2
        elif boss.phase == 3:
            boss.damage *= 1.8
            boss.special_cooldown = 1
    logger.info("%s enters phase %d", boss.name, boss.phase)


def advance_phases(boss: Boss, log: MessageLog) -> List[int]:
    entered = []
    while should_enter_next_phase(boss):
        enter_next_phase(boss)
        entered.append(boss.phase)
        log.add(f"{boss.name} enters phase {boss.phase}!")
    return entered


def special_attack(boss: Boss, player: Player, log: MessageLog) -> float:
    """Resolve the archetype's special move; returns damage dealt to the player."""
    damage = 0.0
    archetype = boss.archetype
    if archetype is BossArchetype.EARLY:
        damage = boss.damage * 1.5
        player.health -= damage
        log.add(f"{boss.name} uses Geometric Shield! {damage:.0f} damage!")
    elif archetype is BossArchetype.MID:
        damage = boss.damage * 2.0
        player.health -= damage
        log.add(f"{boss.name} unleashes its Wrath! {damage:.0f} devastating damage!")
    elif archetype is BossArchetype.LATE:
        boss.current_health = min(boss.current_health + 50.0, boss.max_health)
        boss.damage *= 1.1
        log.add(f"{boss.name} uses an Ancient Theorem! It grows stronger!")
    elif archetype is BossArchetype.FINAL:
        damage = boss.damage * 2.5
        player.health -= damage
        player.damage *= 0.9
        log.add(f"{boss.name} unleashes Numeric Chaos! {damage:.0f} damage! You are weakened!")
    boss.reset_cooldown()
    return damage


def apply_victory_rewards(boss: Boss, player: Player, items, log: MessageLog) -> Reward:
    reward = REWARDS[boss.archetype]
    player.gain_experience(reward.experience)
    player.damage += reward.damage_bonus
    player.heal_multiplier += reward.heal_multiplier_bonus
    player.level += reward.level_bonus
    player.add_item(items.create(reward.item_key))
    log.add(reward.message)
    logger.info("Boss %s defeated; granted %s", boss.name, reward.item_key)
    return reward
