import logging
from enum import Enum

from pythagoras.bosses import advance_phases, special_attack
from pythagoras.config import SPECIAL_ATTACK_CHANCE
from pythagoras.dice import RandomSource, chance, variance_factor
from pythagoras.message_log import MessageLog
from pythagoras.models import Boss, Enemy, Player

logger = logging.getLogger(__name__)


class TurnOutcome(Enum):
    ONGOING = "ongoing"
    ENEMY_DEFEATED = "enemy_defeated"
    PLAYER_DEFEATED = "player_defeated"


def effective_damage(raw_damage: float, defense: float) -> float:
    return max(raw_damage - defense, 1.0)


def attack(attacker_damage: float, defender, log: MessageLog) -> float:
    """Hit a Boss or Enemy; health may go below zero until the caller checks it."""
    damage = effective_damage(attacker_damage, defender.defense)
    defender.health -= damage
    log.add(f"You deal {damage:.0f} damage to {defender.name}!")
    return damage


def defend(player: Player, incoming_damage: float, log: MessageLog) -> float:
    damage = incoming_damage * 0.5
    player.health -= damage
    log.add(f"You brace yourself and take only {damage:.0f} damage.")
    return damage


def _player_outcome(player: Player) -> TurnOutcome:
    if player.is_defeated():
        player.health = 0.0
        logger.info("Player defeated")
        return TurnOutcome.PLAYER_DEFEATED
    return TurnOutcome.ONGOING


def enemy_counterattack(enemy: Enemy, player: Player, log: MessageLog) -> TurnOutcome:
    player.health -= enemy.damage
    log.add(f"{enemy.name} strikes back for {enemy.damage:.0f} damage!")
    return _player_outcome(player)


def player_attack_enemy(player: Player, enemy: Enemy, log: MessageLog) -> TurnOutcome:
    attack(player.damage, enemy, log)
    if enemy.health <= 0:
        enemy.alive = False
        log.add(f"{enemy.name} has been defeated!")
        return TurnOutcome.ENEMY_DEFEATED
    return enemy_counterattack(enemy, player, log)


def player_defend_enemy(player: Player, enemy: Enemy, log: MessageLog) -> TurnOutcome:
    defend(player, enemy.damage, log)
    return _player_outcome(player)


def boss_counterattack(boss: Boss, player: Player, log: MessageLog, rng: RandomSource) -> TurnOutcome:
    if boss.special_ready() and chance(rng, SPECIAL_ATTACK_CHANCE):
        special_attack(boss, player, log)
    else:
        damage = boss.damage * variance_factor(rng)
        player.health -= damage
        log.add(f"{boss.name} attacks you for {damage:.0f} damage!")
        boss.tick_cooldown()
    return _player_outcome(player)


def player_attack_boss(player: Player, boss: Boss, log: MessageLog, rng: RandomSource) -> TurnOutcome:
    attack(player.damage, boss, log)
    # a phase heal can pull the boss back above zero
    advance_phases(boss, log)
    if boss.defeated:
        return TurnOutcome.ENEMY_DEFEATED
    return boss_counterattack(boss, player, log, rng)


def player_defend_boss(player: Player, boss: Boss, log: MessageLog) -> TurnOutcome:
    defend(player, boss.damage, log)
    boss.tick_cooldown()
    return _player_outcome(player)
