import logging

from pythagoras.bosses import apply_victory_rewards
from pythagoras.combat import (
    TurnOutcome,
    player_attack_boss,
    player_attack_enemy,
    player_defend_boss,
    player_defend_enemy,
)
from pythagoras.commands.registry import CommandContext, CommandRegistry
from pythagoras.mercy import attempt_mercy
from pythagoras.models import GameMode

logger = logging.getLogger(__name__)


def register(registry: CommandRegistry):
    registry.register("ATTACK", _handle_attack)
    registry.register("DEFEND", _handle_defend)
    registry.register("MERCY", _handle_mercy)
    registry.register("INVENTORY", _handle_inventory)


def _handle_attack(ctx: CommandContext):
    state = ctx.state
    if state.boss is not None:
        outcome = player_attack_boss(state.player, state.boss, state.log, ctx.rng)
    elif state.enemy is not None:
        outcome = player_attack_enemy(state.player, state.enemy, state.log)
    else:
        return
    _resolve_outcome(ctx, outcome)


def _handle_defend(ctx: CommandContext):
    state = ctx.state
    if state.boss is not None:
        outcome = player_defend_boss(state.player, state.boss, state.log)
    elif state.enemy is not None:
        outcome = player_defend_enemy(state.player, state.enemy, state.log)
    else:
        return
    _resolve_outcome(ctx, outcome)


def _handle_mercy(ctx: CommandContext):
    state = ctx.state
    if state.boss is not None:
        state.log.add(f"{state.boss.name} will not be swayed by mercy!")
        return
    if state.enemy is None:
        return
    result = attempt_mercy(ctx.rng)
    state.mercy_outcome = result.success
    state.mode = GameMode.MERCY
    state.log.add(f"You offer mercy to {state.enemy.name}...")


def _handle_inventory(ctx: CommandContext):
    ctx.state.open_inventory()


def _resolve_outcome(ctx: CommandContext, outcome: TurnOutcome):
    state = ctx.state
    if outcome is TurnOutcome.PLAYER_DEFEATED:
        state.log.add("You have fallen. Your journey ends here.")
        state.end_encounter()
        state.mode = GameMode.GAME_OVER
    elif outcome is TurnOutcome.ENEMY_DEFEATED:
        if state.boss is not None:
            apply_victory_rewards(state.boss, state.player, ctx.items_data, state.log)
        logger.info("Encounter won")
        state.end_encounter()
        state.mode = GameMode.STORY
