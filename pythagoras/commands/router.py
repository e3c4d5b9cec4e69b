"""Intent router: the game-mode state machine.

Every intent is handled synchronously against the active mode. Intents a
mode does not recognise are ignored. QUIT is accepted everywhere and is the
only way, besides EXIT from the game-over screen, to stop the run loop.
"""

import logging
from dataclasses import dataclass

from pythagoras.bosses import boss_for_place, create_boss
from pythagoras.commands.intents import Intent, RunSignal
from pythagoras.commands.registry import CommandContext, CommandRegistry
from pythagoras.data_access.bosses_data import BossesData
from pythagoras.data_access.items_data import ItemsData
from pythagoras.data_access.places_data import PlacesData
from pythagoras.dice import RandomSource
from pythagoras.models import BossArchetype, Enemy, FightOption, GameMode, Place, StoryState
from pythagoras.shop import heal, use_item
from pythagoras.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class RouterContext:
    items: ItemsData
    bosses: BossesData
    places: PlacesData
    registry: CommandRegistry
    rng: RandomSource


def handle_intent(intent: Intent, state: GameState, ctx: RouterContext) -> RunSignal:
    if intent is None:
        return RunSignal.CONTINUE
    if intent is Intent.QUIT:
        logger.info("Quit requested in %s", state.mode.value)
        return RunSignal.STOP
    handler = _MODE_HANDLERS.get(state.mode)
    logger.debug("%s -> %s", state.mode.value, intent.value)
    return handler(intent, state, ctx) or RunSignal.CONTINUE


def new_game(state: GameState):
    fresh = GameState.new()
    state.player = fresh.player
    state.log = fresh.log
    state.story_state = StoryState.FIRST
    state.return_to = None
    state.end_encounter()
    state.mode = GameMode.MAIN_MENU
    state.log.add("A new journey begins.")


def start_battle(state: GameState):
    state.end_encounter()
    state.enemy = Enemy.new()
    state.player.fight_option = FightOption.ATTACK
    state.mode = GameMode.BATTLE
    state.log.add("A battle is about to begin!")


def start_boss_battle(state: GameState, archetype: BossArchetype, ctx: RouterContext):
    state.end_encounter()
    state.boss = create_boss(archetype, ctx.bosses)
    state.player.fight_option = FightOption.ATTACK
    state.mode = GameMode.BATTLE
    state.log.add(f"Boss battle begins: {state.boss.name}!")
    logger.info("Boss encounter started: %s", archetype.value)


def travel(state: GameState, destination: Place, ctx: RouterContext):
    state.player.location = destination
    state.log.add(f"You travel to {ctx.places.name(destination)}.")
    archetype = boss_for_place(destination)
    if archetype is not None:
        start_boss_battle(state, archetype, ctx)


def advance_story(state: GameState):
    if state.story_state is StoryState.FIRST:
        state.story_state = StoryState.SECOND
        state.player.location = Place.SAMOS
        state.log.add("You continue the journey of Pythagoras...")
    elif state.story_state is StoryState.SECOND:
        state.story_state = StoryState.THIRD
        state.player.location = Place.BABYLON
        state.log.add("The destiny of Pythagoras unfolds...")
    else:
        state.player.location = Place.CROTON
        state.log.add("The story is complete! You may now explore freely.")


def _command_context(state: GameState, ctx: RouterContext) -> CommandContext:
    return CommandContext(
        state=state,
        items_data=ctx.items,
        rng=ctx.rng,
    )


def _handle_main_menu(intent: Intent, state: GameState, ctx: RouterContext):
    if intent is Intent.START_STORY:
        state.mode = GameMode.STORY
        state.log.add("The story of Pythagoras begins!")
    elif intent is Intent.EXIT:
        state.mode = GameMode.GAME_OVER
    elif intent is Intent.TEST:
        state.mode = GameMode.TEST
    elif intent is Intent.MINIGAME:
        state.mode = GameMode.MINIGAME
    elif intent is Intent.HEAL:
        state.mode = GameMode.HEAL
        state.log.add("You enter the healing sanctuary.")
    elif intent is Intent.OPEN_INVENTORY:
        state.open_inventory()
    elif intent is Intent.OPEN_SHOP:
        state.mode = GameMode.SHOP
        state.log.add(f"Welcome to the {ctx.places.shop_name(state.player.location)}!")
    elif intent is Intent.NEW_GAME:
        new_game(state)


def _handle_story(intent: Intent, state: GameState, ctx: RouterContext):
    if intent is Intent.CONTINUE:
        advance_story(state)
    elif intent is Intent.START_BATTLE:
        start_battle(state)
    elif intent is Intent.HEAL:
        state.mode = GameMode.HEAL
    elif intent is Intent.GIVE_UP:
        state.mode = GameMode.GAME_OVER
    elif intent in (Intent.MAIN_MENU, Intent.BACK):
        state.mode = GameMode.MAIN_MENU
    elif intent.number() is not None:
        exits = ctx.places.exits(state.player.location)
        idx = intent.number() - 1
        if 0 <= idx < len(exits):
            travel(state, exits[idx], ctx)


def _handle_battle(intent: Intent, state: GameState, ctx: RouterContext):
    player = state.player
    if intent is Intent.LEFT:
        player.fight_option = player.fight_option.previous()
    elif intent is Intent.RIGHT:
        player.fight_option = player.fight_option.next()
    elif intent is Intent.CONTINUE and state.boss is not None and state.boss.current_dialogue() is not None:
        state.boss.advance_dialogue()
    elif intent in (Intent.CONFIRM, Intent.CONTINUE):
        ctx.registry.dispatch(player.fight_option.name, _command_context(state, ctx))


def _handle_shop(intent: Intent, state: GameState, ctx: RouterContext):
    player = state.player
    if intent is Intent.LEFT:
        player.shop_option = player.shop_option.previous()
    elif intent is Intent.RIGHT:
        player.shop_option = player.shop_option.next()
    elif intent is Intent.CONFIRM:
        ctx.registry.dispatch(player.shop_option.name, _command_context(state, ctx))
    elif intent in (Intent.MAIN_MENU, Intent.BACK):
        state.mode = GameMode.MAIN_MENU


def _handle_inventory(intent: Intent, state: GameState, ctx: RouterContext):
    player = state.player
    count = len(player.inventory)
    if intent is Intent.BACK:
        state.close_inventory()
    elif intent in (Intent.UP, Intent.DOWN) and count:
        step = -1 if intent is Intent.UP else 1
        player.inventory_index = (player.inventory_index + step) % count
    elif intent is Intent.CONFIRM and count:
        state.log.add(use_item(player, player.inventory_index))
    elif intent.number() is not None:
        state.log.add(use_item(player, intent.number() - 1))


def _handle_mercy(intent: Intent, state: GameState, ctx: RouterContext):
    if intent in (Intent.CONFIRM, Intent.CONTINUE):
        if state.mercy_outcome is True:
            name = state.enemy.name if state.enemy else "Your foe"
            state.log.add(f"{name} accepts your mercy and leaves in peace.")
            state.end_encounter()
            state.mode = GameMode.STORY
        elif state.mercy_outcome is False:
            state.log.add("Your mercy is refused! The battle continues.")
            state.mode = GameMode.BATTLE
        state.mercy_outcome = None
    elif intent is Intent.BACK:
        state.mode = GameMode.BATTLE
        state.mercy_outcome = None


def _handle_heal(intent: Intent, state: GameState, ctx: RouterContext):
    if intent is Intent.HEAL:
        restored = heal(state.player)
        state.log.add(f"You rest and recover {restored:.0f} HP.")
    elif intent in (Intent.MAIN_MENU, Intent.BACK):
        state.mode = GameMode.MAIN_MENU


def _handle_idle(intent: Intent, state: GameState, ctx: RouterContext):
    if intent in (Intent.MAIN_MENU, Intent.BACK):
        state.mode = GameMode.MAIN_MENU


def _handle_game_over(intent: Intent, state: GameState, ctx: RouterContext):
    if intent is Intent.EXIT:
        return RunSignal.STOP
    return None


_MODE_HANDLERS = {
    GameMode.MAIN_MENU: _handle_main_menu,
    GameMode.STORY: _handle_story,
    GameMode.BATTLE: _handle_battle,
    GameMode.SHOP: _handle_shop,
    GameMode.INVENTORY: _handle_inventory,
    GameMode.MERCY: _handle_mercy,
    GameMode.HEAL: _handle_heal,
    GameMode.MINIGAME: _handle_idle,
    GameMode.TEST: _handle_idle,
    GameMode.GAME_OVER: _handle_game_over,
}
