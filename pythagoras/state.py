"""State container for a game session, plus the read-only snapshot."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pythagoras.config import WELCOME_MESSAGE
from pythagoras.message_log import MessageLog
from pythagoras.models import (
    Boss,
    Enemy,
    FightOption,
    GameMode,
    Player,
    ShopOption,
    StoryState,
)


@dataclass
class GameState:
    player: Player
    log: MessageLog
    mode: GameMode = GameMode.MAIN_MENU
    story_state: StoryState = StoryState.FIRST
    return_to: Optional[GameMode] = None
    enemy: Optional[Enemy] = None
    boss: Optional[Boss] = None
    mercy_outcome: Optional[bool] = None

    @staticmethod
    def new() -> "GameState":
        return GameState(player=Player.new(), log=MessageLog(messages=[WELCOME_MESSAGE]))

    @property
    def is_boss_battle(self) -> bool:
        return self.boss is not None

    def open_inventory(self):
        if self.mode == GameMode.INVENTORY:
            return
        self.return_to = self.mode
        self.mode = GameMode.INVENTORY
        self.player.inventory_index = 0

    def close_inventory(self):
        self.mode = self.return_to or GameMode.MAIN_MENU
        self.return_to = None

    def end_encounter(self):
        self.enemy = None
        self.boss = None
        self.mercy_outcome = None


@dataclass(frozen=True)
class PlayerView:
    health: float
    max_health: float
    health_percentage: float
    damage: float
    defense: float
    level: int
    experience: float
    place: str


@dataclass(frozen=True)
class EnemyView:
    name: str
    health: float
    damage: float
    alive: bool


@dataclass(frozen=True)
class BossView:
    name: str
    description: str
    special_ability: str
    health: float
    max_health: float
    health_percentage: float
    phase: int
    cooldown: int
    special_ready: bool
    dialogue_line: Optional[str]
    dialogue_index: int


@dataclass(frozen=True)
class Snapshot:
    mode: GameMode
    story_state: StoryState
    player: PlayerView
    enemy: Optional[EnemyView]
    boss: Optional[BossView]
    inventory: Tuple[str, ...]
    inventory_index: int
    messages: Tuple[str, ...]
    fight_option: FightOption
    shop_option: ShopOption
    mercy_outcome: Optional[bool]
    shop_name: str
    exits: Tuple[str, ...] = ()


def build_snapshot(state: GameState, places, message_count: Optional[int] = None) -> Snapshot:
    player = state.player
    enemy_view = None
    if state.enemy is not None:
        enemy_view = EnemyView(
            name=state.enemy.name,
            health=state.enemy.health,
            damage=state.enemy.damage,
            alive=state.enemy.alive,
        )
    boss_view = None
    if state.boss is not None:
        boss = state.boss
        boss_view = BossView(
            name=boss.name,
            description=boss.description,
            special_ability=boss.special_ability,
            health=boss.current_health,
            max_health=boss.max_health,
            health_percentage=boss.health_percentage(),
            phase=boss.phase,
            cooldown=boss.cooldown,
            special_ready=boss.special_ready(),
            dialogue_line=boss.current_dialogue(),
            dialogue_index=boss.dialogue_index,
        )
    exits: List[str] = [places.name(place) for place in places.exits(player.location)]
    return Snapshot(
        mode=state.mode,
        story_state=state.story_state,
        player=PlayerView(
            health=player.health,
            max_health=player.max_health(),
            health_percentage=player.health_percentage(),
            damage=player.damage,
            defense=player.defense,
            level=player.level,
            experience=player.experience,
            place=places.name(player.location),
        ),
        enemy=enemy_view,
        boss=boss_view,
        inventory=tuple(player.item_names()),
        inventory_index=player.inventory_index,
        messages=tuple(state.log.recent(message_count)),
        fight_option=player.fight_option,
        shop_option=player.shop_option,
        mercy_outcome=state.mercy_outcome,
        shop_name=places.shop_name(player.location),
        exits=tuple(exits),
    )
