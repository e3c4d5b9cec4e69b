"""Application bootstrap helpers."""

import os
from dataclasses import dataclass
from typing import Optional

from pythagoras.commands import build_registry
from pythagoras.commands.registry import CommandRegistry
from pythagoras.commands.router import RouterContext
from pythagoras.config import DATA_DIR
from pythagoras.data_access.bosses_data import BossesData
from pythagoras.data_access.items_data import ItemsData
from pythagoras.data_access.places_data import PlacesData
from pythagoras.dice import RandomSource, make_rng
from pythagoras.session import GameSession


@dataclass
class AppContext:
    items: ItemsData
    bosses: BossesData
    places: PlacesData
    registry: CommandRegistry
    router_ctx: RouterContext
    session: GameSession


def create_app(rng: Optional[RandomSource] = None, data_dir: str = DATA_DIR) -> AppContext:
    items = ItemsData(os.path.join(data_dir, "items.json"))
    bosses = BossesData(os.path.join(data_dir, "bosses.json"))
    places = PlacesData(os.path.join(data_dir, "places.json"))
    registry = build_registry()
    router_ctx = RouterContext(
        items=items,
        bosses=bosses,
        places=places,
        registry=registry,
        rng=rng if rng is not None else make_rng(),
    )
    return AppContext(
        items=items,
        bosses=bosses,
        places=places,
        registry=registry,
        router_ctx=router_ctx,
        session=GameSession(router_ctx),
    )
