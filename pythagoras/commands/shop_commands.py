from pythagoras.commands.registry import CommandContext, CommandRegistry
from pythagoras.models import GameMode
from pythagoras.shop import buy, sell


def register(registry: CommandRegistry):
    registry.register("BUY", _handle_buy)
    registry.register("SELL", _handle_sell)
    registry.register("EXIT", _handle_exit)


def _handle_buy(ctx: CommandContext):
    item = buy(ctx.state.player, ctx.items_data)
    ctx.state.log.add(f"Purchased {item.name}.")


def _handle_sell(ctx: CommandContext):
    item = sell(ctx.state.player)
    if item is not None:
        ctx.state.log.add(f"Sold {item.name}.")


def _handle_exit(ctx: CommandContext):
    ctx.state.mode = GameMode.MAIN_MENU
    ctx.state.log.add("You leave the shop.")
