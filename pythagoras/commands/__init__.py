from pythagoras.commands.registry import CommandRegistry
from pythagoras.commands import combat_commands, shop_commands


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    combat_commands.register(registry)
    shop_commands.register(registry)
    return registry
