"""Session facade driven by the presentation layer."""

from typing import Optional

from pythagoras.commands.intents import Intent, RunSignal
from pythagoras.commands.router import RouterContext, handle_intent
from pythagoras.state import GameState, Snapshot, build_snapshot


class GameSession:
    """Owns the whole game model and mutates it one intent at a time.

    ``submit_intent`` runs to completion before returning and reports whether
    the outer loop should keep going. ``snapshot`` is a frozen copy of what a
    screen needs to draw; it shares no mutable state with the session.
    """

    def __init__(self, router_ctx: RouterContext, state: Optional[GameState] = None):
        self.router_ctx = router_ctx
        self.state = state or GameState.new()

    def submit_intent(self, intent: Intent) -> RunSignal:
        return handle_intent(intent, self.state, self.router_ctx)

    def snapshot(self, message_count: Optional[int] = None) -> Snapshot:
        return build_snapshot(self.state, self.router_ctx.places, message_count)
