"""
Event folding: rebuilds game state from the event history.
"""

from typing import Iterable

from .errors import InvalidStateAccessError
from .messages import CardPlayed, Event, GameStarted, PlayerFailed
from .models import Direction, is_kickback
from .rules import RuleConfig, default_rules
from .state import EMPTY_STATE, PlayedState, State


def apply(state: State, event: Event, rules: RuleConfig = default_rules) -> State:
    """
    Fold one event into `state`, returning the next state.

    Args:
        state: Current state
        event: Event to fold in
        rules: Rule configuration (decides the first seat)

    Returns:
        The new state. A PlayerFailed event returns `state` itself.

    Raises:
        InvalidStateAccessError: CardPlayed on a game that never started
    """
    if isinstance(event, GameStarted):
        return PlayedState(
            player_count=event.player_count,
            next_player=rules.first_player,
            last_card=event.first_card,
            direction=Direction.CLOCKWISE
        )

    if isinstance(event, CardPlayed):
        if not isinstance(state, PlayedState):
            raise InvalidStateAccessError(
                f"CardPlayed for game {event.game_id} before GameStarted"
            )
        direction = state.direction.opposite() if is_kickback(event.card) else state.direction
        return PlayedState(
            player_count=state.player_count,
            next_player=direction.next_player(state.next_player, state.player_count),
            last_card=event.card,
            direction=direction
        )

    if isinstance(event, PlayerFailed):
        return state

    raise TypeError(f"Unknown event type: {type(event).__name__}")


def evolve(state: State, events: Iterable[Event], rules: RuleConfig = default_rules) -> State:
    """Fold `events` into `state` in order."""
    for event in events:
        state = apply(state, event, rules)
    return state


def replay(events: Iterable[Event], rules: RuleConfig = default_rules) -> State:
    """Rebuild the state of a game from its full event history."""
    return evolve(EMPTY_STATE, events, rules)
