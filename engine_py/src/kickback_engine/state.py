"""
Game state derived from the event history.

State is never stored; it is rebuilt by folding events with
`applier.apply`, starting from `EMPTY_STATE`.
"""

from dataclasses import dataclass
from typing import Union

from .errors import InvalidStateAccessError
from .models import Card, Direction, PlayerId


@dataclass(frozen=True)
class EmptyState:
    """State of a game before its GameStarted event."""

    @property
    def is_started(self) -> bool:
        return False

    @property
    def next_player(self) -> PlayerId:
        raise InvalidStateAccessError("next_player is undefined before the game starts")

    @property
    def last_card(self) -> Card:
        raise InvalidStateAccessError("last_card is undefined before the game starts")

    @property
    def direction(self) -> Direction:
        raise InvalidStateAccessError("direction is undefined before the game starts")


@dataclass(frozen=True)
class PlayedState:
    """
    State of a running game.

    Attributes:
        player_count: Number of seats, fixed at game start (always >= 3)
        next_player: Seat expected to play next, in [0, player_count)
        last_card: Card on top of the discard pile
        direction: Current direction of play
    """
    player_count: int
    next_player: PlayerId
    last_card: Card
    direction: Direction

    @property
    def is_started(self) -> bool:
        return True


State = Union[EmptyState, PlayedState]

EMPTY_STATE = EmptyState()
