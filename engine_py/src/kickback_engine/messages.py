"""Commands accepted by the decider and the events it produces"""

from dataclasses import dataclass
from typing import Union

from .models import Card, GameId, PlayerId


# Commands
@dataclass(frozen=True)
class StartGame:
    game_id: GameId
    player_count: int
    first_card: Card


@dataclass(frozen=True)
class PlayCard:
    game_id: GameId
    player_id: PlayerId
    card: Card


Command = Union[StartGame, PlayCard]


# Events
@dataclass(frozen=True)
class GameStarted:
    game_id: GameId
    player_count: int
    first_card: Card


@dataclass(frozen=True)
class CardPlayed:
    game_id: GameId
    player_id: PlayerId
    card: Card


@dataclass(frozen=True)
class PlayerFailed:
    """A rejected play (wrong turn or illegal card). Replays as a no-op."""
    game_id: GameId
    player_id: PlayerId
    card: Card


Event = Union[GameStarted, CardPlayed, PlayerFailed]
