"""Game models and data structures"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

GameId = int
PlayerId = int  # 0-based seat index


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"


@dataclass(frozen=True)
class DigitCard:
    digit: int
    color: Color


@dataclass(frozen=True)
class KickBackCard:
    """Reverses the direction of play when played."""
    color: Color


Card = Union[DigitCard, KickBackCard]


class Direction(str, Enum):
    """
    Direction of play around the table.

    Seats are numbered clockwise, so a clockwise turn moves to the next
    seat number and a counter-clockwise turn moves to the previous one.
    """
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    def next_player(self, player: PlayerId, player_count: int) -> PlayerId:
        """Seat that plays after `player` when moving in this direction."""
        return _NEXT_PLAYER[self](player, player_count)

    def opposite(self) -> 'Direction':
        return _OPPOSITE[self]


def _clockwise_next(player: PlayerId, player_count: int) -> PlayerId:
    return (player + 1) % player_count


def _counter_clockwise_next(player: PlayerId, player_count: int) -> PlayerId:
    # Seat 0 wraps to the last seat, never to -1
    return ((player - 1) + player_count) % player_count


_NEXT_PLAYER: Dict[Direction, Callable[[PlayerId, int], PlayerId]] = {
    Direction.CLOCKWISE: _clockwise_next,
    Direction.COUNTER_CLOCKWISE: _counter_clockwise_next,
}

_OPPOSITE: Dict[Direction, Direction] = {
    Direction.CLOCKWISE: Direction.COUNTER_CLOCKWISE,
    Direction.COUNTER_CLOCKWISE: Direction.CLOCKWISE,
}


def is_kickback(card: Card) -> bool:
    return isinstance(card, KickBackCard)


def describe_card(card: Card) -> str:
    """Short label for a card, e.g. '9 red' or 'kickback yellow'."""
    if isinstance(card, DigitCard):
        return f"{card.digit} {card.color.value}"
    if isinstance(card, KickBackCard):
        return f"kickback {card.color.value}"
    raise TypeError(f"Unknown card type: {type(card).__name__}")
