"""
Dictionary rendering of cards, commands, events and state.
"""

from typing import Any, Dict

import orjson

from .constants import (
    CARD_DIGIT,
    CARD_KICKBACK,
    COMMAND_PLAY_CARD,
    COMMAND_START_GAME,
    EVENT_CARD_PLAYED,
    EVENT_GAME_STARTED,
    EVENT_PLAYER_FAILED,
)
from .messages import (
    CardPlayed,
    Command,
    Event,
    GameStarted,
    PlayCard,
    PlayerFailed,
    StartGame,
)
from .models import Card, DigitCard, KickBackCard
from .state import PlayedState, State


def serialize_card(card: Card) -> Dict[str, Any]:
    if isinstance(card, DigitCard):
        return {"kind": CARD_DIGIT, "color": card.color.value, "digit": card.digit}
    if isinstance(card, KickBackCard):
        return {"kind": CARD_KICKBACK, "color": card.color.value}
    raise TypeError(f"Unknown card type: {type(card).__name__}")


def serialize_command(command: Command) -> Dict[str, Any]:
    """Serialize a command in the shape `schemas.parse_command` accepts."""
    if isinstance(command, StartGame):
        return {
            "type": COMMAND_START_GAME,
            "game_id": command.game_id,
            "player_count": command.player_count,
            "first_card": serialize_card(command.first_card)
        }
    if isinstance(command, PlayCard):
        return {
            "type": COMMAND_PLAY_CARD,
            "game_id": command.game_id,
            "player_id": command.player_id,
            "card": serialize_card(command.card)
        }
    raise TypeError(f"Unknown command type: {type(command).__name__}")


def serialize_event(event: Event) -> Dict[str, Any]:
    """Serialize an event in the shape `schemas.parse_event` accepts."""
    if isinstance(event, GameStarted):
        return {
            "type": EVENT_GAME_STARTED,
            "game_id": event.game_id,
            "player_count": event.player_count,
            "first_card": serialize_card(event.first_card)
        }

    event_types = {
        CardPlayed: EVENT_CARD_PLAYED,
        PlayerFailed: EVENT_PLAYER_FAILED,
    }
    event_type = event_types.get(type(event))
    if event_type is None:
        raise TypeError(f"Unknown event type: {type(event).__name__}")
    return {
        "type": event_type,
        "game_id": event.game_id,
        "player_id": event.player_id,
        "card": serialize_card(event.card)
    }


def serialize_state(state: State) -> Dict[str, Any]:
    """
    Serialize game state for clients.

    A game that has not started renders as {"started": False} only.
    """
    if not isinstance(state, PlayedState):
        return {"started": False}
    return {
        "started": True,
        "player_count": state.player_count,
        "next_player": state.next_player,
        "last_card": serialize_card(state.last_card),
        "direction": state.direction.value
    }


def dumps_event(event: Event) -> bytes:
    """Serialize an event to JSON bytes."""
    return orjson.dumps(serialize_event(event))
