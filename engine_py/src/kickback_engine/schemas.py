"""
Message models for commands and events exchanged with drivers.
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from .constants import (
    CARD_DIGIT,
    CARD_KICKBACK,
    COMMAND_PLAY_CARD,
    COMMAND_START_GAME,
    EVENT_CARD_PLAYED,
    EVENT_GAME_STARTED,
    EVENT_PLAYER_FAILED,
    MIN_PLAYERS,
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
from .models import Card, Color, DigitCard, KickBackCard


class CommandType(str, Enum):
    """Inbound command types."""
    START_GAME = COMMAND_START_GAME
    PLAY_CARD = COMMAND_PLAY_CARD


class EventType(str, Enum):
    """Event types."""
    GAME_STARTED = EVENT_GAME_STARTED
    CARD_PLAYED = EVENT_CARD_PLAYED
    PLAYER_FAILED = EVENT_PLAYER_FAILED


class CardModel(BaseModel):
    """A card. `digit` is required for digit cards and absent for kickbacks."""
    kind: Literal["digit", "kickback"]
    color: Color
    digit: Optional[int] = None

    @model_validator(mode='after')
    def validate_digit(self):
        if self.kind == CARD_DIGIT and self.digit is None:
            raise ValueError('digit cards need a digit')
        if self.kind == CARD_KICKBACK and self.digit is not None:
            raise ValueError('kickback cards have no digit')
        return self

    def to_card(self) -> Card:
        if self.kind == CARD_DIGIT:
            return DigitCard(self.digit, self.color)
        return KickBackCard(self.color)


# Inbound command models
class StartGameModel(BaseModel):
    type: CommandType = CommandType.START_GAME
    game_id: int
    player_count: int
    first_card: CardModel

    def to_command(self) -> StartGame:
        return StartGame(self.game_id, self.player_count, self.first_card.to_card())


class PlayCardModel(BaseModel):
    type: CommandType = CommandType.PLAY_CARD
    game_id: int
    player_id: int = Field(..., ge=0)
    card: CardModel

    def to_command(self) -> PlayCard:
        return PlayCard(self.game_id, self.player_id, self.card.to_card())


# Event models
class GameStartedModel(BaseModel):
    type: EventType = EventType.GAME_STARTED
    game_id: int
    player_count: int = Field(..., ge=MIN_PLAYERS)
    first_card: CardModel

    def to_event(self) -> GameStarted:
        return GameStarted(self.game_id, self.player_count, self.first_card.to_card())


class CardPlayedModel(BaseModel):
    type: EventType = EventType.CARD_PLAYED
    game_id: int
    player_id: int = Field(..., ge=0)
    card: CardModel

    def to_event(self) -> CardPlayed:
        return CardPlayed(self.game_id, self.player_id, self.card.to_card())


class PlayerFailedModel(BaseModel):
    type: EventType = EventType.PLAYER_FAILED
    game_id: int
    player_id: int = Field(..., ge=0)
    card: CardModel

    def to_event(self) -> PlayerFailed:
        return PlayerFailed(self.game_id, self.player_id, self.card.to_card())


CommandModel = Union[StartGameModel, PlayCardModel]
EventModel = Union[GameStartedModel, CardPlayedModel, PlayerFailedModel]


def _parse(data: Dict[str, Any], type_enum, model_map: Dict[Any, type]) -> Union[CommandModel, EventModel]:
    message_type = data.get("type")

    if not message_type:
        raise ValueError("Missing message type")

    try:
        message_type = type_enum(message_type)
    except ValueError:
        raise ValueError(f"Invalid message type: {message_type}")

    model_class = model_map[message_type]
    try:
        return model_class(**data)
    except Exception as e:
        raise ValueError(f"Invalid message data: {str(e)}")


def parse_command(data: Dict[str, Any]) -> Command:
    """
    Parse raw command data into a command.

    Args:
        data: Raw command data, e.g. decoded JSON

    Returns:
        StartGame or PlayCard

    Raises:
        ValueError: If the type is missing or unknown, or the data is malformed
    """
    model = _parse(data, CommandType, {
        CommandType.START_GAME: StartGameModel,
        CommandType.PLAY_CARD: PlayCardModel,
    })
    return model.to_command()


def parse_event(data: Dict[str, Any]) -> Event:
    """Parse raw event data into an event. Raises ValueError like parse_command."""
    model = _parse(data, EventType, {
        EventType.GAME_STARTED: GameStartedModel,
        EventType.CARD_PLAYED: CardPlayedModel,
        EventType.PLAYER_FAILED: PlayerFailedModel,
    })
    return model.to_event()
