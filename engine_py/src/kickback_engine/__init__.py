"""
Event-sourced core for a kickback card game.
"""

from .applier import apply, evolve, replay
from .decider import DecisionResult, decide, try_decide
from .engine import execute
from .errors import (
    AlreadyStartedError,
    GameError,
    InsufficientPlayersError,
    InvalidStateAccessError,
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
from .models import Card, Color, DigitCard, Direction, KickBackCard
from .rules import RuleConfig, create_rules, default_rules
from .state import EMPTY_STATE, EmptyState, PlayedState, State
from .validate import card_legal

__all__ = [
    "apply", "evolve", "replay",
    "DecisionResult", "decide", "try_decide",
    "execute",
    "AlreadyStartedError", "GameError", "InsufficientPlayersError", "InvalidStateAccessError",
    "CardPlayed", "Command", "Event", "GameStarted", "PlayCard", "PlayerFailed", "StartGame",
    "Card", "Color", "DigitCard", "Direction", "KickBackCard",
    "RuleConfig", "create_rules", "default_rules",
    "EMPTY_STATE", "EmptyState", "PlayedState", "State",
    "card_legal",
]
