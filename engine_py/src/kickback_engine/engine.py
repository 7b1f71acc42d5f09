"""Replay-then-decide entry point for drivers that own the event log"""

import logging
from typing import Iterable

from .applier import apply, replay
from .decider import DecisionResult, try_decide
from .errors import GameError
from .messages import Command, Event, PlayerFailed
from .models import describe_card
from .rules import RuleConfig, default_rules

logger = logging.getLogger(__name__)


def execute(history: Iterable[Event], command: Command, rules: RuleConfig = default_rules) -> DecisionResult:
    """
    Rebuild a game's state from `history` and decide `command` against it.

    Nothing is persisted: on success the caller appends `result.event` to
    its log. `result.state` is the state after that event.

    Args:
        history: Every accepted event of the game, oldest first
        command: Command to decide
        rules: Rule configuration

    Returns:
        DecisionResult carrying the event and the resulting state, or the
        error code and message when the command is a caller error or the
        history cannot be replayed
    """
    try:
        state = replay(history, rules)
    except GameError as e:
        result = DecisionResult.error(e.code, e.message)
        logger.info(f"Cannot replay history for game {command.game_id}: [{e.code}] {e.message}")
        return result

    result = try_decide(state, command, rules)

    if not result.valid:
        logger.info(f"Rejected command for game {command.game_id}: [{result.error_code}] {result.error_message}")
        return result

    event = result.event
    if isinstance(event, PlayerFailed):
        logger.debug(f"Player {event.player_id} failed to play {describe_card(event.card)} in game {event.game_id}")
    else:
        logger.debug(f"Game {event.game_id}: {type(event).__name__}")

    result.state = apply(state, event, rules)
    return result
