"""
Command validation: turns a command into the event that results from it.
"""

from typing import Optional

from .errors import (
    AlreadyStartedError,
    GameError,
    InsufficientPlayersError,
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
from .rules import RuleConfig, default_rules
from .state import State
from .validate import check_play


class DecisionResult:
    """Result of deciding a command without raising."""

    def __init__(
        self,
        valid: bool,
        event: Optional[Event] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        state: Optional[State] = None
    ):
        self.valid = valid
        self.event = event
        self.error_code = error_code
        self.error_message = error_message
        self.state = state

    @classmethod
    def success(cls, event: Event, state: Optional[State] = None) -> 'DecisionResult':
        """Create a successful result. PlayerFailed events are successes too."""
        return cls(valid=True, event=event, state=state)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'DecisionResult':
        """Create a result for a command that must not be accepted."""
        return cls(valid=False, error_code=error_code, error_message=error_message)

    def __repr__(self) -> str:
        if self.valid:
            return f"DecisionResult.success({self.event!r})"
        return f"DecisionResult.error({self.error_code!r}, {self.error_message!r})"


def decide(state: State, command: Command, rules: RuleConfig = default_rules) -> Event:
    """
    Decide what happens when `command` is applied to `state`.

    Args:
        state: State folded from every earlier event of the game
        command: Command to validate
        rules: Rule configuration

    Returns:
        GameStarted or CardPlayed when the command is accepted, PlayerFailed
        when a play is rejected for turn order or card legality

    Raises:
        AlreadyStartedError: StartGame on a game that is running
        InsufficientPlayersError: StartGame with too few players
        InvalidStateAccessError: PlayCard before the game has started
    """
    if isinstance(command, StartGame):
        if state.is_started:
            raise AlreadyStartedError(f"Game {command.game_id} already started")
        if not rules.validate_player_count(command.player_count):
            raise InsufficientPlayersError(
                f"Need at least {rules.min_players} players, got {command.player_count}"
            )
        return GameStarted(command.game_id, command.player_count, command.first_card)

    if isinstance(command, PlayCard):
        if check_play(state, command) is not None:
            return PlayerFailed(command.game_id, command.player_id, command.card)
        return CardPlayed(command.game_id, command.player_id, command.card)

    raise TypeError(f"Unknown command type: {type(command).__name__}")


def try_decide(state: State, command: Command, rules: RuleConfig = default_rules) -> DecisionResult:
    """Like decide, but reports caller errors as a DecisionResult instead of raising."""
    try:
        return DecisionResult.success(decide(state, command, rules))
    except GameError as e:
        return DecisionResult.error(e.code, e.message)
