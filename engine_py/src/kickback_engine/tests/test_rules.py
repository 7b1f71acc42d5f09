"""
Tests for rule configuration and error helpers.
"""

import pytest
from pydantic import ValidationError

from kickback_engine.errors import (
    ALREADY_STARTED, AlreadyStartedError, GameError, InsufficientPlayersError, raise_error,
)
from kickback_engine.rules import RuleConfig, create_rules, default_rules


def test_default_rules():
    assert default_rules.min_players == 3
    assert default_rules.first_player == 0
    assert not default_rules.validate_player_count(2)
    assert default_rules.validate_player_count(3)


def test_create_rules_overrides():
    rules = create_rules(min_players=5, first_player=2)
    assert rules.min_players == 5
    assert rules.first_player == 2
    # Defaults are untouched
    assert default_rules.min_players == 3


def test_min_players_cannot_go_below_three():
    with pytest.raises(ValidationError):
        RuleConfig(min_players=2)


def test_first_player_must_be_a_seat():
    with pytest.raises(ValidationError):
        RuleConfig(first_player=3)
    with pytest.raises(ValidationError):
        RuleConfig(first_player=-1)


def test_game_error_message():
    error = AlreadyStartedError("Game 7 already started")
    assert isinstance(error, GameError)
    assert error.code == ALREADY_STARTED
    assert str(error) == "[ALREADY_STARTED] Game 7 already started"


def test_raise_error_picks_subclass():
    with pytest.raises(InsufficientPlayersError):
        raise_error("INSUFFICIENT_PLAYERS", "Need more players")
    with pytest.raises(GameError) as exc_info:
        raise_error("SOMETHING_ELSE", "Unknown")
    assert exc_info.value.code == "SOMETHING_ELSE"
