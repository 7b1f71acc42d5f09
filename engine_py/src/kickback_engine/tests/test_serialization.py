"""
Tests for message parsing and state serialization.
"""

import orjson
import pytest
from kickback_engine.applier import replay
from kickback_engine.decider import decide
from kickback_engine.errors import InsufficientPlayersError
from kickback_engine.messages import CardPlayed, GameStarted, PlayCard, PlayerFailed, StartGame
from kickback_engine.models import Color, DigitCard, KickBackCard
from kickback_engine.schemas import parse_command, parse_event
from kickback_engine.serialization import (
    dumps_event, serialize_command, serialize_event, serialize_state,
)
from kickback_engine.state import EMPTY_STATE


def test_parse_start_game():
    command = parse_command({
        "type": "start_game",
        "game_id": 1,
        "player_count": 4,
        "first_card": {"kind": "digit", "color": "red", "digit": 3}
    })
    assert command == StartGame(1, 4, DigitCard(3, Color.RED))


def test_parse_play_card_kickback():
    command = parse_command({
        "type": "play_card",
        "game_id": 1,
        "player_id": 2,
        "card": {"kind": "kickback", "color": "yellow"}
    })
    assert command == PlayCard(1, 2, KickBackCard(Color.YELLOW))


def test_parse_command_errors():
    with pytest.raises(ValueError, match="Missing"):
        parse_command({"game_id": 1})
    with pytest.raises(ValueError, match="Invalid message type"):
        parse_command({"type": "draw_card", "game_id": 1})
    # Events are not commands
    with pytest.raises(ValueError):
        parse_command({"type": "card_played", "game_id": 1})


@pytest.mark.parametrize("card", [
    {"kind": "digit", "color": "red"},
    {"kind": "kickback", "color": "red", "digit": 4},
    {"kind": "digit", "color": "purple", "digit": 4},
    {"kind": "skip", "color": "red"},
])
def test_parse_bad_card(card):
    with pytest.raises(ValueError, match="Invalid message data"):
        parse_command({"type": "play_card", "game_id": 1, "player_id": 0, "card": card})


def test_serialize_event():
    event = PlayerFailed(1, 2, DigitCard(3, Color.YELLOW))
    assert serialize_event(event) == {
        "type": "player_failed",
        "game_id": 1,
        "player_id": 2,
        "card": {"kind": "digit", "color": "yellow", "digit": 3}
    }


def test_serialized_messages_parse_back():
    history = [
        GameStarted(1, 4, DigitCard(3, Color.RED)),
        CardPlayed(1, 0, KickBackCard(Color.RED)),
        PlayerFailed(1, 1, DigitCard(5, Color.GREEN)),
    ]
    assert [parse_event(serialize_event(event)) for event in history] == history

    command = PlayCard(1, 3, DigitCard(9, Color.BLUE))
    assert parse_command(serialize_command(command)) == command


def test_dumps_event():
    data = orjson.loads(dumps_event(CardPlayed(1, 0, KickBackCard(Color.RED))))
    assert data == {
        "type": "card_played",
        "game_id": 1,
        "player_id": 0,
        "card": {"kind": "kickback", "color": "red"}
    }


def test_serialize_empty_state():
    assert serialize_state(EMPTY_STATE) == {"started": False}


def test_serialize_played_state():
    state = replay([
        GameStarted(1, 4, DigitCard(3, Color.RED)),
        CardPlayed(1, 0, KickBackCard(Color.RED)),
    ])
    assert serialize_state(state) == {
        "started": True,
        "player_count": 4,
        "next_player": 3,
        "last_card": {"kind": "kickback", "color": "red"},
        "direction": "counter_clockwise"
    }


@pytest.mark.parametrize("player_count", [0, 1, 2])
def test_parse_game_started_needs_three_players(player_count):
    """Test a stored start event with too few seats is refused before it can be replayed."""
    with pytest.raises(ValueError, match="Invalid message data"):
        parse_event({
            "type": "game_started",
            "game_id": 1,
            "player_count": player_count,
            "first_card": {"kind": "digit", "color": "red", "digit": 3}
        })


def test_parse_card_played_needs_a_seat():
    with pytest.raises(ValueError, match="Invalid message data"):
        parse_event({
            "type": "card_played",
            "game_id": 1,
            "player_id": -1,
            "card": {"kind": "digit", "color": "red", "digit": 3}
        })


def test_parsed_small_start_command_is_left_to_the_decider():
    """Test a start command with two players parses, so the decider reports it."""
    command = parse_command({
        "type": "start_game",
        "game_id": 1,
        "player_count": 2,
        "first_card": {"kind": "digit", "color": "red", "digit": 3}
    })
    with pytest.raises(InsufficientPlayersError):
        decide(EMPTY_STATE, command)
