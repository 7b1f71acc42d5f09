"""Game constants"""

# Seats
MIN_PLAYERS = 3
FIRST_PLAYER = 0

# Card kinds as rendered in messages
CARD_DIGIT = "digit"
CARD_KICKBACK = "kickback"

# Message types
COMMAND_START_GAME = "start_game"
COMMAND_PLAY_CARD = "play_card"
EVENT_GAME_STARTED = "game_started"
EVENT_CARD_PLAYED = "card_played"
EVENT_PLAYER_FAILED = "player_failed"
