# engine_py/src/kickback_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


# Specific error codes
ALREADY_STARTED = "ALREADY_STARTED"
INSUFFICIENT_PLAYERS = "INSUFFICIENT_PLAYERS"
INVALID_STATE_ACCESS = "INVALID_STATE_ACCESS"

# Rejection codes for plays that end up as PlayerFailed events (never raised)
NOT_YOUR_TURN = "NOT_YOUR_TURN"
CARD_NOT_LEGAL = "CARD_NOT_LEGAL"


class AlreadyStartedError(GameError):
    """A StartGame command reached a game that is already running."""
    def __init__(self, message: str = "Game already started"):
        super().__init__(ALREADY_STARTED, message)


class InsufficientPlayersError(GameError):
    """A StartGame command asked for fewer seats than the rules allow."""
    def __init__(self, message: str = "Need more players"):
        super().__init__(INSUFFICIENT_PLAYERS, message)


class InvalidStateAccessError(GameError):
    """Game-only data was read from a state with no game in it."""
    def __init__(self, message: str = "No game has been started"):
        super().__init__(INVALID_STATE_ACCESS, message)


_ERRORS_BY_CODE = {
    ALREADY_STARTED: AlreadyStartedError,
    INSUFFICIENT_PLAYERS: InsufficientPlayersError,
    INVALID_STATE_ACCESS: InvalidStateAccessError,
}


# Helper function to raise common errors
def raise_error(code: str, message: str):
    """Raise the GameError subclass registered for `code`, or a plain GameError."""
    error_class = _ERRORS_BY_CODE.get(code)
    if error_class is None:
        raise GameError(code, message)
    raise error_class(message)
