"""
Legality checks for card plays.
"""

from typing import Optional

from .errors import CARD_NOT_LEGAL, NOT_YOUR_TURN
from .messages import PlayCard
from .models import Card, DigitCard, KickBackCard
from .state import State


def card_legal(last_card: Card, new_card: Card) -> bool:
    """
    Check whether `new_card` may be played on top of `last_card`.

    Args:
        last_card: Card currently on top of the pile
        new_card: Card being played

    Returns:
        True if the colours match, or both cards are kickbacks, or both
        are digit cards with the same digit
    """
    # Same colour is always legal, whatever the kinds
    if last_card.color == new_card.color:
        return True

    if isinstance(last_card, KickBackCard):
        return isinstance(new_card, KickBackCard)

    if isinstance(last_card, DigitCard) and isinstance(new_card, DigitCard):
        return new_card.digit == last_card.digit

    return False


def check_play(state: State, command: PlayCard) -> Optional[str]:
    """
    Return the rejection code for a play, or None if the play is accepted.

    Turn order is checked before card legality.
    """
    if command.player_id != state.next_player:
        return NOT_YOUR_TURN
    if not card_legal(state.last_card, command.card):
        return CARD_NOT_LEGAL
    return None
