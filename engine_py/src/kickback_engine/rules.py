"""
Game rule configuration and validation.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import FIRST_PLAYER, MIN_PLAYERS


class RuleConfig(BaseModel):
    """Configuration for game rules."""

    model_config = {"frozen": True}

    min_players: int = Field(
        default=MIN_PLAYERS,
        ge=MIN_PLAYERS,
        description="Minimum number of players required to start"
    )
    first_player: int = Field(
        default=FIRST_PLAYER,
        ge=0,
        description="Seat that plays first once the game has started"
    )

    @field_validator('first_player')
    @classmethod
    def validate_first_player(cls, v, info):
        """Validate the first seat exists at every allowed table size."""
        min_players = info.data.get('min_players', MIN_PLAYERS)
        if v >= min_players:
            raise ValueError(f'first_player ({v}) must be < min_players ({min_players})')
        return v

    def validate_player_count(self, player_count: int) -> bool:
        """Check if a player count is enough to start a game."""
        return player_count >= self.min_players


# Default configuration instance
default_rules = RuleConfig()


def create_rules(**overrides) -> RuleConfig:
    """Create a RuleConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return RuleConfig(**config_dict)
