"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from queens_garden.models.position import Direction


class RulesConfig(BaseModel):
    """Game rules.

    Injected into the engine at construction and not changed during a game.
    """

    # Starting conditions
    starting_health: int = Field(default=20, gt=0)

    # Deck
    removed_ranks: list[int] = [2, 3, 4]
    number_ranks: list[int] = [5, 6, 7, 8, 9]

    # Card behaviours
    ace_value: int = 1
    jack_adjacent_damage: int = Field(default=4, ge=0)
    max_party_size: int = Field(default=3, ge=1)
    total_kings_to_win: int = Field(default=4, ge=1, le=4)

    # Board
    initial_reveal_directions: list[Direction] = [
        Direction.NORTH,
        Direction.SOUTH,
        Direction.EAST,
        Direction.WEST,
    ]
    reveal_adjacent_on_move: bool = True

    @field_validator("number_ranks")
    @classmethod
    def _check_number_ranks(cls, value: list[int]) -> list[int]:
        for rank in value:
            if not 5 <= rank <= 9:
                raise ValueError(f"Number rank {rank} is outside 5-9")
        return value

    def deck_number_ranks(self) -> list[int]:
        """Number ranks that go into the deck."""
        return [r for r in self.number_ranks if r not in self.removed_ranks]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = Field(default_factory=RulesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game_log: GameLogConfig = Field(default_factory=GameLogConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
