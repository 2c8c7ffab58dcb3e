"""Configuration management."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from five_crowns.models.card import Rank


def parse_rank(text: str) -> Rank | None:
    """Parse a rank token ("6", "J") or name ("SIX", "jack").

    Returns:
        Rank, or None if the text names no rank.
    """
    rank = Rank.try_from(text)
    if rank is None:
        rank = Rank.__members__.get(text.strip().upper())
    return rank


class RulesConfig(BaseModel):
    """Rules configuration."""

    # Wild rank used when no round or wild rank is given on the command line
    wild_rank: Rank = Rank.THREE

    @field_validator("wild_rank", mode="before")
    @classmethod
    def parse_wild_rank(cls, value: Any) -> Any:
        """Accept rank tokens ("6", "J") and names ("SIX", "jack")."""
        if not isinstance(value, str):
            return value
        rank = parse_rank(value)
        if rank is None:
            raise ValueError(f"Unknown rank: {value!r}")
        return rank


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_scores: bool = False


class CheckLogConfig(BaseModel):
    """Configuration for the JSONL check log."""

    enabled: bool = False
    output_path: str = "checks.jsonl"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    check_log: CheckLogConfig = CheckLogConfig()


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
