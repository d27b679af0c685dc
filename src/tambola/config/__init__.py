"""Game configuration loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import GameConfig

__all__ = ["ConfigLoadError", "GameConfig", "load_config"]
