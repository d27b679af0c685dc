"""Tambola claim evaluation engine."""

from .config import ConfigLoadError, GameConfig, load_config
from .engine import ClaimCategory, Verdict
from .game import Game, GameState, UnknownClaimCategoryError
from .ticket import InvalidTicketError, Ticket

__all__ = [
    "ClaimCategory",
    "ConfigLoadError",
    "Game",
    "GameConfig",
    "GameState",
    "InvalidTicketError",
    "Ticket",
    "UnknownClaimCategoryError",
    "Verdict",
    "load_config",
]
