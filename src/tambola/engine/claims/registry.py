"""Category to evaluator dispatch table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from tambola.ticket import Ticket

from .base import BaseClaim, ClaimCategory
from .early_five import EarlyFiveClaim
from .row_claims import BottomRowClaim, FullHouseClaim, MiddleRowClaim, TopRowClaim

if TYPE_CHECKING:
    from tambola.config import GameConfig

CLAIM_REGISTRY: Mapping[ClaimCategory, type[BaseClaim]] = MappingProxyType(
    {
        claim_cls.category: claim_cls
        for claim_cls in (
            TopRowClaim,
            MiddleRowClaim,
            BottomRowClaim,
            FullHouseClaim,
            EarlyFiveClaim,
        )
    }
)


def build_claim(
    category: ClaimCategory,
    numbers_announced: Iterable[int],
    ticket: Ticket,
    config: GameConfig | None = None,
) -> BaseClaim:
    """Instantiate the evaluator registered for ``category``."""
    return CLAIM_REGISTRY[category].from_config(numbers_announced, ticket, config)
