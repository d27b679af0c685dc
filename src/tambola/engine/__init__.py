"""Claim evaluation engine."""

from .checks import Checks
from .claims import (
    CLAIM_REGISTRY,
    BaseClaim,
    BottomRowClaim,
    ClaimCategory,
    EarlyFiveClaim,
    FullHouseClaim,
    MiddleRowClaim,
    TopRowClaim,
    Verdict,
    build_claim,
)

__all__ = [
    "BaseClaim",
    "BottomRowClaim",
    "CLAIM_REGISTRY",
    "Checks",
    "ClaimCategory",
    "EarlyFiveClaim",
    "FullHouseClaim",
    "MiddleRowClaim",
    "TopRowClaim",
    "Verdict",
    "build_claim",
]
