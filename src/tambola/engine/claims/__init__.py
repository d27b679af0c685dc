"""Claim categories, verdicts and their evaluators."""

from .base import BaseClaim, ClaimCategory, CoverageClaim, Verdict
from .early_five import EARLY_FIVE_MATCHES, EarlyFiveClaim
from .registry import CLAIM_REGISTRY, build_claim
from .row_claims import BottomRowClaim, FullHouseClaim, MiddleRowClaim, TopRowClaim

__all__ = [
    "BaseClaim",
    "BottomRowClaim",
    "CLAIM_REGISTRY",
    "ClaimCategory",
    "CoverageClaim",
    "EARLY_FIVE_MATCHES",
    "EarlyFiveClaim",
    "FullHouseClaim",
    "MiddleRowClaim",
    "TopRowClaim",
    "Verdict",
    "build_claim",
]
