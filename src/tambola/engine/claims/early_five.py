"""Early-five claim."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from tambola.ticket import Ticket

from .base import BaseClaim, ClaimCategory, Verdict

if TYPE_CHECKING:
    from tambola.config import GameConfig

EARLY_FIVE_MATCHES = 5


class EarlyFiveClaim(BaseClaim):
    """Accept when exactly ``required_matches`` ticket numbers have been called.

    The latest announcement must be one of them, so the claim is only valid in
    the round that produced the last match. Both fewer and more matches reject.
    """

    category = ClaimCategory.EARLY_FIVE

    def __init__(
        self,
        numbers_announced: Iterable[int],
        ticket: Ticket,
        required_matches: int = EARLY_FIVE_MATCHES,
    ) -> None:
        if required_matches <= 0:
            raise ValueError("required_matches must be greater than 0.")
        super().__init__(numbers_announced, ticket)
        self.required_matches = required_matches

    @classmethod
    def from_config(
        cls,
        numbers_announced: Iterable[int],
        ticket: Ticket,
        config: GameConfig | None = None,
    ) -> EarlyFiveClaim:
        if config is None:
            return cls(numbers_announced, ticket)
        return cls(numbers_announced, ticket, required_matches=config.early_five_count)

    def target_numbers(self) -> frozenset[int]:
        return self.ticket.all_rows

    def evaluate(self) -> Verdict:
        checks = self.checks()
        return Verdict.of(
            checks.has_last_announced_number()
            and checks.matched_first_n_numbers(self.required_matches)
        )
