"""Base types for claim evaluators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

from tambola.engine.checks import Checks
from tambola.ticket import Ticket

if TYPE_CHECKING:
    from tambola.config import GameConfig


class ClaimCategory(str, Enum):
    """Winning patterns a player can claim."""

    TOP_ROW = "TOP_ROW"
    MIDDLE_ROW = "MIDDLE_ROW"
    BOTTOM_ROW = "BOTTOM_ROW"
    FULL_HOUSE = "FULL_HOUSE"
    EARLY_FIVE = "EARLY_FIVE"


class Verdict(str, Enum):
    """Outcome of a claim."""

    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"

    @classmethod
    def of(cls, accepted: bool) -> Verdict:
        return cls.ACCEPTED if accepted else cls.REJECTED


class BaseClaim(ABC):
    """Evaluator bound to a history snapshot and a ticket."""

    category: ClaimCategory

    def __init__(self, numbers_announced: Iterable[int], ticket: Ticket) -> None:
        self.numbers_announced: tuple[int, ...] = tuple(numbers_announced)
        self.ticket = ticket

    @classmethod
    def from_config(
        cls,
        numbers_announced: Iterable[int],
        ticket: Ticket,
        config: GameConfig | None = None,
    ) -> BaseClaim:
        """Build the evaluator, applying any rule settings from ``config``."""
        return cls(numbers_announced, ticket)

    @abstractmethod
    def target_numbers(self) -> frozenset[int]:
        """Return the ticket numbers this claim is judged on."""

    @abstractmethod
    def evaluate(self) -> Verdict:
        """Judge the claim against the bound history."""

    def checks(self) -> Checks:
        return Checks(self.numbers_announced, self.target_numbers())


class CoverageClaim(BaseClaim):
    """Accept when the target is fully announced and the last call completed it."""

    def evaluate(self) -> Verdict:
        checks = self.checks()
        return Verdict.of(checks.has_last_announced_number() and checks.has_all_numbers())
