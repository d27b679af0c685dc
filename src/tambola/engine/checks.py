"""Predicates over an announcement history and a target number set."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Checks:
    """Reusable tests of a target set against announced numbers.

    ``numbers_announced`` is kept in announcement order, last element being
    the most recent announcement.
    """

    numbers_announced: tuple[int, ...]
    target: frozenset[int]

    @classmethod
    def over(cls, numbers_announced: Iterable[int], target: Iterable[int]) -> Checks:
        """Build checks from arbitrary iterables."""
        return cls(tuple(numbers_announced), frozenset(target))

    def has_last_announced_number(self) -> bool:
        """Return whether the most recent announcement is in the target."""
        if not self.numbers_announced:
            return False
        return self.numbers_announced[-1] in self.target

    def has_all_numbers(self) -> bool:
        """Return whether every target number has been announced."""
        return self.target.issubset(self.numbers_announced)

    def matched_first_n_numbers(self, n: int) -> bool:
        """Return whether exactly ``n`` announcements hit the target."""
        matched = sum(1 for number in self.numbers_announced if number in self.target)
        return matched == n
