"""Game state: announcement history and single-use claim bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from tambola.config import GameConfig
from tambola.engine.claims import ClaimCategory, Verdict, build_claim
from tambola.ticket import Ticket, as_number

logger = logging.getLogger(__name__)


class UnknownClaimCategoryError(ValueError):
    """Raised when a claim names a category outside the supported set."""

    def __init__(self, category: object) -> None:
        super().__init__(f"Unknown claim category: {category!r}")
        self.category = category


@dataclass(frozen=True)
class GameState:
    """Serializable snapshot of a game."""

    numbers_announced: tuple[int, ...] = ()
    completed_claims: frozenset[ClaimCategory] = field(default_factory=frozenset)


def resolve_category(category: ClaimCategory | str) -> ClaimCategory:
    """Map a category tag to its enum member."""
    try:
        return ClaimCategory(category)
    except ValueError as exc:
        raise UnknownClaimCategoryError(category) from exc


class Game:
    """Track announced numbers and judge claims against them.

    Each claim category can be accepted once per game. Calls are not
    synchronized; a host sharing one game across threads must serialize
    ``announce_number`` and ``claim`` itself.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self._numbers_announced: list[int] = []
        self._completed_claims: set[ClaimCategory] = set()

    @classmethod
    def from_state(cls, state: GameState, config: GameConfig | None = None) -> Game:
        """Rebuild a game from a previously captured state."""
        game = cls(config)
        game._numbers_announced.extend(as_number(number) for number in state.numbers_announced)
        game._completed_claims.update(resolve_category(tag) for tag in state.completed_claims)
        return game

    @property
    def numbers_announced(self) -> tuple[int, ...]:
        return tuple(self._numbers_announced)

    @property
    def completed_claims(self) -> frozenset[ClaimCategory]:
        return frozenset(self._completed_claims)

    @property
    def last_announced(self) -> int | None:
        return self._numbers_announced[-1] if self._numbers_announced else None

    def announce_number(self, number: int) -> None:
        """Append ``number`` to the announcement history.

        Whole floats and numeric strings are accepted; anything that is not a
        whole number raises ``ValueError``.
        """
        self._numbers_announced.append(as_number(number))
        logger.debug(
            "announced %d (round %d)",
            self._numbers_announced[-1],
            len(self._numbers_announced),
        )

    def announce_numbers(self, numbers: Iterable[int]) -> None:
        for number in numbers:
            self.announce_number(number)

    def is_claimed(self, category: ClaimCategory | str) -> bool:
        return resolve_category(category) in self._completed_claims

    def claim(self, ticket: Ticket, category: ClaimCategory | str) -> Verdict:
        """Judge ``category`` for ``ticket`` against the current history."""
        resolved = resolve_category(category)
        if resolved in self._completed_claims:
            logger.debug("%s already claimed, rejecting", resolved.value)
            return Verdict.REJECTED

        evaluator = build_claim(resolved, self.numbers_announced, ticket, self.config)
        verdict = evaluator.evaluate()
        if verdict is Verdict.ACCEPTED:
            self._completed_claims.add(resolved)
            logger.info(
                "%s accepted on announcement %s", resolved.value, self.last_announced
            )
        else:
            logger.debug("%s rejected for %r", resolved.value, ticket)
        return verdict

    def state(self) -> GameState:
        return GameState(self.numbers_announced, self.completed_claims)
