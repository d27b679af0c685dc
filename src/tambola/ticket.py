"""Ticket grid and its derived number sets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tambola.config import GameConfig

ROW_COUNT = 3
COLUMN_COUNT = 9
EMPTY_CELL = "_"

Cell = int | str | None


class InvalidTicketError(ValueError):
    """Raised when a ticket grid does not have the expected shape."""


def as_number(value: object) -> int:
    """Return ``value`` as an int without truncating fractional values."""
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Not a whole number: {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"Not a number: {value!r}")


def _row_numbers(index: int, row: Sequence[Cell], empty_marker: str) -> frozenset[int]:
    numbers: set[int] = set()
    for cell in row:
        if cell is None or cell == empty_marker:
            continue
        try:
            numbers.add(as_number(cell))
        except ValueError as exc:
            raise InvalidTicketError(f"Row {index} has a non-numeric cell {cell!r}.") from exc
    return frozenset(numbers)


class Ticket:
    """Immutable 3-row ticket exposing per-row and whole-ticket number sets.

    Empty cells are either ``None`` or the configured empty marker. Only the
    row count is checked unless ``strict`` is set, in which case every row
    must also be exactly nine cells wide.
    """

    __slots__ = ("_grid", "_rows", "_all_rows")

    def __init__(
        self,
        grid: Sequence[Sequence[Cell]],
        *,
        empty_marker: str = EMPTY_CELL,
        strict: bool = False,
    ) -> None:
        if len(grid) != ROW_COUNT:
            raise InvalidTicketError(
                f"Ticket must have exactly {ROW_COUNT} rows, got {len(grid)}."
            )
        if strict:
            for index, row in enumerate(grid):
                if len(row) != COLUMN_COUNT:
                    raise InvalidTicketError(
                        f"Row {index} must have {COLUMN_COUNT} cells, got {len(row)}."
                    )

        self._grid: tuple[tuple[Cell, ...], ...] = tuple(tuple(row) for row in grid)
        self._rows: tuple[frozenset[int], ...] = tuple(
            _row_numbers(index, row, empty_marker) for index, row in enumerate(self._grid)
        )
        self._all_rows: frozenset[int] = frozenset().union(*self._rows)

    @classmethod
    def from_config(cls, grid: Sequence[Sequence[Cell]], config: GameConfig) -> Ticket:
        """Build a ticket using the marker and shape rules of ``config``."""
        return cls(
            grid,
            empty_marker=config.empty_marker,
            strict=config.strict_ticket_shape,
        )

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        return self._grid

    @property
    def rows(self) -> tuple[frozenset[int], ...]:
        return self._rows

    @property
    def top_row(self) -> frozenset[int]:
        return self._rows[0]

    @property
    def middle_row(self) -> frozenset[int]:
        return self._rows[1]

    @property
    def bottom_row(self) -> frozenset[int]:
        return self._rows[2]

    @property
    def all_rows(self) -> frozenset[int]:
        return self._all_rows

    def __repr__(self) -> str:
        rows = ", ".join(str(sorted(row)) for row in self._rows)
        return f"Ticket({rows})"
