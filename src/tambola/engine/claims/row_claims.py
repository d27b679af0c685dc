"""Row and full-house claims."""

from __future__ import annotations

from .base import ClaimCategory, CoverageClaim


class TopRowClaim(CoverageClaim):
    category = ClaimCategory.TOP_ROW

    def target_numbers(self) -> frozenset[int]:
        return self.ticket.top_row


class MiddleRowClaim(CoverageClaim):
    category = ClaimCategory.MIDDLE_ROW

    def target_numbers(self) -> frozenset[int]:
        return self.ticket.middle_row


class BottomRowClaim(CoverageClaim):
    category = ClaimCategory.BOTTOM_ROW

    def target_numbers(self) -> frozenset[int]:
        return self.ticket.bottom_row


class FullHouseClaim(CoverageClaim):
    """Every number on the ticket, completed by the latest announcement."""

    category = ClaimCategory.FULL_HOUSE

    def target_numbers(self) -> frozenset[int]:
        return self.ticket.all_rows
