"""Top-down booking of a resource subtree."""

from __future__ import annotations

from booker.hierarchy import Hierarchy
from booker.ledger import BookingLedger


def commit(hierarchy: Hierarchy, ledger: BookingLedger, resource_id: str, date: str) -> None:
    """Record a direct booking for the resource and every descendant.

    The parent is recorded before its children, children in hierarchy order.
    No availability check happens here; callers run ``can_book`` first.
    """
    ledger.record_booking(resource_id, date)
    for child in hierarchy.children_of(resource_id):
        commit(hierarchy, ledger, child, date)
