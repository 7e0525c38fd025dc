"""Transitive availability checks."""

from __future__ import annotations

from booker.hierarchy import Hierarchy
from booker.ledger import BookingLedger


def can_book(hierarchy: Hierarchy, ledger: BookingLedger, resource_id: str, date: str) -> bool:
    """Check whether a resource and everything it contains is free on ``date``.

    The resource's own booking is checked first. Children are then visited in
    hierarchy order (vehicles before nested containers) and the walk stops at
    the first unavailable one. Identifiers missing from the hierarchy are
    leaves, so they are available unless booked directly.

    Args:
        hierarchy: Resource hierarchy to walk.
        ledger: Direct bookings recorded so far.
        resource_id: Resource to check.
        date: Opaque date token.

    Returns:
        True if neither the resource nor any descendant is booked on ``date``.
    """
    if ledger.is_directly_booked(resource_id, date):
        return False
    return all(
        can_book(hierarchy, ledger, child, date)
        for child in hierarchy.children_of(resource_id)
    )
