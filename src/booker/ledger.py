"""In-memory record of direct bookings."""

from __future__ import annotations


class BookingLedger:
    """Dates on which each resource itself has been booked.

    Entries only ever grow. A resource's entry says nothing about the
    resources it contains; those have entries of their own.
    """

    def __init__(self) -> None:
        self._bookings: dict[str, list[str]] = {}

    def is_directly_booked(self, resource_id: str, date: str) -> bool:
        return date in self._bookings.get(resource_id, ())

    def record_booking(self, resource_id: str, date: str) -> None:
        """Append ``date`` to the resource's entry. Duplicates are kept."""
        self._bookings.setdefault(resource_id, []).append(date)

    def booked_dates(self, resource_id: str) -> tuple[str, ...]:
        return tuple(self._bookings.get(resource_id, ()))

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._bookings

    def __len__(self) -> int:
        return len(self._bookings)
