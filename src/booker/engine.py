"""Query engine dispatching booking commands."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

from booker.exceptions import UnknownCommandError
from booker.executor import commit
from booker.hierarchy import Hierarchy
from booker.ledger import BookingLedger
from booker.resolver import can_book
from booker.schemas import (
    RESULT_FAILED,
    RESULT_NO,
    RESULT_OK,
    RESULT_YES,
    Command,
    Query,
)

logger = logging.getLogger(__name__)


class BookingEngine:
    """Owns the hierarchy and the ledger and answers queries against them.

    Queries are applied in order; a successful ``book`` is visible to every
    later query on the same engine.
    """

    def __init__(self, hierarchy: Hierarchy, ledger: BookingLedger | None = None) -> None:
        self.hierarchy = hierarchy
        self.ledger = ledger if ledger is not None else BookingLedger()
        # Availability check and commit form one transaction.
        self._lock = threading.Lock()
        self._handlers: dict[Command, Callable[[str, str], str]] = {
            Command.BOOK: self.book,
            Command.IS_BOOKED: self.is_booked,
            Command.IS_ALL_BOOKED: self.is_all_booked,
            Command.IS_AVAILABLE: self.is_available,
        }

    def can_book(self, resource_id: str, date: str) -> bool:
        return can_book(self.hierarchy, self.ledger, resource_id, date)

    def book(self, resource_id: str, date: str) -> str:
        """Book the resource and all of its descendants if all are free."""
        with self._lock:
            if not self.can_book(resource_id, date):
                return RESULT_FAILED
            commit(self.hierarchy, self.ledger, resource_id, date)
        return RESULT_OK

    def is_booked(self, resource_id: str, date: str) -> str:
        """Report whether the resource itself has a booking on ``date``."""
        return RESULT_YES if self.ledger.is_directly_booked(resource_id, date) else RESULT_NO

    def is_all_booked(self, resource_id: str, date: str) -> str:
        """Report whether anything in the resource's subtree is booked on ``date``."""
        return RESULT_NO if self.can_book(resource_id, date) else RESULT_YES

    def is_available(self, resource_id: str, date: str) -> str:
        """Report whether the whole subtree is free on ``date``."""
        return RESULT_YES if self.can_book(resource_id, date) else RESULT_NO

    def execute(self, query: Query) -> str:
        """Run a single query and return its result token.

        Raises:
            UnknownCommandError: If the command is not supported.
        """
        try:
            command = Command(query.command)
        except ValueError:
            raise UnknownCommandError(str(query.command), Command.names()) from None
        result = self._handlers[command](query.resource_id, query.date)
        logger.debug(
            "%s %s %s -> %s",
            command.value,
            query.resource_id,
            query.date,
            result,
        )
        return result

    def process(self, queries: Iterable[Query]) -> list[str]:
        """Run queries in order, returning one result per query."""
        return [self.execute(query) for query in queries]
