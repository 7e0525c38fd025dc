"""booker: book buildings, sections, subsections and vehicles by date."""

from booker.engine import BookingEngine
from booker.exceptions import (
    BookerError,
    DuplicateResourceIdError,
    HierarchySourceError,
    MalformedQueryError,
    QuerySourceError,
    ResultDestinationError,
    UnknownCommandError,
)
from booker.hierarchy import Hierarchy, ResourceKind, ResourceNode
from booker.ledger import BookingLedger
from booker.loader import load_hierarchy, parse_hierarchy
from booker.queries import parse_queries, parse_query_line, read_queries
from booker.runner import run_booking_session
from booker.schemas import Command, Query, ResourcesDocument

__all__ = [
    "BookerError",
    "BookingEngine",
    "BookingLedger",
    "Command",
    "DuplicateResourceIdError",
    "Hierarchy",
    "HierarchySourceError",
    "MalformedQueryError",
    "Query",
    "QuerySourceError",
    "ResourceKind",
    "ResourceNode",
    "ResourcesDocument",
    "ResultDestinationError",
    "UnknownCommandError",
    "load_hierarchy",
    "parse_hierarchy",
    "parse_queries",
    "parse_query_line",
    "read_queries",
    "run_booking_session",
]
