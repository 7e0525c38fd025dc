"""End-to-end booking session: load, query, write."""

from __future__ import annotations

import logging
from pathlib import Path

from booker.config import BOOKER_STRICT_IDS
from booker.engine import BookingEngine
from booker.loader import load_hierarchy
from booker.queries import read_queries
from booker.results import write_results

logger = logging.getLogger(__name__)


def run_booking_session(
    resources_path: str | Path,
    queries_path: str | Path,
    results_path: str | Path | None = None,
    *,
    strict: bool = BOOKER_STRICT_IDS,
) -> list[str]:
    """Load a hierarchy, answer every query against a fresh ledger, and write results.

    Args:
        resources_path: Resources JSON file.
        queries_path: Query text file.
        results_path: Where to write results, ``"-"`` for stdout. If None,
            results are only returned.
        strict: Reject reused resource identifiers when loading.

    Returns:
        One result token per query, in input order.

    Raises:
        BookerError: If any input cannot be read, a query is invalid, or the
            results cannot be written. Nothing is written in that case.
    """
    hierarchy = load_hierarchy(resources_path, strict=strict)
    queries = read_queries(queries_path)
    logger.debug("Processing %d queries from %s", len(queries), queries_path)

    engine = BookingEngine(hierarchy)
    results = engine.process(queries)

    if results_path is not None:
        write_results(results, results_path)
    return results
