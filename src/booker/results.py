"""Write query results."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from booker.config import BOOKER_FILE_ENCODING
from booker.exceptions import ResultDestinationError

STDOUT_DESTINATION = "-"


def format_results(results: Iterable[str]) -> str:
    """Render one result token per line, newline terminated."""
    return "".join(f"{result}\n" for result in results)


def write_results(results: Iterable[str], destination: str | Path) -> None:
    """Write results to ``destination``, or to stdout when it is ``"-"``.

    Raises:
        ResultDestinationError: If the destination cannot be written.
    """
    content = format_results(results)
    if str(destination) == STDOUT_DESTINATION:
        sys.stdout.write(content)
        return

    path = Path(destination)
    try:
        path.write_text(content, encoding=BOOKER_FILE_ENCODING)
    except OSError as exc:
        raise ResultDestinationError(f"Failed to write to output file '{path}': {exc}") from exc
