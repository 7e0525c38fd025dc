"""Read booking queries from a line-oriented text file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from booker.config import BOOKER_FILE_ENCODING
from booker.exceptions import MalformedQueryError, QuerySourceError, UnknownCommandError
from booker.schemas import Command, Query

_COMMENT_PREFIX = "#"
_FIELD_COUNT = 3


def parse_query_line(line: str, line_number: int | None = None) -> Query | None:
    """Parse one ``<command> <resource_id> <date>`` line.

    Blank lines and lines starting with ``#`` yield None. Tokens after the
    date are ignored.

    Raises:
        UnknownCommandError: If the command is not supported.
        MalformedQueryError: If the resource id or date is missing.
    """
    if not line.strip() or line.startswith(_COMMENT_PREFIX):
        return None

    tokens = line.split()
    try:
        command = Command(tokens[0])
    except ValueError:
        raise UnknownCommandError(tokens[0], Command.names()) from None

    if len(tokens) < _FIELD_COUNT:
        where = f" on line {line_number}" if line_number is not None else ""
        raise MalformedQueryError(
            f"Query{where} must have a command, resource id and date: '{line.strip()}'"
        )

    return Query(
        command=command,
        resource_id=tokens[1],
        date=tokens[2],
        line_number=line_number,
    )


def parse_queries(lines: Iterable[str]) -> list[Query]:
    """Parse every line, skipping blanks and comments."""
    queries: list[Query] = []
    for line_number, line in enumerate(lines, start=1):
        query = parse_query_line(line, line_number)
        if query is not None:
            queries.append(query)
    return queries


def read_queries(path: str | Path) -> list[Query]:
    """Read and parse the whole query file.

    Parsing completes before any query runs, so an unsupported command
    aborts a run without touching booking state.

    Raises:
        QuerySourceError: If the file cannot be read or a line is malformed.
        UnknownCommandError: If a line uses an unsupported command.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=BOOKER_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise QuerySourceError(f"Failed to read given queries file: '{path}': {exc}") from exc
    return parse_queries(text.splitlines())
