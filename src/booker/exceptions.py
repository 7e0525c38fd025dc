"""Custom exceptions for booker."""


class BookerError(Exception):
    """Base exception for booker operations."""


class HierarchySourceError(BookerError):
    """Resource hierarchy file could not be read or parsed."""


class DuplicateResourceIdError(HierarchySourceError):
    """The same resource identifier is defined more than once."""


class QuerySourceError(BookerError):
    """Query file could not be read."""


class MalformedQueryError(QuerySourceError):
    """A query line does not have the command, resource and date fields."""


class UnknownCommandError(BookerError):
    """A query uses a command that is not supported."""

    def __init__(self, command: str, supported: tuple[str, ...]) -> None:
        self.command = command
        self.supported = supported
        quoted = ", ".join(f"'{name}'" for name in supported)
        super().__init__(
            f"Command '{command}' is not supported. Supported commands: {quoted}"
        )


class ResultDestinationError(BookerError):
    """Results could not be written."""
