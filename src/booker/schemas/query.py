"""Query and result models for booking requests."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel

RESULT_OK: Final[str] = "ok"
RESULT_FAILED: Final[str] = "failed"
RESULT_YES: Final[str] = "yes"
RESULT_NO: Final[str] = "no"


class Command(str, Enum):
    """Supported query commands."""

    BOOK = "book"
    IS_BOOKED = "is_booked"
    IS_ALL_BOOKED = "is_all_booked"
    IS_AVAILABLE = "is_available"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(command.value for command in cls)


class Query(BaseModel):
    """A single parsed query line.

    Attributes:
        command: The requested operation.
        resource_id: Identifier of the building, section, subsection or vehicle.
        date: Opaque date token; compared for equality only.
        line_number: 1-based line in the source file, when read from a file.
    """

    command: Command
    resource_id: str
    date: str
    line_number: int | None = None
