"""Shared schemas for booker."""

from booker.schemas.query import (
    RESULT_FAILED,
    RESULT_NO,
    RESULT_OK,
    RESULT_YES,
    Command,
    Query,
)
from booker.schemas.resources import (
    BuildingSpec,
    ResourcesDocument,
    ResourcesSection,
    SectionSpec,
    SubsectionSpec,
)

__all__ = [
    "RESULT_FAILED",
    "RESULT_NO",
    "RESULT_OK",
    "RESULT_YES",
    "BuildingSpec",
    "Command",
    "Query",
    "ResourcesDocument",
    "ResourcesSection",
    "SectionSpec",
    "SubsectionSpec",
]
