"""Resource hierarchy document models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ResourceSpec(BaseModel):
    """Common settings for hierarchy document nodes."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    vehicles: list[str] = Field(default_factory=list)

    @field_validator("vehicles", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SubsectionSpec(_ResourceSpec):
    """A subsection and the vehicles it owns."""


class SectionSpec(_ResourceSpec):
    """A section with its own vehicles and nested subsections.

    In the JSON document the subsections are listed under ``"sections"``.
    """

    subsections: list[SubsectionSpec] = Field(default_factory=list, alias="sections")

    @field_validator("subsections", mode="before")
    @classmethod
    def _null_subsections(cls, value: Any) -> Any:
        return [] if value is None else value


class BuildingSpec(_ResourceSpec):
    """A building with its own vehicles and sections."""

    sections: list[SectionSpec] = Field(default_factory=list)

    @field_validator("sections", mode="before")
    @classmethod
    def _null_sections(cls, value: Any) -> Any:
        return [] if value is None else value


class ResourcesSection(BaseModel):
    """The ``resources`` object of a hierarchy document."""

    buildings: list[BuildingSpec] = Field(default_factory=list)

    @field_validator("buildings", mode="before")
    @classmethod
    def _null_buildings(cls, value: Any) -> Any:
        return [] if value is None else value


class ResourcesDocument(BaseModel):
    """Top-level resource hierarchy document.

    Attributes:
        resources: Container for the list of buildings. A document without a
            ``resources`` key describes an empty hierarchy.
    """

    resources: ResourcesSection = Field(default_factory=ResourcesSection)

    @field_validator("resources", mode="before")
    @classmethod
    def _null_resources(cls, value: Any) -> Any:
        return {} if value is None else value
