"""Static resource hierarchy: buildings, sections, subsections and vehicles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from booker.exceptions import DuplicateResourceIdError
from booker.schemas import BuildingSpec, ResourcesDocument, SectionSpec, SubsectionSpec

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    """Level of a resource in the hierarchy."""

    BUILDING = "building"
    SECTION = "section"
    SUBSECTION = "subsection"
    VEHICLE = "vehicle"


@dataclass(frozen=True)
class ResourceNode:
    """A single resource in the hierarchy.

    Attributes:
        id: Resource identifier, unique across all levels.
        kind: Level of the resource.
        children: Identifiers of directly contained resources. Directly owned
            vehicles come first, followed by nested containers, both in
            document order.
    """

    id: str
    kind: ResourceKind
    children: tuple[str, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


class Hierarchy:
    """Read-only index of every resource, keyed by identifier."""

    def __init__(self, nodes: dict[str, ResourceNode], buildings: tuple[str, ...]) -> None:
        self._nodes = dict(nodes)
        self._buildings = buildings

    @classmethod
    def from_document(cls, document: ResourcesDocument, *, strict: bool = True) -> Hierarchy:
        """Build the hierarchy index from a parsed resources document.

        Args:
            document: Parsed resources document.
            strict: If True, reject identifiers reused by more than one
                container, or shared between a container and a vehicle. If
                False, the first definition in document order wins.

        Returns:
            The populated hierarchy.

        Raises:
            DuplicateResourceIdError: If ``strict`` and an identifier is reused.
        """
        builder = _IndexBuilder(strict=strict)
        for building in document.resources.buildings:
            builder.add_building(building)
        hierarchy = cls(builder.nodes, tuple(builder.buildings))
        logger.debug(
            "Loaded %d buildings, %d resources in total",
            len(hierarchy.buildings),
            len(hierarchy),
        )
        return hierarchy

    @property
    def buildings(self) -> tuple[str, ...]:
        return self._buildings

    def lookup(self, resource_id: str) -> ResourceNode | None:
        """Return the node for ``resource_id``, or None if it is unknown."""
        return self._nodes.get(resource_id)

    def children_of(self, resource_id: str) -> tuple[str, ...]:
        """Return direct children in traversal order; empty for leaves and unknown ids."""
        node = self._nodes.get(resource_id)
        if node is None:
            return ()
        return node.children

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ResourceNode]:
        return iter(self._nodes.values())


class _IndexBuilder:
    """Registers nodes in document order.

    A parent lists only the children whose definition was accepted, so a
    rejected duplicate never links back into the tree.
    """

    def __init__(self, *, strict: bool) -> None:
        self.strict = strict
        self.nodes: dict[str, ResourceNode] = {}
        self.buildings: list[str] = []

    def add_building(self, spec: BuildingSpec) -> None:
        registered = self._register(ResourceNode(spec.id, ResourceKind.BUILDING))
        children = self._add_vehicles(spec.vehicles)
        children += tuple(section.id for section in spec.sections if self._add_section(section))
        if registered:
            self.nodes[spec.id] = ResourceNode(spec.id, ResourceKind.BUILDING, children)
            self.buildings.append(spec.id)

    def _add_section(self, spec: SectionSpec) -> bool:
        registered = self._register(ResourceNode(spec.id, ResourceKind.SECTION))
        children = self._add_vehicles(spec.vehicles)
        children += tuple(sub.id for sub in spec.subsections if self._add_subsection(sub))
        if registered:
            self.nodes[spec.id] = ResourceNode(spec.id, ResourceKind.SECTION, children)
        return registered

    def _add_subsection(self, spec: SubsectionSpec) -> bool:
        registered = self._register(ResourceNode(spec.id, ResourceKind.SUBSECTION))
        children = self._add_vehicles(spec.vehicles)
        if registered:
            self.nodes[spec.id] = ResourceNode(spec.id, ResourceKind.SUBSECTION, children)
        return registered

    def _add_vehicles(self, vehicle_ids: list[str]) -> tuple[str, ...]:
        accepted: list[str] = []
        for vehicle_id in vehicle_ids:
            existing = self.nodes.get(vehicle_id)
            # A vehicle may be listed under several containers.
            if existing is not None and existing.kind is ResourceKind.VEHICLE:
                accepted.append(vehicle_id)
            elif self._register(ResourceNode(vehicle_id, ResourceKind.VEHICLE)):
                accepted.append(vehicle_id)
        return tuple(accepted)

    def _register(self, node: ResourceNode) -> bool:
        existing = self.nodes.get(node.id)
        if existing is None:
            self.nodes[node.id] = node
            return True

        message = (
            f"Resource id '{node.id}' is defined as a {existing.kind.value} "
            f"and again as a {node.kind.value}"
        )
        if self.strict:
            raise DuplicateResourceIdError(message)
        logger.warning("%s; keeping the first definition", message)
        return False
