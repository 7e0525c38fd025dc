"""Tests for the hierarchy model."""

from __future__ import annotations

import logging

import pytest

from booker.engine import BookingEngine
from booker.exceptions import DuplicateResourceIdError
from booker.hierarchy import Hierarchy, ResourceKind
from booker.schemas import ResourcesDocument


def _build(document: dict, *, strict: bool = True) -> Hierarchy:
    return Hierarchy.from_document(ResourcesDocument.model_validate(document), strict=strict)


class TestLookup:
    """Tests for Hierarchy.lookup."""

    @pytest.mark.parametrize(
        ("resource_id", "kind"),
        [
            ("B1", ResourceKind.BUILDING),
            ("S2", ResourceKind.SECTION),
            ("SS2", ResourceKind.SUBSECTION),
            ("V1", ResourceKind.VEHICLE),
            ("V5", ResourceKind.VEHICLE),
        ],
    )
    def test_finds_every_level(self, campus: Hierarchy, resource_id: str, kind: ResourceKind) -> None:
        node = campus.lookup(resource_id)

        assert node is not None
        assert node.id == resource_id
        assert node.kind is kind

    def test_unknown_id_returns_none(self, campus: Hierarchy) -> None:
        assert campus.lookup("nope") is None
        assert "nope" not in campus

    def test_indexes_every_resource(self, campus: Hierarchy) -> None:
        """2 buildings, 2 sections, 2 subsections, 6 vehicles."""
        assert len(campus) == 12
        assert campus.buildings == ("B1", "B2")


class TestChildrenOf:
    """Tests for Hierarchy.children_of ordering."""

    def test_building_lists_vehicles_before_sections(self, campus: Hierarchy) -> None:
        assert campus.children_of("B1") == ("V0", "S1", "S2")

    def test_section_lists_vehicles_before_subsections(self, campus: Hierarchy) -> None:
        assert campus.children_of("S1") == ("V2", "SS1", "SS2")

    def test_subsection_lists_its_vehicles(self, campus: Hierarchy) -> None:
        assert campus.children_of("SS1") == ("V1",)

    def test_vehicle_has_no_children(self, campus: Hierarchy) -> None:
        assert campus.children_of("V1") == ()
        assert campus.lookup("V1").is_leaf

    def test_unknown_id_has_no_children(self, campus: Hierarchy) -> None:
        assert campus.children_of("ghost") == ()

    def test_empty_document(self) -> None:
        hierarchy = _build({})

        assert len(hierarchy) == 0
        assert hierarchy.buildings == ()


class TestDuplicateIds:
    """Tests for identifier uniqueness validation."""

    @pytest.fixture
    def duplicated_section(self) -> dict:
        return {
            "resources": {
                "buildings": [
                    {"id": "B1", "sections": [{"id": "S1", "vehicles": ["V1"]}]},
                    {"id": "B2", "sections": [{"id": "S1", "vehicles": ["V2"]}]},
                ]
            }
        }

    def test_vehicle_listed_twice_is_allowed(self) -> None:
        """A vehicle under a section and its subsection is one resource."""
        hierarchy = _build(
            {
                "resources": {
                    "buildings": [
                        {
                            "id": "B1",
                            "sections": [
                                {
                                    "id": "S1",
                                    "vehicles": ["V1"],
                                    "sections": [{"id": "SS1", "vehicles": ["V1"]}],
                                }
                            ],
                        }
                    ]
                }
            }
        )

        assert hierarchy.children_of("S1") == ("V1", "SS1")
        assert hierarchy.children_of("SS1") == ("V1",)
        assert hierarchy.lookup("V1").kind is ResourceKind.VEHICLE

    def test_strict_rejects_reused_container_id(self, duplicated_section: dict) -> None:
        with pytest.raises(DuplicateResourceIdError, match="'S1'"):
            _build(duplicated_section)

    def test_strict_rejects_container_reused_as_vehicle(self) -> None:
        document = {"resources": {"buildings": [{"id": "B1", "vehicles": ["B1"]}]}}

        with pytest.raises(DuplicateResourceIdError, match="building"):
            _build(document)

    def test_lenient_keeps_first_definition(
        self, duplicated_section: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="booker.hierarchy"):
            hierarchy = _build(duplicated_section, strict=False)

        assert hierarchy.children_of("S1") == ("V1",)
        assert "keeping the first definition" in caplog.text

    @pytest.mark.parametrize(
        "building",
        [
            {"id": "B1", "sections": [{"id": "B1"}]},
            {"id": "B1", "vehicles": ["B1"]},
            {"id": "B1", "sections": [{"id": "S1", "sections": [{"id": "S1", "vehicles": ["V1"]}]}]},
            {"id": "B1", "sections": [{"id": "S1", "sections": [{"id": "SS1", "vehicles": ["S1"]}]}]},
        ],
    )
    def test_lenient_drops_rejected_children(self, building: dict) -> None:
        """A rejected duplicate is not listed as a child, so the tree has no cycles."""
        hierarchy = _build({"resources": {"buildings": [building]}}, strict=False)

        def walk(resource_id: str, ancestors: tuple[str, ...]) -> None:
            assert resource_id not in ancestors
            for child in hierarchy.children_of(resource_id):
                walk(child, ancestors + (resource_id,))

        walk("B1", ())
        assert "B1" not in hierarchy.children_of("B1")

    def test_lenient_self_containing_building_is_bookable(self) -> None:
        document = {"resources": {"buildings": [{"id": "B1", "vehicles": ["V1"], "sections": [{"id": "B1"}]}]}}
        engine = BookingEngine(_build(document, strict=False))

        assert engine.is_available("B1", "d1") == "yes"
        assert engine.book("B1", "d1") == "ok"
        assert engine.is_booked("V1", "d1") == "yes"
        assert engine.ledger.booked_dates("B1") == ("d1",)
