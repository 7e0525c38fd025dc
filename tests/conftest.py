"""Test setup for booker."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from booker.engine import BookingEngine  # noqa: E402
from booker.hierarchy import Hierarchy  # noqa: E402
from booker.schemas import ResourcesDocument  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the subprocess CLI tests selectively:
        pytest -m cli
        pytest -m "not cli"
    """
    config.addinivalue_line(
        "markers",
        "cli: marks tests that run the booker command in a subprocess",
    )


@pytest.fixture
def campus_document() -> dict:
    """Two buildings with every nesting level populated.

    B1
      V0
      S1: V2, SS1 (V1), SS2 (V3)
      S2: V4
    B2
      V5
    """
    return {
        "resources": {
            "buildings": [
                {
                    "id": "B1",
                    "vehicles": ["V0"],
                    "sections": [
                        {
                            "id": "S1",
                            "vehicles": ["V2"],
                            "sections": [
                                {"id": "SS1", "vehicles": ["V1"]},
                                {"id": "SS2", "vehicles": ["V3"]},
                            ],
                        },
                        {"id": "S2", "vehicles": ["V4"], "sections": []},
                    ],
                },
                {"id": "B2", "vehicles": ["V5"], "sections": []},
            ]
        }
    }


@pytest.fixture
def single_chain_document() -> dict:
    """B1 -> S1 -> SS1 -> V1 with no other resources."""
    return {
        "resources": {
            "buildings": [
                {
                    "id": "B1",
                    "vehicles": [],
                    "sections": [
                        {
                            "id": "S1",
                            "vehicles": [],
                            "sections": [{"id": "SS1", "vehicles": ["V1"]}],
                        }
                    ],
                }
            ]
        }
    }


@pytest.fixture
def campus(campus_document: dict) -> Hierarchy:
    return Hierarchy.from_document(ResourcesDocument.model_validate(campus_document))


@pytest.fixture
def engine(campus: Hierarchy) -> BookingEngine:
    """Engine over the campus hierarchy with an empty ledger."""
    return BookingEngine(campus)


@pytest.fixture
def resources_file(tmp_path: Path, campus_document: dict) -> Path:
    path = tmp_path / "resources.json"
    path.write_text(json.dumps(campus_document), encoding="utf-8")
    return path
