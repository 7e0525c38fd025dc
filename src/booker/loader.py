"""Load the resource hierarchy from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from booker.config import BOOKER_FILE_ENCODING, BOOKER_STRICT_IDS
from booker.exceptions import HierarchySourceError
from booker.hierarchy import Hierarchy
from booker.schemas import ResourcesDocument

logger = logging.getLogger(__name__)


def load_hierarchy(path: str | Path, *, strict: bool = BOOKER_STRICT_IDS) -> Hierarchy:
    """Read and index a resources JSON file.

    The expected layout is ``{"resources": {"buildings": [...]}}``; see
    ``booker.schemas.resources`` for the node models.

    Args:
        path: Path to the resources file.
        strict: Reject reused resource identifiers.

    Returns:
        The loaded hierarchy.

    Raises:
        HierarchySourceError: If the file cannot be read, is not valid JSON,
            does not match the document schema, or reuses an identifier.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=BOOKER_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise HierarchySourceError(f"Failed to read given resources file: '{path}': {exc}") from exc

    return parse_hierarchy(text, source=str(path), strict=strict)


def parse_hierarchy(text: str, *, source: str = "<string>", strict: bool = BOOKER_STRICT_IDS) -> Hierarchy:
    """Parse resources JSON text into a hierarchy."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HierarchySourceError(f"Resources file '{source}' is not valid JSON: {exc}") from exc

    try:
        document = ResourcesDocument.model_validate(raw)
    except ValidationError as exc:
        raise HierarchySourceError(
            f"Resources file '{source}' does not describe a resource hierarchy: {exc}"
        ) from exc

    logger.debug("Parsed resources document from %s", source)
    return Hierarchy.from_document(document, strict=strict)
