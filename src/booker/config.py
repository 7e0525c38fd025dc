"""Local configuration for booker."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FILE_ENCODING = "utf-8"
DEFAULT_STRICT_IDS = "true"

BOOKER_LOG_LEVEL = os.getenv("BOOKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
BOOKER_FILE_ENCODING = os.getenv("BOOKER_FILE_ENCODING", DEFAULT_FILE_ENCODING)
# Reject resource hierarchies that reuse a container identifier.
BOOKER_STRICT_IDS = os.getenv("BOOKER_STRICT_IDS", DEFAULT_STRICT_IDS).lower() == "true"
