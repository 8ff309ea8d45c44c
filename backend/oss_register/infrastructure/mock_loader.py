"""Mock Loader — builds the mock registry from a JSON configuration file.

File shape:
    {"RepositoriesService": {"listRepositories": {"action": "resolve", "value": {...}}}}

Invariants:
    - No file configured → NullMockRegistry
    - Unreadable or malformed file → MockConfigError (fatal at startup)
    - Every entry must carry an "action" string; "value" defaults to None
"""

import json
import logging
from pathlib import Path

from oss_register.core.errors import MockConfigError
from oss_register.core.mock_registry import (
    InMemoryMockRegistry, MockRegistry, NullMockRegistry,
)

logger = logging.getLogger(__name__)


def load_mock_registry(path: str | Path | None) -> MockRegistry:
    """Load mock responses from `path`, or return an empty registry."""
    if not path:
        return NullMockRegistry()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise MockConfigError(f"Cannot read mock responses from {path}: {e}") from e
    registry = build_mock_registry(raw)
    logger.info(f"Loaded {len(registry)} mock response(s) from {path}")
    return registry


def build_mock_registry(raw: object) -> InMemoryMockRegistry:
    """Validate the decoded JSON document and fill a registry from it."""
    if not isinstance(raw, dict):
        raise MockConfigError("Mock responses must be an object keyed by service")
    registry = InMemoryMockRegistry()
    for service, operations in raw.items():
        if not isinstance(operations, dict):
            raise MockConfigError(
                f"Mock responses for {service} must be an object keyed by operation",
            )
        for operation, entry in operations.items():
            if not isinstance(entry, dict) or not isinstance(entry.get("action"), str):
                raise MockConfigError(
                    f"Mock response {service}.{operation} requires an 'action' string",
                )
            registry.configure(service, operation, entry["action"], entry.get("value"))
    return registry
