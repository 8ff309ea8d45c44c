"""Request Dependencies — per-request access to process-wide collaborators."""

from fastapi import Request

from oss_register.core.mock_registry import MockRegistry, NullMockRegistry

_null_registry = NullMockRegistry()


def get_mock_registry(request: Request) -> MockRegistry:
    """Mock registry installed on app.state at startup; empty if none."""
    registry = getattr(request.app.state, "mock_registry", None)
    if registry is None:
        return _null_registry
    return registry
