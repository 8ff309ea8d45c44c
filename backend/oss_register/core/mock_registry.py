"""Mock Interception — canned responses that replace default operation logic.

Invariants:
    - Registry keyed by "<service>.<operation>"; params never affect matching
    - action == "reject" → value raised as the call's error
    - any other action → value returned verbatim as the call's result
    - No entry → NO_MOCK sentinel, default logic runs
    - Handlers only read the registry; configure()/clear() belong to the harness

Design Decisions:
    - Protocol over ABC: the registry is injected into handlers, not a hidden global
    - Reject values are always carried by a fresh MockRejection: raising the stored
      value itself would chain tracebacks onto registry state on every call
    - MockRejection exposes status/message/detail, so mock and organic failures
      share one normalization path
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from oss_register.core.errors import read_field

logger = logging.getLogger(__name__)


# Any other action resolves with the configured value
REJECT_ACTION = "reject"


@dataclass(frozen=True)
class MockResult:
    """Configured outcome for one operation."""
    action: str
    value: Any = None

    @property
    def is_rejection(self) -> bool:
        return self.action == REJECT_ACTION


class _NoMock:
    """Sentinel type for 'registry has no entry'."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MOCK"

    def __bool__(self) -> bool:
        return False


NO_MOCK = _NoMock()


class MockRejection(Exception):
    """Carries a mock-configured rejection value; fields read from the value."""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    @property
    def status(self) -> Any:
        return read_field(self.value, "status")

    @property
    def message(self) -> Any:
        return read_field(self.value, "message")

    @property
    def detail(self) -> Any:
        return read_field(self.value, "detail")


class MockRegistry(Protocol):
    """Lookup contract consulted by every operation handler."""
    async def lookup(
        self, service: str, operation: str, params: Mapping[str, Any],
    ) -> MockResult | None: ...


def mock_key(service: str, operation: str) -> str:
    return f"{service}.{operation}"


class NullMockRegistry:
    """Registry with no entries — production default."""

    async def lookup(
        self, service: str, operation: str, params: Mapping[str, Any],
    ) -> MockResult | None:
        return None


class InMemoryMockRegistry:
    """Mutable registry configured by a test or ops harness."""

    def __init__(self):
        self._entries: dict[str, MockResult] = {}

    def configure(
        self, service: str, operation: str, action: str, value: Any = None,
    ) -> None:
        self._entries[mock_key(service, operation)] = MockResult(action, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    async def lookup(
        self, service: str, operation: str, params: Mapping[str, Any],
    ) -> MockResult | None:
        return self._entries.get(mock_key(service, operation))


async def apply_mock(
    registry: MockRegistry, service: str, operation: str,
    params: Mapping[str, Any],
) -> Any:
    """Consult the registry. Returns the override value or NO_MOCK; raises on reject."""
    result = await registry.lookup(service, operation, params)
    if result is None:
        return NO_MOCK
    if result.is_rejection:
        logger.debug(
            f"Mock rejection for {mock_key(service, operation)}",
            extra={"service": service, "operation": operation},
        )
        raise MockRejection(result.value)
    logger.debug(
        f"Mock response for {mock_key(service, operation)}",
        extra={"service": service, "operation": operation},
    )
    return result.value
