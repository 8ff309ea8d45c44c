"""Operation Wrapper — the single shape shared by every register operation.

Invariants:
    - Mock interception runs before any default logic
    - A mock value short-circuits default logic (returned or raised)
    - Without a mock, core_logic(params) produces the result (default: echo)
    - Every exception leaving a handler is a RejectionError with a resolved status
    - Mock rejections and organic failures share one normalization path

Design Decisions:
    - Higher-order wrap() over per-operation try/except copies: one place owns
      interception + normalization, operations cannot drift apart
    - Registry passed per call (injected by the API layer), no module-level global
"""

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from oss_register.core.errors import normalize_error
from oss_register.core.mock_registry import NO_MOCK, MockRegistry, apply_mock

logger = logging.getLogger(__name__)

CoreLogic = Callable[[Mapping[str, Any]], Any]


def echo(params: Mapping[str, Any]) -> Any:
    """Default success envelope: the parameter object itself."""
    return params


@dataclass(frozen=True)
class Operation:
    """A named, mock-aware, error-normalizing handler."""
    service: str
    name: str
    core_logic: CoreLogic = field(default=echo)

    @property
    def qualified_name(self) -> str:
        return f"{self.service}.{self.name}"

    async def __call__(
        self, registry: MockRegistry, params: Mapping[str, Any] | None = None,
    ) -> Any:
        params = {} if params is None else params
        try:
            mocked = await apply_mock(registry, self.service, self.name, params)
            if mocked is not NO_MOCK:
                return mocked
            result = self.core_logic(params)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            rejection = normalize_error(e)
            logger.warning(
                f"{self.qualified_name} rejected: {rejection.message}",
                extra={
                    "service": self.service,
                    "operation": self.name,
                    "http_status": rejection.http_status,
                },
            )
            raise rejection from e


def wrap(service: str, name: str, core_logic: CoreLogic = echo) -> Operation:
    """Build the handler for one operation of a service."""
    return Operation(service=service, name=name, core_logic=core_logic)
