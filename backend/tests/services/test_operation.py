"""Operation Wrapper — tests for interception, echo and normalization.

Tests cover:
    - No mock → default logic result (echo by default)
    - Mock resolve → configured value, default logic never runs
    - Mock reject → RejectionError with normalized fields
    - Organic failures (sync and async core logic) → RejectionError
    - Registry failures are normalized too
"""

import pytest

from oss_register.core.errors import DEFAULT_ERROR_MESSAGE, RejectionError
from oss_register.core.mock_registry import InMemoryMockRegistry, NullMockRegistry
from oss_register.services.operation import echo, wrap


def test_echo_returns_params_unchanged():
    params = {"id": "abc"}
    assert echo(params) is params


async def test_default_handler_echoes_params():
    handler = wrap("S", "op")
    params = {"page": 2}
    assert await handler(NullMockRegistry(), params) == {"page": 2}


async def test_missing_params_become_empty_dict():
    handler = wrap("S", "op")
    assert await handler(NullMockRegistry()) == {}


async def test_mock_resolve_bypasses_core_logic():
    calls = []
    handler = wrap("S", "op", lambda params: calls.append(params))
    registry = InMemoryMockRegistry()
    registry.configure("S", "op", "resolve", {"canned": True})

    assert await handler(registry, {"x": 1}) == {"canned": True}
    assert calls == []


async def test_mock_reject_is_normalized():
    handler = wrap("S", "op")
    registry = InMemoryMockRegistry()
    registry.configure("S", "op", "reject", {"status": 404, "message": "Not found"})

    with pytest.raises(RejectionError) as exc_info:
        await handler(registry, {})
    assert exc_info.value.http_status == 404
    assert exc_info.value.to_response() == {
        "message": "Not found", "detail": "Not found",
    }


async def test_mock_reject_without_fields_uses_defaults():
    handler = wrap("S", "op")
    registry = InMemoryMockRegistry()
    registry.configure("S", "op", "reject", "just a string")

    with pytest.raises(RejectionError) as exc_info:
        await handler(registry, {})
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == DEFAULT_ERROR_MESSAGE


async def test_sync_core_logic_failure_is_normalized():
    def _fail(params):
        raise RuntimeError("db down")

    handler = wrap("S", "op", _fail)
    with pytest.raises(RejectionError) as exc_info:
        await handler(NullMockRegistry(), {})
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == DEFAULT_ERROR_MESSAGE
    assert isinstance(exc_info.value.__cause__, RuntimeError)


async def test_async_core_logic_result_is_awaited():
    async def _double(params):
        return {"n": params["n"] * 2}

    handler = wrap("S", "op", _double)
    assert await handler(NullMockRegistry(), {"n": 21}) == {"n": 42}


async def test_async_core_logic_rejection_keeps_status():
    async def _conflict(params):
        raise RejectionError("Already registered", http_status=409)

    handler = wrap("S", "op", _conflict)
    with pytest.raises(RejectionError) as exc_info:
        await handler(NullMockRegistry(), {})
    assert exc_info.value.http_status == 409
    assert exc_info.value.detail == "Already registered"


async def test_registry_failure_is_normalized():
    class _BrokenRegistry:
        async def lookup(self, service, operation, params):
            raise ConnectionError("registry unreachable")

    handler = wrap("S", "op")
    with pytest.raises(RejectionError) as exc_info:
        await handler(_BrokenRegistry(), {})
    assert exc_info.value.http_status == 400


async def test_mock_and_organic_rejections_are_indistinguishable():
    value = {"status": 403, "message": "Forbidden", "detail": "scope missing"}

    class _Organic(Exception):
        status = 403
        message = "Forbidden"
        detail = "scope missing"

    def _raise(params):
        raise _Organic()

    registry = InMemoryMockRegistry()
    registry.configure("S", "mocked", "reject", value)

    with pytest.raises(RejectionError) as mocked:
        await wrap("S", "mocked")(registry, {})
    with pytest.raises(RejectionError) as organic:
        await wrap("S", "organic", _raise)(registry, {})

    assert type(mocked.value) is type(organic.value)
    assert mocked.value.to_response() == organic.value.to_response()
    assert mocked.value.http_status == organic.value.http_status


def test_qualified_name():
    assert wrap("RepositoriesService", "listRepositories").qualified_name == (
        "RepositoriesService.listRepositories"
    )


@pytest.mark.parametrize("status", [float("inf"), float("nan")])
async def test_non_finite_mock_status_falls_back_to_400(status):
    registry = InMemoryMockRegistry()
    registry.configure("S", "op", "reject", {"status": status, "message": "x"})
    with pytest.raises(RejectionError) as exc_info:
        await wrap("S", "op")(registry, {})
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "x"


async def test_repeated_exception_rejections_do_not_grow_registry_value():
    error = ValueError("boom")
    registry = InMemoryMockRegistry()
    registry.configure("S", "op", "reject", error)
    handler = wrap("S", "op")

    for _ in range(5):
        with pytest.raises(RejectionError) as exc_info:
            await handler(registry, {})
        assert exc_info.value.http_status == 400

    assert error.__traceback__ is None
    assert error.__context__ is None
